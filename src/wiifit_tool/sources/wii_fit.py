"""Lectura del archivo de guardado de Wii Fit (FitPlus0.dat)."""

from __future__ import annotations

from dataclasses import dataclass

from wiifit_tool.extract import extract_profiles
from wiifit_tool.model import Profile
from wiifit_tool.sources.base import DataSource, SourcePaths


@dataclass(frozen=True)
class WiiFitPaths(SourcePaths):
    """Path of a Wii Fit save file."""

    # root: the save file itself (e.g. .../FitPlus0.dat)


class WiiFitSource(DataSource):
    """Wii Fit save file source."""

    def validate(self) -> None:
        """Validate that the save file exists and is a regular file."""
        if not self._paths.root.is_file():
            raise FileNotFoundError(str(self._paths.root))

    def load_profiles(self) -> list[Profile]:
        """Extract profiles from the save file.

        Raises:
            InvalidSource: If the file cannot be opened.
        """
        return extract_profiles(self._paths.root)
