"""Errores de lectura del archivo de guardado de Wii Fit."""

from __future__ import annotations


class StreamError(Exception):
    """Base class for save-file decoding failures."""


class EndOfStream(StreamError, EOFError):
    """The source ran out of bytes before the read completed."""


class ReadFailure(StreamError, OSError):
    """The underlying source failed while reading."""


class InvalidSource(StreamError, FileNotFoundError):
    """The save file could not be opened."""


class InvalidLength(StreamError, ValueError):
    """A negative byte count was requested."""


class InvalidDate(StreamError, ValueError):
    """A packed date does not describe a plausible calendar date."""


class InvalidString(StreamError, ValueError):
    """A fixed-width text field is not valid UTF-8 or is empty."""
