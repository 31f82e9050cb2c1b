"""Extracción de perfiles y pesajes por bloques de tamaño fijo."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path

from wiifit_tool.byte_reader import ByteReader, open_save_file
from wiifit_tool.errors import InvalidDate, StreamError
from wiifit_tool.model import Profile, Record

logger = logging.getLogger(__name__)

SLOT_SIZE = 37505
HEADER_SIGNATURE_SIZE = 8
NAME_SIZE = 22
HEADER_RESERVED_SIZE = 14461
RECORD_TRAILER_SIZE = 11
RECORD_SIZE = 4 + 2 + 2 + 2 + RECORD_TRAILER_SIZE


@dataclass(frozen=True)
class RecordRead:
    """A record was decoded."""

    record: Record


@dataclass(frozen=True)
class EndOfSlot:
    """The slot holds no more records."""


@dataclass(frozen=True)
class SlotFailure:
    """Decoding failed; the slot's profile must be discarded."""

    error: StreamError


RecordOutcome = RecordRead | EndOfSlot | SlotFailure


@contextmanager
def slot_scope(reader: ByteReader, size: int = SLOT_SIZE) -> Iterator[None]:
    """Run a block of slot decoding, then skip to the next slot boundary.

    The realignment runs on every exit path. If the source ends or fails
    before the boundary, the :class:`StreamError` is raised from the exit.
    """
    reader.reset_slot_counter()
    try:
        yield
    finally:
        reader.skip(size - reader.slot_bytes_read)
        reader.reset_slot_counter()


def read_record(reader: ByteReader) -> RecordOutcome:
    """Decode one record, telling apart the end marker from real failures."""
    try:
        timestamp = reader.read_packed_datetime()
    except InvalidDate:
        return EndOfSlot()
    except StreamError as exc:
        return SlotFailure(exc)
    try:
        weight = reader.read_uint16()
        bmi = reader.read_uint16()
        balance = reader.read_uint16()
        reader.skip(RECORD_TRAILER_SIZE)
    except StreamError as exc:
        return SlotFailure(exc)
    return RecordRead(
        Record(
            timestamp=timestamp,
            weight_tenths=weight,
            bmi_hundredths=bmi,
            balance_tenths=balance,
        )
    )


def read_header(reader: ByteReader) -> Profile:
    """Decode the profile header at the start of a slot.

    Raises:
        StreamError: If any header field cannot be decoded.
    """
    # Signature ("RPHE0000"), not validated.
    reader.skip(HEADER_SIGNATURE_SIZE)
    name = reader.read_fixed_string(NAME_SIZE)
    reader.skip()
    height = reader.read_int8()
    year, month, day = reader.read_packed_ymd()
    reader.skip(HEADER_RESERVED_SIZE)
    return Profile(name=name, height=height, year=year, month=month, day=day)


class ProfileExtractor:
    """Walk a save file slot by slot and collect the non-empty profiles."""

    def __init__(self, reader: ByteReader) -> None:
        self._reader = reader

    def extract(self) -> list[Profile]:
        """Extract every valid profile in storage order.

        Decoding problems only drop the affected slot. A stream failure while
        realigning (end of source or an I/O fault) stops extraction and
        returns what was found.
        """
        profiles: list[Profile] = []
        slot_index = 0
        while self._has_more(slot_index):
            profile: Profile | None = None
            stopped = False
            try:
                with slot_scope(self._reader):
                    profile = self._read_slot(slot_index)
            except StreamError as exc:
                logger.debug("Stopped inside slot %d (%s)", slot_index, exc)
                stopped = True
            if profile is not None:
                profiles.append(profile)
            if stopped:
                break
            slot_index += 1
        logger.info("Extracted %d profile(s)", len(profiles))
        return profiles

    def _has_more(self, slot_index: int) -> bool:
        try:
            return self._reader.has_bytes_available()
        except StreamError as exc:
            logger.debug("Stopped before slot %d (%s)", slot_index, exc)
            return False

    def _read_slot(self, slot_index: int) -> Profile | None:
        try:
            profile = read_header(self._reader)
        except StreamError as exc:
            logger.debug("Slot %d: bad header (%s)", slot_index, exc)
            return None

        # Only start a record that fits before the slot boundary.
        while self._reader.slot_bytes_read + RECORD_SIZE <= SLOT_SIZE:
            outcome = read_record(self._reader)
            if isinstance(outcome, EndOfSlot):
                break
            if isinstance(outcome, SlotFailure):
                logger.debug("Slot %d: bad record (%s)", slot_index, outcome.error)
                return None
            profile.records.append(outcome.record)

        if profile.is_empty:
            logger.debug("Slot %d: empty profile", slot_index)
            return None
        return profile


def extract_profiles(path: Path) -> list[Profile]:
    """Open ``path`` and extract its profiles.

    Raises:
        InvalidSource: If the file cannot be opened.
    """
    with open_save_file(path) as reader:
        return ProfileExtractor(reader).extract()
