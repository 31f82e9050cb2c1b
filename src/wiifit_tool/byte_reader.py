"""Lectura secuencial de primitivas big-endian del archivo de guardado."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from types import TracebackType
from typing import BinaryIO

from wiifit_tool.errors import (
    EndOfStream,
    InvalidDate,
    InvalidLength,
    InvalidSource,
    InvalidString,
    ReadFailure,
)

MIN_RECORD_YEAR = 1900


class ByteReader:
    """Forward-only decoder over a binary stream.

    Keeps two counters: ``total_bytes_read`` since the reader was created and
    ``slot_bytes_read`` since the last :meth:`reset_slot_counter` call. Both
    only advance on successful reads.
    """

    def __init__(self, stream: BinaryIO) -> None:
        """Wrap an open binary stream.

        Args:
            stream: Object with a ``read(n)`` method returning bytes.
        """
        self._stream = stream
        self._lookahead = b""
        self.total_bytes_read = 0
        self.slot_bytes_read = 0

    def __enter__(self) -> ByteReader:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        """Close the wrapped stream."""
        self._stream.close()

    def reset_slot_counter(self) -> None:
        """Start counting bytes for a new slot."""
        self.slot_bytes_read = 0

    def has_bytes_available(self) -> bool:
        """Return True if at least one more byte can be read."""
        if not self._lookahead:
            self._lookahead = self._raw_read(1)
        return bool(self._lookahead)

    def _raw_read(self, length: int) -> bytes:
        try:
            return self._stream.read(length)
        except OSError as exc:
            raise ReadFailure(str(exc)) from exc

    def _advance(self, count: int) -> None:
        self.total_bytes_read += count
        self.slot_bytes_read += count

    def read_bytes(self, length: int) -> bytes:
        """Read exactly ``length`` bytes.

        Raises:
            InvalidLength: If ``length`` is negative.
            EndOfStream: If fewer than ``length`` bytes remain.
            ReadFailure: If the stream raises an I/O error.
        """
        if length < 0:
            raise InvalidLength(f"Cannot read {length} bytes")
        head, self._lookahead = self._lookahead[:length], self._lookahead[length:]
        data = head
        if len(data) < length:
            data += self._raw_read(length - len(data))
        if len(data) < length:
            raise EndOfStream(f"Wanted {length} bytes, got {len(data)}")
        self._advance(length)
        return data

    def read_byte(self) -> int:
        """Read a single byte as an int in 0-255."""
        return self.read_bytes(1)[0]

    def skip(self, length: int = 1) -> None:
        """Discard ``length`` bytes."""
        self.read_bytes(length)

    def read_int8(self) -> int:
        """Read one byte as a non-negative magnitude."""
        return self.read_byte()

    def read_uint16(self) -> int:
        return int.from_bytes(self.read_bytes(2), "big")

    def read_uint32(self) -> int:
        return int.from_bytes(self.read_bytes(4), "big")

    def read_uint64(self) -> int:
        return int.from_bytes(self.read_bytes(8), "big")

    def read_int16(self) -> int:
        """Two's-complement big-endian 16-bit integer."""
        return int.from_bytes(self.read_bytes(2), "big", signed=True)

    def read_int32(self) -> int:
        """Two's-complement big-endian 32-bit integer."""
        return int.from_bytes(self.read_bytes(4), "big", signed=True)

    def read_fixed_string(self, length: int) -> str:
        """Decode a NUL-padded UTF-8 field of ``length`` bytes.

        Raises:
            InvalidString: If the bytes are not UTF-8 or hold no text.
        """
        raw = self.read_bytes(length)
        try:
            text = raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise InvalidString(f"Invalid UTF-8 in {raw!r}") from exc
        text = text.rstrip("\x00")
        if not text:
            raise InvalidString("Empty string field")
        return text

    def read_packed_datetime(self) -> datetime:
        """Decode a 32-bit bitfield date (year, month, day, hour, minute).

        Layout, most significant bit first: 1 unused bit, 11 bits year,
        4 bits zero-based month, 5 bits day, 5 bits hour, 6 bits minute.

        Raises:
            InvalidDate: If the year is before 1900 or the fields do not form
                a real date. Extraction uses this as the end-of-records marker.
        """
        bits = self.read_uint32()
        year = bits >> 20 & 0x7FF
        month = (bits >> 16 & 0xF) + 1
        day = bits >> 11 & 0x1F
        hour = bits >> 6 & 0x1F
        minute = bits & 0x3F
        if year < MIN_RECORD_YEAR:
            raise InvalidDate(f"Year {year} is before {MIN_RECORD_YEAR}")
        try:
            return datetime(year, month, day, hour, minute)
        except ValueError as exc:
            raise InvalidDate(str(exc)) from exc

    def read_packed_ymd(self) -> tuple[int, int, int]:
        """Decode a nibble-weighted year followed by raw month and day bytes.

        Each nibble of the 16-bit year is a decimal digit weight, so
        ``0x2015`` is the year 2015. No validation happens here.
        """
        bits = self.read_uint16()
        thousands = bits >> 12 & 0xF
        hundreds = bits >> 8 & 0xF
        tens = bits >> 4 & 0xF
        ones = bits & 0xF
        year = thousands * 1000 + hundreds * 100 + tens * 10 + ones
        month = self.read_int8()
        day = self.read_int8()
        return year, month, day


def open_save_file(path: Path) -> ByteReader:
    """Open a save file for reading.

    Raises:
        InvalidSource: If the file cannot be opened.
    """
    try:
        stream = path.open("rb")
    except OSError as exc:
        raise InvalidSource(str(path)) from exc
    return ByteReader(stream)
