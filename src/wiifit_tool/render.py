"""Formato de texto para perfiles y pesajes."""

from __future__ import annotations

from wiifit_tool.model import Profile, Record

_RECORDS_HEADER = "Body Test Records:\n\t  Date & Time          Weight  BMI   Balance"


def format_record(record: Record) -> str:
    """Render one weigh-in as ``YYYY-MM-DD HH:MM:00, Wkg, BMI, B%``."""
    ts = record.timestamp
    return (
        f"{ts.year:02d}-{ts.month:02d}-{ts.day:02d} {ts.hour:02d}:{ts.minute:02d}:00, "
        f"{record.weight:.2f}kg, {record.bmi:.2f}, {record.balance:.2f}%"
    )


def format_profile(profile: Profile) -> str:
    """Render a profile header followed by its records table."""
    lines = [
        f"Mii: {profile.name}",
        f"Height: {profile.height}cm",
        f"DOB: {profile.year:02d}-{profile.month:02d}-{profile.day:02d}",
        _RECORDS_HEADER,
    ]
    lines.extend(f"\t- {format_record(r)}" for r in profile.records)
    return "\n".join(lines)
