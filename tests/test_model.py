from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal

import pytest

from wiifit_tool.model import Profile, Record


def test_record_fixed_point_values() -> None:
    r = Record(
        timestamp=datetime(2015, 6, 15, 9, 30),
        weight_tenths=1523,
        bmi_hundredths=2145,
        balance_tenths=498,
    )
    assert r.weight == Decimal("152.3")
    assert r.bmi == Decimal("21.45")
    assert r.balance == Decimal("49.8")
    assert str(r.bmi) == "21.45"


@pytest.mark.parametrize(
    ("name", "ymd", "empty"),
    [
        ("Ana", (1985, 3, 7), False),
        ("", (1985, 3, 7), True),
        ("Ana", (0, 3, 7), True),
        ("Ana", (1985, 0, 7), True),
        ("Ana", (1985, 3, 0), True),
    ],
)
def test_profile_is_empty(name: str, ymd: tuple[int, int, int], empty: bool) -> None:
    profile = Profile(name=name, height=170, year=ymd[0], month=ymd[1], day=ymd[2])
    assert profile.is_empty is empty


def test_profile_birth_date() -> None:
    assert Profile("Ana", 170, 1985, 3, 7).birth_date == date(1985, 3, 7)
    assert Profile("Ana", 170, 1985, 14, 7).birth_date is None


def test_profiles_do_not_share_records() -> None:
    a = Profile("A", 1, 2000, 1, 1)
    b = Profile("B", 1, 2000, 1, 1)
    a.records.append(Record(datetime(2015, 1, 1), 700, 2200, 500))
    assert b.records == []
