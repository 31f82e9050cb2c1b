"""Modelos tipados para perfiles y pesajes de Wii Fit."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal


@dataclass(frozen=True)
class Record:
    """One body test (weigh-in), values kept as raw fixed-point integers."""

    timestamp: datetime
    weight_tenths: int
    bmi_hundredths: int
    balance_tenths: int

    @property
    def weight(self) -> Decimal:
        """Weight in kg (one decimal)."""
        return Decimal(self.weight_tenths).scaleb(-1)

    @property
    def bmi(self) -> Decimal:
        """Body mass index (two decimals)."""
        return Decimal(self.bmi_hundredths).scaleb(-2)

    @property
    def balance(self) -> Decimal:
        """Left/right balance percentage (one decimal)."""
        return Decimal(self.balance_tenths).scaleb(-1)


@dataclass
class Profile:
    """A Mii profile with its body test history."""

    name: str
    height: int
    year: int
    month: int
    day: int
    records: list[Record] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        """True for unused slots (no name or an unset birth date)."""
        return not self.name or self.year == 0 or self.month == 0 or self.day == 0

    @property
    def birth_date(self) -> date | None:
        """Birth date, or None when the raw fields are not a calendar date."""
        try:
            return date(self.year, self.month, self.day)
        except ValueError:
            return None
