"""Conversión de perfiles y pesajes a DataFrames de pandas."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import date

import pandas as pd

from wiifit_tool.model import Profile

RECORD_COLUMNS = ["name", "datetime", "date", "weight_kg", "bmi", "balance_pct"]
PROFILE_COLUMNS = [
    "name",
    "height_cm",
    "birth_date",
    "records_count",
    "first_weigh_in",
    "last_weigh_in",
    "latest_weight_kg",
]


def records_to_frame(profiles: Sequence[Profile]) -> pd.DataFrame:
    """One row per weigh-in, ordered by profile then storage order."""
    rows = [
        {
            "name": p.name,
            "datetime": r.timestamp,
            "date": r.timestamp.date(),
            "weight_kg": float(r.weight),
            "bmi": float(r.bmi),
            "balance_pct": float(r.balance),
        }
        for p in profiles
        for r in p.records
    ]
    if not rows:
        return pd.DataFrame(columns=RECORD_COLUMNS)
    return pd.DataFrame(rows, columns=RECORD_COLUMNS)


def profiles_to_frame(profiles: Sequence[Profile]) -> pd.DataFrame:
    """One summary row per profile."""
    rows: list[dict[str, object]] = []
    for p in profiles:
        timestamps = [r.timestamp for r in p.records]
        rows.append(
            {
                "name": p.name,
                "height_cm": p.height,
                "birth_date": p.birth_date,
                "records_count": len(p.records),
                "first_weigh_in": min(timestamps) if timestamps else None,
                "last_weigh_in": max(timestamps) if timestamps else None,
                "latest_weight_kg": float(p.records[-1].weight) if p.records else None,
            }
        )
    if not rows:
        return pd.DataFrame(columns=PROFILE_COLUMNS)
    return pd.DataFrame(rows, columns=PROFILE_COLUMNS)


def filter_since(records: pd.DataFrame, since: date | None) -> pd.DataFrame:
    """Keep weigh-ins on or after ``since`` (all of them when None)."""
    if since is None or records.empty:
        return records.copy()
    mask = pd.to_datetime(records["date"]).dt.date >= since
    return records.loc[mask].reset_index(drop=True)
