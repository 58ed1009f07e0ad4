# -*- coding: utf-8 -*-
"""Trend series derived from entry collections."""

from __future__ import annotations

from datetime import date as date_type
from datetime import datetime, timedelta
from typing import Dict, Iterable, List, Sequence

from ..tracking.models import WeightEntry, WorkoutEntry
from .models import WeightPoint, WorkoutPoint


def _as_date(value: str | date_type) -> date_type:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date_type):
        return value
    return date_type.fromisoformat(str(value)[:10])


def _window(today: str | date_type, days: int) -> List[str]:
    end = _as_date(today)
    return [(end - timedelta(days=offset)).isoformat() for offset in range(days - 1, -1, -1)]


def workout_series(
    workout_entries: Iterable[WorkoutEntry],
    today: str | date_type,
    days: int = 7,
) -> List[WorkoutPoint]:
    """Dense daily series ending at ``today``, oldest first.

    Always ``days`` points long; days without workouts are zero.
    """
    window = _window(today, days)
    counts: Dict[str, int] = {d: 0 for d in window}
    burned: Dict[str, float] = {d: 0.0 for d in window}
    for entry in workout_entries:
        if entry.date not in counts:
            continue
        counts[entry.date] += 1
        burned[entry.date] += entry.calories_burned
    return [WorkoutPoint(date=d, workout_count=counts[d], calories_burned=burned[d]) for d in window]


def weight_series(
    weight_entries: Sequence[WeightEntry],
    target_weight: float,
    limit: int = 30,
) -> List[WeightPoint]:
    # Stored order, last ``limit`` appended; no re-sort by date.
    if limit <= 0:
        return []
    return [
        WeightPoint(date=entry.date, weight=entry.weight, target=target_weight)
        for entry in list(weight_entries)[-limit:]
    ]
