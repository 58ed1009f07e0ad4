# -*- coding: utf-8 -*-
"""Daily aggregation - pure functions over entry collections.

Every function is total: no matches give zeros, never an error. Sums are
left unrounded so they scale linearly with quantities.
"""

from __future__ import annotations

from typing import Iterable, Optional, Sequence

from ..catalog.search import entries_for_date
from ..tracking.models import FoodEntry, Goals, SleepEntry, WaterEntry, WeightEntry, WorkoutEntry
from ..tracking.store import EntryStore
from .models import DailyTotals, DaySummary, GoalProgress


def daily_totals(food_entries: Iterable[FoodEntry], date: str) -> DailyTotals:
    calories = 0.0
    protein = 0.0
    carbs = 0.0
    fat = 0.0
    for entry in food_entries:
        if entry.date != date:
            continue
        calories += entry.food.calories * entry.quantity
        protein += entry.food.protein_g * entry.quantity
        carbs += entry.food.carbs_g * entry.quantity
        fat += entry.food.fat_g * entry.quantity
    return DailyTotals(calories=calories, protein=protein, carbs=carbs, fat=fat)


def total_water(water_entries: Iterable[WaterEntry], date: str) -> float:
    return float(sum(e.amount for e in water_entries if e.date == date))


def sleep_for_date(sleep_entries: Iterable[SleepEntry], date: str) -> float:
    for entry in sleep_entries:
        if entry.date == date:
            return float(entry.hours or 0.0)
    return 0.0


def latest_weight(weight_entries: Sequence[WeightEntry]) -> Optional[WeightEntry]:
    # Last appended, not the newest calendar date.
    if not weight_entries:
        return None
    return weight_entries[-1]


def calories_burned(workout_entries: Iterable[WorkoutEntry], date: str) -> float:
    return float(sum(e.calories_burned for e in workout_entries if e.date == date))


def _snapshot(entry: Optional[WeightEntry]) -> Optional[WeightEntry]:
    return entry.model_copy() if entry is not None else None


def goal_progress(value: float, goal: float) -> float:
    """Percentage of ``goal`` reached, clamped to [0, 100]."""
    if goal <= 0:
        return 0.0
    return max(0.0, min(value / goal * 100.0, 100.0))


def summarize_day(store: EntryStore, date: Optional[str] = None, goals: Optional[Goals] = None) -> DaySummary:
    day = date or store.selected_date
    goals = goals or Goals()

    totals = daily_totals(store.food_entries, day)
    water = total_water(store.water_entries, day)
    sleep_hours = sleep_for_date(store.sleep_entries, day)
    burned = calories_burned(store.workout_entries, day)

    return DaySummary(
        date=day,
        totals=totals,
        water=water,
        sleep_hours=sleep_hours,
        calories_burned=burned,
        net_calories=totals.calories - burned,
        food_entry_count=len(entries_for_date(store.food_entries, day)),
        workout_count=len(entries_for_date(store.workout_entries, day)),
        latest_weight=_snapshot(latest_weight(store.weight_entries)),
        progress=GoalProgress(
            calories=goal_progress(totals.calories, goals.calories),
            protein=goal_progress(totals.protein, goals.protein),
            carbs=goal_progress(totals.carbs, goals.carbs),
            fat=goal_progress(totals.fat, goals.fat),
            water=goal_progress(water, goals.water),
            sleep=goal_progress(sleep_hours, goals.sleep),
        ),
    )
