# -*- coding: utf-8 -*-
"""Daily aggregation over tracked entries."""

from .aggregate import (
    calories_burned,
    daily_totals,
    goal_progress,
    latest_weight,
    sleep_for_date,
    summarize_day,
    total_water,
)
from .models import DailyTotals, DaySummary, GoalProgress

__all__ = [
    'DailyTotals',
    'DaySummary',
    'GoalProgress',
    'calories_burned',
    'daily_totals',
    'goal_progress',
    'latest_weight',
    'sleep_for_date',
    'summarize_day',
    'total_water',
]
