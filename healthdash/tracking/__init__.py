# -*- coding: utf-8 -*-
"""
Session entry store.

Holds food, water, workout, sleep and weight logs for the current session.
"""

from .models import FoodEntry, Goals, SleepEntry, WaterEntry, WeightEntry, WorkoutEntry
from .store import EntryStore

__all__ = [
    'EntryStore',
    'FoodEntry',
    'Goals',
    'SleepEntry',
    'WaterEntry',
    'WeightEntry',
    'WorkoutEntry',
]
