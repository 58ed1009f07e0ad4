# -*- coding: utf-8 -*-
"""Fixed-window series for trend charts."""

from .models import WeightPoint, WorkoutPoint
from .series import weight_series, workout_series

__all__ = [
    'WeightPoint',
    'WorkoutPoint',
    'weight_series',
    'workout_series',
]
