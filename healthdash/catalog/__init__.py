# -*- coding: utf-8 -*-
"""
Reference catalogs (foods, exercises).

Catalogs are fetched once per session and searched by name.
"""

from .loader import load_catalog, load_exercise_catalog, load_food_catalog, parse_exercise_row, parse_food_row
from .models import ExerciseCatalogItem, FoodCatalogItem
from .search import entries_for_date, search

__all__ = [
    'ExerciseCatalogItem',
    'FoodCatalogItem',
    'entries_for_date',
    'load_catalog',
    'load_exercise_catalog',
    'load_food_catalog',
    'parse_exercise_row',
    'parse_food_row',
    'search',
]
