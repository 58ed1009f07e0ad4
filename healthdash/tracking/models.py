# -*- coding: utf-8 -*-
"""Tracking - Pydantic models."""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, Field

from ..catalog.models import ExerciseCatalogItem, FoodCatalogItem


WeightUnit = Literal["lbs", "kg"]


class FoodEntry(BaseModel):
    id: str
    food: FoodCatalogItem
    quantity: float = Field(1, description="Servings; the entry is removed once this drops to 0")
    meal_type: str = "meal"
    date: str = Field(..., description="YYYY-MM-DD")


class WaterEntry(BaseModel):
    id: str
    amount: float
    date: str = Field(..., description="YYYY-MM-DD")
    time: str = Field(..., description="Local wall-clock time, HH:MM:SS")


class WorkoutEntry(BaseModel):
    id: str
    exercise: ExerciseCatalogItem
    duration: float = Field(..., description="Minutes")
    calories_burned: float
    sets: Optional[float] = None
    reps: Optional[float] = None
    weight: Optional[float] = None
    date: str = Field(..., description="YYYY-MM-DD")


class SleepEntry(BaseModel):
    id: str
    hours: float
    quality: float = Field(..., description="1-10, not enforced")
    date: str = Field(..., description="YYYY-MM-DD")


class WeightEntry(BaseModel):
    id: str
    weight: float
    unit: WeightUnit = "lbs"
    date: str = Field(..., description="YYYY-MM-DD")


class Goals(BaseModel):
    calories: float = 2000
    protein: float = 150
    carbs: float = 250
    fat: float = 67
    water: float = 8
    sleep: float = 8
    weight_target: float = 150
