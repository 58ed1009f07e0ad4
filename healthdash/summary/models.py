# -*- coding: utf-8 -*-
"""Summary - Pydantic models."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from ..tracking.models import WeightEntry


class DailyTotals(BaseModel):
    model_config = ConfigDict(frozen=True)

    calories: float = 0.0
    protein: float = 0.0
    carbs: float = 0.0
    fat: float = 0.0


class GoalProgress(BaseModel):
    model_config = ConfigDict(frozen=True)

    calories: float = Field(0.0, ge=0, le=100)
    protein: float = Field(0.0, ge=0, le=100)
    carbs: float = Field(0.0, ge=0, le=100)
    fat: float = Field(0.0, ge=0, le=100)
    water: float = Field(0.0, ge=0, le=100)
    sleep: float = Field(0.0, ge=0, le=100)


class DaySummary(BaseModel):
    model_config = ConfigDict(frozen=True)

    date: str = Field(..., description="YYYY-MM-DD")
    totals: DailyTotals
    water: float = 0.0
    sleep_hours: float = 0.0
    calories_burned: float = 0.0
    net_calories: float = Field(0.0, description="totals.calories - calories_burned")
    food_entry_count: int = Field(0, ge=0)
    workout_count: int = Field(0, ge=0)
    latest_weight: Optional[WeightEntry] = None
    progress: GoalProgress = GoalProgress()
