# -*- coding: utf-8 -*-
"""Trends - Pydantic models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class WorkoutPoint(BaseModel):
    model_config = ConfigDict(frozen=True)

    date: str = Field(..., description="YYYY-MM-DD")
    workout_count: int = Field(0, ge=0)
    calories_burned: float = 0.0


class WeightPoint(BaseModel):
    model_config = ConfigDict(frozen=True)

    date: str = Field(..., description="YYYY-MM-DD")
    weight: float
    target: float
