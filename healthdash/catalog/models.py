# -*- coding: utf-8 -*-
"""Catalog - Pydantic models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class FoodCatalogItem(BaseModel):
    """One row of the nutrition facts dataset, values per serving."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    serving_size: str = ""
    calories: float = 0.0
    protein_g: float = 0.0
    carbs_g: float = 0.0
    fat_g: float = 0.0
    sodium_mg: float = 0.0
    sugars_g: float = 0.0


class ExerciseCatalogItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    category: str = ""
    name: str = Field(..., description="Exercise name, e.g. 'Bench Press'")
    progress_metric: str = ""
