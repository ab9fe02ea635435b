# -*- coding: utf-8 -*-
"""Nutrition: Pydantic models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Macronutrients(BaseModel):
    model_config = ConfigDict(frozen=True)

    protein: int
    carb: int
    fat: int


class RecommendedNutrition(BaseModel):
    """Daily targets: kcal and grams of each macronutrient."""

    model_config = ConfigDict(frozen=True)

    cal: int = Field(..., description="kcal/day")
    protein: int = Field(..., description="g/day")
    carb: int = Field(..., description="g/day")
    fat: int = Field(..., description="g/day")
    bmr: int
    tdee: int


class RecommendedNutritionResponse(BaseModel):
    nutrition: RecommendedNutrition
    summary: str
