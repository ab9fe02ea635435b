# -*- coding: utf-8 -*-
"""Meals: Pydantic models."""

from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

# Ordered meal key -> kcal share of the day.
MealAllocation = Dict[str, int]


class MealDefinition(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    key: str = Field(..., description="breakfast/lunch/dinner or a slug of the custom name")
    name: str
    time: str = Field(..., pattern=r"^\d{2}:\d{2}$")
    is_default: bool = Field(False, alias="isDefault")
    sort: int = 0


class MealTimeItem(BaseModel):
    meal_name: str = Field(..., min_length=1, max_length=100)
    meal_time: str = Field("00:00", description="HH:mm")
    sort_order: Optional[int] = None
    is_active: bool = True


class MealTimeSettings(BaseModel):
    meals: List[MealTimeItem] = Field(default_factory=list)


class MealSlotsResponse(BaseModel):
    meals: List[MealDefinition]
    allocation: Optional[MealAllocation] = None
