# -*- coding: utf-8 -*-
"""Plan models: the generated multi-day plan and the request bundles around it."""

from __future__ import annotations

from typing import Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, RootModel, field_validator

from ..meals.models import MealAllocation, MealDefinition
from ..nutrition.models import RecommendedNutrition

# Keep integers as integers in the serialized plan.
Number = Union[int, float]


def _coerce_str_list(value: object) -> List[str]:
    """Mobile forms send either "a, b" or ["a", "b"]; accept both."""
    if value is None:
        return []
    if isinstance(value, str):
        return [p.strip() for p in value.split(",") if p.strip()]
    if isinstance(value, list):
        out: List[str] = []
        for item in value:
            if item is None:
                continue
            s = str(item).strip()
            if s:
                out.append(s)
        return out
    s = str(value).strip()
    return [s] if s else []


class FoodItem(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str
    cal: Number = Field(0, ge=0)
    carb: Number = Field(0, ge=0)
    fat: Number = Field(0, ge=0)
    protein: Number = Field(0, ge=0)
    img: str = ""
    serving: str = ""
    source: Literal["ai", "user"] = "ai"
    is_user_food: bool = Field(False, alias="isUserFood")


class MealEntry(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str
    time: str
    total_cal: Number = Field(0, ge=0, alias="totalCal")
    items: List[FoodItem] = Field(default_factory=list)


class DayPlan(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    total_cal: Number = Field(0, ge=0, alias="totalCal")
    meals: Dict[str, MealEntry] = Field(default_factory=dict)


class GeneratedPlan(RootModel[Dict[str, DayPlan]]):
    """Day index ("1".."N") -> DayPlan."""

    def days(self) -> List[str]:
        return list(self.root.keys())


class PlanPreferences(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    plan_duration: int = Field(7, ge=1, le=30, alias="planDuration")
    selected_categories: List[str] = Field(default_factory=list, alias="selectedCategories")
    selected_budget: Optional[str] = Field(None, alias="selectedBudget")
    variety_level: Optional[str] = Field(None, alias="varietyLevel")
    selected_ingredients: List[str] = Field(default_factory=list, alias="selectedIngredients")
    additional_requirements: Optional[str] = Field(None, alias="additionalRequirements")
    selected_restrictions: List[str] = Field(default_factory=list, alias="selectedRestrictions")
    selected_goals: List[str] = Field(default_factory=list, alias="selectedGoals")

    @field_validator(
        "selected_categories", "selected_ingredients", "selected_restrictions", "selected_goals", mode="before"
    )
    @classmethod
    def _lists(cls, value: object) -> List[str]:
        return _coerce_str_list(value)


class PlanRequest(BaseModel):
    """Everything the plan prompt is built from."""

    model_config = ConfigDict(frozen=True)

    nutrition: RecommendedNutrition
    allocation: MealAllocation
    meals: List[MealDefinition]
    preferences: PlanPreferences
    dietary_restrictions: List[str] = Field(default_factory=list)
    eating_type: Optional[str] = None
    language: str = "Thai"


class FoodSuggestionRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    meal_type: Optional[str] = Field(None, alias="mealType")
    hunger_level: Optional[str] = Field(None, alias="hungerLevel")
    ingredients: List[str] = Field(default_factory=list)
    food_type: Optional[str] = Field(None, alias="foodType")
    dietary_restrictions: List[str] = Field(default_factory=list, alias="dietaryRestrictions")
    complexity_level: Optional[str] = Field(None, alias="complexityLevel")
    target_calories: Optional[int] = Field(None, ge=0, alias="targetCalories")
    language: str = "Thai"

    @field_validator("ingredients", "dietary_restrictions", mode="before")
    @classmethod
    def _lists(cls, value: object) -> List[str]:
        return _coerce_str_list(value)


class FoodSuggestion(BaseModel):
    name: str = Field(..., min_length=1)
    cal: Number = Field(0, ge=0)
    carbs: Number = Field(0, ge=0)
    protein: Number = Field(0, ge=0)
    fat: Number = Field(0, ge=0)
    ingredients: List[str] = Field(default_factory=list)
    serving: str = ""

    @field_validator("ingredients", mode="before")
    @classmethod
    def _ingredients(cls, value: object) -> List[str]:
        return _coerce_str_list(value)


class PlanGenerationResult(BaseModel):
    nutrition: RecommendedNutrition
    meals: List[MealDefinition]
    allocation: MealAllocation
    plan: GeneratedPlan
    source: Literal["ai", "fallback"]
    fallback_reason: Optional[str] = None
    warnings: List[str] = Field(default_factory=list)
