# -*- coding: utf-8 -*-
"""
Energy & macronutrient targets

BMR (Mifflin-St Jeor) -> TDEE (activity multiplier) -> goal-adjusted daily
calories -> protein by target body weight, carbohydrate/fat from the rest.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Optional

from ..errors import ConfigurationError
from ..profile.models import UserProfileData
from .models import Macronutrients, RecommendedNutrition

ACTIVITY_MULTIPLIERS: Mapping[str, float] = MappingProxyType(
    {
        "low": 1.2,
        "moderate": 1.55,
        "high": 1.725,
        "very_high": 1.9,
    }
)
DEFAULT_ACTIVITY_MULTIPLIER = ACTIVITY_MULTIPLIERS["moderate"]

PROTEIN_PER_KG: Mapping[str, float] = MappingProxyType(
    {
        "increase": 1.8,
        "decrease": 2.0,
        "healthy": 1.4,
    }
)

# (carb, fat) share of the energy left after protein.
REMAINING_ENERGY_RATIOS: Mapping[str, tuple[float, float]] = MappingProxyType(
    {
        "increase": (0.65, 0.35),
        "decrease": (0.50, 0.50),
        "healthy": (0.60, 0.40),
    }
)

KCAL_PER_GRAM: Mapping[str, int] = MappingProxyType({"protein": 4, "carb": 4, "fat": 9})
KCAL_PER_KG_BODY_WEIGHT = 7700

# Daily surplus/deficit always assumes the weight change happens over one month,
# whatever duration the user asks the plan for.
PLAN_PACING_DAYS = 30
MIN_DAILY_CALORIES = 1200
DEFAULT_AGE = 25


def _value(v) -> Optional[str]:
    return getattr(v, "value", v)


def calculate_bmr(weight: float, height: float, age: float, gender: str) -> int:
    """Mifflin-St Jeor. Anything other than "male" uses the female constant."""
    s = 5 if _value(gender) == "male" else -161
    return round(10 * weight + 6.25 * height - 5 * age + s)


def calculate_tdee(bmr: float, activity_level: str | None) -> int:
    multiplier = ACTIVITY_MULTIPLIERS.get(_value(activity_level), DEFAULT_ACTIVITY_MULTIPLIER)
    return round(bmr * multiplier)


def calculate_target_calories(tdee: float, current_weight: float, target_weight: float, goal: str) -> int:
    goal = _value(goal)
    if goal == "healthy":
        return round(tdee)

    weight_difference = abs(target_weight - current_weight)
    daily_delta = weight_difference * KCAL_PER_KG_BODY_WEIGHT / PLAN_PACING_DAYS

    target = float(tdee)
    if goal == "increase":
        target = tdee + daily_delta
    elif goal == "decrease":
        target = max(tdee - daily_delta, MIN_DAILY_CALORIES)
    return round(target)


def calculate_macronutrients(target_calories: float, goal: str, target_weight: float) -> Macronutrients:
    goal = _value(goal)
    protein = round(target_weight * PROTEIN_PER_KG.get(goal, PROTEIN_PER_KG["healthy"]))

    remaining = max(target_calories - protein * KCAL_PER_GRAM["protein"], 0)
    carb_ratio, fat_ratio = REMAINING_ENERGY_RATIOS.get(goal, REMAINING_ENERGY_RATIOS["healthy"])

    return Macronutrients(
        protein=protein,
        carb=round(remaining * carb_ratio / KCAL_PER_GRAM["carb"]),
        fat=round(remaining * fat_ratio / KCAL_PER_GRAM["fat"]),
    )


def calculate_recommended_nutrition(profile: UserProfileData) -> RecommendedNutrition:
    if not profile.weight or profile.weight <= 0:
        raise ConfigurationError("Invalid weight value")
    if not profile.height or profile.height <= 0:
        raise ConfigurationError("Invalid height value")
    if not profile.target_weight or profile.target_weight <= 0:
        raise ConfigurationError("Invalid target_weight value")

    age = profile.age if profile.age and profile.age > 0 else DEFAULT_AGE
    bmr = calculate_bmr(profile.weight, profile.height, age, profile.gender)
    tdee = calculate_tdee(bmr, profile.activity_level)
    cal = calculate_target_calories(tdee, profile.weight, profile.target_weight, profile.target_goal)
    macros = calculate_macronutrients(cal, profile.target_goal, profile.target_weight)

    return RecommendedNutrition(
        cal=cal,
        protein=macros.protein,
        carb=macros.carb,
        fat=macros.fat,
        bmr=bmr,
        tdee=tdee,
    )


def calculation_summary(profile: UserProfileData, nutrition: RecommendedNutrition | None = None) -> str:
    nutrition = nutrition or calculate_recommended_nutrition(profile)
    return (
        f"Daily Calories: {nutrition.cal} kcal; "
        f"Protein: {nutrition.protein} g ({nutrition.protein * 4} kcal); "
        f"Carbohydrates: {nutrition.carb} g ({nutrition.carb * 4} kcal); "
        f"Fat: {nutrition.fat} g ({nutrition.fat * 9} kcal); "
        f"BMR: {nutrition.bmr} kcal; TDEE: {nutrition.tdee} kcal; "
        f"Goal: {_value(profile.target_goal)} ({profile.weight} kg -> {profile.target_weight} kg)"
    )
