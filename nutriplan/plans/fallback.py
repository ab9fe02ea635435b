# -*- coding: utf-8 -*-
"""Deterministic plan used when the model call or its output fails."""

from __future__ import annotations

from types import MappingProxyType
from typing import Dict, Mapping, Optional, Tuple

from ..meals.allocation import CANONICAL_SHARES
from ..meals.models import MealAllocation
from ..meals.slots import DEFAULT_MEAL_TIMES
from ..nutrition.models import RecommendedNutrition
from .models import DayPlan, FoodItem, GeneratedPlan, MealEntry

# meal key -> (meal name, dish, serving)
FALLBACK_DISHES: Mapping[str, Tuple[str, str, str]] = MappingProxyType(
    {
        "breakfast": ("อาหารมื้อเช้า", "ข้าวต้มไข่ไก่", "1 ชาม (300 กรัม)"),
        "lunch": ("อาหารมื้อกลางวัน", "ผัดกะเพราไก่", "1 จาน (250 กรัม)"),
        "dinner": ("อาหารมื้อเย็น", "ต้มยำกุ้ง", "1 ชาม (300 กรัม)"),
    }
)


def _fallback_shares(allocation: Optional[MealAllocation]) -> Dict[str, float]:
    if allocation:
        picked = {key: max(0.0, float(allocation.get(key) or 0)) for key in FALLBACK_DISHES}
        total = sum(picked.values())
        if total > 0:
            return {key: value / total for key, value in picked.items()}
    return {key: CANONICAL_SHARES[key] for key in FALLBACK_DISHES}


def _build_day(nutrition: RecommendedNutrition, shares: Dict[str, float], times: Mapping[str, str]) -> DayPlan:
    daily = max(0, nutrition.cal)
    meals: Dict[str, MealEntry] = {}
    cumulative = 0.0
    allotted = 0
    for key, (meal_name, dish, serving) in FALLBACK_DISHES.items():
        share = shares[key]
        cumulative += share
        # Rounding the running total keeps the day sum exact; the last meal takes the remainder.
        upto = daily if key == "dinner" else round(daily * cumulative)
        kcal = max(0, upto - allotted)
        allotted += kcal
        item = FoodItem(
            name=dish,
            cal=kcal,
            carb=max(0, round(nutrition.carb * share)),
            fat=max(0, round(nutrition.fat * share)),
            protein=max(0, round(nutrition.protein * share)),
            img="",
            serving=serving,
            source="ai",
            is_user_food=False,
        )
        meals[key] = MealEntry(name=meal_name, time=times[key], total_cal=kcal, items=[item])
    return DayPlan(total_cal=sum(m.total_cal for m in meals.values()), meals=meals)


def synthesize_fallback_plan(
    nutrition: RecommendedNutrition,
    days: int,
    allocation: Optional[MealAllocation] = None,
    meal_times: Optional[Mapping[str, str]] = None,
) -> GeneratedPlan:
    """Identical breakfast/lunch/dinner days "1".."days" built from the targets alone."""
    days = max(1, int(days or 1))
    shares = _fallback_shares(allocation)
    times = {**DEFAULT_MEAL_TIMES, **{k: v for k, v in (meal_times or {}).items() if k in FALLBACK_DISHES}}
    template = _build_day(nutrition, shares, times)
    return GeneratedPlan({str(day): template.model_copy(deep=True) for day in range(1, days + 1)})
