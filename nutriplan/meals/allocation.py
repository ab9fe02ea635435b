# -*- coding: utf-8 -*-
"""Per-meal energy allocation."""

from __future__ import annotations

from types import MappingProxyType
from typing import Dict, List, Mapping

from .models import MealAllocation, MealDefinition

CANONICAL_SHARES: Mapping[str, float] = MappingProxyType(
    {
        "breakfast": 0.30,
        "lunch": 0.40,
        "dinner": 0.30,
    }
)
# Custom meals together take at most this much of the day, and each at most MAX_CUSTOM_SHARE.
CUSTOM_MEALS_TOTAL_SHARE = 0.20
MAX_CUSTOM_SHARE = 0.10


def meal_shares(meals: List[MealDefinition]) -> Dict[str, float]:
    """Normalized shares (summing to 1.0) for every meal key."""
    custom = [m for m in meals if not (m.is_default and m.key in CANONICAL_SHARES)]
    custom_share = min(MAX_CUSTOM_SHARE, CUSTOM_MEALS_TOTAL_SHARE / len(custom)) if custom else 0.0

    shares: Dict[str, float] = {}
    for meal in meals:
        if meal.is_default and meal.key in CANONICAL_SHARES:
            shares[meal.key] = CANONICAL_SHARES[meal.key]
        else:
            shares[meal.key] = custom_share

    total = sum(shares.values())
    if total > 0:
        shares = {k: v / total for k, v in shares.items()}
    return shares


def allocate_meal_energy(daily_calories: float, meals: List[MealDefinition]) -> MealAllocation:
    return {key: round(share * daily_calories) for key, share in meal_shares(meals).items()}
