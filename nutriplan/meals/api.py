# -*- coding: utf-8 -*-
"""Meals: API endpoints."""

from __future__ import annotations

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends

from ..deps import get_current_user_id
from ..errors import ConfigurationError
from ..nutrition.calculator import calculate_recommended_nutrition
from ..profile.snapshot import resolve_profile_snapshot
from .allocation import allocate_meal_energy
from .models import MealAllocation, MealDefinition, MealSlotsResponse, MealTimeSettings
from .slots import normalize_meal_time, resolve_meal_slots
from .storage import replace_meal_times

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/meal-times", tags=["Meals"])


def _allocation_for(user_id: str, meals: List[MealDefinition]) -> Optional[MealAllocation]:
    try:
        nutrition = calculate_recommended_nutrition(resolve_profile_snapshot(user_id).profile)
    except ConfigurationError as exc:
        logger.info("no allocation for %s: %s", user_id, exc)
        return None
    return allocate_meal_energy(nutrition.cal, meals)


def _slots_response(user_id: str) -> MealSlotsResponse:
    meals = resolve_meal_slots(user_id)
    return MealSlotsResponse(meals=meals, allocation=_allocation_for(user_id, meals))


@router.get("", response_model=MealSlotsResponse, summary="Active meal slots and their kcal split")
def get_meal_times(user_id: str = Depends(get_current_user_id)):
    return _slots_response(user_id)


@router.put("", response_model=MealSlotsResponse, summary="Replace all meal-time settings")
def put_meal_times(request: MealTimeSettings, user_id: str = Depends(get_current_user_id)):
    meals = [
        item.model_copy(update={"meal_name": item.meal_name.strip(), "meal_time": normalize_meal_time(item.meal_time)})
        for item in request.meals
    ]
    replace_meal_times(user_id, meals)
    return _slots_response(user_id)
