# -*- coding: utf-8 -*-
"""Nutrition: API endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from ..deps import get_current_user_id
from ..errors import ConfigurationError
from ..profile.snapshot import resolve_profile_snapshot
from .calculator import calculate_recommended_nutrition, calculation_summary
from .models import RecommendedNutritionResponse

router = APIRouter(prefix="/api/nutrition", tags=["Nutrition"])


@router.get("/recommended", response_model=RecommendedNutritionResponse, summary="Daily calorie and macro targets")
def recommended(user_id: str = Depends(get_current_user_id)):
    try:
        snapshot = resolve_profile_snapshot(user_id)
        nutrition = calculate_recommended_nutrition(snapshot.profile)
    except ConfigurationError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    return RecommendedNutritionResponse(
        nutrition=nutrition,
        summary=calculation_summary(snapshot.profile, nutrition),
    )
