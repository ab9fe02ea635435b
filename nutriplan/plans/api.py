# -*- coding: utf-8 -*-
"""Plans: API endpoints."""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Body, Depends, HTTPException

from ..config import settings
from ..deps import get_current_user_id
from ..errors import ConfigurationError, PlanValidationError, UpstreamUnavailable
from .generator import generate_meal_plan, suggest_food
from .models import FoodSuggestion, FoodSuggestionRequest, PlanGenerationResult, PlanPreferences

router = APIRouter(prefix="/api/plans", tags=["Plans"])
food_router = APIRouter(prefix="/api/food", tags=["Plans"])


@router.post("/generate", response_model=PlanGenerationResult, summary="Generate a multi-day meal plan")
def generate(preferences: Optional[PlanPreferences] = Body(None), user_id: str = Depends(get_current_user_id)):
    try:
        return generate_meal_plan(user_id, preferences)
    except ConfigurationError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc


@food_router.post("/suggest", response_model=FoodSuggestion, summary="Suggest a single dish")
def suggest(request: FoodSuggestionRequest, user_id: str = Depends(get_current_user_id)):  # noqa: ARG001
    if "language" not in request.model_fields_set:
        request = request.model_copy(update={"language": settings.plan_language})
    try:
        return suggest_food(request)
    except UpstreamUnavailable as exc:
        raise HTTPException(status_code=502, detail=f"Food suggestion failed: {exc}") from exc
    except PlanValidationError as exc:
        raise HTTPException(status_code=502, detail=f"Food suggestion invalid ({exc.reason}): {exc}") from exc
