# -*- coding: utf-8 -*-
"""Plan generation: profile -> targets -> allocation -> prompt -> model -> plan."""

from __future__ import annotations

import logging
from typing import List, Optional

from ..agent_service import complete_text
from ..config import settings
from ..errors import PlanValidationError, UpstreamUnavailable
from ..meals.allocation import allocate_meal_energy
from ..meals.slots import canonical_meal_times, resolve_meal_slots
from ..nutrition.calculator import calculate_recommended_nutrition, calculation_summary
from ..profile.snapshot import resolve_profile_snapshot
from .fallback import synthesize_fallback_plan
from .models import (
    FoodSuggestion,
    FoodSuggestionRequest,
    GeneratedPlan,
    PlanGenerationResult,
    PlanPreferences,
    PlanRequest,
)
from .prompts import build_food_suggestion_prompt, build_plan_prompt
from .validator import parse_food_suggestion, parse_plan_response, repair_plan

logger = logging.getLogger(__name__)

PLAN_SYSTEM_PROMPT = (
    "You are a dietitian who writes meal plans as strict JSON. "
    "Follow the calorie and macronutrient targets exactly and reply with one JSON object only."
)
FOOD_SYSTEM_PROMPT = "You suggest one dish at a time and reply with one JSON object only."


def plan_warnings(plan: GeneratedPlan, request: PlanRequest) -> List[str]:
    """Differences between what was asked for and what the model returned."""
    warnings: List[str] = []
    expected_days = [str(d) for d in range(1, request.preferences.plan_duration + 1)]
    days = plan.days()
    if days != expected_days:
        warnings.append(f"Expected days 1..{request.preferences.plan_duration}, got {', '.join(days)}")

    expected_keys = [m.key for m in request.meals]
    for day in days:
        meals = plan.root[day].meals
        missing = [k for k in expected_keys if k not in meals]
        extra = [k for k in meals if k not in expected_keys]
        if missing:
            warnings.append(f"Day {day} is missing meals: {', '.join(missing)}")
        if extra:
            warnings.append(f"Day {day} has unexpected meals: {', '.join(extra)}")
    return warnings


def generate_meal_plan(user_id: str, preferences: Optional[PlanPreferences] = None) -> PlanGenerationResult:
    preferences = preferences or PlanPreferences()
    snapshot = resolve_profile_snapshot(user_id)
    nutrition = calculate_recommended_nutrition(snapshot.profile)
    logger.debug("targets for %s: %s", user_id, calculation_summary(snapshot.profile, nutrition))
    meals = resolve_meal_slots(user_id)
    allocation = allocate_meal_energy(nutrition.cal, meals)

    request = PlanRequest(
        nutrition=nutrition,
        allocation=allocation,
        meals=meals,
        preferences=preferences,
        dietary_restrictions=snapshot.dietary_restrictions,
        eating_type=snapshot.eating_type,
        language=settings.plan_language,
    )

    plan: Optional[GeneratedPlan] = None
    fallback_reason: Optional[str] = None
    try:
        raw = complete_text(build_plan_prompt(request), system_prompt=PLAN_SYSTEM_PROMPT)
        plan = repair_plan(parse_plan_response(raw))
    except UpstreamUnavailable as exc:
        fallback_reason = "upstream_unavailable"
        logger.warning("plan model call failed for %s, using fallback: %s", user_id, exc)
    except PlanValidationError as exc:
        fallback_reason = exc.reason
        logger.warning("plan response rejected for %s (%s), using fallback: %s", user_id, exc.reason, exc)

    if plan is None:
        plan = synthesize_fallback_plan(
            nutrition,
            preferences.plan_duration,
            allocation=allocation,
            meal_times=canonical_meal_times(meals),
        )
        logger.info("plan for %s: source=fallback days=%s", user_id, preferences.plan_duration)
        return PlanGenerationResult(
            nutrition=nutrition,
            meals=meals,
            allocation=allocation,
            plan=plan,
            source="fallback",
            fallback_reason=fallback_reason,
        )

    warnings = plan_warnings(plan, request)
    logger.info("plan for %s: source=ai days=%s warnings=%s", user_id, len(plan.days()), len(warnings))
    return PlanGenerationResult(
        nutrition=nutrition,
        meals=meals,
        allocation=allocation,
        plan=plan,
        source="ai",
        warnings=warnings,
    )


def suggest_food(request: FoodSuggestionRequest) -> FoodSuggestion:
    raw = complete_text(build_food_suggestion_prompt(request), system_prompt=FOOD_SYSTEM_PROMPT)
    return parse_food_suggestion(raw)
