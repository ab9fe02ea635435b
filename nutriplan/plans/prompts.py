# -*- coding: utf-8 -*-
"""Prompt builders for the plan and single-dish flows.

Both builders are pure: the same request always yields the same text.
"""

from __future__ import annotations

import json
from typing import Any, Dict, Iterable, List, Optional

from ..meals.models import MealDefinition
from ..nutrition.models import RecommendedNutrition
from .models import FoodSuggestionRequest, PlanRequest

MACRO_TOLERANCE_G = 5
EXAMPLE_SERVING = "1 จาน (250 กรัม)"


def _join(values: Iterable[str], empty: str = "none") -> str:
    items = [v for v in values if v]
    return ", ".join(items) if items else empty


def _text(value: Optional[str], empty: str = "none") -> str:
    value = (value or "").strip()
    return value or empty


def _merged_restrictions(request: PlanRequest) -> List[str]:
    seen: Dict[str, None] = {}
    for item in [*request.preferences.selected_restrictions, *request.dietary_restrictions]:
        seen.setdefault(item, None)
    return list(seen)


def _scaled(value: int, kcal: int, nutrition: RecommendedNutrition) -> int:
    if nutrition.cal <= 0:
        return 0
    return round(value * kcal / nutrition.cal)


def _example_meal(meal: MealDefinition, kcal: int, nutrition: RecommendedNutrition, language: str) -> Dict[str, Any]:
    return {
        "name": meal.name,
        "time": meal.time,
        "totalCal": kcal,
        "items": [
            {
                "name": f"<dish name in {language}>",
                "cal": kcal,
                "carb": _scaled(nutrition.carb, kcal, nutrition),
                "fat": _scaled(nutrition.fat, kcal, nutrition),
                "protein": _scaled(nutrition.protein, kcal, nutrition),
                "img": "",
                "serving": EXAMPLE_SERVING,
                "source": "ai",
                "isUserFood": False,
            }
        ],
    }


def build_plan_example(request: PlanRequest) -> Dict[str, Any]:
    """Literal example object: days "1".."N", meal keys exactly as configured."""
    meals = {
        meal.key: _example_meal(meal, request.allocation.get(meal.key, 0), request.nutrition, request.language)
        for meal in request.meals
    }
    day_total = sum(m["totalCal"] for m in meals.values())
    return {
        str(day): {"totalCal": day_total, "meals": meals}
        for day in range(1, request.preferences.plan_duration + 1)
    }


def build_plan_prompt(request: PlanRequest) -> str:
    n = request.preferences.plan_duration
    nutrition = request.nutrition
    prefs = request.preferences
    meal_keys = ", ".join(f'"{m.key}"' for m in request.meals)

    meal_lines = "\n".join(
        f'- "{m.key}" ({m.name}) at {m.time}: {request.allocation.get(m.key, 0)} kcal'
        for m in request.meals
    )
    example = json.dumps(build_plan_example(request), ensure_ascii=False, indent=2)

    return f"""
You are a nutrition planner. Create a {n}-day meal plan for one person.

Daily targets (the same for every day):
- Calories: {nutrition.cal} kcal. Keep each day's total as close as possible to this number.
- Protein: {nutrition.protein} g (within ±{MACRO_TOLERANCE_G} g)
- Carbohydrate: {nutrition.carb} g (within ±{MACRO_TOLERANCE_G} g)
- Fat: {nutrition.fat} g (within ±{MACRO_TOLERANCE_G} g)

Meals per day. Use exactly these keys, clock times and calorie targets; do not re-split the calories:
{meal_lines}

User preferences:
- Food categories: {_join(prefs.selected_categories, "any")}
- Budget: {_text(prefs.selected_budget, "flexible")}
- Variety level: {_text(prefs.variety_level, "medium")}
- Preferred ingredients: {_join(prefs.selected_ingredients, "any")}
- Dietary restrictions: {_join(_merged_restrictions(request))}
- Eating type: {_text(request.eating_type, "normal")}
- Goals: {_join(prefs.selected_goals)}
- Additional requirements: {_text(prefs.additional_requirements)}

Rules:
1. Produce exactly {n} days, keyed "1" to "{n}".
2. Every day must contain all of these meal keys: {meal_keys}.
3. Exactly one food item per meal.
4. All food names must be in {request.language}.
5. Each meal "time" must match the time given above.
6. Every "serving" must include a quantity and a unit, e.g. "{EXAMPLE_SERVING}".
7. Numbers are plain JSON numbers. A meal's "totalCal" equals the sum of its items' "cal"; a day's "totalCal" equals the sum of its meals' "totalCal".
8. Output the JSON object only. No markdown, no code fences, no explanations.

Example of the required format:
{example}
""".strip()


def build_food_suggestion_prompt(request: FoodSuggestionRequest) -> str:
    example = json.dumps(
        {
            "name": "ต้มยำกุ้ง",
            "cal": 200,
            "carbs": 10,
            "protein": 30,
            "fat": 5,
            "ingredients": ["กุ้ง", "ตะไคร้", "ใบมะกรูด", "พริกขี้หนู", "น้ำมะนาว"],
            "serving": "1 ชาม (300 กรัม)",
        },
        ensure_ascii=False,
        indent=2,
    )
    calories_line = ""
    if request.target_calories:
        calories_line = f"- Target calories: about {request.target_calories} kcal\n"

    return f"""
You are an assistant that suggests a single dish.
Your response MUST be a single, valid JSON object.
It MUST NOT be a JSON array.
It MUST NOT be wrapped in markdown or code fences.
The JSON object MUST only contain these exact keys: "name", "cal", "carbs", "protein", "fat", "ingredients", "serving".
"name" and "ingredients" must be in {request.language}. "serving" must include a quantity and a unit.

Example of the required format:
{example}

Suggest one dish for these preferences:
- Meal type: {_text(request.meal_type, "any")}
- Hunger level: {_text(request.hunger_level, "normal")}
- Available ingredients: {_join(request.ingredients, "any")}
- Food type: {_text(request.food_type, "any")}
- Dietary restrictions: {_join(request.dietary_restrictions)}
- Complexity: {_text(request.complexity_level, "any")}
{calories_line}""".strip()
