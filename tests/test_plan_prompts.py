# -*- coding: utf-8 -*-

from __future__ import annotations

import json
import unittest

from nutriplan.meals.models import MealDefinition
from nutriplan.meals.slots import default_meal_slots
from nutriplan.nutrition.models import RecommendedNutrition
from nutriplan.plans.models import FoodSuggestionRequest, PlanPreferences, PlanRequest
from nutriplan.plans.prompts import build_food_suggestion_prompt, build_plan_example, build_plan_prompt


def _request(**prefs) -> PlanRequest:
    meals = [*default_meal_slots(), MealDefinition(key="มื้อว่าง", name="มื้อว่าง", time="15:00")]
    return PlanRequest(
        nutrition=RecommendedNutrition(cal=2000, protein=98, carb=250, fat=70, bmr=1600, tdee=2000),
        allocation={"breakfast": 545, "lunch": 727, "dinner": 545, "มื้อว่าง": 182},
        meals=meals,
        preferences=PlanPreferences.model_validate({"planDuration": 3, **prefs}),
        dietary_restrictions=["no pork"],
        eating_type="halal",
    )


class TestPlanPrompts(unittest.TestCase):
    def test_targets_and_meal_lines(self) -> None:
        prompt = build_plan_prompt(_request())
        self.assertIn("Calories: 2000 kcal", prompt)
        self.assertIn("Protein: 98 g (within ±5 g)", prompt)
        self.assertIn("Carbohydrate: 250 g", prompt)
        self.assertIn("Fat: 70 g", prompt)
        self.assertIn('- "breakfast" (มื้อเช้า) at 07:00: 545 kcal', prompt)
        self.assertIn('- "มื้อว่าง" (มื้อว่าง) at 15:00: 182 kcal', prompt)
        self.assertIn('keyed "1" to "3"', prompt)
        self.assertIn("Exactly one food item per meal.", prompt)
        self.assertIn("must be in Thai", prompt)
        self.assertIn("No markdown", prompt)

    def test_example_uses_exact_day_and_meal_keys(self) -> None:
        example = build_plan_example(_request())
        self.assertEqual(list(example), ["1", "2", "3"])
        self.assertEqual(list(example["1"]["meals"]), ["breakfast", "lunch", "dinner", "มื้อว่าง"])
        self.assertEqual(example["2"]["totalCal"], 1999)
        self.assertEqual(example["1"]["meals"]["lunch"]["time"], "12:00")

        prompt = build_plan_prompt(_request())
        embedded = prompt[prompt.index("Example of the required format:") + len("Example of the required format:"):]
        self.assertEqual(json.loads(embedded), example)

    def test_preferences_and_profile_restrictions_merged(self) -> None:
        prompt = build_plan_prompt(
            _request(selectedRestrictions="no pork, no shellfish", selectedCategories=["Thai", "Japanese"])
        )
        self.assertIn("Dietary restrictions: no pork, no shellfish", prompt)
        self.assertIn("Food categories: Thai, Japanese", prompt)
        self.assertIn("Eating type: halal", prompt)
        self.assertIn("Budget: flexible", prompt)

    def test_prompt_is_deterministic(self) -> None:
        self.assertEqual(build_plan_prompt(_request()), build_plan_prompt(_request()))

    def test_food_suggestion_prompt(self) -> None:
        request = FoodSuggestionRequest.model_validate(
            {"mealType": "lunch", "ingredients": "ไก่, ไข่", "targetCalories": 500}
        )
        prompt = build_food_suggestion_prompt(request)
        self.assertIn("MUST NOT be a JSON array", prompt)
        self.assertIn('"name", "cal", "carbs", "protein", "fat", "ingredients", "serving"', prompt)
        self.assertIn("Available ingredients: ไก่, ไข่", prompt)
        self.assertIn("Target calories: about 500 kcal", prompt)
        self.assertTrue(prompt.endswith("500 kcal"))


if __name__ == "__main__":
    unittest.main()
