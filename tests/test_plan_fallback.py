# -*- coding: utf-8 -*-

from __future__ import annotations

import json
import unittest

from nutriplan.nutrition.models import RecommendedNutrition
from nutriplan.plans.fallback import synthesize_fallback_plan
from nutriplan.plans.validator import parse_plan_response

NUTRITION = RecommendedNutrition(cal=2001, protein=98, carb=250, fat=70, bmr=1600, tdee=2001)


class TestPlanFallback(unittest.TestCase):
    def test_seven_identical_days(self) -> None:
        plan = synthesize_fallback_plan(NUTRITION, 7)
        self.assertEqual(plan.days(), [str(d) for d in range(1, 8)])
        first = plan.root["1"]
        self.assertEqual(list(first.meals), ["breakfast", "lunch", "dinner"])
        for day in plan.root.values():
            self.assertEqual(day, first)
            self.assertEqual(day.total_cal, NUTRITION.cal)
            self.assertEqual(sum(m.total_cal for m in day.meals.values()), NUTRITION.cal)
            for meal in day.meals.values():
                self.assertEqual(len(meal.items), 1)
                self.assertEqual(meal.items[0].cal, meal.total_cal)

    def test_default_shares_and_times(self) -> None:
        meals = synthesize_fallback_plan(NUTRITION, 1).root["1"].meals
        self.assertEqual([m.time for m in meals.values()], ["07:00", "12:00", "18:00"])
        self.assertEqual(meals["breakfast"].total_cal, 600)
        self.assertEqual(meals["lunch"].total_cal, 801)
        self.assertEqual(meals["dinner"].total_cal, 600)
        self.assertEqual(meals["lunch"].items[0].protein, round(98 * 0.4))
        self.assertEqual(meals["breakfast"].items[0].carb, 75)

    def test_allocation_and_times_are_respected(self) -> None:
        allocation = {"breakfast": 545, "lunch": 727, "dinner": 545, "snack": 182}
        plan = synthesize_fallback_plan(NUTRITION, 2, allocation=allocation, meal_times={"breakfast": "06:30"})
        meals = plan.root["2"].meals
        self.assertNotIn("snack", meals)
        self.assertEqual(meals["breakfast"].time, "06:30")
        self.assertEqual(meals["breakfast"].total_cal, 600)
        self.assertEqual(plan.root["2"].total_cal, NUTRITION.cal)

    def test_non_positive_days_gives_one_day(self) -> None:
        self.assertEqual(synthesize_fallback_plan(NUTRITION, 0).days(), ["1"])
        self.assertEqual(synthesize_fallback_plan(NUTRITION, -3).days(), ["1"])

    def test_passes_validator(self) -> None:
        plan = synthesize_fallback_plan(NUTRITION, 3)
        raw = json.dumps(plan.model_dump(by_alias=True), ensure_ascii=False)
        data = parse_plan_response(raw)
        self.assertIn("meals", data["1"])
        self.assertEqual(data["1"]["meals"]["lunch"]["items"][0]["source"], "ai")


if __name__ == "__main__":
    unittest.main()
