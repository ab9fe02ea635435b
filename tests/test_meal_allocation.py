# -*- coding: utf-8 -*-

from __future__ import annotations

import unittest

from nutriplan.meals.allocation import allocate_meal_energy, meal_shares
from nutriplan.meals.models import MealDefinition
from nutriplan.meals.slots import default_meal_slots


def _custom(key: str, name: str, time: str = "15:00") -> MealDefinition:
    return MealDefinition(key=key, name=name, time=time, is_default=False)


class TestMealAllocation(unittest.TestCase):
    def test_canonical_split(self) -> None:
        allocation = allocate_meal_energy(2000, default_meal_slots())
        self.assertEqual(allocation, {"breakfast": 600, "lunch": 800, "dinner": 600})

    def test_one_snack_renormalized(self) -> None:
        meals = [*default_meal_slots(), _custom("มื้อว่าง", "มื้อว่าง")]
        allocation = allocate_meal_energy(2000, meals)
        self.assertEqual(list(allocation), ["breakfast", "lunch", "dinner", "มื้อว่าง"])
        self.assertEqual(allocation, {"breakfast": 545, "lunch": 727, "dinner": 545, "มื้อว่าง": 182})

    def test_many_custom_meals_share_twenty_percent(self) -> None:
        meals = [*default_meal_slots(), *(_custom(f"snack_{i}", f"snack {i}") for i in range(4))]
        shares = meal_shares(meals)
        self.assertAlmostEqual(sum(shares.values()), 1.0)
        self.assertAlmostEqual(shares["snack_0"], 0.05 / 1.2)

    def test_only_custom_meals(self) -> None:
        meals = [_custom("a", "a"), _custom("b", "b")]
        self.assertEqual(allocate_meal_energy(1500, meals), {"a": 750, "b": 750})

    def test_sum_close_to_daily_and_non_negative(self) -> None:
        meals = [*default_meal_slots(), _custom("x", "x"), _custom("y", "y"), _custom("z", "z")]
        for daily in (0, 1, 1201, 1999, 3333):
            allocation = allocate_meal_energy(daily, meals)
            self.assertLessEqual(abs(sum(allocation.values()) - round(daily)), len(meals))
            self.assertTrue(all(isinstance(v, int) and v >= 0 for v in allocation.values()))

    def test_empty_meals(self) -> None:
        self.assertEqual(allocate_meal_energy(2000, []), {})


if __name__ == "__main__":
    unittest.main()
