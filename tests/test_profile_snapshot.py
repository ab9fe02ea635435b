# -*- coding: utf-8 -*-

from __future__ import annotations

import unittest
from datetime import date

from nutriplan.errors import ConfigurationError
from nutriplan.profile.models import ActivityLevel, BodyFat, Gender, TargetGoal
from nutriplan.profile.snapshot import build_profile_snapshot, split_restrictions, year_of_birth_to_age


class TestProfileSnapshot(unittest.TestCase):
    def test_age_before_and_after_mid_year(self) -> None:
        self.assertEqual(year_of_birth_to_age(1996, date(2026, 3, 1)), 29)
        self.assertEqual(year_of_birth_to_age(1996, date(2026, 7, 1)), 30)
        self.assertEqual(year_of_birth_to_age(2026, date(2026, 1, 1)), 0)

    def test_loose_row_values_are_coerced(self) -> None:
        row = {
            "age": "1996",
            "weight": "72.5",
            "height": 175,
            "gender": "Male",
            "body_fat": "don't know",
            "target_goal": "decrease",
            "target_weight": "68",
            "activity_level": "very high",
            "dietary_restrictions": "no pork, seafood ,",
            "eating_type": "  halal ",
        }
        snapshot = build_profile_snapshot(row, today=date(2026, 7, 1))
        profile = snapshot.profile
        self.assertEqual(profile.age, 30)
        self.assertEqual(profile.weight, 72.5)
        self.assertEqual(profile.gender, Gender.male)
        self.assertEqual(profile.body_fat, BodyFat.unknown)
        self.assertEqual(profile.target_goal, TargetGoal.decrease)
        self.assertEqual(profile.target_weight, 68.0)
        self.assertEqual(profile.activity_level, ActivityLevel.very_high)
        self.assertEqual(snapshot.dietary_restrictions, ["no pork", "seafood"])
        self.assertEqual(snapshot.eating_type, "halal")

    def test_healthy_goal_uses_current_weight(self) -> None:
        row = {"weight": 60, "height": 160, "target_goal": "healthy", "target_weight": 50}
        snapshot = build_profile_snapshot(row)
        self.assertEqual(snapshot.profile.target_weight, 60.0)
        self.assertEqual(snapshot.profile.age, 0)
        self.assertIsNone(snapshot.eating_type)

    def test_missing_weight_or_height_raises(self) -> None:
        with self.assertRaises(ConfigurationError):
            build_profile_snapshot({"height": 170})
        with self.assertRaises(ConfigurationError):
            build_profile_snapshot({"weight": 70, "height": "abc"})

    def test_split_restrictions_accepts_lists(self) -> None:
        self.assertEqual(split_restrictions(["a", " b ", ""]), ["a", "b"])
        self.assertEqual(split_restrictions(None), [])


if __name__ == "__main__":
    unittest.main()
