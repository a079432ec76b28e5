# -*- coding: utf-8 -*-

from __future__ import annotations

import unittest

import support  # noqa: F401
from uplift.nutrition.macros import DEFAULT_GOAL, adherence, compute_totals, goal_targets, remaining


class TestComputeTotals(unittest.TestCase):
    def test_empty_day_is_all_zero(self) -> None:
        self.assertEqual(compute_totals([]), {"calories": 0.0, "protein": 0.0, "carbs": 0.0, "fat": 0.0})

    def test_serving_size_multiplies_nutrients(self) -> None:
        totals = compute_totals([{"calories": 200, "protein": 10, "carbs": 30, "fat": 5, "serving_size": 2}])
        self.assertEqual(totals, {"calories": 400.0, "protein": 20.0, "carbs": 60.0, "fat": 10.0})

    def test_missing_serving_size_counts_once(self) -> None:
        totals = compute_totals([{"calories": 95, "protein": 0.5, "carbs": 25, "fat": 0.3, "serving_size": None}])
        self.assertEqual(totals["calories"], 95.0)
        self.assertEqual(totals["fat"], 0.3)

    def test_additive_over_lines(self) -> None:
        base = [{"calories": 120, "protein": 4, "carbs": 20, "fat": 2, "serving_size": 1.5}]
        extra = {"calories": 80, "protein": 1, "carbs": 1, "fat": 7, "serving_size": 3}
        before = compute_totals(base)
        after = compute_totals(base + [extra])
        self.assertAlmostEqual(after["calories"] - before["calories"], 80 * 3)

    def test_null_nutrients_count_as_zero(self) -> None:
        totals = compute_totals([{"calories": None, "protein": None, "carbs": 3, "fat": None, "serving_size": 2}])
        self.assertEqual(totals, {"calories": 0.0, "protein": 0.0, "carbs": 6.0, "fat": 0.0})


class TestGoalMath(unittest.TestCase):
    def test_default_goal_targets(self) -> None:
        targets = goal_targets(DEFAULT_GOAL)
        self.assertEqual(targets["calories"], 2200.0)
        self.assertEqual(targets["protein"], 165.0)
        self.assertEqual(targets["carbs"], 220.0)
        self.assertEqual(targets["fat"], 73.3)

    def test_gram_fields_override_percentages(self) -> None:
        goal = {"daily_calories": 2000, "protein_pct": 25, "carbs_pct": 50, "fat_pct": 25, "protein_g": 180}
        targets = goal_targets(goal)
        self.assertEqual(targets["protein"], 180.0)
        self.assertEqual(targets["carbs"], 250.0)

    def test_adherence_is_capped_and_zero_safe(self) -> None:
        consumed = {"calories": 3000, "protein": 50, "carbs": 0, "fat": 10}
        targets = {"calories": 2000, "protein": 200, "carbs": 250, "fat": 0}
        self.assertEqual(adherence(consumed, targets), {"calories": 100.0, "protein": 25.0, "carbs": 0.0, "fat": 0.0})

    def test_remaining_never_negative(self) -> None:
        consumed = {"calories": 2500, "protein": 100, "carbs": 100, "fat": 50}
        targets = {"calories": 2000, "protein": 150, "carbs": 250, "fat": 60}
        self.assertEqual(remaining(consumed, targets), {"calories": 0.0, "protein": 50.0, "carbs": 150.0, "fat": 10.0})


if __name__ == "__main__":
    unittest.main()
