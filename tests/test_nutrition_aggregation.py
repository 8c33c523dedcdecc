# -*- coding: utf-8 -*-

from __future__ import annotations

import unittest
from typing import Dict, List

from lifetrack.nutrition.aggregation import aggregate_day, compute_meal_totals, weekly_report
from lifetrack.nutrition.models import FoodItem, MealEntry, MealItem, NutrientTotals, NutritionGoal


def _meal(day: str, totals: dict | None, meal_id: str = "m") -> MealEntry:
    return MealEntry(
        id=meal_id,
        user_id="u1",
        date=day,
        meal_type="lunch",
        datetime=f"{day}T12:00:00",
        items=[],
        source="manual",
        totals_cache=NutrientTotals(**totals) if totals is not None else None,
        created_at=f"{day}T12:00:00",
    )


def _goal(**overrides) -> NutritionGoal:
    values = dict(
        id="g1",
        user_id="u1",
        calorie_target=2000,
        protein_target=100,
        carbs_target=250,
        fat_target=70,
        created_at="2024-01-01T00:00:00",
    )
    values.update(overrides)
    return NutritionGoal(**values)


class TestDailyAggregation(unittest.TestCase):
    def test_sums_calories_and_defaults_missing_micros(self) -> None:
        meals = [_meal("2024-03-10", {"calories": 500}), _meal("2024-03-10", {"calories": 300, "fiber": 0})]
        summary = aggregate_day("2024-03-10", meals, None)
        self.assertEqual(summary.totals.calories, 800)
        self.assertEqual(summary.totals.fiber, 0)
        self.assertEqual(summary.totals.sodium, 0)
        self.assertEqual(summary.meal_count, 2)

    def test_meals_without_cache_are_skipped(self) -> None:
        meals = [_meal("2024-03-10", {"calories": 400, "protein": 20}), _meal("2024-03-10", None)]
        summary = aggregate_day("2024-03-10", meals, None)
        self.assertEqual(summary.totals.calories, 400)
        self.assertEqual(summary.totals.protein, 20)
        self.assertEqual(summary.meal_count, 2)

    def test_no_goal_means_no_progress_or_warnings(self) -> None:
        summary = aggregate_day("2024-03-10", [_meal("2024-03-10", {"calories": 100})], None)
        self.assertIsNone(summary.goals)
        self.assertIsNone(summary.progress)
        self.assertEqual(summary.warnings, [])

    def test_progress_and_warnings(self) -> None:
        meals = [_meal("2024-03-10", {"calories": 1500, "protein": 60, "carbs": 125, "fat": 35, "fiber": 10, "sodium": 3500})]
        summary = aggregate_day("2024-03-10", meals, _goal(fiber_target=25))
        self.assertEqual(summary.progress.calories, 75)
        self.assertEqual(summary.progress.protein, 60)
        self.assertEqual(summary.progress.carbs, 50)
        self.assertEqual(summary.progress.fat, 50)
        self.assertEqual(summary.progress.fiber, 40)
        self.assertEqual(summary.progress.sodium, 152)
        self.assertIn("Low fiber intake", summary.warnings)
        self.assertIn("High sodium intake", summary.warnings)
        self.assertIn("Low protein intake", summary.warnings)

    def test_goal_without_micro_targets_uses_defaults(self) -> None:
        meals = [_meal("2024-03-10", {"calories": 2000, "protein": 100, "fiber": 25, "sodium": 2300})]
        summary = aggregate_day("2024-03-10", meals, _goal(fiber_target=None, sodium_target=None))
        self.assertEqual(summary.progress.fiber, 100)
        self.assertEqual(summary.progress.sodium, 100)
        self.assertEqual(summary.warnings, [])

    def test_warning_thresholds_are_strict(self) -> None:
        # Exactly 50% fiber, 150% sodium, 70% protein: no warnings.
        meals = [_meal("2024-03-10", {"calories": 0, "protein": 70, "fiber": 12.5, "sodium": 3450})]
        summary = aggregate_day("2024-03-10", meals, _goal())
        self.assertEqual(summary.warnings, [])

    def test_thresholds_use_unrounded_totals(self) -> None:
        # Each total displays as the threshold value but sits just past it.
        meals = [_meal("2024-03-10", {"calories": 0, "protein": 69.96, "fiber": 12.46, "sodium": 3450.04})]
        summary = aggregate_day("2024-03-10", meals, _goal())
        self.assertEqual(summary.totals.fiber, 12.5)
        self.assertEqual(summary.totals.protein, 70.0)
        self.assertEqual(summary.totals.sodium, 3450.0)
        self.assertEqual(summary.warnings, ["Low fiber intake", "High sodium intake", "Low protein intake"])

    def test_totals_shown_to_one_decimal(self) -> None:
        meals = [_meal("2024-03-10", {"calories": 100.04, "carbs": 0.1}), _meal("2024-03-10", {"calories": 0, "carbs": 0.2})]
        summary = aggregate_day("2024-03-10", meals, None)
        self.assertEqual(summary.totals.calories, 100.0)
        self.assertEqual(summary.totals.carbs, 0.3)


class TestWeeklyReport(unittest.TestCase):
    def test_always_seven_days_and_fixed_divisor(self) -> None:
        by_day: Dict[str, List[MealEntry]] = {
            "2024-03-10": [_meal("2024-03-10", {"calories": 700, "protein": 35, "fiber": 7, "sugar": 14})],
        }
        report = weekly_report("2024-03-10", lambda day: by_day.get(day, []))
        self.assertEqual(report.period, "7 days")
        self.assertEqual(len(report.daily), 7)
        self.assertEqual(report.daily[0].date, "2024-03-04")
        self.assertEqual(report.daily[-1].date, "2024-03-10")
        self.assertEqual(report.daily[0].calories, 0)
        self.assertEqual(report.averages.calories, 100)
        self.assertEqual(report.averages.protein, 5)
        self.assertEqual(report.averages.fiber, 1)
        self.assertEqual(report.averages.sugar, 2)

    def test_meals_without_cache_inside_window(self) -> None:
        by_day: Dict[str, List[MealEntry]] = {
            "2024-03-10": [
                _meal("2024-03-10", {"calories": 700, "protein": 35.04}, "a"),
                _meal("2024-03-10", None, "b"),
            ],
            "2024-03-08": [_meal("2024-03-08", None, "c")],
        }
        report = weekly_report("2024-03-10", lambda day: by_day.get(day, []))
        self.assertEqual(report.daily[-1].calories, 700)
        self.assertEqual(report.daily[-1].protein, 35.0)
        self.assertEqual(report.daily[4].date, "2024-03-08")
        self.assertEqual(report.daily[4].calories, 0)
        self.assertEqual(report.averages.calories, 100)
        self.assertEqual(report.averages.protein, 5.0)

    def test_window_crosses_year_boundary(self) -> None:
        report = weekly_report("2024-01-02", lambda day: [])
        self.assertEqual([d.date for d in report.daily][:2], ["2023-12-27", "2023-12-28"])
        self.assertEqual(report.averages.calories, 0)


class TestMealTotals(unittest.TestCase):
    def setUp(self) -> None:
        self.oats = FoodItem(
            id="oats",
            name="Oats",
            nutrients=NutrientTotals(calories=380, protein=13, carbs=67, fat=7, fiber=10),
            created_at="2024-01-01T00:00:00",
        )

    def test_scales_per_100g(self) -> None:
        totals = compute_meal_totals([MealItem(food_id="oats", serving_grams=50)], {"oats": self.oats})
        self.assertEqual(totals.calories, 190)
        self.assertEqual(totals.protein, 6.5)
        self.assertEqual(totals.fiber, 5.0)
        self.assertIsNone(totals.sodium)

    def test_unknown_food_yields_no_cache(self) -> None:
        items = [MealItem(food_id="oats", serving_grams=50), MealItem(food_id="missing", serving_grams=10)]
        self.assertIsNone(compute_meal_totals(items, {"oats": self.oats}))


if __name__ == "__main__":
    unittest.main()
