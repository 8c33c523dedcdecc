# -*- coding: utf-8 -*-
"""Nutrition aggregation: per-meal totals, daily progress, 7-day report.

Every function here is pure: callers fetch the meals and goal first and pass
snapshots in. Missing nutrient fields count as zero and meals without a
``totals_cache`` are skipped, so a partially logged day never fails.
"""

from __future__ import annotations

from typing import Callable, Iterable, List, Mapping, Optional, Sequence

from ..utils import iter_window, percent
from .models import (
    DailyNutritionSummary,
    DayTotals,
    FoodItem,
    MealEntry,
    MealItem,
    NutrientProgress,
    NutrientTotals,
    NutritionGoal,
    WeeklyAverages,
    WeeklyDay,
    WeeklyReport,
)

FIBER_TARGET_DEFAULT = 25
SODIUM_TARGET_DEFAULT = 2300
WEEKLY_WINDOW_DAYS = 7

LOW_FIBER_RATIO = 0.5
HIGH_SODIUM_RATIO = 1.5
LOW_PROTEIN_RATIO = 0.7


def sum_meal_totals(meals: Iterable[MealEntry]) -> DayTotals:
    """Unrounded sums; round with ``rounded_totals`` only for display."""
    totals = DayTotals()
    for meal in meals:
        cache = meal.totals_cache
        if cache is None:
            continue
        totals.calories += cache.calories
        totals.protein += cache.protein
        totals.carbs += cache.carbs
        totals.fat += cache.fat
        totals.fiber += cache.fiber or 0.0
        totals.sugar += cache.sugar or 0.0
        totals.sodium += cache.sodium or 0.0
    return totals


def rounded_totals(totals: DayTotals) -> DayTotals:
    return DayTotals(**{name: round(value, 1) for name, value in totals.model_dump().items()})


def _fiber_target(goal: NutritionGoal) -> int:
    return goal.fiber_target or FIBER_TARGET_DEFAULT


def _sodium_target(goal: NutritionGoal) -> int:
    return goal.sodium_target or SODIUM_TARGET_DEFAULT


def goal_progress(totals: DayTotals, goal: NutritionGoal) -> NutrientProgress:
    return NutrientProgress(
        calories=percent(totals.calories, goal.calorie_target),
        protein=percent(totals.protein, goal.protein_target),
        carbs=percent(totals.carbs, goal.carbs_target),
        fat=percent(totals.fat, goal.fat_target),
        fiber=percent(totals.fiber, _fiber_target(goal)),
        sodium=percent(totals.sodium, _sodium_target(goal)),
    )


def nutrition_warnings(totals: DayTotals, goal: Optional[NutritionGoal]) -> List[str]:
    if goal is None:
        return []
    warnings: List[str] = []
    if totals.fiber < _fiber_target(goal) * LOW_FIBER_RATIO:
        warnings.append("Low fiber intake")
    if totals.sodium > _sodium_target(goal) * HIGH_SODIUM_RATIO:
        warnings.append("High sodium intake")
    if totals.protein < goal.protein_target * LOW_PROTEIN_RATIO:
        warnings.append("Low protein intake")
    return warnings


def aggregate_day(day: str, meals: Sequence[MealEntry], goal: Optional[NutritionGoal]) -> DailyNutritionSummary:
    totals = sum_meal_totals(meals)
    return DailyNutritionSummary(
        date=day,
        totals=rounded_totals(totals),
        goals=goal,
        progress=goal_progress(totals, goal) if goal is not None else None,
        warnings=nutrition_warnings(totals, goal),
        meal_count=len(meals),
    )


def weekly_report(today: str, meals_for_date: Callable[[str], Sequence[MealEntry]]) -> WeeklyReport:
    """Seven-day report ending at ``today`` (inclusive), oldest day first.

    Averages always divide by the window length: days without meals count as
    zero rather than being left out.
    """
    days = iter_window(today, WEEKLY_WINDOW_DAYS)
    raw = [sum_meal_totals(meals_for_date(day)) for day in days]
    daily: List[WeeklyDay] = []
    for day, totals in zip(days, raw):
        shown = rounded_totals(totals)
        daily.append(
            WeeklyDay(
                date=day,
                calories=shown.calories,
                protein=shown.protein,
                fiber=shown.fiber,
                sugar=shown.sugar,
            )
        )

    def average(field: str) -> float:
        return round(sum(getattr(t, field) for t in raw) / WEEKLY_WINDOW_DAYS, 1)

    return WeeklyReport(
        period=f"{WEEKLY_WINDOW_DAYS} days",
        averages=WeeklyAverages(
            calories=average("calories"),
            protein=average("protein"),
            fiber=average("fiber"),
            sugar=average("sugar"),
        ),
        daily=daily,
    )


def compute_meal_totals(items: Iterable[MealItem], foods: Mapping[str, FoodItem]) -> Optional[NutrientTotals]:
    """Build a ``totals_cache`` from per-100 g food nutrients.

    Returns ``None`` when any item references an unknown food; the meal is then
    stored without a cache and left out of the daily totals.
    """
    totals = DayTotals()
    has_micro = {"fiber": False, "sugar": False, "sodium": False}
    for item in items:
        food = foods.get(item.food_id)
        if food is None:
            return None
        factor = item.serving_grams / 100.0
        n = food.nutrients
        totals.calories += n.calories * factor
        totals.protein += n.protein * factor
        totals.carbs += n.carbs * factor
        totals.fat += n.fat * factor
        for name in has_micro:
            value = getattr(n, name)
            if value is not None:
                has_micro[name] = True
                setattr(totals, name, getattr(totals, name) + value * factor)
    return NutrientTotals(
        calories=round(totals.calories),
        protein=round(totals.protein, 1),
        carbs=round(totals.carbs, 1),
        fat=round(totals.fat, 1),
        fiber=round(totals.fiber, 1) if has_micro["fiber"] else None,
        sugar=round(totals.sugar, 1) if has_micro["sugar"] else None,
        sodium=round(totals.sodium, 1) if has_micro["sodium"] else None,
    )
