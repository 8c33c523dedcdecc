# -*- coding: utf-8 -*-
"""Nutrition domain — API endpoints."""

from __future__ import annotations

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import Response

from ..auth.security import get_current_user_id
from ..reports.pdf_generator import WeeklyReportPDF
from ..storage import FOOD_ITEMS, MEAL_ENTRIES, NUTRITION_GOALS, Storage, get_storage
from ..params import parse_day_or_400
from ..utils import iso_now, new_record_id, today_str
from .aggregation import aggregate_day, compute_meal_totals, weekly_report
from .models import (
    DailyNutritionSummary,
    FoodItem,
    FoodItemCreate,
    MealEntry,
    MealEntryCreate,
    NutritionGoal,
    NutritionGoalCreate,
    NutritionGoalPatch,
    WeeklyReport,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Nutrition"])


@router.post("/foods", response_model=FoodItem, summary="Add a food to the catalog")
def create_food(request: FoodItemCreate, storage: Storage = Depends(get_storage)):
    food = FoodItem(id=new_record_id(), created_at=iso_now(), **request.model_dump())
    storage.insert(FOOD_ITEMS, food)
    logger.info("Added food %s (%s)", food.id, food.name)
    return food


@router.get("/foods/search", response_model=List[FoodItem], summary="Search foods by name, brand or barcode")
def search_foods(
    q: str = Query(..., min_length=1),
    limit: int = Query(default=20, ge=1, le=100),
    storage: Storage = Depends(get_storage),
):
    needle = q.strip().lower()

    def matches(food: FoodItem) -> bool:
        if food.barcode and food.barcode == q.strip():
            return True
        return needle in food.name.lower() or needle in (food.brand or "").lower()

    foods = storage.scan(FOOD_ITEMS, matches)
    # Verified entries and prefix matches first.
    foods.sort(key=lambda f: (not f.verified, not f.name.lower().startswith(needle), f.name.lower()))
    return foods[:limit]


@router.get("/foods/{food_id}", response_model=FoodItem, summary="Get a food")
def get_food(food_id: str, storage: Storage = Depends(get_storage)):
    food = storage.get(FOOD_ITEMS, food_id)
    if food is None:
        raise HTTPException(status_code=404, detail="Food not found")
    return food


@router.get("/meals", response_model=List[MealEntry], summary="List meals for a date")
def list_meals(
    date: str | None = Query(default=None, description="YYYY-MM-DD, defaults to today"),
    storage: Storage = Depends(get_storage),
    user_id: str = Depends(get_current_user_id),
):
    day = parse_day_or_400(date) or today_str()
    meals = storage.fetch_meals_for_date(user_id, day)
    meals.sort(key=lambda m: (m.datetime or "", m.created_at))
    return meals


@router.post("/log/meal", response_model=MealEntry, summary="Log a meal")
def log_meal(
    request: MealEntryCreate,
    storage: Storage = Depends(get_storage),
    user_id: str = Depends(get_current_user_id),
):
    payload = request.model_dump()
    if request.totals_cache is None and request.items:
        foods = {}
        for item in request.items:
            food = storage.get(FOOD_ITEMS, item.food_id)
            if food is not None:
                foods[food.id] = food
        totals = compute_meal_totals(request.items, foods)
        if totals is None:
            logger.warning("Meal logged without totals: unknown food in %s", [i.food_id for i in request.items])
        else:
            payload["totals_cache"] = totals.model_dump()
    now = iso_now()
    payload["datetime"] = payload.get("datetime") or now
    meal = MealEntry(id=new_record_id(), user_id=user_id, created_at=now, **payload)
    storage.insert(MEAL_ENTRIES, meal)
    logger.info("Logged %s meal %s on %s", meal.meal_type.value, meal.id, meal.date)
    return meal


@router.delete("/meals/{meal_id}", summary="Delete a meal")
def delete_meal(
    meal_id: str,
    storage: Storage = Depends(get_storage),
    user_id: str = Depends(get_current_user_id),
):
    meal = storage.get(MEAL_ENTRIES, meal_id)
    if meal is None or meal.user_id != user_id:
        raise HTTPException(status_code=404, detail="Meal not found")
    storage.delete(MEAL_ENTRIES, meal_id)
    return {"success": True}


@router.get("/nutrition-goals", response_model=Optional[NutritionGoal], summary="Active nutrition goal")
def get_nutrition_goal(storage: Storage = Depends(get_storage), user_id: str = Depends(get_current_user_id)):
    return storage.fetch_active_goal(user_id)


@router.post("/nutrition-goals", response_model=NutritionGoal, summary="Create a nutrition goal")
def create_nutrition_goal(
    request: NutritionGoalCreate,
    storage: Storage = Depends(get_storage),
    user_id: str = Depends(get_current_user_id),
):
    goal = NutritionGoal(id=new_record_id(), user_id=user_id, created_at=iso_now(), **request.model_dump())
    storage.insert(NUTRITION_GOALS, goal)
    logger.info("Created nutrition goal %s", goal.id)
    return goal


@router.put("/nutrition-goals/{goal_id}", response_model=NutritionGoal, summary="Update a nutrition goal")
def update_nutrition_goal(
    goal_id: str,
    patch: NutritionGoalPatch,
    storage: Storage = Depends(get_storage),
    user_id: str = Depends(get_current_user_id),
):
    goal = storage.get(NUTRITION_GOALS, goal_id)
    if goal is None or goal.user_id != user_id:
        raise HTTPException(status_code=404, detail="Nutrition goal not found")
    return storage.update(NUTRITION_GOALS, goal_id, patch)


@router.get("/day/{date}/totals", response_model=DailyNutritionSummary, summary="Daily totals and goal progress")
def day_totals(
    date: str,
    storage: Storage = Depends(get_storage),
    user_id: str = Depends(get_current_user_id),
):
    day = parse_day_or_400(date)
    meals = storage.fetch_meals_for_date(user_id, day)
    goal = storage.fetch_active_goal(user_id)
    return aggregate_day(day, meals, goal)


def _weekly(storage: Storage, user_id: str, today: str | None) -> WeeklyReport:
    end = parse_day_or_400(today, field="today") or today_str()
    return weekly_report(end, lambda day: storage.fetch_meals_for_date(user_id, day))


@router.get("/report/weekly", response_model=WeeklyReport, summary="7-day nutrition report")
def weekly(
    today: str | None = Query(default=None, description="Last day of the window, YYYY-MM-DD"),
    storage: Storage = Depends(get_storage),
    user_id: str = Depends(get_current_user_id),
):
    return _weekly(storage, user_id, today)


@router.get("/report/weekly.pdf", summary="7-day nutrition report as PDF")
def weekly_pdf(
    today: str | None = Query(default=None, description="Last day of the window, YYYY-MM-DD"),
    storage: Storage = Depends(get_storage),
    user_id: str = Depends(get_current_user_id),
):
    report = _weekly(storage, user_id, today)
    goal = storage.fetch_active_goal(user_id)
    content = WeeklyReportPDF().generate(report, goal=goal)
    filename = f"nutrition-week-{report.daily[-1].date}.pdf"
    return Response(
        content=content,
        media_type="application/pdf",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
