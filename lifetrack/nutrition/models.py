# -*- coding: utf-8 -*-
"""Nutrition domain — Pydantic models."""

from __future__ import annotations

from enum import Enum
from typing import ClassVar, List, Optional, Tuple

from pydantic import BaseModel, Field, field_validator

from ..validation import PatchModel, check_day


class NutrientTotals(BaseModel):
    """Macro totals; micros stay ``None`` when the source did not report them."""

    calories: float = Field(0.0, ge=0)
    protein: float = Field(0.0, ge=0)
    carbs: float = Field(0.0, ge=0)
    fat: float = Field(0.0, ge=0)
    fiber: Optional[float] = Field(None, ge=0)
    sugar: Optional[float] = Field(None, ge=0)
    sodium: Optional[float] = Field(None, ge=0, description="mg")


class DayTotals(BaseModel):
    calories: float = 0.0
    protein: float = 0.0
    carbs: float = 0.0
    fat: float = 0.0
    fiber: float = 0.0
    sugar: float = 0.0
    sodium: float = 0.0


class Serving(BaseModel):
    unit: str = Field(..., min_length=1, description="e.g. 'cup', 'slice'")
    grams: float = Field(..., gt=0)
    description: Optional[str] = None


class FoodSource(str, Enum):
    usda = "usda"
    openfoodfacts = "openfoodfacts"
    user = "user"


class FoodItemCreate(BaseModel):
    name: str = Field(..., min_length=1)
    brand: Optional[str] = None
    barcode: Optional[str] = None
    servings: List[Serving] = Field(default_factory=list)
    nutrients: NutrientTotals = Field(..., description="Per 100 g")
    source: FoodSource = FoodSource.user
    verified: bool = False


class FoodItem(FoodItemCreate):
    id: str
    created_at: str


class MealType(str, Enum):
    breakfast = "breakfast"
    lunch = "lunch"
    dinner = "dinner"
    snack = "snack"


class MealSource(str, Enum):
    search = "search"
    barcode = "barcode"
    manual = "manual"


class MealItem(BaseModel):
    food_id: str = Field(..., min_length=1)
    quantity: float = Field(1.0, gt=0)
    serving_grams: float = Field(..., gt=0, description="Total grams eaten (serving size x quantity)")
    notes: Optional[str] = None


class MealEntryCreate(BaseModel):
    date: str = Field(..., pattern=r"^\d{4}-\d{2}-\d{2}$", description="YYYY-MM-DD")
    meal_type: MealType
    datetime: Optional[str] = Field(None, description="ISO8601 timestamp, defaults to now")
    items: List[MealItem] = Field(default_factory=list)
    source: MealSource = MealSource.manual
    totals_cache: Optional[NutrientTotals] = None

    @field_validator("date")
    @classmethod
    def _valid_day(cls, value: str) -> str:
        return check_day(value)


class MealEntry(MealEntryCreate):
    id: str
    user_id: str
    created_at: str


class NutritionGoalCreate(BaseModel):
    calorie_target: int = Field(..., gt=0)
    protein_target: int = Field(..., gt=0, description="grams")
    carbs_target: int = Field(..., gt=0, description="grams")
    fat_target: int = Field(..., gt=0, description="grams")
    fiber_target: Optional[int] = Field(25, gt=0, description="grams")
    sodium_target: Optional[int] = Field(2300, gt=0, description="mg")
    is_active: bool = True


class NutritionGoal(NutritionGoalCreate):
    id: str
    user_id: str
    created_at: str


class NutritionGoalPatch(PatchModel):
    required_fields: ClassVar[Tuple[str, ...]] = (
        "calorie_target",
        "protein_target",
        "carbs_target",
        "fat_target",
        "is_active",
    )

    calorie_target: Optional[int] = Field(None, gt=0)
    protein_target: Optional[int] = Field(None, gt=0)
    carbs_target: Optional[int] = Field(None, gt=0)
    fat_target: Optional[int] = Field(None, gt=0)
    fiber_target: Optional[int] = Field(None, gt=0)
    sodium_target: Optional[int] = Field(None, gt=0)
    is_active: Optional[bool] = None


class NutrientProgress(BaseModel):
    """Percent of target reached, per nutrient."""

    calories: int = 0
    protein: int = 0
    carbs: int = 0
    fat: int = 0
    fiber: int = 0
    sodium: int = 0


class DailyNutritionSummary(BaseModel):
    date: str = Field(..., description="YYYY-MM-DD")
    totals: DayTotals
    goals: Optional[NutritionGoal] = None
    progress: Optional[NutrientProgress] = None
    warnings: List[str] = Field(default_factory=list)
    meal_count: int = Field(0, ge=0)


class WeeklyDay(BaseModel):
    date: str
    calories: float = 0.0
    protein: float = 0.0
    fiber: float = 0.0
    sugar: float = 0.0


class WeeklyAverages(BaseModel):
    calories: float = 0.0
    protein: float = 0.0
    fiber: float = 0.0
    sugar: float = 0.0


class WeeklyReport(BaseModel):
    period: str = "7 days"
    averages: WeeklyAverages
    daily: List[WeeklyDay]
