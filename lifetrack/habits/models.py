# -*- coding: utf-8 -*-
"""Habits — Pydantic models."""

from __future__ import annotations

from enum import Enum
from typing import ClassVar, List, Optional, Tuple

from pydantic import BaseModel, Field, field_validator

from ..validation import PatchModel, check_day


class TrackingType(str, Enum):
    boolean = "boolean"
    numeric = "numeric"
    duration = "duration"
    custom = "custom"


class Frequency(str, Enum):
    daily = "daily"
    weekly = "weekly"
    custom = "custom"


class HabitCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    description: Optional[str] = None
    tracking_type: TrackingType = TrackingType.boolean
    unit: Optional[str] = Field(None, description="e.g. glasses, pages, minutes")
    target_value: Optional[float] = Field(None, ge=0)
    frequency: Frequency = Frequency.daily
    frequency_days: Optional[List[str]] = Field(None, description='e.g. ["monday", "tuesday"]')
    icon: Optional[str] = None
    color: str = Field("#1976D2", pattern=r"^#[0-9A-Fa-f]{6}$")
    is_archived: bool = False


class Habit(HabitCreate):
    id: str
    user_id: str
    created_at: str


class HabitPatch(PatchModel):
    required_fields: ClassVar[Tuple[str, ...]] = ("name", "tracking_type", "frequency", "color", "is_archived")

    name: Optional[str] = Field(None, min_length=1, max_length=200)
    description: Optional[str] = None
    tracking_type: Optional[TrackingType] = None
    unit: Optional[str] = None
    target_value: Optional[float] = Field(None, ge=0)
    frequency: Optional[Frequency] = None
    frequency_days: Optional[List[str]] = None
    icon: Optional[str] = None
    color: Optional[str] = Field(None, pattern=r"^#[0-9A-Fa-f]{6}$")
    is_archived: Optional[bool] = None


class HabitEntryCreate(BaseModel):
    habit_id: str = Field(..., min_length=1)
    date: str = Field(..., pattern=r"^\d{4}-\d{2}-\d{2}$", description="YYYY-MM-DD")
    completed: bool = False
    value: Optional[float] = Field(None, description="Numeric amount, e.g. 8 glasses")
    notes: Optional[str] = Field(None, max_length=2000)

    @field_validator("date")
    @classmethod
    def _valid_day(cls, value: Optional[str]) -> Optional[str]:
        return check_day(value)


class HabitEntry(HabitEntryCreate):
    id: str
    user_id: str
    created_at: str


class HabitEntryPatch(PatchModel):
    required_fields: ClassVar[Tuple[str, ...]] = ("date", "completed")

    date: Optional[str] = Field(None, pattern=r"^\d{4}-\d{2}-\d{2}$")
    completed: Optional[bool] = None
    value: Optional[float] = None
    notes: Optional[str] = Field(None, max_length=2000)

    @field_validator("date")
    @classmethod
    def _valid_day(cls, value: Optional[str]) -> Optional[str]:
        return check_day(value)


class HabitStats(BaseModel):
    completion_rate: int = Field(0, ge=0, le=100)
    current_streak: int = Field(0, ge=0)
    best_streak: int = Field(0, ge=0)
    total_completions: int = Field(0, ge=0)
    last_completed_date: Optional[str] = None


class HabitWithStats(Habit):
    stats: HabitStats
