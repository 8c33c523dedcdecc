# -*- coding: utf-8 -*-
"""Workouts — Pydantic models."""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from ..validation import check_day


class ExerciseCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=120)


class Exercise(ExerciseCreate):
    id: str
    is_custom: bool = False
    created_at: str


class Workout(BaseModel):
    id: str
    user_id: str
    started_at: datetime
    ended_at: Optional[datetime] = None
    notes: Optional[str] = None
    created_at: str


class WorkoutPatch(BaseModel):
    ended_at: Optional[datetime] = None
    notes: Optional[str] = Field(None, max_length=2000)


class FinishWorkoutRequest(BaseModel):
    notes: Optional[str] = Field(None, max_length=2000)


class SetCreate(BaseModel):
    exercise_id: str = Field(..., min_length=1)
    weight: float = Field(..., ge=0, description="kg or lb; stored as given")
    reps: int = Field(..., ge=0)


class WorkoutSet(SetCreate):
    id: str
    workout_id: str
    order_index: int = Field(0, ge=0)
    created_at: str


class ExerciseSummary(BaseModel):
    exercise_id: str
    exercise_name: str
    set_count: int = 0
    total_reps: int = 0
    total_volume: float = 0.0
    average_weight: float = 0.0


class WorkoutDetail(BaseModel):
    workout: Workout
    sets: List[WorkoutSet]
    exercises: List[ExerciseSummary]
    duration_minutes: int = 0


class WorkoutHistoryItem(Workout):
    duration_minutes: int = 0
    exercise_count: int = 0
    set_count: int = 0
    total_volume: float = 0.0


class ExportRow(BaseModel):
    date: str
    exercise: str
    sets: int
    total_reps: int
    average_weight: float
    total_volume: float
    duration_minutes: int


class CardioType(str, Enum):
    run = "run"
    ride = "ride"
    row = "row"
    other = "other"


class CardioEntryCreate(BaseModel):
    date: str = Field(..., pattern=r"^\d{4}-\d{2}-\d{2}$", description="YYYY-MM-DD")
    type: CardioType
    duration_sec: int = Field(..., gt=0)
    distance_meters: Optional[float] = Field(None, ge=0)
    notes: Optional[str] = Field(None, max_length=2000)

    @field_validator("date")
    @classmethod
    def _valid_day(cls, value: str) -> str:
        return check_day(value)


class CardioEntry(CardioEntryCreate):
    id: str
    user_id: str
    created_at: str
