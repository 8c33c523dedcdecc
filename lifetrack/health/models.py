# -*- coding: utf-8 -*-
"""Health domain — Pydantic models."""

from __future__ import annotations

from typing import ClassVar, Optional, Tuple

from pydantic import BaseModel, Field, field_validator

from ..validation import PatchModel, check_day


class HealthEntryCreate(BaseModel):
    date: str = Field(..., pattern=r"^\d{4}-\d{2}-\d{2}$", description="YYYY-MM-DD")
    sleep_hours: Optional[float] = Field(None, ge=0, le=24)
    sleep_quality: Optional[int] = Field(None, ge=1, le=10)
    exercise_minutes: int = Field(0, ge=0)
    exercise_type: Optional[str] = None
    calories_burned: int = Field(0, ge=0)
    mood: Optional[int] = Field(None, ge=1, le=10)
    notes: Optional[str] = Field(None, max_length=2000)

    @field_validator("date")
    @classmethod
    def _valid_day(cls, value: str) -> str:
        return check_day(value)


class HealthEntry(HealthEntryCreate):
    id: str
    user_id: str
    created_at: str


class HealthEntryPatch(PatchModel):
    required_fields: ClassVar[Tuple[str, ...]] = ("date", "exercise_minutes", "calories_burned")

    date: Optional[str] = Field(None, pattern=r"^\d{4}-\d{2}-\d{2}$")
    sleep_hours: Optional[float] = Field(None, ge=0, le=24)
    sleep_quality: Optional[int] = Field(None, ge=1, le=10)
    exercise_minutes: Optional[int] = Field(None, ge=0)
    exercise_type: Optional[str] = None
    calories_burned: Optional[int] = Field(None, ge=0)
    mood: Optional[int] = Field(None, ge=1, le=10)
    notes: Optional[str] = Field(None, max_length=2000)

    @field_validator("date")
    @classmethod
    def _valid_day(cls, value: Optional[str]) -> Optional[str]:
        return check_day(value)
