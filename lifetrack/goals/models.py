# -*- coding: utf-8 -*-
"""Goals — Pydantic models."""

from __future__ import annotations

from typing import ClassVar, Optional, Tuple

from pydantic import BaseModel, Field, field_validator

from ..validation import PatchModel, check_day


class GoalCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=200)
    description: Optional[str] = None
    deadline: Optional[str] = Field(None, pattern=r"^\d{4}-\d{2}-\d{2}$", description="YYYY-MM-DD")
    progress: int = Field(0, ge=0, le=100)
    category: str = Field("personal", max_length=64)

    @field_validator("deadline")
    @classmethod
    def _valid_deadline(cls, value: Optional[str]) -> Optional[str]:
        return check_day(value)


class Goal(GoalCreate):
    id: str
    user_id: str
    created_at: str


class GoalPatch(PatchModel):
    required_fields: ClassVar[Tuple[str, ...]] = ("title", "progress", "category")

    title: Optional[str] = Field(None, min_length=1, max_length=200)
    description: Optional[str] = None
    deadline: Optional[str] = Field(None, pattern=r"^\d{4}-\d{2}-\d{2}$")
    progress: Optional[int] = Field(None, ge=0, le=100)
    category: Optional[str] = Field(None, max_length=64)

    @field_validator("deadline")
    @classmethod
    def _valid_deadline(cls, value: Optional[str]) -> Optional[str]:
        return check_day(value)
