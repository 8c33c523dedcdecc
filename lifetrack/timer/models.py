# -*- coding: utf-8 -*-
"""Timer — Pydantic models."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field, field_validator

from ..validation import check_day


class SessionType(str, Enum):
    pomodoro = "pomodoro"
    short_break = "break"
    long_break = "long-break"


class TimerSessionCreate(BaseModel):
    duration: int = Field(..., gt=0, description="Minutes")
    type: SessionType = SessionType.pomodoro
    completed: bool = False
    date: str = Field(..., pattern=r"^\d{4}-\d{2}-\d{2}$", description="YYYY-MM-DD")

    @field_validator("date")
    @classmethod
    def _valid_day(cls, value: str) -> str:
        return check_day(value)


class TimerSession(TimerSessionCreate):
    id: str
    user_id: str
    created_at: str
