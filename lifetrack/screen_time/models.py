# -*- coding: utf-8 -*-
"""Screen time — Pydantic models."""

from __future__ import annotations

from typing import ClassVar, List, Optional, Tuple

from pydantic import BaseModel, Field, field_validator

from ..validation import PatchModel, check_day


class ScreenTimeAppCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=120)
    category: str = Field("Other", max_length=64, description="Social, Productivity, Entertainment, Games, ...")
    is_excluded: bool = Field(False, description="Hidden from usage totals")


class ScreenTimeApp(ScreenTimeAppCreate):
    id: str
    created_at: str


class ScreenTimeAppPatch(PatchModel):
    required_fields: ClassVar[Tuple[str, ...]] = ("name", "category", "is_excluded")

    name: Optional[str] = Field(None, min_length=1, max_length=120)
    category: Optional[str] = Field(None, max_length=64)
    is_excluded: Optional[bool] = None


class ScreenTimeEntryCreate(BaseModel):
    app_id: str = Field(..., min_length=1)
    date: str = Field(..., pattern=r"^\d{4}-\d{2}-\d{2}$", description="YYYY-MM-DD")
    minutes: int = Field(..., ge=0, le=1440)

    @field_validator("date")
    @classmethod
    def _valid_day(cls, value: str) -> str:
        return check_day(value)


class ScreenTimeEntry(ScreenTimeEntryCreate):
    id: str
    user_id: str
    created_at: str


class ScreenTimeLimitCreate(BaseModel):
    app_id: Optional[str] = Field(None, description="None limits the daily total across apps")
    limit_minutes: int = Field(..., gt=0, le=1440)
    is_active: bool = True


class ScreenTimeLimit(ScreenTimeLimitCreate):
    id: str
    user_id: str
    created_at: str


class ScreenTimeLimitPatch(PatchModel):
    required_fields: ClassVar[Tuple[str, ...]] = ("limit_minutes", "is_active")

    limit_minutes: Optional[int] = Field(None, gt=0, le=1440)
    is_active: Optional[bool] = None


class AppUsage(BaseModel):
    app_id: str
    app_name: str
    category: str
    minutes: int = 0
    limit_minutes: Optional[int] = None
    over_limit: bool = False


class DailyScreenTime(BaseModel):
    date: str
    total_minutes: int = 0
    limit_minutes: Optional[int] = None
    remaining_minutes: Optional[int] = None
    over_limit: bool = False
    apps: List[AppUsage] = Field(default_factory=list)
