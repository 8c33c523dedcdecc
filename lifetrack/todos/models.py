# -*- coding: utf-8 -*-
"""Todos — Pydantic models."""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import ClassVar, Dict, List, Optional, Tuple

from pydantic import BaseModel, Field, field_validator

from ..validation import PatchModel, check_day

_HHMM = r"^([01]\d|2[0-3]):[0-5]\d$"


class TodoPriority(str, Enum):
    low = "low"
    medium = "medium"
    high = "high"
    urgent = "urgent"


class TodoStatus(str, Enum):
    pending = "pending"
    in_progress = "in_progress"
    completed = "completed"
    cancelled = "cancelled"


class TodoCategoryCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=120)
    color: str = Field("#3B82F6", pattern=r"^#[0-9A-Fa-f]{6}$")
    icon: str = "📝"
    description: Optional[str] = None
    order_index: int = Field(0, ge=0)
    is_archived: bool = False


class TodoCategory(TodoCategoryCreate):
    id: str
    user_id: str
    created_at: str


class TodoCategoryPatch(PatchModel):
    required_fields: ClassVar[Tuple[str, ...]] = ("name", "color", "icon", "order_index", "is_archived")

    name: Optional[str] = Field(None, min_length=1, max_length=120)
    color: Optional[str] = Field(None, pattern=r"^#[0-9A-Fa-f]{6}$")
    icon: Optional[str] = None
    description: Optional[str] = None
    order_index: Optional[int] = Field(None, ge=0)
    is_archived: Optional[bool] = None


class TodoCreate(BaseModel):
    category_id: str = Field(..., min_length=1)
    title: str = Field(..., min_length=1, max_length=300)
    description: Optional[str] = None
    priority: TodoPriority = TodoPriority.medium
    status: TodoStatus = TodoStatus.pending
    due_date: Optional[str] = Field(None, pattern=r"^\d{4}-\d{2}-\d{2}$", description="YYYY-MM-DD")
    due_time: Optional[str] = Field(None, pattern=_HHMM, description="HH:MM")
    estimated_minutes: Optional[int] = Field(None, ge=0)
    tags: List[str] = Field(default_factory=list)
    dependencies: List[str] = Field(default_factory=list, description="Ids of todos this one waits on")
    notes: Optional[str] = Field(None, max_length=2000)
    order_index: int = Field(0, ge=0)

    @field_validator("due_date")
    @classmethod
    def _valid_due_date(cls, value: Optional[str]) -> Optional[str]:
        return check_day(value)


class Todo(TodoCreate):
    id: str
    user_id: str
    completed_at: Optional[datetime] = None
    created_at: str


class TodoPatch(PatchModel):
    required_fields: ClassVar[Tuple[str, ...]] = (
        "category_id",
        "title",
        "priority",
        "status",
        "tags",
        "dependencies",
        "order_index",
    )

    category_id: Optional[str] = Field(None, min_length=1)
    title: Optional[str] = Field(None, min_length=1, max_length=300)
    description: Optional[str] = None
    priority: Optional[TodoPriority] = None
    status: Optional[TodoStatus] = None
    due_date: Optional[str] = Field(None, pattern=r"^\d{4}-\d{2}-\d{2}$")
    due_time: Optional[str] = Field(None, pattern=_HHMM)
    estimated_minutes: Optional[int] = Field(None, ge=0)
    tags: Optional[List[str]] = None
    dependencies: Optional[List[str]] = None
    notes: Optional[str] = Field(None, max_length=2000)
    order_index: Optional[int] = Field(None, ge=0)

    @field_validator("due_date")
    @classmethod
    def _valid_due_date(cls, value: Optional[str]) -> Optional[str]:
        return check_day(value)


class TodoUpdate(TodoPatch):
    """Server-side patch: a client patch plus the derived ``completed_at``."""

    completed_at: Optional[datetime] = None


class TodoSummary(BaseModel):
    total: int = 0
    by_status: Dict[str, int] = Field(default_factory=dict)
    completion_rate: int = Field(0, ge=0, le=100, description="Completed share of non-cancelled todos")
    overdue: int = 0
