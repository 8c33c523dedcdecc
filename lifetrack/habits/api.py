# -*- coding: utf-8 -*-
"""Habits — API endpoints."""

from __future__ import annotations

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query

from ..auth.security import get_current_user_id
from ..storage import HABIT_ENTRIES, HABITS, Storage, get_storage
from ..params import parse_day_or_400
from ..utils import iso_now, new_record_id, today_str
from .models import (
    Habit,
    HabitCreate,
    HabitEntry,
    HabitEntryCreate,
    HabitEntryPatch,
    HabitPatch,
    HabitStats,
    HabitWithStats,
)
from .streaks import compute_habit_stats

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Habits"])


def _owned_habit_or_404(storage: Storage, habit_id: str, user_id: str) -> Habit:
    habit = storage.get(HABITS, habit_id)
    if habit is None or habit.user_id != user_id:
        raise HTTPException(status_code=404, detail="Habit not found")
    return habit


@router.get("/habits", response_model=List[HabitWithStats], summary="List habits with streak stats")
def list_habits(
    today: str | None = Query(default=None, description="YYYY-MM-DD, defaults to the server date"),
    storage: Storage = Depends(get_storage),
    user_id: str = Depends(get_current_user_id),
):
    day = parse_day_or_400(today, field="today") or today_str()
    habits = storage.scan(HABITS, lambda h: h.user_id == user_id)
    habits.sort(key=lambda h: h.created_at)
    return [
        HabitWithStats(
            **habit.model_dump(),
            stats=compute_habit_stats(storage.fetch_entries_for_habit(habit.id), day),
        )
        for habit in habits
    ]


@router.post("/habits", response_model=Habit, summary="Create a habit")
def create_habit(
    request: HabitCreate,
    storage: Storage = Depends(get_storage),
    user_id: str = Depends(get_current_user_id),
):
    habit = Habit(id=new_record_id(), user_id=user_id, created_at=iso_now(), **request.model_dump())
    storage.insert(HABITS, habit)
    logger.info("Created habit %s (%s)", habit.id, habit.name)
    return habit


@router.get("/habits/{habit_id}/stats", response_model=HabitStats, summary="Streak stats for one habit")
def habit_stats(
    habit_id: str,
    today: str | None = Query(default=None, description="YYYY-MM-DD"),
    storage: Storage = Depends(get_storage),
    user_id: str = Depends(get_current_user_id),
):
    _owned_habit_or_404(storage, habit_id, user_id)
    day = parse_day_or_400(today, field="today") or today_str()
    return compute_habit_stats(storage.fetch_entries_for_habit(habit_id), day)


@router.put("/habits/{habit_id}", response_model=Habit, summary="Update a habit")
def update_habit(
    habit_id: str,
    patch: HabitPatch,
    storage: Storage = Depends(get_storage),
    user_id: str = Depends(get_current_user_id),
):
    _owned_habit_or_404(storage, habit_id, user_id)
    habit = storage.update(HABITS, habit_id, patch)
    if habit is None:
        raise HTTPException(status_code=404, detail="Habit not found")
    return habit


@router.delete("/habits/{habit_id}", summary="Delete a habit and its entries")
def delete_habit(
    habit_id: str,
    storage: Storage = Depends(get_storage),
    user_id: str = Depends(get_current_user_id),
):
    _owned_habit_or_404(storage, habit_id, user_id)
    if not storage.delete_habit(habit_id):
        raise HTTPException(status_code=404, detail="Habit not found")
    return {"success": True}


@router.get("/habit-entries", response_model=List[HabitEntry], summary="List habit entries")
def list_habit_entries(
    date: str | None = Query(default=None, description="YYYY-MM-DD"),
    habit_id: str | None = Query(default=None),
    storage: Storage = Depends(get_storage),
    user_id: str = Depends(get_current_user_id),
):
    day = parse_day_or_400(date)

    def matches(entry: HabitEntry) -> bool:
        if entry.user_id != user_id:
            return False
        if day and entry.date != day:
            return False
        return not habit_id or entry.habit_id == habit_id

    entries = storage.scan(HABIT_ENTRIES, matches)
    entries.sort(key=lambda e: (e.date, e.created_at), reverse=True)
    return entries


@router.post("/habit-entries", response_model=HabitEntry, summary="Log a habit entry")
def create_habit_entry(
    request: HabitEntryCreate,
    storage: Storage = Depends(get_storage),
    user_id: str = Depends(get_current_user_id),
):
    _owned_habit_or_404(storage, request.habit_id, user_id)
    entry = HabitEntry(id=new_record_id(), user_id=user_id, created_at=iso_now(), **request.model_dump())
    storage.insert(HABIT_ENTRIES, entry)
    logger.info("Logged entry %s for habit %s on %s", entry.id, entry.habit_id, entry.date)
    return entry


@router.put("/habit-entries/{entry_id}", response_model=HabitEntry, summary="Update a habit entry")
def update_habit_entry(
    entry_id: str,
    patch: HabitEntryPatch,
    storage: Storage = Depends(get_storage),
    user_id: str = Depends(get_current_user_id),
):
    current = storage.get(HABIT_ENTRIES, entry_id)
    if current is None or current.user_id != user_id:
        raise HTTPException(status_code=404, detail="Habit entry not found")
    return storage.update(HABIT_ENTRIES, entry_id, patch)


@router.delete("/habit-entries/{entry_id}", summary="Delete a habit entry")
def delete_habit_entry(
    entry_id: str,
    storage: Storage = Depends(get_storage),
    user_id: str = Depends(get_current_user_id),
):
    current = storage.get(HABIT_ENTRIES, entry_id)
    if current is None or current.user_id != user_id or not storage.delete(HABIT_ENTRIES, entry_id):
        raise HTTPException(status_code=404, detail="Habit entry not found")
    return {"success": True}
