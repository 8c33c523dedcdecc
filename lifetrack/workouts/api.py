# -*- coding: utf-8 -*-
"""Workouts — API endpoints."""

from __future__ import annotations

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import Response

from ..auth.security import get_current_user_id
from ..storage import CARDIO_ENTRIES, EXERCISES, SETS, WORKOUTS, Storage, get_storage
from ..utils import iso_now, new_record_id, utc_now
from .export import rows_to_csv
from .models import (
    CardioEntry,
    CardioEntryCreate,
    Exercise,
    ExerciseCreate,
    FinishWorkoutRequest,
    SetCreate,
    Workout,
    WorkoutDetail,
    WorkoutHistoryItem,
    WorkoutPatch,
    WorkoutSet,
)
from .summary import export_rows, summarize_sets, workout_duration_minutes

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Workouts"])


def _owned_workout_or_404(storage: Storage, workout_id: str, user_id: str) -> Workout:
    workout = storage.get(WORKOUTS, workout_id)
    if workout is None or workout.user_id != user_id:
        raise HTTPException(status_code=404, detail="Workout not found")
    return workout


@router.get("/exercises", response_model=List[Exercise], summary="List exercises")
def list_exercises(storage: Storage = Depends(get_storage)):
    exercises = storage.scan(EXERCISES)
    exercises.sort(key=lambda e: (e.is_custom, e.name.lower()))
    return exercises


@router.post("/exercises", response_model=Exercise, summary="Create a custom exercise")
def create_exercise(request: ExerciseCreate, storage: Storage = Depends(get_storage)):
    name = request.name.strip()
    if any(e.name.lower() == name.lower() for e in storage.scan(EXERCISES)):
        raise HTTPException(status_code=409, detail="Exercise already exists")
    exercise = Exercise(id=new_record_id(), name=name, is_custom=True, created_at=iso_now())
    storage.insert(EXERCISES, exercise)
    logger.info("Created custom exercise %s (%s)", exercise.id, exercise.name)
    return exercise


@router.post("/workouts/start", response_model=Workout, summary="Start a workout")
def start_workout(storage: Storage = Depends(get_storage), user_id: str = Depends(get_current_user_id)):
    workout = Workout(id=new_record_id(), user_id=user_id, started_at=utc_now(), created_at=iso_now())
    storage.insert(WORKOUTS, workout)
    logger.info("Started workout %s", workout.id)
    return workout


@router.post("/workouts/{workout_id}/finish", response_model=Workout, summary="Finish a workout")
def finish_workout(
    workout_id: str,
    request: FinishWorkoutRequest | None = None,
    storage: Storage = Depends(get_storage),
    user_id: str = Depends(get_current_user_id),
):
    workout = _owned_workout_or_404(storage, workout_id, user_id)
    if workout.ended_at is not None:
        raise HTTPException(status_code=409, detail="Workout already finished")
    changes = {"ended_at": utc_now()}
    if request is not None and request.notes is not None:
        changes["notes"] = request.notes
    finished = storage.update(WORKOUTS, workout_id, WorkoutPatch(**changes))
    logger.info("Finished workout %s", workout_id)
    return finished


@router.post("/workouts/{workout_id}/set", response_model=WorkoutSet, summary="Log a set")
def add_set(
    workout_id: str,
    request: SetCreate,
    storage: Storage = Depends(get_storage),
    user_id: str = Depends(get_current_user_id),
):
    _owned_workout_or_404(storage, workout_id, user_id)
    order_index = len(storage.fetch_sets_for_workout(workout_id))
    workout_set = WorkoutSet(
        id=new_record_id(),
        workout_id=workout_id,
        order_index=order_index,
        created_at=iso_now(),
        **request.model_dump(),
    )
    return storage.insert(SETS, workout_set)


@router.get("/workouts/history", response_model=List[WorkoutHistoryItem], summary="Workout history, newest first")
def workout_history(storage: Storage = Depends(get_storage), user_id: str = Depends(get_current_user_id)):
    names = storage.fetch_exercise_name_map()
    workouts = storage.scan(WORKOUTS, lambda w: w.user_id == user_id)
    workouts.sort(key=lambda w: w.started_at, reverse=True)
    items: List[WorkoutHistoryItem] = []
    for workout in workouts:
        summaries = summarize_sets(storage.fetch_sets_for_workout(workout.id), names)
        items.append(
            WorkoutHistoryItem(
                **workout.model_dump(),
                duration_minutes=workout_duration_minutes(workout.started_at, workout.ended_at),
                exercise_count=len(summaries),
                set_count=sum(s.set_count for s in summaries),
                total_volume=round(sum(s.total_volume for s in summaries), 1),
            )
        )
    return items


@router.get("/workouts/{workout_id}", response_model=WorkoutDetail, summary="Workout detail with per-exercise volume")
def workout_detail(
    workout_id: str,
    storage: Storage = Depends(get_storage),
    user_id: str = Depends(get_current_user_id),
):
    workout = _owned_workout_or_404(storage, workout_id, user_id)
    sets = storage.fetch_sets_for_workout(workout_id)
    return WorkoutDetail(
        workout=workout,
        sets=sets,
        exercises=summarize_sets(sets, storage.fetch_exercise_name_map()),
        duration_minutes=workout_duration_minutes(workout.started_at, workout.ended_at),
    )


@router.delete("/workouts/{workout_id}", summary="Delete a workout and its sets")
def delete_workout(
    workout_id: str,
    storage: Storage = Depends(get_storage),
    user_id: str = Depends(get_current_user_id),
):
    _owned_workout_or_404(storage, workout_id, user_id)
    storage.delete_workout(workout_id)
    return {"success": True}


@router.get("/cardio", response_model=List[CardioEntry], summary="List cardio entries")
def list_cardio(storage: Storage = Depends(get_storage), user_id: str = Depends(get_current_user_id)):
    entries = storage.scan(CARDIO_ENTRIES, lambda c: c.user_id == user_id)
    entries.sort(key=lambda c: (c.date, c.created_at), reverse=True)
    return entries


@router.post("/cardio", response_model=CardioEntry, summary="Log a cardio session")
def create_cardio(
    request: CardioEntryCreate,
    storage: Storage = Depends(get_storage),
    user_id: str = Depends(get_current_user_id),
):
    entry = CardioEntry(id=new_record_id(), user_id=user_id, created_at=iso_now(), **request.model_dump())
    storage.insert(CARDIO_ENTRIES, entry)
    logger.info("Logged %s cardio %s on %s", entry.type.value, entry.id, entry.date)
    return entry


@router.get("/export.csv", summary="Export workouts as CSV (one row per exercise per workout)")
def export_csv(storage: Storage = Depends(get_storage), user_id: str = Depends(get_current_user_id)):
    names = storage.fetch_exercise_name_map()
    workouts = storage.scan(WORKOUTS, lambda w: w.user_id == user_id)
    workouts.sort(key=lambda w: w.started_at)
    rows = []
    for workout in workouts:
        rows.extend(export_rows(workout, storage.fetch_sets_for_workout(workout.id), names))
    return Response(
        content=rows_to_csv(rows),
        media_type="text/csv",
        headers={"Content-Disposition": 'attachment; filename="workouts.csv"'},
    )
