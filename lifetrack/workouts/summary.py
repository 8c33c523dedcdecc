# -*- coding: utf-8 -*-
"""Workout volume summaries."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Dict, Iterable, List, Mapping, Optional

from ..utils import round_half_up
from .models import ExerciseSummary, ExportRow, Workout, WorkoutSet

UNKNOWN_EXERCISE = "Unknown"


@dataclass
class _Group:
    set_count: int = 0
    total_reps: int = 0
    total_volume: float = 0.0
    weight_sum: float = 0.0


def workout_duration_minutes(started_at: datetime, ended_at: Optional[datetime]) -> int:
    if ended_at is None:
        return 0
    return int(round_half_up((ended_at - started_at).total_seconds() / 60))


def summarize_sets(sets: Iterable[WorkoutSet], exercise_names: Mapping[str, str]) -> List[ExerciseSummary]:
    """One summary per exercise, in the order each exercise first appears."""
    groups: Dict[str, _Group] = {}
    for s in sets:
        group = groups.setdefault(s.exercise_id, _Group())
        group.set_count += 1
        group.total_reps += s.reps
        group.total_volume += s.weight * s.reps
        group.weight_sum += s.weight

    return [
        ExerciseSummary(
            exercise_id=exercise_id,
            exercise_name=exercise_names.get(exercise_id, UNKNOWN_EXERCISE),
            set_count=g.set_count,
            total_reps=g.total_reps,
            total_volume=g.total_volume,
            average_weight=g.weight_sum / g.set_count if g.set_count else 0.0,
        )
        for exercise_id, g in groups.items()
    ]


def export_rows(
    workout: Workout,
    sets: Iterable[WorkoutSet],
    exercise_names: Mapping[str, str],
) -> List[ExportRow]:
    duration = workout_duration_minutes(workout.started_at, workout.ended_at)
    day = workout.started_at.date().isoformat()
    return [
        ExportRow(
            date=day,
            exercise=summary.exercise_name,
            sets=summary.set_count,
            total_reps=summary.total_reps,
            average_weight=round(summary.average_weight, 1),
            total_volume=round(summary.total_volume, 1),
            duration_minutes=duration,
        )
        for summary in summarize_sets(sets, exercise_names)
    ]
