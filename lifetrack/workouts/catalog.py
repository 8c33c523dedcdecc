# -*- coding: utf-8 -*-
"""Built-in exercise catalog."""

from __future__ import annotations

import logging

from ..storage import EXERCISES, Storage
from ..utils import iso_now, new_record_id
from .models import Exercise

logger = logging.getLogger(__name__)

DEFAULT_EXERCISES = (
    "Bench Press",
    "Squat",
    "Deadlift",
    "Overhead Press",
    "Barbell Row",
    "Pull Up",
    "Dumbbell Curl",
    "Lunge",
)


def seed_exercises(storage: Storage) -> int:
    """Add any missing built-in exercises; returns how many were added."""
    existing = {e.name.lower() for e in storage.scan(EXERCISES)}
    added = 0
    for name in DEFAULT_EXERCISES:
        if name.lower() in existing:
            continue
        storage.insert(EXERCISES, Exercise(id=new_record_id(), name=name, is_custom=False, created_at=iso_now()))
        added += 1
    if added:
        logger.info("Seeded %d built-in exercises", added)
    return added
