# -*- coding: utf-8 -*-
"""Record storage: an abstract interface plus the in-memory adapter.

Records are pydantic models with an ``id`` field, grouped in named tables.
Handlers receive a ``Storage`` through ``get_storage`` and never touch the
underlying maps directly, so a durable adapter can replace ``MemoryStorage``
without changes to the aggregation code.
"""

from __future__ import annotations

import logging
import threading
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, List, Optional, TypeVar

from fastapi import Request
from pydantic import BaseModel

logger = logging.getLogger(__name__)

HABITS = "habits"
HABIT_ENTRIES = "habit_entries"
GOALS = "goals"
HEALTH_ENTRIES = "health_entries"
TIMER_SESSIONS = "timer_sessions"
FOOD_ITEMS = "food_items"
MEAL_ENTRIES = "meal_entries"
NUTRITION_GOALS = "nutrition_goals"
EXERCISES = "exercises"
WORKOUTS = "workouts"
SETS = "sets"
CARDIO_ENTRIES = "cardio_entries"
SCREEN_TIME_APPS = "screen_time_apps"
SCREEN_TIME_ENTRIES = "screen_time_entries"
SCREEN_TIME_LIMITS = "screen_time_limits"
TODO_CATEGORIES = "todo_categories"
TODOS = "todos"

TABLES = (
    HABITS,
    HABIT_ENTRIES,
    GOALS,
    HEALTH_ENTRIES,
    TIMER_SESSIONS,
    FOOD_ITEMS,
    MEAL_ENTRIES,
    NUTRITION_GOALS,
    EXERCISES,
    WORKOUTS,
    SETS,
    CARDIO_ENTRIES,
    SCREEN_TIME_APPS,
    SCREEN_TIME_ENTRIES,
    SCREEN_TIME_LIMITS,
    TODO_CATEGORIES,
    TODOS,
)

RecordT = TypeVar("RecordT", bound=BaseModel)
Predicate = Callable[[Any], bool]


class Storage(ABC):
    """Key-value record store keyed by synthetic ids."""

    @abstractmethod
    def insert(self, table: str, record: RecordT) -> RecordT:
        ...

    @abstractmethod
    def get(self, table: str, record_id: str) -> Optional[Any]:
        ...

    @abstractmethod
    def scan(self, table: str, where: Optional[Predicate] = None) -> List[Any]:
        """Return a snapshot of matching records; callers may not mutate the store through it."""

    @abstractmethod
    def replace(self, table: str, record: RecordT) -> RecordT:
        ...

    @abstractmethod
    def delete(self, table: str, record_id: str) -> bool:
        ...

    def update(self, table: str, record_id: str, patch: BaseModel) -> Optional[Any]:
        """Merge the fields explicitly set on ``patch`` into the stored record.

        The merged record is re-validated against its own model, so a patch can
        never leave a record in a state its create schema would reject.
        """
        current = self.get(table, record_id)
        if current is None:
            return None
        changes = patch.model_dump(exclude_unset=True)
        merged = type(current).model_validate({**current.model_dump(), **changes})
        return self.replace(table, merged)

    def delete_where(self, table: str, where: Predicate) -> int:
        removed = 0
        for record in self.scan(table, where):
            if self.delete(table, record.id):
                removed += 1
        return removed

    # ---- collaborator queries used by the aggregators ----

    def fetch_entries_for_habit(self, habit_id: str) -> List[Any]:
        return self.scan(HABIT_ENTRIES, lambda e: e.habit_id == habit_id)

    def fetch_meals_for_date(self, user_id: str, day: str) -> List[Any]:
        return self.scan(MEAL_ENTRIES, lambda m: m.user_id == user_id and m.date == day)

    def fetch_active_goal(self, user_id: str) -> Optional[Any]:
        goals = self.scan(NUTRITION_GOALS, lambda g: g.user_id == user_id and g.is_active)
        if not goals:
            return None
        # Several active goals are possible; the newest one wins.
        return max(goals, key=lambda g: g.created_at)

    def fetch_sets_for_workout(self, workout_id: str) -> List[Any]:
        sets = self.scan(SETS, lambda s: s.workout_id == workout_id)
        return sorted(sets, key=lambda s: (s.order_index, s.created_at))

    def fetch_exercise_name_map(self) -> Dict[str, str]:
        return {exercise.id: exercise.name for exercise in self.scan(EXERCISES)}

    # ---- deletes that clean up dependent records ----

    def delete_habit(self, habit_id: str) -> bool:
        if not self.delete(HABITS, habit_id):
            return False
        removed = self.delete_where(HABIT_ENTRIES, lambda e: e.habit_id == habit_id)
        logger.info("Deleted habit %s and %d entries", habit_id, removed)
        return True

    def delete_workout(self, workout_id: str) -> bool:
        if not self.delete(WORKOUTS, workout_id):
            return False
        removed = self.delete_where(SETS, lambda s: s.workout_id == workout_id)
        logger.info("Deleted workout %s and %d sets", workout_id, removed)
        return True

    def delete_todo_category(self, category_id: str) -> bool:
        if not self.delete(TODO_CATEGORIES, category_id):
            return False
        removed = self.delete_where(TODOS, lambda t: t.category_id == category_id)
        logger.info("Deleted todo category %s and %d todos", category_id, removed)
        return True


class MemoryStorage(Storage):
    """Process-local adapter: one dict per table, guarded by a re-entrant lock.

    FastAPI runs sync handlers in a thread pool, so reads hand out deep copies
    and every mutation (including read-modify-write updates) holds the lock.
    """

    def __init__(self) -> None:
        self._tables: Dict[str, Dict[str, BaseModel]] = {name: {} for name in TABLES}
        self._lock = threading.RLock()

    def _table(self, table: str) -> Dict[str, BaseModel]:
        try:
            return self._tables[table]
        except KeyError:
            raise KeyError(f"Unknown table: {table}") from None

    def insert(self, table: str, record: RecordT) -> RecordT:
        with self._lock:
            rows = self._table(table)
            if record.id in rows:
                raise ValueError(f"Duplicate id {record.id} in {table}")
            rows[record.id] = record.model_copy(deep=True)
        return record

    def get(self, table: str, record_id: str) -> Optional[Any]:
        with self._lock:
            record = self._table(table).get(record_id)
            return record.model_copy(deep=True) if record is not None else None

    def scan(self, table: str, where: Optional[Predicate] = None) -> List[Any]:
        with self._lock:
            rows = list(self._table(table).values())
            return [r.model_copy(deep=True) for r in rows if where is None or where(r)]

    def replace(self, table: str, record: RecordT) -> RecordT:
        with self._lock:
            self._table(table)[record.id] = record.model_copy(deep=True)
        return record

    def delete(self, table: str, record_id: str) -> bool:
        with self._lock:
            return self._table(table).pop(record_id, None) is not None

    def update(self, table: str, record_id: str, patch: BaseModel) -> Optional[Any]:
        with self._lock:
            return super().update(table, record_id, patch)

    def delete_habit(self, habit_id: str) -> bool:
        with self._lock:
            return super().delete_habit(habit_id)

    def delete_workout(self, workout_id: str) -> bool:
        with self._lock:
            return super().delete_workout(workout_id)

    def delete_todo_category(self, category_id: str) -> bool:
        with self._lock:
            return super().delete_todo_category(category_id)


def get_storage(request: Request) -> Storage:
    return request.app.state.storage
