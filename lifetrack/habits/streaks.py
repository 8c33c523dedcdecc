# -*- coding: utf-8 -*-
"""Habit streak statistics.

Works on any sequence of entries for one habit: unsorted input and several
entries on the same date are both fine. Only calendar-day presence of a
completed entry matters for streaks; every entry counts toward the totals.
"""

from __future__ import annotations

import logging
from datetime import date, timedelta
from typing import Iterable, List, Set

from ..utils import percent, shift_day
from .models import HabitEntry, HabitStats

logger = logging.getLogger(__name__)


def current_streak(completed_days: Set[str], today: str) -> int:
    if today not in completed_days:
        return 0
    streak = 1
    offset = 1
    while shift_day(today, -offset) in completed_days:
        streak += 1
        offset += 1
    return streak


def _parse_days(days: Iterable[str]) -> List[date]:
    parsed = []
    for day in days:
        try:
            parsed.append(date.fromisoformat(day))
        except ValueError:
            logger.warning("Skipping entry with invalid date %r", day)
    return sorted(parsed)


def best_streak(completed_days: Set[str]) -> int:
    best = 0
    run = 0
    previous = None
    for day in _parse_days(completed_days):
        run = run + 1 if previous is not None and day - previous == timedelta(days=1) else 1
        best = max(best, run)
        previous = day
    return best


def compute_habit_stats(entries: Iterable[HabitEntry], today: str) -> HabitStats:
    entries = list(entries)
    completed = [e for e in entries if e.completed]
    completed_days = {e.date for e in completed}
    return HabitStats(
        completion_rate=percent(len(completed), len(entries)),
        current_streak=current_streak(completed_days, today),
        best_streak=best_streak(completed_days),
        total_completions=len(completed),
        last_completed_date=max(completed_days) if completed_days else None,
    )
