# -*- coding: utf-8 -*-
"""Shared helpers: calendar-day strings, ids, rounding."""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone
from decimal import ROUND_HALF_UP, Decimal
from typing import List
from uuid import uuid4


def new_record_id() -> str:
    return str(uuid4())


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def iso_now() -> str:
    return utc_now().isoformat()


def today_str() -> str:
    return date.today().isoformat()


def shift_day(day: str, days: int) -> str:
    """Return the calendar day ``days`` away from ``day`` (both YYYY-MM-DD)."""
    return (date.fromisoformat(day) + timedelta(days=days)).isoformat()


def iter_window(end: str, days: int) -> List[str]:
    """Days ``end - (days - 1)`` through ``end`` inclusive, oldest first."""
    return [shift_day(end, -offset) for offset in range(days - 1, -1, -1)]


def calendar_day(value: str) -> str:
    """Return ``value`` if it names a real YYYY-MM-DD day, else raise ``ValueError``."""
    if len(value) != 10 or date.fromisoformat(value).isoformat() != value:
        raise ValueError(f"{value!r} is not a calendar day (YYYY-MM-DD)")
    return value


def round_half_up(value: float, ndigits: int = 0) -> float:
    quantum = Decimal(1).scaleb(-ndigits)
    return float(Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def percent(part: float, whole: float) -> int:
    if whole <= 0:
        return 0
    return int(round_half_up(100 * part / whole))
