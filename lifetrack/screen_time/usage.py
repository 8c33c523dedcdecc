# -*- coding: utf-8 -*-
"""Per-day screen time totals against the configured limits.

Excluded apps are left out entirely, both from the per-app list and from the
daily total. Entries for apps missing from the catalog are grouped under
``Unknown``. Only active limits apply; when several cover the same scope the
newest one is used.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Mapping, Optional

from .models import AppUsage, DailyScreenTime, ScreenTimeApp, ScreenTimeEntry, ScreenTimeLimit

UNKNOWN_APP = "Unknown"


def active_limits(limits: Iterable[ScreenTimeLimit]) -> Dict[Optional[str], int]:
    """Map ``app_id`` (``None`` for the daily total) to its newest active limit."""
    chosen: Dict[Optional[str], ScreenTimeLimit] = {}
    for limit in limits:
        if not limit.is_active:
            continue
        current = chosen.get(limit.app_id)
        if current is None or limit.created_at > current.created_at:
            chosen[limit.app_id] = limit
    return {scope: limit.limit_minutes for scope, limit in chosen.items()}


def daily_usage(
    day: str,
    entries: Iterable[ScreenTimeEntry],
    apps: Mapping[str, ScreenTimeApp],
    limits: Iterable[ScreenTimeLimit],
) -> DailyScreenTime:
    caps = active_limits(limits)
    minutes: Dict[str, int] = {}
    for entry in entries:
        if entry.date != day:
            continue
        app = apps.get(entry.app_id)
        if app is not None and app.is_excluded:
            continue
        minutes[entry.app_id] = minutes.get(entry.app_id, 0) + entry.minutes

    usage: List[AppUsage] = []
    for app_id, total in minutes.items():
        app = apps.get(app_id)
        cap = caps.get(app_id)
        usage.append(
            AppUsage(
                app_id=app_id,
                app_name=app.name if app is not None else UNKNOWN_APP,
                category=app.category if app is not None else "Other",
                minutes=total,
                limit_minutes=cap,
                over_limit=cap is not None and total > cap,
            )
        )
    usage.sort(key=lambda u: (-u.minutes, u.app_name.lower()))

    total_minutes = sum(minutes.values())
    daily_cap = caps.get(None)
    return DailyScreenTime(
        date=day,
        total_minutes=total_minutes,
        limit_minutes=daily_cap,
        remaining_minutes=max(daily_cap - total_minutes, 0) if daily_cap is not None else None,
        over_limit=daily_cap is not None and total_minutes > daily_cap,
        apps=usage,
    )
