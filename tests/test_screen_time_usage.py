# -*- coding: utf-8 -*-

from __future__ import annotations

import unittest

from lifetrack.screen_time.models import ScreenTimeApp, ScreenTimeEntry, ScreenTimeLimit
from lifetrack.screen_time.usage import active_limits, daily_usage

DAY = "2024-03-10"


def _app(app_id: str, name: str, excluded: bool = False) -> ScreenTimeApp:
    return ScreenTimeApp(id=app_id, name=name, is_excluded=excluded, created_at="2024-01-01T00:00:00")


def _entry(app_id: str, minutes: int, day: str = DAY, idx: int = 0) -> ScreenTimeEntry:
    return ScreenTimeEntry(
        id=f"{app_id}-{day}-{idx}",
        user_id="u1",
        app_id=app_id,
        date=day,
        minutes=minutes,
        created_at=f"{day}T08:00:00",
    )


def _limit(limit_id: str, minutes: int, app_id: str | None = None, active: bool = True, created: str = "2024-01-01") -> ScreenTimeLimit:
    return ScreenTimeLimit(
        id=limit_id,
        user_id="u1",
        app_id=app_id,
        limit_minutes=minutes,
        is_active=active,
        created_at=f"{created}T00:00:00",
    )


class TestActiveLimits(unittest.TestCase):
    def test_newest_active_limit_per_scope(self) -> None:
        limits = [
            _limit("old", 90, created="2024-01-01"),
            _limit("new", 60, created="2024-02-01"),
            _limit("off", 10, active=False, created="2024-03-01"),
            _limit("app", 20, app_id="a1"),
        ]
        self.assertEqual(active_limits(limits), {None: 60, "a1": 20})


class TestDailyUsage(unittest.TestCase):
    def setUp(self) -> None:
        self.apps = {"a1": _app("a1", "Browser"), "a2": _app("a2", "Games"), "hidden": _app("hidden", "Diary", excluded=True)}

    def test_no_entries(self) -> None:
        usage = daily_usage(DAY, [], self.apps, [])
        self.assertEqual(usage.total_minutes, 0)
        self.assertEqual(usage.apps, [])
        self.assertIsNone(usage.remaining_minutes)
        self.assertFalse(usage.over_limit)

    def test_sums_per_app_and_skips_excluded(self) -> None:
        entries = [_entry("a1", 20), _entry("a1", 15, idx=1), _entry("a2", 35), _entry("hidden", 600), _entry("a2", 99, day="2024-03-09")]
        usage = daily_usage(DAY, entries, self.apps, [])
        self.assertEqual(usage.total_minutes, 70)
        self.assertEqual([(a.app_name, a.minutes) for a in usage.apps], [("Browser", 35), ("Games", 35)])

    def test_limit_is_strict(self) -> None:
        usage = daily_usage(DAY, [_entry("a1", 60)], self.apps, [_limit("d", 60), _limit("p", 60, app_id="a1")])
        self.assertFalse(usage.over_limit)
        self.assertEqual(usage.remaining_minutes, 0)
        self.assertFalse(usage.apps[0].over_limit)

        usage = daily_usage(DAY, [_entry("a1", 61)], self.apps, [_limit("d", 60)])
        self.assertTrue(usage.over_limit)
        self.assertEqual(usage.remaining_minutes, 0)

    def test_entry_for_unknown_app(self) -> None:
        usage = daily_usage(DAY, [_entry("gone", 12)], self.apps, [])
        self.assertEqual(usage.apps[0].app_name, "Unknown")
        self.assertEqual(usage.total_minutes, 12)


if __name__ == "__main__":
    unittest.main()
