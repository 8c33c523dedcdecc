# -*- coding: utf-8 -*-

from __future__ import annotations

import unittest

from pydantic import ValidationError

from lifetrack.habits.models import HabitEntry, HabitEntryCreate, HabitEntryPatch
from lifetrack.habits.streaks import best_streak, compute_habit_stats, current_streak

TODAY = "2024-03-10"


def _entry(day: str, completed: bool = True, idx: int = 0) -> HabitEntry:
    return HabitEntry(
        id=f"{day}-{idx}",
        habit_id="h1",
        user_id="u1",
        date=day,
        completed=completed,
        created_at="2024-03-01T00:00:00+00:00",
    )


class TestHabitStats(unittest.TestCase):
    def test_no_entries(self) -> None:
        stats = compute_habit_stats([], TODAY)
        self.assertEqual(stats.completion_rate, 0)
        self.assertEqual(stats.current_streak, 0)
        self.assertEqual(stats.best_streak, 0)
        self.assertEqual(stats.total_completions, 0)
        self.assertIsNone(stats.last_completed_date)

    def test_streak_stops_at_first_gap(self) -> None:
        entries = [
            _entry("2024-03-10"),
            _entry("2024-03-09"),
            _entry("2024-03-08"),
            # 2024-03-07 missing
            _entry("2024-03-06"),
        ]
        stats = compute_habit_stats(entries, TODAY)
        self.assertEqual(stats.current_streak, 3)
        self.assertEqual(stats.total_completions, 4)
        self.assertEqual(stats.last_completed_date, "2024-03-10")

    def test_no_completion_today_means_zero_streak(self) -> None:
        entries = [_entry("2024-03-09"), _entry("2024-03-08"), _entry("2024-03-10", completed=False)]
        stats = compute_habit_stats(entries, TODAY)
        self.assertEqual(stats.current_streak, 0)
        self.assertEqual(stats.best_streak, 2)
        self.assertEqual(stats.last_completed_date, "2024-03-09")

    def test_unsorted_and_duplicate_dates(self) -> None:
        entries = [
            _entry("2024-03-08"),
            _entry("2024-03-10", idx=1),
            _entry("2024-03-09"),
            _entry("2024-03-10", idx=2),
        ]
        stats = compute_habit_stats(entries, TODAY)
        self.assertEqual(stats.current_streak, 3)
        self.assertEqual(stats.total_completions, 4)
        self.assertEqual(stats.completion_rate, 100)

    def test_completion_rate_rounds_half_up(self) -> None:
        # 1 of 8 -> 12.5% -> 13
        entries = [_entry("2024-03-01")] + [_entry(f"2024-02-0{i}", completed=False) for i in range(1, 8)]
        self.assertEqual(compute_habit_stats(entries, TODAY).completion_rate, 13)

    def test_streak_crosses_month_boundary(self) -> None:
        days = {"2024-03-01", "2024-02-29", "2024-02-28"}
        self.assertEqual(current_streak(days, "2024-03-01"), 3)

    def test_best_streak_finds_longest_run(self) -> None:
        days = {"2024-01-01", "2024-01-02", "2024-01-05", "2024-01-06", "2024-01-07", "2024-01-09"}
        self.assertEqual(best_streak(days), 3)

    def test_idempotent(self) -> None:
        entries = [_entry("2024-03-10"), _entry("2024-03-09", completed=False)]
        self.assertEqual(compute_habit_stats(entries, TODAY), compute_habit_stats(entries, TODAY))

    def test_best_streak_skips_impossible_dates(self) -> None:
        self.assertEqual(best_streak({"2024-02-28", "2024-02-29", "2024-02-30", "2024-03-01"}), 3)

    def test_stats_survive_stored_impossible_date(self) -> None:
        bad = HabitEntry.model_construct(
            id="bad",
            habit_id="h1",
            user_id="u1",
            date="2024-02-30",
            completed=True,
            created_at="2024-03-01T00:00:00+00:00",
        )
        stats = compute_habit_stats([bad, _entry("2024-03-10"), _entry("2024-03-09")], TODAY)
        self.assertEqual(stats.current_streak, 2)
        self.assertEqual(stats.best_streak, 2)
        self.assertEqual(stats.total_completions, 3)


class TestEntryDates(unittest.TestCase):
    def test_rejects_day_that_does_not_exist(self) -> None:
        with self.assertRaises(ValidationError):
            HabitEntryCreate(habit_id="h1", date="2024-02-30", completed=True)

    def test_accepts_leap_day(self) -> None:
        self.assertEqual(HabitEntryCreate(habit_id="h1", date="2024-02-29").date, "2024-02-29")

    def test_patch_rejects_null_for_required_field(self) -> None:
        with self.assertRaises(ValidationError):
            HabitEntryPatch(completed=None)
        self.assertEqual(HabitEntryPatch(notes=None).model_dump(exclude_unset=True), {"notes": None})


if __name__ == "__main__":
    unittest.main()
