# -*- coding: utf-8 -*-

from __future__ import annotations

import unittest
from datetime import datetime, timezone

from lifetrack.workouts.export import rows_to_csv
from lifetrack.workouts.models import Workout, WorkoutSet
from lifetrack.workouts.summary import export_rows, summarize_sets, workout_duration_minutes


def _set(exercise_id: str, weight: float, reps: int, idx: int) -> WorkoutSet:
    return WorkoutSet(
        id=f"s{idx}",
        workout_id="w1",
        exercise_id=exercise_id,
        weight=weight,
        reps=reps,
        order_index=idx,
        created_at="2024-03-10T10:00:00",
    )


def _workout(ended: datetime | None) -> Workout:
    return Workout(
        id="w1",
        user_id="u1",
        started_at=datetime(2024, 3, 10, 10, 0, tzinfo=timezone.utc),
        ended_at=ended,
        created_at="2024-03-10T10:00:00",
    )


class TestWorkoutSummary(unittest.TestCase):
    def test_groups_by_exercise(self) -> None:
        sets = [_set("bench", 100, 5, 0), _set("squat", 140, 3, 1), _set("bench", 80, 8, 2)]
        summaries = summarize_sets(sets, {"bench": "Bench Press", "squat": "Squat"})
        self.assertEqual([s.exercise_name for s in summaries], ["Bench Press", "Squat"])
        bench = summaries[0]
        self.assertEqual(bench.set_count, 2)
        self.assertEqual(bench.total_reps, 13)
        self.assertEqual(bench.total_volume, 1140)
        self.assertEqual(bench.average_weight, 90)

    def test_unknown_exercise_name(self) -> None:
        summaries = summarize_sets([_set("ghost", 20, 10, 0)], {})
        self.assertEqual(summaries[0].exercise_name, "Unknown")

    def test_no_sets(self) -> None:
        self.assertEqual(summarize_sets([], {}), [])

    def test_duration(self) -> None:
        start = datetime(2024, 3, 10, 10, 0, tzinfo=timezone.utc)
        self.assertEqual(workout_duration_minutes(start, None), 0)
        self.assertEqual(workout_duration_minutes(start, datetime(2024, 3, 10, 10, 45, 30, tzinfo=timezone.utc)), 46)
        self.assertEqual(workout_duration_minutes(start, datetime(2024, 3, 10, 11, 2, 10, tzinfo=timezone.utc)), 62)

    def test_export_rows_and_csv(self) -> None:
        workout = _workout(datetime(2024, 3, 10, 11, 0, tzinfo=timezone.utc))
        sets = [_set("bench", 62.5, 5, 0), _set("bench", 60, 6, 1), _set("bench", 57.5, 8, 2)]
        rows = export_rows(workout, sets, {"bench": "Bench Press"})
        self.assertEqual(len(rows), 1)
        row = rows[0]
        self.assertEqual(row.date, "2024-03-10")
        self.assertEqual(row.sets, 3)
        self.assertEqual(row.total_reps, 19)
        self.assertEqual(row.average_weight, 60.0)
        self.assertEqual(row.total_volume, 1132.5)
        self.assertEqual(row.duration_minutes, 60)

        csv_text = rows_to_csv(rows)
        lines = csv_text.strip().split("\n")
        self.assertEqual(lines[0], '"Date","Exercise","Sets","Total Reps","Avg Weight","Total Volume","Duration (min)"')
        self.assertEqual(lines[1], '"2024-03-10","Bench Press",3,19,60.0,1132.5,60')

    def test_csv_quotes_commas_in_names(self) -> None:
        workout = _workout(None)
        rows = export_rows(workout, [_set("x", 10, 10, 0)], {"x": 'Curl, "EZ" bar'})
        line = rows_to_csv(rows).strip().split("\n")[1]
        self.assertEqual(line, '"2024-03-10","Curl, ""EZ"" bar",1,10,10.0,100.0,0')


if __name__ == "__main__":
    unittest.main()
