# -*- coding: utf-8 -*-

from __future__ import annotations

import unittest

from lifetrack.habits.models import Habit, HabitEntry, HabitPatch
from lifetrack.nutrition.models import NutritionGoal
from lifetrack.storage import HABIT_ENTRIES, HABITS, NUTRITION_GOALS, TODO_CATEGORIES, TODOS, MemoryStorage
from lifetrack.todos.models import Todo, TodoCategory


def _habit(habit_id: str = "h1") -> Habit:
    return Habit(id=habit_id, user_id="u1", name="Read", created_at="2024-01-01T00:00:00")


def _entry(entry_id: str, habit_id: str = "h1") -> HabitEntry:
    return HabitEntry(
        id=entry_id, habit_id=habit_id, user_id="u1", date="2024-01-02", completed=True, created_at="2024-01-02T00:00:00"
    )


class TestMemoryStorage(unittest.TestCase):
    def setUp(self) -> None:
        self.storage = MemoryStorage()

    def test_scan_returns_copies(self) -> None:
        self.storage.insert(HABITS, _habit())
        snapshot = self.storage.scan(HABITS)
        snapshot[0].name = "changed"
        self.assertEqual(self.storage.get(HABITS, "h1").name, "Read")

    def test_duplicate_id_rejected(self) -> None:
        self.storage.insert(HABITS, _habit())
        with self.assertRaises(ValueError):
            self.storage.insert(HABITS, _habit())

    def test_update_merges_only_set_fields(self) -> None:
        self.storage.insert(HABITS, _habit())
        updated = self.storage.update(HABITS, "h1", HabitPatch(is_archived=True))
        self.assertTrue(updated.is_archived)
        self.assertEqual(updated.name, "Read")
        self.assertIsNone(self.storage.update(HABITS, "missing", HabitPatch(name="x")))

    def test_delete_habit_cascades_entries(self) -> None:
        self.storage.insert(HABITS, _habit("h1"))
        self.storage.insert(HABITS, _habit("h2"))
        self.storage.insert(HABIT_ENTRIES, _entry("e1", "h1"))
        self.storage.insert(HABIT_ENTRIES, _entry("e2", "h1"))
        self.storage.insert(HABIT_ENTRIES, _entry("e3", "h2"))
        self.assertTrue(self.storage.delete_habit("h1"))
        self.assertEqual([e.id for e in self.storage.scan(HABIT_ENTRIES)], ["e3"])
        self.assertFalse(self.storage.delete_habit("h1"))

    def test_delete_todo_category_cascades_todos(self) -> None:
        self.storage.insert(TODO_CATEGORIES, TodoCategory(id="c1", user_id="u1", name="Work", created_at="2024-01-01T00:00:00"))
        for todo_id, category_id in (("t1", "c1"), ("t2", "c2")):
            self.storage.insert(
                TODOS,
                Todo(id=todo_id, user_id="u1", category_id=category_id, title=todo_id, created_at="2024-01-01T00:00:00"),
            )
        self.assertTrue(self.storage.delete_todo_category("c1"))
        self.assertEqual([t.id for t in self.storage.scan(TODOS)], ["t2"])

    def test_active_goal_is_newest_active(self) -> None:
        base = dict(user_id="u1", calorie_target=2000, protein_target=100, carbs_target=250, fat_target=70)
        self.storage.insert(NUTRITION_GOALS, NutritionGoal(id="old", created_at="2024-01-01T00:00:00", **base))
        self.storage.insert(NUTRITION_GOALS, NutritionGoal(id="new", created_at="2024-02-01T00:00:00", **base))
        self.storage.insert(
            NUTRITION_GOALS,
            NutritionGoal(id="off", created_at="2024-03-01T00:00:00", is_active=False, **base),
        )
        self.assertEqual(self.storage.fetch_active_goal("u1").id, "new")
        self.assertIsNone(self.storage.fetch_active_goal("someone-else"))

    def test_unknown_table(self) -> None:
        with self.assertRaises(KeyError):
            self.storage.scan("nope")


if __name__ == "__main__":
    unittest.main()
