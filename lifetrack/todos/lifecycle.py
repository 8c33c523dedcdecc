# -*- coding: utf-8 -*-
"""Todo completion bookkeeping and list summaries."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Iterable, List, Optional, Set

from ..utils import percent
from .models import Todo, TodoStatus, TodoSummary

_OPEN = (TodoStatus.pending, TodoStatus.in_progress)


def completion_changes(current: Optional[TodoStatus], new: TodoStatus, now: datetime) -> Dict[str, Any]:
    """``completed_at`` follows the status: stamped on entering ``completed``, cleared on leaving it."""
    if new == TodoStatus.completed:
        return {} if current == TodoStatus.completed else {"completed_at": now}
    return {"completed_at": None}


def invalid_dependencies(dependencies: Iterable[str], known_ids: Set[str], todo_id: Optional[str] = None) -> List[str]:
    return [dep for dep in dependencies if dep == todo_id or dep not in known_ids]


def is_overdue(todo: Todo, today: str) -> bool:
    return todo.status in _OPEN and todo.due_date is not None and todo.due_date < today


def summarize_todos(todos: Iterable[Todo], today: str) -> TodoSummary:
    todos = list(todos)
    by_status = {status.value: 0 for status in TodoStatus}
    for todo in todos:
        by_status[todo.status.value] += 1
    considered = len(todos) - by_status[TodoStatus.cancelled.value]
    return TodoSummary(
        total=len(todos),
        by_status=by_status,
        completion_rate=percent(by_status[TodoStatus.completed.value], considered),
        overdue=sum(1 for todo in todos if is_overdue(todo, today)),
    )
