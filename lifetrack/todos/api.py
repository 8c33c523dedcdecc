# -*- coding: utf-8 -*-
"""Todos — API endpoints."""

from __future__ import annotations

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query

from ..auth.security import get_current_user_id
from ..params import parse_day_or_400
from ..storage import TODO_CATEGORIES, TODOS, Storage, get_storage
from ..utils import iso_now, new_record_id, today_str, utc_now
from .lifecycle import completion_changes, invalid_dependencies, summarize_todos
from .models import (
    Todo,
    TodoCategory,
    TodoCategoryCreate,
    TodoCategoryPatch,
    TodoCreate,
    TodoPatch,
    TodoStatus,
    TodoSummary,
    TodoUpdate,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Todos"])


def _owned_category_or_404(storage: Storage, category_id: str, user_id: str) -> TodoCategory:
    category = storage.get(TODO_CATEGORIES, category_id)
    if category is None or category.user_id != user_id:
        raise HTTPException(status_code=404, detail="Todo category not found")
    return category


def _owned_todo_or_404(storage: Storage, todo_id: str, user_id: str) -> Todo:
    todo = storage.get(TODOS, todo_id)
    if todo is None or todo.user_id != user_id:
        raise HTTPException(status_code=404, detail="Todo not found")
    return todo


def _check_dependencies(storage: Storage, user_id: str, dependencies: List[str], todo_id: str | None = None) -> None:
    known = {t.id for t in storage.scan(TODOS, lambda t: t.user_id == user_id)}
    bad = invalid_dependencies(dependencies, known, todo_id)
    if bad:
        raise HTTPException(status_code=400, detail=f"Invalid dependencies: {', '.join(bad)}")


@router.get("/todo-categories", response_model=List[TodoCategory], summary="List todo categories")
def list_categories(storage: Storage = Depends(get_storage), user_id: str = Depends(get_current_user_id)):
    categories = storage.scan(TODO_CATEGORIES, lambda c: c.user_id == user_id)
    categories.sort(key=lambda c: (c.order_index, c.created_at))
    return categories


@router.post("/todo-categories", response_model=TodoCategory, summary="Create a todo category")
def create_category(
    request: TodoCategoryCreate,
    storage: Storage = Depends(get_storage),
    user_id: str = Depends(get_current_user_id),
):
    category = TodoCategory(id=new_record_id(), user_id=user_id, created_at=iso_now(), **request.model_dump())
    storage.insert(TODO_CATEGORIES, category)
    logger.info("Created todo category %s (%s)", category.id, category.name)
    return category


@router.put("/todo-categories/{category_id}", response_model=TodoCategory, summary="Update a todo category")
def update_category(
    category_id: str,
    patch: TodoCategoryPatch,
    storage: Storage = Depends(get_storage),
    user_id: str = Depends(get_current_user_id),
):
    _owned_category_or_404(storage, category_id, user_id)
    return storage.update(TODO_CATEGORIES, category_id, patch)


@router.delete("/todo-categories/{category_id}", summary="Delete a category and its todos")
def delete_category(
    category_id: str,
    storage: Storage = Depends(get_storage),
    user_id: str = Depends(get_current_user_id),
):
    _owned_category_or_404(storage, category_id, user_id)
    storage.delete_todo_category(category_id)
    return {"success": True}


@router.get("/todos", response_model=List[Todo], summary="List todos")
def list_todos(
    category_id: str | None = Query(default=None),
    status: TodoStatus | None = Query(default=None),
    due_date: str | None = Query(default=None, description="YYYY-MM-DD"),
    storage: Storage = Depends(get_storage),
    user_id: str = Depends(get_current_user_id),
):
    due = parse_day_or_400(due_date, field="due_date")

    def matches(todo: Todo) -> bool:
        if todo.user_id != user_id:
            return False
        if category_id and todo.category_id != category_id:
            return False
        if status and todo.status != status:
            return False
        return not due or todo.due_date == due

    todos = storage.scan(TODOS, matches)
    todos.sort(key=lambda t: (t.order_index, t.created_at))
    return todos


@router.get("/todos/summary", response_model=TodoSummary, summary="Counts by status, completion rate, overdue")
def todo_summary(
    today: str | None = Query(default=None, description="YYYY-MM-DD, defaults to the server date"),
    storage: Storage = Depends(get_storage),
    user_id: str = Depends(get_current_user_id),
):
    day = parse_day_or_400(today, field="today") or today_str()
    return summarize_todos(storage.scan(TODOS, lambda t: t.user_id == user_id), day)


@router.post("/todos", response_model=Todo, summary="Create a todo")
def create_todo(
    request: TodoCreate,
    storage: Storage = Depends(get_storage),
    user_id: str = Depends(get_current_user_id),
):
    _owned_category_or_404(storage, request.category_id, user_id)
    _check_dependencies(storage, user_id, request.dependencies)
    todo = Todo(
        id=new_record_id(),
        user_id=user_id,
        created_at=iso_now(),
        **request.model_dump(),
        **completion_changes(None, request.status, utc_now()),
    )
    storage.insert(TODOS, todo)
    logger.info("Created todo %s in category %s", todo.id, todo.category_id)
    return todo


@router.put("/todos/{todo_id}", response_model=Todo, summary="Update a todo")
def update_todo(
    todo_id: str,
    patch: TodoPatch,
    storage: Storage = Depends(get_storage),
    user_id: str = Depends(get_current_user_id),
):
    current = _owned_todo_or_404(storage, todo_id, user_id)
    changes = patch.model_dump(exclude_unset=True)
    if "category_id" in changes:
        _owned_category_or_404(storage, changes["category_id"], user_id)
    if "dependencies" in changes:
        _check_dependencies(storage, user_id, changes["dependencies"], todo_id)
    if "status" in changes:
        changes.update(completion_changes(current.status, changes["status"], utc_now()))
    return storage.update(TODOS, todo_id, TodoUpdate(**changes))


@router.post("/todos/{todo_id}/complete", response_model=Todo, summary="Mark a todo completed")
def complete_todo(
    todo_id: str,
    storage: Storage = Depends(get_storage),
    user_id: str = Depends(get_current_user_id),
):
    current = _owned_todo_or_404(storage, todo_id, user_id)
    changes = {"status": TodoStatus.completed, **completion_changes(current.status, TodoStatus.completed, utc_now())}
    logger.info("Completed todo %s", todo_id)
    return storage.update(TODOS, todo_id, TodoUpdate(**changes))


@router.delete("/todos/{todo_id}", summary="Delete a todo")
def delete_todo(
    todo_id: str,
    storage: Storage = Depends(get_storage),
    user_id: str = Depends(get_current_user_id),
):
    _owned_todo_or_404(storage, todo_id, user_id)
    storage.delete(TODOS, todo_id)
    for dependent in storage.scan(TODOS, lambda t: todo_id in t.dependencies):
        remaining = [dep for dep in dependent.dependencies if dep != todo_id]
        storage.update(TODOS, dependent.id, TodoUpdate(dependencies=remaining))
    return {"success": True}
