# -*- coding: utf-8 -*-
"""Goals — API endpoints."""

from __future__ import annotations

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException

from ..auth.security import get_current_user_id
from ..storage import GOALS, Storage, get_storage
from ..utils import iso_now, new_record_id
from .models import Goal, GoalCreate, GoalPatch

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/goals", tags=["Goals"])


def _owned_goal_or_404(storage: Storage, goal_id: str, user_id: str) -> Goal:
    goal = storage.get(GOALS, goal_id)
    if goal is None or goal.user_id != user_id:
        raise HTTPException(status_code=404, detail="Goal not found")
    return goal


@router.get("", response_model=List[Goal], summary="List goals")
def list_goals(storage: Storage = Depends(get_storage), user_id: str = Depends(get_current_user_id)):
    goals = storage.scan(GOALS, lambda g: g.user_id == user_id)
    goals.sort(key=lambda g: g.created_at)
    return goals


@router.post("", response_model=Goal, summary="Create a goal")
def create_goal(
    request: GoalCreate,
    storage: Storage = Depends(get_storage),
    user_id: str = Depends(get_current_user_id),
):
    goal = Goal(id=new_record_id(), user_id=user_id, created_at=iso_now(), **request.model_dump())
    storage.insert(GOALS, goal)
    logger.info("Created goal %s", goal.id)
    return goal


@router.put("/{goal_id}", response_model=Goal, summary="Update a goal")
def update_goal(
    goal_id: str,
    patch: GoalPatch,
    storage: Storage = Depends(get_storage),
    user_id: str = Depends(get_current_user_id),
):
    _owned_goal_or_404(storage, goal_id, user_id)
    return storage.update(GOALS, goal_id, patch)


@router.delete("/{goal_id}", summary="Delete a goal")
def delete_goal(
    goal_id: str,
    storage: Storage = Depends(get_storage),
    user_id: str = Depends(get_current_user_id),
):
    _owned_goal_or_404(storage, goal_id, user_id)
    storage.delete(GOALS, goal_id)
    logger.info("Deleted goal %s", goal_id)
    return {"success": True}
