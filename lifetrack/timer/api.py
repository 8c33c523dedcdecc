# -*- coding: utf-8 -*-
"""Timer — API endpoints."""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, Query

from ..auth.security import get_current_user_id
from ..storage import TIMER_SESSIONS, Storage, get_storage
from ..params import parse_day_or_400
from ..utils import iso_now, new_record_id
from .models import TimerSession, TimerSessionCreate

router = APIRouter(prefix="/api/timer-sessions", tags=["Timer"])


@router.get("", response_model=List[TimerSession], summary="List timer sessions")
def list_sessions(
    date: str | None = Query(default=None, description="YYYY-MM-DD"),
    storage: Storage = Depends(get_storage),
    user_id: str = Depends(get_current_user_id),
):
    day = parse_day_or_400(date)
    sessions = storage.scan(
        TIMER_SESSIONS,
        lambda s: s.user_id == user_id and (not day or s.date == day),
    )
    sessions.sort(key=lambda s: s.created_at)
    return sessions


@router.post("", response_model=TimerSession, summary="Record a timer session")
def create_session(
    request: TimerSessionCreate,
    storage: Storage = Depends(get_storage),
    user_id: str = Depends(get_current_user_id),
):
    session = TimerSession(id=new_record_id(), user_id=user_id, created_at=iso_now(), **request.model_dump())
    return storage.insert(TIMER_SESSIONS, session)
