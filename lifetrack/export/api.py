# -*- coding: utf-8 -*-
"""Export — full JSON dump of the user's tracking data."""

from __future__ import annotations

import json

from fastapi import APIRouter, Depends
from fastapi.encoders import jsonable_encoder
from fastapi.responses import Response

from ..auth.security import get_current_user_id
from ..storage import (
    GOALS,
    HABIT_ENTRIES,
    HABITS,
    HEALTH_ENTRIES,
    TIMER_SESSIONS,
    TODO_CATEGORIES,
    TODOS,
    Storage,
    get_storage,
)
from ..utils import iso_now

router = APIRouter(prefix="/api", tags=["Export"])

_EXPORTED_TABLES = (HABITS, HABIT_ENTRIES, GOALS, HEALTH_ENTRIES, TIMER_SESSIONS, TODO_CATEGORIES, TODOS)


@router.get("/export", summary="Download habit, goal, health, timer and todo data as JSON")
def export_data(storage: Storage = Depends(get_storage), user_id: str = Depends(get_current_user_id)):
    payload = {
        table: sorted(
            storage.scan(table, lambda r: r.user_id == user_id),
            key=lambda r: r.created_at,
        )
        for table in _EXPORTED_TABLES
    }
    payload["exported_at"] = iso_now()
    return Response(
        content=json.dumps(jsonable_encoder(payload), ensure_ascii=False, indent=2),
        media_type="application/json",
        headers={"Content-Disposition": 'attachment; filename="lifetrack-data.json"'},
    )
