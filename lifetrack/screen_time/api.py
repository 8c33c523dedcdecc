# -*- coding: utf-8 -*-
"""Screen time — API endpoints."""

from __future__ import annotations

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query

from ..auth.security import get_current_user_id
from ..params import parse_day_or_400
from ..storage import SCREEN_TIME_APPS, SCREEN_TIME_ENTRIES, SCREEN_TIME_LIMITS, Storage, get_storage
from ..utils import iso_now, new_record_id
from .models import (
    DailyScreenTime,
    ScreenTimeApp,
    ScreenTimeAppCreate,
    ScreenTimeAppPatch,
    ScreenTimeEntry,
    ScreenTimeEntryCreate,
    ScreenTimeLimit,
    ScreenTimeLimitCreate,
    ScreenTimeLimitPatch,
)
from .usage import daily_usage

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/screen-time", tags=["Screen time"])


def _app_or_404(storage: Storage, app_id: str) -> ScreenTimeApp:
    app = storage.get(SCREEN_TIME_APPS, app_id)
    if app is None:
        raise HTTPException(status_code=404, detail="App not found")
    return app


@router.get("/apps", response_model=List[ScreenTimeApp], summary="List tracked apps")
def list_apps(storage: Storage = Depends(get_storage)):
    apps = storage.scan(SCREEN_TIME_APPS)
    apps.sort(key=lambda a: a.name.lower())
    return apps


@router.post("/apps", response_model=ScreenTimeApp, summary="Add an app")
def create_screen_time_app(request: ScreenTimeAppCreate, storage: Storage = Depends(get_storage)):
    name = request.name.strip()
    if any(a.name.lower() == name.lower() for a in storage.scan(SCREEN_TIME_APPS)):
        raise HTTPException(status_code=409, detail="App already exists")
    app = ScreenTimeApp(id=new_record_id(), created_at=iso_now(), **{**request.model_dump(), "name": name})
    storage.insert(SCREEN_TIME_APPS, app)
    logger.info("Added app %s (%s)", app.id, app.name)
    return app


@router.put("/apps/{app_id}", response_model=ScreenTimeApp, summary="Update an app (category, privacy)")
def update_app(app_id: str, patch: ScreenTimeAppPatch, storage: Storage = Depends(get_storage)):
    _app_or_404(storage, app_id)
    return storage.update(SCREEN_TIME_APPS, app_id, patch)


@router.get("/entries", response_model=List[ScreenTimeEntry], summary="List usage entries")
def list_entries(
    date: str | None = Query(default=None, description="YYYY-MM-DD"),
    storage: Storage = Depends(get_storage),
    user_id: str = Depends(get_current_user_id),
):
    day = parse_day_or_400(date)
    entries = storage.scan(
        SCREEN_TIME_ENTRIES,
        lambda e: e.user_id == user_id and (not day or e.date == day),
    )
    entries.sort(key=lambda e: (e.date, e.created_at), reverse=True)
    return entries


@router.post("/entries", response_model=ScreenTimeEntry, summary="Log minutes spent in an app")
def create_entry(
    request: ScreenTimeEntryCreate,
    storage: Storage = Depends(get_storage),
    user_id: str = Depends(get_current_user_id),
):
    _app_or_404(storage, request.app_id)
    entry = ScreenTimeEntry(id=new_record_id(), user_id=user_id, created_at=iso_now(), **request.model_dump())
    storage.insert(SCREEN_TIME_ENTRIES, entry)
    logger.info("Logged %d min for app %s on %s", entry.minutes, entry.app_id, entry.date)
    return entry


@router.delete("/entries/{entry_id}", summary="Delete a usage entry")
def delete_entry(
    entry_id: str,
    storage: Storage = Depends(get_storage),
    user_id: str = Depends(get_current_user_id),
):
    entry = storage.get(SCREEN_TIME_ENTRIES, entry_id)
    if entry is None or entry.user_id != user_id:
        raise HTTPException(status_code=404, detail="Screen time entry not found")
    storage.delete(SCREEN_TIME_ENTRIES, entry_id)
    return {"success": True}


@router.get("/limits", response_model=List[ScreenTimeLimit], summary="List limits")
def list_limits(storage: Storage = Depends(get_storage), user_id: str = Depends(get_current_user_id)):
    limits = storage.scan(SCREEN_TIME_LIMITS, lambda lim: lim.user_id == user_id)
    limits.sort(key=lambda lim: lim.created_at)
    return limits


@router.post("/limits", response_model=ScreenTimeLimit, summary="Set a daily or per-app limit")
def create_limit(
    request: ScreenTimeLimitCreate,
    storage: Storage = Depends(get_storage),
    user_id: str = Depends(get_current_user_id),
):
    if request.app_id is not None:
        _app_or_404(storage, request.app_id)
    limit = ScreenTimeLimit(id=new_record_id(), user_id=user_id, created_at=iso_now(), **request.model_dump())
    storage.insert(SCREEN_TIME_LIMITS, limit)
    logger.info("Set %d min limit %s for %s", limit.limit_minutes, limit.id, limit.app_id or "all apps")
    return limit


@router.put("/limits/{limit_id}", response_model=ScreenTimeLimit, summary="Update a limit")
def update_limit(
    limit_id: str,
    patch: ScreenTimeLimitPatch,
    storage: Storage = Depends(get_storage),
    user_id: str = Depends(get_current_user_id),
):
    limit = storage.get(SCREEN_TIME_LIMITS, limit_id)
    if limit is None or limit.user_id != user_id:
        raise HTTPException(status_code=404, detail="Screen time limit not found")
    return storage.update(SCREEN_TIME_LIMITS, limit_id, patch)


@router.get("/day/{date}", response_model=DailyScreenTime, summary="Usage for one day against limits")
def day_usage(
    date: str,
    storage: Storage = Depends(get_storage),
    user_id: str = Depends(get_current_user_id),
):
    day = parse_day_or_400(date)
    entries = storage.scan(SCREEN_TIME_ENTRIES, lambda e: e.user_id == user_id and e.date == day)
    apps = {app.id: app for app in storage.scan(SCREEN_TIME_APPS)}
    limits = storage.scan(SCREEN_TIME_LIMITS, lambda lim: lim.user_id == user_id)
    return daily_usage(day, entries, apps, limits)
