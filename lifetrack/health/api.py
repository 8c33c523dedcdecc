# -*- coding: utf-8 -*-
"""Health domain — API endpoints."""

from __future__ import annotations

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query

from ..auth.security import get_current_user_id
from ..storage import HEALTH_ENTRIES, Storage, get_storage
from ..params import parse_day_or_400
from ..utils import iso_now, new_record_id
from .models import HealthEntry, HealthEntryCreate, HealthEntryPatch

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/health-entries", tags=["Health"])


def _owned_entry_or_404(storage: Storage, entry_id: str, user_id: str) -> HealthEntry:
    entry = storage.get(HEALTH_ENTRIES, entry_id)
    if entry is None or entry.user_id != user_id:
        raise HTTPException(status_code=404, detail="Health entry not found")
    return entry


@router.get("", response_model=List[HealthEntry], summary="List health entries in a date range")
def list_health_entries(
    start_date: str | None = Query(default=None, description="YYYY-MM-DD"),
    end_date: str | None = Query(default=None, description="YYYY-MM-DD"),
    storage: Storage = Depends(get_storage),
    user_id: str = Depends(get_current_user_id),
):
    start = parse_day_or_400(start_date, field="start_date")
    end = parse_day_or_400(end_date, field="end_date")

    def in_range(entry: HealthEntry) -> bool:
        if entry.user_id != user_id:
            return False
        if start and entry.date < start:
            return False
        return not (end and entry.date > end)

    entries = storage.scan(HEALTH_ENTRIES, in_range)
    entries.sort(key=lambda e: e.date)
    return entries


@router.post("", response_model=HealthEntry, summary="Log a health entry")
def create_health_entry(
    request: HealthEntryCreate,
    storage: Storage = Depends(get_storage),
    user_id: str = Depends(get_current_user_id),
):
    entry = HealthEntry(id=new_record_id(), user_id=user_id, created_at=iso_now(), **request.model_dump())
    storage.insert(HEALTH_ENTRIES, entry)
    logger.info("Logged health entry %s for %s", entry.id, entry.date)
    return entry


@router.put("/{entry_id}", response_model=HealthEntry, summary="Update a health entry")
def update_health_entry(
    entry_id: str,
    patch: HealthEntryPatch,
    storage: Storage = Depends(get_storage),
    user_id: str = Depends(get_current_user_id),
):
    _owned_entry_or_404(storage, entry_id, user_id)
    return storage.update(HEALTH_ENTRIES, entry_id, patch)


@router.delete("/{entry_id}", summary="Delete a health entry")
def delete_health_entry(
    entry_id: str,
    storage: Storage = Depends(get_storage),
    user_id: str = Depends(get_current_user_id),
):
    _owned_entry_or_404(storage, entry_id, user_id)
    storage.delete(HEALTH_ENTRIES, entry_id)
    return {"success": True}
