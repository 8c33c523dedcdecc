# -*- coding: utf-8 -*-
"""Query and path parameter helpers shared by the routers."""

from __future__ import annotations

from fastapi import HTTPException

from .utils import calendar_day


def parse_day_or_400(value: str | None, *, field: str = "date") -> str | None:
    if value is None:
        return None
    try:
        return calendar_day(value)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=f"{field} must be YYYY-MM-DD") from exc
