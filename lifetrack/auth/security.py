# -*- coding: utf-8 -*-
"""Auth — request-scoped user identity.

There is no login flow: every request acts as the configured default user.
Handlers still receive the id through ``Depends(get_current_user_id)`` so the
core functions take it as an explicit argument.
"""

from __future__ import annotations

from fastapi import Request

from ..config import settings


def get_current_user_id(request: Request) -> str:
    # Cache on request for downstream handlers.
    user_id = getattr(request.state, "user_id", None)
    if user_id:
        return user_id
    request.state.user_id = settings.default_user_id
    return request.state.user_id
