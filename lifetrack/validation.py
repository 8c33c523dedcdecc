# -*- coding: utf-8 -*-
"""Pydantic building blocks shared by the domain models."""

from __future__ import annotations

from typing import ClassVar, Optional, Tuple

from pydantic import BaseModel, model_validator

from .utils import calendar_day


def check_day(value: Optional[str]) -> Optional[str]:
    """``field_validator`` body for YYYY-MM-DD fields; ``None`` passes through."""
    if value is None:
        return None
    return calendar_day(value)


class PatchModel(BaseModel):
    """Partial update: only fields the client sent are merged.

    Fields listed in ``required_fields`` are mandatory on the stored record, so
    an explicit ``null`` for them is rejected here instead of at merge time.
    """

    required_fields: ClassVar[Tuple[str, ...]] = ()

    @model_validator(mode="after")
    def _reject_null_required(self):
        cleared = [name for name in self.required_fields if name in self.model_fields_set and getattr(self, name) is None]
        if cleared:
            raise ValueError(f"{', '.join(cleared)} cannot be null")
        return self
