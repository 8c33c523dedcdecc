# -*- coding: utf-8 -*-
"""Workouts — CSV export."""

from __future__ import annotations

import csv
import io
from typing import Iterable

from .models import ExportRow

CSV_HEADER = ["Date", "Exercise", "Sets", "Total Reps", "Avg Weight", "Total Volume", "Duration (min)"]


def rows_to_csv(rows: Iterable[ExportRow]) -> str:
    """Serialize export rows; text fields are double-quoted, numbers are bare."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, quoting=csv.QUOTE_NONNUMERIC, lineterminator="\n")
    writer.writerow(CSV_HEADER)
    for row in rows:
        writer.writerow([
            row.date,
            row.exercise,
            row.sets,
            row.total_reps,
            row.average_weight,
            row.total_volume,
            row.duration_minutes,
        ])
    return buffer.getvalue()
