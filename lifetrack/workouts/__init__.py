# -*- coding: utf-8 -*-
"""Workouts domain (strength sessions, sets, cardio, CSV export)."""
