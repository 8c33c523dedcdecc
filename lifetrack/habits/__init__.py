# -*- coding: utf-8 -*-
"""Habits domain (habit definitions, dated entries, streak statistics)."""
