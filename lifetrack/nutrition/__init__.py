# -*- coding: utf-8 -*-
"""Nutrition domain (food catalog, meal logging, daily totals, weekly report).

Meal entries carry a ``totals_cache`` so reads never need the food catalog;
the aggregators in :mod:`.aggregation` only look at those caches.
"""
