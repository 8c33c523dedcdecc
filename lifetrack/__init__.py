# -*- coding: utf-8 -*-
"""LifeTrack: personal life-tracking API."""

__version__ = "1.0.0"
