# -*- coding: utf-8 -*-
"""
Report rendering (PDF).
"""

from .pdf_generator import WeeklyReportPDF

__all__ = [
    'WeeklyReportPDF',
]
