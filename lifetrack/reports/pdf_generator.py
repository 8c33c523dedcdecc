# -*- coding: utf-8 -*-
"""
PDF report generator

Renders the 7-day nutrition report as a one-page PDF.
"""

from __future__ import annotations

from datetime import datetime
from io import BytesIO
from typing import List, Optional

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import cm
from reportlab.platypus import HRFlowable, Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from ..nutrition.models import NutritionGoal, WeeklyReport


class WeeklyReportPDF:
    """Weekly nutrition report PDF."""

    def __init__(self, font_name: str = "Helvetica"):
        self.font_name = font_name
        self._setup_styles()

    def _setup_styles(self) -> None:
        self.styles = getSampleStyleSheet()

        self.styles.add(ParagraphStyle(
            name='ReportTitle',
            fontName=self.font_name,
            fontSize=18,
            leading=24,
            alignment=1,  # centered
            spaceAfter=12,
        ))

        self.styles.add(ParagraphStyle(
            name='ReportHeading',
            fontName=self.font_name,
            fontSize=14,
            leading=18,
            spaceBefore=12,
            spaceAfter=6,
            textColor=colors.HexColor('#2c3e50'),
        ))

        self.styles.add(ParagraphStyle(
            name='ReportSmall',
            fontName=self.font_name,
            fontSize=8,
            leading=10,
            textColor=colors.grey,
        ))

    def generate(
        self,
        report: WeeklyReport,
        goal: Optional[NutritionGoal] = None,
        output_path: Optional[str] = None,
    ) -> bytes:
        """
        Render the report.

        Args:
            report: weekly report data
            goal: active goal, adds a target column when given
            output_path: also write the PDF here (optional)

        Returns:
            bytes: PDF content
        """
        buffer = BytesIO()

        doc = SimpleDocTemplate(
            buffer,
            pagesize=A4,
            rightMargin=2*cm,
            leftMargin=2*cm,
            topMargin=2*cm,
            bottomMargin=2*cm,
            title="Weekly nutrition report",
        )

        story = []
        first, last = report.daily[0].date, report.daily[-1].date
        story.append(Paragraph(f"Nutrition report: {first} to {last}", self.styles['ReportTitle']))
        story.append(Spacer(1, 12))

        story.extend(self._build_averages_section(report, goal))
        story.extend(self._build_daily_section(report))

        story.append(Spacer(1, 24))
        story.append(Paragraph(
            f"Generated {datetime.now().strftime('%Y-%m-%d %H:%M')}. "
            f"Averages cover all {len(report.daily)} days, including days with nothing logged.",
            self.styles['ReportSmall'],
        ))

        doc.build(story)

        pdf_content = buffer.getvalue()
        buffer.close()

        if output_path:
            with open(output_path, 'wb') as f:
                f.write(pdf_content)

        return pdf_content

    def _build_averages_section(self, report: WeeklyReport, goal: Optional[NutritionGoal]) -> List:
        elements = []

        elements.append(Paragraph(f"Daily averages ({report.period})", self.styles['ReportHeading']))
        elements.append(HRFlowable(width="100%", thickness=1, color=colors.grey))

        avg = report.averages
        data = [["Nutrient", "Average", "Target"]]
        data.append(["Calories (kcal)", f"{avg.calories:.0f}", f"{goal.calorie_target}" if goal else "-"])
        data.append(["Protein (g)", f"{avg.protein:.1f}", f"{goal.protein_target}" if goal else "-"])
        data.append(["Fiber (g)", f"{avg.fiber:.1f}", f"{goal.fiber_target or 25}" if goal else "-"])
        data.append(["Sugar (g)", f"{avg.sugar:.1f}", "-"])

        table = Table(data, colWidths=[6*cm, 4*cm, 4*cm])
        table.setStyle(self._grid_style())
        elements.append(table)
        elements.append(Spacer(1, 12))

        return elements

    def _build_daily_section(self, report: WeeklyReport) -> List:
        elements = []

        elements.append(Paragraph("By day", self.styles['ReportHeading']))
        elements.append(HRFlowable(width="100%", thickness=1, color=colors.grey))

        data = [["Date", "Calories", "Protein (g)", "Fiber (g)", "Sugar (g)"]]
        for day in report.daily:
            data.append([
                day.date,
                f"{day.calories:.0f}",
                f"{day.protein:.1f}",
                f"{day.fiber:.1f}",
                f"{day.sugar:.1f}",
            ])

        table = Table(data, colWidths=[4*cm, 3*cm, 3*cm, 3*cm, 3*cm])
        table.setStyle(self._grid_style())
        elements.append(table)

        return elements

    def _grid_style(self) -> TableStyle:
        return TableStyle([
            ('FONTNAME', (0, 0), (-1, -1), self.font_name),
            ('FONTSIZE', (0, 0), (-1, -1), 9),
            ('BACKGROUND', (0, 0), (-1, 0), colors.HexColor('#ecf0f1')),
            ('TEXTCOLOR', (0, 0), (-1, 0), colors.HexColor('#2c3e50')),
            ('ALIGN', (1, 0), (-1, -1), 'CENTER'),
            ('GRID', (0, 0), (-1, -1), 0.5, colors.grey),
            ('BOTTOMPADDING', (0, 0), (-1, -1), 6),
            ('TOPPADDING', (0, 0), (-1, -1), 6),
        ])
