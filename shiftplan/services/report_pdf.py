# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""PDF rendering of employee hour reports."""

from datetime import datetime
from io import BytesIO

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import cm, mm
from reportlab.platypus import (
    Paragraph,
    SimpleDocTemplate,
    Spacer,
    Table,
    TableStyle,
)

from shiftplan.services.reporting_service import EmployeeReport

HEADER_BACKGROUND = colors.Color(0.9, 0.9, 0.9)


def _hours(value: float) -> str:
    return f"{value:.2f}h"


class EmployeeReportPdfGenerator:
    """Generates a PDF hours report for one sales person."""

    def __init__(self, report: EmployeeReport) -> None:
        """Initialize the generator.

        Args:
            report: The report to render.
        """
        self.report = report
        self.styles = getSampleStyleSheet()
        self._setup_styles()

    def _setup_styles(self) -> None:
        """Set up custom paragraph styles."""
        self.styles.add(
            ParagraphStyle(
                "ReportTitle",
                parent=self.styles["Heading1"],
                fontSize=16,
                spaceAfter=12,
            )
        )
        self.styles.add(
            ParagraphStyle(
                "SectionHeader",
                parent=self.styles["Heading2"],
                fontSize=12,
                spaceBefore=15,
                spaceAfter=8,
            )
        )

    def generate(self) -> bytes:
        """Render the report.

        Returns:
            PDF file content as bytes
        """
        buffer = BytesIO()
        doc = SimpleDocTemplate(
            buffer,
            pagesize=A4,
            rightMargin=2 * cm,
            leftMargin=2 * cm,
            topMargin=2 * cm,
            bottomMargin=2 * cm,
            title=self.get_filename(),
        )

        elements = [
            self._create_header(),
            Spacer(1, 10 * mm),
            self._create_summary(),
            Paragraph("Weeks", self.styles["SectionHeader"]),
            self._create_week_table(),
        ]
        doc.build(elements)
        return buffer.getvalue()

    def get_filename(self) -> str:
        name = "_".join(self.report.sales_person.name.lower().split())
        return (
            f"hours_{name}_{self.report.from_date.isoformat()}"
            f"_{self.report.to_date.isoformat()}.pdf"
        )

    def _create_header(self) -> Table:
        """Create the report header with sales person and window."""
        period_str = (
            f"{self.report.from_date.strftime('%d.%m.%Y')} - "
            f"{self.report.to_date.strftime('%d.%m.%Y')}"
        )
        header_data = [
            [Paragraph("Hours report", self.styles["ReportTitle"]), ""],
            [
                Paragraph(
                    f"Sales person: {self.report.sales_person.name}",
                    self.styles["Normal"],
                ),
                Paragraph(f"Period: {period_str}", self.styles["Normal"]),
            ],
            [
                "",
                Paragraph(
                    f"Generated: {datetime.now().strftime('%d.%m.%Y %H:%M')}",
                    self.styles["Normal"],
                ),
            ],
        ]

        table = Table(header_data, colWidths=[9 * cm, 8 * cm])
        table.setStyle(
            TableStyle(
                [
                    ("SPAN", (0, 0), (1, 0)),
                    ("VALIGN", (0, 0), (-1, -1), "TOP"),
                    ("BOTTOMPADDING", (0, 0), (-1, -1), 4),
                ]
            )
        )
        return table

    def _create_summary(self) -> Table:
        """Create the totals table."""
        r = self.report
        summary_data = [
            ["Summary", "", "", ""],
            *(
                [label, _hours(value), category, _hours(category_value)]
                for label, value, category, category_value in (
                    ("Expected", r.expected_hours, "Shift plan", r.shiftplan_hours),
                    ("Overall", r.overall_hours, "Extra work", r.extra_work_hours),
                    ("Carryover", r.carryover_hours, "Vacation", r.vacation_hours),
                    ("Balance", r.balance_hours, "Sick leave", r.sick_leave_hours),
                )
            ),
            [
                "Vacation days",
                f"{r.vacation_days:.1f} / {r.vacation_entitlement:.1f}",
                "Holiday",
                _hours(r.holiday_hours),
            ],
        ]

        # Unavailable and custom categories, two per row
        extra = [("Unavailable", r.unavailable_hours)] + [
            (total.name, total.hours) for total in r.custom_extra_hours
        ]
        for index in range(0, len(extra), 2):
            row = []
            for label, value in extra[index : index + 2]:
                row += [label, _hours(value)]
            summary_data.append(row + ["", ""] * (2 - len(row) // 2))

        table = Table(summary_data, colWidths=[4 * cm, 3.5 * cm, 4 * cm, 3.5 * cm])
        table.setStyle(
            TableStyle(
                [
                    # Header row
                    ("SPAN", (0, 0), (3, 0)),
                    ("BACKGROUND", (0, 0), (3, 0), HEADER_BACKGROUND),
                    ("FONTNAME", (0, 0), (3, 0), "Helvetica-Bold"),
                    # All cells
                    ("GRID", (0, 0), (-1, -1), 0.5, colors.grey),
                    ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
                    ("PADDING", (0, 0), (-1, -1), 6),
                    # Label columns
                    ("FONTNAME", (0, 1), (0, -1), "Helvetica-Bold"),
                    ("FONTNAME", (2, 1), (2, -1), "Helvetica-Bold"),
                ]
            )
        )
        return table

    def _create_week_table(self) -> Table:
        """Create one row per calendar week."""
        data = [["Week", "From", "To", "Expected", "Overall", "Balance"]]
        for week in self.report.by_week:
            data.append(
                [
                    f"{week.year}-W{week.week:02d}",
                    week.from_date.strftime("%d.%m."),
                    week.to_date.strftime("%d.%m."),
                    _hours(week.expected_hours),
                    _hours(week.overall_hours),
                    _hours(week.balance),
                ]
            )

        table = Table(data, repeatRows=1)
        table.setStyle(
            TableStyle(
                [
                    ("BACKGROUND", (0, 0), (-1, 0), HEADER_BACKGROUND),
                    ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
                    ("GRID", (0, 0), (-1, -1), 0.5, colors.grey),
                    ("ALIGN", (3, 1), (-1, -1), "RIGHT"),
                    ("FONTSIZE", (0, 0), (-1, -1), 9),
                ]
            )
        )
        return table
