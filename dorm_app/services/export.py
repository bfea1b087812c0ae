"""CSV/Excel exports and printable receipts."""

import csv
from collections.abc import Sequence
from datetime import datetime
from decimal import Decimal
from io import BytesIO, StringIO

from openpyxl import Workbook
from openpyxl.styles import Alignment, Border, Font, PatternFill, Side
from openpyxl.utils import get_column_letter

from dorm_app.core.exceptions import NoConfirmedPaymentError
from dorm_app.core.labels import TEXT, department_label, month_label, study_level_label
from dorm_app.models.student import Payment, Student
from dorm_app.schemas.report import ReportSummary
from dorm_app.services.aggregation import current_period, is_active_for

RECEIPT_WIDTH = 48


def format_amount(amount: Decimal) -> str:
    """Thousands-separated amount, without decimals for whole numbers."""
    if amount == amount.to_integral_value():
        return f"{int(amount):,}"
    return f"{amount:,.2f}"


def plain_amount(amount: Decimal) -> str:
    if amount == amount.to_integral_value():
        return str(int(amount))
    return f"{amount:.2f}"


def latest_confirmed_payment(student: Student) -> Payment | None:
    """Most recent confirmed payment by date; the earliest listed wins ties."""
    confirmed = student.confirmed_payments
    if not confirmed:
        return None
    return max(confirmed, key=lambda p: p.date)


class ExportService:
    """Builds downloadable documents from roster data."""

    def __init__(self, language: str = "en"):
        self.language = language
        self.text = TEXT[language]

    def _status_label(self, student: Student, month: str, year: int) -> str:
        if is_active_for(student, month, year):
            return self.text["status_active"]
        return self.text["status_inactive"]

    def roster_rows(self, roster: Sequence[Student], now: datetime) -> list[list[str]]:
        """Header plus one row per student."""
        month, year = current_period(now)
        rows = [list(self.text["roster_headers"])]
        for student in roster:
            rows.append([
                student.name,
                department_label(student.department, self.language),
                study_level_label(student.study_level, self.language),
                student.birth_place,
                student.room_number,
                student.floor_number,
                plain_amount(student.total_paid),
                self._status_label(student, month, year),
            ])
        return rows

    def roster_csv(self, roster: Sequence[Student], now: datetime) -> str:
        return _to_csv(self.roster_rows(roster, now))

    def roster_xlsx(self, roster: Sequence[Student], now: datetime) -> bytes:
        """Roster export as an Excel workbook."""
        rows = self.roster_rows(roster, now)

        wb = Workbook()
        ws = wb.active
        ws.title = "Students"

        header_font = Font(bold=True, color="FFFFFF")
        header_fill = PatternFill(start_color="4472C4", end_color="4472C4", fill_type="solid")
        thin_border = Border(
            left=Side(style='thin'),
            right=Side(style='thin'),
            top=Side(style='thin'),
            bottom=Side(style='thin')
        )
        center_align = Alignment(horizontal='center', vertical='center')

        for col_idx, header in enumerate(rows[0], start=1):
            cell = ws.cell(row=1, column=col_idx, value=header)
            cell.font = header_font
            cell.fill = header_fill
            cell.border = thin_border
            cell.alignment = center_align

        for row_idx, row in enumerate(rows[1:], start=2):
            for col_idx, value in enumerate(row, start=1):
                # Total paid is numeric in the sheet
                if col_idx == 7:
                    value = Decimal(value)
                cell = ws.cell(row=row_idx, column=col_idx, value=value)
                cell.border = thin_border

        column_widths = [28, 32, 16, 18, 8, 8, 14, 12]
        for col_idx, width in enumerate(column_widths, start=1):
            ws.column_dimensions[get_column_letter(col_idx)].width = width
        ws.freeze_panes = "A2"

        output = BytesIO()
        wb.save(output)
        output.seek(0)
        return output.getvalue()

    def detailed_report_rows(self, report: ReportSummary, now: datetime) -> list[list]:
        t = self.text
        return [
            [t["report_title"]],
            [t["generated_on"], now.strftime("%d/%m/%Y")],
            [],
            [t["summary_section"]],
            [t["total_students"], report.total_students],
            [t["active_students"], report.active_students],
            [t["inactive_students"], report.inactive_students],
            [t["behind_on_payments"], report.behind_on_payments],
            [],
            [t["financial_section"]],
            [t["total_overall"], format_amount(report.total_amount_overall)],
            [t["total_monthly"], format_amount(report.total_amount_monthly)],
            [t["total_daily"], format_amount(report.total_amount_daily)],
            [],
            [t["monthly_section"]],
            list(t["monthly_headers"]),
            *[
                [entry.label, format_amount(entry.total), entry.active_students]
                for entry in report.monthly_breakdown
            ],
            [],
            [t["department_section"]],
            list(t["department_headers"]),
            *[
                [stat.label, stat.count, format_amount(stat.total_paid), stat.active]
                for stat in report.department_stats
            ],
        ]

    def detailed_report_csv(self, report: ReportSummary, now: datetime) -> str:
        return _to_csv(self.detailed_report_rows(report, now))

    def render_receipt(self, student: Student, now: datetime) -> str:
        """Printable receipt for the student's latest confirmed payment.

        Raises NoConfirmedPaymentError when nothing has been confirmed yet.
        """
        payment = latest_confirmed_payment(student)
        if payment is None:
            raise NoConfirmedPaymentError(student.id)

        t = self.text
        fields = [
            (t["receipt_number"], payment.id.upper()),
            (t["receipt_date"], now.strftime("%d/%m/%Y")),
            (t["receipt_time"], now.strftime("%H:%M:%S")),
            (t["student_name"], student.name),
            (t["department"], department_label(student.department, self.language)),
            (t["study_level"], study_level_label(student.study_level, self.language)),
            (t["room"], student.room_number),
            (t["floor"], student.floor_number),
            (t["paid_for_month"], month_label(payment.date.month, payment.year, self.language)),
            (t["payment_date"], payment.date.strftime("%d/%m/%Y")),
        ]

        def copy(label: str) -> list[str]:
            lines = [
                "=" * RECEIPT_WIDTH,
                t["receipt_title"].center(RECEIPT_WIDTH),
                t["receipt_subtitle"].center(RECEIPT_WIDTH),
                "=" * RECEIPT_WIDTH,
            ]
            lines.extend(f"{name} {value}" for name, value in fields)
            lines.append("-" * RECEIPT_WIDTH)
            lines.append(f"{t['amount_paid']} {format_amount(payment.amount)}")
            lines.append("-" * RECEIPT_WIDTH)
            lines.append(label.center(RECEIPT_WIDTH))
            return lines

        staff = copy(t["staff_copy"])
        student_copy = copy(t["student_copy"])
        return "\n".join(staff + ["", "- " * (RECEIPT_WIDTH // 2), ""] + student_copy) + "\n"


def _to_csv(rows: list[list]) -> str:
    output = StringIO()
    writer = csv.writer(output, lineterminator="\n")
    writer.writerows(rows)
    return output.getvalue()
