"""Payment aggregation over the roster.

Every function here is a pure function of the roster and a reference "now"
which the caller samples once per pass. Totals only count confirmed
payments.
"""

from collections.abc import Sequence
from datetime import date, datetime
from decimal import Decimal

from dorm_app.core.labels import department_label, month_label
from dorm_app.models.base import month_name
from dorm_app.models.student import Department, Student
from dorm_app.schemas.report import (
    DepartmentStat,
    MonthlyBreakdownEntry,
    PaymentSummary,
    ReportSummary,
)

ZERO = Decimal("0")
BREAKDOWN_MONTHS = 12


def current_period(now: datetime | date) -> tuple[str, int]:
    """Month name and year that payments are tagged with for ``now``."""
    return month_name(now), now.year


def is_active_for(student: Student, month: str, year: int) -> bool:
    """A student is active when it has a confirmed payment for that month."""
    return any(p.matches(month, year) for p in student.payments)


def count_active(roster: Sequence[Student], month: str, year: int) -> int:
    return sum(1 for s in roster if is_active_for(s, month, year))


def lifetime_total(roster: Sequence[Student]) -> Decimal:
    return sum((s.total_paid for s in roster), ZERO)


def month_total(roster: Sequence[Student], month: str, year: int) -> Decimal:
    """Sum of each student's first confirmed payment for the month.

    Only the first matching payment of a student is counted, later ones in
    the same month are ignored.
    """
    total = ZERO
    for student in roster:
        first = next((p for p in student.payments if p.matches(month, year)), None)
        if first is not None:
            total += first.amount
    return total


def daily_total(roster: Sequence[Student], day: date) -> Decimal:
    """Sum of every confirmed payment dated ``day``."""
    return sum(
        (p.amount for s in roster for p in s.payments if p.confirmed and p.date == day),
        ZERO,
    )


def trailing_months(now: datetime | date, count: int = BREAKDOWN_MONTHS) -> list[tuple[int, int]]:
    """(year, month) pairs for the ``count`` months ending with ``now``, oldest first."""
    index = now.year * 12 + (now.month - 1)
    return [divmod(i, 12) for i in range(index - count + 1, index + 1)]


def monthly_breakdown(
    roster: Sequence[Student],
    now: datetime | date,
    language: str = "en",
) -> list[MonthlyBreakdownEntry]:
    entries = []
    for year, zero_based_month in trailing_months(now):
        month = zero_based_month + 1
        name = month_name(date(year, month, 1))
        entries.append(
            MonthlyBreakdownEntry(
                month=month,
                year=year,
                label=month_label(month, year, language),
                total=month_total(roster, name, year),
                active_students=count_active(roster, name, year),
            )
        )
    return entries


def department_rollup(
    roster: Sequence[Student],
    now: datetime | date,
    language: str = "en",
) -> list[DepartmentStat]:
    """Group the roster by department, in order of first appearance."""
    month, year = current_period(now)
    groups: dict[Department, list[Student]] = {}
    for student in roster:
        groups.setdefault(student.department, []).append(student)
    return [
        DepartmentStat(
            department=department,
            label=department_label(department, language),
            count=len(members),
            total_paid=lifetime_total(members),
            active=count_active(members, month, year),
        )
        for department, members in groups.items()
    ]


def payment_summary(roster: Sequence[Student], now: datetime | date) -> PaymentSummary:
    month, year = current_period(now)
    active = count_active(roster, month, year)
    return PaymentSummary(
        total_students=len(roster),
        active_students=active,
        inactive_students=len(roster) - active,
        current_month_total=month_total(roster, month, year),
    )


def build_report(
    roster: Sequence[Student],
    now: datetime | date,
    language: str = "en",
) -> ReportSummary:
    """Compute every report figure against a single reference time."""
    today = now.date() if isinstance(now, datetime) else now
    month, year = current_period(today)
    total = len(roster)
    active = count_active(roster, month, year)
    inactive = total - active
    return ReportSummary(
        total_students=total,
        active_students=active,
        inactive_students=inactive,
        behind_on_payments=inactive,
        total_amount_overall=lifetime_total(roster),
        total_amount_monthly=month_total(roster, month, year),
        total_amount_daily=daily_total(roster, today),
        monthly_breakdown=monthly_breakdown(roster, today, language),
        department_stats=department_rollup(roster, today, language),
    )
