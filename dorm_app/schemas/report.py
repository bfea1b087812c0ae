"""Report schemas for the payment dashboard."""

from decimal import Decimal

from pydantic import ConfigDict, Field

from dorm_app.models.student import Department
from dorm_app.schemas.common import BaseSchema


class PaymentSummary(BaseSchema):
    """Header figures of the students page."""

    total_students: int = 0
    active_students: int = 0
    inactive_students: int = 0
    current_month_total: Decimal = Decimal("0")


class MonthlyBreakdownEntry(BaseSchema):
    """One month of the trailing twelve-month table."""

    model_config = ConfigDict(frozen=True)

    month: int = Field(..., ge=1, le=12)
    year: int
    label: str = Field(..., description="Localized month name and year")
    total: Decimal = Decimal("0")
    active_students: int = 0


class DepartmentStat(BaseSchema):
    """Per-department rollup."""

    model_config = ConfigDict(frozen=True)

    department: Department
    label: str
    count: int = 0
    total_paid: Decimal = Decimal("0")
    active: int = 0


class ReportSummary(BaseSchema):
    """Full aggregation over the roster."""

    model_config = ConfigDict(frozen=True)

    total_students: int = 0
    active_students: int = 0
    inactive_students: int = 0
    behind_on_payments: int = Field(
        default=0,
        description="Same figure as inactive_students",
    )
    total_amount_overall: Decimal = Decimal("0")
    total_amount_monthly: Decimal = Decimal("0")
    total_amount_daily: Decimal = Decimal("0")
    monthly_breakdown: tuple[MonthlyBreakdownEntry, ...] = ()
    department_stats: tuple[DepartmentStat, ...] = ()
