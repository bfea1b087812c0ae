"""Reporting endpoints."""

from fastapi import APIRouter, Response

from dorm_app.core.dependencies import CurrentClock, Exports, Reports, Store
from dorm_app.schemas.report import ReportSummary

router = APIRouter()


@router.get("/summary", response_model=ReportSummary)
def get_report(store: Store, reports: Reports):
    """
    Aggregate payment report.

    Includes active/inactive counts for the current month, overall, monthly
    and daily totals, the last twelve months and a per-department rollup.
    """
    return reports.get_report(store.students)


@router.get("/export.csv")
def export_report_csv(store: Store, reports: Reports, exports: Exports, clock: CurrentClock):
    """Download the detailed report as CSV."""
    now = clock()
    content = exports.detailed_report_csv(reports.get_report(store.students), now)
    filename = f"report_{now.date().isoformat()}.csv"
    return Response(
        content=content.encode("utf-8-sig"),
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": f"attachment; filename={filename}"},
    )
