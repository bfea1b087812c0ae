"""Report service with a single-entry memo over roster snapshots."""

import logging
from collections.abc import Sequence

from dorm_app.core.clock import Clock
from dorm_app.models.student import Student
from dorm_app.schemas.report import PaymentSummary, ReportSummary
from dorm_app.services.aggregation import build_report, payment_summary

logger = logging.getLogger(__name__)


class ReportService:
    """Computes dashboard reports, reusing the last result while the same
    roster snapshot is observed on the same day."""

    def __init__(self, clock: Clock, language: str = "en"):
        self._clock = clock
        self.language = language
        self._cached_roster: Sequence[Student] | None = None
        self._cached_day = None
        self._cached_report: ReportSummary | None = None

    def get_report(self, roster: Sequence[Student]) -> ReportSummary:
        """Aggregate the roster against the current time.

        The cached report is frozen and shared between callers.
        """
        now = self._clock()
        if (
            self._cached_report is not None
            and roster is self._cached_roster
            and now.date() == self._cached_day
        ):
            return self._cached_report

        logger.debug(f"[REPORT] Recomputing report for {len(roster)} students")
        report = build_report(roster, now, self.language)
        self._cached_roster = roster
        self._cached_day = now.date()
        self._cached_report = report
        return report

    def get_payment_summary(self, roster: Sequence[Student]) -> PaymentSummary:
        return payment_summary(roster, self._clock())
