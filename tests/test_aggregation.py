from datetime import date, datetime, timezone
from decimal import Decimal

import pytest
from pydantic import ValidationError

from dorm_app.models.student import Department
from dorm_app.services.aggregation import (
    build_report,
    count_active,
    current_period,
    daily_total,
    department_rollup,
    is_active_for,
    lifetime_total,
    month_total,
    monthly_breakdown,
    payment_summary,
    trailing_months,
)
from dorm_app.services.report import ReportService


def test_current_period(now):
    assert current_period(now) == ("March", 2026)


def test_active_and_inactive_counts_add_up(sample_students, now):
    report = build_report(sample_students, now)
    assert report.total_students == 4
    assert report.active_students == 2
    assert report.inactive_students + report.active_students == report.total_students
    assert report.behind_on_payments == report.inactive_students


def test_unconfirmed_payment_does_not_make_student_active(make_student, make_payment):
    s = make_student("x", "X", Department.ARTS, "1", "1", [
        make_payment("p", 100, date(2026, 3, 1), confirmed=False),
    ])
    assert not is_active_for(s, "March", 2026)


def test_lifetime_total_is_sum_of_confirmed(sample_students):
    assert lifetime_total(sample_students) == Decimal("1400")
    assert lifetime_total(list(reversed(sample_students))) == Decimal("1400")


def test_month_total_counts_first_match_only(make_student, make_payment):
    s = make_student("x", "X", Department.ARTS, "1", "1", [
        make_payment("p1", 100, date(2026, 3, 1)),
        make_payment("p2", 200, date(2026, 3, 20)),
    ])
    assert month_total([s], "March", 2026) == Decimal("100")


def test_month_total_skips_unconfirmed_before_first_match(sample_students):
    # alice: 300 (confirmed), bob: 100 (first of 100/200)
    assert month_total(sample_students, "March", 2026) == Decimal("400")


def test_daily_total_sums_all_confirmed_today(make_student, make_payment, now):
    s = make_student("x", "X", Department.ARTS, "1", "1", [
        make_payment("p1", 50, now.date()),
        make_payment("p2", 75, now.date()),
        make_payment("p3", 1000, now.date(), confirmed=False),
    ])
    assert daily_total([s], now.date()) == Decimal("125")


def test_daily_total_over_sample(sample_students, now):
    assert daily_total(sample_students, now.date()) == Decimal("500")


@pytest.mark.parametrize("reference, first, last", [
    (date(2026, 3, 15), (2025, 4), (2026, 3)),
    (date(2026, 1, 31), (2025, 2), (2026, 1)),
    (date(2025, 12, 1), (2025, 1), (2025, 12)),
])
def test_trailing_months_window(reference, first, last):
    months = [(year, m + 1) for year, m in trailing_months(reference)]
    assert len(months) == 12
    assert months[0] == first
    assert months[-1] == last
    assert len(set(months)) == 12


def test_monthly_breakdown(sample_students, now):
    breakdown = monthly_breakdown(sample_students, now)
    assert len(breakdown) == 12
    assert breakdown[0].label == "April 2025"
    assert breakdown[0].total == Decimal("400")
    assert breakdown[0].active_students == 1
    february = breakdown[10]
    assert (february.month, february.year) == (2, 2026)
    assert february.total == Decimal("250")
    assert breakdown[-1].label == "March 2026"
    assert breakdown[-1].total == Decimal("400")
    assert breakdown[-1].active_students == 2


def test_monthly_breakdown_arabic_labels(sample_students, now):
    breakdown = monthly_breakdown(sample_students, now, language="ar")
    assert breakdown[-1].label == "مارس 2026"


def test_department_rollup(sample_students, now):
    stats = department_rollup(sample_students, now)
    assert [s.department for s in stats] == [
        Department.ENGINEERING, Department.MEDICINE, Department.ARTS,
    ]
    engineering = stats[0]
    assert engineering.label == "Faculty of Engineering"
    assert engineering.count == 2
    assert engineering.total_paid == Decimal("1100")
    assert engineering.active == 1
    assert stats[2].total_paid == Decimal("0")
    assert stats[2].active == 0


def test_payment_summary(sample_students, now):
    summary = payment_summary(sample_students, now)
    assert summary.total_students == 4
    assert summary.active_students == 2
    assert summary.inactive_students == 2
    assert summary.current_month_total == Decimal("400")


def test_build_report_totals(sample_students, now):
    report = build_report(sample_students, now)
    assert report.total_amount_overall == Decimal("1400")
    assert report.total_amount_monthly == Decimal("400")
    assert report.total_amount_daily == Decimal("500")
    assert len(report.monthly_breakdown) == 12
    assert len(report.department_stats) == 3


def test_empty_roster(now):
    report = build_report([], now)
    assert report.total_students == 0
    assert report.total_amount_overall == Decimal("0")
    assert len(report.monthly_breakdown) == 12
    assert report.department_stats == ()
    assert count_active([], "March", 2026) == 0


def test_build_report_does_not_mutate_roster(sample_students, now):
    before = [s.model_dump() for s in sample_students]
    build_report(sample_students, now)
    assert [s.model_dump() for s in sample_students] == before


def test_report_service_reuses_result_for_same_roster(store, clock):
    service = ReportService(clock)
    roster = store.students
    first = service.get_report(roster)
    assert service.get_report(roster) is first

    store.delete_student("s-dan")
    second = service.get_report(store.students)
    assert second is not first
    assert second.total_students == 3


def test_report_service_recomputes_on_new_day(store):
    times = [datetime(2026, 3, 15, 23, 59, tzinfo=timezone.utc)]
    service = ReportService(lambda: times[-1])
    roster = store.students
    first = service.get_report(roster)
    times.append(datetime(2026, 3, 16, 0, 1, tzinfo=timezone.utc))
    second = service.get_report(roster)
    assert second is not first
    assert second.total_amount_daily == Decimal("0")


def test_cached_report_is_read_only(store, clock):
    report = ReportService(clock).get_report(store.students)
    with pytest.raises(ValidationError):
        report.department_stats[0].count = 99
    with pytest.raises(ValidationError):
        report.monthly_breakdown[-1].total = Decimal("1")
    with pytest.raises(AttributeError):
        report.department_stats.append(report.department_stats[0])
