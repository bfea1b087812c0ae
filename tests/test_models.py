from datetime import date
from decimal import Decimal

import pytest
from pydantic import ValidationError

from dorm_app.models.student import Payment


def test_payment_derives_month_and_year():
    p = Payment(id="payment-1", amount=Decimal("120"), date=date(2025, 12, 31))
    assert p.month == "December"
    assert p.year == 2025
    assert p.confirmed is False


def test_payment_rejects_inconsistent_period():
    with pytest.raises(ValidationError):
        Payment(id="payment-1", amount=10, date=date(2025, 12, 31), month="January", year=2025)


def test_payment_rejects_negative_amount():
    with pytest.raises(ValidationError):
        Payment(id="payment-1", amount=-1, date=date(2025, 12, 31))


def test_payment_accepts_iso_date_string():
    p = Payment.model_validate({"id": "p", "amount": "50", "date": "2026-02-01"})
    assert (p.month, p.year) == ("February", 2026)


def test_student_is_immutable(sample_students):
    alice = sample_students[0]
    with pytest.raises(ValidationError):
        alice.name = "Someone else"


def test_student_total_paid_counts_confirmed_only(sample_students):
    alice = sample_students[0]
    assert alice.total_paid == Decimal("550")
    assert len(alice.confirmed_payments) == 2
    assert alice.find_payment("payment-a3").confirmed is False
    assert alice.find_payment("missing") is None
