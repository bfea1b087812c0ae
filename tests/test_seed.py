import random
from datetime import date

from dorm_app.services.seed import demo_students, generate_payment_history


def test_demo_roster_is_reproducible_with_seed():
    first = demo_students(date(2026, 3, 15), seed=7)
    second = demo_students(date(2026, 3, 15), seed=7)
    assert [s.model_dump() for s in first] == [s.model_dump() for s in second]
    assert [s.id for s in first] == ["1", "2", "3", "4", "5"]
    assert len({s.department for s in first}) == 5


def test_payment_history_has_one_slot_per_month():
    payments = generate_payment_history(date(2025, 1, 31), date(2025, 12, 31), random.Random(1))
    assert all(date(2025, 1, 1) <= p.date <= date(2025, 12, 31) for p in payments)
    assert all(200 <= p.amount < 700 for p in payments)
    assert len({(p.year, p.month) for p in payments}) == len(payments)
    assert len({p.id for p in payments}) == len(payments)
