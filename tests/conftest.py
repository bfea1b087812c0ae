from datetime import date, datetime, timezone
from decimal import Decimal
from typing import List

import pytest
from fastapi.testclient import TestClient

from dorm_app.core.config import Settings
from dorm_app.main import create_application
from dorm_app.models.student import Department, Payment, Student, StudyLevel
from dorm_app.services.store import RecordStore

FIXED_NOW = datetime(2026, 3, 15, 10, 30, 0, tzinfo=timezone.utc)


def payment(payment_id: str, amount, on: date, confirmed: bool = True) -> Payment:
    return Payment(id=payment_id, amount=Decimal(str(amount)), date=on, confirmed=confirmed)


def student(student_id: str, name: str, department: Department, room: str, floor: str,
            payments=(), created: date = date(2025, 1, 10)) -> Student:
    return Student(
        id=student_id,
        name=name,
        department=department,
        study_level=StudyLevel.SECOND_YEAR,
        birth_place="Cairo",
        room_number=room,
        floor_number=floor,
        created_date=created,
        payments=tuple(payments),
    )


@pytest.fixture
def now() -> datetime:
    return FIXED_NOW


@pytest.fixture
def clock(now):
    return lambda: now


@pytest.fixture
def make_payment():
    """Factory for payments (confirmed by default)."""
    return payment


@pytest.fixture
def make_student():
    """Factory for students."""
    return student


@pytest.fixture
def sample_students() -> List[Student]:
    """Roster used across tests, with "now" at 2026-03-15.

    alice: active, 300 today + 250 in February, plus an unconfirmed 100
    bob:   active, two confirmed March payments (100 first, 200 today)
    carol: inactive, 400 in April 2025 and 150 in March 2025
    dan:   inactive, no payments
    """
    return [
        student("s-alice", "Alice Brown", Department.ENGINEERING, "10", "2", [
            payment("payment-a1", 300, date(2026, 3, 15)),
            payment("payment-a2", 250, date(2026, 2, 10)),
            payment("payment-a3", 100, date(2026, 3, 2), confirmed=False),
        ], created=date(2025, 9, 1)),
        student("s-bob", "bob stone", Department.MEDICINE, "9", "1", [
            payment("payment-b1", 100, date(2026, 3, 1)),
            payment("payment-b2", 200, date(2026, 3, 15)),
        ], created=date(2025, 8, 15)),
        student("s-carol", "Carol White", Department.ENGINEERING, "101", "10", [
            payment("payment-c1", 400, date(2025, 4, 20)),
            payment("payment-c2", 150, date(2025, 3, 5)),
        ], created=date(2025, 3, 1)),
        student("s-dan", "Dan Grey", Department.ARTS, "205", "3", created=date(2026, 1, 5)),
    ]


@pytest.fixture
def store(clock, sample_students) -> RecordStore:
    return RecordStore(clock, sample_students)


@pytest.fixture
def settings() -> Settings:
    return Settings(SEED_DEMO_DATA=False, _env_file=None)


@pytest.fixture
def app(settings, clock, sample_students):
    application = create_application(settings, clock)
    application.state.store.load(sample_students)
    return application


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def auth_client(client, settings):
    """Client with the dashboard already logged in."""
    response = client.post(
        "/api/v1/auth/login",
        json={"username": settings.ADMIN_USERNAME, "password": settings.ADMIN_PASSWORD},
    )
    assert response.status_code == 200
    return client
