"""Demo roster loaded at startup."""

import logging
import random
from datetime import date
from decimal import Decimal

from dorm_app.models.student import Department, Payment, Student, StudyLevel

logger = logging.getLogger(__name__)

DEMO_STUDENTS = [
    # id, name, department, level, birthplace, room, floor, joined
    ("1", "Ahmed Mohammed Ali", Department.ENGINEERING, StudyLevel.THIRD_YEAR, "Riyadh", "101", "1", date(2023, 9, 1)),
    ("2", "Sarah Johnson", Department.MEDICINE, StudyLevel.FIFTH_YEAR, "New York", "205", "2", date(2023, 8, 15)),
    ("3", "Fatima Ahmed Al-Zahrani", Department.ARTS, StudyLevel.SECOND_YEAR, "Jeddah", "312", "3", date(2023, 9, 10)),
    ("4", "Michael Chen", Department.SCIENCE, StudyLevel.FOURTH_YEAR, "Los Angeles", "108", "1", date(2023, 7, 20)),
    ("5", "Abdullah Saad Al-Qahtani", Department.BUSINESS, StudyLevel.FIRST_YEAR, "Dammam", "220", "2", date(2023, 8, 1)),
]


def _add_month(value: date) -> date:
    year, month = divmod(value.year * 12 + value.month, 12)
    # Clamp to the 28th so every month has the day
    return date(year, month + 1, min(value.day, 28))


def generate_payment_history(start: date, today: date, rng: random.Random) -> tuple[Payment, ...]:
    """One payment slot per month from ``start`` to ``today``.

    About 80% of months are paid and about 90% of paid months are confirmed.
    """
    payments = []
    current = start
    payment_number = 1
    while current <= today:
        if rng.random() > 0.2:
            payments.append(
                Payment(
                    id=f"payment-{payment_number}",
                    amount=Decimal(rng.randrange(200, 700)),
                    date=current,
                    confirmed=rng.random() > 0.1,
                )
            )
            payment_number += 1
        current = _add_month(current)
    return tuple(payments)


def demo_students(today: date, seed: int | None = None) -> list[Student]:
    """Build the demo roster with payment histories up to ``today``."""
    rng = random.Random(seed)
    students = [
        Student(
            id=student_id,
            name=name,
            department=department,
            study_level=level,
            birth_place=birth_place,
            room_number=room,
            floor_number=floor,
            created_date=joined,
            payments=generate_payment_history(joined, today, rng),
        )
        for student_id, name, department, level, birth_place, room, floor, joined in DEMO_STUDENTS
    ]
    logger.info(f"[SEED] Generated {len(students)} demo students")
    return students
