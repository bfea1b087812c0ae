"""Student and payment records."""

import enum
from datetime import date
from decimal import Decimal

from pydantic import Field, model_validator

from dorm_app.models.base import RecordModel, month_name


class Department(str, enum.Enum):
    """Faculty a resident student is enrolled in."""

    MEDICINE = "medicine"
    ENGINEERING = "engineering"
    SCIENCE = "science"
    ARTS = "arts"
    BUSINESS = "business"


class StudyLevel(str, enum.Enum):
    """Year of study."""

    FIRST_YEAR = "first_year"
    SECOND_YEAR = "second_year"
    THIRD_YEAR = "third_year"
    FOURTH_YEAR = "fourth_year"
    FIFTH_YEAR = "fifth_year"


class Payment(RecordModel):
    """A monthly housing payment made by a student."""

    id: str
    amount: Decimal = Field(..., ge=0)
    date: date
    month: str
    year: int
    confirmed: bool = False

    @model_validator(mode="before")
    @classmethod
    def derive_period(cls, data):
        """Fill month/year from the payment date when they are omitted."""
        if isinstance(data, dict) and data.get("date") is not None:
            paid_on = data["date"]
            if isinstance(paid_on, str):
                paid_on = date.fromisoformat(paid_on)
            if not isinstance(paid_on, date):
                # Left for field validation to reject
                return data
            data = dict(data)
            data.setdefault("month", month_name(paid_on))
            data.setdefault("year", paid_on.year)
        return data

    @model_validator(mode="after")
    def check_period(self) -> "Payment":
        if self.month != month_name(self.date) or self.year != self.date.year:
            raise ValueError(
                f"month/year ({self.month} {self.year}) do not match payment date {self.date}"
            )
        return self

    def matches(self, month: str, year: int) -> bool:
        """Check if this is a confirmed payment for the given month and year."""
        return self.confirmed and self.month == month and self.year == year


class StudentProfile(RecordModel):
    """Editable fields of a student, without identity or payments."""

    name: str
    department: Department
    study_level: StudyLevel
    birth_place: str = ""
    room_number: str
    floor_number: str


class Student(StudentProfile):
    """A resident student together with the payments it owns."""

    id: str
    created_date: date
    payments: tuple[Payment, ...] = ()

    @property
    def confirmed_payments(self) -> tuple[Payment, ...]:
        return tuple(p for p in self.payments if p.confirmed)

    @property
    def total_paid(self) -> Decimal:
        """Lifetime sum of confirmed payments."""
        return sum((p.amount for p in self.confirmed_payments), Decimal("0"))

    def find_payment(self, payment_id: str) -> Payment | None:
        return next((p for p in self.payments if p.id == payment_id), None)

    def __repr__(self) -> str:
        return f"<Student(id={self.id}, name={self.name}, room={self.room_number})>"
