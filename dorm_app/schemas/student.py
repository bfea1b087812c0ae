"""Student and payment schemas."""

import enum
from datetime import date
from decimal import Decimal

from pydantic import Field

from dorm_app.models.student import Department, Payment, Student, StudyLevel
from dorm_app.schemas.common import BaseSchema, PaginatedResponse


class SortField(str, enum.Enum):
    """Roster sort keys."""

    NAME = "name"
    DATE = "date"
    ROOM = "room"
    FLOOR = "floor"
    AMOUNT = "amount"


class SortOrder(str, enum.Enum):
    ASC = "asc"
    DESC = "desc"


class StudentBase(BaseSchema):
    """Base student schema."""

    name: str = Field(..., min_length=1, max_length=255)
    department: Department
    study_level: StudyLevel
    birth_place: str = Field("", max_length=255)
    room_number: str = Field(..., min_length=1, max_length=20)
    floor_number: str = Field(..., min_length=1, max_length=20)


class StudentCreate(StudentBase):
    """Student creation schema."""

    pass


class StudentUpdate(StudentBase):
    """Full replacement of a student's editable fields."""

    pass


class StudentRestore(StudentBase):
    """A previously deleted student record, payments included."""

    id: str = Field(..., min_length=1)
    created_date: date
    payments: list[Payment] = []

    def to_record(self) -> Student:
        return Student(
            id=self.id,
            name=self.name,
            department=self.department,
            study_level=self.study_level,
            birth_place=self.birth_place,
            room_number=self.room_number,
            floor_number=self.floor_number,
            created_date=self.created_date,
            payments=tuple(self.payments),
        )


class PaymentCreate(BaseSchema):
    """Payment creation schema."""

    amount: Decimal = Field(..., ge=0)


class PaymentResponse(BaseSchema):
    """Payment response schema."""

    id: str
    amount: Decimal
    date: date
    month: str
    year: int
    confirmed: bool

    @classmethod
    def from_record(cls, payment: Payment) -> "PaymentResponse":
        return cls.model_validate(payment)


class StudentResponse(StudentBase):
    """Student response schema."""

    id: str
    created_date: date
    payments: list[PaymentResponse] = []
    total_paid: Decimal = Field(
        default=Decimal("0"),
        description="Lifetime sum of confirmed payments",
    )
    is_active: bool = Field(
        default=False,
        description="Has a confirmed payment for the current month",
    )

    @classmethod
    def from_record(cls, student: Student, is_active: bool = False) -> "StudentResponse":
        return cls(
            id=student.id,
            name=student.name,
            department=student.department,
            study_level=student.study_level,
            birth_place=student.birth_place,
            room_number=student.room_number,
            floor_number=student.floor_number,
            created_date=student.created_date,
            payments=[PaymentResponse.from_record(p) for p in student.payments],
            total_paid=student.total_paid,
            is_active=is_active,
        )


class StudentFilter(BaseSchema):
    """Student filter and sort options."""

    search: str | None = None  # Name, department or room
    sort_by: SortField = SortField.NAME
    order: SortOrder = SortOrder.ASC
    deleted: bool = False


class PaginatedStudentResponse(PaginatedResponse):
    """Paginated student list."""

    items: list[StudentResponse]
