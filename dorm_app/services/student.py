"""Student management service."""

import re
from collections.abc import Sequence
from decimal import Decimal

from dorm_app.core.clock import Clock
from dorm_app.core.exceptions import NotFoundError
from dorm_app.core.labels import DEPARTMENT_LABELS
from dorm_app.models.student import Student, StudentProfile
from dorm_app.schemas.common import MutationResponse
from dorm_app.schemas.student import (
    PaginatedStudentResponse,
    SortField,
    SortOrder,
    StudentCreate,
    StudentFilter,
    StudentResponse,
    StudentUpdate,
)
from dorm_app.services.aggregation import current_period, is_active_for
from dorm_app.services.store import RecordStore, StoreSnapshot

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def parse_int_prefix(value: str) -> int | None:
    """Integer at the start of ``value`` ("12B" -> 12), or None."""
    match = _LEADING_INT.match(value)
    return int(match.group(1)) if match else None


SORT_KEYS = {
    SortField.NAME: lambda s: s.name.lower(),
    SortField.DATE: lambda s: s.created_date,
    SortField.AMOUNT: lambda s: s.total_paid,
}

NUMERIC_SORT_FIELDS = {
    SortField.ROOM: lambda s: s.room_number,
    SortField.FLOOR: lambda s: s.floor_number,
}


def matches_search(student: Student, search: str) -> bool:
    """Case-insensitive match on name or department, substring match on room."""
    term = search.lower()
    departments = [student.department.value] + [
        labels[student.department] for labels in DEPARTMENT_LABELS.values()
    ]
    return (
        term in student.name.lower()
        or any(term in d.lower() for d in departments)
        or search in student.room_number
    )


def filter_and_sort(
    students: Sequence[Student],
    search: str | None = None,
    sort_by: SortField = SortField.NAME,
    order: SortOrder = SortOrder.ASC,
) -> list[Student]:
    """Filtered, stably sorted copy of ``students``."""
    result = [s for s in students if matches_search(s, search)] if search else list(students)
    descending = order == SortOrder.DESC
    if sort_by not in NUMERIC_SORT_FIELDS:
        result.sort(key=SORT_KEYS[sort_by], reverse=descending)
        return result

    # Non-numeric rooms/floors stay after numeric ones in either order
    field = NUMERIC_SORT_FIELDS[sort_by]
    numeric = [s for s in result if parse_int_prefix(field(s)) is not None]
    other = [s for s in result if parse_int_prefix(field(s)) is None]
    numeric.sort(key=lambda s: parse_int_prefix(field(s)), reverse=descending)
    other.sort(key=field, reverse=descending)
    return numeric + other


class StudentService:
    """Student and payment operations on top of the record store."""

    def __init__(self, store: RecordStore, clock: Clock):
        self.store = store
        self._clock = clock

    def _respond(self, student: Student) -> StudentResponse:
        month, year = current_period(self._clock())
        return StudentResponse.from_record(student, is_active_for(student, month, year))

    def _outcome(
        self,
        before: StoreSnapshot,
        after: StoreSnapshot,
        applied_message: str,
        data=None,
    ) -> MutationResponse:
        applied = after is not before
        return MutationResponse(
            applied=applied,
            message=applied_message if applied else "Nothing changed",
            data=data if applied else None,
        )

    def get_student(self, student_id: str) -> Student:
        """Get student by ID."""
        student = self.store.get_student(student_id)
        if not student:
            raise NotFoundError("Student", student_id)
        return student

    def get_student_response(self, student_id: str) -> StudentResponse:
        return self._respond(self.get_student(student_id))

    def list_students(
        self,
        filters: StudentFilter | None = None,
        page: int = 1,
        page_size: int = 50,
    ) -> PaginatedStudentResponse:
        """List students with filtering, sorting and pagination."""
        filters = filters or StudentFilter()
        source = self.store.deleted_students if filters.deleted else self.store.students
        students = filter_and_sort(source, filters.search, filters.sort_by, filters.order)

        total = len(students)
        offset = (page - 1) * page_size
        return PaginatedStudentResponse(
            items=[self._respond(s) for s in students[offset:offset + page_size]],
            total=total,
            page=page,
            page_size=page_size,
            total_pages=(total + page_size - 1) // page_size,
        )

    def create_student(self, request: StudentCreate) -> MutationResponse:
        """Create a new student."""
        before = self.store.snapshot
        after = self.store.add_student(StudentProfile(**request.model_dump()))
        student = after.students[-1]
        return self._outcome(before, after, f"Student '{student.name}' added", self._respond(student))

    def update_student(self, student_id: str, request: StudentUpdate) -> MutationResponse:
        """Replace a student's editable fields, keeping id, date and payments."""
        before = self.store.snapshot
        existing = self.store.get_student(student_id)
        if existing is None:
            return self._outcome(before, before, "")
        record = existing.model_copy(update=request.model_dump())
        after = self.store.update_student(record)
        return self._outcome(before, after, f"Student '{record.name}' updated", self._respond(record))

    def delete_student(self, student_id: str) -> MutationResponse:
        before = self.store.snapshot
        after = self.store.delete_student(student_id)
        return self._outcome(before, after, "Student moved to deleted students")

    def restore_student(self, record: Student) -> MutationResponse:
        before = self.store.snapshot
        after = self.store.restore_student(record)
        return self._outcome(before, after, f"Student '{record.name}' restored", self._respond(record))

    def add_payment(self, student_id: str, amount: Decimal) -> MutationResponse:
        before = self.store.snapshot
        after = self.store.add_payment(student_id, amount)
        data = None
        if after is not before:
            student = next(s for s in after.students if s.id == student_id)
            data = self._respond(student)
        return self._outcome(before, after, "Payment added, awaiting confirmation", data)

    def confirm_payment(self, student_id: str, payment_id: str) -> MutationResponse:
        before = self.store.snapshot
        after = self.store.confirm_payment(student_id, payment_id)
        return self._outcome(before, after, "Payment confirmed")

    def delete_payment(self, student_id: str, payment_id: str) -> MutationResponse:
        before = self.store.snapshot
        after = self.store.delete_payment(student_id, payment_id)
        return self._outcome(before, after, "Payment deleted")
