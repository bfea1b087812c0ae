"""Student and payment endpoints."""

from io import BytesIO

from fastapi import APIRouter, Query, Response
from fastapi.responses import PlainTextResponse, StreamingResponse

from dorm_app.core.dependencies import CurrentClock, Exports, Reports, Store, Students
from dorm_app.schemas.common import MutationResponse
from dorm_app.schemas.report import PaymentSummary
from dorm_app.schemas.student import (
    PaginatedStudentResponse,
    PaymentCreate,
    SortField,
    SortOrder,
    StudentCreate,
    StudentFilter,
    StudentResponse,
    StudentRestore,
    StudentUpdate,
)

router = APIRouter()


@router.get("", response_model=PaginatedStudentResponse)
def list_students(
    service: Students,
    page: int = Query(1, ge=1),
    page_size: int = Query(50, ge=1, le=500),
    search: str | None = None,
    sort_by: SortField = SortField.NAME,
    order: SortOrder = SortOrder.ASC,
    deleted: bool = False,
):
    """List students with search, sorting and pagination.

    Pass ``deleted=true`` to browse the deleted students instead.
    Room and floor sorting compare the values as numbers.
    """
    filters = StudentFilter(search=search, sort_by=sort_by, order=order, deleted=deleted)
    return service.list_students(filters, page, page_size)


@router.get("/summary", response_model=PaymentSummary)
def get_payment_summary(store: Store, reports: Reports):
    """Totals shown above the student list."""
    return reports.get_payment_summary(store.students)


@router.get("/export.csv")
def export_students_csv(store: Store, exports: Exports, clock: CurrentClock):
    """Download the roster as CSV."""
    content = exports.roster_csv(store.students, clock())
    return Response(
        content=content.encode("utf-8-sig"),
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": "attachment; filename=students.csv"},
    )


@router.get("/export.xlsx")
def export_students_xlsx(store: Store, exports: Exports, clock: CurrentClock):
    """Download the roster as an Excel workbook."""
    content = exports.roster_xlsx(store.students, clock())
    return StreamingResponse(
        BytesIO(content),
        media_type="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
        headers={"Content-Disposition": "attachment; filename=students.xlsx"},
    )


@router.post("", response_model=MutationResponse)
def create_student(request: StudentCreate, service: Students):
    """Add a student with no payments."""
    return service.create_student(request)


@router.post("/restore", response_model=MutationResponse)
def restore_student(record: StudentRestore, service: Students):
    """
    Move a deleted student back to the roster.

    The record is appended even if it is not in the deleted list.
    """
    return service.restore_student(record.to_record())


@router.get("/{student_id}", response_model=StudentResponse)
def get_student(student_id: str, service: Students):
    """Get a student by ID."""
    return service.get_student_response(student_id)


@router.put("/{student_id}", response_model=MutationResponse)
def update_student(student_id: str, request: StudentUpdate, service: Students):
    """Replace a student's details. Unknown IDs are ignored."""
    return service.update_student(student_id, request)


@router.delete("/{student_id}", response_model=MutationResponse)
def delete_student(student_id: str, service: Students):
    """Move a student to the deleted list. Unknown IDs are ignored."""
    return service.delete_student(student_id)


@router.get("/{student_id}/receipt", response_class=PlainTextResponse)
def get_receipt(student_id: str, service: Students, exports: Exports, clock: CurrentClock):
    """Printable receipt (staff and student copies) for the latest confirmed payment."""
    student = service.get_student(student_id)
    return exports.render_receipt(student, clock())


@router.post("/{student_id}/payments", response_model=MutationResponse)
def add_payment(student_id: str, request: PaymentCreate, service: Students):
    """Record a payment dated today. It stays unconfirmed until confirmed."""
    return service.add_payment(student_id, request.amount)


@router.post("/{student_id}/payments/{payment_id}/confirm", response_model=MutationResponse)
def confirm_payment(student_id: str, payment_id: str, service: Students):
    """Confirm a payment."""
    return service.confirm_payment(student_id, payment_id)


@router.delete("/{student_id}/payments/{payment_id}", response_model=MutationResponse)
def delete_payment(student_id: str, payment_id: str, service: Students):
    """Delete a payment."""
    return service.delete_payment(student_id, payment_id)
