"""In-memory record models package."""

from dorm_app.models.base import RecordModel, month_name
from dorm_app.models.student import Department, Payment, Student, StudentProfile, StudyLevel

__all__ = [
    "RecordModel",
    "month_name",
    # Student
    "Student",
    "StudentProfile",
    "Department",
    "StudyLevel",
    # Payment
    "Payment",
]
