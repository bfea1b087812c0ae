"""FastAPI dependency injection utilities."""

from typing import Annotated

from fastapi import Depends, Request

from dorm_app.core.clock import Clock
from dorm_app.core.config import Settings
from dorm_app.core.exceptions import AuthenticationError
from dorm_app.services.auth import AuthGate
from dorm_app.services.export import ExportService
from dorm_app.services.report import ReportService
from dorm_app.services.store import RecordStore
from dorm_app.services.student import StudentService


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_clock(request: Request) -> Clock:
    return request.app.state.clock


def get_store(request: Request) -> RecordStore:
    """The application's record store."""
    return request.app.state.store


def get_auth_gate(request: Request) -> AuthGate:
    return request.app.state.auth


def get_report_service(request: Request) -> ReportService:
    return request.app.state.reports


def require_authenticated(
    auth: Annotated[AuthGate, Depends(get_auth_gate)],
) -> AuthGate:
    """Reject the request unless the dashboard is logged in."""
    if not auth.is_authenticated:
        raise AuthenticationError("Login required")
    return auth


def get_student_service(
    store: Annotated[RecordStore, Depends(get_store)],
    clock: Annotated[Clock, Depends(get_clock)],
) -> StudentService:
    return StudentService(store, clock)


def get_export_service(
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> ExportService:
    return ExportService(settings.REPORT_LANGUAGE)


# Type aliases for dependency injection
CurrentClock = Annotated[Clock, Depends(get_clock)]
Store = Annotated[RecordStore, Depends(get_store)]
Auth = Annotated[AuthGate, Depends(get_auth_gate)]
Students = Annotated[StudentService, Depends(get_student_service)]
Reports = Annotated[ReportService, Depends(get_report_service)]
Exports = Annotated[ExportService, Depends(get_export_service)]
