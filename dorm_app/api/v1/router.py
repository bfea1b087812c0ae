"""Main API router aggregating all module routers."""

from fastapi import APIRouter, Depends

from dorm_app.api.v1.endpoints import auth, reports, students
from dorm_app.core.dependencies import require_authenticated

api_router = APIRouter()

# Authentication (open)
api_router.include_router(
    auth.router,
    prefix="/auth",
    tags=["Authentication"],
)

# Students and payments (login required)
api_router.include_router(
    students.router,
    prefix="/students",
    tags=["Students"],
    dependencies=[Depends(require_authenticated)],
)

# Reports (login required)
api_router.include_router(
    reports.router,
    prefix="/reports",
    tags=["Reports"],
    dependencies=[Depends(require_authenticated)],
)
