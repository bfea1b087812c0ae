"""Authentication endpoints."""

from fastapi import APIRouter

from dorm_app.core.dependencies import Auth
from dorm_app.schemas.auth import AuthStatusResponse, LoginRequest

router = APIRouter()


@router.post("/login", response_model=AuthStatusResponse)
def login(request: LoginRequest, auth: Auth):
    """
    Log in with the administrator credentials.

    Wrong credentials return 401 and leave the dashboard logged out.
    """
    return auth.login(request)


@router.post("/logout", response_model=AuthStatusResponse)
def logout(auth: Auth):
    """Return to the logged-out state."""
    return auth.logout()


@router.get("/status", response_model=AuthStatusResponse)
def auth_status(auth: Auth):
    """Report whether the dashboard is logged in."""
    return auth.status()
