"""Login gate for the single administrator account."""

import logging
import secrets
import threading

from dorm_app.core.exceptions import AuthenticationError
from dorm_app.schemas.auth import AuthStatusResponse, LoginRequest

logger = logging.getLogger(__name__)


class AuthGate:
    """Holds the dashboard's authenticated flag.

    Credentials are compared as plain strings against the configured pair;
    there are no tokens or sessions.
    """

    def __init__(self, username: str, password: str):
        self._username = username
        self._password = password
        self._lock = threading.Lock()
        self._authenticated = False

    @property
    def is_authenticated(self) -> bool:
        return self._authenticated

    def login(self, request: LoginRequest) -> AuthStatusResponse:
        """Enter the authenticated state, or reject without changing state."""
        username_ok = secrets.compare_digest(request.username.encode(), self._username.encode())
        password_ok = secrets.compare_digest(request.password.encode(), self._password.encode())
        if not (username_ok and password_ok):
            logger.warning(f"[AUTH] Rejected login for username={request.username!r}")
            raise AuthenticationError("Invalid username or password")

        with self._lock:
            self._authenticated = True
        logger.info(f"[AUTH] Login succeeded for username={request.username!r}")
        return AuthStatusResponse(authenticated=True, message="Logged in")

    def logout(self) -> AuthStatusResponse:
        with self._lock:
            self._authenticated = False
        logger.info("[AUTH] Logged out")
        return AuthStatusResponse(authenticated=False, message="Logged out")

    def status(self) -> AuthStatusResponse:
        return AuthStatusResponse(authenticated=self._authenticated)
