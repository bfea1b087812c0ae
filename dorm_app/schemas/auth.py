"""Authentication schemas."""

from pydantic import ConfigDict, Field

from dorm_app.schemas.common import BaseSchema


class LoginRequest(BaseSchema):
    """Login request schema."""

    # Credentials are compared exactly as typed
    model_config = ConfigDict(str_strip_whitespace=False)

    username: str = Field(..., min_length=1, max_length=255)
    password: str = Field(..., min_length=1)


class AuthStatusResponse(BaseSchema):
    """Current state of the login gate."""

    authenticated: bool
    message: str | None = None
