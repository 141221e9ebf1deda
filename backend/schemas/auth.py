"""Authentication schemas."""

from typing import Any

from pydantic import BaseModel, ConfigDict


class SignupRequest(BaseModel):
    """Signup request. Fields are checked for presence by the handler.

    Only ``email`` must be a string; name and password are kept as sent.
    """

    name: Any | None = None
    email: str | None = None
    password: Any | None = None


class LoginRequest(BaseModel):
    """Login request."""

    email: str | None = None
    password: Any | None = None


class UserResponse(BaseModel):
    """User information response (never includes the password)."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: Any
    email: str


class ProfileResponse(BaseModel):
    """Name and email shown on the home endpoint."""

    model_config = ConfigDict(from_attributes=True)

    name: Any
    email: str


class AuthResponse(BaseModel):
    """Signup/login response with token and user info."""

    message: str
    user: UserResponse
    token: str


class HomeResponse(BaseModel):
    """Greeting for an authenticated user."""

    message: str
    user: ProfileResponse


class MessageResponse(BaseModel):
    """Plain message response."""

    message: str


class ErrorResponse(BaseModel):
    """Error body returned for every handled failure."""

    error: str
