"""Pydantic schemas for API requests and responses."""

from backend.schemas.auth import (
    AuthResponse,
    ErrorResponse,
    HomeResponse,
    LoginRequest,
    MessageResponse,
    ProfileResponse,
    SignupRequest,
    UserResponse,
)

__all__ = [
    "SignupRequest",
    "LoginRequest",
    "UserResponse",
    "ProfileResponse",
    "AuthResponse",
    "HomeResponse",
    "MessageResponse",
    "ErrorResponse",
]
