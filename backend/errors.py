"""API error types rendered as ``{"error": <message>}`` JSON responses."""

from fastapi import status


class ApiError(Exception):
    """Base class for errors surfaced to the client."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    headers: dict[str, str] | None = None

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(ApiError):
    """A required field is missing or the request body is unusable."""

    status_code = status.HTTP_400_BAD_REQUEST


class ConflictError(ApiError):
    """The email is already registered."""

    status_code = status.HTTP_409_CONFLICT


class AuthError(ApiError):
    """Bad credentials, or a missing, malformed or unknown token."""

    status_code = status.HTTP_401_UNAUTHORIZED
    headers = {"WWW-Authenticate": "Bearer"}
