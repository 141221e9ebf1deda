"""In-memory models."""

from backend.models.user import User

__all__ = ["User"]
