"""FastAPI dependencies for authentication and the user store."""

import logging
from typing import Annotated

from fastapi import Depends, Header, Request

from backend.errors import AuthError
from backend.models.user import User
from backend.services.tokens import TokenDecodeError, decode_token
from backend.services.user_store import UserStore

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "


def get_user_store(request: Request) -> UserStore:
    """Dependency that provides the application's user store."""
    return request.app.state.user_store


def get_current_user(
    store: Annotated[UserStore, Depends(get_user_store)],
    authorization: Annotated[str | None, Header()] = None,
) -> User:
    """Get the current user from the ``Authorization: Bearer`` token."""
    if not authorization or not authorization.startswith(BEARER_PREFIX):
        raise AuthError("Missing or invalid token")

    token = authorization.split(" ")[1]
    try:
        email = decode_token(token)
    except TokenDecodeError as e:
        logger.debug(f"Rejected token: {e}")
        raise AuthError("Invalid token format") from e

    user = store.find_by_email(email)
    if user is None:
        raise AuthError("Invalid token")

    return user
