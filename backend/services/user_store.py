"""In-memory user store."""

import logging
from collections.abc import Iterator
from typing import Any

from backend.models.user import User

logger = logging.getLogger(__name__)


class UserStore:
    """Append-only list of users, searched by linear scan.

    Nothing is persisted; the contents live as long as the store object.
    There is no lock, so callers that check for an email and then append
    are not atomic under concurrent access.
    """

    def __init__(self) -> None:
        self._users: list[User] = []

    def __len__(self) -> int:
        return len(self._users)

    def __iter__(self) -> Iterator[User]:
        return iter(self._users)

    def find_by_email(self, email: str) -> User | None:
        """Get a user by email.

        Stored emails are lowercase, so callers normalize before looking up.
        """
        return next((user for user in self._users if user.email == email), None)

    def find_by_credentials(self, email: str, password: Any) -> User | None:
        """Get a user whose email and plaintext password both match."""
        return next(
            (user for user in self._users if user.email == email and user.password == password),
            None,
        )

    def append(self, name: Any, email: str, password: Any) -> User:
        """Create a new user with the next sequential id."""
        user = User(id=len(self._users) + 1, name=name, email=email.lower(), password=password)
        self._users.append(user)
        logger.debug(f"Stored user {user.id} ({user.email})")
        return user
