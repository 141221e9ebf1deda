"""User model."""

from dataclasses import dataclass
from typing import Any


@dataclass
class User:
    """Registered user, held only in process memory.

    ``name`` and ``password`` hold whatever JSON value was sent at signup.
    """

    id: int
    name: Any
    email: str
    password: Any
