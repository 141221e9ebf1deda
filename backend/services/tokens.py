"""Bearer token encoding and decoding.

Tokens are the base64 encoding of ``"<email>:<epoch-millis>"``. They carry no
signature and no expiry, so anyone who knows an email can build a valid one.
"""

import base64
import binascii
from datetime import UTC, datetime

SEPARATOR = ":"


class TokenDecodeError(ValueError):
    """Raised when a token cannot be turned back into an email."""


def _now_millis() -> int:
    return int(datetime.now(UTC).timestamp() * 1000)


def issue_token(email: str) -> str:
    """Create a token for the given email, stamped with the current time."""
    raw = f"{email}{SEPARATOR}{_now_millis()}"
    return base64.b64encode(raw.encode("utf-8")).decode("ascii")


def decode_token(token: str) -> str:
    """Return the email embedded in a token.

    The email is everything before the first separator, or the whole payload
    when there is none.
    """
    try:
        decoded = base64.b64decode(token, validate=True).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError, ValueError) as e:
        raise TokenDecodeError(f"Token is not valid base64: {e}") from e

    return decoded.split(SEPARATOR, 1)[0]
