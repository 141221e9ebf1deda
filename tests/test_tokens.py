"""Tests for bearer token encoding and decoding."""

import base64
from unittest.mock import patch

import pytest

from backend.services.tokens import TokenDecodeError, decode_token, issue_token


def test_issue_token_encodes_email_and_millis():
    """Token is base64 of email, colon, and epoch milliseconds."""
    with patch("backend.services.tokens._now_millis", return_value=1700000000123):
        token = issue_token("ann@x.com")

    assert base64.b64decode(token).decode() == "ann@x.com:1700000000123"


def test_issue_token_uses_current_time():
    """Timestamp part is a plausible epoch-millis value."""
    _, _, stamp = base64.b64decode(issue_token("a@b.c")).decode().partition(":")
    assert stamp.isdigit()
    assert int(stamp) > 1_600_000_000_000


def test_decode_token_returns_email():
    token = issue_token("ann@x.com")
    assert decode_token(token) == "ann@x.com"


def test_decode_token_splits_on_first_separator():
    """Only the text before the first colon is the email."""
    token = base64.b64encode(b"a:b:c").decode()
    assert decode_token(token) == "a"


def test_decode_token_non_ascii_email():
    token = issue_token("zoë@example.com")
    assert decode_token(token) == "zoë@example.com"


@pytest.mark.parametrize("token", ["not-base64!!", "abc", "Zm9v YmFy", "ü"])
def test_decode_token_rejects_invalid_base64(token):
    with pytest.raises(TokenDecodeError):
        decode_token(token)


def test_decode_token_without_separator_returns_whole_payload():
    token = base64.b64encode(b"no-separator-here").decode()
    assert decode_token(token) == "no-separator-here"


def test_decode_token_rejects_non_utf8_payload():
    token = base64.b64encode(b"\xff\xfe:123").decode()
    with pytest.raises(TokenDecodeError):
        decode_token(token)


def test_decode_token_empty_string():
    assert decode_token("") == ""
