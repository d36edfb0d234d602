"""Message enforcement tests: pure tests for message content rules.

Tests cover:
    check_posted_by, check_message_text (boundaries at 1 and 255 chars),
    validate_new_message, author_not_found
"""

from social_api.core.domain_types import MAX_MESSAGE_LENGTH
from social_api.core.enforce_message import (
    author_not_found,
    check_message_text,
    check_posted_by,
    validate_new_message,
)


def test_posted_by_missing_fails():
    assert check_posted_by(None)["error_code"] == "AUTHOR_MISSING"


def test_posted_by_present_passes():
    assert check_posted_by(7) is None


def test_posted_by_zero_is_present():
    assert check_posted_by(0) is None


def test_text_none_fails():
    assert check_message_text(None)["error_code"] == "MESSAGE_TEXT_BLANK"


def test_text_blank_fails():
    assert check_message_text("   ")["error_code"] == "MESSAGE_TEXT_BLANK"


def test_text_single_char_passes():
    assert check_message_text("a") is None


def test_text_at_limit_passes():
    assert check_message_text("x" * MAX_MESSAGE_LENGTH) is None


def test_text_over_limit_fails():
    error = check_message_text("x" * (MAX_MESSAGE_LENGTH + 1))
    assert error["error_code"] == "MESSAGE_TEXT_TOO_LONG"
    assert error["field"] == "message_text"


def test_new_message_checks_author_before_text():
    error = validate_new_message(None, "")
    assert error["error_code"] == "AUTHOR_MISSING"


def test_new_message_valid():
    assert validate_new_message(1, "hello") is None


def test_author_not_found_mentions_id():
    error = author_not_found(42)
    assert error["error_code"] == "AUTHOR_NOT_FOUND"
    assert "42" in error["message"]
