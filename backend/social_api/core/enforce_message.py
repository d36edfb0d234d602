"""Message Validation Enforcement: content rules for message creation and edits.

Invariants:
    - All functions are PURE: no IO, no async, no DB, no side effects
    - Return error dict on violation, None on success
    - message_text is 1..MAX_MESSAGE_LENGTH characters and not whitespace-only
    - posted_by must be present; whether it references an account is a store
      question answered by MessageRules, not here
"""

from social_api.core.domain_types import MAX_MESSAGE_LENGTH


def check_posted_by(posted_by: int | None) -> dict | None:
    """Author reference present."""
    if posted_by is None:
        return _error("AUTHOR_MISSING", "Posted by is required", "posted_by")
    return None


def check_message_text(message_text: str | None) -> dict | None:
    """Text non-blank and within the length limit."""
    if message_text is None or not message_text.strip():
        return _error(
            "MESSAGE_TEXT_BLANK", "Message text cannot be blank", "message_text",
        )
    if len(message_text) > MAX_MESSAGE_LENGTH:
        return _error(
            "MESSAGE_TEXT_TOO_LONG",
            f"Message text must be at most {MAX_MESSAGE_LENGTH} characters",
            "message_text",
        )
    return None


def validate_new_message(
    posted_by: int | None, message_text: str | None,
) -> dict | None:
    """First failing creation check (author reference, then text)."""
    return check_posted_by(posted_by) or check_message_text(message_text)


def author_not_found(posted_by: int | None) -> dict:
    """Error for a posted_by that references no account."""
    return _error(
        "AUTHOR_NOT_FOUND",
        f"Posted by must refer to an existing user (got {posted_by})",
        "posted_by",
    )


def _error(code: str, message: str, field: str) -> dict:
    return {"status": "error", "error_code": code, "message": message, "field": field}
