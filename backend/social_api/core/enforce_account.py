"""Account Validation Enforcement: registration preconditions for accounts.

Invariants:
    - All functions are PURE: no IO, no async, no DB, no side effects
    - Return error dict on violation, None on success
    - Username must contain a non-whitespace character
    - Password must be at least MIN_PASSWORD_LENGTH characters (checked before hashing)
"""

from social_api.core.domain_types import MIN_PASSWORD_LENGTH


def check_username(username: str | None) -> dict | None:
    """Username present and not whitespace-only."""
    if username is None or not username.strip():
        return _error("USERNAME_BLANK", "Username cannot be blank", "username")
    return None


def check_password(password: str | None) -> dict | None:
    """Password present and long enough."""
    if password is None or len(password) < MIN_PASSWORD_LENGTH:
        return _error(
            "PASSWORD_TOO_SHORT",
            f"Password must be at least {MIN_PASSWORD_LENGTH} characters long",
            "password",
        )
    return None


def validate_registration(username: str | None, password: str | None) -> dict | None:
    """First failing registration check, username before password."""
    return check_username(username) or check_password(password)


def _error(code: str, message: str, field: str) -> dict:
    return {"status": "error", "error_code": code, "message": message, "field": field}
