"""Error hierarchy tests: status codes, categories and the REST envelope."""

import pytest

from social_api.core.errors import (
    ConflictError,
    DatabaseError,
    ErrorCategory,
    ErrorContext,
    InvalidCredentialsError,
    ResourceNotFoundError,
    ValidationError,
    raise_for,
)


def test_validation_error_is_400():
    exc = ValidationError("bad", field="username")
    assert exc.http_status == 400
    assert exc.category == ErrorCategory.VALIDATION
    assert exc.field == "username"


def test_invalid_credentials_is_validation_error_with_401():
    exc = InvalidCredentialsError()
    assert isinstance(exc, ValidationError)
    assert exc.http_status == 401
    assert exc.code == "INVALID_CREDENTIALS"
    assert exc.message == "Invalid username or password"


def test_conflict_error_is_409():
    assert ConflictError("dup").http_status == 409


def test_not_found_and_database_statuses():
    assert ResourceNotFoundError("Message", "9").http_status == 404
    assert DatabaseError("boom", "commit").http_status == 503


def test_to_response_envelope():
    body = ConflictError("Username already exists", context=ErrorContext(account_id=3)).to_response()
    error = body["error"]
    assert error["code"] == "CONFLICT"
    assert error["message"] == "Username already exists"
    assert error["category"] == "conflict"
    assert error["context"]["account_id"] == 3
    assert "timestamp" in error


def test_raise_for_none_is_noop():
    raise_for(None)


def test_raise_for_error_dict():
    with pytest.raises(ValidationError) as info:
        raise_for({"error_code": "USERNAME_BLANK", "message": "m", "field": "username"})
    assert info.value.code == "USERNAME_BLANK"
    assert info.value.field == "username"
