"""Settings tests: environment-driven values and their bounds."""

import pytest
from pydantic import ValidationError

from social_api.config import Settings


def test_postgres_url_gets_async_driver():
    settings = Settings(database_url="postgresql://u:p@host/db")
    assert settings.database_url == "postgresql+asyncpg://u:p@host/db"


@pytest.mark.parametrize("iterations", [0, -1])
def test_non_positive_hash_iterations_rejected(iterations):
    with pytest.raises(ValidationError):
        Settings(password_hash_iterations=iterations)


def test_hash_iterations_read_from_environment(monkeypatch):
    monkeypatch.setenv("PASSWORD_HASH_ITERATIONS", "2000")
    assert Settings().password_hash_iterations == 2000
