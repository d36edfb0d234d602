"""Account ORM: persists registered users.

Invariants:
    - account_id is an autoincrement integer primary key
    - username is UNIQUE: the store rejects duplicate registrations
    - password holds the encoded PBKDF2 hash, never the raw password
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from social_api.core.domain_types import USERNAME_MAX_LENGTH
from social_api.db.base import Base


class Account(Base):
    """Account entity: one row per registered user."""
    __tablename__ = "accounts"

    account_id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    username: Mapped[str] = mapped_column(
        String(USERNAME_MAX_LENGTH), nullable=False, unique=True,
    )
    password: Mapped[str] = mapped_column(String(255), nullable=False)
