"""Message ORM: persists short text posts.

Invariants:
    - posted_by is a FK to accounts.account_id (store-level author integrity)
    - message_text is at most MAX_MESSAGE_LENGTH characters
    - time_posted_epoch is caller-supplied and may be NULL
"""

from sqlalchemy import BigInteger, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from social_api.core.domain_types import MAX_MESSAGE_LENGTH
from social_api.db.base import Base


class Message(Base):
    """Message entity: authored by exactly one account."""
    __tablename__ = "messages"

    message_id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    posted_by: Mapped[int] = mapped_column(
        Integer, ForeignKey("accounts.account_id"), nullable=False, index=True,
    )
    message_text: Mapped[str] = mapped_column(
        String(MAX_MESSAGE_LENGTH), nullable=False,
    )
    time_posted_epoch: Mapped[int | None] = mapped_column(
        BigInteger, nullable=True,
    )
