"""Domain Types: identifiers, limits and the plain records the rules operate on.

Invariants:
    - AccountId, MessageId wrap store-assigned integers: id is None until first save
    - Records are transport- and ORM-independent; repositories map rows to them
    - Limits live here so pure checks and ORM column sizes share one source

Design Decisions:
    - NewType over wrapper classes: zero runtime cost, full type-checker support
    - dataclasses over ORM objects in the core: rules can be tested with in-memory fakes
"""

from dataclasses import dataclass
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

AccountId = NewType("AccountId", int)
MessageId = NewType("MessageId", int)


# ─── Limits ──────────────────────────────────────────────────────

MIN_PASSWORD_LENGTH = 4
MAX_MESSAGE_LENGTH = 255
USERNAME_MAX_LENGTH = 255

# ids are 32-bit INTEGER columns; epoch is BIGINT
MIN_STORE_ID = -(2**31)
MAX_STORE_ID = 2**31 - 1
MIN_EPOCH = -(2**63)
MAX_EPOCH = 2**63 - 1


def in_id_range(value: int) -> bool:
    return MIN_STORE_ID <= value <= MAX_STORE_ID


# ─── Records ─────────────────────────────────────────────────────

@dataclass
class Account:
    """A registered user.

    `password` holds whatever the store keeps: the raw candidate before
    registration, the encoded hash afterwards.
    """
    username: str | None
    password: str | None
    id: AccountId | None = None


@dataclass
class Message:
    """A short text item authored by exactly one account."""
    posted_by: AccountId | None
    message_text: str | None
    time_posted_epoch: int | None = None
    id: MessageId | None = None
