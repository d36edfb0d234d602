"""Boundary Protocols: store contracts consumed by the rule services.

Invariants:
    - Core NEVER imports from shell: dependency arrows point inward only
    - Absent rows are reported as None / False, never as exceptions
    - save() assigns an id on first write and returns the stored record
    - Store constraint violations surface as ConflictError / ValidationError

Design Decisions:
    - Protocol over ABC: structural subtyping, SQL and in-memory stores need no common base
    - Async in Protocol: implementations do IO; the rules await them one call at a time
"""

from typing import Protocol

from social_api.core.domain_types import Account, AccountId, Message, MessageId


class AccountRepository(Protocol):
    """Contract for account persistence: implemented by shell."""
    async def find_by_username(self, username: str) -> Account | None: ...
    async def exists_by_id(self, account_id: AccountId) -> bool: ...
    async def save(self, account: Account) -> Account: ...


class MessageRepository(Protocol):
    """Contract for message persistence: implemented by shell."""
    async def find_by_id(self, message_id: MessageId) -> Message | None: ...
    async def exists_by_id(self, message_id: MessageId) -> bool: ...
    async def save(self, message: Message) -> Message: ...
    async def delete_by_id(self, message_id: MessageId) -> bool: ...
    async def find_all(self) -> list[Message]: ...
    async def find_by_author(self, account_id: AccountId) -> list[Message]: ...
