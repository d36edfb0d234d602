"""SQL Repositories: SQLAlchemy implementations of the core store protocols.

Invariants:
    - One AsyncSession per repository instance (request-scoped, injected)
    - Every write commits before returning; reads never commit
    - Rows are mapped to core records (domain_types) before leaving this module
    - accounts.username UNIQUE violation -> ConflictError
    - messages.posted_by FK violation -> ValidationError (AUTHOR_NOT_FOUND)
    - ids outside the 32-bit column range never reach SQL: they read as absent

Design Decisions:
    - Constraint violations translated here so the rules' read-before-write checks
      and the store constraints report the same error kinds
    - find_all / find_by_author order by primary key: insertion order is the
      store-native order clients observe
"""

import logging

from sqlalchemy import delete, exists, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from social_api.core.domain_types import (
    Account, AccountId, Message, MessageId, in_id_range,
)
from social_api.core.enforce_message import author_not_found
from social_api.core.errors import ConflictError, raise_for
from social_api.models.account import Account as AccountModel
from social_api.models.message import Message as MessageModel

logger = logging.getLogger(__name__)


def _account_to_record(row: AccountModel) -> Account:
    return Account(
        id=AccountId(row.account_id),
        username=row.username,
        password=row.password,
    )


def _message_to_record(row: MessageModel) -> Message:
    return Message(
        id=MessageId(row.message_id),
        posted_by=AccountId(row.posted_by),
        message_text=row.message_text,
        time_posted_epoch=row.time_posted_epoch,
    )


class SqlAccountRepository:
    """AccountRepository backed by the `accounts` table."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_by_username(self, username: str) -> Account | None:
        result = await self.db.execute(
            select(AccountModel).where(AccountModel.username == username),
        )
        row = result.scalar_one_or_none()
        return _account_to_record(row) if row else None

    async def exists_by_id(self, account_id: AccountId) -> bool:
        if not in_id_range(account_id):
            return False
        result = await self.db.execute(
            select(exists().where(AccountModel.account_id == account_id)),
        )
        return bool(result.scalar())

    async def save(self, account: Account) -> Account:
        row = AccountModel(username=account.username, password=account.password)
        self.db.add(row)
        try:
            await self.db.commit()
        except IntegrityError as e:
            await self.db.rollback()
            logger.warning(
                f"Account insert rejected by store: {e.orig}",
                extra={"username": account.username},
            )
            raise ConflictError("Username already exists", field="username")
        return _account_to_record(row)


class SqlMessageRepository:
    """MessageRepository backed by the `messages` table."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_by_id(self, message_id: MessageId) -> Message | None:
        if not in_id_range(message_id):
            return None
        row = await self.db.get(MessageModel, message_id)
        return _message_to_record(row) if row else None

    async def exists_by_id(self, message_id: MessageId) -> bool:
        if not in_id_range(message_id):
            return False
        result = await self.db.execute(
            select(exists().where(MessageModel.message_id == message_id)),
        )
        return bool(result.scalar())

    async def save(self, message: Message) -> Message:
        """Insert when id is None, otherwise overwrite the stored row's fields."""
        if message.posted_by is None or not in_id_range(message.posted_by):
            raise_for(author_not_found(message.posted_by))
        row = None
        if message.id is not None:
            row = await self.db.get(MessageModel, message.id)
        if row is None:
            row = MessageModel(message_id=message.id)
            self.db.add(row)
        row.posted_by = message.posted_by
        row.message_text = message.message_text
        row.time_posted_epoch = message.time_posted_epoch
        try:
            await self.db.commit()
        except IntegrityError as e:
            await self.db.rollback()
            logger.warning(
                f"Message write rejected by store: {e.orig}",
                extra={"account_id": message.posted_by},
            )
            raise_for(author_not_found(message.posted_by))
        return _message_to_record(row)

    async def delete_by_id(self, message_id: MessageId) -> bool:
        if not in_id_range(message_id):
            return False
        result = await self.db.execute(
            delete(MessageModel).where(MessageModel.message_id == message_id),
        )
        await self.db.commit()
        return result.rowcount > 0

    async def find_all(self) -> list[Message]:
        result = await self.db.execute(
            select(MessageModel).order_by(MessageModel.message_id),
        )
        return [_message_to_record(row) for row in result.scalars().all()]

    async def find_by_author(self, account_id: AccountId) -> list[Message]:
        if not in_id_range(account_id):
            return []
        result = await self.db.execute(
            select(MessageModel)
            .where(MessageModel.posted_by == account_id)
            .order_by(MessageModel.message_id),
        )
        return [_message_to_record(row) for row in result.scalars().all()]
