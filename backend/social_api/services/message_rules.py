"""Message Rules: content validation, author integrity and existence-aware CRUD.

Invariants:
    - create: content checks -> author-exists check -> single store write
    - update: text validated BEFORE existence, so a bad edit to a missing
      message is a ValidationError, not None
    - update replaces only message_text; posted_by and time_posted_epoch untouched
    - Missing messages are None (reads, updates) or False (deletes), never errors
    - get_by_author does not check that the author exists
"""

import logging
from dataclasses import replace

from social_api.core.domain_types import AccountId, Message, MessageId
from social_api.core.enforce_message import (
    author_not_found,
    check_message_text,
    validate_new_message,
)
from social_api.core.errors import ErrorContext, raise_for
from social_api.core.repository_protocols import AccountRepository, MessageRepository

logger = logging.getLogger(__name__)


class MessageRules:
    """Stateless message rules over message and account repositories."""

    def __init__(self, messages: MessageRepository, accounts: AccountRepository):
        self.messages = messages
        self.accounts = accounts

    async def create(self, candidate: Message) -> Message:
        raise_for(validate_new_message(candidate.posted_by, candidate.message_text))
        if not await self.accounts.exists_by_id(candidate.posted_by):
            raise_for(
                author_not_found(candidate.posted_by),
                ErrorContext(account_id=candidate.posted_by),
            )

        message = await self.messages.save(replace(candidate, id=None))
        logger.info(
            "Message created",
            extra={"message_id": message.id, "account_id": message.posted_by},
        )
        return message

    async def get_all(self) -> list[Message]:
        return await self.messages.find_all()

    async def get_by_id(self, message_id: MessageId) -> Message | None:
        return await self.messages.find_by_id(message_id)

    async def delete_by_id(self, message_id: MessageId) -> bool:
        deleted = await self.messages.delete_by_id(message_id)
        if deleted:
            logger.info("Message deleted", extra={"message_id": message_id})
        return deleted

    async def update(self, message_id: MessageId, new_text: str | None) -> Message | None:
        """Replace the text of an existing message.

        Returns None when no message has this id.

        Raises:
            ValidationError: new_text blank or longer than 255 characters.
        """
        raise_for(check_message_text(new_text))

        existing = await self.messages.find_by_id(message_id)
        if existing is None:
            return None
        updated = await self.messages.save(replace(existing, message_text=new_text))
        logger.info("Message updated", extra={"message_id": message_id})
        return updated

    async def get_by_author(self, account_id: AccountId) -> list[Message]:
        return await self.messages.find_by_author(account_id)
