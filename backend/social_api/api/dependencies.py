"""API Dependencies: wires request-scoped DB sessions into the rule services.

Invariants:
    - One AsyncSession per request, shared by every repository in that request
    - Rule services are built per request and hold no state beyond repositories
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from social_api.config import get_settings
from social_api.infrastructure.database import get_db
from social_api.infrastructure.sql_repositories import (
    SqlAccountRepository, SqlMessageRepository,
)
from social_api.services.account_rules import AccountRules
from social_api.services.message_rules import MessageRules


async def get_account_rules(db: AsyncSession = Depends(get_db)) -> AccountRules:
    return AccountRules(
        SqlAccountRepository(db),
        hash_iterations=get_settings().password_hash_iterations,
    )


async def get_message_rules(db: AsyncSession = Depends(get_db)) -> MessageRules:
    return MessageRules(SqlMessageRepository(db), SqlAccountRepository(db))
