"""Account Routes: registration, login and per-author message listing.

Invariants:
    - POST /register: 200 account | 400 validation | 409 duplicate username
    - POST /login: 200 account | 401 invalid credentials
    - GET /accounts/{account_id}/messages: 200 list, empty for unknown authors
      (400 when account_id is outside the 32-bit store range)
    - Error statuses come from the SocialApiError handler, not from this module
"""

import logging

from fastapi import APIRouter, Depends, Path

from social_api.api.dependencies import get_account_rules, get_message_rules
from social_api.core.domain_types import MAX_STORE_ID, MIN_STORE_ID, AccountId
from social_api.schemas.account import AccountCredentials, AccountResponse
from social_api.schemas.message import MessageResponse
from social_api.services.account_rules import AccountRules
from social_api.services.message_rules import MessageRules

logger = logging.getLogger(__name__)
router = APIRouter(tags=["accounts"])


@router.post("/register", response_model=AccountResponse)
async def register(
    body: AccountCredentials, rules: AccountRules = Depends(get_account_rules),
):
    """Register a new account."""
    account = await rules.register(body.to_record())
    return AccountResponse.from_record(account)


@router.post("/login", response_model=AccountResponse)
async def login(
    body: AccountCredentials, rules: AccountRules = Depends(get_account_rules),
):
    """Authenticate; the account itself is the proof of login."""
    account = await rules.authenticate(body.username, body.password)
    return AccountResponse.from_record(account)


@router.get(
    "/accounts/{account_id}/messages", response_model=list[MessageResponse],
)
async def list_messages_by_account(
    account_id: int = Path(ge=MIN_STORE_ID, le=MAX_STORE_ID),
    rules: MessageRules = Depends(get_message_rules),
):
    """All messages posted by one account."""
    messages = await rules.get_by_author(AccountId(account_id))
    return [MessageResponse.from_record(m) for m in messages]
