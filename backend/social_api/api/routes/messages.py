"""Message Routes: create, list, read, edit and delete messages.

Invariants:
    - Absent messages are not errors: GET and DELETE answer 200 with an empty body
    - PATCH answers 200 with body 1 on success, 404 when the message is absent,
      400 (via ValidationError) when the text is invalid
    - DELETE answers body 1 when a row was removed
    - Path ids outside the 32-bit store range answer 400 before any lookup
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Path, Response, status

from social_api.api.dependencies import get_message_rules
from social_api.core.domain_types import MAX_STORE_ID, MIN_STORE_ID, MessageId
from social_api.core.errors import ErrorContext, ResourceNotFoundError
from social_api.schemas.message import MessageCreate, MessageResponse, MessageUpdate
from social_api.services.message_rules import MessageRules

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/messages", tags=["messages"])


@router.post("", response_model=MessageResponse)
async def create_message(
    body: MessageCreate, rules: MessageRules = Depends(get_message_rules),
):
    """Create a message for an existing account."""
    message = await rules.create(body.to_record())
    return MessageResponse.from_record(message)


@router.get("", response_model=list[MessageResponse])
async def list_messages(rules: MessageRules = Depends(get_message_rules)):
    """Every stored message."""
    return [MessageResponse.from_record(m) for m in await rules.get_all()]


@router.get("/{message_id}", response_model=MessageResponse)
async def get_message(
    message_id: int = Path(ge=MIN_STORE_ID, le=MAX_STORE_ID),
    rules: MessageRules = Depends(get_message_rules),
):
    message = await rules.get_by_id(MessageId(message_id))
    if message is None:
        return Response(status_code=status.HTTP_200_OK)
    return MessageResponse.from_record(message)


@router.delete("/{message_id}")
async def delete_message(
    message_id: int = Path(ge=MIN_STORE_ID, le=MAX_STORE_ID),
    rules: MessageRules = Depends(get_message_rules),
):
    """Delete a message. Body 1 when removed, empty when nothing matched."""
    if await rules.delete_by_id(MessageId(message_id)):
        return 1
    return Response(status_code=status.HTTP_200_OK)


@router.patch("/{message_id}")
async def update_message(
    body: MessageUpdate,
    message_id: int = Path(ge=MIN_STORE_ID, le=MAX_STORE_ID),
    rules: MessageRules = Depends(get_message_rules),
):
    """Replace a message's text."""
    updated = await rules.update(MessageId(message_id), body.message_text)
    if updated is None:
        raise HTTPException(
            status.HTTP_404_NOT_FOUND,
            detail=ResourceNotFoundError(
                "Message", str(message_id), ErrorContext(message_id=message_id),
            ).to_response(),
        )
    return 1
