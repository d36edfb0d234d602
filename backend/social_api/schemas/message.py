"""Message Schemas: create/update payloads and the message view."""

from pydantic import BaseModel, ConfigDict, Field

from social_api.core.domain_types import MAX_EPOCH, MIN_EPOCH, Message


class MessageCreate(BaseModel):
    """Body of POST /messages. A client-sent messageId is ignored."""
    model_config = ConfigDict(populate_by_name=True)

    message_id: int | None = Field(None, alias="messageId")
    posted_by: int | None = Field(None, alias="postedBy")
    message_text: str | None = Field(None, alias="messageText")
    time_posted_epoch: int | None = Field(
        None, alias="timePostedEpoch", ge=MIN_EPOCH, le=MAX_EPOCH,
    )

    def to_record(self) -> Message:
        return Message(
            posted_by=self.posted_by,
            message_text=self.message_text,
            time_posted_epoch=self.time_posted_epoch,
        )


class MessageUpdate(BaseModel):
    """Body of PATCH /messages/{message_id}. Only messageText is read."""
    model_config = ConfigDict(populate_by_name=True)

    message_text: str | None = Field(None, alias="messageText")


class MessageResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    message_id: int = Field(alias="messageId")
    posted_by: int = Field(alias="postedBy")
    message_text: str = Field(alias="messageText")
    time_posted_epoch: int | None = Field(None, alias="timePostedEpoch")

    @classmethod
    def from_record(cls, message: Message) -> "MessageResponse":
        return cls(
            message_id=message.id,
            posted_by=message.posted_by,
            message_text=message.message_text,
            time_posted_epoch=message.time_posted_epoch,
        )
