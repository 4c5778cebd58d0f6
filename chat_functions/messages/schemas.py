"""Schemas for chat message requests and responses.

Field names follow the wire format (camelCase) used by the mobile clients.
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, field_validator

STATUS_NEW_MESSAGE = "new message"
STATUS_GOT_CHAT = "successfully got chat messages"
STATUS_DELETED_CHAT = "successfully deleted chat messages"


def _coerce_identifier(value: Any) -> Any:
    # chat ids generated by older clients arrive as numbers
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    return value


def _require_non_empty(value: Optional[str]) -> str:
    if not value:
        raise ValueError("must be a non-empty string")
    return value


class PostMessageRequest(BaseModel):
    userId: str
    text: str
    senderId: str
    chatId: Optional[str] = None

    @field_validator("chatId", mode="before")
    @classmethod
    def coerce_chat_id(cls, value: Any) -> Any:
        # any falsy chat id (0, False, "") means "start a new chat"
        if not value:
            return None
        return _coerce_identifier(value)

    @field_validator("userId", "text", "senderId")
    @classmethod
    def required_fields(cls, value: str) -> str:
        return _require_non_empty(value)


class ChatQuery(BaseModel):
    userId: str
    chatId: str

    @field_validator("chatId", mode="before")
    @classmethod
    def coerce_chat_id(cls, value: Any) -> Any:
        return _coerce_identifier(value)

    @field_validator("userId", "chatId")
    @classmethod
    def required_fields(cls, value: str) -> str:
        return _require_non_empty(value)


class PostMessageResult(BaseModel):
    status: str = STATUS_NEW_MESSAGE
    chatId: str
    messageId: str


class GetChatResponse(BaseModel):
    status: str = STATUS_GOT_CHAT
    messages: List[Dict[str, Any]] = Field(default_factory=list)


class DeleteChatResponse(BaseModel):
    status: str = STATUS_DELETED_CHAT
