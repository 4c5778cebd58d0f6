from __future__ import annotations

import logging
from typing import Any, Optional

from pydantic import ValidationError

from chat_functions.messages.repository import MessagesRepository, default_repository
from chat_functions.messages.schemas import (
    ChatQuery,
    DeleteChatResponse,
    GetChatResponse,
    PostMessageRequest,
    PostMessageResult,
)

logger = logging.getLogger(__name__)

POST_FIELDS_MISSING = "Required fields (text or ID's for sender or receiver) are missing"
CHAT_FIELDS_MISSING = "Required fields (ID's for user and chat) are missing"
POST_FAILED = "An error occurred while adding the message"
GET_FAILED = "An error occurred while getting a specific chat"
DELETE_FAILED = "An error occurred while deleting the messages"


class MessagesError(Exception):
    code = "unknown"

    def __init__(self, message: str, details: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details


class MessagesValidationError(MessagesError):
    code = "invalid-argument"


class MessagesStoreError(MessagesError):
    code = "unknown"


class MessagesService:
    def __init__(self, repository: Optional[MessagesRepository] = None) -> None:
        self.repository = repository or default_repository()

    def post_message(self, data: Any) -> PostMessageResult:
        logger.info("Receiving message data for POST: %s", data)
        request = self._parse(PostMessageRequest, data, POST_FIELDS_MISSING)
        try:
            chat_id = request.chatId or self.repository.new_chat_id(request.userId)
            message_id = self.repository.add_message(request.userId, chat_id, request.senderId, request.text)
        except Exception as exc:
            logger.error("Error adding message: %s", exc)
            raise MessagesStoreError(POST_FAILED, details=str(exc)) from exc
        return PostMessageResult(chatId=chat_id, messageId=message_id)

    def get_chat(self, user_id: Optional[str], chat_id: Optional[str]) -> GetChatResponse:
        logger.info("Receiving request for chat user=%s chat=%s", user_id, chat_id)
        query = self._parse(ChatQuery, {"userId": user_id, "chatId": chat_id}, CHAT_FIELDS_MISSING)
        try:
            messages = self.repository.list_messages(query.userId, query.chatId)
        except Exception as exc:
            logger.error("Error fetching messages: %s", exc)
            raise MessagesStoreError(GET_FAILED, details=str(exc)) from exc
        return GetChatResponse(messages=messages)

    def delete_chat(self, user_id: Optional[str], chat_id: Optional[str]) -> DeleteChatResponse:
        logger.info("Receiving request to delete messages user=%s chat=%s", user_id, chat_id)
        query = self._parse(ChatQuery, {"userId": user_id, "chatId": chat_id}, CHAT_FIELDS_MISSING)
        try:
            deleted = self.repository.delete_messages(query.userId, query.chatId)
        except Exception as exc:
            logger.error("Error deleting messages: %s", exc)
            raise MessagesStoreError(DELETE_FAILED, details=str(exc)) from exc
        logger.info("Deleted %d messages from chat %s", deleted, query.chatId)
        return DeleteChatResponse()

    @staticmethod
    def _parse(model, data: Any, message: str):
        if not isinstance(data, dict):
            logger.info("Required fields are missing")
            raise MessagesValidationError(message)
        try:
            return model.model_validate(data)
        except ValidationError as exc:
            logger.info("Required fields are missing: %s", exc)
            raise MessagesValidationError(message) from exc


_default_service: Optional[MessagesService] = None


def get_messages_service() -> MessagesService:
    global _default_service
    if _default_service is None:
        _default_service = MessagesService()
    return _default_service


def set_messages_service(service: Optional[MessagesService]) -> None:
    global _default_service
    _default_service = service
