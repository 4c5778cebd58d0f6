"""Message store client: interface, in-memory fake and backend selection.

Documents live at ``users/{userId}/chats/{chatId}/messages/{messageId}``.
"""
from __future__ import annotations

import logging
import threading
import uuid
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, List, Optional, Protocol, Tuple

from chat_functions.config import runtime_config

logger = logging.getLogger(__name__)

USERS_COLLECTION = "users"
CHATS_COLLECTION = "chats"
MESSAGES_COLLECTION = "messages"


def messages_path(user_id: str, chat_id: str) -> str:
    return f"{USERS_COLLECTION}/{user_id}/{CHATS_COLLECTION}/{chat_id}/{MESSAGES_COLLECTION}"


class MessagesRepository(Protocol):
    def new_chat_id(self, user_id: str) -> str: ...
    def add_message(self, user_id: str, chat_id: str, sender_id: str, text: str) -> str: ...
    def get_message(self, user_id: str, chat_id: str, message_id: str) -> Optional[Dict[str, Any]]: ...
    def list_messages(self, user_id: str, chat_id: str) -> List[Dict[str, Any]]: ...
    def delete_messages(self, user_id: str, chat_id: str) -> int: ...


def _auto_id() -> str:
    # same shape as Firestore auto ids: 20 alphanumeric characters
    return uuid.uuid4().hex[:20]


class InMemoryMessagesRepository:
    def __init__(self) -> None:
        self._chats: Dict[Tuple[str, str], Dict[str, Dict[str, Any]]] = {}
        self._lock = threading.Lock()
        self._last_timestamp: Optional[datetime] = None

    def _server_timestamp(self) -> datetime:
        now = datetime.now(timezone.utc)
        if self._last_timestamp is not None and now <= self._last_timestamp:
            now = self._last_timestamp + timedelta(microseconds=1)
        self._last_timestamp = now
        return now

    def new_chat_id(self, user_id: str) -> str:
        return _auto_id()

    def add_message(self, user_id: str, chat_id: str, sender_id: str, text: str) -> str:
        message_id = _auto_id()
        with self._lock:
            doc = {"senderId": sender_id, "text": text, "timestamp": self._server_timestamp()}
            self._chats.setdefault((user_id, chat_id), {})[message_id] = doc
        return message_id

    def get_message(self, user_id: str, chat_id: str, message_id: str) -> Optional[Dict[str, Any]]:
        with self._lock:
            doc = self._chats.get((user_id, chat_id), {}).get(message_id)
            return dict(doc) if doc is not None else None

    def list_messages(self, user_id: str, chat_id: str) -> List[Dict[str, Any]]:
        with self._lock:
            return [dict(doc) for doc in self._chats.get((user_id, chat_id), {}).values()]

    def delete_messages(self, user_id: str, chat_id: str) -> int:
        with self._lock:
            removed = self._chats.pop((user_id, chat_id), {})
        return len(removed)


def default_repository() -> MessagesRepository:
    backend = runtime_config.get_messages_backend()
    if backend == runtime_config.BACKEND_FIRESTORE:
        from chat_functions.messages.firestore_repository import FirestoreMessagesRepository

        return FirestoreMessagesRepository()
    if backend != runtime_config.BACKEND_MEMORY:
        raise RuntimeError(f"unsupported MESSAGES_BACKEND: {backend}")
    logger.info("Using in-memory message store")
    return InMemoryMessagesRepository()
