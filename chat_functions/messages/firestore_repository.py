"""Firestore implementation of the message store client."""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from chat_functions.config import runtime_config
from chat_functions.messages.repository import CHATS_COLLECTION, MESSAGES_COLLECTION, USERS_COLLECTION, messages_path

logger = logging.getLogger(__name__)


class FirestoreMessagesRepository:
    """Messages stored as ``users/{userId}/chats/{chatId}/messages/{messageId}``."""

    def __init__(self, client: Optional[object] = None) -> None:
        try:
            from google.cloud import firestore  # type: ignore
        except Exception as exc:  # pragma: no cover - optional dep
            raise RuntimeError("google-cloud-firestore not installed") from exc
        self._firestore = firestore
        if client is None:
            project = runtime_config.get_firestore_project()
            if not project:
                raise RuntimeError("GCP project is required for Firestore message store")
            database = runtime_config.get_firestore_database()
            kwargs: Dict[str, Any] = {"project": project}
            if database:
                kwargs["database"] = database
            client = firestore.Client(**kwargs)  # type: ignore[arg-type]
        self._client = client

    def _chats(self, user_id: str):
        return self._client.collection(USERS_COLLECTION).document(user_id).collection(CHATS_COLLECTION)

    def _messages(self, user_id: str, chat_id: str):
        return self._chats(user_id).document(chat_id).collection(MESSAGES_COLLECTION)

    def new_chat_id(self, user_id: str) -> str:
        return self._chats(user_id).document().id

    def add_message(self, user_id: str, chat_id: str, sender_id: str, text: str) -> str:
        data = {
            "senderId": sender_id,
            "text": text,
            "timestamp": self._firestore.SERVER_TIMESTAMP,
        }
        _, ref = self._messages(user_id, chat_id).add(data)
        return ref.id

    def get_message(self, user_id: str, chat_id: str, message_id: str) -> Optional[Dict[str, Any]]:
        snap = self._messages(user_id, chat_id).document(message_id).get()
        if snap and snap.exists:
            return snap.to_dict()
        return None

    def list_messages(self, user_id: str, chat_id: str) -> List[Dict[str, Any]]:
        return [snap.to_dict() for snap in self._messages(user_id, chat_id).stream()]

    def delete_messages(self, user_id: str, chat_id: str) -> int:
        snaps = list(self._messages(user_id, chat_id).stream())
        batch = self._client.batch()
        for snap in snaps:
            batch.delete(snap.reference)
        batch.commit()
        logger.info("Deleted %d messages under %s", len(snaps), messages_path(user_id, chat_id))
        return len(snaps)
