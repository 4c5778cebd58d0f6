"""Runtime configuration helpers for the chat functions."""
from __future__ import annotations

import os
from typing import Optional

BACKEND_MEMORY = "memory"
BACKEND_FIRESTORE = "firestore"


def _get_env(name: str, default: Optional[str] = None) -> Optional[str]:
    return os.getenv(name, default)


def get_firestore_project() -> Optional[str]:
    return _get_env("GCP_PROJECT_ID") or _get_env("GCP_PROJECT")


def get_firestore_database() -> Optional[str]:
    return _get_env("FIRESTORE_DATABASE")


def get_messages_backend() -> str:
    return (_get_env("MESSAGES_BACKEND") or BACKEND_MEMORY).lower()


def get_log_level() -> str:
    return (_get_env("LOG_LEVEL") or "INFO").upper()
