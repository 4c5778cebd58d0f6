"""Liveness and readiness probes for the hosting platform."""
import logging

from fastapi import APIRouter
from pydantic import BaseModel

from chat_functions import __version__
from chat_functions.common.error_envelope import error_response
from chat_functions.config import runtime_config
from chat_functions.messages.service import get_messages_service

logger = logging.getLogger(__name__)

router = APIRouter(tags=["system"])


class HealthStatus(BaseModel):
    status: str
    version: str = __version__
    backend: str = ""


@router.get("/health", response_model=HealthStatus)
def health_check():
    return HealthStatus(status="ok")


@router.get("/ready", response_model=HealthStatus)
def readiness_check():
    """Ready once the configured message store client can be built."""
    backend = runtime_config.get_messages_backend()
    try:
        get_messages_service()
    except Exception as exc:
        logger.error("Message store %s not ready: %s", backend, exc)
        raise error_response(
            "unavailable",
            "Message store is not ready",
            status_code=503,
            details={"backend": backend, "reason": str(exc)},
        ) from exc
    return HealthStatus(status="ok", backend=backend)
