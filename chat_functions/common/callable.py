"""Callable-operation protocol helpers.

Callable operations are invoked with a JSON body of the form ``{"data": ...}``
and answer with ``{"result": ...}`` on success or
``{"error": {"status": "INVALID_ARGUMENT", "message": "...", "details": ...}}``
on failure, the HTTP status being derived from the error code.
"""
from __future__ import annotations

import json
import logging
from typing import Any, Dict, Optional

from fastapi import Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

logger = logging.getLogger(__name__)

# error code -> HTTP status
CALLABLE_ERROR_CODES: Dict[str, int] = {
    "ok": 200,
    "cancelled": 499,
    "unknown": 500,
    "invalid-argument": 400,
    "deadline-exceeded": 504,
    "not-found": 404,
    "already-exists": 409,
    "permission-denied": 403,
    "resource-exhausted": 429,
    "failed-precondition": 400,
    "aborted": 409,
    "out-of-range": 400,
    "unimplemented": 501,
    "internal": 500,
    "unavailable": 503,
    "data-loss": 500,
    "unauthenticated": 401,
}


def canonical_status(code: str) -> str:
    """``invalid-argument`` -> ``INVALID_ARGUMENT``."""
    return code.replace("-", "_").upper()


class CallableErrorBody(BaseModel):
    status: str
    message: str
    details: Optional[Any] = None


class CallableError(Exception):
    """Typed error raised by callable operations."""

    def __init__(self, code: str, message: str, details: Optional[Any] = None) -> None:
        if code not in CALLABLE_ERROR_CODES:
            raise ValueError(f"unknown callable error code: {code}")
        self.code = code
        self.message = message
        self.details = details
        super().__init__(message)

    @property
    def http_status(self) -> int:
        return CALLABLE_ERROR_CODES[self.code]

    def to_body(self) -> Dict[str, Any]:
        body = CallableErrorBody(status=canonical_status(self.code), message=self.message, details=self.details)
        return {"error": body.model_dump(exclude_none=True)}


def callable_result(result: Any) -> Dict[str, Any]:
    return {"result": result}


async def read_callable_data(request: Request) -> Any:
    """Extract the ``data`` member from a callable request body."""
    raw = await request.body()
    try:
        body = json.loads(raw or b"null")
    except ValueError as exc:
        logger.info("Rejecting callable request with non-JSON body")
        raise CallableError("invalid-argument", "Request body is not valid JSON") from exc
    if not isinstance(body, dict) or "data" not in body:
        raise CallableError("invalid-argument", "Request body is missing data field")
    return body["data"]


async def callable_error_handler(request: Request, exc: CallableError) -> JSONResponse:
    return JSONResponse(content=exc.to_body(), status_code=exc.http_status)
