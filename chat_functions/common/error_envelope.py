"""Canonical error envelope for HTTP-style chat function responses.

Standardized structure:
{
  "error": {
    "code": "string",
    "message": "string",
    "http_status": 400,
    "details": {}
  }
}
"""
from __future__ import annotations

from typing import Any, Dict, Optional

from fastapi import HTTPException
from pydantic import BaseModel, Field


class ErrorDetail(BaseModel):
    """Canonical error detail structure."""
    code: str
    message: str
    http_status: int
    details: Dict[str, Any] = Field(default_factory=dict)


class ErrorEnvelope(BaseModel):
    """Top-level error envelope returned by the HTTP endpoints."""
    error: ErrorDetail


def build_error_envelope(
    code: str,
    message: str,
    status_code: int = 400,
    details: Optional[Dict[str, Any]] = None,
) -> ErrorEnvelope:
    """Construct an ErrorEnvelope (without raising)."""
    error_detail = ErrorDetail(
        code=code,
        message=message,
        http_status=status_code,
        details=details or {},
    )
    return ErrorEnvelope(error=error_detail)


def error_response(
    code: str,
    message: str,
    status_code: int = 400,
    details: Optional[Dict[str, Any]] = None,
) -> HTTPException:
    """Build an HTTPException whose detail is the canonical envelope.

    Args:
        code: Machine-readable error code (e.g., "invalid-argument")
        message: Human-readable error message
        status_code: HTTP status code (default 400)
        details: Additional context dict

    Returns:
        HTTPException with canonical error envelope body; callers raise it.
    """
    envelope = build_error_envelope(
        code=code,
        message=message,
        status_code=status_code,
        details=details,
    )
    return HTTPException(status_code=status_code, detail=envelope.model_dump())
