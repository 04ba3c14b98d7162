"""Response envelopes shared by every endpoint.

Success bodies look like ``{"success": true, "data": ..., "message": ...}``;
failures like ``{"success": false, "error": {"code", "message", "details"?}}``.
"""

from __future__ import annotations

from typing import Any, List, Optional

from pydantic import BaseModel

from .expense import FieldError


class ErrorBody(BaseModel):
    code: str
    message: str
    details: Optional[List[FieldError]] = None


class SuccessEnvelope(BaseModel):
    success: bool = True
    data: Any
    message: Optional[str] = None


class ErrorEnvelope(BaseModel):
    success: bool = False
    error: ErrorBody


def success_envelope(data: Any, message: Optional[str] = None) -> dict:
    return SuccessEnvelope(data=data, message=message).model_dump(exclude_none=True)


def error_envelope(
    code: str, message: str, details: Optional[List[FieldError]] = None
) -> dict:
    body = ErrorBody(code=code, message=message, details=details)
    return ErrorEnvelope(error=body).model_dump(exclude_none=True)
