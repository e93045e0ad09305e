"""Shared reply builder for the message endpoints."""

from __future__ import annotations

from datetime import datetime, timezone

from fastapi.responses import JSONResponse

from models.response import MessageResponse


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def message_response(message: str) -> JSONResponse:
    """Stamp *message* with the current time and render it as JSON (status 200)."""
    payload = MessageResponse(message=message, timestamp=utc_now())
    return JSONResponse(payload.model_dump(mode="json"))
