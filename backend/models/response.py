"""Pydantic schemas returned by the HTTP endpoints."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel


class MessageResponse(BaseModel):
    """Fixed-shape reply: a message and the time the request was served."""

    message: str
    timestamp: datetime
