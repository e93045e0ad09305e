"""
Health-check route — lightweight endpoint for load balancers and monitoring.
"""

from __future__ import annotations

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from api.responses import message_response
from models.enums import ServiceMessage

router = APIRouter(tags=["health"])


def health_check(request: Request) -> JSONResponse:
    """Return a simple health-check payload with server timestamp."""
    return message_response(ServiceMessage.HEALTHY.value)


# Registered without a method list so every verb reaches the handler.
router.add_route("/health", health_check, include_in_schema=False)
