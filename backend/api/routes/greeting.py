"""
Greeting route — the public ``/api`` endpoint.
"""

from __future__ import annotations

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from api.responses import message_response
from models.enums import ServiceMessage

router = APIRouter(tags=["greeting"])


def greeting(request: Request) -> JSONResponse:
    return message_response(ServiceMessage.GREETING.value)


router.add_route("/api", greeting, include_in_schema=False)
