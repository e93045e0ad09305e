"""
FastAPI application entry point for the greeting service.

Start the server with::

    python main.py

or through the installed ``greeting-service`` console script.  The listener
always binds ``0.0.0.0:8080``; a bind failure ends the process.
"""

from __future__ import annotations

import logging

import uvicorn
from fastapi import FastAPI

from config import Settings, get_settings

# ── Route imports ─────────────────────────────────────────────────────
from api.routes.greeting import router as greeting_router
from api.routes.health import router as health_router

HOST = "0.0.0.0"
PORT = 8080


# ── Logging configuration ────────────────────────────────────────────

def _configure_logging(settings: Settings) -> None:
    """Route root logging to stderr at LOG_LEVEL; unknown names mean INFO."""
    level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)
    if not isinstance(level, int):
        level = logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


logger = logging.getLogger("greeting")


# ── Application factory ──────────────────────────────────────────────

def create_app() -> FastAPI:
    """Build the application with its fixed route table."""
    settings = get_settings()
    application = FastAPI(
        title=settings.APP_TITLE,
        description="Health check and greeting endpoints returning timestamped JSON.",
        version=settings.APP_VERSION,
        # Exact path matching: "/health/" must not redirect to "/health".
        redirect_slashes=False,
    )

    # ── Register routers ─────────────────────────────────────────────
    application.include_router(health_router)
    application.include_router(greeting_router)
    return application


app = create_app()


def main() -> None:
    """Configure logging and serve forever on the fixed port."""
    _configure_logging(get_settings())
    logger.info("Server starting on :%d", PORT)
    uvicorn.run(app, host=HOST, port=PORT)


if __name__ == "__main__":
    main()
