"""Enumerations used across the application."""

from __future__ import annotations

from enum import Enum


class ServiceMessage(str, Enum):
    HEALTHY = "Service is healthy"
    GREETING = "Hello from Go API"
