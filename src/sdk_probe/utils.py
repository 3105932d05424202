"""Common utility functions used across probe modules."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional


def utc_now() -> str:
    """Return current UTC timestamp in ISO8601 format."""
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


def format_bool(value: Optional[bool]) -> str:
    if value is None:
        return "unknown"
    return "true" if value else "false"
