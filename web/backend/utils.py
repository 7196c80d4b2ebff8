#!/usr/bin/env python3
"""
Utility functions for the web application.
"""

import uuid
from datetime import datetime, timezone
from typing import Optional

from fastapi import Request

SESSION_HEADER = "X-Session-Id"


def safe_datetime_iso(dt: Optional[datetime]) -> Optional[str]:
    """
    Safely convert datetime to ISO format string.

    SQLite drops tzinfo on read, so naive values are treated as UTC.

    Args:
        dt: Datetime object.

    Returns:
        ISO format string or None.
    """
    if dt is None:
        return None
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.isoformat()


def get_session_id(request: Request) -> str:
    """
    Anonymous reporter session id.

    Taken from the X-Session-Id header when the client sends one, otherwise
    a fresh id is minted so reports never carry personal identifiers.
    """
    session_id = (request.headers.get(SESSION_HEADER) or "").strip()
    if session_id:
        return session_id[:64]
    return f"anon-{uuid.uuid4().hex[:16]}"
