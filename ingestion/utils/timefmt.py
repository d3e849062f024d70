"""Rendering of article timestamps for display."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional, Union

RECENT = "Recent"


def _parse(value: Union[str, datetime]) -> datetime:
    if isinstance(value, datetime):
        dt = value
    elif not isinstance(value, str):
        raise TypeError(f"unsupported publish time: {value!r}")
    else:
        text = value.strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        dt = datetime.fromisoformat(text)
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def format_published_at(value: Union[str, datetime, None], now: Optional[datetime] = None) -> str:
    """Render a publish time as ``"5h ago"``, ``"3d ago"`` or ``"Jan 5"``.

    Anything missing or unparseable renders as ``"Recent"``.
    """
    if not value:
        return RECENT
    try:
        published = _parse(value)
    except (TypeError, ValueError):
        return RECENT

    current = now or datetime.now(timezone.utc)
    if current.tzinfo is None:
        current = current.replace(tzinfo=timezone.utc)
    hours = max(0, int((current - published).total_seconds() // 3600))
    if hours < 24:
        return f"{hours}h ago"
    if hours < 168:
        return f"{hours // 24}d ago"
    return f"{published:%b} {published.day}"
