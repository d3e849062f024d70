"""Operator-facing status channel."""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Callable, Deque, List

from .models import StatusLevel

_LOG_LEVELS = {
    "info": logging.INFO,
    "success": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


@dataclass(frozen=True)
class StatusEntry:
    level: StatusLevel
    message: str
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


class StatusLog:
    """Keeps the most recent entries and mirrors each one to ``logging``."""

    def __init__(self, limit: int = 10, *, logger: logging.Logger | None = None):
        self._entries: Deque[StatusEntry] = deque(maxlen=limit)
        self._listeners: List[Callable[[StatusEntry], None]] = []
        self.logger = logger or logging.getLogger(__name__)

    @property
    def entries(self) -> list[StatusEntry]:
        return list(self._entries)

    def subscribe(self, listener: Callable[[StatusEntry], None]) -> None:
        self._listeners.append(listener)

    def push(self, message: str, level: StatusLevel = "info") -> StatusEntry:
        entry = StatusEntry(level=level, message=message)
        self._entries.append(entry)
        self.logger.log(_LOG_LEVELS[level], "status.%s", level, extra={"status_message": message})
        for listener in list(self._listeners):
            listener(entry)
        return entry

    def info(self, message: str) -> StatusEntry:
        return self.push(message, "info")

    def success(self, message: str) -> StatusEntry:
        return self.push(message, "success")

    def warning(self, message: str) -> StatusEntry:
        return self.push(message, "warning")

    def error(self, message: str) -> StatusEntry:
        return self.push(message, "error")
