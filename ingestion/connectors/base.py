"""Connector abstraction, error taxonomy, and normalization helpers."""

from __future__ import annotations

import asyncio
import uuid
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List, Mapping, Optional

from ingestion.models.domain import (
    DEFAULT_CONTENT,
    DEFAULT_DESCRIPTION,
    DEFAULT_SOURCE_NAME,
    DEFAULT_TITLE,
    PLACEHOLDER_URL,
    Article,
    ArticleSource,
    CategoryLabel,
)
from ingestion.services.categorizer import categorize
from ingestion.utils.timefmt import format_published_at


class IngestError(Exception):
    """Base ingestion error. ``kind`` is a stable machine-readable tag."""

    kind = "error"


class AuthError(IngestError):
    """Upstream rejected the credentials (HTTP 401)."""

    kind = "auth"


class RateLimited(IngestError):
    """Upstream quota exhausted (HTTP 429)."""

    kind = "rate_limited"


class HttpError(IngestError):
    kind = "http"

    def __init__(self, status: int, reason: str = ""):
        detail = f"HTTP {status}" + (f": {reason}" if reason else "")
        super().__init__(detail)
        self.status = status


class ApiError(IngestError):
    """2xx response carrying an application-level error envelope."""

    kind = "api"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class Timeout(IngestError):
    kind = "timeout"


class NetworkError(IngestError):
    """Generic connectivity failure."""

    kind = "network"


class NotConfigured(IngestError):
    """No usable API key; the network is never contacted."""

    kind = "not_configured"


def _text(value: Any, default: str) -> str:
    if value is None:
        return default
    text = str(value).strip()
    return text or default


def build_article(
    item: Mapping[str, Any],
    *,
    category: Optional[CategoryLabel] = None,
    now: Optional[datetime] = None,
) -> Article:
    """Normalize one raw record into an :class:`Article`.

    ``category`` overrides the categorizer; only the built-in demo set uses it.
    """
    source = item.get("source") or {}
    if not isinstance(source, Mapping):
        source = {}
    image = item.get("image")
    return Article(
        id=uuid.uuid4().hex,
        title=_text(item.get("title"), DEFAULT_TITLE),
        description=_text(item.get("description"), DEFAULT_DESCRIPTION),
        content=_text(item.get("content"), DEFAULT_CONTENT),
        url=_text(item.get("url"), PLACEHOLDER_URL),
        image=str(image) if image else None,
        source=ArticleSource(
            name=_text(source.get("name"), DEFAULT_SOURCE_NAME),
            url=_text(source.get("url"), PLACEHOLDER_URL),
        ),
        category=category or categorize(item),
        published_at=format_published_at(item.get("publishedAt") or item.get("published_at"), now),
    )


class BaseConnector(ABC):
    """Abstract search connector with timeout enforcement and normalization."""

    source: str

    async def fetch(self, query: str, *, max_results: int, timeout_seconds: float) -> List[Article]:
        """Run one search and return normalized articles in upstream order.

        The upstream call is cancelled once ``timeout_seconds`` elapse, so a
        late answer is never normalized or returned.
        """
        try:
            raw = await asyncio.wait_for(self._fetch_raw(query, max_results, timeout_seconds), timeout_seconds)
        except asyncio.TimeoutError as exc:
            raise Timeout(f"{self.source} 요청이 {timeout_seconds:g}s 안에 끝나지 않았습니다.") from exc
        return self._normalize(raw)

    @abstractmethod
    async def _fetch_raw(self, query: str, max_results: int, timeout_seconds: float) -> List[Dict[str, Any]]:
        """Return a list of raw item dicts from the upstream."""

    def _normalize(self, items: Iterable[Mapping[str, Any]]) -> List[Article]:
        now = datetime.now(timezone.utc)
        return [build_article(item, now=now) for item in items]
