"""Dashboard controller: the intent interface a presenter drives."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Iterable, Optional

from ingestion.connectors.base import IngestError
from ingestion.models.domain import Article
from ingestion.services.ingestion import IngestionService
from ingestion.settings import DashboardSettings, get_settings

from .models import ApiStatus, PageView
from .status import StatusLog
from .store import ArticleStore

_ERROR_MESSAGES = {
    "auth": "ERROR: Invalid or missing API key",
    "rate_limited": "ERROR: API rate limit reached",
    "timeout": "ERROR: Request timeout - network issue",
    "network": "ERROR: Connection failed - network error",
}


def describe_error(error: IngestError) -> str:
    """Human-readable one-line classification for the status log."""
    if error.kind in _ERROR_MESSAGES:
        return _ERROR_MESSAGES[error.kind]
    if error.kind == "not_configured":
        return "WARNING: API key not configured"
    if error.kind == "api":
        return f"ERROR: API error: {error}"
    return f"ERROR: {error}"


class Dashboard:
    """Owns the article store and serializes ingestion behind one in-flight flag.

    A refresh requested while another ingestion is running is dropped rather
    than queued, so the article set is replaced at most once per completed
    fetch.
    """

    def __init__(
        self,
        service: IngestionService,
        store: ArticleStore,
        *,
        status: Optional[StatusLog] = None,
    ):
        self.service = service
        self.store = store
        self.status = status or StatusLog()
        self.api_status: ApiStatus = "unknown"
        self.last_updated: Optional[datetime] = None
        self._in_flight = False
        self.logger = logging.getLogger(__name__)

    @classmethod
    def from_settings(
        cls,
        settings: Optional[DashboardSettings] = None,
        *,
        service: Optional[IngestionService] = None,
    ) -> "Dashboard":
        cfg = settings or get_settings()
        return cls(
            service or IngestionService(settings=cfg),
            ArticleStore(int(cfg.page_size)),
            status=StatusLog(int(cfg.status_log_limit)),
        )

    @property
    def is_loading(self) -> bool:
        return self._in_flight

    async def start(self) -> bool:
        """Probe the API, then load live articles or the demo set."""
        if self._in_flight:
            self.logger.info("dashboard.start.skipped")
            return False
        self._in_flight = True
        try:
            self.status.info("Initializing dashboard...")
            probe = await self.service.test_connection()
            if probe.ok:
                self.api_status = "online"
                self.status.success("API: CONNECTED")
                await self._ingest("startup")
            else:
                self._report_error(probe.error)
                self.status.warning("API connection failed, loading demo data...")
                self._load_demo()
            self.status.success("System ready")
        finally:
            self._in_flight = False
        return True

    async def refresh(self, *, reason: str = "manual") -> bool:
        """Re-run ingestion. Returns False when one is already in flight."""
        if self._in_flight:
            self.logger.info("dashboard.refresh.skipped", extra={"reason": reason})
            return False
        self._in_flight = True
        try:
            await self._ingest(reason)
        finally:
            self._in_flight = False
        return True

    async def _ingest(self, reason: str) -> None:
        self.status.info(f"Fetching latest articles ({reason})...")
        result = await self.service.fetch_articles(self.store.search_query or None)
        if result.ok:
            self.api_status = "online"
            self._apply(result.articles)
            self.status.success(f"Retrieved {len(result.articles)} articles")
        elif result.empty:
            self.status.info("No articles found for current query")
            self._load_demo()
        else:
            self._report_error(result.error)
            self._load_demo()

    def _report_error(self, error: Optional[IngestError]) -> None:
        if error is None:
            return
        if error.kind == "not_configured":
            self.api_status = "degraded"
            self.status.warning(describe_error(error))
            self.status.info("Set GNEWS_API_KEY to load live articles")
            return
        self.api_status = "offline"
        self.status.error(describe_error(error))

    def _load_demo(self) -> None:
        articles = self.service.fallback_articles()
        self._apply(articles)
        self.status.success(f"Loaded {len(articles)} demo articles")

    def _apply(self, articles: Iterable[Article]) -> None:
        self.store.set_articles(articles)
        self.store.set_page(1)
        self.last_updated = datetime.now(timezone.utc)

    def view(self) -> PageView:
        return self.store.page_view()

    def category_counts(self) -> dict[str, int]:
        return self.store.category_counts()

    def search(self, text: str) -> PageView:
        self.store.set_search_query(text)
        if self.store.search_query:
            self.status.info(f'Searching for: "{self.store.search_query}"')
        else:
            self.status.info("Clearing search filter")
        return self.view()

    def select_category(self, label: str) -> PageView:
        self.store.set_category(label)
        self.status.info(f"Filtering: {label.upper()} articles")
        return self.view()

    def go_to_page(self, n: int) -> PageView:
        self.store.set_page(n)
        return self.view()

    def next_page(self) -> PageView:
        self.store.next_page()
        return self.view()

    def prev_page(self) -> PageView:
        self.store.prev_page()
        return self.view()
