"""Ingestion service: live fetch with tagged results and demo fallback."""

from __future__ import annotations

import uuid
from typing import List, Optional

from ingestion.connectors.base import BaseConnector, IngestError, NetworkError, NotConfigured
from ingestion.connectors.gnews import GNewsConnector
from ingestion.models.domain import Article, FetchResult, ProbeResult
from ingestion.services.fallback import demo_articles
from ingestion.settings import DashboardSettings, get_settings
from ingestion.utils.logging import get_logger

PROBE_QUERY = "test"


class IngestionService:
    """Fetches articles without ever raising out of its public methods.

    Every failure is returned as a tagged :class:`FetchResult` or
    :class:`ProbeResult`; deciding what to show instead is left to the caller.
    """

    def __init__(
        self,
        connector: Optional[BaseConnector] = None,
        *,
        settings: Optional[DashboardSettings] = None,
    ):
        self.settings = settings or get_settings()
        self.connector = connector or GNewsConnector(self.settings)
        self.logger = get_logger(__name__)

    async def fetch_articles(self, query: Optional[str] = None) -> FetchResult:
        trace_id = uuid.uuid4().hex
        effective_query = (query or "").strip() or self.settings.default_query
        if not self.settings.has_api_key:
            self.logger.warning("ingest.fetch.not_configured", extra={"trace_id": trace_id})
            return FetchResult(error=NotConfigured("API key not configured"))

        self.logger.info(
            "ingest.fetch.start",
            extra={"trace_id": trace_id, "query": effective_query[:50], "max": int(self.settings.max_results)},
        )
        try:
            articles = await self.connector.fetch(
                effective_query,
                max_results=int(self.settings.max_results),
                timeout_seconds=self.settings.request_timeout_ms / 1000.0,
            )
        except IngestError as exc:
            self.logger.warning(
                "ingest.fetch.failed",
                extra={"trace_id": trace_id, "kind": exc.kind, "error": str(exc)},
            )
            return FetchResult(error=exc)
        except Exception as exc:
            self.logger.exception("ingest.fetch.unexpected_error", extra={"trace_id": trace_id})
            return FetchResult(error=NetworkError(f"Unexpected error: {exc}"))

        if not articles:
            self.logger.info("ingest.fetch.empty", extra={"trace_id": trace_id})
            return FetchResult(empty=True)

        self.logger.info("ingest.fetch.done", extra={"trace_id": trace_id, "fetched": len(articles)})
        return FetchResult(articles=articles)

    async def test_connection(self) -> ProbeResult:
        """Minimal one-result query to check reachability and credentials."""
        if not self.settings.has_api_key:
            self.logger.warning("ingest.probe.not_configured")
            return ProbeResult(error=NotConfigured("API key not configured"))
        try:
            await self.connector.fetch(
                PROBE_QUERY,
                max_results=1,
                timeout_seconds=self.settings.probe_timeout_ms / 1000.0,
            )
        except IngestError as exc:
            self.logger.warning("ingest.probe.failed", extra={"kind": exc.kind, "error": str(exc)})
            return ProbeResult(error=exc)
        except Exception as exc:
            self.logger.exception("ingest.probe.unexpected_error")
            return ProbeResult(error=NetworkError(f"Unexpected error: {exc}"))
        self.logger.info("ingest.probe.ok")
        return ProbeResult()

    def fallback_articles(self) -> List[Article]:
        return demo_articles()
