from __future__ import annotations

import sys
from pathlib import Path
from typing import Any, Dict, List

import pytest

ROOT = Path(__file__).resolve().parents[1]

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from ingestion.settings import DashboardSettings, reset_settings_cache  # noqa: E402


@pytest.fixture(autouse=True)
def _reset_settings_cache():
    reset_settings_cache()
    yield
    reset_settings_cache()


@pytest.fixture
def settings() -> DashboardSettings:
    return DashboardSettings(
        GNEWS_API_KEY="test-key",
        GNEWS_BASE_URL="https://gnews.test/api/v4/",
        ARTICLES_PER_PAGE=9,
        REQUEST_TIMEOUT_MS=2000,
        PROBE_TIMEOUT_MS=2000,
    )


def make_raw(n: int, **overrides: Any) -> List[Dict[str, Any]]:
    """GNews-shaped raw records numbered from 1."""
    items = []
    for i in range(1, n + 1):
        item: Dict[str, Any] = {
            "title": f"Story {i}",
            "description": f"Description {i}",
            "content": f"Content {i}",
            "url": f"https://example.com/{i}",
            "image": None,
            "source": {"name": "Example", "url": "https://example.com"},
            "publishedAt": "2025-01-01T00:00:00Z",
        }
        item.update(overrides)
        items.append(item)
    return items


@pytest.fixture
def raw_items():
    return make_raw
