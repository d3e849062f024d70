from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from ingestion.models.domain import Article

ApiStatus = Literal["unknown", "online", "degraded", "offline"]
StatusLevel = Literal["info", "success", "warning", "error"]

ALL_CATEGORIES = "all"


class PageView(BaseModel):
    """One rendered page of the filtered view plus pagination metadata."""

    articles: list[Article] = Field(default_factory=list)
    current_page: int
    total_pages: int
    total_filtered_count: int
    total_count: int
    category: str = ALL_CATEGORIES
    search_query: str = ""
    has_prev: bool = False
    has_next: bool = False
