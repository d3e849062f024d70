"""Article store: filter and pagination state for the dashboard view."""

from __future__ import annotations

import math
from typing import Iterable

from ingestion.models.domain import Article
from ingestion.services.categorizer import CATEGORIES

from .models import ALL_CATEGORIES, PageView


class ArticleStore:
    """Holds the article set and the query state, and derives the visible page.

    The state is exactly ``(articles, category, search_query, current_page)``;
    the filtered view is recomputed from it on every read.
    """

    def __init__(self, page_size: int, articles: Iterable[Article] = ()):
        if page_size < 1:
            raise ValueError("page_size는 1 이상이어야 합니다.")
        self.page_size = page_size
        self._articles: tuple[Article, ...] = tuple(articles)
        self._category = ALL_CATEGORIES
        self._search_query = ""
        self._current_page = 1

    @property
    def articles(self) -> tuple[Article, ...]:
        return self._articles

    @property
    def category(self) -> str:
        return self._category

    @property
    def search_query(self) -> str:
        return self._search_query

    @property
    def current_page(self) -> int:
        return self._current_page

    def set_articles(self, articles: Iterable[Article]) -> None:
        """Replace the whole set. Filters are kept; the page is clamped to the new range."""
        self._articles = tuple(articles)
        self._current_page = min(self._current_page, self.total_pages)

    def set_category(self, label: str) -> None:
        if label != ALL_CATEGORIES and label not in CATEGORIES:
            raise ValueError(f"알 수 없는 카테고리입니다: {label}")
        self._category = label
        self._current_page = 1

    def set_search_query(self, text: str) -> None:
        self._search_query = (text or "").strip()
        self._current_page = 1

    def set_page(self, n: int) -> bool:
        """Move to page ``n`` if it exists. Returns whether the page changed."""
        if not 1 <= n <= self.total_pages:
            return False
        changed = n != self._current_page
        self._current_page = n
        return changed

    def next_page(self) -> bool:
        return self.set_page(self._current_page + 1)

    def prev_page(self) -> bool:
        return self.set_page(self._current_page - 1)

    def derive(self) -> list[Article]:
        """Filtered view: category first, then case-insensitive text search."""
        view = list(self._articles)
        if self._category != ALL_CATEGORIES:
            view = [a for a in view if a.category == self._category]
        if self._search_query:
            needle = self._search_query.casefold()
            view = [
                a
                for a in view
                if needle in a.title.casefold()
                or needle in a.description.casefold()
                or needle in a.content.casefold()
            ]
        return view

    @property
    def total_pages(self) -> int:
        return max(1, math.ceil(len(self.derive()) / self.page_size))

    def page_slice(self) -> list[Article]:
        start = (self._current_page - 1) * self.page_size
        return self.derive()[start : start + self.page_size]

    def page_view(self) -> PageView:
        filtered = self.derive()
        total_pages = max(1, math.ceil(len(filtered) / self.page_size))
        start = (self._current_page - 1) * self.page_size
        return PageView(
            articles=filtered[start : start + self.page_size],
            current_page=self._current_page,
            total_pages=total_pages,
            total_filtered_count=len(filtered),
            total_count=len(self._articles),
            category=self._category,
            search_query=self._search_query,
            has_prev=self._current_page > 1,
            has_next=self._current_page < total_pages,
        )

    def category_counts(self) -> dict[str, int]:
        counts = {ALL_CATEGORIES: len(self._articles)}
        counts.update({label: 0 for label in CATEGORIES})
        for article in self._articles:
            counts[article.category] += 1
        return counts
