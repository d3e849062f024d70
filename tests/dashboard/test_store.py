from __future__ import annotations

from typing import List

import pytest

from dashboard.store import ArticleStore
from ingestion.connectors.base import build_article
from ingestion.models.domain import Article


def _articles(n: int, category: str = "tech", **fields) -> List[Article]:
    return [
        build_article({"title": f"Story {i}", "description": f"About {i}", **fields}, category=category)
        for i in range(1, n + 1)
    ]


def test_thirty_articles_page_size_nine():
    store = ArticleStore(9, _articles(30))

    assert store.total_pages == 4
    assert store.set_page(4) is True
    assert len(store.page_slice()) == 3

    view = store.page_view()
    assert view.current_page == 4
    assert view.total_pages == 4
    assert view.total_filtered_count == 30
    assert view.total_count == 30
    assert view.has_next is False and view.has_prev is True


def test_empty_view_is_single_empty_page():
    store = ArticleStore(9)

    view = store.page_view()

    assert view.articles == []
    assert view.total_filtered_count == 0
    assert view.total_pages == 1
    assert view.current_page == 1


def test_set_page_never_leaves_bounds():
    store = ArticleStore(9, _articles(10))

    assert store.set_page(0) is False
    assert store.set_page(3) is False
    assert store.current_page == 1
    assert store.prev_page() is False
    assert store.next_page() is True
    assert store.current_page == 2
    assert store.next_page() is False
    assert store.current_page == 2


def test_category_and_search_reset_page():
    store = ArticleStore(2, _articles(6))
    store.set_page(3)

    store.set_category("tech")
    assert store.current_page == 1

    store.set_page(2)
    store.set_search_query("  story  ")
    assert store.search_query == "story"
    assert store.current_page == 1


def test_set_articles_keeps_page_and_filters():
    store = ArticleStore(2, _articles(6))
    store.set_category("tech")
    store.set_page(3)

    store.set_articles(_articles(6))

    assert store.current_page == 3
    assert store.category == "tech"


def test_search_is_case_insensitive_across_fields():
    articles = _articles(3, category="ai") + [
        build_article({"title": "New QUANTUM chip"}, category="quantum"),
        build_article({"title": "x", "content": "a quantum leap"}, category="tech"),
    ]
    store = ArticleStore(9, articles)

    store.set_search_query("quantum")
    assert [a.title for a in store.derive()] == ["New QUANTUM chip", "x"]

    store.set_category("quantum")
    assert [a.title for a in store.derive()] == ["New QUANTUM chip"]


def test_derive_is_idempotent_and_preserves_order():
    articles = _articles(5, category="ai") + _articles(5, category="robotics")
    store = ArticleStore(9, articles)
    store.set_category("robotics")

    first = store.derive()
    second = store.derive()

    assert first == second
    assert first == articles[5:]


def test_category_counts_cover_full_set():
    store = ArticleStore(9, _articles(2, category="ai") + _articles(1, category="quantum"))
    store.set_category("quantum")

    assert store.category_counts() == {
        "all": 3,
        "ai": 2,
        "robotics": 0,
        "cybersecurity": 0,
        "quantum": 1,
        "tech": 0,
    }


def test_unknown_category_is_rejected():
    store = ArticleStore(9)
    with pytest.raises(ValueError):
        store.set_category("sports")
    assert store.category == "all"


def test_page_size_must_be_positive():
    with pytest.raises(ValueError):
        ArticleStore(0)


def test_shrinking_set_clamps_page_into_range():
    store = ArticleStore(9, _articles(30))
    store.set_page(4)

    store.set_articles(_articles(5))

    view = store.page_view()
    assert view.current_page == 1
    assert view.total_pages == 1
    assert len(view.articles) == 5
    assert view.has_prev is False


def test_partial_shrink_keeps_last_valid_page():
    store = ArticleStore(9, _articles(30))
    store.set_page(4)

    store.set_articles(_articles(12))

    assert store.current_page == 2
    assert len(store.page_slice()) == 3
    assert store.prev_page() is True
    assert store.current_page == 1
