"""Keyword-based article categorization.

Matching is plain substring containment on the case-folded text, so short
keywords also hit inside longer words ("ai" in "again"). Callers rely on this
behaviour; do not switch to word-boundary matching without migrating them.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Tuple

from ingestion.models.domain import CategoryLabel

# Declaration order breaks ties.
CATEGORY_KEYWORDS: Dict[CategoryLabel, Tuple[str, ...]] = {
    "ai": (
        "ai",
        "artificial intelligence",
        "machine learning",
        "deep learning",
        "neural network",
        "chatgpt",
        "gpt",
        "llm",
        "openai",
    ),
    "robotics": ("robot", "robotics", "automation", "drone", "autonomous", "boston dynamics", "humanoid"),
    "cybersecurity": (
        "cyber",
        "security",
        "hack",
        "hacker",
        "encryption",
        "malware",
        "ransomware",
        "data breach",
    ),
    "quantum": ("quantum", "qubit", "quantum computing", "quantum physics", "superposition"),
    "tech": ("technology", "tech", "innovation", "startup", "silicon valley", "tech news"),
}

CATEGORIES: Tuple[CategoryLabel, ...] = tuple(CATEGORY_KEYWORDS)
DEFAULT_CATEGORY: CategoryLabel = "tech"


def _text_blob(article: Mapping[str, Any]) -> str:
    parts = (article.get("title"), article.get("description"), article.get("content"))
    return " ".join(str(p or "") for p in parts).casefold()


def match_counts(article: Mapping[str, Any]) -> Dict[CategoryLabel, int]:
    """Number of distinct keywords of each category found in the article text."""
    text = _text_blob(article)
    return {
        label: sum(1 for keyword in set(keywords) if keyword in text)
        for label, keywords in CATEGORY_KEYWORDS.items()
    }


def categorize(article: Mapping[str, Any]) -> CategoryLabel:
    best: CategoryLabel = DEFAULT_CATEGORY
    best_count = 0
    for label, count in match_counts(article).items():
        if count > best_count:
            best, best_count = label, count
    return best
