"""Domain DTOs for the article ingestion pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:  # pragma: no cover
    from ingestion.connectors.base import IngestError

CategoryLabel = Literal["ai", "robotics", "cybersecurity", "quantum", "tech"]

DEFAULT_TITLE = "Untitled"
DEFAULT_DESCRIPTION = "No description available."
DEFAULT_CONTENT = ""
PLACEHOLDER_URL = "#"
DEFAULT_SOURCE_NAME = "Unknown Source"


class ArticleSource(BaseModel):
    """Publisher of an article."""

    model_config = ConfigDict(frozen=True)

    name: str = DEFAULT_SOURCE_NAME
    url: str = PLACEHOLDER_URL


class Article(BaseModel):
    """Normalized, categorized news record. Immutable once built."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="수집 시점에 생성되는 고유 ID")
    title: str = DEFAULT_TITLE
    description: str = DEFAULT_DESCRIPTION
    content: str = DEFAULT_CONTENT
    url: str = PLACEHOLDER_URL
    image: Optional[str] = None
    source: ArticleSource = Field(default_factory=ArticleSource)
    category: CategoryLabel
    published_at: str = Field(..., description="렌더링된 상대/절대 시각 문자열")


@dataclass(frozen=True)
class FetchResult:
    """Outcome of one ingestion attempt.

    Exactly one of three shapes:
    - ``articles`` non-empty, ``error`` None: success
    - ``empty`` True: the API answered with zero articles (not a failure)
    - ``error`` set: the attempt failed and ``articles`` is empty
    """

    articles: List[Article] = field(default_factory=list)
    error: Optional["IngestError"] = None
    empty: bool = False

    @property
    def ok(self) -> bool:
        return self.error is None and not self.empty

    @property
    def kind(self) -> str:
        if self.error is not None:
            return self.error.kind
        return "empty" if self.empty else "ok"


@dataclass(frozen=True)
class ProbeResult:
    """Outcome of the connectivity probe."""

    error: Optional["IngestError"] = None

    @property
    def ok(self) -> bool:
        return self.error is None
