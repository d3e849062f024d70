"""Dashboard core: article store, refresh control and status channel."""

from .controller import Dashboard  # noqa: F401
from .scheduler import RefreshScheduler  # noqa: F401
from .store import ArticleStore  # noqa: F401

__all__ = [
    "ArticleStore",
    "Dashboard",
    "RefreshScheduler",
]
