"""Article ingestion package bootstrap."""

from .settings import DashboardSettings, get_settings, reset_settings_cache  # noqa: F401

__all__ = [
    "DashboardSettings",
    "get_settings",
    "reset_settings_cache",
]
