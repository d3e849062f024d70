import pytest

from ingestion.settings import PLACEHOLDER_API_KEY, DashboardSettings, get_settings, reset_settings_cache


def _set_env(monkeypatch, **overrides):
    defaults = {
        "GNEWS_API_KEY": "secret-key",
        "GNEWS_BASE_URL": "https://gnews.io/api/v4/",
        "ARTICLES_PER_PAGE": "9",
    }
    defaults.update(overrides)
    for key, value in defaults.items():
        monkeypatch.setenv(key, value)


def test_get_settings_reads_environment(monkeypatch):
    _set_env(monkeypatch, REQUEST_TIMEOUT_MS="2500", LOG_JSON="true")

    settings = get_settings()

    assert settings.api_key and settings.api_key.get_secret_value() == "secret-key"
    assert settings.page_size == 9
    assert settings.request_timeout_ms == 2500
    assert settings.log_json is True
    assert settings.search_url == "https://gnews.io/api/v4/search"


def test_defaults_match_dashboard_contract(monkeypatch):
    _set_env(monkeypatch)

    settings = get_settings()

    assert settings.max_results == 30
    assert settings.request_timeout_ms == 10_000
    assert settings.probe_timeout_ms == 5_000
    assert settings.auto_refresh_interval_ms == 300_000
    assert settings.visibility_refresh_delay_ms == 30_000
    assert settings.language == "en"
    assert settings.default_query.startswith("(AI OR")


def test_reset_settings_cache_reloads(monkeypatch):
    _set_env(monkeypatch, GNEWS_API_KEY="first-key")
    first = get_settings()
    assert first.api_key and first.api_key.get_secret_value() == "first-key"

    monkeypatch.setenv("GNEWS_API_KEY", "next-key")
    second = get_settings()
    assert second.api_key and second.api_key.get_secret_value() == "first-key"

    reset_settings_cache()
    reloaded = get_settings()
    assert reloaded.api_key and reloaded.api_key.get_secret_value() == "next-key"


@pytest.mark.parametrize("key", [None, "", "   ", PLACEHOLDER_API_KEY])
def test_missing_or_placeholder_key_is_not_usable(key):
    settings = DashboardSettings(GNEWS_API_KEY=key)
    assert settings.has_api_key is False


def test_max_results_over_limit_raises(monkeypatch):
    _set_env(monkeypatch, GNEWS_MAX_RESULTS="150")

    with pytest.raises(RuntimeError) as exc:
        get_settings()

    assert "GNEWS_MAX_RESULTS" in str(exc.value)


def test_invalid_base_url_raises(monkeypatch):
    _set_env(monkeypatch, GNEWS_BASE_URL="gnews.io")

    with pytest.raises(RuntimeError):
        get_settings()
