"""Configuration models for the dashboard core."""

from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import (
    Field,
    PositiveInt,
    SecretStr,
    ValidationError,
    field_validator,
)
from pydantic_settings import BaseSettings, SettingsConfigDict

PLACEHOLDER_API_KEY = "YOUR_GNEWS_API_KEY_HERE"


class DashboardSettings(BaseSettings):
    """대시보드용 환경 설정."""

    model_config = SettingsConfigDict(
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
        populate_by_name=True,
    )

    api_key: Optional[SecretStr] = Field(None, alias="GNEWS_API_KEY", description="GNews API 인증 키.")
    endpoint_base_url: str = Field(
        "https://gnews.io/api/v4/",
        alias="GNEWS_BASE_URL",
        description="GNews API 베이스 URL",
    )
    language: str = Field("en", alias="GNEWS_LANG", description="검색 언어 필터")
    max_results: PositiveInt = Field(30, alias="GNEWS_MAX_RESULTS", description="요청당 최대 기사 수(≤100)")
    default_query: str = Field(
        "(AI OR Artificial Intelligence OR Machine Learning OR Robotics OR Technology)",
        alias="DEFAULT_QUERY",
        description="검색어가 없을 때 사용하는 기본 쿼리.",
    )
    page_size: PositiveInt = Field(9, alias="ARTICLES_PER_PAGE", description="페이지당 기사 수.")
    request_timeout_ms: PositiveInt = Field(10_000, alias="REQUEST_TIMEOUT_MS", description="기사 조회 타임아웃(ms)")
    probe_timeout_ms: PositiveInt = Field(5_000, alias="PROBE_TIMEOUT_MS", description="연결 확인 타임아웃(ms)")
    auto_refresh_interval_ms: PositiveInt = Field(
        300_000,
        alias="AUTO_REFRESH_INTERVAL_MS",
        description="자동 새로고침 주기(ms).",
    )
    visibility_refresh_delay_ms: PositiveInt = Field(
        30_000,
        alias="VISIBILITY_REFRESH_DELAY_MS",
        description="화면 복귀 후 새로고침까지 지연(ms).",
    )
    status_log_limit: PositiveInt = Field(10, alias="STATUS_LOG_LIMIT", description="상태 로그 보관 개수.")
    log_level: str = Field("INFO", alias="LOG_LEVEL", description="로그 레벨.")
    log_json: bool = Field(False, alias="LOG_JSON", description="로그를 JSON 형식으로 출력할지 여부.")

    @field_validator("endpoint_base_url")
    @classmethod
    def _validate_endpoint(cls, value: str) -> str:
        url = value.strip()
        if "://" not in url:
            raise ValueError("GNEWS_BASE_URL은 유효한 URL이어야 합니다.")
        return url

    @field_validator("default_query")
    @classmethod
    def _validate_default_query(cls, value: str) -> str:
        query = value.strip()
        if not query:
            raise ValueError("DEFAULT_QUERY는 공백일 수 없습니다.")
        return query

    @field_validator("max_results")
    @classmethod
    def _validate_max_results(cls, v: int) -> int:
        if v > 100:
            raise ValueError("GNEWS_MAX_RESULTS는 100 이하여야 합니다.")
        return v

    @property
    def has_api_key(self) -> bool:
        """True when a usable (non-blank, non-placeholder) key is configured."""
        if self.api_key is None:
            return False
        key = self.api_key.get_secret_value().strip()
        return bool(key) and key != PLACEHOLDER_API_KEY

    @property
    def search_url(self) -> str:
        return self.endpoint_base_url.rstrip("/") + "/search"


@lru_cache()
def get_settings() -> DashboardSettings:
    """환경 변수를 기준으로 DashboardSettings 인스턴스를 반환한다."""
    try:
        return DashboardSettings()
    except ValidationError as exc:
        raise RuntimeError(f"환경 변수 검증에 실패했습니다: {exc}") from exc


def reset_settings_cache() -> None:
    """Settings LRU 캐시를 초기화한다 (테스트 용도)."""
    get_settings.cache_clear()  # type: ignore[attr-defined]
