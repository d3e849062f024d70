"""GNews search connector (provider-injected for tests/offline)."""

from __future__ import annotations

from typing import Any, Awaitable, Callable, Dict, List, Optional

import httpx

from ingestion.settings import DashboardSettings, get_settings

from .base import ApiError, AuthError, BaseConnector, HttpError, NetworkError, NotConfigured, RateLimited, Timeout


ProviderFn = Callable[[Dict[str, Any]], Awaitable[Dict[str, Any]]]


def _error_message(errors: Any) -> str:
    """Flatten the ``errors`` envelope GNews returns (list or mapping)."""
    if isinstance(errors, dict):
        values = [str(v) for v in errors.values()]
        return "; ".join(values) or "Unknown error"
    if isinstance(errors, (list, tuple)) and errors:
        first = errors[0]
        if isinstance(first, dict):
            return str(first.get("message") or first)
        return str(first)
    return str(errors) if errors else "Unknown error"


class GNewsConnector(BaseConnector):
    """Connector for the GNews ``/search`` endpoint.

    - provider 주입 시: 오프라인 모드, provider가 응답 본문(dict)을 반환
    - provider 미주입 시: httpx.AsyncClient로 실제 HTTP 호출
    """

    source = "gnews"

    def __init__(
        self,
        settings: Optional[DashboardSettings] = None,
        *,
        provider: Optional[ProviderFn] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._settings = settings
        self._provider = provider
        self._transport = transport

    @property
    def settings(self) -> DashboardSettings:
        return self._settings or get_settings()

    def build_params(self, query: str, max_results: int) -> Dict[str, Any]:
        cfg = self.settings
        token = cfg.api_key.get_secret_value() if cfg.api_key else ""
        return {
            "q": query,
            "token": token,
            "lang": cfg.language,
            "max": int(max_results),
        }

    async def _fetch_raw(self, query: str, max_results: int, timeout_seconds: float) -> List[Dict[str, Any]]:
        params = self.build_params(query, max_results)
        if self._provider is not None:
            data = await self._provider(params)
        else:
            data = await self._get(params, timeout_seconds)

        if not isinstance(data, dict):
            raise ApiError("GNews 응답 형식이 올바르지 않습니다.")
        if data.get("errors"):
            raise ApiError(_error_message(data["errors"]))
        return list(data.get("articles") or [])

    async def _get(self, params: Dict[str, Any], timeout_seconds: float) -> Any:
        if not self.settings.has_api_key:
            raise NotConfigured("GNEWS_API_KEY가 설정되지 않았습니다.")

        try:
            async with httpx.AsyncClient(timeout=timeout_seconds, transport=self._transport) as client:
                resp = await client.get(
                    self.settings.search_url,
                    params=params,
                    headers={"Accept": "application/json"},
                )
        except httpx.TimeoutException as exc:
            raise Timeout("GNews 타임아웃") from exc
        except httpx.HTTPError as exc:
            raise NetworkError(f"GNews 연결 오류: {exc.__class__.__name__}") from exc

        if resp.status_code == 401:
            raise AuthError("Invalid API key - check GNEWS_API_KEY")
        if resp.status_code == 429:
            raise RateLimited("API rate limit exceeded - try again later")
        if not resp.is_success:
            raise HttpError(resp.status_code, resp.reason_phrase)

        try:
            return resp.json()
        except ValueError as exc:
            raise ApiError("GNews 응답이 JSON이 아닙니다.") from exc
