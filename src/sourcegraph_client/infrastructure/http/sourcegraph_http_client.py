from __future__ import annotations

import time
from typing import Any

import httpx

from sourcegraph_client.core.exceptions import ApiError
from sourcegraph_client.infrastructure.configuration import SourcegraphSettings
from sourcegraph_client.infrastructure.observability import get_logger

logger = get_logger(__name__)


class SourcegraphHttpClient:
    """Performs one blocking HTTP call per request and maps non-2xx responses to ApiError.

    Network failures (httpx.TransportError) propagate unchanged.
    """

    def __init__(self, settings: SourcegraphSettings, transport: httpx.BaseTransport | None = None):
        self.settings = settings
        self._transport = transport

    def _get_headers(self) -> dict[str, str]:
        headers = {
            "Accept": "application/json",
            "User-Agent": self.settings.user_agent,
        }
        if self.settings.token:
            headers["Authorization"] = f"token {self.settings.token.get_secret_value()}"
        return headers

    def request(
        self,
        method: str,
        url: str,
        params: dict[str, Any] | None = None,
        json_data: Any = None,
    ) -> httpx.Response:
        started = time.perf_counter()
        with httpx.Client(transport=self._transport, timeout=self.settings.timeout) as client:
            response = client.request(
                method,
                url,
                headers=self._get_headers(),
                params=params or None,
                json=json_data,
            )
        logger.debug(
            "Sourcegraph API call finished",
            http_method=method,
            http_url=url,
            http_status=response.status_code,
            duration_ms=round((time.perf_counter() - started) * 1000, 2),
        )
        self._check_response(method, url, response)
        return response

    def get(self, url: str, params: dict[str, Any] | None = None) -> httpx.Response:
        return self.request("GET", url, params=params)

    def post(self, url: str, json_data: Any) -> httpx.Response:
        return self.request("POST", url, json_data=json_data)

    def put(self, url: str, json_data: Any) -> httpx.Response:
        return self.request("PUT", url, json_data=json_data)

    @staticmethod
    def _check_response(method: str, url: str, response: httpx.Response) -> None:
        if response.is_success:
            return
        message = _error_message(response)
        logger.warning(
            "Sourcegraph API returned an error",
            http_method=method,
            http_url=url,
            http_status=response.status_code,
            error_details=message,
        )
        raise ApiError(
            method=method,
            url=url,
            status_code=response.status_code,
            message=message,
            headers=dict(response.headers),
        )


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.text.strip() or response.reason_phrase
    if isinstance(body, dict):
        for key in ("Error", "error", "message", "Message"):
            if body.get(key):
                return str(body[key])
    return response.reason_phrase
