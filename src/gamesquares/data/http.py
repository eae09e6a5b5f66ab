"""Shared httpx plumbing for the odds and box-score feed clients."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import httpx
from tenacity import (
    RetryCallState,
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_fixed,
)

logger = logging.getLogger(__name__)


class FeedError(RuntimeError):
    """Raised when a feed cannot be fetched or its payload cannot be parsed."""


def _retry_log(retry_state: RetryCallState) -> None:  # pragma: no cover - logging helper
    attempt = retry_state.attempt_number
    exception = retry_state.outcome.exception() if retry_state.outcome else None
    logger.warning("Feed retry attempt %s due to %s", attempt, exception)


class FeedClient:
    """Base wrapper around an ``httpx.Client`` for one JSON feed."""

    feed_name = "Feed"

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        http_client: httpx.Client | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self._client = http_client or httpx.Client(timeout=timeout)

    def __enter__(self) -> "FeedClient":  # pragma: no cover - context sugar
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    @retry(
        stop=stop_after_attempt(3),
        wait=wait_fixed(1),
        retry=retry_if_exception_type(httpx.TransportError),
        after=_retry_log,
        reraise=True,
    )
    def _send(self, url: str, params: Optional[Dict[str, Any]], headers: Optional[Dict[str, str]]) -> httpx.Response:
        return self._client.get(url, params=params, headers=headers)

    def _get_json(
        self,
        path: str = "",
        params: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
        label: Optional[str] = None,
    ) -> Any:
        label = label or self.feed_name
        url = f"{self.base_url}{path}"
        logger.debug("GET %s", url)
        try:
            response = self._send(url, params, headers)
        except httpx.TransportError as exc:
            raise FeedError(f"{label} error: {exc.__class__.__name__}") from exc
        if not response.is_success:
            raise FeedError(f"{label} error: {response.status_code}")
        try:
            return response.json()
        except ValueError as exc:
            raise FeedError(f"{label} error: invalid JSON") from exc
