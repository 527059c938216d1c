"""Low-level HTTP transport layer wrapping httpx."""

from __future__ import annotations

import logging
import time
from typing import Any

import httpx

from openf1_wrapper.exceptions import (
    OpenF1APIError,
    OpenF1ConnectionError,
    OpenF1DecodeError,
    OpenF1TimeoutError,
)

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.openf1.org/v1"
DEFAULT_TIMEOUT = 30.0


def _build_url(resource: str, query: str) -> str:
    """Join a resource name and a raw query string into a relative URL."""
    path = f"/{resource.strip('/')}"
    return f"{path}?{query}" if query else path


def _handle_response(response: httpx.Response) -> Any:
    """Validate response status and return parsed JSON."""
    if response.status_code >= 400:
        raise OpenF1APIError(
            status_code=response.status_code,
            message=response.text,
        )
    try:
        return response.json()
    except ValueError as exc:
        raise OpenF1DecodeError(
            f"Response from {response.url} is not valid JSON: {exc}"
        ) from exc


def _log_ok(url: str, data: Any, start: float) -> None:
    count = len(data) if isinstance(data, list) else 1
    logger.debug(
        "OK: GET %s -> %d items (%.3fs)", url, count, time.monotonic() - start,
    )


def _log_fail(url: str, exc: Exception, start: float) -> None:
    logger.error(
        "FAIL: GET %s -> %s: %s (%.3fs)",
        url, type(exc).__name__, exc, time.monotonic() - start,
    )


class SyncTransport:
    """Synchronous HTTP transport using httpx.Client."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._client = httpx.Client(
            base_url=base_url,
            timeout=timeout,
            headers={"Accept": "application/json"},
        )

    def get(self, resource: str, query: str) -> Any:
        """GET ``<base_url>/<resource>?<query>`` and return the parsed JSON body."""
        url = _build_url(resource, query)
        logger.debug("CALL: GET %s", url)
        start = time.monotonic()
        try:
            try:
                response = self._client.get(url)
            except httpx.ConnectError as exc:
                raise OpenF1ConnectionError(str(exc)) from exc
            except httpx.TimeoutException as exc:
                raise OpenF1TimeoutError(str(exc)) from exc
            data = _handle_response(response)
        except Exception as exc:
            _log_fail(url, exc, start)
            raise
        _log_ok(url, data, start)
        return data

    def close(self) -> None:
        self._client.close()


class AsyncTransport:
    """Asynchronous HTTP transport using httpx.AsyncClient."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._client = httpx.AsyncClient(
            base_url=base_url,
            timeout=timeout,
            headers={"Accept": "application/json"},
        )

    async def get(self, resource: str, query: str) -> Any:
        """Async GET of ``<base_url>/<resource>?<query>``, returning parsed JSON."""
        url = _build_url(resource, query)
        logger.debug("CALL: GET %s", url)
        start = time.monotonic()
        try:
            try:
                response = await self._client.get(url)
            except httpx.ConnectError as exc:
                raise OpenF1ConnectionError(str(exc)) from exc
            except httpx.TimeoutException as exc:
                raise OpenF1TimeoutError(str(exc)) from exc
            data = _handle_response(response)
        except Exception as exc:
            _log_fail(url, exc, start)
            raise
        _log_ok(url, data, start)
        return data

    async def close(self) -> None:
        await self._client.aclose()
