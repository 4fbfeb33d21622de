# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""HTTP access to the remote component registry."""

from __future__ import annotations

import os
import time
from collections.abc import Callable
from typing import Any
from urllib.parse import urljoin

import requests
from pydantic import TypeAdapter, ValidationError

from .constants import (
    COMPONENTS_REGISTRY_FILE,
    DEFAULT_HTTP_TIMEOUT,
    HTTP_BACKOFF_SECONDS,
    HTTP_RETRIES,
    HTTP_TIMEOUT_ENV,
    INIT_REGISTRY_FILE,
)
from .errors import HTTPStatusError, NetworkError, NetworkTimeoutError
from .models import CatalogEntry, InitRegistry

_CATALOG_ADAPTER: TypeAdapter[list[CatalogEntry]] = TypeAdapter(list[CatalogEntry])


def build_url(base: str, *paths: str) -> str:
    """Join ``paths`` onto ``base`` treating each segment as relative.

    Args:
        base: Base URL, normally ending in ``/``.
        *paths: Relative path segments; leading slashes are ignored.

    Returns:
        str: Absolute URL.
    """

    url = base
    for part in paths:
        if not url.endswith("/"):
            url = f"{url}/"
        url = urljoin(url, part.lstrip("/"))
    return url


def resolve_timeout(value: float | None = None) -> float:
    """Return the request timeout in seconds, honouring ``SUIC_HTTP_TIMEOUT``."""

    if value is not None:
        return value
    raw = os.environ.get(HTTP_TIMEOUT_ENV)
    if raw:
        try:
            parsed = float(raw)
        except ValueError:
            return DEFAULT_HTTP_TIMEOUT
        if parsed > 0:
            return parsed
    return DEFAULT_HTTP_TIMEOUT


class RegistryClient:
    """Fetch registry documents and raw component files over HTTP."""

    def __init__(
        self,
        base_url: str,
        *,
        session: requests.Session | None = None,
        timeout: float | None = None,
        retries: int = HTTP_RETRIES,
        backoff: float = HTTP_BACKOFF_SECONDS,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.base_url = base_url
        self._session = session or requests.Session()
        self._timeout = resolve_timeout(timeout)
        self._retries = max(retries, 0)
        self._backoff = backoff
        self._sleep = sleep

    def _get(self, url: str) -> requests.Response:
        attempt = 0
        while True:
            try:
                response = self._session.get(url, timeout=self._timeout)
            except requests.Timeout as exc:
                raise NetworkTimeoutError(
                    f"Timed out after {self._timeout:g}s fetching {url}",
                    url=url,
                ) from exc
            except requests.ConnectionError as exc:
                if attempt >= self._retries:
                    raise NetworkError(f"Could not connect while fetching {url}", url=url) from exc
            else:
                if response.status_code < 500 or attempt >= self._retries:
                    break
            self._sleep(self._backoff * (2**attempt))
            attempt += 1
        try:
            response.raise_for_status()
        except requests.HTTPError as exc:
            raise HTTPStatusError(
                f"Request for {url} failed with HTTP {response.status_code}",
                url=url,
                status_code=response.status_code,
            ) from exc
        return response

    def fetch_text(self, url: str) -> str:
        """Return the body of ``url`` decoded as text.

        Args:
            url: Absolute URL to fetch.

        Returns:
            str: Response body.

        Raises:
            NetworkError: On connection failures or non-success responses.
            NetworkTimeoutError: When the request exceeds the timeout.
        """

        return self._get(url).text

    def fetch_json(self, url: str) -> Any:
        """Return the decoded JSON document at ``url``.

        Args:
            url: Absolute URL to fetch.

        Returns:
            Any: Parsed JSON payload.

        Raises:
            NetworkError: When the request fails or the body is not JSON.
        """

        response = self._get(url)
        try:
            return response.json()
        except ValueError as exc:
            raise NetworkError(f"Response from {url} is not valid JSON", url=url) from exc

    def fetch_catalog(self) -> list[CatalogEntry]:
        """Return the remote component catalog.

        Raises:
            NetworkError: When the catalog cannot be fetched or validated.
        """

        url = build_url(self.base_url, COMPONENTS_REGISTRY_FILE)
        payload = self.fetch_json(url)
        try:
            return _CATALOG_ADAPTER.validate_python(payload)
        except ValidationError as exc:
            raise NetworkError("Components registry has an invalid format", url=url) from exc

    def fetch_init_registry(self) -> InitRegistry:
        """Return the bootstrap registry used by ``suic init``.

        Raises:
            NetworkError: When the registry cannot be fetched or validated.
        """

        url = build_url(self.base_url, INIT_REGISTRY_FILE)
        payload = self.fetch_json(url)
        try:
            return InitRegistry.model_validate(payload)
        except ValidationError as exc:
            raise NetworkError("Init registry has an invalid format", url=url) from exc


__all__ = ["RegistryClient", "build_url", "resolve_timeout"]
