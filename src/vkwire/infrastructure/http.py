"""httpx client builders.

Centralizes timeouts and headers so the sync and async API clients
issue identical requests.
"""

from __future__ import annotations

from typing import Any

import httpx

from vkwire import __version__
from vkwire.config.models import ApiConfig

USER_AGENT = f"vkwire/{__version__}"


def _client_kwargs(api: ApiConfig, extra_headers: dict[str, str] | None) -> dict[str, Any]:
    headers: dict[str, str] = {
        "User-Agent": USER_AGENT,
        "Accept": "application/json",
    }
    if extra_headers:
        headers.update(extra_headers)
    return {
        "base_url": api.base_url,
        "timeout": httpx.Timeout(api.timeout_seconds),
        "headers": headers,
    }


def build_client(
    api: ApiConfig,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    """Create the ``httpx.Client`` used by :class:`vkwire.api.APIClient`."""
    return httpx.Client(transport=transport, **_client_kwargs(api, extra_headers))


def build_async_client(
    api: ApiConfig,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Create the ``httpx.AsyncClient`` used by :class:`vkwire.api.AsyncAPIClient`."""
    return httpx.AsyncClient(transport=transport, **_client_kwargs(api, extra_headers))
