"""API clients: build the request, then hand the body to the resolver.

Both clients follow the same path::

    params + v + access_token (+ lang) -> GET {base_url}{method}
        -> resolve_text(body, target, keys=VK_ENVELOPE_KEYS)

Transport failures (``httpx.HTTPError``, including non-2xx statuses)
propagate unchanged; they never reach the envelope resolver.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Mapping
from typing import Any

import httpx

from vkwire.config.settings import VkSettings
from vkwire.domain.envelope import VK_ENVELOPE_KEYS
from vkwire.infrastructure.http import build_async_client, build_client
from vkwire.services.envelope import resolve_text
from vkwire.services.methods import MethodCategory

logger = logging.getLogger(__name__)

# Method parameters as sent on the query string.
Params = dict[str, str]


def encode_param(value: Any) -> str:
    """Render one parameter value the way the API expects it.

    Booleans are ``1``/``0`` and sequences are comma-separated
    (``user_ids=1,2,3``).
    """
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, (list, tuple, set, frozenset)):
        return ",".join(encode_param(item) for item in value)
    return str(value)


class _BaseClient:
    """Request building shared by the sync and async clients."""

    def __init__(self, token: str | None, settings: VkSettings | None) -> None:
        self.settings = settings or VkSettings()
        resolved = token or self.settings.api.access_token
        if not resolved:
            msg = "an access token is required (argument or [api] access_token)"
            raise ValueError(msg)
        self._token = resolved

    def build_params(self, params: Mapping[str, Any] | None) -> Params:
        """Copy *params* and inject the version, token, and language."""
        query: Params = {key: encode_param(value) for key, value in (params or {}).items()}
        api = self.settings.api
        query["v"] = api.version
        query["access_token"] = self._token
        if api.lang and "lang" not in query:
            query["lang"] = api.lang
        return query

    def category(self, name: str) -> MethodCategory:
        """Attribute access to the methods of *name* (``"photos"``)."""
        return MethodCategory(self, name)

    def _resolve[T](self, method_name: str, response: httpx.Response, target: type[T]) -> T:
        response.raise_for_status()
        logger.debug("resolving %s response (%d bytes)", method_name, len(response.content))
        return resolve_text(
            response.content,
            target,
            trace=self.settings.trace_config(),
            keys=VK_ENVELOPE_KEYS,
        )


class APIClient(_BaseClient):
    """Blocking API client over ``httpx.Client``.

    Usage::

        with APIClient(token) as api:
            users = api.call_method("users.get", {"user_ids": [1]}, list[dict])
    """

    def __init__(
        self,
        token: str | None = None,
        *,
        settings: VkSettings | None = None,
        http_client: httpx.Client | None = None,
    ) -> None:
        super().__init__(token, settings)
        self._owns_http_client = http_client is None
        self._http = http_client or build_client(self.settings.api)

    def call_method[T](
        self,
        method_name: str,
        params: Mapping[str, Any] | None = None,
        target: type[T] = Any,  # type: ignore[assignment]
    ) -> T:
        """Call *method_name* and decode its payload into *target*.

        Raises:
            httpx.HTTPError: the request itself failed.
            CallError: see :func:`vkwire.services.envelope.resolve`.
        """
        response = self._http.get(method_name, params=self.build_params(params))
        return self._resolve(method_name, response, target)

    def execute[T](
        self,
        params: Mapping[str, Any] | None = None,
        target: type[T] = Any,  # type: ignore[assignment]
    ) -> T:
        """Call the category-less ``execute`` method."""
        return self.call_method("execute", params, target)

    def close(self) -> None:
        if self._owns_http_client:
            self._http.close()

    def __enter__(self) -> APIClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


class AsyncAPIClient(_BaseClient):
    """Asyncio API client over ``httpx.AsyncClient``.

    Independent calls may run concurrently; each resolution only touches
    its own response document.
    """

    def __init__(
        self,
        token: str | None = None,
        *,
        settings: VkSettings | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        super().__init__(token, settings)
        self._owns_http_client = http_client is None
        self._http = http_client or build_async_client(self.settings.api)

    async def call_method[T](
        self,
        method_name: str,
        params: Mapping[str, Any] | None = None,
        target: type[T] = Any,  # type: ignore[assignment]
    ) -> T:
        """Async variant of :meth:`APIClient.call_method`.

        With tracing enabled the resolution runs in a worker thread so the
        trace file writes do not block the event loop.
        """
        response = await self._http.get(method_name, params=self.build_params(params))
        if self.settings.trace_config() is None:
            return self._resolve(method_name, response, target)
        return await asyncio.to_thread(self._resolve, method_name, response, target)

    async def execute[T](
        self,
        params: Mapping[str, Any] | None = None,
        target: type[T] = Any,  # type: ignore[assignment]
    ) -> T:
        return await self.call_method("execute", params, target)

    async def aclose(self) -> None:
        if self._owns_http_client:
            await self._http.aclose()

    async def __aenter__(self) -> AsyncAPIClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
