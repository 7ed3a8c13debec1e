"""Shared pytest fixtures and test helpers for vkwire tests."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any

import httpx
import pytest
from click.testing import CliRunner

from vkwire.api import APIClient, AsyncAPIClient
from vkwire.config.models import TraceConfig
from vkwire.config.settings import VkSettings
from vkwire.infrastructure.http import build_async_client, build_client

Handler = Callable[[httpx.Request], httpx.Response]


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def trace_config(tmp_path: Path) -> TraceConfig:
    """Trace configuration writing under a temp directory."""
    return TraceConfig(trace_dir=tmp_path / "trace")


@pytest.fixture
def _no_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep tests away from any real vkwire.toml or VKWIRE_* variables.

    Use via ``@pytest.mark.usefixtures("_no_config")``.
    """
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("VKWIRE_CONFIG", str(tmp_path / "absent.toml"))
    for name in ("VKWIRE_API__ACCESS_TOKEN", "VKWIRE_TRACE__ENABLED"):
        monkeypatch.delenv(name, raising=False)


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def vk_ok(payload: Any) -> httpx.Response:
    """A VK success reply."""
    return httpx.Response(200, json={"response": payload})


def vk_fault(code: int, message: str, **extra: Any) -> httpx.Response:
    """A VK error reply."""
    return httpx.Response(200, json={"error": {"error_code": code, "error_msg": message, **extra}})


def make_client(
    handler: Handler,
    *,
    token: str = "secret-token",
    settings: VkSettings | None = None,
) -> APIClient:
    """APIClient whose requests are answered by *handler* instead of the network."""
    settings = settings or VkSettings()
    http = build_client(settings.api, transport=httpx.MockTransport(handler))
    return APIClient(token, settings=settings, http_client=http)


def make_async_client(
    handler: Handler,
    *,
    token: str = "secret-token",
    settings: VkSettings | None = None,
) -> AsyncAPIClient:
    """AsyncAPIClient answered by *handler*."""
    settings = settings or VkSettings()
    http = build_async_client(settings.api, transport=httpx.MockTransport(handler))
    return AsyncAPIClient(token, settings=settings, http_client=http)
