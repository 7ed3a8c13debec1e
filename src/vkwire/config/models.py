"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, vkwire.toml only contains
overrides. A working client needs nothing but an access token.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field

from vkwire import API_VERSION

DEFAULT_TRACE_DIR = Path.home() / ".cache" / "vkwire"


class TraceConfig(BaseModel):
    """Where and when raw responses are persisted for diagnostics.

    Passed explicitly to the envelope resolver; the resolver never
    reads the environment itself.
    """

    model_config = {"frozen": True}

    trace_dir: Path = DEFAULT_TRACE_DIR
    trace_all_successes: bool = False


# --- vkwire.toml sections ---


class ApiConfig(BaseModel):
    """[api] section."""

    model_config = {"frozen": True}

    base_url: str = "https://api.vk.com/method/"
    version: str = API_VERSION
    timeout_seconds: float = Field(default=30.0, gt=0)
    lang: str | None = None
    access_token: str | None = None


class TraceSection(BaseModel):
    """[trace] section."""

    model_config = {"frozen": True}

    enabled: bool = False
    dir: Path = DEFAULT_TRACE_DIR
    all_successes: bool = False
