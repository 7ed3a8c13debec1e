"""Result shape the CLI prints for ``vkwire call`` and ``vkwire replay``.

Library callers get a decoded value or one of the exceptions in
:mod:`vkwire.domain.errors`. The CLI flattens both into a
:class:`ServiceResult` so ``--json`` output has one stable schema.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field


class ErrorCode(StrEnum):
    """Machine-readable failure codes, one per terminal call outcome."""

    DOMAIN_ERROR = "DOMAIN_ERROR"
    PAYLOAD_DECODE_ERROR = "PAYLOAD_DECODE_ERROR"
    MALFORMED_ENVELOPE = "MALFORMED_ENVELOPE"
    TRANSPORT_ERROR = "TRANSPORT_ERROR"
    # replay only: the saved document could not be read
    READ_ERROR = "READ_ERROR"


class ServiceError(BaseModel):
    """Why a call failed.

    ``detail`` carries the API fault code and its pass-through fields
    (``captcha_sid``, ``redirect_uri``...) for ``DOMAIN_ERROR``, and the
    target type name for ``PAYLOAD_DECODE_ERROR``.
    """

    model_config = {"frozen": True}

    code: ErrorCode
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of one CLI operation.

    Attributes:
        ok: Whether a payload was decoded.
        op: ``"call"`` or ``"replay"``.
        data: The decoded payload under its envelope key, JSON-ready.
        error: Set when ``ok`` is False.
        meta: The method or source file and the ``--as`` target.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    @classmethod
    def failure(
        cls,
        op: str,
        code: ErrorCode,
        message: str,
        *,
        detail: dict[str, Any] | None = None,
        meta: dict[str, Any] | None = None,
    ) -> ServiceResult:
        error = ServiceError(code=code, message=message, detail=detail or {})
        return cls(ok=False, op=op, error=error, meta=meta)
