"""Call and replay operations that report through ServiceResult.

Each terminal outcome of an API call maps onto one error code:

==========================  ======================
outcome                     ``ServiceError.code``
==========================  ======================
DomainError                 ``DOMAIN_ERROR``
PayloadDecodeError          ``PAYLOAD_DECODE_ERROR``
MalformedEnvelope           ``MALFORMED_ENVELOPE``
httpx.HTTPError             ``TRANSPORT_ERROR``
==========================  ======================
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import TYPE_CHECKING, Any

import httpx
from pydantic import TypeAdapter

from vkwire.domain.envelope import EnvelopeKeys
from vkwire.domain.errors import (
    CallError,
    DomainError,
    MalformedEnvelope,
    PayloadDecodeError,
)
from vkwire.objects import Account, Document, NewsFeed, Poll
from vkwire.services.envelope import resolve_text
from vkwire.services.result import ErrorCode, ServiceResult

if TYPE_CHECKING:
    from vkwire.api import APIClient

logger = logging.getLogger(__name__)


# Decode targets selectable from the command line (``--as``).
RECORD_TARGETS: dict[str, Any] = {
    "any": Any,
    "account": Account,
    "document": Document,
    "documents": list[Document],
    "newsfeed": NewsFeed,
    "poll": Poll,
}


def _dump(target: Any, value: Any) -> Any:
    return TypeAdapter(target).dump_python(value, mode="json", by_alias=True)


def error_result(op: str, exc: CallError | httpx.HTTPError, meta: dict[str, Any]) -> ServiceResult:
    """Flatten a call failure into a failed ServiceResult."""
    match exc:
        case DomainError():
            detail = {"fault_code": exc.code, **exc.fault.detail}
            return ServiceResult.failure(
                op, ErrorCode.DOMAIN_ERROR, exc.message, detail=detail, meta=meta
            )
        case PayloadDecodeError():
            detail = {"type_name": exc.type_name}
            return ServiceResult.failure(
                op, ErrorCode.PAYLOAD_DECODE_ERROR, str(exc), detail=detail, meta=meta
            )
        case MalformedEnvelope():
            return ServiceResult.failure(op, ErrorCode.MALFORMED_ENVELOPE, exc.reason, meta=meta)
        case _:
            return ServiceResult.failure(op, ErrorCode.TRANSPORT_ERROR, str(exc), meta=meta)


def call(
    client: APIClient,
    method: str,
    params: Mapping[str, Any],
    *,
    target_name: str = "any",
) -> ServiceResult:
    """Call *method* and decode its payload as ``RECORD_TARGETS[target_name]``."""
    op = "call"
    meta = {"method": method, "target": target_name}
    target = RECORD_TARGETS[target_name]
    try:
        payload = client.call_method(method, params, target)
    except (CallError, httpx.HTTPError) as exc:
        logger.debug("call %s failed: %s", method, exc)
        return error_result(op, exc, meta)
    return ServiceResult(ok=True, op=op, data={"response": _dump(target, payload)}, meta=meta)


def replay(path: Path, keys: EnvelopeKeys, *, target_name: str = "any") -> ServiceResult:
    """Resolve a saved response document, for instance a trace artifact."""
    op = "replay"
    meta = {"source": str(path), "target": target_name}
    target = RECORD_TARGETS[target_name]
    try:
        body = path.read_bytes()
    except OSError as exc:
        message = f"cannot read {path}: {exc}"
        return ServiceResult.failure(op, ErrorCode.READ_ERROR, message, meta=meta)
    try:
        payload = resolve_text(body, target, keys=keys)
    except CallError as exc:
        return error_result(op, exc, meta)
    return ServiceResult(ok=True, op=op, data={keys.payload: _dump(target, payload)}, meta=meta)
