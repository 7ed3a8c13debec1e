"""Envelope resolution: classify a reply and decode the winning branch.

One linear pass per call, no retries::

    not an object           -> MalformedEnvelope
    payload key present     -> decode into target, or PayloadDecodeError
    fault key present       -> DomainError(Fault)
    neither                 -> MalformedEnvelope

The resolver is stateless and never mutates the document it is given.
Tracing is an optional side effect that cannot change the outcome.
"""

from __future__ import annotations

import json
import logging
from typing import Any, get_origin

from pydantic import TypeAdapter, ValidationError

from vkwire.config.models import TraceConfig
from vkwire.domain.envelope import DEFAULT_KEYS, EnvelopeKeys, Fault
from vkwire.domain.errors import DomainError, MalformedEnvelope, PayloadDecodeError
from vkwire.infrastructure.trace import trace_failed, trace_succeeded

logger = logging.getLogger(__name__)


def type_name(target: Any) -> str:
    """Human-readable name of a decode target (``Poll``, ``list[int]``)."""
    if get_origin(target) is None:
        name = getattr(target, "__name__", None)
        if name:
            return name
    return repr(target).replace("typing.", "")


def resolve[T](
    raw: Any,
    target: type[T],
    *,
    trace: TraceConfig | None = None,
    keys: EnvelopeKeys = DEFAULT_KEYS,
    text: str | None = None,
) -> T:
    """Resolve a decoded JSON document into *target* or raise a CallError.

    Args:
        raw: The parsed response document.
        target: Any type pydantic can validate (models, ``list[...]``,
            ``int``, ``Any``...).
        trace: Optional trace configuration; None disables tracing.
        keys: Envelope branch names.
        text: Original response text, used for tracing. Re-serialized
            from *raw* when omitted.

    Raises:
        MalformedEnvelope: *raw* is not an object or has neither branch.
        PayloadDecodeError: the payload does not match *target*.
        DomainError: the API reported a fault.
    """
    if not isinstance(raw, dict):
        raise MalformedEnvelope(f"response is not a JSON object: {type(raw).__name__}", raw)

    if keys.payload in raw:
        try:
            value = TypeAdapter(target).validate_python(raw[keys.payload])
        except ValidationError as exc:
            name = type_name(target)
            logger.debug("payload failed to decode as %s", name)
            if trace is not None:
                trace_failed(trace, _document_text(raw, text), str(exc))
            raise PayloadDecodeError(name, exc) from exc
        if trace is not None:
            trace_succeeded(trace, _document_text(raw, text))
        return value

    if keys.fault in raw:
        try:
            fault = Fault.model_validate(raw[keys.fault])
        except ValidationError as exc:
            raise MalformedEnvelope(f"{keys.fault!r} branch is not a valid fault", raw) from exc
        logger.debug("API fault %s: %s", fault.code, fault.message)
        raise DomainError(fault)

    raise MalformedEnvelope(
        f"response has neither {keys.payload!r} nor {keys.fault!r}",
        raw,
    )


def resolve_text[T](
    text: str | bytes,
    target: type[T],
    *,
    trace: TraceConfig | None = None,
    keys: EnvelopeKeys = DEFAULT_KEYS,
) -> T:
    """Parse *text* as JSON and :func:`resolve` it.

    Bytes must be UTF-8. Input that is not UTF-8 or not JSON raises
    :class:`MalformedEnvelope`.
    """
    if isinstance(text, bytes):
        try:
            text = text.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise MalformedEnvelope(f"response is not valid UTF-8: {exc}", text) from exc
    try:
        raw = json.loads(text)
    except json.JSONDecodeError as exc:
        raise MalformedEnvelope(f"response is not valid JSON: {exc}", text) from exc
    return resolve(raw, target, trace=trace, keys=keys, text=text)


def _document_text(raw: Any, text: str | None) -> str:
    if text is not None:
        return text
    return json.dumps(raw, ensure_ascii=False)
