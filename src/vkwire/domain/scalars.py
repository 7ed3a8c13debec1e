"""Tolerant normalization of wire scalars.

The API encodes the same logical field as a JSON number in one method or
version and as a numeric string in another (an album ``id`` is an integer
in ``photos.getAlbums`` but a string inside newsfeed attachments; a
product price ``amount`` comes either way). Record types declare such
fields with the ``Wire*`` aliases below instead of parsing them by hand.

Decision table, by the kind of the incoming JSON node:

=============  =================================  ====================
kind           integer-like target                string target
=============  =================================  ====================
unsigned       accept if in range                 decimal text
signed         accept if in range                 decimal text
string         strict integer parse + range       verbatim
float          reject (never truncated)           ``str(value)``
other          reject                             reject
=============  =================================  ====================

INVARIANT: A normalized integer is never the result of truncating a
fraction. ``123.0`` and ``"123.0"`` are both rejected.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Mapping
from enum import StrEnum
from typing import Annotated, Any

from pydantic import PlainValidator

from vkwire.domain.errors import DecodeError

_INTEGER_TEXT = re.compile(r"[+-]?[0-9]+")


class WireKind(StrEnum):
    """Kind of a JSON node as it arrives on the wire."""

    UNSIGNED = "unsigned"
    SIGNED = "signed"
    STRING = "string"
    FLOAT = "float"
    OTHER = "other"


class ScalarTarget(StrEnum):
    """Destination type of a normalized wire scalar."""

    INT8 = "int8"
    INT16 = "int16"
    INT32 = "int32"
    INT64 = "int64"
    INT = "int"
    STR = "str"

    @property
    def is_integer(self) -> bool:
        return self is not ScalarTarget.STR


# Inclusive bounds per fixed-width target. ``INT`` is unbounded.
_BOUNDS: dict[ScalarTarget, tuple[int, int]] = {
    ScalarTarget.INT8: (-(2**7), 2**7 - 1),
    ScalarTarget.INT16: (-(2**15), 2**15 - 1),
    ScalarTarget.INT32: (-(2**31), 2**31 - 1),
    ScalarTarget.INT64: (-(2**63), 2**63 - 1),
}


def classify(value: Any) -> WireKind:
    """Return the :class:`WireKind` of a decoded JSON value.

    ``bool`` is checked before ``int`` because it subclasses ``int``
    in Python but is a distinct JSON kind.
    """
    if isinstance(value, bool):
        return WireKind.OTHER
    if isinstance(value, int):
        return WireKind.UNSIGNED if value >= 0 else WireKind.SIGNED
    if isinstance(value, float):
        return WireKind.FLOAT
    if isinstance(value, str):
        return WireKind.STRING
    return WireKind.OTHER


def _check_range(number: int, original: Any, target: ScalarTarget) -> int:
    bounds = _BOUNDS.get(target)
    if bounds is not None:
        low, high = bounds
        if not low <= number <= high:
            raise DecodeError(original, target.value, f"out of range [{low}, {high}]")
    return number


def _to_integer(value: Any, kind: WireKind, target: ScalarTarget) -> int:
    match kind:
        case WireKind.UNSIGNED | WireKind.SIGNED:
            return _check_range(value, value, target)
        case WireKind.STRING:
            if _INTEGER_TEXT.fullmatch(value) is None:
                raise DecodeError(value, target.value, "not an integer numeral")
            try:
                number = int(value)
            except ValueError as exc:
                # Past the interpreter's int-conversion digit limit.
                raise DecodeError(value, target.value, "integer text too long") from exc
            return _check_range(number, value, target)
        case WireKind.FLOAT:
            raise DecodeError(value, target.value, "fractional numbers are not truncated")
        case _:
            reason = f"unsupported JSON kind {type(value).__name__}"
            raise DecodeError(value, target.value, reason)


def _to_text(value: Any, kind: WireKind) -> str:
    match kind:
        case WireKind.STRING:
            return value
        case WireKind.UNSIGNED | WireKind.SIGNED | WireKind.FLOAT:
            return str(value)
        case _:
            reason = f"unsupported JSON kind {type(value).__name__}"
            raise DecodeError(value, ScalarTarget.STR.value, reason)


def normalize(value: Any, target: ScalarTarget) -> int | str:
    """Normalize one wire *value* into *target*.

    Raises:
        DecodeError: *value* has the wrong kind or is outside the
            target's domain.
    """
    kind = classify(value)
    if target.is_integer:
        return _to_integer(value, kind, target)
    return _to_text(value, kind)


def normalize_optional(
    document: Mapping[str, Any],
    key: str,
    target: ScalarTarget,
) -> int | str | None:
    """Normalize ``document[key]`` or return None when *key* is missing.

    Only a missing key is absent. A present value that does not
    normalize (including an explicit ``null``) raises :class:`DecodeError`.
    """
    if key not in document:
        return None
    return normalize(document[key], target)


def wire_validator(target: ScalarTarget) -> Callable[[Any], int | str]:
    """Build a pydantic field validator bound to *target*."""

    def validate(value: Any) -> int | str:
        return normalize(value, target)

    validate.__name__ = f"wire_{target.value}"
    return validate


# --- Record field types ---

WireInt8 = Annotated[int, PlainValidator(wire_validator(ScalarTarget.INT8))]
WireInt16 = Annotated[int, PlainValidator(wire_validator(ScalarTarget.INT16))]
WireInt32 = Annotated[int, PlainValidator(wire_validator(ScalarTarget.INT32))]
WireInt64 = Annotated[int, PlainValidator(wire_validator(ScalarTarget.INT64))]
WireInt = Annotated[int, PlainValidator(wire_validator(ScalarTarget.INT))]
WireStr = Annotated[str, PlainValidator(wire_validator(ScalarTarget.STR))]

# Optional variants: declare with ``= None``. A missing key keeps the
# default, while a present value (``null`` included) must normalize.
OptWireInt32 = Annotated[int | None, PlainValidator(wire_validator(ScalarTarget.INT32))]
OptWireInt64 = Annotated[int | None, PlainValidator(wire_validator(ScalarTarget.INT64))]
OptWireInt = Annotated[int | None, PlainValidator(wire_validator(ScalarTarget.INT))]
OptWireStr = Annotated[str | None, PlainValidator(wire_validator(ScalarTarget.STR))]
