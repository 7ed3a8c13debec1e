"""Error taxonomy for wire decoding and envelope resolution.

INVARIANT: Every API call ends in exactly one outcome: a decoded value
or one of the :class:`CallError` subclasses. Nothing is defaulted.

- :class:`DecodeError`: a single scalar had the wrong shape or range.
- :class:`MalformedEnvelope`: the document is not an object, or has
  neither branch.
- :class:`PayloadDecodeError`: the payload did not match the target type.
- :class:`DomainError`: the API reported a fault (a normal outcome).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from vkwire.domain.envelope import Fault


class VkWireError(Exception):
    """Base class for all vkwire errors."""


class DecodeError(VkWireError, ValueError):
    """A wire scalar could not be normalized into its target type.

    Subclasses ``ValueError`` so pydantic validators report it as a
    regular field error inside a ``ValidationError``.
    """

    def __init__(self, value: Any, target: str, reason: str | None = None) -> None:
        self.value = value
        self.target = target
        self.reason = reason
        msg = f"cannot decode {value!r} as {target}"
        if reason:
            msg = f"{msg}: {reason}"
        super().__init__(msg)


class InvalidMethodName(VkWireError, ValueError):
    """A Python-side method name that does not map to an API method."""


class CallError(VkWireError):
    """Base class for the terminal failure outcomes of one API call."""


class MalformedEnvelope(CallError):
    """The response document has no recognizable envelope shape."""

    def __init__(self, reason: str, document: Any = None) -> None:
        self.reason = reason
        self.document = document
        super().__init__(reason)


class PayloadDecodeError(CallError):
    """The payload branch is present but does not decode into the target."""

    def __init__(self, type_name: str, cause: Exception) -> None:
        self.type_name = type_name
        self.cause = cause
        super().__init__(f"payload does not decode as {type_name}: {cause}")


class DomainError(CallError):
    """The API answered with a fault. Callers are expected to branch on it."""

    def __init__(self, fault: Fault) -> None:
        self.fault = fault
        super().__init__(f"API error {fault.code}: {fault.message}")

    @property
    def code(self) -> int:
        return self.fault.code

    @property
    def message(self) -> str:
        return self.fault.message
