"""Response envelope shapes.

Every API reply is a JSON object carrying exactly one of two branches:
a success payload or a fault. The key names differ between the generic
protocol (``payload``/``fault``) and the VK wire (``response``/``error``),
so they are passed around as an :class:`EnvelopeKeys` value.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from vkwire.domain.scalars import WireInt64


@dataclass(frozen=True)
class EnvelopeKeys:
    """Names of the two mutually exclusive envelope branches."""

    payload: str = "payload"
    fault: str = "fault"


DEFAULT_KEYS = EnvelopeKeys()
VK_ENVELOPE_KEYS = EnvelopeKeys(payload="response", fault="error")


class Fault(BaseModel):
    """Structured domain error reported by the API.

    Remediation data that only some errors carry (``captcha_sid`` and
    ``captcha_img`` for error 14, ``confirmation_text`` for error 24,
    the echoed ``request_params``) is kept as-is in :attr:`detail`.
    """

    model_config = ConfigDict(extra="allow", frozen=True, populate_by_name=True)

    code: WireInt64 = Field(validation_alias=AliasChoices("code", "error_code"))
    message: str = Field(validation_alias=AliasChoices("message", "error_msg"))

    @property
    def detail(self) -> dict[str, Any]:
        """Opaque pass-through fields beyond code and message."""
        return dict(self.model_extra or {})
