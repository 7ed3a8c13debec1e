"""Command: resolve a saved response offline."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from vkwire.commands._base import VkCommand
from vkwire.domain.envelope import VK_ENVELOPE_KEYS, EnvelopeKeys
from vkwire.services.calls import RECORD_TARGETS

if TYPE_CHECKING:
    from vkwire.commands._context import AppContext


@click.command(
    cls=VkCommand,
    examples="""\
  vkwire replay ~/.cache/vkwire/failed/2026-10-19_14-03-22_118204.json --as newsfeed
  vkwire replay saved.json --payload-key payload --fault-key fault""",
)
@click.argument("path", type=click.Path(path_type=Path, dir_okay=False))
@click.option(
    "--payload-key",
    default=VK_ENVELOPE_KEYS.payload,
    show_default=True,
    help="Name of the success branch.",
)
@click.option(
    "--fault-key",
    default=VK_ENVELOPE_KEYS.fault,
    show_default=True,
    help="Name of the error branch.",
)
@click.option(
    "--as",
    "target_name",
    type=click.Choice(sorted(RECORD_TARGETS)),
    default="any",
    show_default=True,
    help="Record type to decode the payload into.",
)
@click.pass_obj
def replay(
    app: AppContext,
    path: Path,
    payload_key: str,
    fault_key: str,
    target_name: str,
) -> None:
    """Resolve the response envelope stored in PATH."""
    from vkwire.services import calls

    keys = EnvelopeKeys(payload=payload_key, fault=fault_key)
    app.emit(calls.replay(path, keys, target_name=target_name))
