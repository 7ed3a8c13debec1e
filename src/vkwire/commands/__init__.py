"""Subcommand modules for vkwire."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from vkwire.commands.call import call
    from vkwire.commands.replay import replay

    cli.add_command(call)
    cli.add_command(replay)
