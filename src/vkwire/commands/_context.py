"""AppContext: shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``. Configures logging and centralizes result emission
(stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from vkwire.config.logging import configure_logging
from vkwire.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from vkwire.api import APIClient
    from vkwire.config.settings import VkSettings
    from vkwire.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: VkSettings) -> None:
        self.settings = settings
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    def client(self, token: str | None = None) -> APIClient:
        """Build an API client; a missing token is a usage error."""
        from vkwire.api import APIClient

        try:
            return APIClient(token, settings=self.settings)
        except ValueError as exc:
            raise click.UsageError(str(exc)) from exc

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
