"""``vkwire`` entry point: global flags, settings, and the subcommands."""

from __future__ import annotations

import click

from vkwire import API_VERSION, __version__
from vkwire.commands import register_commands
from vkwire.commands._context import AppContext
from vkwire.config.settings import VkSettings

_EPILOG = f"""\b
Settings come from vkwire.toml (nearest one up from the current
directory, or VKWIRE_CONFIG) and VKWIRE_* variables, for example
VKWIRE_API__ACCESS_TOKEN or VKWIRE_TRACE__ENABLED=1.
Default API version: {API_VERSION}."""


@click.group(invoke_without_command=True, epilog=_EPILOG)
@click.version_option(
    version=__version__,
    prog_name="vkwire",
    message=f"%(prog)s %(version)s (API {API_VERSION})",
)
@click.option("--json", "json_output", is_flag=True, help="Print results as JSON.")
@click.option("-q", "--quiet", is_flag=True, help="Print only the OK/ERROR line.")
@click.option("-v", "--verbose", is_flag=True, help="Show call metadata and debug logs.")
@click.option("--log-json", is_flag=True, help="Write logs to stderr as JSON lines.")
@click.option(
    "-c",
    "--config",
    "config_path",
    default=None,
    help="Read this TOML file instead of discovering vkwire.toml.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """vkwire: VK API client with tolerant wire decoding."""
    settings = VkSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
