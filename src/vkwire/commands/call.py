"""Command: call one API method."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from vkwire.commands._base import VkCommand
from vkwire.services.calls import RECORD_TARGETS

if TYPE_CHECKING:
    from vkwire.commands._context import AppContext


def parse_params(pairs: tuple[str, ...]) -> dict[str, str]:
    """Turn ``("user_ids=1,2", "fields=sex")`` into a params dict."""
    params: dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise click.BadParameter(f"expected key=value, got {pair!r}", param_hint="-p")
        params[key] = value
    return params


@click.command(
    cls=VkCommand,
    examples="""\
  vkwire call users.get -p user_ids=1
  vkwire call polls.getById -p owner_id=1 -p poll_id=42 --as poll
  vkwire --json call account.getProfileInfo --as account""",
)
@click.argument("method")
@click.option("-p", "--param", "pairs", multiple=True, help="Method parameter as key=value.")
@click.option("--token", default=None, help="Access token (default: [api] access_token).")
@click.option(
    "--as",
    "target_name",
    type=click.Choice(sorted(RECORD_TARGETS)),
    default="any",
    show_default=True,
    help="Record type to decode the payload into.",
)
@click.pass_obj
def call(
    app: AppContext,
    method: str,
    pairs: tuple[str, ...],
    token: str | None,
    target_name: str,
) -> None:
    """Call METHOD and print the decoded payload."""
    from vkwire.services import calls

    params = parse_params(pairs)
    with app.client(token) as client:
        result = calls.call(client, method, params, target_name=target_name)
    app.emit(result)
