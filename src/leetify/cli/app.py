from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass, replace
from typing import TypeVar

import typer

from leetify.client import Client
from leetify.core.config import settings
from leetify.errors import LeetifyError
from leetify.models import MatchDetailsList

T = TypeVar("T")

app = typer.Typer(no_args_is_help=True, help="Query the Leetify public CS API.")


@dataclass(frozen=True)
class ClientOptions:
    api_key: str | None
    base_url: str
    timeout_s: float


def build_client(options: ClientOptions) -> Client:
    return Client(base_url=options.base_url, api_key=options.api_key, timeout_s=options.timeout_s)


@contextmanager
def client_scope(ctx: typer.Context) -> Iterator[Client]:
    """Client for one CLI command; always closed afterwards."""

    client = build_client(ctx.obj)
    try:
        yield client
    finally:
        client.close()


def _run(ctx: typer.Context, call: Callable[[Client], T]) -> T:
    with client_scope(ctx) as client:
        try:
            return call(client)
        except LeetifyError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(code=1) from e


@app.callback()
def main(
    ctx: typer.Context,
    api_key: str | None = typer.Option(
        None, "--api-key", help="API key (defaults to LEETIFY_API_KEY)."
    ),
    base_url: str | None = typer.Option(
        None, "--base-url", help="API base URL (defaults to LEETIFY_BASE_URL)."
    ),
    timeout: float | None = typer.Option(
        None, "--timeout", min=0.001, help="Request timeout in seconds (default 30)."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log requests to stderr."),
) -> None:
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    ctx.obj = ClientOptions(
        api_key=api_key if api_key is not None else settings.api_key,
        base_url=base_url or settings.base_url,
        timeout_s=timeout if timeout is not None else settings.timeout_s,
    )


@app.command("profile")
def profile_cmd(
    ctx: typer.Context,
    player_id: str = typer.Argument(..., help="Steam64 ID or Leetify ID."),
) -> None:
    """Fetch a player profile."""

    profile = _run(ctx, lambda c: c.get_profile(player_id))
    typer.echo(profile.model_dump_json(indent=2))


@app.command("matches")
def matches_cmd(
    ctx: typer.Context,
    player_id: str = typer.Argument(..., help="Steam64 ID or Leetify ID."),
) -> None:
    """Fetch a player's recent match history."""

    matches = _run(ctx, lambda c: c.get_profile_matches(player_id))
    typer.echo(MatchDetailsList.dump_json(matches, indent=2).decode())


@app.command("match")
def match_cmd(
    ctx: typer.Context,
    game_id: str = typer.Argument(..., help="Leetify match id."),
) -> None:
    """Fetch match details by Leetify game id."""

    details = _run(ctx, lambda c: c.get_match_by_game_id(game_id))
    typer.echo(details.model_dump_json(indent=2))


@app.command("match-by-source")
def match_by_source_cmd(
    ctx: typer.Context,
    data_source: str = typer.Argument(..., help="Data source, e.g. faceit or matchmaking."),
    data_source_id: str = typer.Argument(..., help="The data source's own match id."),
) -> None:
    """Fetch match details by data source and source match id."""

    details = _run(ctx, lambda c: c.get_match_by_data_source(data_source, data_source_id))
    typer.echo(details.model_dump_json(indent=2))


@app.command("validate-key")
def validate_key_cmd(ctx: typer.Context) -> None:
    """Check that the configured API key is accepted."""

    if not ctx.obj.api_key:
        try:
            api_key = settings.require_api_key()
        except RuntimeError as e:
            typer.echo(f"Error: {e} Or pass --api-key.", err=True)
            raise typer.Exit(code=2) from e
        ctx.obj = replace(ctx.obj, api_key=api_key)

    _run(ctx, lambda c: c.validate_api_key())
    typer.echo("API key is valid.")
