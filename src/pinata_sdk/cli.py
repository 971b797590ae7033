"""CLI entry point for pinata_sdk."""

from __future__ import annotations

import asyncio
import json
import logging
import sys

import click

from pinata_sdk.api.client import PinataApi
from pinata_sdk.config import load_config
from pinata_sdk.errors import ApiError
from pinata_sdk.models.records import PinnedObject
from pinata_sdk.models.requests import PinByFile, PinByJson, PinOptions


def _api(ctx: click.Context) -> PinataApi:
    """Build a client, exiting with an error if credentials are missing."""
    cfg = load_config(ctx.obj["config_path"])
    if not cfg.api_key or not cfg.api_secret:
        click.echo("Error: No API key/secret configured.", err=True)
        click.echo("Set PINATA_API_KEY and PINATA_API_SECRET or the [auth] config section.", err=True)
        sys.exit(1)
    try:
        return PinataApi.from_config(cfg)
    except ApiError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)


def _run(coro):
    """Run a coroutine, turning ApiError into a clean exit."""
    try:
        return asyncio.run(coro)
    except ApiError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)


def _echo_pinned(pinned: PinnedObject) -> None:
    click.echo(f"CID:        {pinned.ipfs_hash}")
    click.echo(f"Size:       {pinned.pin_size} bytes")
    click.echo(f"Timestamp:  {pinned.timestamp}")
    if pinned.is_duplicate:
        click.echo("Duplicate:  yes")


@click.group()
@click.option("-c", "--config", "config_path", default=None, help="Path to config TOML file")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, config_path: str | None, verbose: bool) -> None:
    """pinata - pin files, directories and JSON to IPFS through Pinata."""
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path

    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


@cli.command()
@click.pass_context
def auth(ctx: click.Context) -> None:
    """Check that the configured credentials are accepted."""
    api = _api(ctx)
    _run(api.test_authentication())
    click.echo("Authentication OK")


@cli.command("pin-file")
@click.argument("path", type=click.Path(exists=True))
@click.option("--name", default=None, help="Display name for the pin")
@click.option("--cid-version", type=click.Choice(["0", "1"]), default=None, help="CID version")
@click.pass_context
def pin_file(ctx: click.Context, path: str, name: str | None, cid_version: str | None) -> None:
    """Pin a file or a directory."""
    api = _api(ctx)
    request = PinByFile(path)
    if name:
        request = request.with_metadata(name=name)
    if cid_version is not None:
        request = request.with_options(PinOptions(cid_version=int(cid_version)))
    _echo_pinned(_run(api.pin_file(request)))


@cli.command("pin-json")
@click.argument("source", type=click.File("r"))
@click.option("--name", default=None, help="Display name for the pin")
@click.pass_context
def pin_json(ctx: click.Context, source, name: str | None) -> None:
    """Pin the JSON document read from SOURCE ('-' for stdin)."""
    try:
        content = json.load(source)
    except ValueError as exc:
        raise click.BadParameter(f"invalid JSON: {exc}", param_hint="SOURCE") from exc
    api = _api(ctx)
    request = PinByJson(content)
    if name:
        request = request.with_metadata(name=name)
    _echo_pinned(_run(api.pin_json(request)))


@cli.command()
@click.argument("cid")
@click.pass_context
def unpin(ctx: click.Context, cid: str) -> None:
    """Unpin content by CID."""
    api = _api(ctx)
    _run(api.unpin(cid))
    click.echo(f"Unpinned {cid}")


@cli.command()
@click.pass_context
def usage(ctx: click.Context) -> None:
    """Show account-wide pin totals."""
    api = _api(ctx)
    total = _run(api.get_total_user_pinned_data())
    click.echo(f"Pins:              {total.pin_count}")
    click.echo(f"Size:              {total.pin_size_total} bytes")
    click.echo(f"With replications: {total.pin_size_with_replications_total} bytes")


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
