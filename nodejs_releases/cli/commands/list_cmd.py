from __future__ import annotations

from pathlib import Path

import typer

from nodejs_releases.cli.commands._helpers import config_option, preload_or_exit, unwrap_or_exit
from nodejs_releases.cli.context import build_context
from nodejs_releases.core.errors import ErrorCode


def list_releases(
    lts: bool = typer.Option(False, "--lts", help="Only releases with an LTS codename."),
    limit: int | None = typer.Option(
        None,
        "--limit",
        min=1,
        help="Only the N most recent matching releases.",
    ),
    reverse: bool = typer.Option(False, "--reverse", help="Newest first."),
    config: Path | None = config_option(),
) -> None:
    """List Node.js release versions, oldest first."""
    ctx = build_context(config)
    preload_or_exit(ctx)

    versions = unwrap_or_exit(ctx.cache.list(), ctx, ErrorCode.NETWORK_ERROR)
    if lts:
        versions = [
            v for v in versions if unwrap_or_exit(ctx.cache.get(v), ctx, ErrorCode.USER_ERROR).is_lts
        ]
    if limit is not None:
        versions = versions[-limit:]
    if reverse:
        versions.reverse()

    for version in versions:
        ctx.console.print(version)
