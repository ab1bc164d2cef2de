"""Shared helpers for CLI commands."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, TypeVar

import typer

from nodejs_releases.core.errors import ErrorCode
from nodejs_releases.core.result import Err, Result
from nodejs_releases.output.console import Style

if TYPE_CHECKING:
    from nodejs_releases.cli.context import CLIContext


T = TypeVar("T")
E = TypeVar("E")


def config_option() -> Path | None:
    """The ``--config`` option shared by commands that fetch the index."""
    return typer.Option(
        None,
        "--config",
        help="TOML config file ([index] url, timeout, user_agent).",
        dir_okay=False,
    )


def unwrap_or_exit[T, E](
    result: Result[T, E],
    ctx: CLIContext,
    error_code: ErrorCode,
) -> T:
    """Return the Ok value, or report the error and exit.

    Expects error objects to have 'message' and optional 'hint' attributes.
    """
    if isinstance(result, Err):
        error = result.error
        message: str = getattr(error, "message", str(error))
        hint: str | None = getattr(error, "hint", None)
        ctx.console.error(message)
        if hint:
            ctx.console.print(f"hint: {hint}", Style.DIM)
        raise typer.Exit(code=int(error_code))
    return result.value


def preload_or_exit(ctx: CLIContext) -> None:
    unwrap_or_exit(ctx.cache.preload(), ctx, ErrorCode.NETWORK_ERROR)
