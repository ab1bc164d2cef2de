from __future__ import annotations

import json
from pathlib import Path

import typer

from nodejs_releases.cli.commands._helpers import config_option, preload_or_exit, unwrap_or_exit
from nodejs_releases.cli.context import build_context
from nodejs_releases.core.errors import ErrorCode
from nodejs_releases.core.result import Err
from nodejs_releases.output.console import Style
from nodejs_releases.releases.errors import VersionNotFoundError
from nodejs_releases.releases.model import ReleaseRecord
from nodejs_releases.releases.versions import strip_version_prefix


def _rows(record: ReleaseRecord) -> list[tuple[str, str]]:
    def opt(value: str | None) -> str:
        return value if value is not None else "-"

    return [
        ("date", record.date.isoformat()),
        ("lts", record.lts if record.lts is not False else "no"),
        ("security", "yes" if record.security else "no"),
        ("v8", record.v8),
        ("npm", opt(record.npm)),
        ("uv", opt(record.uv)),
        ("zlib", opt(record.zlib)),
        ("openssl", opt(record.openssl)),
        ("modules", opt(record.modules)),
        ("files", ", ".join(record.files) or "-"),
    ]


def show(
    version: str = typer.Argument(..., help="Exact release version, e.g. 4.9.1 (a leading v is ignored)."),
    as_json: bool = typer.Option(False, "--json", help="Print the record as JSON."),
    config: Path | None = config_option(),
) -> None:
    """Show what a Node.js release shipped with."""
    ctx = build_context(config)
    preload_or_exit(ctx)

    key = strip_version_prefix(version)
    result = ctx.cache.get(key)
    if isinstance(result, Err) and isinstance(result.error, VersionNotFoundError):
        # the full list of known versions is too long for a terminal
        ctx.console.error(f"unknown Node.js version {key!r} ({len(result.error.known)} versions known)")
        ctx.console.print("hint: run `nodejs-releases list` to see them", Style.DIM)
        raise typer.Exit(code=int(ErrorCode.USER_ERROR))
    record = unwrap_or_exit(result, ctx, ErrorCode.USER_ERROR)

    if as_json:
        ctx.console.print(json.dumps(record.to_dict(), indent=2))
        return
    ctx.console.fields(f"Node.js {record.version}", _rows(record))
