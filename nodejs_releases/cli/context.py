from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import typer

from nodejs_releases.core.config import Config, load_config
from nodejs_releases.core.errors import ErrorCode
from nodejs_releases.core.result import Err
from nodejs_releases.http import RealHttpClient
from nodejs_releases.output.console import ConsoleProtocol, RichConsole
from nodejs_releases.releases.cache import ReleaseCache


@dataclass(frozen=True, slots=True)
class CLIContext:
    config: Config
    cache: ReleaseCache
    console: ConsoleProtocol


def build_context(config_path: Path | None = None) -> CLIContext:
    config = Config()
    if config_path is not None:
        config_result = load_config(config_path)
        if isinstance(config_result, Err):
            typer.echo(f"error: {config_result.error.message}", err=True)
            raise typer.Exit(code=int(ErrorCode.CONFIG_ERROR))
        config = config_result.value

    http = RealHttpClient(timeout=config.index.timeout, user_agent=config.index.user_agent)
    return CLIContext(
        config=config,
        cache=ReleaseCache(http, url=config.index.url),
        console=RichConsole(),
    )
