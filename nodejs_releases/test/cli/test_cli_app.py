from __future__ import annotations

from pathlib import Path

import pytest
import typer
from typer.testing import CliRunner

from nodejs_releases import __version__
from nodejs_releases.cli.app import app
from nodejs_releases.cli.context import build_context
from nodejs_releases.core.errors import ErrorCode


def test_version_flag() -> None:
    result = CliRunner().invoke(app, ["--version"])

    assert result.exit_code == 0
    assert result.stdout.strip() == __version__


def test_commands_registered() -> None:
    result = CliRunner().invoke(app, ["--help"])

    assert result.exit_code == 0
    assert "list" in result.stdout
    assert "show" in result.stdout


def test_build_context_uses_config(tmp_path: Path) -> None:
    path = tmp_path / "releases.toml"
    path.write_text('[index]\nurl = "https://mirror.example.com/index.json"\ntimeout = 3\n')

    ctx = build_context(path)

    assert ctx.cache.url == "https://mirror.example.com/index.json"
    assert ctx.config.index.timeout == 3.0
    assert not ctx.cache.is_populated


def test_build_context_bad_config_exits(tmp_path: Path) -> None:
    with pytest.raises(typer.Exit) as exc:
        build_context(tmp_path / "missing.toml")

    assert exc.value.exit_code == int(ErrorCode.CONFIG_ERROR)
