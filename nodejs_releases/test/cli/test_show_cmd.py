from __future__ import annotations

import json

import pytest
import typer

from nodejs_releases.cli.context import CLIContext
from nodejs_releases.core.config import Config
from nodejs_releases.core.errors import ErrorCode
from nodejs_releases.http import MockHttpClient
from nodejs_releases.output.console import MockConsole
from nodejs_releases.releases.cache import ReleaseCache


@pytest.fixture
def ctx(monkeypatch: pytest.MonkeyPatch, mock_http: MockHttpClient) -> CLIContext:
    import nodejs_releases.cli.commands.show as show_cmd

    context = CLIContext(config=Config(), cache=ReleaseCache(mock_http), console=MockConsole())
    monkeypatch.setattr(show_cmd, "build_context", lambda config_path=None: context)
    return context


def _console(ctx: CLIContext) -> MockConsole:
    assert isinstance(ctx.console, MockConsole)
    return ctx.console


def test_show_table(ctx: CLIContext) -> None:
    import nodejs_releases.cli.commands.show as show_cmd

    show_cmd.show(version="v4.9.1", as_json=False, config=None)

    console = _console(ctx)
    assert console.messages[0] == "Node.js 4.9.1"
    assert "lts: Argon" in console.messages
    assert "date: 2018-03-29" in console.messages
    assert "uv: -" in console.messages
    assert "security: no" in console.messages


def test_show_json(ctx: CLIContext) -> None:
    import nodejs_releases.cli.commands.show as show_cmd

    show_cmd.show(version="12.22.12", as_json=True, config=None)

    data = json.loads(_console(ctx).text)
    assert data["version"] == "12.22.12"
    assert data["lts"] == "Erbium"
    assert data["security"] is True
    assert "uv" not in data


def test_show_unknown_version(ctx: CLIContext) -> None:
    import nodejs_releases.cli.commands.show as show_cmd

    with pytest.raises(typer.Exit) as exc:
        show_cmd.show(version="999.999.999", as_json=False, config=None)

    assert exc.value.exit_code == int(ErrorCode.USER_ERROR)
    console = _console(ctx)
    assert console.has_error()
    assert console.find("'999.999.999'")
    assert console.find("9 versions known")
