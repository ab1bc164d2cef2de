from __future__ import annotations

import typer

from nodejs_releases import __version__
from nodejs_releases.cli.commands.list_cmd import list_releases
from nodejs_releases.cli.commands.show import show


app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    rich_markup_mode="rich",
    help="Query the Node.js release index.",
)


# Commands
app.command("list")(list_releases)
app.command()(show)


@app.callback(invoke_without_command=True)
def _main(  # pyright: ignore[reportUnusedFunction]
    ctx: typer.Context,
    version: bool = typer.Option(False, "--version", help="Show version and exit."),
) -> None:
    if version:
        typer.echo(__version__)
        raise typer.Exit(code=0)
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit(code=0)


def main() -> None:
    app()
