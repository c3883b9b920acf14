from __future__ import annotations

import typer

from tagrel import __version__
from tagrel.cli.commands.release_cmd import plan, publish


app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    rich_markup_mode="rich",
)


app.command()(publish)
app.command()(plan)


def _show_version(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit(code=0)


@app.callback()
def _main(  # pyright: ignore[reportUnusedFunction]
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit.",
        callback=_show_version,
        is_eager=True,
    ),
) -> None:
    """Publish vMAJOR, vMAJOR.MINOR and exact GitHub releases from a component/semver tag."""


def main() -> None:
    app()
