from __future__ import annotations

import typer

from sealed import __version__
from sealed.cli.context import CLIContext, build_context
from sealed.core.errors import ErrorCode
from sealed.core.message import default_messages, format_message
from sealed.core.selection import choose


app = typer.Typer(
    add_completion=False,
    no_args_is_help=False,
    help="Print either a success or a failure message, picked at random.",
)


@app.command()
def show(
    version: bool = typer.Option(False, "--version", help="Show version and exit."),
) -> None:
    """Pick one of the two messages and print it."""
    if version:
        typer.echo(__version__)
        raise typer.Exit(code=int(ErrorCode.OK))

    run(build_context())


def run(ctx: CLIContext) -> str:
    """Select a message, print its text, and return what was printed."""
    message = choose(default_messages(), ctx.rng)
    line = format_message(message)
    ctx.console.print(line)
    return line


def main() -> None:
    app()
