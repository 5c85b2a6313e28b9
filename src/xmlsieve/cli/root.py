from __future__ import annotations

from typing import Annotated

import typer
from typer.main import get_command

from xmlsieve import __version__
from xmlsieve.cli import check, load


def _version_callback(value: bool) -> None:  # noqa: FBT001
    if value:
        typer.echo(f"xmlsieve {__version__}")
        raise typer.Exit


def create_app() -> typer.Typer:
    app = typer.Typer(help="Load the parts of an XML document a template asks for.")

    @app.callback()
    def _root(
        *,
        version: Annotated[
            bool,
            typer.Option("--version", callback=_version_callback, is_eager=True, help="Show version and exit"),
        ] = False,
    ) -> None:
        pass

    load.register(app)
    check.register(app)

    return app


def main() -> None:
    app = create_app()
    get_command(app)()


# Click-compatible object for tooling that imports it
cli = get_command(create_app())

__all__ = ["cli", "create_app", "main"]
