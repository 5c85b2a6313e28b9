from __future__ import annotations

from pathlib import Path  # noqa: TC003
from typing import Annotated

import typer

from xmlsieve.cli.exit_codes import EXIT_CONFIG, EXIT_OK
from xmlsieve.errors import TemplateError
from xmlsieve.templates import load_template


def register(app: typer.Typer) -> None:
    @app.command("check-template")
    def check_template(
        template: Annotated[
            Path,
            typer.Argument(help="Template file (.json or .toml)."),
        ],
    ) -> None:
        """Validate a template file."""
        try:
            schema = load_template(template)
        except TemplateError as exc:
            typer.echo(f"ERROR: {exc}", err=True)
            raise typer.Exit(code=EXIT_CONFIG) from exc
        root = f"<{schema.tag}>" if schema.tag else "first element"
        children = ", ".join(sorted(schema.children)) or ("*" if schema.any_child else "none")
        typer.echo(f"ok: root {root}; children: {children}")
        raise typer.Exit(code=EXIT_OK)


__all__ = ["register"]
