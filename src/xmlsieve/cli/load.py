from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Annotated, cast

import typer

from xmlsieve.cli._shared import configure_logging, resolve_use_color, write_output
from xmlsieve.cli.exit_codes import EXIT_CONFIG, EXIT_DATAERR, EXIT_NOINPUT
from xmlsieve.config import get_config_template
from xmlsieve.errors import (
    ForbiddenMarkupError,
    MalformedDocumentError,
    NoMatchError,
    SourceUnavailableError,
    TemplateError,
)
from xmlsieve.loader import load_document
from xmlsieve.render import OutputFormat, render
from xmlsieve.schema import ElementSchema
from xmlsieve.templates import load_template

if TYPE_CHECKING:
    from xmlsieve.model import Element


def _resolve_template(template: Path | None, root: str | None) -> ElementSchema:
    """Pick the template: --template, then [tool.xmlsieve], then accept-everything."""
    path = template or get_config_template()
    if path is None:
        return ElementSchema(root or "")
    try:
        schema = load_template(path)
    except TemplateError as exc:
        typer.echo(f"ERROR: {exc}", err=True)
        raise typer.Exit(code=EXIT_CONFIG) from exc
    if root:
        schema.tag = root
    return schema


def _load_or_exit(document: Path, schema: ElementSchema) -> Element:
    try:
        element = load_document(document, schema, strict=True)
    except SourceUnavailableError as exc:
        typer.echo(f"ERROR: {exc}", err=True)
        raise typer.Exit(code=EXIT_NOINPUT) from exc
    except (MalformedDocumentError, ForbiddenMarkupError, NoMatchError) as exc:
        typer.echo(f"ERROR: {exc}", err=True)
        raise typer.Exit(code=EXIT_DATAERR) from exc
    # strict loading never returns None
    return cast("Element", element)


def register(app: typer.Typer) -> None:
    @app.command("load")
    def load(
        document: Annotated[
            Path,
            typer.Argument(help="Document to load."),
        ],
        template: Annotated[
            Path | None,
            typer.Option("-t", "--template", help="Template file (.json or .toml)."),
        ] = None,
        root: Annotated[
            str | None,
            typer.Option("--root", help="Root element name; overrides the template's tag."),
        ] = None,
        fmt: Annotated[
            OutputFormat,
            typer.Option("--format", help="Output format."),
        ] = OutputFormat.TREE,
        output: Annotated[
            Path | None,
            typer.Option("--output", help="Write output to PATH (use '-' for stdout)."),
        ] = None,
        color: Annotated[
            bool,
            typer.Option("--color", help="Force ANSI colors."),
        ] = False,
        no_color: Annotated[
            bool,
            typer.Option("--no-color", help="Disable ANSI colors."),
        ] = False,
        verbose: Annotated[
            bool,
            typer.Option("-v", "--verbose", help="Emit diagnostic logging."),
        ] = False,
        quiet: Annotated[
            bool,
            typer.Option("-q", "--quiet", help="Emit only errors."),
        ] = False,
    ) -> None:
        """Load DOCUMENT through a template and print the resulting tree."""
        configure_logging(quiet=quiet, verbose=verbose)
        schema = _resolve_template(template, root)
        element = _load_or_exit(document, schema)
        use_color = resolve_use_color(color=color, no_color=no_color, output=output) and fmt is OutputFormat.TREE
        write_output(render(element, fmt, color=use_color), output)


__all__ = ["register"]
