from __future__ import annotations

import logging
import sys
from pathlib import Path

import click.utils as click_utils

from xmlsieve.config import LOG_FORMAT


def configure_logging(*, quiet: bool, verbose: bool) -> None:
    """Configure logging based on *quiet*/*verbose*."""
    level = logging.ERROR if quiet else (logging.DEBUG if verbose else logging.INFO)
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("xmlsieve").setLevel(level)


def resolve_use_color(*, color: bool, no_color: bool, output: Path | None) -> bool:
    # CLI flags take precedence over terminal detection.
    if no_color:
        return False
    if color:
        return True
    if output not in {None, Path("-")}:
        return False
    return bool(getattr(sys.stdout, "isatty", lambda: False)()) and not click_utils.should_strip_ansi(sys.stdout)


def write_output(text: str, destination: Path | None) -> None:
    """Write output to stdout or a file (PATH or '-' for stdout)."""
    if destination is None or destination == Path("-"):
        click_utils.echo(text)
        return
    destination.parent.mkdir(parents=True, exist_ok=True)
    destination.write_text(text + "\n", encoding="utf-8")


__all__ = ["configure_logging", "resolve_use_color", "write_output"]
