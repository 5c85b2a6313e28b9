"""Central configuration and constants for ``xmlsieve``."""

from __future__ import annotations

import json
import tomllib
from functools import cache
from importlib import resources
from pathlib import Path

from xmlsieve._meta import logger

# Default logging format used by the CLI entry point.
LOG_FORMAT = "%(levelname)s: %(message)s"

# Bytes read from a document per tokenizer refill.
DEFAULT_CHUNK_SIZE = 64 * 1024


@cache
def get_template_schema() -> dict[str, object]:
    """Load and cache the JSON schema for declarative template files."""
    text = resources.files("xmlsieve.data").joinpath("template.schema.json").read_text(encoding="utf-8")
    return json.loads(text)


def _get_template_from_pyproject(pyproject: Path) -> str | None:
    """Extract the template path from ``[tool.xmlsieve]`` in pyproject.toml."""
    try:
        with pyproject.open("rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        logger.warning("Failed to parse %s: %s", pyproject, e)
        return None

    cfg = data.get("tool", {}).get("xmlsieve", {})
    template = cfg.get("template") if isinstance(cfg, dict) else None
    return template if isinstance(template, str) and template.strip() else None


def get_config_template(cwd: Path | None = None) -> Path | None:
    """Look for a template file configured in ``pyproject.toml``.

    Relative paths are resolved against the directory holding the pyproject.
    """
    pyproject = (cwd or Path.cwd()) / "pyproject.toml"
    if not pyproject.exists():
        return None
    template = _get_template_from_pyproject(pyproject)
    if template is None:
        return None
    path = (pyproject.parent / template).resolve()
    logger.info("Using template from config: %s", path)
    return path


__all__ = ["DEFAULT_CHUNK_SIZE", "LOG_FORMAT", "get_config_template", "get_template_schema"]
