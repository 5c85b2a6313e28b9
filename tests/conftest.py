from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest
from click.testing import CliRunner

from xmlsieve import INT, Template


@pytest.fixture
def cli_runner() -> CliRunner:
    """Return a Click CLI runner for invoking the command-line interface."""
    return CliRunner()


@pytest.fixture
def xml_file(tmp_path: Path) -> Callable[..., Path]:
    def write(content: str, *, filename: str = "doc.xml") -> Path:
        path = tmp_path / filename
        path.write_text(content, encoding="utf-8")
        return path

    return write


@pytest.fixture
def items_template() -> Template:
    """``<items>`` root accepting ``<item id=int>`` children."""
    return Template("items", children=[Template("item", attributes={"id": INT})])
