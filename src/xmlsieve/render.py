"""Debug rendering of loaded element trees."""

from __future__ import annotations

import json
from enum import StrEnum
from io import StringIO
from typing import TYPE_CHECKING

from rich.console import Console
from rich.text import Text
from rich.tree import Tree

if TYPE_CHECKING:
    from xmlsieve.model import Element


class OutputFormat(StrEnum):
    TREE = "tree"
    JSON = "json"


def _label(element: Element) -> Text:
    label = Text(f"<{element.tag}>", style="bold")
    for name, value in element.attributes.items():
        label.append(" ")
        label.append(name, style="cyan")
        label.append(f"={value!r}")
    return label


def _add(tree: Tree, element: Element) -> None:
    if element.is_wrapper and element.text:
        tree.add(Text(repr(element.text), style="green"))
    for child in element.children:
        _add(tree.add(_label(child)), child)


def render_tree(element: Element, *, color: bool = False) -> str:
    """Render *element* as an indented tree, one node per line."""
    tree = Tree(_label(element))
    _add(tree, element)

    buf = StringIO()
    console = Console(
        file=buf,
        force_terminal=color,
        color_system="standard" if color else None,
        no_color=not color,
        width=10_000,
    )
    console.print(tree)
    # tree labels are padded to the console width
    return "\n".join(line.rstrip() for line in buf.getvalue().rstrip().splitlines())


def render_json(element: Element, *, indent: int = 2) -> str:
    return json.dumps(element.to_dict(), indent=indent, default=str)


def render(element: Element, fmt: OutputFormat | str = OutputFormat.TREE, *, color: bool = False) -> str:
    fmt = OutputFormat(fmt)
    if fmt is OutputFormat.JSON:
        return render_json(element)
    return render_tree(element, color=color)


__all__ = ["OutputFormat", "render", "render_json", "render_tree"]
