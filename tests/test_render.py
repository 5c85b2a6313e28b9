from __future__ import annotations

import json

import pytest

from xmlsieve import INT, Template, load_string
from xmlsieve.model import Element
from xmlsieve.render import OutputFormat, render, render_json, render_tree


@pytest.fixture
def loaded() -> Element:
    template = Template(
        "items",
        attributes={"v": INT},
        children=[Template("item", is_wrapper=True, attributes={"id": INT})],
    )
    result = load_string('<items v="2"><item id="1">first</item><item id="2"/></items>', template)
    assert result is not None
    return result


def test_render_tree_plain(loaded: Element) -> None:
    out = render_tree(loaded)
    lines = out.splitlines()
    assert lines[0] == "<items> v=2"
    assert any("<item> id=1" in line for line in lines)
    assert any("'first'" in line for line in lines)
    assert "\x1b[" not in out


def test_render_tree_color(loaded: Element) -> None:
    assert "\x1b[" in render_tree(loaded, color=True)


def test_render_json(loaded: Element) -> None:
    data = json.loads(render_json(loaded))
    assert data == {
        "tag": "items",
        "attributes": {"v": 2},
        "children": [
            {"tag": "item", "attributes": {"id": 1}, "children": [], "text": "first"},
            {"tag": "item", "attributes": {"id": 2}, "children": [], "text": ""},
        ],
    }


def test_render_dispatch(loaded: Element) -> None:
    assert render(loaded, "json") == render_json(loaded)
    assert render(loaded, OutputFormat.TREE) == render_tree(loaded)
    with pytest.raises(ValueError):
        render(loaded, "xml")


def test_element_navigation(loaded: Element) -> None:
    assert loaded.find("item") is loaded.children[0]
    assert loaded.find("missing") is None
    assert len(loaded.find_all("item")) == 2
    assert [e.tag for e in loaded.iter()] == ["items", "item", "item"]
    assert [e.get("id") for e in loaded.iter("item")] == [1, 2]
    assert loaded.get("missing", "default") == "default"
