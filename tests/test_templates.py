from __future__ import annotations

import json
import textwrap
from typing import TYPE_CHECKING

import pytest

from xmlsieve import INT, STRING, TemplateError, load_document, load_template, template_from_mapping
from xmlsieve.convert import AttributeKind

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path


def test_template_from_mapping() -> None:
    template = template_from_mapping({
        "tag": "items",
        "attributes": {"version": "int"},
        "children": {"item": {"wrapper": True, "text": "float", "attributes": {"id": "int", "ok": "bool"}}},
    })
    assert template.tag == "items"
    assert template.is_wrapper is False
    assert template.supports_attribute("version") == INT
    item = template.supports_child("item")
    assert item is not None
    assert item.tag == "item"
    assert item.is_wrapper is True
    assert item.convert_text("1.5") == 1.5
    assert item.supports_attribute("ok").kind is AttributeKind.BOOL  # type: ignore[union-attr]


def test_wildcards() -> None:
    template = template_from_mapping({"tag": "a", "attributes": "*", "children": "*"})
    assert template.supports_attribute("anything") == STRING
    child = template.supports_child("anything")
    assert child is not None
    assert child.tag == "anything"


def test_refs_allow_recursive_templates() -> None:
    template = template_from_mapping({
        "tag": "doc",
        "children": {"section": {"$ref": "section"}},
        "definitions": {"section": {"wrapper": True, "children": {"section": {"$ref": "section"}}}},
    })
    section = template.supports_child("section")
    assert section is not None
    assert section.supports_child("section") is section


def test_root_without_tag_adopts_first_element() -> None:
    assert template_from_mapping({}).tag == ""


@pytest.mark.parametrize(
    "data",
    [
        {"tag": 3},
        {"attributes": {"id": "integer"}},
        {"children": {"x": {"bogus": True}}},
        {"unknown": 1},
        {"children": {"x": {"$ref": "a", "tag": "x"}}},
        {"children": {"n": {"$ref": "n"}}, "definitions": {"n": {"wraper": True}}},
        [],
    ],
)
def test_invalid_templates_are_rejected(data: object) -> None:
    with pytest.raises(TemplateError):
        template_from_mapping(data)  # type: ignore[arg-type]


def test_unknown_ref_is_rejected() -> None:
    with pytest.raises(TemplateError, match="unknown template reference"):
        template_from_mapping({"children": {"x": {"$ref": "missing"}}})


def test_load_json_and_toml(tmp_path: Path) -> None:
    json_path = tmp_path / "t.json"
    json_path.write_text(json.dumps({"tag": "items", "children": {"item": {"attributes": {"id": "int"}}}}))
    toml_path = tmp_path / "t.toml"
    toml_path.write_text(
        textwrap.dedent(
            """
            tag = "items"

            [children.item.attributes]
            id = "int"
            """
        )
    )
    for path in (json_path, toml_path):
        template = load_template(path)
        item = template.supports_child("item")
        assert item is not None
        assert item.supports_attribute("id") == INT


def test_unreadable_or_undecodable_template(tmp_path: Path) -> None:
    with pytest.raises(TemplateError, match="cannot read"):
        load_template(tmp_path / "missing.json")
    bad = tmp_path / "bad.json"
    bad.write_text("{not json")
    with pytest.raises(TemplateError, match="cannot parse"):
        load_template(bad)


def test_loading_through_a_template_file(tmp_path: Path, xml_file: Callable[..., Path]) -> None:
    tpl = tmp_path / "t.json"
    tpl.write_text(json.dumps({"tag": "items", "children": {"item": {"attributes": {"id": "int"}}}}))
    doc = xml_file('<items><item id="1" extra="x"/><skip><item id="9"/></skip><item id="2"/></items>')
    result = load_document(doc, load_template(tpl))
    assert result is not None
    assert [c.attributes for c in result.children] == [{"id": 1}, {"id": 2}]
