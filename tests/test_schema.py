from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import pytest

from xmlsieve import INT, STRING, Element, ElementSchema, Template


def test_clone_identity_is_empty() -> None:
    schema = Template("book", is_wrapper=True, attributes={"id": INT})
    first = schema.clone_identity()
    first.attributes["id"] = 1
    first.children.append(Element("x"))
    first.text = "dirty"

    second = schema.clone_identity()
    assert second.tag == "book"
    assert second.is_wrapper is True
    assert second.attributes == {}
    assert second.children == []
    assert second.text == ""
    assert second.schema is schema


def test_default_schema_accepts_everything() -> None:
    schema = ElementSchema("any")
    assert schema.supports_attribute("whatever") is STRING
    child = schema.supports_child("nested")
    assert isinstance(child, ElementSchema)
    assert child.tag == "nested"
    assert child.is_wrapper is True
    assert schema.convert_text(" raw ") == " raw "


def test_template_narrows_attributes_and_children() -> None:
    item = Template("item")
    schema = Template("items", attributes={"n": INT}, children=[item])
    assert schema.supports_attribute("n") is INT
    assert schema.supports_attribute("other") is None
    assert schema.supports_child("item") is item
    assert schema.supports_child("other") is None


def test_template_wildcards_fall_back_to_default_policy() -> None:
    schema = Template("x", attributes={"n": INT}, any_attribute=True, any_child=True)
    assert schema.supports_attribute("n") is INT
    assert schema.supports_attribute("free") is STRING
    child = schema.supports_child("free")
    assert child is not None
    assert child.tag == "free"


def test_template_children_mapping_keys_win() -> None:
    entry = Template("entry")
    schema = Template("list", children={"item": entry})
    assert schema.supports_child("item") is entry
    assert schema.supports_child("entry") is None


def test_add_child_allows_recursion() -> None:
    section = Template("section")
    assert section.add_child(section) is section
    assert section.supports_child("section") is section


def test_add_child_requires_a_name() -> None:
    with pytest.raises(ValueError, match="needs a tag"):
        Template("x").add_child(Template())


def test_on_attribute_callback() -> None:
    seen: list[tuple[str, Any]] = []
    schema = Template("x", on_attribute=lambda _el, name, value: seen.append((name, value)))
    schema.on_attribute_accepted(schema.clone_identity(), "n", 3)
    assert seen == [("n", 3)]


def test_subclass_can_produce_richer_elements() -> None:
    @dataclass
    class Book(Element):
        isbn: str = ""

    class BookSchema(Template):
        element_type = Book

        def on_attribute_accepted(self, element: Element, name: str, value: Any) -> None:
            if name == "isbn" and isinstance(element, Book):
                element.isbn = value

    schema = BookSchema("book", attributes={"isbn": STRING})
    book = schema.clone_identity()
    assert isinstance(book, Book)
    schema.on_attribute_accepted(book, "isbn", "978")
    assert book.isbn == "978"
