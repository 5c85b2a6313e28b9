"""Declarative template files.

Templates can be written as JSON or TOML instead of Python::

    {
      "tag": "items",
      "attributes": {"version": "int"},
      "children": {
        "item": {"wrapper": true, "text": "float", "attributes": {"id": "int"}},
        "note": {"$ref": "note"}
      },
      "definitions": {"note": {"wrapper": true, "children": {"note": {"$ref": "note"}}}}
    }

``"*"`` in place of an ``attributes`` or ``children`` table accepts everything.
Inline children take their key as tag; root and referenced definitions without a
``tag`` take the name of the element they are matched against.
"""

from __future__ import annotations

import json
import tomllib
from typing import TYPE_CHECKING, Any

from jsonschema import ValidationError, validate

from xmlsieve.config import get_template_schema
from xmlsieve.convert import AttributeConverter, AttributeKind
from xmlsieve.errors import TemplateError
from xmlsieve.schema import Template

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path


def _converter(kind: str) -> AttributeConverter:
    return AttributeConverter(AttributeKind(kind))


class _TemplateFactory:
    def __init__(self, definitions: Mapping[str, Mapping[str, Any]]) -> None:
        self.definitions = definitions
        self.resolved: dict[str, Template] = {}

    def ref(self, name: str) -> Template:
        if name in self.resolved:
            return self.resolved[name]
        try:
            decl = self.definitions[name]
        except KeyError as exc:
            msg = f"unknown template reference {name!r}"
            raise TemplateError(msg) from exc
        # registered before its children so definitions may refer to themselves
        template = self.resolved[name] = self._shell(decl, "")
        self._fill_children(template, decl)
        return template

    def node(self, decl: Mapping[str, Any], tag: str) -> Template:
        template = self._shell(decl, tag)
        self._fill_children(template, decl)
        return template

    def _shell(self, decl: Mapping[str, Any], tag: str) -> Template:
        attributes = decl.get("attributes", {})
        text = decl.get("text")
        return Template(
            decl.get("tag", tag),
            is_wrapper=bool(decl.get("wrapper", False)),
            attributes={} if attributes == "*" else {k: _converter(v) for k, v in attributes.items()},
            any_attribute=attributes == "*",
            text=_converter(text) if text else None,
        )

    def _fill_children(self, template: Template, decl: Mapping[str, Any]) -> None:
        children = decl.get("children", {})
        if children == "*":
            template.any_child = True
            return
        for name, child in children.items():
            if "$ref" in child:
                template.add_child(self.ref(child["$ref"]), name)
            else:
                template.add_child(self.node(child, name), name)


def template_from_mapping(data: Mapping[str, Any]) -> Template:
    """Validate a decoded template document and build the root :class:`Template`."""
    try:
        validate(instance=data, schema=get_template_schema())
    except ValidationError as exc:
        where = "/".join(str(p) for p in exc.absolute_path) or "<root>"
        msg = f"invalid template at {where}: {exc.message}"
        raise TemplateError(msg) from exc
    factory = _TemplateFactory(data.get("definitions", {}))
    return factory.node(data, "")


def load_template(path: Path) -> Template:
    """Read a ``.json`` or ``.toml`` template file."""
    try:
        if path.suffix.lower() == ".toml":
            with path.open("rb") as f:
                data = tomllib.load(f)
        else:
            with path.open(encoding="utf-8") as f:
                data = json.load(f)
    except OSError as exc:
        msg = f"cannot read template {path}: {exc.strerror or exc}"
        raise TemplateError(msg) from exc
    except (json.JSONDecodeError, tomllib.TOMLDecodeError) as exc:
        msg = f"cannot parse template {path}: {exc}"
        raise TemplateError(msg) from exc
    return template_from_mapping(data)


__all__ = ["load_template", "template_from_mapping"]
