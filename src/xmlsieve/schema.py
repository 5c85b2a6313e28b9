"""Element schemas: the per-node declarations that drive the tree builder.

A schema plays two roles. It is the *prototype* from which element instances are
cloned (:meth:`ElementSchema.clone_identity`), and it is the dispatch target for
every filtering decision the builder makes on those instances. The base class
accepts everything; :class:`Template` narrows it to a declared set of attributes
and children. Custom behavior is obtained by subclassing either one.

Schemas are never modified by the builder, so one template can serve any number
of parses, including concurrent ones.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, ClassVar

from xmlsieve.convert import STRING, AttributeConverter
from xmlsieve.model import Element

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable


class ElementSchema:
    """Schema accepting every attribute (as a string) and every child.

    Children are described by fresh generic schemas with the same policy, so the
    whole subtree under an ``ElementSchema`` is retained.
    """

    # Subclasses may produce richer instances (e.g. with convenience fields filled
    # by on_attribute_accepted).
    element_type: ClassVar[type[Element]] = Element

    def __init__(self, tag: str = "", *, is_wrapper: bool = True) -> None:
        self.tag = tag
        self.is_wrapper = is_wrapper

    def supports_attribute(self, name: str) -> AttributeConverter | None:  # noqa: ARG002
        return STRING

    def supports_child(self, name: str) -> ElementSchema | None:
        return ElementSchema(name)

    def convert_text(self, raw: str) -> Any:
        return raw

    def on_attribute_accepted(self, element: Element, name: str, value: Any) -> None:
        """Hook called after an attribute was converted and stored on *element*."""

    def clone_identity(self) -> Element:
        """Return a new, empty element carrying this schema's tag and wrapper flag."""
        return self.element_type(tag=self.tag, is_wrapper=self.is_wrapper, schema=self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(tag={self.tag!r}, is_wrapper={self.is_wrapper!r})"


class Template(ElementSchema):
    """Declarative schema accepting exactly the attributes and children it names.

    Parameters
    ----------
    tag:
        Element name. An empty tag on a root template means "whatever the first
        start tag of the document is".
    attributes:
        Mapping of attribute name to converter.
    children:
        Mapping of child tag to nested schema, or an iterable of schemas keyed by
        their own tag.
    text:
        Converter used by :meth:`convert_text`; the raw text is returned when
        omitted.
    on_attribute:
        Callback ``(element, name, value)`` run for every accepted attribute.
    any_attribute, any_child:
        Fall back to the permissive :class:`ElementSchema` policy for names that
        are not declared.
    """

    def __init__(
        self,
        tag: str = "",
        *,
        is_wrapper: bool = False,
        attributes: Mapping[str, AttributeConverter] | None = None,
        children: Mapping[str, ElementSchema] | Iterable[ElementSchema] | None = None,
        text: AttributeConverter | None = None,
        on_attribute: Callable[[Element, str, Any], None] | None = None,
        any_attribute: bool = False,
        any_child: bool = False,
    ) -> None:
        super().__init__(tag, is_wrapper=is_wrapper)
        self.attributes: dict[str, AttributeConverter] = dict(attributes or {})
        self.children: dict[str, ElementSchema] = {}
        if isinstance(children, Mapping):
            self.children.update(children)
        else:
            for schema in children or ():
                self.add_child(schema)
        self.text_converter = text
        self.on_attribute = on_attribute
        self.any_attribute = any_attribute
        self.any_child = any_child

    def add_child(self, schema: ElementSchema, name: str | None = None) -> ElementSchema:
        """Declare *schema* as a supported child and return it.

        Returning the schema allows recursive declarations::

            section = Template("section")
            section.add_child(section)
        """
        key = name or schema.tag
        if not key:
            msg = "child schema needs a tag or an explicit name"
            raise ValueError(msg)
        self.children[key] = schema
        return schema

    def supports_attribute(self, name: str) -> AttributeConverter | None:
        converter = self.attributes.get(name)
        if converter is None and self.any_attribute:
            return STRING
        return converter

    def supports_child(self, name: str) -> ElementSchema | None:
        schema = self.children.get(name)
        if schema is None and self.any_child:
            return ElementSchema(name)
        return schema

    def convert_text(self, raw: str) -> Any:
        if self.text_converter is None:
            return raw
        return self.text_converter.convert(raw)

    def on_attribute_accepted(self, element: Element, name: str, value: Any) -> None:
        if self.on_attribute is not None:
            self.on_attribute(element, name, value)

    def __repr__(self) -> str:
        return (
            f"Template(tag={self.tag!r}, is_wrapper={self.is_wrapper!r}, "
            f"attributes={sorted(self.attributes)!r}, children={sorted(self.children)!r})"
        )


__all__ = ["ElementSchema", "Template"]
