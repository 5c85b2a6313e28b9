"""Template-driven tree builder.

The builder walks a :class:`~xmlsieve.tokenizer.TokenStream` and, guided by an
:class:`~xmlsieve.schema.ElementSchema` per node, keeps the attributes and
children the schema declares and drops everything else. Unsupported children are
pruned as whole subtrees: nothing below them is visited, even descendants some
other schema would accept.

Each node goes through the same states: its identity is cloned from the schema,
its attributes are filtered and converted, and unless the start tag was
self-closing its body is read until the matching end tag. Text is collected only
for wrapper elements and trimmed once at the end.

Truncated input is tolerated: if the stream ends before a node's end tag, the
node is closed with whatever was collected so far.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from xmlsieve._meta import logger
from xmlsieve.tokenizer import EndOfStream, EndTag, StartTag, Text

if TYPE_CHECKING:
    from xmlsieve.model import Element
    from xmlsieve.schema import ElementSchema
    from xmlsieve.tokenizer import TokenStream


class TreeBuilder:
    """Build element trees from a token stream."""

    def __init__(self, tokens: TokenStream) -> None:
        self.tokens = tokens

    def build(self, template: ElementSchema) -> Element | None:
        """Consume the stream and return the last element matching *template*.

        A template with an empty tag matches the first start tag of the stream and
        every later element of the same name. The template itself is left
        untouched. Elements that do not match are scanned, not pruned, so matches
        nested inside them are still found. Later matches replace earlier ones.
        """
        root_tag = template.tag
        result: Element | None = None
        while True:
            token = self.tokens.advance()
            if isinstance(token, EndOfStream):
                break
            if not isinstance(token, StartTag):
                continue
            if not root_tag:
                root_tag = token.name
                logger.debug("Adopted root tag <%s>", root_tag)
            if token.name != root_tag:
                continue
            if result is not None:
                logger.debug("Discarding earlier <%s> match", root_tag)
            result = self._build_element(template, token.name)
        return result

    def _build_element(self, schema: ElementSchema, name: str) -> Element:
        element = schema.clone_identity()
        if not element.tag:
            element.tag = name
        dispatch = element.schema or schema

        self._read_attributes(element, dispatch)
        if self.tokens.is_self_closing():
            return element

        chunks: list[str] = []
        while True:
            token = self.tokens.advance()
            if isinstance(token, EndTag) and token.name == name:
                break
            if isinstance(token, EndOfStream):
                logger.warning("Document ended before </%s>", name)
                break
            if isinstance(token, StartTag):
                child_schema = dispatch.supports_child(token.name)
                if child_schema is None:
                    logger.debug("Pruning unsupported <%s> inside <%s>", token.name, name)
                    self.tokens.skip_current_subtree()
                    continue
                element.children.append(self._build_element(child_schema, token.name))
            elif isinstance(token, Text) and element.is_wrapper:
                chunks.append(token.data)

        if element.is_wrapper and chunks:
            element.text = " ".join(chunks).strip()
        return element

    def _read_attributes(self, element: Element, dispatch: ElementSchema) -> None:
        tokens = self.tokens
        for index in range(tokens.attribute_count()):
            name = tokens.attribute_name(index)
            converter = dispatch.supports_attribute(name)
            if converter is None:
                logger.debug("Dropping unsupported attribute %s on <%s>", name, element.tag)
                continue
            value = converter.convert(tokens.attribute_value(index))
            element.attributes[name] = value
            dispatch.on_attribute_accepted(element, name, value)


def build_tree(tokens: TokenStream, template: ElementSchema) -> Element | None:
    """Run a :class:`TreeBuilder` over *tokens* once."""
    return TreeBuilder(tokens).build(template)


__all__ = ["TreeBuilder", "build_tree"]
