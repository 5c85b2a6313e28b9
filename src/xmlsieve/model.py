from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Iterator

    from xmlsieve.schema import ElementSchema


@dataclass
class Element:
    """One node of a loaded document.

    Instances are created by :meth:`ElementSchema.clone_identity` and filled in by
    the tree builder; only what the producing schema declared ever appears in
    ``attributes``, ``children`` and ``text``.
    """

    tag: str = ""
    is_wrapper: bool = False
    attributes: dict[str, Any] = field(default_factory=dict)
    children: list[Element] = field(default_factory=list)
    text: str = ""
    schema: ElementSchema | None = field(default=None, repr=False, compare=False)

    @property
    def value(self) -> Any:
        """Text content converted by the producing schema."""
        if self.schema is None:
            return self.text
        return self.schema.convert_text(self.text)

    def get(self, name: str, default: Any = None) -> Any:
        return self.attributes.get(name, default)

    def find(self, tag: str) -> Element | None:
        """Return the first direct child named *tag*, if any."""
        return next((c for c in self.children if c.tag == tag), None)

    def find_all(self, tag: str) -> list[Element]:
        return [c for c in self.children if c.tag == tag]

    def iter(self, tag: str | None = None) -> Iterator[Element]:
        """Walk this element and its descendants depth-first, in document order."""
        if tag is None or self.tag == tag:
            yield self
        for child in self.children:
            yield from child.iter(tag)

    def to_dict(self) -> dict[str, object]:
        out: dict[str, object] = {
            "tag": self.tag,
            "attributes": dict(self.attributes),
            "children": [c.to_dict() for c in self.children],
        }
        if self.is_wrapper:
            out["text"] = self.text
        return out


__all__ = ["Element"]
