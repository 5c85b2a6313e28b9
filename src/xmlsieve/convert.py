"""Attribute value conversion.

Every accepted attribute is converted from its raw string with an
:class:`AttributeConverter`. Numeric conversion is permissive: input that does not
parse yields ``0`` / ``0.0`` rather than an error, and booleans are ``True`` only for
a case-insensitive ``"true"``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING, Any

from xmlsieve.errors import CustomConverterMissingError

if TYPE_CHECKING:
    from collections.abc import Callable


class AttributeKind(StrEnum):
    STRING = "string"
    INT = "int"
    FLOAT = "float"
    BOOL = "bool"
    CUSTOM = "custom"


def _to_int(raw: str) -> int:
    try:
        return int(raw.strip(), 10)
    except ValueError:
        return 0


def _to_float(raw: str) -> float:
    try:
        return float(raw.strip())
    except ValueError:
        return 0.0


def _to_bool(raw: str) -> bool:
    return raw.lower() == "true"


_BUILTIN: dict[AttributeKind, Callable[[str], Any]] = {
    AttributeKind.STRING: str,
    AttributeKind.INT: _to_int,
    AttributeKind.FLOAT: _to_float,
    AttributeKind.BOOL: _to_bool,
}


def convert(kind: AttributeKind, raw: str, func: Callable[[str], Any] | None = None) -> Any:
    """Convert *raw* according to *kind*.

    ``func`` is only consulted for :attr:`AttributeKind.CUSTOM`; a custom kind
    without one is a misconfigured template and raises
    :class:`CustomConverterMissingError`.
    """
    if kind is AttributeKind.CUSTOM:
        if func is None:
            msg = "custom attribute converter declared without a conversion function"
            raise CustomConverterMissingError(msg)
        return func(raw)
    return _BUILTIN[AttributeKind(kind)](raw)


@dataclass(frozen=True, slots=True)
class AttributeConverter:
    """Declared conversion for one attribute (or for text content)."""

    kind: AttributeKind = AttributeKind.STRING
    func: Callable[[str], Any] | None = None

    def convert(self, raw: str) -> Any:
        return convert(self.kind, raw, self.func)


def custom(func: Callable[[str], Any]) -> AttributeConverter:
    """Return a custom converter delegating to *func*."""
    return AttributeConverter(AttributeKind.CUSTOM, func)


STRING = AttributeConverter(AttributeKind.STRING)
INT = AttributeConverter(AttributeKind.INT)
FLOAT = AttributeConverter(AttributeKind.FLOAT)
BOOL = AttributeConverter(AttributeKind.BOOL)


__all__ = [
    "BOOL",
    "FLOAT",
    "INT",
    "STRING",
    "AttributeConverter",
    "AttributeKind",
    "convert",
    "custom",
]
