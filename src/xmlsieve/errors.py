"""Centralised exception hierarchy for xmlsieve."""

from __future__ import annotations


class XmlSieveError(Exception):
    """Base class for all custom xmlsieve exceptions."""


class DocumentError(XmlSieveError):
    """Base class for errors related to reading a document."""


class SourceUnavailableError(DocumentError):
    """The document could not be opened."""


class NoMatchError(DocumentError):
    """The document was read fully but no element matched the root template."""


class MalformedDocumentError(DocumentError):
    """The tokenizer rejected the markup.

    ``position`` is the ``(line, column)`` reported by the parser, when known.
    """

    def __init__(self, msg: str, position: tuple[int, int] | None = None) -> None:
        super().__init__(msg)
        self.position = position


class ForbiddenMarkupError(DocumentError):
    """The document uses DTD or entity markup that is refused for safety."""


class TemplateError(XmlSieveError):
    """A declarative template file is invalid."""


class TokenizerStateError(XmlSieveError):
    """A tokenizer query was made outside the state in which it is valid."""


class CustomConverterMissingError(XmlSieveError, NotImplementedError):
    """A custom attribute converter was invoked without a conversion function."""


__all__ = [
    "CustomConverterMissingError",
    "DocumentError",
    "ForbiddenMarkupError",
    "MalformedDocumentError",
    "NoMatchError",
    "SourceUnavailableError",
    "TemplateError",
    "TokenizerStateError",
    "XmlSieveError",
]
