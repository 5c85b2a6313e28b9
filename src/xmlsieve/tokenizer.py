"""Markup tokenizer.

The tree builder consumes a flat stream of tokens through the :class:`TokenStream`
protocol. :class:`DefusedTokenizer` implements it on top of ``defusedxml``'s
hardened SAX reader, fed incrementally so that large documents are never held
in memory as raw text. Namespace processing is off: names arrive exactly as
written (``x:b`` stays ``x:b``) and ``xmlns`` declarations are plain attributes.

Tokenizer contract relied upon by the builder:

- attribute queries and :meth:`~TokenStream.is_self_closing` are only valid while
  the current token is a start tag;
- :meth:`~TokenStream.skip_current_subtree` consumes everything up to and
  including the end tag matching the current start tag, balancing nested elements
  that share its name.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, replace
from typing import IO, TYPE_CHECKING, Final, Protocol
from xml.sax import SAXParseException
from xml.sax.handler import ContentHandler

from defusedxml import DefusedXmlException
from defusedxml.expatreader import create_parser

from xmlsieve.config import DEFAULT_CHUNK_SIZE
from xmlsieve.errors import ForbiddenMarkupError, MalformedDocumentError, TokenizerStateError

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator
    from xml.sax.xmlreader import AttributesImpl


@dataclass(frozen=True, slots=True)
class StartTag:
    name: str
    attributes: tuple[tuple[str, str], ...] = ()
    self_closing: bool = False


@dataclass(frozen=True, slots=True)
class EndTag:
    name: str


@dataclass(frozen=True, slots=True)
class Text:
    data: str


@dataclass(frozen=True, slots=True)
class EndOfStream:
    pass


END_OF_STREAM: Final = EndOfStream()

Token = StartTag | EndTag | Text | EndOfStream


class TokenStream(Protocol):
    """Pull interface over a markup token sequence."""

    @property
    def current(self) -> Token: ...

    def advance(self) -> Token: ...

    def is_self_closing(self) -> bool: ...

    def attribute_count(self) -> int: ...

    def attribute_name(self, index: int) -> str: ...

    def attribute_value(self, index: int) -> str: ...

    def skip_current_subtree(self) -> None: ...


class _TokenHandler(ContentHandler):
    """SAX content handler that records tokens instead of building a tree."""

    def __init__(self) -> None:
        super().__init__()
        self.tokens: deque[Token] = deque()
        self._pending: StartTag | None = None
        self._text: list[str] = []

    def startElement(self, name: str, attrs: AttributesImpl) -> None:  # noqa: N802
        self._flush()
        self._pending = StartTag(name, tuple(attrs.items()))

    def endElement(self, name: str) -> None:  # noqa: N802
        if self._pending is not None:
            # nothing between start and end: report a single self-closing tag
            self.tokens.append(replace(self._pending, self_closing=True))
            self._pending = None
            return
        self._flush()
        self.tokens.append(EndTag(name))

    def characters(self, content: str) -> None:
        if self._pending is not None:
            self.tokens.append(self._pending)
            self._pending = None
        self._text.append(content)

    def endDocument(self) -> None:  # noqa: N802
        self._flush()

    def _flush(self) -> None:
        if self._pending is not None:
            self.tokens.append(self._pending)
            self._pending = None
        if self._text:
            self.tokens.append(Text("".join(self._text)))
            self._text.clear()


class DefusedTokenizer:
    """Token stream over an XML document, parsed with ``defusedxml``.

    *source* is a binary or text file object, or an iterable of ``bytes``/``str``
    chunks. The tokenizer does not own *source*; closing it is the caller's job.
    """

    def __init__(
        self,
        source: IO[bytes] | IO[str] | Iterable[bytes | str],
        *,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
    ) -> None:
        self._chunks = _iter_chunks(source, chunk_size)
        self._handler = _TokenHandler()
        self._parser = create_parser()
        self._parser.setContentHandler(self._handler)
        self._fed = False
        self._exhausted = False
        self._current: Token = END_OF_STREAM

    @classmethod
    def from_string(cls, text: str | bytes) -> DefusedTokenizer:
        return cls([text])

    @property
    def current(self) -> Token:
        return self._current

    def advance(self) -> Token:
        tokens = self._handler.tokens
        while not tokens and not self._exhausted:
            self._pump()
        self._current = tokens.popleft() if tokens else END_OF_STREAM
        return self._current

    def is_self_closing(self) -> bool:
        return self._start_tag().self_closing

    def attribute_count(self) -> int:
        return len(self._start_tag().attributes)

    def attribute_name(self, index: int) -> str:
        return self._start_tag().attributes[index][0]

    def attribute_value(self, index: int) -> str:
        return self._start_tag().attributes[index][1]

    def skip_current_subtree(self) -> None:
        if self._start_tag().self_closing:
            return
        depth = 1
        while depth:
            token = self.advance()
            if isinstance(token, StartTag):
                if not token.self_closing:
                    depth += 1
            elif isinstance(token, EndTag):
                depth -= 1
            elif isinstance(token, EndOfStream):
                return

    def _start_tag(self) -> StartTag:
        token = self._current
        if not isinstance(token, StartTag):
            msg = f"current token is not a start tag: {token!r}"
            raise TokenizerStateError(msg)
        return token

    def _pump(self) -> None:
        chunk = next(self._chunks, None)
        try:
            if chunk is None:
                self._exhausted = True
                if not self._fed:
                    # the reader only starts on its first feed; an empty document must still fail
                    self._parser.feed(b"")
                self._parser.close()
            else:
                self._fed = True
                self._parser.feed(chunk)
        except SAXParseException as exc:
            self._exhausted = True
            msg = f"malformed markup: {exc}"
            raise MalformedDocumentError(msg, (exc.getLineNumber(), exc.getColumnNumber())) from exc
        except DefusedXmlException as exc:
            self._exhausted = True
            msg = f"forbidden markup: {exc}"
            raise ForbiddenMarkupError(msg) from exc


def _iter_chunks(
    source: IO[bytes] | IO[str] | Iterable[bytes | str],
    chunk_size: int,
) -> Iterator[bytes | str]:
    if hasattr(source, "read"):
        read = source.read  # type: ignore[union-attr]
        while chunk := read(chunk_size):
            yield chunk
        return
    for chunk in source:
        if chunk:
            yield chunk


__all__ = [
    "END_OF_STREAM",
    "DefusedTokenizer",
    "EndOfStream",
    "EndTag",
    "StartTag",
    "Text",
    "Token",
    "TokenStream",
]
