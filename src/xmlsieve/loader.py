from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from xmlsieve._meta import logger
from xmlsieve.builder import build_tree
from xmlsieve.config import DEFAULT_CHUNK_SIZE
from xmlsieve.errors import NoMatchError, SourceUnavailableError
from xmlsieve.tokenizer import DefusedTokenizer

if TYPE_CHECKING:
    from xmlsieve.model import Element
    from xmlsieve.schema import ElementSchema


def resolve_document_path(path: str | Path, base: Path | None = None) -> Path:
    """Expand ``~`` and anchor relative paths at *base* (the cwd by default)."""
    p = Path(path).expanduser()
    if not p.is_absolute():
        p = (base or Path.cwd()) / p
    return p.resolve()


def _finish(result: Element | None, template: ElementSchema, source: str, *, strict: bool) -> Element | None:
    if result is not None:
        return result
    wanted = f"<{template.tag}>" if template.tag else "any"
    msg = f"no {wanted} element found in {source}"
    if strict:
        raise NoMatchError(msg)
    logger.info(msg)
    return None


def load_document(
    path: str | Path,
    template: ElementSchema,
    *,
    base: Path | None = None,
    strict: bool = False,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> Element | None:
    """Load the element of *path* that matches *template*.

    Rules
    -----
    - The file is opened for the duration of one parse and always closed.
    - A file that cannot be opened, or a document without a matching element,
      yields ``None``; with ``strict=True`` they raise
      :class:`SourceUnavailableError` and :class:`NoMatchError`.
    - Malformed markup raises :class:`MalformedDocumentError` in both modes.
    """
    resolved = resolve_document_path(path, base)
    try:
        handle = resolved.open("rb")
    except OSError as exc:
        if strict:
            msg = f"cannot open document {resolved}: {exc.strerror or exc}"
            raise SourceUnavailableError(msg) from exc
        logger.warning("Cannot open document %s: %s", resolved, exc)
        return None

    with handle:
        result = build_tree(DefusedTokenizer(handle, chunk_size=chunk_size), template)
    return _finish(result, template, str(resolved), strict=strict)


def load_string(text: str | bytes, template: ElementSchema, *, strict: bool = False) -> Element | None:
    """Like :func:`load_document`, for a document held in memory."""
    result = build_tree(DefusedTokenizer.from_string(text), template)
    return _finish(result, template, "<string>", strict=strict)


__all__ = ["load_document", "load_string", "resolve_document_path"]
