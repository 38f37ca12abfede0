"""Plain-text persistence format for buffers."""

from __future__ import annotations

from typing import Iterable, List, Tuple

from .graphemes import decode


def normalize_separators(text: str) -> str:
    """Fold CRLF and lone CR into LF."""

    return text.replace("\r\n", "\n").replace("\r", "\n")


def split_document(content: bytes | str) -> Tuple[List[str], bool]:
    """Split ``content`` into line texts.

    Returns the lines plus whether the document ended with a separator. That
    final separator terminates the last line; it does not open a new one.
    Always yields at least one (possibly empty) line.
    """

    text = normalize_separators(decode(content))
    trailing = text.endswith("\n")
    if trailing:
        text = text[:-1]
    return text.split("\n"), trailing


def join_document(lines: Iterable[str], *, separator: str, trailing: bool) -> str:
    body = separator.join(lines)
    return body + separator if trailing else body


__all__ = ["join_document", "normalize_separators", "split_document"]
