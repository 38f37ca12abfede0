"""Editable document made of ``Line`` objects."""

from __future__ import annotations

from contextlib import AbstractContextManager
from dataclasses import dataclass
from typing import Callable, ContextManager, Iterator, List, Optional, Tuple

from hecto.config import LINE_SEPARATORS, EditorConfig
from hecto.runtime import telemetry

from .document import join_document, normalize_separators, split_document
from .line import Line
from .position import Position
from .validation import BufferValidationError, ensure_position, ensure_row


@dataclass(frozen=True, slots=True)
class BufferChange:
    """Notification sent to subscribers after every mutation."""

    label: str
    version: int
    row: int


BufferListener = Callable[[BufferChange], None]


class Buffer:
    """Ordered, never-empty sequence of lines plus a dirty flag.

    Editing methods take a valid ``Position`` (see ``Position.clamp``) and
    return where the cursor belongs afterwards.
    """

    def __init__(
        self,
        lines: Optional[List[Line]] = None,
        *,
        name: str = "default",
        config: Optional[EditorConfig] = None,
    ) -> None:
        self.name = name
        self.config = config or EditorConfig()
        # Lines always measure tabs with this buffer's tab width.
        self._lines: List[Line] = [self._new_line(line.text) for line in lines or ()]
        if not self._lines:
            self._lines.append(self._new_line())
        self._dirty = False
        self._listeners: List[BufferListener] = []
        self.version = 0
        self.has_trailing_separator = False

    @classmethod
    def from_text(
        cls,
        content: bytes | str,
        *,
        name: str = "default",
        config: Optional[EditorConfig] = None,
    ) -> "Buffer":
        buffer = cls(name=name, config=config)
        buffer._replace_content(content)
        return buffer

    # -- read accessors ------------------------------------------------------

    def line_count(self) -> int:
        return len(self._lines)

    def line(self, row: int) -> Line:
        return self._lines[ensure_row(self, row)]

    @property
    def lines(self) -> Tuple[Line, ...]:
        return tuple(self._lines)

    def __iter__(self) -> Iterator[Line]:
        return iter(self._lines)

    def is_empty(self) -> bool:
        return len(self._lines) == 1 and self._lines[0].is_empty()

    def is_dirty(self) -> bool:
        return self._dirty

    def mark_saved(self) -> None:
        self._dirty = False
        self.has_trailing_separator = self._effective_trailing()

    def subscribe(self, listener: BufferListener) -> None:
        self._listeners.append(listener)

    def unsubscribe(self, listener: BufferListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    # -- persistence ---------------------------------------------------------

    def load(self, content: bytes | str) -> None:
        """Replace the whole document; the result is clean (not dirty)."""

        with telemetry.span(
            name="buffer::load", metadata={"buffer": self.name}
        ):
            self._replace_content(content)
        telemetry.record_event(
            "buffer.load",
            data={"buffer": self.name, "lines": len(self._lines)},
        )
        self._notify("load", 0)

    def to_text(self) -> str:
        trailing = self._effective_trailing()
        if self.is_empty() and not self.has_trailing_separator:
            trailing = False
        return join_document(
            (line.text for line in self._lines),
            separator=self.config.line_separator,
            trailing=trailing,
        )

    def _effective_trailing(self) -> bool:
        if self.config.trailing_separator is None:
            return self.has_trailing_separator
        return self.config.trailing_separator

    def _replace_content(self, content: bytes | str) -> None:
        texts, trailing = split_document(content)
        self._lines = [self._new_line(text) for text in texts]
        self.has_trailing_separator = trailing
        self._dirty = False
        self.version += 1

    # -- editing -------------------------------------------------------------

    def insert_char(self, position: Position, ch: str) -> Position:
        """Insert ``ch`` at ``position``; a line separator splits the line."""

        position = ensure_position(self, position)
        if ch in LINE_SEPARATORS:
            return self.insert_newline(position)
        if "\n" in ch or "\r" in ch:
            return self.insert_text(position, ch)
        if not ch:
            return position
        with Transaction(self, "insert_char", position.row) as tx:
            inserted = self._lines[position.row].insert(position.column, ch)
            tx.commit()
        return Position(position.row, position.column + inserted)

    def insert_text(self, position: Position, text: str) -> Position:
        """Insert arbitrary text, splitting lines at every separator."""

        position = ensure_position(self, position)
        if not text:
            return position
        pieces = normalize_separators(text).split("\n")
        with Transaction(self, "insert_text", position.row) as tx:
            row, column = position.row, position.column
            for number, piece in enumerate(pieces):
                if number:
                    self._split(row, column)
                    row, column = row + 1, 0
                if piece:
                    column += self._lines[row].insert(column, piece)
            tx.commit()
        return Position(row, column)

    def insert_newline(self, position: Position) -> Position:
        position = ensure_position(self, position)
        with Transaction(self, "insert_newline", position.row) as tx:
            self._split(position.row, position.column)
            tx.commit()
        return Position(position.row + 1, 0)

    def delete_at(self, position: Position) -> Position:
        """Delete the grapheme at ``position`` or join the next line at line end."""

        position = ensure_position(self, position)
        line = self._lines[position.row]
        if position.column < line.grapheme_len:
            with Transaction(self, "delete", position.row) as tx:
                line.remove(position.column)
                tx.commit()
        elif position.row + 1 < len(self._lines):
            with Transaction(self, "join_lines", position.row) as tx:
                self._join(position.row)
                tx.commit()
        return position

    def join_lines(self, row: int) -> Position:
        """Append line ``row + 1`` to line ``row``; returns the seam position."""

        ensure_row(self, row)
        if row + 1 >= len(self._lines):
            raise BufferValidationError(
                "No line to join", position=Position(row + 1, 0)
            )
        seam = Position(row, self._lines[row].grapheme_len)
        with Transaction(self, "join_lines", row) as tx:
            self._join(row)
            tx.commit()
        return seam

    def _split(self, row: int, column: int) -> None:
        head, tail = self._lines[row].split(column)
        self._lines[row : row + 1] = [head, tail]

    def _join(self, row: int) -> None:
        self._lines[row].extend(self._lines.pop(row + 1))

    def _new_line(self, text: str = "") -> Line:
        return Line.from_text(text, tab_width=self.config.tab_width)

    def _after_commit(self, label: str, row: int) -> None:
        self._dirty = True
        self.version += 1
        self._notify(label, row)

    def _notify(self, label: str, row: int) -> None:
        change = BufferChange(label=label, version=self.version, row=row)
        for listener in list(self._listeners):
            listener(change)


class Transaction(AbstractContextManager["Transaction"]):
    """Wraps one edit in a telemetry span and publishes it once committed."""

    def __init__(self, buffer: Buffer, label: str, row: int) -> None:
        self.buffer = buffer
        self.label = label
        self.row = row
        self._committed = False
        self._span_cm: Optional[ContextManager[object]] = None

    def __enter__(self) -> "Transaction":
        self._span_cm = telemetry.span(
            name=f"buffer::{self.label}",
            metadata={"buffer": self.buffer.name, "row": self.row},
        )
        self._span_cm.__enter__()
        return self

    def commit(self) -> None:
        self._committed = True

    def __exit__(self, exc_type, exc, tb) -> bool:
        if self._span_cm is not None:
            self._span_cm.__exit__(exc_type, exc, tb)
        if exc_type is None and self._committed:
            self.buffer._after_commit(self.label, self.row)
        return False


__all__ = ["Buffer", "BufferChange", "BufferListener", "Transaction"]
