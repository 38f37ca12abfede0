"""Contract checks shared across buffer services."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from .position import Position

if TYPE_CHECKING:  # pragma: no cover
    from .buffer import Buffer


class BufferValidationError(RuntimeError):
    """Raised when a caller hands the buffer an out-of-range row or column.

    Editing flows clamp before they call in, so this signals a programming
    error rather than something to report to the user.
    """

    def __init__(self, message: str, *, position: Position | None = None) -> None:
        super().__init__(message)
        self.position = position


def ensure_row(buffer: "Buffer", row: int) -> int:
    if row < 0 or row >= buffer.line_count():
        raise BufferValidationError("Row out of range", position=Position(row, 0))
    return row


def ensure_position(buffer: "Buffer", position: Position) -> Position:
    ensure_row(buffer, position.row)
    line = buffer.line(position.row)
    if position.column < 0 or position.column > line.grapheme_len:
        raise BufferValidationError("Column out of range", position=position)
    return position


def ensure_index(index: int, *, position: Optional[Position] = None) -> int:
    if index < 0:
        raise BufferValidationError("Negative grapheme index", position=position)
    return index


__all__ = [
    "BufferValidationError",
    "ensure_index",
    "ensure_position",
    "ensure_row",
]
