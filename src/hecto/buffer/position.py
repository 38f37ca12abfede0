"""Logical document positions measured in grapheme units."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Tuple

if TYPE_CHECKING:  # pragma: no cover
    from .buffer import Buffer
    from .line import Line


@dataclass(frozen=True, slots=True, order=True)
class Position:
    """A (row, column) location; ``column`` counts graphemes, not code points.

    Positions are plain values and may be out of range. ``clamp`` is the only
    way to turn one into a location that is valid for a particular buffer.
    """

    row: int = 0
    column: int = 0

    @classmethod
    def origin(cls) -> "Position":
        return cls(0, 0)

    @classmethod
    def from_byte_offset(cls, row: int, line: "Line", offset: int) -> "Position":
        """Return the position of the grapheme containing UTF-8 byte ``offset``."""

        return cls(row, line.index_at_byte(offset))

    def to_byte_offset(self, line: "Line") -> int:
        return line.byte_offset(self.column)

    def display_column(self, line: "Line") -> int:
        return line.column_at(self.column)

    def clamp(self, buffer: "Buffer") -> "Position":
        row = min(max(self.row, 0), buffer.line_count() - 1)
        column = min(max(self.column, 0), buffer.line(row).grapheme_len)
        if (row, column) == (self.row, self.column):
            return self
        return Position(row, column)

    def with_column(self, column: int) -> "Position":
        return replace(self, column=column)

    def as_tuple(self) -> Tuple[int, int]:
        return (self.row, self.column)


__all__ = ["Position"]
