"""Horizontal cursor movement over grapheme positions."""

from __future__ import annotations

from enum import Enum

from hecto.buffer import Buffer, Position
from hecto.buffer.graphemes import Grapheme, is_punctuation, is_whitespace


class Direction(str, Enum):
    """Cursor movement intents understood by ``View.move_cursor``."""

    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"
    LINE_START = "line_start"
    LINE_END = "line_end"
    WORD_LEFT = "word_left"
    WORD_RIGHT = "word_right"
    PAGE_UP = "page_up"
    PAGE_DOWN = "page_down"

    @property
    def is_vertical(self) -> bool:
        return self in _VERTICAL


_VERTICAL = frozenset(
    {Direction.UP, Direction.DOWN, Direction.PAGE_UP, Direction.PAGE_DOWN}
)


def step_left(buffer: Buffer, position: Position) -> Position:
    if position.column > 0:
        return Position(position.row, position.column - 1)
    if position.row > 0:
        row = position.row - 1
        return Position(row, buffer.line(row).grapheme_len)
    return position


def step_right(buffer: Buffer, position: Position) -> Position:
    if position.column < buffer.line(position.row).grapheme_len:
        return Position(position.row, position.column + 1)
    if position.row + 1 < buffer.line_count():
        return Position(position.row + 1, 0)
    return position


def line_start(buffer: Buffer, position: Position) -> Position:
    del buffer
    return Position(position.row, 0)


def line_end(buffer: Buffer, position: Position) -> Position:
    return Position(position.row, buffer.line(position.row).grapheme_len)


def _same_run(item: Grapheme, punctuation: bool) -> bool:
    if is_whitespace(item):
        return False
    return is_punctuation(item) == punctuation


def word_left(buffer: Buffer, position: Position) -> Position:
    """Move to the start of the previous word or punctuation run."""

    if position.column == 0:
        return step_left(buffer, position)
    line = buffer.line(position.row)
    column = position.column
    while column > 0 and is_whitespace(line[column - 1]):
        column -= 1
    if column > 0:
        punctuation = is_punctuation(line[column - 1])
        while column > 0 and _same_run(line[column - 1], punctuation):
            column -= 1
    return Position(position.row, column)


def word_right(buffer: Buffer, position: Position) -> Position:
    """Move past leading whitespace and then one word or punctuation run."""

    line = buffer.line(position.row)
    if position.column >= line.grapheme_len:
        return step_right(buffer, position)
    column = position.column
    end = line.grapheme_len
    while column < end and is_whitespace(line[column]):
        column += 1
    if column < end:
        punctuation = is_punctuation(line[column])
        while column < end and _same_run(line[column], punctuation):
            column += 1
    return Position(position.row, column)


HORIZONTAL_MOVES = {
    Direction.LEFT: step_left,
    Direction.RIGHT: step_right,
    Direction.LINE_START: line_start,
    Direction.LINE_END: line_end,
    Direction.WORD_LEFT: word_left,
    Direction.WORD_RIGHT: word_right,
}


__all__ = [
    "Direction",
    "HORIZONTAL_MOVES",
    "line_end",
    "line_start",
    "step_left",
    "step_right",
    "word_left",
    "word_right",
]
