"""Cursor, scrolling and frame generation over a ``Buffer``."""

from __future__ import annotations

from typing import List, Optional, Tuple

from hecto.buffer import Buffer, BufferChange, Position
from hecto.config import EditorConfig
from hecto.runtime import telemetry

from .frame import Frame, welcome_rows
from .movement import HORIZONTAL_MOVES, Direction
from .viewport import Viewport


class View:
    """Projects a buffer and its cursor into the visible viewport.

    The only state is the viewport and the cursor. The cursor moves through
    ``move_cursor`` / ``place_cursor`` or is re-clamped when the buffer
    reports a change; every transition ends by scrolling the cursor into view.
    """

    def __init__(
        self,
        buffer: Buffer,
        *,
        width: int = 80,
        height: int = 24,
        config: Optional[EditorConfig] = None,
    ) -> None:
        self.buffer = buffer
        self.config = config or buffer.config
        self.viewport = Viewport(width=width, height=height)
        self._cursor = Position.origin()
        # Display column remembered across vertical moves through short lines.
        self._desired_column: Optional[int] = None
        self.needs_redraw = True
        buffer.subscribe(self._on_buffer_change)

    @property
    def cursor(self) -> Position:
        return self._cursor

    @property
    def desired_column(self) -> Optional[int]:
        return self._desired_column

    def attach(self, buffer: Buffer) -> None:
        """Switch to another buffer, starting at its origin."""

        self.buffer.unsubscribe(self._on_buffer_change)
        self.buffer = buffer
        buffer.subscribe(self._on_buffer_change)
        self._reset()

    # -- cursor --------------------------------------------------------------

    def place_cursor(self, position: Position) -> Position:
        """Put the cursor at ``position`` (clamped); forgets the sticky column."""

        self._cursor = position.clamp(self.buffer)
        self._desired_column = None
        self.recompute_viewport()
        return self._cursor

    def move_cursor(self, direction: Direction) -> Position:
        direction = Direction(direction)
        if direction.is_vertical:
            self._cursor = self._vertical_target(direction)
        else:
            self._cursor = HORIZONTAL_MOVES[direction](self.buffer, self._cursor)
            self._desired_column = None
        self.recompute_viewport()
        return self._cursor

    def _vertical_target(self, direction: Direction) -> Position:
        step = {
            Direction.UP: -1,
            Direction.DOWN: 1,
            Direction.PAGE_UP: -self.viewport.height,
            Direction.PAGE_DOWN: self.viewport.height,
        }[direction]
        row = min(max(self._cursor.row + step, 0), self.buffer.line_count() - 1)
        if row == self._cursor.row:
            return self._cursor
        if self._desired_column is None:
            self._desired_column = self.display_column()
        target = self.buffer.line(row)
        return Position(row, target.index_at_column(self._desired_column))

    def display_column(self, position: Optional[Position] = None) -> int:
        if position is None:
            position = self._cursor
        return position.display_column(self.buffer.line(position.row))

    # -- viewport ------------------------------------------------------------

    def recompute_viewport(self) -> None:
        line = self.buffer.line(self._cursor.row)
        column = self.display_column()
        cells = 1
        if self._cursor.column < line.grapheme_len:
            cells = line[self._cursor.column].advance(column, line.tab_width)
        self.viewport.reveal(self._cursor.row, column, cells)
        self.needs_redraw = True

    def resize(self, width: int, height: int) -> None:
        """Re-layout immediately; dimensions below one are raised to one."""

        self.viewport.resize(width, height)
        self._cursor = self._cursor.clamp(self.buffer)
        self.recompute_viewport()
        telemetry.record_event(
            "view.resize",
            level="debug",
            data={"width": self.viewport.width, "height": self.viewport.height},
        )

    def _on_buffer_change(self, change: BufferChange) -> None:
        if change.label == "load":
            self._reset()
            return
        self._cursor = self._cursor.clamp(self.buffer)
        self._desired_column = None
        self.recompute_viewport()

    def _reset(self) -> None:
        self._cursor = Position.origin()
        self._desired_column = None
        self.viewport.reset()
        self.needs_redraw = True

    # -- rendering -----------------------------------------------------------

    def render_rows(self) -> Tuple[str, ...]:
        viewport = self.viewport
        marker = self.config.empty_line_marker
        if self._shows_welcome():
            return welcome_rows(viewport.width, viewport.height, marker)
        rows: List[str] = []
        for row in range(viewport.top, viewport.bottom):
            if row < self.buffer.line_count():
                line = self.buffer.line(row)
                rows.append(line.render_slice(viewport.left, viewport.width))
            else:
                rows.append(marker)
        return tuple(rows)

    def _shows_welcome(self) -> bool:
        return (
            self.config.show_welcome
            and self.buffer.is_empty()
            and not self.buffer.is_dirty()
        )

    def screen_cursor(self) -> Tuple[int, int]:
        return (
            self._cursor.row - self.viewport.top,
            self.display_column() - self.viewport.left,
        )

    def frame(self) -> Frame:
        frame = Frame(
            rows=self.render_rows(),
            cursor=self.screen_cursor(),
            dirty=self.buffer.is_dirty(),
        )
        self.needs_redraw = False
        return frame


__all__ = ["View"]
