"""Single-owner editor session applying edit intents to a buffer and view."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Optional, Tuple, Type

from hecto.buffer import Buffer, Position
from hecto.config import EditorConfig
from hecto.runtime import telemetry
from hecto.view import Direction, Frame, View
from hecto.view.movement import step_left

from .commands import (
    DeleteBackward,
    DeleteForward,
    EditorCommand,
    InsertChar,
    InsertNewline,
    Load,
    Move,
    PageDown,
    PageUp,
    Quit,
    Resize,
    SaveRequest,
)

Outcome = Tuple[str, Optional[str]]


@dataclass(slots=True)
class DispatchResult:
    """Result returned from ``EditorSession.dispatch``.

    ``saved_text`` is only set for ``SaveRequest``; writing it somewhere is
    the caller's job.
    """

    frame: Frame
    status: str = "ok"
    saved_text: Optional[str] = None
    should_quit: bool = False


class EditorSession:
    """Owns the buffer and view; applies one intent at a time and renders the result."""

    def __init__(
        self,
        *,
        config: Optional[EditorConfig] = None,
        width: int = 80,
        height: int = 24,
        name: str = "default",
    ) -> None:
        self.config = config or EditorConfig()
        self.buffer = Buffer(name=name, config=self.config)
        self.view = View(self.buffer, width=width, height=height, config=self.config)
        self.should_quit = False
        self._handlers: Dict[Type[object], Callable[..., Outcome]] = {
            InsertChar: self._insert_char,
            InsertNewline: self._insert_newline,
            DeleteBackward: self._delete_backward,
            DeleteForward: self._delete_forward,
            Move: self._move,
            PageUp: lambda _command: self._page(Direction.PAGE_UP),
            PageDown: lambda _command: self._page(Direction.PAGE_DOWN),
            Resize: self._resize,
            Load: self._load,
            SaveRequest: self._save,
            Quit: self._quit,
        }

    @property
    def cursor(self) -> Position:
        return self.view.cursor

    def frame(self) -> Frame:
        return self.view.frame()

    def dispatch(self, command: EditorCommand) -> DispatchResult:
        handler = self._handlers.get(type(command))
        if handler is None:
            raise TypeError(f"Unsupported command {command!r}")
        name = type(command).__name__
        with telemetry.span(
            name=f"session::{name}",
            metadata={"buffer": self.buffer.name},
        ):
            status, saved_text = handler(command)
        return DispatchResult(
            frame=self.view.frame(),
            status=status,
            saved_text=saved_text,
            should_quit=self.should_quit,
        )

    def save(self) -> str:
        """Serialize the buffer and mark it clean."""

        text = self.buffer.to_text()
        self.buffer.mark_saved()
        telemetry.record_event(
            "session.save",
            data={"buffer": self.buffer.name, "lines": self.buffer.line_count()},
        )
        return text

    # -- handlers ------------------------------------------------------------

    def _insert_char(self, command: InsertChar) -> Outcome:
        if not command.char:
            return ("noop", None)
        self.view.place_cursor(self.buffer.insert_char(self.cursor, command.char))
        return ("ok", None)

    def _insert_newline(self, _command: InsertNewline) -> Outcome:
        self.view.place_cursor(self.buffer.insert_newline(self.cursor))
        return ("ok", None)

    def _delete_backward(self, _command: DeleteBackward) -> Outcome:
        target = step_left(self.buffer, self.cursor)
        if target == self.cursor:
            return ("noop", None)
        self.view.place_cursor(self.buffer.delete_at(target))
        return ("ok", None)

    def _delete_forward(self, _command: DeleteForward) -> Outcome:
        version = self.buffer.version
        self.view.place_cursor(self.buffer.delete_at(self.cursor))
        return ("ok" if self.buffer.version != version else "noop", None)

    def _move(self, command: Move) -> Outcome:
        self.view.move_cursor(command.direction)
        return ("ok", None)

    def _page(self, direction: Direction) -> Outcome:
        self.view.move_cursor(direction)
        return ("ok", None)

    def _resize(self, command: Resize) -> Outcome:
        self.view.resize(command.width, command.height)
        return ("ok", None)

    def _load(self, command: Load) -> Outcome:
        self.buffer.load(command.content)
        return ("loaded", None)

    def _save(self, _command: SaveRequest) -> Outcome:
        return ("saved", self.save())

    def _quit(self, _command: Quit) -> Outcome:
        self.should_quit = True
        return ("quit", None)


__all__ = ["DispatchResult", "EditorSession"]
