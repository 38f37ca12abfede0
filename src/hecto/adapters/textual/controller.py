"""Textual adapter that turns key names into edit intents and frames into UI updates."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Optional

from hecto.session import (
    DeleteBackward,
    DeleteForward,
    DispatchResult,
    EditorCommand,
    EditorSession,
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
from hecto.view import Direction, Frame


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks invoked by the adapter to update Textual widgets."""

    update_frame: Callable[[Frame], None]
    update_status: Callable[[str], None] = _noop
    write_file: Callable[[str], None] = _noop
    quit: Callable[[], None] = _noop
    log: Callable[[str], None] = _noop


KEY_COMMANDS: Dict[str, EditorCommand] = {
    "left": Move(Direction.LEFT),
    "right": Move(Direction.RIGHT),
    "up": Move(Direction.UP),
    "down": Move(Direction.DOWN),
    "home": Move(Direction.LINE_START),
    "end": Move(Direction.LINE_END),
    "ctrl+left": Move(Direction.WORD_LEFT),
    "ctrl+right": Move(Direction.WORD_RIGHT),
    "pageup": PageUp(),
    "pagedown": PageDown(),
    "enter": InsertNewline(),
    "backspace": DeleteBackward(),
    "delete": DeleteForward(),
    "tab": InsertChar("\t"),
    "ctrl+s": SaveRequest(),
    "ctrl+q": Quit(),
}


def command_for_key(key: str, character: Optional[str] = None) -> Optional[EditorCommand]:
    """Map a Textual key name (plus printable character) to an intent."""

    command = KEY_COMMANDS.get(key)
    if command is not None:
        return command
    if character and character.isprintable():
        return InsertChar(character)
    return None


class TextualEditorAdapter:
    """Bridges an ``EditorSession`` to a Textual-friendly surface."""

    def __init__(self, session: EditorSession, hooks: TextualUIHooks) -> None:
        self.session = session
        self.hooks = hooks
        self.hooks.update_frame(self.session.frame())
        self._refresh_status()

    def handle_textual_key(self, key: str, *, character: Optional[str] = None) -> bool:
        """Dispatch a key; returns ``False`` when it maps to no intent."""

        command = command_for_key(key, character)
        if command is None:
            self.hooks.log(f"key -> {key!r} ignored")
            return False
        self.dispatch(command)
        return True

    def load(self, content: str | bytes) -> DispatchResult:
        return self.dispatch(Load(content))

    def resize(self, width: int, height: int) -> DispatchResult:
        return self.dispatch(Resize(width, height))

    def dispatch(self, command: EditorCommand) -> DispatchResult:
        self.hooks.log(f"command -> {command!r}")
        result = self.session.dispatch(command)
        if result.saved_text is not None:
            self.hooks.write_file(result.saved_text)
        self.hooks.update_frame(result.frame)
        self._refresh_status(result.status)
        self.hooks.log(
            f"result <- status={result.status!r} cursor={self.session.cursor.as_tuple()!r}"
        )
        if result.should_quit:
            self.hooks.quit()
        return result

    def _refresh_status(self, status: str = "ok") -> None:
        cursor = self.session.cursor
        marker = " [+]" if self.session.buffer.is_dirty() else ""
        label = f"{self.session.buffer.name}{marker}  Ln {cursor.row + 1}, Col {cursor.column + 1}"
        if status not in {"ok", "noop"}:
            label = f"{label}  {status}"
        self.hooks.update_status(label)


__all__ = [
    "KEY_COMMANDS",
    "TextualEditorAdapter",
    "TextualUIHooks",
    "command_for_key",
]
