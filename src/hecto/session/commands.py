"""Edit intents accepted by ``EditorSession.dispatch``.

The dispatch layer decodes key presses into these values; the core never
sees raw key codes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from hecto.view import Direction


@dataclass(frozen=True, slots=True)
class InsertChar:
    char: str


@dataclass(frozen=True, slots=True)
class InsertNewline:
    pass


@dataclass(frozen=True, slots=True)
class DeleteBackward:
    pass


@dataclass(frozen=True, slots=True)
class DeleteForward:
    pass


@dataclass(frozen=True, slots=True)
class Move:
    direction: Direction


@dataclass(frozen=True, slots=True)
class PageUp:
    pass


@dataclass(frozen=True, slots=True)
class PageDown:
    pass


@dataclass(frozen=True, slots=True)
class Resize:
    width: int
    height: int


@dataclass(frozen=True, slots=True)
class Load:
    content: Union[str, bytes]


@dataclass(frozen=True, slots=True)
class SaveRequest:
    pass


@dataclass(frozen=True, slots=True)
class Quit:
    pass


EditorCommand = Union[
    InsertChar,
    InsertNewline,
    DeleteBackward,
    DeleteForward,
    Move,
    PageUp,
    PageDown,
    Resize,
    Load,
    SaveRequest,
    Quit,
]

__all__ = [
    "DeleteBackward",
    "DeleteForward",
    "EditorCommand",
    "InsertChar",
    "InsertNewline",
    "Load",
    "Move",
    "PageDown",
    "PageUp",
    "Quit",
    "Resize",
    "SaveRequest",
]
