"""Edit intents and the session that applies them."""

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
from .editor import DispatchResult, EditorSession

__all__ = [
    "DeleteBackward",
    "DeleteForward",
    "DispatchResult",
    "EditorCommand",
    "EditorSession",
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
