"""Render frames handed to the terminal layer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from hecto import __version__
from hecto.buffer import Line

NAME = "hecto"


@dataclass(frozen=True, slots=True)
class Frame:
    """One screenful: width-clipped rows, the screen cursor and the dirty flag."""

    rows: Tuple[str, ...]
    cursor: Tuple[int, int]
    dirty: bool

    @property
    def height(self) -> int:
        return len(self.rows)


def welcome_message() -> str:
    return f"{NAME} editor -- v{__version__}"


def welcome_rows(width: int, height: int, marker: str) -> Tuple[str, ...]:
    """Empty-line markers with the centered banner a third of the way down."""

    rows = [marker] * height
    room = width - Line.from_text(marker).width
    message = Line.from_text(welcome_message()).render_slice(0, room)
    if message:
        padding = " " * ((room - Line.from_text(message).width) // 2)
        rows[height // 3] = f"{marker}{padding}{message}"
    return tuple(rows)


__all__ = ["Frame", "NAME", "welcome_message", "welcome_rows"]
