"""Viewport, cursor movement and frame generation."""

from .frame import Frame, welcome_message, welcome_rows
from .movement import Direction
from .view import View
from .viewport import Viewport

__all__ = [
    "Direction",
    "Frame",
    "View",
    "Viewport",
    "welcome_message",
    "welcome_rows",
]
