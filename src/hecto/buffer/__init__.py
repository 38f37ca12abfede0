"""Document model: graphemes, lines, positions and the editable buffer."""

from .buffer import Buffer, BufferChange, BufferListener, Transaction
from .document import join_document, normalize_separators, split_document
from .graphemes import PLACEHOLDER, Grapheme, decode, segment
from .line import Line
from .position import Position
from .validation import BufferValidationError, ensure_position, ensure_row

__all__ = [
    "Buffer",
    "BufferChange",
    "BufferListener",
    "BufferValidationError",
    "Grapheme",
    "Line",
    "PLACEHOLDER",
    "Position",
    "Transaction",
    "decode",
    "ensure_position",
    "ensure_row",
    "join_document",
    "normalize_separators",
    "segment",
    "split_document",
]
