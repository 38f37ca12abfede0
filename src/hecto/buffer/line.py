"""Unicode-aware text lines addressed by grapheme index."""

from __future__ import annotations

from typing import Iterable, Iterator, List, Optional, Tuple, Union

from hecto.config import DEFAULT_TAB_WIDTH

from .graphemes import BLANK, Grapheme, segment
from .validation import ensure_index

GraphemeLike = Union[Grapheme, str]


class Line:
    """A single line of text stored as a list of graphemes.

    Every index accepted or returned by ``Line`` is a grapheme index. Display
    columns are derived on demand, with tabs snapping to absolute tab stops
    so the column of a grapheme never depends on where a measurement starts.
    """

    __slots__ = ("_graphemes", "_tab_width", "_width")

    def __init__(
        self, graphemes: Iterable[Grapheme] = (), *, tab_width: int = DEFAULT_TAB_WIDTH
    ) -> None:
        self._graphemes: List[Grapheme] = list(graphemes)
        self._tab_width = tab_width
        self._width = 0
        self._refresh()

    @classmethod
    def from_text(cls, text: str, *, tab_width: int = DEFAULT_TAB_WIDTH) -> "Line":
        return cls(segment(text), tab_width=tab_width)

    # -- read accessors ------------------------------------------------------

    @property
    def text(self) -> str:
        return "".join(item.text for item in self._graphemes)

    @property
    def graphemes(self) -> Tuple[Grapheme, ...]:
        return tuple(self._graphemes)

    @property
    def grapheme_len(self) -> int:
        return len(self._graphemes)

    @property
    def width(self) -> int:
        """Total display width (cached)."""

        return self._width

    @property
    def tab_width(self) -> int:
        return self._tab_width

    def is_empty(self) -> bool:
        return not self._graphemes

    def __len__(self) -> int:
        return len(self._graphemes)

    def __iter__(self) -> Iterator[Grapheme]:
        return iter(self._graphemes)

    def __getitem__(self, index: int) -> Grapheme:
        return self._graphemes[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Line):
            return NotImplemented
        return self.text == other.text

    __hash__ = None  # type: ignore[assignment]

    def __add__(self, other: "Line") -> "Line":
        return Line(self._graphemes + other._graphemes, tab_width=self._tab_width)

    def __repr__(self) -> str:
        return f"Line({self.text!r})"

    # -- mutation ------------------------------------------------------------

    def insert(self, index: int, item: GraphemeLike) -> int:
        """Insert ``item`` before grapheme ``index`` and return how many graphemes landed.

        ``index`` past the end appends. A string may carry several clusters;
        they are inserted in order.
        """

        ensure_index(index)
        index = min(index, len(self._graphemes))
        items = [item] if isinstance(item, Grapheme) else segment(item)
        self._graphemes[index:index] = items
        self._refresh()
        return len(items)

    def remove(self, index: int) -> Optional[Grapheme]:
        """Remove and return the grapheme at ``index``; ``None`` past the end."""

        ensure_index(index)
        if index >= len(self._graphemes):
            return None
        removed = self._graphemes.pop(index)
        self._refresh()
        return removed

    def split(self, index: int) -> Tuple["Line", "Line"]:
        ensure_index(index)
        index = min(index, len(self._graphemes))
        return (
            Line(self._graphemes[:index], tab_width=self._tab_width),
            Line(self._graphemes[index:], tab_width=self._tab_width),
        )

    def extend(self, other: "Line") -> None:
        self._graphemes.extend(other._graphemes)
        self._refresh()

    def _refresh(self) -> None:
        self._width = self.column_at(len(self._graphemes))

    # -- measurement ---------------------------------------------------------

    def _spans(self) -> Iterator[Tuple[Grapheme, int, int]]:
        column = 0
        for item in self._graphemes:
            cells = item.advance(column, self._tab_width)
            yield item, column, cells
            column += cells

    def column_at(self, index: int) -> int:
        """Return the display column where grapheme ``index`` starts."""

        index = min(max(index, 0), len(self._graphemes))
        column = 0
        for item in self._graphemes[:index]:
            column += item.advance(column, self._tab_width)
        return column

    def index_at_column(self, column: int) -> int:
        """Return the grapheme index drawn at display ``column``.

        A column inside a wide glyph or tab resolves to that glyph's index;
        columns past the end resolve to ``grapheme_len``.
        """

        for index, (_item, start, cells) in enumerate(self._spans()):
            if column < start + cells:
                return index
        return len(self._graphemes)

    def display_width(self, start: int = 0, end: Optional[int] = None) -> int:
        """Width of graphemes ``[start, end)`` with tabs expanded in place."""

        if end is None:
            end = len(self._graphemes)
        if end <= start:
            return 0
        return self.column_at(end) - self.column_at(start)

    def byte_offset(self, index: int) -> int:
        """UTF-8 byte offset of grapheme ``index`` (clamped to the line)."""

        index = min(max(index, 0), len(self._graphemes))
        return sum(len(item.text.encode("utf-8")) for item in self._graphemes[:index])

    def index_at_byte(self, offset: int) -> int:
        """Grapheme index whose encoded bytes contain ``offset`` (clamped)."""

        consumed = 0
        for index, item in enumerate(self._graphemes):
            size = len(item.text.encode("utf-8"))
            if offset < consumed + size:
                return index
            consumed += size
        return len(self._graphemes)

    # -- rendering -----------------------------------------------------------

    def render_slice(self, first_col: int, width: int) -> str:
        """Return the text visible in display columns ``[first_col, first_col + width)``.

        Glyphs cut by either edge of the window are drawn as blanks for the
        cells that remain visible, so the result never exceeds ``width`` cells.
        """

        if width <= 0:
            return ""
        first_col = max(first_col, 0)
        limit = first_col + width
        parts: List[str] = []
        for item, start, cells in self._spans():
            if start >= limit:
                break
            end = start + cells
            if cells == 0:
                if start >= first_col:
                    parts.append(item.rendered(0))
                continue
            if end <= first_col:
                continue
            if start >= first_col and end <= limit:
                parts.append(item.rendered(cells))
            else:
                parts.append(BLANK * (min(end, limit) - max(start, first_col)))
        return "".join(parts)


__all__ = ["Line"]
