"""The visible window onto a buffer, in display space."""

from __future__ import annotations

from dataclasses import dataclass

MIN_DIMENSION = 1


@dataclass(slots=True)
class Viewport:
    """Rectangle of ``height`` rows and ``width`` display columns.

    ``top`` is a document row, ``left`` a display column. Both dimensions are
    kept at ``MIN_DIMENSION`` or more so a degenerate terminal never leaves
    the cursor without a cell to land on.
    """

    top: int = 0
    left: int = 0
    width: int = 80
    height: int = 24

    def __post_init__(self) -> None:
        self.width = max(self.width, MIN_DIMENSION)
        self.height = max(self.height, MIN_DIMENSION)

    @property
    def bottom(self) -> int:
        return self.top + self.height

    @property
    def right(self) -> int:
        return self.left + self.width

    def contains(self, row: int, column: int) -> bool:
        return self.top <= row < self.bottom and self.left <= column < self.right

    def resize(self, width: int, height: int) -> None:
        self.width = max(width, MIN_DIMENSION)
        self.height = max(height, MIN_DIMENSION)

    def reset(self) -> None:
        self.top = 0
        self.left = 0

    def reveal(self, row: int, column: int, cells: int = 1) -> bool:
        """Snap to the nearest edge so ``cells`` columns at (row, column) are visible.

        Returns ``True`` when the offset changed.
        """

        top, left = self.top, self.left
        if row < self.top:
            self.top = row
        elif row >= self.bottom:
            self.top = row - self.height + 1

        cells = min(max(cells, 1), self.width)
        if column < self.left:
            self.left = column
        elif column + cells > self.right:
            self.left = column + cells - self.width
        return (top, left) != (self.top, self.left)


__all__ = ["MIN_DIMENSION", "Viewport"]
