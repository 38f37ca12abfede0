"""Editor configuration shared by the buffer and view layers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from hecto.runtime.telemetry import env

DEFAULT_TAB_WIDTH = 4
DEFAULT_EMPTY_LINE_MARKER = "~"
LINE_SEPARATORS = ("\r\n", "\r", "\n")


@dataclass(frozen=True, slots=True)
class EditorConfig:
    """Tunable editor behaviour.

    ``trailing_separator`` controls what ``Buffer.to_text`` does with the final
    line: ``True`` always terminates it, ``False`` never does, ``None`` keeps
    whatever the loaded document had.
    """

    tab_width: int = DEFAULT_TAB_WIDTH
    empty_line_marker: str = DEFAULT_EMPTY_LINE_MARKER
    line_separator: str = "\n"
    trailing_separator: Optional[bool] = None
    show_welcome: bool = True

    def __post_init__(self) -> None:
        if self.tab_width < 1:
            raise ValueError("tab_width must be at least 1")
        if not _fits_one_cell(self.empty_line_marker):
            raise ValueError("empty_line_marker must fit in one terminal cell")
        if self.line_separator not in LINE_SEPARATORS:
            raise ValueError(f"Unsupported line separator {self.line_separator!r}")

    @classmethod
    def from_env(cls) -> "EditorConfig":
        """Build a config from ``HECTO_*`` environment variables."""

        tab_width = _int_or_default(env("TAB_WIDTH"), DEFAULT_TAB_WIDTH)
        marker = env("EMPTY_LINE_MARKER", DEFAULT_EMPTY_LINE_MARKER)
        trailing_raw = env("TRAILING_SEPARATOR")
        trailing: Optional[bool] = None
        if trailing_raw is not None and trailing_raw.lower() != "preserve":
            trailing = trailing_raw.lower() in {"1", "true", "yes", "on"}
        return cls(
            tab_width=tab_width,
            empty_line_marker=marker if marker is not None else DEFAULT_EMPTY_LINE_MARKER,
            trailing_separator=trailing,
        )


def _fits_one_cell(text: str) -> bool:
    from hecto.buffer.graphemes import segment  # hecto.buffer imports this module

    items = segment(text)
    return len(items) <= 1 and all(not item.is_tab and item.width <= 1 for item in items)


def _int_or_default(value: Optional[str], fallback: int) -> int:
    if value is None:
        return fallback
    try:
        return int(value)
    except ValueError:
        return fallback


__all__ = ["DEFAULT_TAB_WIDTH", "EditorConfig", "LINE_SEPARATORS"]
