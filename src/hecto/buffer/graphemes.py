"""Grapheme segmentation and terminal width measurement."""

from __future__ import annotations

import unicodedata
from dataclasses import dataclass
from typing import List

import grapheme
import wcwidth as _wcwidth

TAB = "\t"
PLACEHOLDER = "\ufffd"
BLANK = " "


@dataclass(frozen=True, slots=True)
class Grapheme:
    """One user-perceived character.

    ``width`` is the intrinsic cell width. Tabs report ``0`` here because
    their width depends on the column they start at; see ``advance``.
    """

    text: str
    width: int

    @classmethod
    def of(cls, cluster: str) -> "Grapheme":
        return cls(text=cluster, width=measure(cluster))

    @property
    def is_tab(self) -> bool:
        return self.text == TAB

    def advance(self, column: int, tab_width: int) -> int:
        """Return the number of cells this grapheme covers when drawn at ``column``."""

        if self.is_tab:
            return tab_width - (column % tab_width)
        return self.width

    def rendered(self, cells: int) -> str:
        """Return the terminal-safe text for this grapheme spanning ``cells``."""

        if self.is_tab:
            return BLANK * cells
        if _is_control(self.text):
            return PLACEHOLDER
        return self.text


def _is_control(cluster: str) -> bool:
    if len(cluster) != 1:
        return False
    cp = ord(cluster)
    return cp < 0x20 or 0x7F <= cp <= 0x9F


def measure(cluster: str) -> int:
    """Return the display width of a single grapheme cluster.

    Rules:
    1. Tabs -> 0 (expanded by the owning line)
    2. Control characters -> 1 (rendered as the placeholder glyph)
    3. Emoji sequences (VS16, ZWJ, skin tones, regional indicators) -> 2
    4. Clusters starting with a mark or format character -> 0
    5. Otherwise delegate to wcwidth for the base codepoint.
    """

    if not cluster:
        return 0
    if cluster == TAB:
        return 0
    if _is_control(cluster):
        return 1

    if len(cluster) == 1:
        return max(_wcwidth.wcwidth(cluster), 0)

    for ch in cluster:
        cp = ord(ch)
        if cp in (0xFE0F, 0x200D):
            return 2
        if 0x1F3FB <= cp <= 0x1F3FF or 0x1F1E6 <= cp <= 0x1F1FF:
            return 2

    base = cluster[0]
    category = unicodedata.category(base)
    if category.startswith("M") or category == "Cf":
        return 0
    if ord(base) >= 0x1F000:
        return 2
    return max(_wcwidth.wcwidth(base), 0)


def sanitize(text: str) -> str:
    """Replace lone surrogates (undecodable input) with the placeholder."""

    try:
        text.encode("utf-8")
    except UnicodeEncodeError:
        return "".join(
            PLACEHOLDER if 0xD800 <= ord(ch) <= 0xDFFF else ch for ch in text
        )
    return text


def decode(data: bytes | str) -> str:
    """Return ``data`` as text; malformed UTF-8 becomes the placeholder."""

    if isinstance(data, str):
        return sanitize(data)
    return data.decode("utf-8", errors="replace")


def segment(text: str) -> List[Grapheme]:
    return [Grapheme.of(cluster) for cluster in grapheme.graphemes(sanitize(text))]


def is_whitespace(item: Grapheme) -> bool:
    return item.text.isspace()


def is_punctuation(item: Grapheme) -> bool:
    base = item.text[:1]
    if not base or base.isspace():
        return False
    return not (base.isalnum() or base == "_")


__all__ = [
    "BLANK",
    "Grapheme",
    "PLACEHOLDER",
    "TAB",
    "decode",
    "is_punctuation",
    "is_whitespace",
    "measure",
    "sanitize",
    "segment",
]
