from __future__ import annotations

from hecto.buffer import Buffer, Line, Position


def make_buffer(*lines: str) -> Buffer:
    return Buffer.from_text("\n".join(lines))


def test_clamp_limits_row_and_column() -> None:
    buffer = make_buffer("hello", "hi")

    assert Position(5, 10).clamp(buffer) == Position(1, 2)
    assert Position(-3, -1).clamp(buffer) == Position(0, 0)
    assert Position(0, 9).clamp(buffer) == Position(0, 5)


def test_clamp_returns_same_value_when_valid() -> None:
    buffer = make_buffer("hello")
    position = Position(0, 3)

    assert position.clamp(buffer) is position


def test_byte_offset_conversions() -> None:
    line = Line.from_text("a\u4e16b")

    assert Position(0, 2).to_byte_offset(line) == 4
    assert Position.from_byte_offset(0, line, 3) == Position(0, 1)
    assert Position.from_byte_offset(0, line, 4) == Position(0, 2)


def test_display_column_expands_tabs_and_wide_glyphs() -> None:
    line = Line.from_text("\t\u4e16x", tab_width=4)

    assert Position(0, 1).display_column(line) == 4
    assert Position(0, 2).display_column(line) == 6
    assert Position(0, 99).display_column(line) == 7


def test_positions_order_by_row_then_column() -> None:
    assert Position(0, 9) < Position(1, 0)
    assert Position(2, 1).as_tuple() == (2, 1)
    assert Position(2, 1).with_column(4) == Position(2, 4)
