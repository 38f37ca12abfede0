from __future__ import annotations

import random

import pytest

from hecto.buffer import Position
from hecto.config import EditorConfig
from hecto.session import (
    DeleteBackward,
    DeleteForward,
    EditorCommand,
    EditorSession,
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
from hecto.view import Direction


def make_session(text: str = "", *, width: int = 20, height: int = 5) -> EditorSession:
    session = EditorSession(width=width, height=height)
    if text:
        session.dispatch(Load(text))
    return session


def test_typing_renders_characters_and_marks_dirty() -> None:
    session = make_session()

    for ch in "hi":
        result = session.dispatch(InsertChar(ch))

    assert result.frame.rows[0] == "hi"
    assert result.frame.cursor == (0, 2)
    assert result.frame.dirty


def test_delete_forward_at_line_end_joins_lines() -> None:
    session = make_session("hello\nworld")
    session.dispatch(Move(Direction.LINE_END))

    result = session.dispatch(DeleteForward())

    assert result.frame.rows[0] == "helloworld"
    assert session.cursor == Position(0, 5)
    assert result.status == "ok"


def test_delete_forward_at_document_end_is_noop() -> None:
    session = make_session("abc")
    session.dispatch(Move(Direction.LINE_END))

    result = session.dispatch(DeleteForward())

    assert result.status == "noop"
    assert not result.frame.dirty


def test_delete_backward_joins_with_previous_line() -> None:
    session = make_session("ab\ncd")
    session.dispatch(Move(Direction.DOWN))

    result = session.dispatch(DeleteBackward())

    assert result.frame.rows[0] == "abcd"
    assert session.cursor == Position(0, 2)


def test_delete_backward_at_origin_is_noop() -> None:
    session = make_session("abc")

    result = session.dispatch(DeleteBackward())

    assert result.status == "noop"
    assert session.buffer.line(0).text == "abc"


def test_newline_splits_and_moves_cursor() -> None:
    session = make_session("abcd")
    session.dispatch(Move(Direction.RIGHT))
    session.dispatch(Move(Direction.RIGHT))

    result = session.dispatch(InsertNewline())

    assert result.frame.rows[:2] == ("ab", "cd")
    assert result.frame.cursor == (1, 0)


def test_inserting_separator_character_behaves_like_newline() -> None:
    session = make_session("ab")
    session.dispatch(Move(Direction.RIGHT))

    session.dispatch(InsertChar("\r\n"))

    assert [line.text for line in session.buffer] == ["a", "b"]


def test_page_commands_move_by_viewport_height() -> None:
    session = make_session("\n".join(str(n) for n in range(30)), height=5)

    session.dispatch(PageDown())
    assert session.cursor.row == 5
    session.dispatch(PageUp())
    assert session.cursor.row == 0


def test_resize_relayouts_immediately() -> None:
    session = make_session("\n".join(str(n) for n in range(30)), height=10)
    for _ in range(8):
        session.dispatch(Move(Direction.DOWN))

    result = session.dispatch(Resize(0, 2))

    assert result.frame.height == 2
    assert result.frame.cursor == (1, 0)
    assert session.view.viewport.width == 1


def test_load_resets_cursor_and_is_clean() -> None:
    session = make_session("one\ntwo")
    session.dispatch(Move(Direction.DOWN))
    session.dispatch(InsertChar("x"))

    result = session.dispatch(Load(b"fresh\r\ntext\n"))

    assert result.status == "loaded"
    assert result.frame.rows[:2] == ("fresh", "text")
    assert result.frame.cursor == (0, 0)
    assert not result.frame.dirty


def test_save_request_returns_text_and_clears_dirty() -> None:
    session = make_session("one\n")
    session.dispatch(InsertChar("!"))

    result = session.dispatch(SaveRequest())

    assert result.status == "saved"
    assert result.saved_text == "!one\n"
    assert not result.frame.dirty
    assert not session.buffer.is_dirty()


def test_save_honors_trailing_separator_policy() -> None:
    session = EditorSession(config=EditorConfig(trailing_separator=True))
    session.dispatch(InsertChar("x"))

    assert session.dispatch(SaveRequest()).saved_text == "x\n"


def test_quit_sets_flag() -> None:
    session = make_session()

    result = session.dispatch(Quit())

    assert result.should_quit
    assert session.should_quit


def test_unknown_command_is_rejected() -> None:
    session = make_session()

    with pytest.raises(TypeError):
        session.dispatch("up")  # type: ignore[arg-type]


def test_random_editing_keeps_cursor_valid_and_visible() -> None:
    rng = random.Random(1234)
    session = make_session("alpha\n\tbeta \u4e16\u4e16\n\ngamma e\u0301x\n" * 4, width=7, height=3)
    commands: list[EditorCommand] = [
        *(Move(direction) for direction in Direction),
        InsertChar("z"),
        InsertChar("\u4e16"),
        InsertChar("\t"),
        InsertNewline(),
        DeleteBackward(),
        DeleteForward(),
        PageUp(),
        PageDown(),
        Resize(5, 2),
        Resize(9, 4),
    ]

    for _ in range(500):
        session.dispatch(rng.choice(commands))
        buffer, view = session.buffer, session.view
        cursor = view.cursor

        assert 0 <= cursor.row < buffer.line_count()
        assert 0 <= cursor.column <= buffer.line(cursor.row).grapheme_len
        assert view.viewport.contains(cursor.row, view.display_column())


def test_insert_char_payload_with_newline_adds_a_line() -> None:
    session = make_session()

    result = session.dispatch(InsertChar("a\nb"))

    assert session.buffer.line_count() == 2
    assert result.frame.rows[:2] == ("a", "b")
    assert session.cursor == Position(1, 1)
    assert session.dispatch(SaveRequest()).saved_text == "a\nb"
