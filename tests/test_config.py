from __future__ import annotations

import pytest

from hecto.config import DEFAULT_TAB_WIDTH, EditorConfig


def test_defaults() -> None:
    config = EditorConfig()

    assert config.tab_width == DEFAULT_TAB_WIDTH
    assert config.empty_line_marker == "~"
    assert config.trailing_separator is None


@pytest.mark.parametrize(
    "overrides",
    [
        {"tab_width": 0},
        {"empty_line_marker": "~~"},
        {"empty_line_marker": "\u4e16"},
        {"empty_line_marker": "\t"},
        {"line_separator": "\n\n"},
    ],
)
def test_invalid_values_are_rejected(overrides: dict) -> None:
    with pytest.raises(ValueError):
        EditorConfig(**overrides)


def test_from_env_reads_prefixed_variables(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("HECTO_TAB_WIDTH", "8")
    monkeypatch.setenv("HECTO_EMPTY_LINE_MARKER", ".")
    monkeypatch.setenv("HECTO_TRAILING_SEPARATOR", "yes")

    config = EditorConfig.from_env()

    assert config.tab_width == 8
    assert config.empty_line_marker == "."
    assert config.trailing_separator is True


def test_from_env_falls_back_on_bad_values(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("HECTO_TAB_WIDTH", "wide")
    monkeypatch.setenv("HECTO_TRAILING_SEPARATOR", "preserve")

    config = EditorConfig.from_env()

    assert config.tab_width == DEFAULT_TAB_WIDTH
    assert config.trailing_separator is None


def test_combining_marker_fits_one_cell() -> None:
    assert EditorConfig(empty_line_marker="e\u0301").empty_line_marker == "e\u0301"
