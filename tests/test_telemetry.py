from __future__ import annotations

from typing import Any, Dict, List, Tuple

import pytest

from hecto.buffer import BufferValidationError, Position
from hecto.runtime import telemetry
from hecto.session import DeleteForward, EditorSession

Event = Tuple[str, Dict[str, Any]]


@pytest.fixture
def events(monkeypatch: pytest.MonkeyPatch) -> List[Event]:
    captured: List[Event] = []

    def capture(name: str, **kwargs: Any) -> None:
        captured.append((name, kwargs))

    monkeypatch.setattr(telemetry, "record_event", capture)
    return captured


def test_span_reports_failure_and_reraises(events: List[Event]) -> None:
    with pytest.raises(BufferValidationError):
        with telemetry.span("buffer::insert_char", metadata={"row": 3}):
            raise BufferValidationError("Row out of range")

    name, kwargs = events[-1]
    assert name == "span.fail"
    assert kwargs["level"] == "error"
    assert kwargs["data"] == {
        "span": "buffer::insert_char",
        "reason": "Row out of range",
        "row": "3",
    }


def test_span_is_silent_on_success(events: List[Event]) -> None:
    with telemetry.span("buffer::insert_char"):
        pass

    assert events == []


def test_failing_command_is_reported_with_its_span(
    events: List[Event], monkeypatch: pytest.MonkeyPatch
) -> None:
    session = EditorSession()

    def broken(position: Position) -> Position:
        raise BufferValidationError("Column out of range", position=position)

    monkeypatch.setattr(session.buffer, "delete_at", broken)

    with pytest.raises(BufferValidationError):
        session.dispatch(DeleteForward())

    spans = [kwargs["data"]["span"] for name, kwargs in events if name == "span.fail"]
    assert spans == ["session::DeleteForward"]


def test_unknown_preset_is_rejected() -> None:
    with pytest.raises(ValueError):
        telemetry.configure(preset="verbose")


def test_env_flag_parses_truthy_values(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("HECTO_NO_COLOR", "Yes")
    monkeypatch.delenv("HECTO_LOG_JSON", raising=False)

    assert telemetry.env_flag("NO_COLOR", False)
    assert not telemetry.env_flag("LOG_JSON", False)
    assert telemetry.env_flag("LOG_JSON", True)
