"""Executable Textual app that hosts the editor core."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence

try:  # pragma: no cover - imported only when the app is run
    from rich.cells import cell_len
    from rich.text import Text
    from textual import events
    from textual.app import App, ComposeResult
    from textual.widgets import Static
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use hecto.adapters.textual.app"
    ) from exc

from hecto.config import EditorConfig
from hecto.runtime import telemetry
from hecto.session import EditorSession
from hecto.view import Frame

from .controller import TextualEditorAdapter, TextualUIHooks

STATUS_HEIGHT = 1


@dataclass
class UIState:
    frame: Optional[Frame] = None
    status_text: str = ""


def render_frame(frame: Frame) -> Text:
    """Paint ``frame`` as rich text with the cursor cell shown in reverse video."""

    text = Text(no_wrap=True, overflow="crop")
    cursor_row, cursor_col = frame.cursor
    for index, row in enumerate(frame.rows):
        if index:
            text.append("\n")
        if index != cursor_row:
            text.append(row)
            continue
        padded = row + " " * max(cursor_col + 1 - cell_len(row), 0)
        start = _char_index(padded, cursor_col)
        text.append(padded[:start])
        text.append(padded[start : start + 1], style="reverse")
        text.append(padded[start + 1 :])
    return text


def _char_index(row: str, column: int) -> int:
    """Index of the first visible character drawn at or after ``column``."""

    cells = 0
    for index, ch in enumerate(row):
        width = cell_len(ch)
        if cells >= column and width > 0:
            return index
        cells += width
    return len(row)


class HectoApp(App[None]):
    """Full-screen editor: buffer area plus a one-line status bar."""

    CSS = """
	Screen {
		layout: vertical;
	}

	#buffer-view {
		height: 1fr;
	}

	#status-line {
		height: 1;
		background: $surface-darken-1;
		padding: 0 1;
	}
	"""

    BINDINGS = [
        ("ctrl+c", "quit", "Quit"),
    ]

    def __init__(
        self, path: Optional[Path] = None, *, config: Optional[EditorConfig] = None
    ) -> None:
        super().__init__()
        self.path = path
        self._config = config or EditorConfig.from_env()
        self._state = UIState()
        self.adapter: TextualEditorAdapter | None = None
        self._buffer_widget: Static | None = None
        self._status_widget: Static | None = None

    def compose(self) -> ComposeResult:
        self._buffer_widget = Static("", id="buffer-view")
        self._status_widget = Static("", id="status-line")
        yield self._buffer_widget
        yield self._status_widget

    def on_mount(self) -> None:
        width, height = self.size.width, max(self.size.height - STATUS_HEIGHT, 1)
        name = self.path.name if self.path else "[No Name]"
        session = EditorSession(
            config=self._config, width=width, height=height, name=name
        )
        hooks = TextualUIHooks(
            update_frame=self._update_frame,
            update_status=self._update_status,
            write_file=self._write_file,
            quit=self.exit,
        )
        self.adapter = TextualEditorAdapter(session, hooks)
        if self.path is not None and self.path.exists():
            self.adapter.load(self.path.read_bytes())

    def on_resize(self, event: events.Resize) -> None:
        if self.adapter:
            self.adapter.resize(
                event.size.width, max(event.size.height - STATUS_HEIGHT, 1)
            )

    def on_key(self, event: events.Key) -> None:
        if not self.adapter:
            return
        if self.adapter.handle_textual_key(event.key, character=event.character):
            event.stop()

    def _update_frame(self, frame: Frame) -> None:
        self._state.frame = frame
        if self._buffer_widget:
            self._buffer_widget.update(render_frame(frame))

    def _update_status(self, status: str) -> None:
        self._state.status_text = status
        if self._status_widget:
            self._status_widget.update(status)

    def _write_file(self, text: str) -> None:
        if self.path is None:
            self._update_status("No file name; nothing written")
            return
        self.path.write_text(text, encoding="utf-8", newline="")
        telemetry.record_event("app.write", data={"path": str(self.path)})


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="hecto", description="Terminal text editor.")
    parser.add_argument("path", nargs="?", type=Path, help="File to open")
    parser.add_argument(
        "--log-preset",
        choices=telemetry.PRESETS,
        default="production",
        help="Telemetry preset (default: production, which logs to hecto.log)",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    telemetry.configure(preset=args.log_preset)
    HectoApp(args.path).run()


if __name__ == "__main__":  # pragma: no cover - manual run
    main()
