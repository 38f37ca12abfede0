"""Textual host for the editor core."""

from .controller import (
    KEY_COMMANDS,
    TextualEditorAdapter,
    TextualUIHooks,
    command_for_key,
)

__all__ = ["KEY_COMMANDS", "TextualEditorAdapter", "TextualUIHooks", "command_for_key"]
