"""Raw-keystroke list pickers rendered incrementally in the terminal."""

from .controller import (
    ControllerStatus,
    MultiSelectController,
    SelectionCancelled,
    SingleSelectController,
    select_many,
    select_one,
)
from .keys import KeyEvent, decode_key, iter_events, read_keys
from .render import RenderFrame, Repaint, paint, render_frame, render_summary
from .session import TerminalMode, TerminalSession, TerminalUnavailableError
from .state import Item, SelectionMode, SelectionState, apply, needs_repaint

__all__ = [
    "ControllerStatus",
    "Item",
    "KeyEvent",
    "MultiSelectController",
    "RenderFrame",
    "Repaint",
    "SelectionCancelled",
    "SelectionMode",
    "SelectionState",
    "SingleSelectController",
    "TerminalMode",
    "TerminalSession",
    "TerminalUnavailableError",
    "apply",
    "decode_key",
    "iter_events",
    "needs_repaint",
    "paint",
    "read_keys",
    "render_frame",
    "render_summary",
    "select_many",
    "select_one",
]
