"""Selection state and its pure transition function."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any

from skills_cli.picker.keys import KeyEvent


@dataclass(frozen=True)
class Item:
    """One pickable entry; ``value`` is handed back to the caller untouched."""

    label: str
    value: Any
    hint: str | None = None

    def __post_init__(self) -> None:
        if not self.label:
            raise ValueError("Item label must not be empty")


class SelectionMode(Enum):
    SINGLE = "single"
    MULTI = "multi"


@dataclass(frozen=True)
class SelectionState:
    """Cursor position plus the selected indices (multi-select only).

    Attributes:
        cursor: Index of the highlighted item, always within the item list.
        selected: Indices currently checked. Empty in single-select mode.
    """

    cursor: int = 0
    selected: frozenset[int] = field(default_factory=frozenset)


def apply(state: SelectionState, event: KeyEvent, item_count: int, mode: SelectionMode) -> SelectionState:
    """Return the state that follows ``event``.

    Confirm and interrupt are resolved by the controllers, so they leave the
    state untouched here, as do toggles in single-select mode.
    """
    if item_count <= 0:
        raise ValueError("item_count must be positive")

    if event is KeyEvent.UP:
        return replace(state, cursor=(state.cursor - 1 + item_count) % item_count)
    if event is KeyEvent.DOWN:
        return replace(state, cursor=(state.cursor + 1) % item_count)

    if mode is not SelectionMode.MULTI:
        return state

    if event is KeyEvent.TOGGLE_ONE:
        return replace(state, selected=state.selected ^ {state.cursor})
    if event is KeyEvent.TOGGLE_ALL:
        if len(state.selected) == item_count:
            return replace(state, selected=frozenset())
        return replace(state, selected=frozenset(range(item_count)))
    return state


def needs_repaint(event: KeyEvent, mode: SelectionMode) -> bool:
    """True when ``event`` needs a repaint."""
    if event in (KeyEvent.UP, KeyEvent.DOWN):
        return True
    if mode is SelectionMode.MULTI:
        return event in (KeyEvent.TOGGLE_ONE, KeyEvent.TOGGLE_ALL)
    return False


__all__ = ["Item", "SelectionMode", "SelectionState", "apply", "needs_repaint"]
