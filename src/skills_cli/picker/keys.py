"""Logical key decoding for the interactive pickers."""

from __future__ import annotations

from enum import Enum
from typing import Iterable, Iterator

import readchar


class KeyEvent(Enum):
    """Closed set of logical keys understood by the pickers."""

    UP = "up"
    DOWN = "down"
    TOGGLE_ONE = "toggle_one"
    TOGGLE_ALL = "toggle_all"
    CONFIRM = "confirm"
    INTERRUPT = "interrupt"
    UNKNOWN = "unknown"


_KEYMAP: dict[str, KeyEvent] = {
    readchar.key.UP: KeyEvent.UP,
    "k": KeyEvent.UP,
    readchar.key.DOWN: KeyEvent.DOWN,
    "j": KeyEvent.DOWN,
    " ": KeyEvent.TOGGLE_ONE,
    "a": KeyEvent.TOGGLE_ALL,
    "A": KeyEvent.TOGGLE_ALL,
    "\r": KeyEvent.CONFIRM,
    "\n": KeyEvent.CONFIRM,
    readchar.key.CTRL_C: KeyEvent.INTERRUPT,
}


def decode_key(raw: str) -> KeyEvent:
    """Map one key as read from the terminal to a logical event.

    Partial or unrecognised escape sequences decode to ``UNKNOWN``; nothing
    is buffered between calls.
    """
    return _KEYMAP.get(raw, KeyEvent.UNKNOWN)


def read_keys() -> Iterator[str]:
    """Block on the terminal and yield raw keys until input ends."""
    while True:
        try:
            raw = readchar.readkey()
        except KeyboardInterrupt:
            # readchar raises for Ctrl-C itself; surface it as a key instead
            raw = readchar.key.CTRL_C
        if not raw:
            # end of input (hang-up or closed pty)
            return
        yield raw


def iter_events(raw_keys: Iterable[str]) -> Iterator[KeyEvent]:
    """Decode each raw key in order."""
    for raw in raw_keys:
        yield decode_key(raw)


__all__ = ["KeyEvent", "decode_key", "read_keys", "iter_events"]
