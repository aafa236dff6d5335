"""Raw terminal mode lifecycle for a selection session."""

from __future__ import annotations

import logging
import os
import sys
import termios
from dataclasses import dataclass

from rich.console import Console

logger = logging.getLogger(__name__)

# termios attribute list slots
_IFLAG = 0
_LFLAG = 3
_CC = 6

_active_session: "TerminalSession | None" = None


class TerminalUnavailableError(RuntimeError):
    """Raised when the terminal cannot enter raw mode or hide its cursor."""


@dataclass(frozen=True)
class TerminalMode:
    raw: bool = False
    cursor_visible: bool = True


class TerminalSession:
    """Own raw input mode and cursor visibility while a picker is active.

    Entering switches stdin to raw input and hides the cursor; leaving
    restores both on every exit path, including ``SystemExit`` raised on
    interrupt. Sessions do not nest.
    """

    def __init__(self, console: Console, stdin_fd: int | None = None) -> None:
        self.console = console
        self.stdin_fd = stdin_fd
        self.mode = TerminalMode()
        self._saved_tty_state: list | None = None

    def __enter__(self) -> "TerminalSession":
        global _active_session
        if _active_session is not None:
            raise RuntimeError("A selection session is already active")

        try:
            if self.stdin_fd is None:
                self.stdin_fd = sys.stdin.fileno()
            interactive = os.isatty(self.stdin_fd)
        except (OSError, ValueError, AttributeError) as exc:
            raise TerminalUnavailableError(f"Standard input is not a terminal: {exc}") from exc
        if not interactive or not self.console.is_terminal:
            raise TerminalUnavailableError("Interactive selection requires a terminal")

        try:
            self._saved_tty_state = termios.tcgetattr(self.stdin_fd)
            termios.tcsetattr(self.stdin_fd, termios.TCSANOW, _raw_attributes(self._saved_tty_state))
        except termios.error as exc:
            raise TerminalUnavailableError(f"Cannot switch terminal to raw mode: {exc}") from exc

        _active_session = self
        self.mode = TerminalMode(raw=True, cursor_visible=True)
        try:
            self.console.show_cursor(False)
        except BaseException:
            self.close()
            raise
        self.mode = TerminalMode(raw=True, cursor_visible=False)
        logger.debug("Entered raw terminal mode on fd %s", self.stdin_fd)
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def close(self) -> None:
        global _active_session
        if _active_session is not self:
            return
        try:
            self.console.show_cursor(True)
            self.mode = TerminalMode(raw=self.mode.raw, cursor_visible=True)
        finally:
            if self._saved_tty_state is not None:
                termios.tcsetattr(self.stdin_fd, termios.TCSADRAIN, self._saved_tty_state)
            self.mode = TerminalMode(raw=False, cursor_visible=True)
            _active_session = None
            logger.debug("Restored terminal mode on fd %s", self.stdin_fd)


def _raw_attributes(saved: list) -> list:
    """Raw input, but keep output processing so newlines still return the carriage."""
    attrs = [list(value) if isinstance(value, list) else value for value in saved]
    attrs[_LFLAG] &= ~(termios.ECHO | termios.ICANON | termios.IEXTEN | termios.ISIG)
    attrs[_IFLAG] &= ~(termios.IXON | termios.ICRNL | termios.INLCR | termios.IGNCR)
    attrs[_CC][termios.VMIN] = 1
    attrs[_CC][termios.VTIME] = 0
    return attrs


__all__ = ["TerminalMode", "TerminalSession", "TerminalUnavailableError"]
