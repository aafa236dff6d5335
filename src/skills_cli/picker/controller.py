"""Single- and multi-select controllers driving the picker engine."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Callable, ContextManager, Iterable, Sequence

from rich.console import Console

from skills_cli.picker.keys import KeyEvent, iter_events, read_keys
from skills_cli.picker.render import RenderFrame, paint, render_frame, render_summary
from skills_cli.picker.session import TerminalSession
from skills_cli.picker.state import Item, SelectionMode, SelectionState, apply, needs_repaint

logger = logging.getLogger(__name__)

SessionFactory = Callable[[Console], ContextManager[Any]]


class SelectionCancelled(SystemExit):
    """Raised on Ctrl-C after the terminal has been restored.

    Subclasses ``SystemExit`` with status 0: abandoning a picker ends the
    program without being an error.
    """

    def __init__(self) -> None:
        super().__init__(0)


class ControllerStatus(Enum):
    ACTIVE = "active"
    RESOLVED = "resolved"


class _SelectController:
    mode: SelectionMode

    def __init__(
        self,
        title: str,
        items: Sequence[Item],
        *,
        console: Console | None = None,
        keys: Iterable[str] | None = None,
        session_factory: SessionFactory = TerminalSession,
    ) -> None:
        if not items:
            raise ValueError("Cannot select from an empty list")
        self.title = title
        self.items = tuple(items)
        self.console = console or Console()
        self.state = SelectionState()
        self.frame = RenderFrame()
        self.status = ControllerStatus.ACTIVE
        self._keys = keys
        self._session_factory = session_factory

    def run(self) -> Any:
        """Block until the user confirms and return the resolved selection."""
        try:
            with self._session_factory(self.console):
                return self._loop()
        except SelectionCancelled:
            self.console.print("[yellow]Selection cancelled[/yellow]")
            raise

    def _loop(self) -> Any:
        self._repaint()
        keys = read_keys() if self._keys is None else self._keys
        for event in iter_events(keys):
            if event is KeyEvent.INTERRUPT:
                logger.debug("Selection interrupted: %s", self.title)
                raise SelectionCancelled()
            if event is KeyEvent.CONFIRM:
                result = self._resolve()
                self.frame = paint(self.console, render_summary(self.title, self._summary(), self.frame))
                self.status = ControllerStatus.RESOLVED
                return result
            if needs_repaint(event, self.mode):
                self.state = apply(self.state, event, len(self.items), self.mode)
                self._repaint()
        raise EOFError("Input ended before a selection was confirmed")

    def _repaint(self) -> None:
        repaint = render_frame(self.title, self.items, self.state, self.frame, self.mode)
        self.frame = paint(self.console, repaint)

    def _resolve(self) -> Any:
        raise NotImplementedError

    def _summary(self) -> str:
        raise NotImplementedError


class SingleSelectController(_SelectController):
    """Arrow keys move the pointer; Enter returns the highlighted value."""

    mode = SelectionMode.SINGLE

    def _resolve(self) -> Any:
        return self.items[self.state.cursor].value

    def _summary(self) -> str:
        return self.items[self.state.cursor].label


class MultiSelectController(_SelectController):
    """Space toggles, A toggles all, Enter returns values in list order."""

    mode = SelectionMode.MULTI

    def _chosen(self) -> list[Item]:
        return [self.items[index] for index in sorted(self.state.selected)]

    def _resolve(self) -> list[Any]:
        return [item.value for item in self._chosen()]

    def _summary(self) -> str:
        return ", ".join(item.label for item in self._chosen()) or "none"


def select_one(title: str, items: Sequence[Item], **kwargs: Any) -> Any:
    """Interactively pick exactly one item and return its value."""
    return SingleSelectController(title, items, **kwargs).run()


def select_many(title: str, items: Sequence[Item], **kwargs: Any) -> list[Any]:
    """Interactively pick zero or more items; values come back in list order."""
    return MultiSelectController(title, items, **kwargs).run()


__all__ = [
    "ControllerStatus",
    "MultiSelectController",
    "SelectionCancelled",
    "SingleSelectController",
    "select_many",
    "select_one",
]
