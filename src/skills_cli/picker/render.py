"""Incremental repaint of the picker list.

A frame is drawn below the current cursor position. Every following frame
moves the cursor back up by the number of lines the previous frame printed
and rewrites them one by one, clearing each line first. The screen is never
cleared as a whole, so earlier terminal history stays intact.

``render_frame`` and ``render_summary`` are pure: they only describe the
repaint. ``paint`` is the single place that writes to the console.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from rich.console import Console
from rich.control import Control, ControlType
from rich.markup import escape
from rich.text import Text

from skills_cli.picker.state import Item, SelectionMode, SelectionState

HINT_BUDGET = 80
ELLIPSIS = "…"

POINTER = "❯"
CHECKED = "◉"
UNCHECKED = "◯"

SINGLE_HELP = "(↑↓ move, Enter confirm)"
MULTI_HELP = "(↑↓ move, Space toggle, A all, Enter confirm)"

_ERASE_LINE = Control((ControlType.ERASE_IN_LINE, 2))


@dataclass(frozen=True)
class RenderFrame:
    """Number of terminal lines occupied by the last paint."""

    line_count: int = 0


@dataclass(frozen=True)
class Repaint:
    """Everything ``paint`` needs to redraw the picker.

    Attributes:
        cursor_up: Rows to move up before writing (0 on the first frame).
        lines: Lines to write, each cleared before it is written.
        rewind: Rows to move back up after writing.
        frame: Frame to pass to the next render call.
    """

    cursor_up: int
    lines: tuple[Text, ...]
    rewind: int
    frame: RenderFrame


def _one_line(text: str) -> str:
    return " ".join(text.split())


def truncate_hint(hint: str, budget: int = HINT_BUDGET) -> str:
    """Flatten ``hint`` to a single line and cap it at ``budget`` characters."""
    hint = _one_line(hint)
    if len(hint) > budget:
        return hint[:budget] + ELLIPSIS
    return hint


def _header(title: str, state: SelectionState, mode: SelectionMode) -> Text:
    if mode is SelectionMode.MULTI:
        count = len(state.selected)
        count_text = f" [dim]([green]{count}[/green] selected)[/dim]" if count else ""
        help_text = MULTI_HELP
    else:
        count_text = ""
        help_text = SINGLE_HELP
    return Text.from_markup(
        f"[cyan]?[/cyan] [bold]{escape(_one_line(title))}[/bold]{count_text} [dim]{escape(help_text)}[/dim]"
    )


def _item_line(index: int, item: Item, state: SelectionState, mode: SelectionMode) -> Text:
    active = index == state.cursor
    pointer = f"[cyan]{POINTER}[/cyan]" if active else " "
    label = escape(_one_line(item.label))

    if mode is SelectionMode.MULTI:
        box = f"[green]{CHECKED}[/green] " if index in state.selected else f"[dim]{UNCHECKED}[/dim] "
        label = f"[bold]{label}[/bold]" if active else label
    else:
        box = ""
        label = f"[cyan bold]{label}[/cyan bold]" if active else label

    hint = f"  [dim]{escape(truncate_hint(item.hint))}[/dim]" if item.hint else ""
    return Text.from_markup(f"  {pointer} {box}{label}{hint}")


def render_frame(
    title: str,
    items: Sequence[Item],
    state: SelectionState,
    frame: RenderFrame,
    mode: SelectionMode,
) -> Repaint:
    """Describe the repaint for ``state`` given the previous ``frame``."""
    lines = [_header(title, state, mode)]
    lines.extend(_item_line(index, item, state, mode) for index, item in enumerate(items))
    lines.append(Text(""))
    return Repaint(
        cursor_up=frame.line_count,
        lines=tuple(lines),
        rewind=0,
        frame=RenderFrame(line_count=len(lines)),
    )


def render_summary(title: str, summary: str, frame: RenderFrame) -> Repaint:
    """Describe the final repaint that collapses the list to one summary line.

    The summary replaces the first line of the previous frame, the remaining
    lines are blanked, and the cursor is rewound to just below the summary.
    """
    line = Text.from_markup(
        f"[green]✔[/green] [bold]{escape(_one_line(title))}[/bold] [cyan]{escape(_one_line(summary))}[/cyan]"
    )
    leftover = max(frame.line_count - 1, 0)
    return Repaint(
        cursor_up=frame.line_count,
        lines=(line,) + tuple(Text("") for _ in range(leftover)),
        rewind=leftover,
        frame=RenderFrame(),
    )


def paint(console: Console, repaint: Repaint) -> RenderFrame:
    """Write ``repaint`` to ``console`` and return the frame it leaves behind."""
    with console:
        if repaint.cursor_up:
            console.control(Control.move(y=-repaint.cursor_up))
        for line in repaint.lines:
            console.control(_ERASE_LINE)
            console.print(line, no_wrap=True, overflow="ellipsis", crop=True, highlight=False)
        if repaint.rewind:
            console.control(Control.move(y=-repaint.rewind))
    return repaint.frame


__all__ = [
    "HINT_BUDGET",
    "RenderFrame",
    "Repaint",
    "paint",
    "render_frame",
    "render_summary",
    "truncate_hint",
]
