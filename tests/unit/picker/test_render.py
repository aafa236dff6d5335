"""Incremental repaint tests."""

from __future__ import annotations

import io

from rich.console import Console

from skills_cli.picker.render import (
    ELLIPSIS,
    HINT_BUDGET,
    RenderFrame,
    paint,
    render_frame,
    render_summary,
    truncate_hint,
)
from skills_cli.core.skills import extract_description
from skills_cli.picker.state import Item, SelectionMode, SelectionState

ERASE = "\x1b[2K"
ITEMS = [Item("A", "a"), Item("B", "b", hint="second"), Item("C", "c")]


def _plain(repaint) -> list[str]:
    return [line.plain for line in repaint.lines]


class TestRenderFrame:
    def test_first_frame_has_no_cursor_movement(self) -> None:
        repaint = render_frame("Pick", ITEMS, SelectionState(), RenderFrame(), SelectionMode.SINGLE)

        assert repaint.cursor_up == 0
        assert repaint.rewind == 0
        # header + one line per item + trailing blank line
        assert repaint.frame.line_count == len(ITEMS) + 2
        assert len(repaint.lines) == repaint.frame.line_count

    def test_next_frame_moves_up_by_previous_line_count(self) -> None:
        first = render_frame("Pick", ITEMS, SelectionState(), RenderFrame(), SelectionMode.SINGLE)
        second = render_frame("Pick", ITEMS, SelectionState(cursor=1), first.frame, SelectionMode.SINGLE)

        assert second.cursor_up == first.frame.line_count
        assert second.frame.line_count == first.frame.line_count

    def test_single_select_lines(self) -> None:
        repaint = render_frame("Pick", ITEMS, SelectionState(cursor=1), RenderFrame(), SelectionMode.SINGLE)

        assert _plain(repaint) == [
            "? Pick (↑↓ move, Enter confirm)",
            "    A",
            "  ❯ B  second",
            "    C",
            "",
        ]

    def test_multi_select_lines(self) -> None:
        state = SelectionState(cursor=0, selected=frozenset({0, 2}))
        repaint = render_frame("Pick", ITEMS, state, RenderFrame(), SelectionMode.MULTI)

        assert _plain(repaint) == [
            "? Pick (2 selected) (↑↓ move, Space toggle, A all, Enter confirm)",
            "  ❯ ◉ A",
            "    ◯ B  second",
            "    ◉ C",
            "",
        ]

    def test_multi_header_omits_count_when_nothing_selected(self) -> None:
        repaint = render_frame("Pick", ITEMS, SelectionState(), RenderFrame(), SelectionMode.MULTI)
        assert "selected" not in repaint.lines[0].plain

    def test_markup_in_labels_is_shown_literally(self) -> None:
        items = [Item("[bold]x[/bold]", 1, hint="[red]y")]
        repaint = render_frame("T [z]", items, SelectionState(), RenderFrame(), SelectionMode.SINGLE)

        assert repaint.lines[0].plain.startswith("? T [z]")
        assert repaint.lines[1].plain == "  ❯ [bold]x[/bold]  [red]y"

    def test_long_hint_is_truncated(self) -> None:
        items = [Item("A", 1, hint="x" * (HINT_BUDGET + 10))]
        repaint = render_frame("Pick", items, SelectionState(), RenderFrame(), SelectionMode.SINGLE)

        assert repaint.lines[1].plain.endswith("x" * HINT_BUDGET + ELLIPSIS)


class TestTruncateHint:
    def test_short_hint_unchanged(self) -> None:
        assert truncate_hint("short") == "short"

    def test_hint_at_budget_unchanged(self) -> None:
        hint = "y" * HINT_BUDGET
        assert truncate_hint(hint) == hint

    def test_hint_over_budget_gets_ellipsis(self) -> None:
        assert truncate_hint("abcdef", budget=3) == "abc" + ELLIPSIS

    def test_whitespace_is_collapsed_before_budget(self) -> None:
        assert truncate_hint("one\n  two\tthree\n") == "one two three"
        assert truncate_hint("ab\ncd", budget=4) == "ab c" + ELLIPSIS


class TestRenderSummary:
    def test_summary_covers_previous_frame_exactly(self) -> None:
        repaint = render_summary("Pick", "B", RenderFrame(line_count=5))

        assert repaint.cursor_up == 5
        assert len(repaint.lines) == 5
        assert repaint.lines[0].plain == "✔ Pick B"
        assert all(line.plain == "" for line in repaint.lines[1:])
        assert repaint.rewind == 4

    def test_summary_without_previous_frame(self) -> None:
        repaint = render_summary("Pick", "B", RenderFrame())

        assert repaint.cursor_up == 0
        assert len(repaint.lines) == 1
        assert repaint.rewind == 0


class TestPaint:
    def test_first_paint_clears_each_line_without_moving_up(self, console: Console) -> None:
        repaint = render_frame("Pick", ITEMS, SelectionState(), RenderFrame(), SelectionMode.SINGLE)

        frame = paint(console, repaint)
        output = console.file.getvalue()

        assert frame == repaint.frame
        assert output.count(ERASE) == 5
        assert output.count("\n") == 5
        assert "\x1b[2J" not in output

    def test_repaint_moves_up_over_previous_frame(self, console: Console) -> None:
        frame = paint(console, render_frame("Pick", ITEMS, SelectionState(), RenderFrame(), SelectionMode.SINGLE))
        console.file.truncate(0)
        console.file.seek(0)

        paint(console, render_frame("Pick", ITEMS, SelectionState(cursor=2), frame, SelectionMode.SINGLE))
        output = console.file.getvalue()

        assert output.startswith("\x1b[5A")
        assert output.count(ERASE) == 5
        assert "❯ C" in output

    def test_summary_paint_rewinds_below_summary_line(self, console: Console) -> None:
        frame = paint(console, render_frame("Pick", ITEMS, SelectionState(), RenderFrame(), SelectionMode.SINGLE))
        console.file.truncate(0)
        console.file.seek(0)

        leftover = paint(console, render_summary("Pick", "A", frame))
        output = console.file.getvalue()

        assert leftover == RenderFrame()
        assert output.startswith("\x1b[5A")
        assert output.count(ERASE) == 5
        assert output.count("\n") == 5
        assert output.endswith("\x1b[4A")
        assert "✔ Pick A" in output

    def test_long_lines_never_wrap(self) -> None:
        narrow = Console(file=io.StringIO(), force_terminal=True, width=20, color_system=None)
        items = [Item("a-very-long-label-that-overflows", 1, hint="and a hint")]

        paint(narrow, render_frame("Pick", items, SelectionState(), RenderFrame(), SelectionMode.SINGLE))

        assert narrow.file.getvalue().count("\n") == 3

    def test_multiline_hint_occupies_one_row(self, console: Console) -> None:
        content = "---\nname: x\ndescription: |\n  First line.\n  Second line.\n---\n# x\n"
        items = [Item("x", 1, hint=extract_description(content)), Item("multi\nline", 2)]

        frame = paint(console, render_frame("Pick", items, SelectionState(), RenderFrame(), SelectionMode.MULTI))
        output = console.file.getvalue()

        assert output.count("\n") == frame.line_count == 4
        assert "First line. Second line." in output
        assert "multi line" in output
