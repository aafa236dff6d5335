"""Selection state transition tests."""

from __future__ import annotations

import random

import pytest

from skills_cli.picker.keys import KeyEvent
from skills_cli.picker.state import Item, SelectionMode, SelectionState, apply, needs_repaint

MULTI = SelectionMode.MULTI
SINGLE = SelectionMode.SINGLE


class TestCursorMovement:
    @pytest.mark.parametrize("item_count", [1, 2, 3, 7])
    @pytest.mark.parametrize("seed", range(5))
    def test_cursor_stays_in_bounds(self, item_count: int, seed: int) -> None:
        rng = random.Random(seed)
        state = SelectionState()
        for _ in range(200):
            event = rng.choice([KeyEvent.UP, KeyEvent.DOWN])
            state = apply(state, event, item_count, SINGLE)
            assert 0 <= state.cursor < item_count

    def test_up_from_top_wraps_to_bottom(self) -> None:
        assert apply(SelectionState(cursor=0), KeyEvent.UP, 3, SINGLE).cursor == 2

    def test_down_from_bottom_wraps_to_top(self) -> None:
        assert apply(SelectionState(cursor=2), KeyEvent.DOWN, 3, SINGLE).cursor == 0

    def test_single_item_list_keeps_cursor_at_zero(self) -> None:
        state = SelectionState()
        assert apply(state, KeyEvent.UP, 1, SINGLE).cursor == 0
        assert apply(state, KeyEvent.DOWN, 1, SINGLE).cursor == 0

    def test_movement_keeps_selection(self) -> None:
        state = SelectionState(cursor=0, selected=frozenset({0, 2}))
        assert apply(state, KeyEvent.DOWN, 3, MULTI).selected == frozenset({0, 2})


class TestToggles:
    def test_toggle_one_is_an_involution(self) -> None:
        start = SelectionState(cursor=1, selected=frozenset({0}))
        once = apply(start, KeyEvent.TOGGLE_ONE, 3, MULTI)
        twice = apply(once, KeyEvent.TOGGLE_ONE, 3, MULTI)

        assert once.selected == frozenset({0, 1})
        assert twice == start

    @pytest.mark.parametrize(
        "selected",
        [frozenset(), frozenset({1}), frozenset({0, 2})],
    )
    def test_toggle_all_saturates_from_partial_or_empty(self, selected: frozenset[int]) -> None:
        state = apply(SelectionState(selected=selected), KeyEvent.TOGGLE_ALL, 3, MULTI)
        assert state.selected == frozenset({0, 1, 2})

    def test_toggle_all_from_all_clears(self) -> None:
        state = apply(SelectionState(selected=frozenset({0, 1, 2})), KeyEvent.TOGGLE_ALL, 3, MULTI)
        assert state.selected == frozenset()

    def test_toggles_ignored_in_single_mode(self) -> None:
        state = SelectionState(cursor=1)
        assert apply(state, KeyEvent.TOGGLE_ONE, 3, SINGLE) == state
        assert apply(state, KeyEvent.TOGGLE_ALL, 3, SINGLE) == state


class TestTerminalAndUnknownEvents:
    @pytest.mark.parametrize("event", [KeyEvent.CONFIRM, KeyEvent.INTERRUPT, KeyEvent.UNKNOWN])
    def test_state_unchanged(self, event: KeyEvent) -> None:
        state = SelectionState(cursor=2, selected=frozenset({1}))
        assert apply(state, event, 3, MULTI) == state

    def test_rejects_empty_list(self) -> None:
        with pytest.raises(ValueError):
            apply(SelectionState(), KeyEvent.DOWN, 0, SINGLE)

    def test_transitions_are_deterministic(self) -> None:
        state = SelectionState(cursor=1, selected=frozenset({2}))
        for event in KeyEvent:
            assert apply(state, event, 4, MULTI) == apply(state, event, 4, MULTI)


class TestNeedsRepaint:
    def test_movement_always_repaints(self) -> None:
        assert needs_repaint(KeyEvent.UP, SINGLE)
        assert needs_repaint(KeyEvent.DOWN, MULTI)

    def test_toggles_repaint_only_in_multi_mode(self) -> None:
        assert needs_repaint(KeyEvent.TOGGLE_ONE, MULTI)
        assert needs_repaint(KeyEvent.TOGGLE_ALL, MULTI)
        assert not needs_repaint(KeyEvent.TOGGLE_ONE, SINGLE)
        assert not needs_repaint(KeyEvent.TOGGLE_ALL, SINGLE)

    def test_unknown_never_repaints(self) -> None:
        assert not needs_repaint(KeyEvent.UNKNOWN, MULTI)


def test_item_requires_label() -> None:
    with pytest.raises(ValueError):
        Item(label="", value=1)
