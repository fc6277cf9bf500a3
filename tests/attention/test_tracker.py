"""
Tests for attention.tracker

Test Coverage:
- advance(): first-time and repeat notices, forgetting resolved overflow
- OverflowAttentionTracker: callback delivery and reset
"""

import pytest

from vertical_script.attention import (
    Notice,
    OverflowAttentionState,
    OverflowAttentionTracker,
    advance,
)


class TestAdvance:
    """Tests for the pure transition function."""

    def test_advance_when_walkthrough_then_once_again_then_forgotten(self):
        # Update 1: record 2 starts overflowing while focused
        u1 = advance(OverflowAttentionState(), {2}, 2)
        assert u1.state.warned_once == {2}
        assert u1.notices == (Notice.NEW_OVERFLOW,)
        assert u1.attention == frozenset()

        # Update 2: focus moves from record 2 to record 5
        u2 = advance(u1.state, {2}, 5)
        assert u2.state.warned_again == {2}
        assert u2.attention == {2}
        assert u2.notices == (Notice.STILL_UNRESOLVED,)
        assert u2.still_unresolved == {2}

        # Update 3: overflow resolved
        u3 = advance(u2.state, set(), 5)
        assert u3.state.warned_once == frozenset()
        assert u3.state.warned_again == frozenset()
        assert u3.attention == frozenset()
        assert u3.notices == ()

    def test_advance_when_several_new_overflows_then_single_batched_notice(self):
        update = advance(OverflowAttentionState(), {1, 4, 7}, None)

        assert update.notices == (Notice.NEW_OVERFLOW,)
        assert update.new_overflow == {1, 4, 7}

    def test_advance_when_overflow_already_warned_then_no_new_notice(self):
        state = advance(OverflowAttentionState(), {3}, 3).state

        update = advance(state, {3}, 3)

        assert update.notices == ()

    def test_advance_when_one_new_among_known_then_only_new_reported(self):
        state = advance(OverflowAttentionState(), {3}, None).state

        update = advance(state, {3, 8}, None)

        assert update.notices == (Notice.NEW_OVERFLOW,)
        assert update.new_overflow == {8}
        assert update.state.warned_once == {3, 8}

    def test_advance_when_focus_unchanged_then_no_repeat_notice(self):
        state = advance(OverflowAttentionState(), {2}, 2).state

        update = advance(state, {2}, 2)

        assert Notice.STILL_UNRESOLVED not in update.notices
        assert update.attention == frozenset()

    def test_advance_when_focus_leaves_again_then_repeat_notice_only_once(self):
        state = advance(OverflowAttentionState(), {2}, 2).state
        state = advance(state, {2}, 5).state
        state = advance(state, {2}, 2).state

        update = advance(state, {2}, 6)

        assert update.notices == ()
        assert update.attention == {2}

    def test_advance_when_previous_focus_not_overflowing_then_no_repeat_notice(self):
        state = advance(OverflowAttentionState(), {2}, 1).state

        update = advance(state, {2}, 3)

        assert update.notices == ()

    def test_advance_when_no_previous_focus_then_no_repeat_notice(self):
        state = advance(OverflowAttentionState(), {2}, None).state

        update = advance(state, {2}, 2)

        assert update.notices == ()

    def test_advance_when_focus_cleared_then_counts_as_change(self):
        state = advance(OverflowAttentionState(), {2}, 2).state

        update = advance(state, {2}, None)

        assert update.notices == (Notice.STILL_UNRESOLVED,)
        assert update.state.last_focused_index is None

    def test_advance_when_new_and_unresolved_same_update_then_both_notices(self):
        state = advance(OverflowAttentionState(), {2}, 2).state

        update = advance(state, {2, 9}, 9)

        assert update.notices == (Notice.NEW_OVERFLOW, Notice.STILL_UNRESOLVED)

    def test_advance_when_previous_focus_resolved_while_leaving_then_no_notice(self):
        state = advance(OverflowAttentionState(), {2}, 2).state

        update = advance(state, set(), 5)

        assert update.notices == ()
        assert update.attention == frozenset()

    def test_advance_when_overflow_returns_then_announced_again(self):
        state = advance(OverflowAttentionState(), {2}, 2).state
        state = advance(state, {2}, 5).state
        state = advance(state, set(), 5).state

        update = advance(state, {2}, 5)

        assert update.notices == (Notice.NEW_OVERFLOW,)
        assert update.state.warned_again == frozenset()

    def test_advance_when_called_then_input_state_unchanged(self):
        state = OverflowAttentionState()

        advance(state, {1}, 1)

        assert state.is_empty


class TestOverflowAttentionTracker:
    """Tests for the callback-driven tracker."""

    @pytest.fixture
    def events(self):
        return []

    @pytest.fixture
    def tracker(self, events):
        return OverflowAttentionTracker(
            on_new_overflow=lambda idx: events.append(("new", idx)),
            on_still_unresolved=lambda idx: events.append(("again", idx)),
            on_attention_changed=lambda idx: events.append(("attention", idx)),
        )

    def test_update_when_new_overflow_then_callbacks_in_order(self, tracker, events):
        tracker.update({2}, 2)

        assert events == [("new", frozenset({2})), ("attention", frozenset())]

    def test_update_when_focus_moves_then_still_unresolved_and_attention(self, tracker, events):
        tracker.update({2}, 2)
        events.clear()

        tracker.update({2}, 5)

        assert events == [("again", frozenset({2})), ("attention", frozenset({2}))]
        assert tracker.attention == {2}

    def test_update_when_nothing_changes_then_attention_still_emitted(self, tracker, events):
        tracker.update(set(), None)
        tracker.update(set(), None)

        assert events == [("attention", frozenset()), ("attention", frozenset())]

    def test_reset_when_called_then_state_cleared_and_empty_attention_emitted(self, tracker, events):
        tracker.update({2}, 2)
        tracker.update({2}, 5)
        events.clear()

        tracker.reset()

        assert tracker.state.is_empty
        assert events == [("attention", frozenset())]

    def test_update_when_no_callbacks_then_returns_update(self):
        tracker = OverflowAttentionTracker()

        update = tracker.update({1}, None)

        assert update.notices == (Notice.NEW_OVERFLOW,)
        assert tracker.state.warned_once == {1}
