"""
Module: attention.tracker

Purpose:
    Decide, across repeated layout passes, when an overflowing record is
    worth interrupting the user about. A record is announced once when it
    first overflows, and once more if the user moves focus away from it
    while it is still unresolved. Resolving an overflow forgets its history.

Key Functions:
    - advance(): Pure transition over OverflowAttentionState

Key Classes:
    - OverflowAttentionState: Immutable bookkeeping between passes
    - AttentionUpdate: Result of one transition
    - OverflowAttentionTracker: Stateful wrapper delivering notifications

Dependencies:
    - dataclasses (std), enum (std)

Used By:
    - controller.EditorSession
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, FrozenSet, Iterable, Optional, Tuple

logger = logging.getLogger(__name__)


class Notice(str, Enum):
    """Notification kinds raised by the tracker."""

    NEW_OVERFLOW = "new_overflow"
    STILL_UNRESOLVED = "still_unresolved"


@dataclass(frozen=True)
class OverflowAttentionState:
    """
    Warning bookkeeping kept between layout passes (immutable).

    Attributes:
        warned_once: Overflowing records already announced
        warned_again: Records given the second "still unresolved" notice
        attention: Records to visually flag
        last_focused_index: Focused record at the previous update
    """

    warned_once: FrozenSet[int] = frozenset()
    warned_again: FrozenSet[int] = frozenset()
    attention: FrozenSet[int] = frozenset()
    last_focused_index: Optional[int] = None

    @property
    def is_empty(self) -> bool:
        return not (self.warned_once or self.warned_again or self.attention) \
            and self.last_focused_index is None


@dataclass(frozen=True)
class AttentionUpdate:
    """
    Outcome of one tracker transition.

    Attributes:
        state: State to carry into the next update
        notices: Notifications to raise, in order (at most one of each kind)
        new_overflow: Records announced for the first time by this update
        still_unresolved: Records given the second notice by this update
    """

    state: OverflowAttentionState
    notices: Tuple[Notice, ...] = ()
    new_overflow: FrozenSet[int] = field(default_factory=frozenset)
    still_unresolved: FrozenSet[int] = field(default_factory=frozenset)

    @property
    def attention(self) -> FrozenSet[int]:
        """Records to flag for the highlight consumer."""
        return self.state.attention


def advance(
    state: OverflowAttentionState,
    overflow_indices: Iterable[int],
    focused_index: Optional[int],
) -> AttentionUpdate:
    """
    Apply one layout result to the attention state.

    Steps:
    1. Forget any record no longer overflowing.
    2. Announce records overflowing for the first time, batched into a
       single NEW_OVERFLOW notice.
    3. When focus has moved and the previously focused record still
       overflows and has not had its second notice, flag it for
       attention and raise STILL_UNRESOLVED.
    4. Remember the current focus.

    Args:
        state: State from the previous update
        overflow_indices: Records overflowing in the current layout
        focused_index: Record holding focus, or None

    Returns:
        AttentionUpdate with the next state and notices

    Example:
        >>> u = advance(OverflowAttentionState(), {2}, 2)
        >>> u.notices
        (<Notice.NEW_OVERFLOW: 'new_overflow'>,)
        >>> u = advance(u.state, {2}, 5)
        >>> sorted(u.attention)
        [2]
    """
    overflow = frozenset(overflow_indices)

    warned_once = state.warned_once & overflow
    warned_again = state.warned_again & overflow
    attention = state.attention & overflow

    new_overflow = overflow - warned_once
    warned_once = warned_once | new_overflow

    notices: list[Notice] = []
    if new_overflow:
        notices.append(Notice.NEW_OVERFLOW)

    still_unresolved: FrozenSet[int] = frozenset()
    previous = state.last_focused_index
    if (
        focused_index != previous
        and previous is not None
        and previous in overflow
        and previous not in warned_again
    ):
        still_unresolved = frozenset({previous})
        warned_again = warned_again | still_unresolved
        attention = attention | still_unresolved
        notices.append(Notice.STILL_UNRESOLVED)

    next_state = OverflowAttentionState(
        warned_once=warned_once,
        warned_again=warned_again,
        attention=attention,
        last_focused_index=focused_index,
    )
    return AttentionUpdate(
        state=next_state,
        notices=tuple(notices),
        new_overflow=new_overflow,
        still_unresolved=still_unresolved,
    )


IndicesCallback = Callable[[FrozenSet[int]], None]


class OverflowAttentionTracker:
    """
    Stateful tracker delivering notifications to display consumers.

    Wraps ``advance`` and calls the registered callbacks synchronously:
    ``on_new_overflow`` and ``on_still_unresolved`` receive the records
    behind each notice; ``on_attention_changed`` receives the attention
    set after every update and reset, changed or not.

    Example:
        >>> tracker = OverflowAttentionTracker(on_new_overflow=print)
        >>> _ = tracker.update({3}, None)
        frozenset({3})
    """

    def __init__(
        self,
        on_new_overflow: Optional[IndicesCallback] = None,
        on_still_unresolved: Optional[IndicesCallback] = None,
        on_attention_changed: Optional[IndicesCallback] = None,
    ) -> None:
        self._state = OverflowAttentionState()
        self._on_new_overflow = on_new_overflow
        self._on_still_unresolved = on_still_unresolved
        self._on_attention_changed = on_attention_changed

    @property
    def state(self) -> OverflowAttentionState:
        return self._state

    @property
    def attention(self) -> FrozenSet[int]:
        return self._state.attention

    def update(
        self,
        overflow_indices: Iterable[int],
        focused_index: Optional[int],
    ) -> AttentionUpdate:
        """Apply one layout result and deliver the resulting notices."""
        result = advance(self._state, overflow_indices, focused_index)
        self._state = result.state

        if Notice.NEW_OVERFLOW in result.notices:
            logger.warning(
                f"New overflow in records {sorted(result.new_overflow)}: "
                "record does not fit on one page",
                extra={"notice": Notice.NEW_OVERFLOW, "records": tuple(sorted(result.new_overflow))},
            )
            if self._on_new_overflow:
                self._on_new_overflow(result.new_overflow)

        if Notice.STILL_UNRESOLVED in result.notices:
            logger.warning(
                f"Overflow still unresolved in records {sorted(result.still_unresolved)}",
                extra={"notice": Notice.STILL_UNRESOLVED, "records": tuple(sorted(result.still_unresolved))},
            )
            if self._on_still_unresolved:
                self._on_still_unresolved(result.still_unresolved)

        self._emit_attention()
        return result

    def reset(self) -> None:
        """Forget all history, e.g. when the document is replaced."""
        self._state = OverflowAttentionState()
        logger.debug("Overflow attention state reset")
        self._emit_attention()

    def _emit_attention(self) -> None:
        if self._on_attention_changed:
            self._on_attention_changed(self._state.attention)
