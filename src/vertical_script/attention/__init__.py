"""
Module: attention

Purpose:
    Overflow attention tracking across layout passes, and the layout
    status contract the tracker consumes.

Key Functions:
    - advance(): Pure tracker transition
    - build_status(): Layout status from a DocumentLayout

Key Classes:
    - OverflowAttentionState / AttentionUpdate / Notice
    - OverflowAttentionTracker: Callback-driven tracker
    - LayoutStatus
"""

from .tracker import (
    Notice,
    OverflowAttentionState,
    AttentionUpdate,
    OverflowAttentionTracker,
    advance,
)
from .status import LayoutStatus, build_status

__all__ = [
    "Notice",
    "OverflowAttentionState",
    "AttentionUpdate",
    "OverflowAttentionTracker",
    "advance",
    "LayoutStatus",
    "build_status",
]
