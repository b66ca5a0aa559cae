"""tick-hsm - Hierarchical state manager with enter/exit callbacks and default substates."""
from __future__ import annotations

from tick_hsm.manager import StateManager
from tick_hsm.paths import change_level, join_path, parse_path
from tick_hsm.tree import StateNode, StateTree
from tick_hsm.types import (
    DefaultSubstateCycleError,
    DuplicateNameError,
    ReentrantTransitionError,
    StateContext,
    UnknownChildError,
)

__all__ = [
    "StateManager",
    "StateContext",
    "StateNode",
    "StateTree",
    "DuplicateNameError",
    "UnknownChildError",
    "ReentrantTransitionError",
    "DefaultSubstateCycleError",
    "parse_path",
    "join_path",
    "change_level",
]
