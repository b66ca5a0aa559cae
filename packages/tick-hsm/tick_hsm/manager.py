"""StateManager - registration and transitions for hierarchical states."""
from __future__ import annotations

import logging
from typing import Callable

from tick_hsm.paths import DEFAULT_SEPARATOR, change_level, join_path, parse_path
from tick_hsm.tree import StateNode, StateTree
from tick_hsm.types import (
    DefaultSubstateCycleError,
    ReentrantTransitionError,
    StateContext,
    StatePath,
    UnknownChildError,
)

logger = logging.getLogger(__name__)

TransitionHook = Callable[[str, str], None]


class StateManager:
    """Owns a state tree and the currently active path through it.

    States are addressed by separator-delimited paths (``"combat.attack"``).
    ``change_state`` exits the active states below the deepest ancestor
    shared with the target (deepest first), enters the target's states
    below it (shallowest first), then follows default substates down to
    a leaf. ``on_transition(old, new)`` is called once the cascade is done.

    Callbacks must not call back into the manager; doing so raises
    ReentrantTransitionError.
    """

    def __init__(
        self,
        separator: str = DEFAULT_SEPARATOR,
        on_transition: TransitionHook | None = None,
    ) -> None:
        if len(separator) != 1:
            raise ValueError("separator must be a single character")
        self._separator = separator
        self._on_transition = on_transition
        self._tree = StateTree(separator)
        self._current: StatePath = ()
        self._transitioning = False

    @property
    def tree(self) -> StateTree:
        return self._tree

    @property
    def separator(self) -> str:
        return self._separator

    @property
    def current_path(self) -> StatePath:
        return self._current

    @property
    def transitioning(self) -> bool:
        return self._transitioning

    # --- Registration ---

    def register_state(self, path: str, context: StateContext | None = None) -> None:
        """Register a state. Every ancestor in ``path`` must already exist."""
        self._check_not_transitioning("register_state")
        segments = parse_path(path, self._separator)
        if not segments:
            raise ValueError("Cannot register a state with an empty path")
        parent = self._tree.resolve(segments[:-1])
        self._tree.add(parent, segments[-1], context)
        logger.debug("registered state %r", path)

    # --- Transitions ---

    def change_state(self, path: str, force_all: bool = False) -> None:
        """Transition to ``path``. The empty string exits every active state.

        With ``force_all`` every state on the old path is exited and every
        state on the new path entered, even those the two paths share.
        Errors propagate without rollback.
        """
        self._check_not_transitioning("change_state")
        self._transitioning = True
        try:
            old = self.current_state()
            self._transition(parse_path(path, self._separator), force_all)
            new = self.current_state()
            logger.debug("transition %r -> %r", old, new)
            if self._on_transition is not None:
                self._on_transition(old, new)
        finally:
            self._transitioning = False

    def _transition(self, new_path: StatePath, force_all: bool) -> None:
        level = change_level(self._current, new_path)

        exiting = [
            node
            for i, node in enumerate(self._tree.walk(self._current))
            if i >= level or force_all
        ]
        for node in reversed(exiting):
            logger.debug("exit %r", node.name)
            node.exit()

        node = self._tree.root
        try:
            for i, node in enumerate(self._tree.walk(new_path)):
                if i >= level or force_all:
                    logger.debug("enter %r", node.name)
                    node.enter()
        except UnknownChildError as exc:
            logger.warning(
                "transition to %r aborted: %s",
                join_path(new_path, self._separator),
                exc,
            )
            raise

        self._current = new_path
        self._cascade(node)

    def _cascade(self, node: StateNode) -> None:
        seen = {node.id}
        child = self._tree.default_child(node)
        while child is not None:
            if child.id in seen:
                raise DefaultSubstateCycleError(
                    child.name, f"Default substate cycle at {child.name!r}"
                )
            seen.add(child.id)
            logger.debug("enter default substate %r", child.name)
            child.enter()
            self._current = self._current + (child.name,)
            child = self._tree.default_child(child)

    # --- Queries ---

    def current_state(self) -> str:
        """The active path as a string, ``""`` when no state is active."""
        return join_path(self._current, self._separator)

    def has_state(self, path: str) -> bool:
        segments = parse_path(path, self._separator)
        if not segments:
            return False
        try:
            self._tree.resolve(segments)
        except UnknownChildError:
            return False
        return True

    def states(self) -> list[str]:
        """All registered state paths, depth-first in registration order."""
        return [join_path(p, self._separator) for p in self._tree.paths()]

    def is_in(self, path: str) -> bool:
        """True if ``path`` is the active state or one of its ancestors."""
        segments = parse_path(path, self._separator)
        return self._current[: len(segments)] == segments

    def _check_not_transitioning(self, operation: str) -> None:
        if self._transitioning:
            raise ReentrantTransitionError(
                f"Cannot call {operation} while a transition is in progress"
            )
