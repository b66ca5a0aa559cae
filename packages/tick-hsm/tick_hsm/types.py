"""State context, callback aliases, and errors for the state manager."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

StateCallback = Callable[[str], None]
StatePath = tuple[str, ...]


@dataclass(frozen=True)
class StateContext:
    """Optional per-state capabilities.

    ``enter`` and ``exit`` are called with the state's own name.
    ``default_substate`` names the child entered automatically whenever
    this state is entered without a deeper explicit target.
    """

    enter: StateCallback | None = None
    exit: StateCallback | None = None
    default_substate: str | None = None


class DuplicateNameError(KeyError):
    """Raised when registering a state whose name already exists among its siblings."""

    def __init__(self, name: str, message: str) -> None:
        self.name = name
        super().__init__(message)


class UnknownChildError(KeyError):
    """Raised when a path segment does not resolve to a registered state."""

    def __init__(self, name: str, parent: str, message: str) -> None:
        self.name = name
        self.parent = parent
        super().__init__(message)


class ReentrantTransitionError(RuntimeError):
    """Raised when the manager is used from inside one of its own callbacks."""


class DefaultSubstateCycleError(Exception):
    """Raised when the default-substate cascade revisits a state."""

    def __init__(self, name: str, message: str) -> None:
        self.name = name
        super().__init__(message)
