"""StateNode and the StateTree arena."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generator, Sequence

from tick_hsm.paths import DEFAULT_SEPARATOR
from tick_hsm.types import (
    DuplicateNameError,
    StateContext,
    StatePath,
    UnknownChildError,
)

ROOT_NAME = "__root__"


@dataclass
class StateNode:
    """A single state. Children are referenced by arena id, not by object."""

    id: int
    name: str
    context: StateContext | None = None
    children: dict[str, int] = field(default_factory=dict)

    def add_child(self, node: StateNode) -> None:
        """Record ``node`` as a child. Raises DuplicateNameError on collision."""
        if node.name in self.children:
            raise DuplicateNameError(
                node.name, f"State {self.name!r} already has a substate {node.name!r}"
            )
        self.children[node.name] = node.id

    def child_id(self, name: str) -> int:
        """Look up a child id. Raises UnknownChildError if absent."""
        if name not in self.children:
            raise UnknownChildError(
                name, self.name, f"State {self.name!r} has no substate {name!r}"
            )
        return self.children[name]

    def default_child_id(self) -> int | None:
        """Id of the default substate, or None if unset or not registered."""
        if self.context is None or not self.context.default_substate:
            return None
        return self.children.get(self.context.default_substate)

    def enter(self) -> None:
        if self.context is not None and self.context.enter is not None:
            self.context.enter(self.name)

    def exit(self) -> None:
        if self.context is not None and self.context.exit is not None:
            self.context.exit(self.name)


class StateTree:
    """Append-only arena of StateNodes. Node 0 is the unnamed root."""

    def __init__(self, separator: str = DEFAULT_SEPARATOR) -> None:
        self._separator = separator
        self._nodes: list[StateNode] = [StateNode(id=0, name=ROOT_NAME)]

    @property
    def root(self) -> StateNode:
        return self._nodes[0]

    def __len__(self) -> int:
        return len(self._nodes) - 1

    def get(self, node_id: int) -> StateNode:
        return self._nodes[node_id]

    def add(
        self, parent: StateNode, name: str, context: StateContext | None = None
    ) -> StateNode:
        """Create a node named ``name`` under ``parent`` and return it."""
        if not name:
            raise ValueError("State name must be non-empty")
        if self._separator in name:
            raise ValueError(
                f"State name {name!r} must not contain {self._separator!r}"
            )
        node = StateNode(id=len(self._nodes), name=name, context=context)
        # Attach first so a duplicate leaves the arena untouched.
        parent.add_child(node)
        self._nodes.append(node)
        return node

    def child(self, node: StateNode, name: str) -> StateNode:
        return self._nodes[node.child_id(name)]

    def default_child(self, node: StateNode) -> StateNode | None:
        child_id = node.default_child_id()
        return None if child_id is None else self._nodes[child_id]

    def walk(self, path: Sequence[str]) -> Generator[StateNode, None, None]:
        """Yield each node along ``path``, root excluded.

        Raises UnknownChildError at the first unresolvable segment, after
        every earlier node has been yielded.
        """
        node = self.root
        for name in path:
            node = self.child(node, name)
            yield node

    def resolve(self, path: Sequence[str]) -> StateNode:
        """Return the node at the end of ``path`` (the root for an empty path)."""
        node = self.root
        for node in self.walk(path):
            pass
        return node

    def paths(self) -> list[StatePath]:
        """All registered paths, depth-first in registration order."""
        result: list[StatePath] = []
        stack: list[tuple[StatePath, StateNode]] = [((), self.root)]
        while stack:
            prefix, node = stack.pop()
            if node is not self.root:
                result.append(prefix)
            for name, child_id in reversed(list(node.children.items())):
                stack.append((prefix + (name,), self._nodes[child_id]))
        return result
