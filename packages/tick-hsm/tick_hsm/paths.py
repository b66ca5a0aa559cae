"""Path string parsing and comparison."""
from __future__ import annotations

from typing import Sequence

from tick_hsm.types import StatePath

DEFAULT_SEPARATOR = "."


def parse_path(text: str, separator: str = DEFAULT_SEPARATOR) -> StatePath:
    """Split ``"a.b.c"`` into ``("a", "b", "c")``. The empty string is ``()``."""
    if text == "":
        return ()
    return tuple(text.split(separator))


def join_path(path: Sequence[str], separator: str = DEFAULT_SEPARATOR) -> str:
    return separator.join(path)


def change_level(old: Sequence[str], new: Sequence[str]) -> int:
    """Length of the longest common prefix of two paths.

    From ``a.b`` to ``a.c.d`` the change level is 1: only ``a`` is shared.
    """
    level = 0
    limit = min(len(old), len(new))
    while level < limit and old[level] == new[level]:
        level += 1
    return level
