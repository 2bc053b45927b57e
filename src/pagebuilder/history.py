"""Snapshot-based undo/redo history."""

from __future__ import annotations

from pagebuilder.addressing import Tree
from pagebuilder.schemas import Node


class History:
    """Undo/redo stacks of full tree snapshots around a current tree.

    ``past`` holds older states with the most recent last; ``future`` holds
    undone states with the next one to redo first.
    """

    def __init__(self, current: list[Node] | None = None) -> None:
        self.current: Tree = list(current or [])
        self.past: list[Tree] = []
        self.future: list[Tree] = []

    @property
    def can_undo(self) -> bool:
        return bool(self.past)

    @property
    def can_redo(self) -> bool:
        return bool(self.future)

    def commit(self, next_tree: list[Node]) -> None:
        """Install ``next_tree``, remembering the current tree for undo."""
        self.past.append(self.current)
        self.current = next_tree
        self.future.clear()

    def undo(self) -> bool:
        """Step back one state. Returns False when there is nothing to undo."""
        if not self.past:
            return False
        self.future.insert(0, self.current)
        self.current = self.past.pop()
        return True

    def redo(self) -> bool:
        """Step forward one state. Returns False when there is nothing to redo."""
        if not self.future:
            return False
        self.past.append(self.current)
        self.current = self.future.pop(0)
        return True

    def reset(self, tree: list[Node] | None = None) -> None:
        """Start over with ``tree`` and empty stacks (new document loaded)."""
        self.current = list(tree or [])
        self.past = []
        self.future = []
