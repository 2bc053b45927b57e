"""Single and multi node selection."""

from __future__ import annotations

from typing import Iterable, Sequence

from pagebuilder.addressing import collect_ids
from pagebuilder.schemas import Node


class Selection:
    """Ordered set of selected node ids; the first one is the primary."""

    def __init__(self, ids: Iterable[str] = ()) -> None:
        self._ids: list[str] = []
        for node_id in ids:
            if node_id not in self._ids:
                self._ids.append(node_id)

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._ids

    def __iter__(self):
        return iter(self._ids)

    def __len__(self) -> int:
        return len(self._ids)

    def __repr__(self) -> str:
        return f"Selection({self._ids!r})"

    @property
    def ids(self) -> list[str]:
        return list(self._ids)

    @property
    def primary(self) -> str | None:
        return self._ids[0] if self._ids else None

    def select(self, node_id: str, additive: bool = False) -> None:
        """Select ``node_id``.

        Non-additive selection replaces everything. Additive selection toggles
        ``node_id``, appending it when newly added.
        """
        if not additive:
            self._ids = [node_id]
        elif node_id in self._ids:
            self._ids.remove(node_id)
        else:
            self._ids.append(node_id)

    def replace(self, ids: Iterable[str]) -> None:
        self._ids = []
        for node_id in ids:
            if node_id not in self._ids:
                self._ids.append(node_id)

    def discard(self, node_id: str) -> None:
        if node_id in self._ids:
            self._ids.remove(node_id)

    def clear(self) -> None:
        self._ids = []

    def prune(self, tree: Sequence[Node]) -> None:
        """Drop ids that no longer exist in ``tree``."""
        present = set(collect_ids(tree))
        self._ids = [node_id for node_id in self._ids if node_id in present]
