"""Structural checks for page trees."""

from __future__ import annotations

from collections import Counter
from typing import Sequence

from pagebuilder.addressing import can_contain, child_collections, collect_ids
from pagebuilder.schemas import CollectionKind, CollectionLocation, ContentLeaf, Node, Row

_LEGACY_LEAF_COLLECTIONS = (CollectionKind.ROOT, CollectionKind.SECTION_CHILDREN)


def duplicate_ids(tree: Sequence[Node]) -> list[str]:
    """Return ids that occur more than once, in first-seen order."""
    counts = Counter(collect_ids(tree))
    return [node_id for node_id, count in counts.items() if count > 1]


def structure_problems(tree: Sequence[Node], *, allow_legacy: bool = False) -> list[str]:
    """List every violation of the containment grammar and id uniqueness.

    Args:
        tree: Root nodes to check.
        allow_legacy: Accept bare leaves at the root or directly inside a
            section, as found in pages saved before migration.

    Returns:
        Human-readable problem descriptions; empty when the tree is valid.
    """
    problems = [f"duplicate id {node_id}" for node_id in duplicate_ids(tree)]

    def _check(nodes: Sequence[Node], collection: CollectionLocation) -> None:
        for node in nodes:
            legacy = allow_legacy and isinstance(node, ContentLeaf) and collection.kind in _LEGACY_LEAF_COLLECTIONS
            if not legacy and not can_contain(collection, node):
                problems.append(f"{node.type} {node.id} not allowed in {collection.kind.value}")
            if isinstance(node, Row) and not node.columns:
                problems.append(f"row {node.id} has no columns")
            for kind, attr in child_collections(node):
                _check(getattr(node, attr), CollectionLocation(kind, node.id))

    _check(tree, CollectionLocation.root())
    return problems


def is_valid_tree(tree: Sequence[Node]) -> bool:
    return not structure_problems(tree)
