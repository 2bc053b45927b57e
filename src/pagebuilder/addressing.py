"""Locate nodes and collections inside a page tree.

A tree is a plain list of root nodes. Every helper here is read-only except
:func:`set_collection` and :func:`update_node`, which return a new tree with
fresh copies of every ancestor of the changed collection. Untouched subtrees
are shared by reference.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterator, Sequence

from pagebuilder.schemas import (
    CollectionKind,
    CollectionLocation,
    Column,
    ContentLeaf,
    Node,
    NodeLocation,
    Row,
    Section,
)

Tree = list[Node]

# Which node type a collection accepts when something is moved into it.
_ACCEPTED_TYPES: dict[CollectionKind, type] = {
    CollectionKind.ROOT: Section,
    CollectionKind.SECTION_CHILDREN: Row,
    CollectionKind.ROW_COLUMNS: Column,
    CollectionKind.COLUMN_CHILDREN: ContentLeaf,
}


@dataclass(frozen=True)
class Ancestors:
    """Nearest enclosing section and column of a node (the node itself counts)."""

    section_id: str | None = None
    column_id: str | None = None


def child_collections(node: Node) -> list[tuple[CollectionKind, str]]:
    """Return ``(kind, attribute)`` pairs for the collections a node owns."""
    if isinstance(node, Section):
        return [(CollectionKind.SECTION_CHILDREN, "children")]
    if isinstance(node, Row):
        return [(CollectionKind.ROW_COLUMNS, "columns")]
    if isinstance(node, Column):
        return [(CollectionKind.COLUMN_CHILDREN, "children")]
    if isinstance(node, ContentLeaf):
        return []
    raise TypeError(f"Unknown node shape: {type(node).__name__}")


def can_contain(collection: CollectionLocation, node: Node) -> bool:
    """Check the containment grammar for placing ``node`` into ``collection``."""
    return isinstance(node, _ACCEPTED_TYPES[collection.kind])


def iter_nodes(tree: Sequence[Node], depth: int = 0) -> Iterator[tuple[int, Node]]:
    """Yield ``(depth, node)`` pairs in depth-first document order."""
    for node in tree:
        yield depth, node
        for _, attr in child_collections(node):
            yield from iter_nodes(getattr(node, attr), depth + 1)


def find_node(tree: Sequence[Node], node_id: str) -> Node | None:
    """Return the node with ``node_id`` anywhere in the tree, or None."""
    for _, node in iter_nodes(tree):
        if node.id == node_id:
            return node
    return None


def locate(tree: Sequence[Node], node_id: str) -> NodeLocation | None:
    """Return the collection, index, and type of the node with ``node_id``."""

    def _walk(nodes: Sequence[Node], collection: CollectionLocation) -> NodeLocation | None:
        for index, node in enumerate(nodes):
            if node.id == node_id:
                return NodeLocation(collection=collection, index=index, node_type=node.type)
            for kind, attr in child_collections(node):
                found = _walk(getattr(node, attr), CollectionLocation(kind, node.id))
                if found:
                    return found
        return None

    return _walk(tree, CollectionLocation.root())


def get_collection(tree: Sequence[Node], location: CollectionLocation) -> list[Node] | None:
    """Return the live list stored at ``location``, or None if it does not resolve.

    The returned list belongs to the tree; callers copy it before editing.
    """
    if location.kind == CollectionKind.ROOT:
        return list(tree)
    if location.parent_id is None:
        return None
    parent = find_node(tree, location.parent_id)
    if parent is None:
        return None
    for kind, attr in child_collections(parent):
        if kind == location.kind:
            return getattr(parent, attr)
    return None


def set_collection(
    tree: Sequence[Node], location: CollectionLocation, items: Sequence[Node]
) -> Tree:
    """Return a new tree with the collection at ``location`` replaced by ``items``.

    An unresolvable location returns the input tree object unchanged.
    """
    if location.kind == CollectionKind.ROOT:
        return list(items)

    def _rebuild(node: Node) -> Node:
        for kind, attr in child_collections(node):
            if node.id == location.parent_id and kind == location.kind:
                return node.model_copy(update={attr: list(items)})
            children = getattr(node, attr)
            updated = _rebuild_all(children)
            if updated is not children:
                return node.model_copy(update={attr: updated})
        return node

    def _rebuild_all(nodes: list[Node]) -> list[Node]:
        rebuilt = [_rebuild(node) for node in nodes]
        if all(new is old for new, old in zip(rebuilt, nodes)):
            return nodes
        return rebuilt

    return _rebuild_all(tree)


def update_node(
    tree: Sequence[Node], node_id: str, updater: Callable[[Node], Node]
) -> Tree:
    """Return a new tree with ``updater`` applied to the node with ``node_id``.

    When the id does not resolve, or ``updater`` returns the node itself, the
    input tree object is returned unchanged.
    """

    def _rebuild(node: Node) -> Node:
        if node.id == node_id:
            return updater(node)
        for _, attr in child_collections(node):
            children = getattr(node, attr)
            updated = _rebuild_all(children)
            if updated is not children:
                return node.model_copy(update={attr: updated})
        return node

    def _rebuild_all(nodes: list[Node]) -> list[Node]:
        rebuilt = [_rebuild(node) for node in nodes]
        if all(new is old for new, old in zip(rebuilt, nodes)):
            return nodes
        return rebuilt

    return _rebuild_all(tree)


def find_ancestors(tree: Sequence[Node], node_id: str) -> Ancestors:
    """Return the enclosing section and column ids for ``node_id``.

    Both ids are None when the node cannot be found.
    """

    def _walk(nodes: Sequence[Node], context: Ancestors) -> Ancestors | None:
        for node in nodes:
            current = context
            if isinstance(node, Section):
                current = Ancestors(section_id=node.id, column_id=context.column_id)
            elif isinstance(node, Column):
                current = Ancestors(section_id=context.section_id, column_id=node.id)
            if node.id == node_id:
                return current
            for _, attr in child_collections(node):
                found = _walk(getattr(node, attr), current)
                if found:
                    return found
        return None

    return _walk(tree, Ancestors()) or Ancestors()


def collect_ids(tree: Sequence[Node]) -> list[str]:
    """Return every node id in document order."""
    return [node.id for _, node in iter_nodes(tree)]
