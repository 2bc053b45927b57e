"""Tree mutation operations.

Every function takes a tree and returns a tree; inputs are never modified.
Commands whose target cannot be resolved, or that would break the
containment grammar, return the input tree object itself so callers can
detect "nothing happened" with an identity check.
"""

from __future__ import annotations

from typing import Iterable, Sequence

from pagebuilder.addressing import (
    Tree,
    can_contain,
    child_collections,
    find_node,
    get_collection,
    locate,
    set_collection,
    update_node,
)
from pagebuilder.ids import new_id
from pagebuilder.schemas import (
    COLUMN_WIDTHS,
    LEAF_KINDS,
    CollectionKind,
    CollectionLocation,
    Column,
    ContentLeaf,
    Node,
    ResponsiveClassName,
    Row,
    Section,
)
from pagebuilder.templates import ROW_CLASS, SECTION_TEMPLATES, build_section, new_column, new_leaf, new_row
from pagebuilder.utils.logging_config import get_logger

logger = get_logger(__name__)


def clone_with_new_ids(node: Node) -> Node:
    """Deep-copy ``node`` giving it and every descendant a fresh id."""
    update: dict[str, object] = {"id": new_id()}
    for _, attr in child_collections(node):
        update[attr] = [clone_with_new_ids(child) for child in getattr(node, attr)]
    return node.model_copy(update=update)


def _insert_at(tree: Sequence[Node], collection: CollectionLocation, index: int, node: Node) -> Tree:
    items = get_collection(tree, collection)
    if items is None:
        return tree
    items = list(items)
    items.insert(index, node)
    return set_collection(tree, collection, items)


# Inserts


def insert_leaf(tree: Sequence[Node], column_id: str, kind: str) -> Tree:
    """Append a new default leaf of ``kind`` to the column ``column_id``."""
    if kind not in LEAF_KINDS:
        logger.debug("Ignoring insert of unknown leaf kind %r", kind)
        return tree
    if not isinstance(find_node(tree, column_id), Column):
        logger.debug("Ignoring leaf insert: %s is not a column", column_id)
        return tree
    leaf = new_leaf(kind)
    return update_node(tree, column_id, lambda col: col.model_copy(update={"children": [*col.children, leaf]}))


def insert_leaf_into_section(tree: Sequence[Node], section_id: str, kind: str) -> Tree:
    """Append a leaf to the first column of a section.

    A section without any column gets a new full-width row holding the leaf.
    """
    if kind not in LEAF_KINDS:
        return tree
    section = find_node(tree, section_id)
    if not isinstance(section, Section):
        return tree
    for child in section.children:
        if isinstance(child, Row) and child.columns:
            return insert_leaf(tree, child.columns[0].id, kind)
    row = Row(id=new_id(), class_name=ROW_CLASS, columns=[new_column("1/1", [new_leaf(kind)])])
    return update_node(tree, section_id, lambda sec: sec.model_copy(update={"children": [*sec.children, row]}))


def insert_row(tree: Sequence[Node], section_id: str, widths: Sequence[str]) -> Tree:
    """Append a row with one column per entry of ``widths`` to a section."""
    if not widths or any(width not in COLUMN_WIDTHS for width in widths):
        logger.debug("Ignoring row insert with widths %r", list(widths))
        return tree
    if not isinstance(find_node(tree, section_id), Section):
        logger.debug("Ignoring row insert: %s is not a section", section_id)
        return tree
    row = new_row(widths)
    return update_node(tree, section_id, lambda sec: sec.model_copy(update={"children": [*sec.children, row]}))


def insert_section(tree: Sequence[Node], template: str = "blank") -> Tree:
    """Append a section built from ``template`` at the root."""
    if template not in SECTION_TEMPLATES:
        logger.debug("Ignoring insert of unknown section template %r", template)
        return tree
    return [*tree, build_section(template)]


# Structural edits


def remove(tree: Sequence[Node], node_id: str) -> Tree:
    """Delete a node and its subtree from wherever it lives.

    Removing the only column of a row removes the row, since a row needs at
    least one column.
    """
    location = locate(tree, node_id)
    if location is None:
        return tree
    if _is_last_column(tree, location.collection):
        return remove(tree, location.parent_id)
    items = list(get_collection(tree, location.collection) or [])
    del items[location.index]
    return set_collection(tree, location.collection, items)


def duplicate(tree: Sequence[Node], node_id: str) -> Tree:
    """Insert a fresh-id clone of a node right after the original."""
    location = locate(tree, node_id)
    if location is None:
        return tree
    original = get_collection(tree, location.collection)[location.index]
    return _insert_at(tree, location.collection, location.index + 1, clone_with_new_ids(original))


def move(tree: Sequence[Node], source_id: str, target_id: str) -> Tree:
    """Move ``source_id`` so it sits immediately before ``target_id``.

    Within a single collection a forward move lands on the slot just before
    the target once the source has been taken out, so both directions place
    the node directly in front of the target.
    """
    if source_id == target_id:
        return tree
    source = locate(tree, source_id)
    target = locate(tree, target_id)
    if source is None or target is None:
        logger.debug("Ignoring move %s -> %s: unresolved id", source_id, target_id)
        return tree

    moved = get_collection(tree, source.collection)[source.index]
    if not can_contain(target.collection, moved):
        logger.debug("Ignoring move of %s into %s", moved.type, target.kind.value)
        return tree
    if source.collection != target.collection and _is_last_column(tree, source.collection):
        logger.debug("Ignoring move of the only column in row %s", source.parent_id)
        return tree

    index = target.index
    if source.collection == target.collection and source.index < target.index:
        index = max(0, target.index - 1)
    return _relocate(tree, source.collection, source.index, target.collection, index)


def drop_into(
    tree: Sequence[Node],
    source_id: str,
    target: CollectionLocation,
    index: int | None = None,
) -> Tree:
    """Move ``source_id`` into the collection ``target`` at ``index``.

    ``index`` counts positions after the source has been taken out; it
    defaults to the end of the collection and is clamped into range.
    """
    source = locate(tree, source_id)
    if source is None or get_collection(tree, target) is None:
        logger.debug("Ignoring drop of %s: unresolved source or target", source_id)
        return tree

    moved = get_collection(tree, source.collection)[source.index]
    if not can_contain(target, moved):
        logger.debug("Ignoring drop of %s into %s", moved.type, target.kind.value)
        return tree
    if source.collection != target and _is_last_column(tree, source.collection):
        logger.debug("Ignoring drop of the only column in row %s", source.parent_id)
        return tree
    if target.parent_id is not None and _is_within(moved, target.parent_id):
        return tree
    return _relocate(tree, source.collection, source.index, target, index)


def _is_within(node: Node, node_id: str) -> bool:
    return find_node([node], node_id) is not None


def _is_last_column(tree: Sequence[Node], collection: CollectionLocation) -> bool:
    if collection.kind != CollectionKind.ROW_COLUMNS:
        return False
    return len(get_collection(tree, collection) or []) == 1


def _relocate(
    tree: Sequence[Node],
    source: CollectionLocation,
    source_index: int,
    target: CollectionLocation,
    index: int | None,
) -> Tree:
    items = list(get_collection(tree, source))
    moved = items.pop(source_index)
    next_tree = set_collection(tree, source, items)

    target_items = get_collection(next_tree, target)
    if target_items is None:
        return tree
    target_items = list(target_items)
    at = len(target_items) if index is None else min(max(0, index), len(target_items))
    target_items.insert(at, moved)
    return set_collection(next_tree, target, target_items)


def reorder_within_parent(tree: Sequence[Node], node_id: str, direction: int) -> Tree:
    """Swap a node with its previous (-1) or next (+1) sibling."""
    if direction not in (-1, 1):
        logger.debug("Ignoring reorder with direction %r", direction)
        return tree
    location = locate(tree, node_id)
    if location is None:
        return tree
    items = list(get_collection(tree, location.collection))
    other = location.index + direction
    if other < 0 or other >= len(items):
        return tree
    items[location.index], items[other] = items[other], items[location.index]
    return set_collection(tree, location.collection, items)


# Styling


def _patch_responsive(node: Node, **slots: str | None) -> Node:
    current = node.responsive_class_name or ResponsiveClassName()
    return node.model_copy(update={"responsive_class_name": current.model_copy(update=slots)})


def apply_bulk_style(tree: Sequence[Node], ids: Iterable[str], mobile_classes: str) -> Tree:
    """Set the mobile class slot on every resolvable id, skipping the rest."""
    if not mobile_classes.strip():
        return tree
    next_tree = tree
    for node_id in ids:
        next_tree = update_node(next_tree, node_id, lambda node: _patch_responsive(node, mobile=mobile_classes))
    return next_tree


def apply_style(tree: Sequence[Node], node_id: str, style: ResponsiveClassName) -> Tree:
    """Install a complete responsive class triple on a node."""
    return update_node(tree, node_id, lambda node: node.model_copy(update={"responsive_class_name": style}))


def update_responsive_class_name(
    tree: Sequence[Node],
    node_id: str,
    *,
    mobile: str | None = None,
    tablet: str | None = None,
    desktop: str | None = None,
) -> Tree:
    """Patch the supplied responsive slots of a node, keeping the others."""
    slots = {
        name: value
        for name, value in (("mobile", mobile), ("tablet", tablet), ("desktop", desktop))
        if value is not None
    }
    if not slots:
        return tree
    return update_node(tree, node_id, lambda node: _patch_responsive(node, **slots))


def update_class_name(tree: Sequence[Node], node_id: str, class_name: str) -> Tree:
    return update_node(tree, node_id, lambda node: node.model_copy(update={"class_name": class_name}))


# Content


def _leaf_update(**fields: object):
    def _apply(node: Node) -> Node:
        if not isinstance(node, ContentLeaf):
            return node
        return node.model_copy(update=fields)

    return _apply


def update_content(tree: Sequence[Node], node_id: str, text: str) -> Tree:
    """Replace a leaf's text. Structural nodes are left alone."""
    return update_node(tree, node_id, _leaf_update(text=text))


def update_alt_text(tree: Sequence[Node], node_id: str, alt_text: str) -> Tree:
    return update_node(tree, node_id, _leaf_update(alt_text=alt_text))


def update_section_meta(
    tree: Sequence[Node],
    node_id: str,
    *,
    title: str | None = None,
    background_image_url: str | None = None,
    overlay_class_name: str | None = None,
) -> Tree:
    """Edit a section's title, background image, or overlay classes."""
    patch = {
        name: value
        for name, value in (
            ("title", title),
            ("background_image_url", background_image_url),
            ("overlay_class_name", overlay_class_name),
        )
        if value is not None
    }

    def _apply(node: Node) -> Node:
        if not isinstance(node, Section) or not patch:
            return node
        return node.model_copy(update=patch)

    return update_node(tree, node_id, _apply)


# Clipboard


def copy_node(tree: Sequence[Node], node_id: str) -> Node | None:
    """Return a detached deep copy of a node for the clipboard.

    Ids are kept; fresh ones are minted at paste time.
    """
    node = find_node(tree, node_id)
    if node is None:
        return None
    return node.model_copy(deep=True)


def paste_node_after(tree: Sequence[Node], clipboard: Node | None, primary_id: str | None) -> Tree:
    """Insert a fresh-id clone of ``clipboard`` after the primary selection."""
    if clipboard is None or primary_id is None:
        return tree
    location = locate(tree, primary_id)
    if location is None:
        return tree
    if not can_contain(location.collection, clipboard):
        logger.debug("Ignoring paste of %s into %s", clipboard.type, location.kind.value)
        return tree
    return _insert_at(tree, location.collection, location.index + 1, clone_with_new_ids(clipboard))
