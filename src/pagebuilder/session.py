"""Editor session: the engine object a host drives for one open page."""

from __future__ import annotations

from typing import Any, Callable, Sequence

from pagebuilder import operations
from pagebuilder.addressing import Tree, collect_ids, find_ancestors, find_node, get_collection, locate
from pagebuilder.history import History
from pagebuilder.migration import normalize_blocks
from pagebuilder.schemas import CollectionLocation, Node, ResponsiveClassName
from pagebuilder.selection import Selection
from pagebuilder.serialization import document_payload, load_document, serialize_document
from pagebuilder.utils.logging_config import get_logger

logger = get_logger(__name__)


class EditorSession:
    """Owns the current tree, undo/redo history, selection, and clipboards.

    Every structural command goes through :meth:`commit`, which records an
    undo snapshot only when the command actually changed the tree. After any
    change the selection is pruned of ids that no longer exist.

    Attributes:
        selection: Currently selected node ids.
        clipboard: Detached node copied with :meth:`copy_primary`.
        style_clipboard: Responsive class triple copied with :meth:`copy_style`.
        did_migrate: True if the last :meth:`load` wrapped legacy leaves.
    """

    def __init__(self, blocks: Sequence[Node] | None = None) -> None:
        self.history = History()
        self.selection = Selection()
        self.clipboard: Node | None = None
        self.style_clipboard: ResponsiveClassName | None = None
        self.did_migrate = False
        self.load(blocks or [])

    # Document lifecycle

    @classmethod
    def from_payload(cls, payload: str | bytes | dict[str, Any] | None) -> EditorSession:
        """Open a session from a stored payload, coercing bad data to empty."""
        return cls(load_document(payload))

    def load(self, blocks: Sequence[Node]) -> bool:
        """Replace the document, migrating legacy pages and resetting history.

        Returns:
            True when the loaded blocks needed migration.
        """
        result = normalize_blocks(blocks)
        self.history.reset(result.blocks)
        self.selection.clear()
        self.did_migrate = result.did_migrate
        return result.did_migrate

    @property
    def tree(self) -> Tree:
        return self.history.current

    @property
    def primary(self) -> str | None:
        return self.selection.primary

    @property
    def can_undo(self) -> bool:
        return self.history.can_undo

    @property
    def can_redo(self) -> bool:
        return self.history.can_redo

    def to_payload(self) -> dict[str, Any]:
        return document_payload(self.tree)

    def to_json(self) -> str:
        return serialize_document(self.tree)

    # History

    def commit(self, next_tree: Tree) -> bool:
        """Install ``next_tree`` if it differs from the current tree."""
        if next_tree is self.tree or next_tree == self.tree:
            return False
        self.history.commit(next_tree)
        self.selection.prune(self.tree)
        return True

    def _apply(self, operation: Callable[..., Tree], *args: Any, **kwargs: Any) -> bool:
        return self.commit(operation(self.tree, *args, **kwargs))

    def undo(self) -> bool:
        if not self.history.undo():
            logger.debug("Nothing to undo")
            return False
        self.selection.prune(self.tree)
        return True

    def redo(self) -> bool:
        if not self.history.redo():
            logger.debug("Nothing to redo")
            return False
        self.selection.prune(self.tree)
        return True

    # Selection

    def select(self, node_id: str, additive: bool = False) -> None:
        """Select a node; ids not in the tree are ignored."""
        if find_node(self.tree, node_id) is None:
            return
        self.selection.select(node_id, additive)

    def clear_selection(self) -> None:
        self.selection.clear()

    def selected_node(self) -> Node | None:
        primary = self.selection.primary
        return find_node(self.tree, primary) if primary else None

    # Inserts

    def add_section(self, template: str = "blank") -> bool:
        return self._apply(operations.insert_section, template)

    def add_row(self, section_id: str, widths: Sequence[str]) -> bool:
        return self._apply(operations.insert_row, section_id, widths)

    def add_leaf(self, column_id: str, kind: str) -> bool:
        return self._apply(operations.insert_leaf, column_id, kind)

    def add_row_to_selected_section(self, widths: Sequence[str]) -> bool:
        """Add a row to the section enclosing the primary selection."""
        if self.primary is None:
            return False
        section_id = find_ancestors(self.tree, self.primary).section_id
        if section_id is None:
            return False
        return self.add_row(section_id, widths)

    def add_leaf_to_selection(self, kind: str) -> bool:
        """Add a leaf to the selected column, or else the selected section.

        When the leaf lands in a section, it becomes the new selection.
        """
        if self.primary is None:
            return False
        ancestors = find_ancestors(self.tree, self.primary)
        if ancestors.column_id is not None:
            return self.add_leaf(ancestors.column_id, kind)
        if ancestors.section_id is None:
            return False
        before = self.tree
        if not self._apply(operations.insert_leaf_into_section, ancestors.section_id, kind):
            return False
        added = _new_leaf_id(before, self.tree)
        if added:
            self.selection.replace([added])
        return True

    # Structural edits

    def remove(self, node_id: str) -> bool:
        changed = self._apply(operations.remove, node_id)
        self.selection.discard(node_id)
        return changed

    def delete_selected(self) -> bool:
        """Remove every selected node as a single undo step."""
        if not len(self.selection):
            return False
        next_tree = self.tree
        for node_id in self.selection.ids:
            next_tree = operations.remove(next_tree, node_id)
        self.selection.clear()
        return self.commit(next_tree)

    def duplicate(self, node_id: str) -> bool:
        return self._apply(operations.duplicate, node_id)

    def duplicate_primary(self) -> bool:
        return self.primary is not None and self.duplicate(self.primary)

    def move(self, source_id: str, target_id: str) -> bool:
        return self._apply(operations.move, source_id, target_id)

    def drop_into(self, source_id: str, target: CollectionLocation, index: int | None = None) -> bool:
        return self._apply(operations.drop_into, source_id, target, index)

    def reorder(self, node_id: str, direction: int) -> bool:
        return self._apply(operations.reorder_within_parent, node_id, direction)

    # Content and style edits

    def update_content(self, node_id: str, text: str) -> bool:
        return self._apply(operations.update_content, node_id, text)

    def update_alt_text(self, node_id: str, alt_text: str) -> bool:
        return self._apply(operations.update_alt_text, node_id, alt_text)

    def update_class_name(self, node_id: str, class_name: str) -> bool:
        return self._apply(operations.update_class_name, node_id, class_name)

    def update_responsive_class_name(self, node_id: str, **slots: str | None) -> bool:
        return self._apply(operations.update_responsive_class_name, node_id, **slots)

    def update_section_meta(self, node_id: str, **fields: str | None) -> bool:
        return self._apply(operations.update_section_meta, node_id, **fields)

    def apply_bulk_style(self, mobile_classes: str, ids: Sequence[str] | None = None) -> bool:
        """Set the mobile class slot on ``ids`` (default: the selection)."""
        targets = self.selection.ids if ids is None else list(ids)
        return self._apply(operations.apply_bulk_style, targets, mobile_classes)

    # Clipboards

    def copy_primary(self) -> bool:
        if self.primary is None:
            return False
        copied = operations.copy_node(self.tree, self.primary)
        if copied is None:
            return False
        self.clipboard = copied
        return True

    def paste(self) -> bool:
        """Paste the clipboard after the primary selection and select the copy."""
        primary = self.primary
        if not self._apply(operations.paste_node_after, self.clipboard, primary):
            return False
        location = locate(self.tree, primary)
        pasted = get_collection(self.tree, location.collection)[location.index + 1]
        self.selection.replace([pasted.id])
        return True

    def copy_style(self, node_id: str | None = None) -> bool:
        node = find_node(self.tree, node_id or self.primary or "")
        if node is None:
            return False
        self.style_clipboard = node.responsive_class_name or ResponsiveClassName()
        return True

    def paste_style(self, node_id: str | None = None) -> bool:
        target = node_id or self.primary
        if self.style_clipboard is None or target is None:
            return False
        return self._apply(operations.apply_style, target, self.style_clipboard)


def _new_leaf_id(before: Sequence[Node], after: Sequence[Node]) -> str | None:
    known = set(collect_ids(before))
    added = [node_id for node_id in collect_ids(after) if node_id not in known]
    return added[-1] if added else None
