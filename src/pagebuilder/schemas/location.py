"""Location records addressing collections inside a page tree."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class CollectionKind(str, Enum):
    """Kinds of node collections a tree can hold."""

    ROOT = "root"
    SECTION_CHILDREN = "sectionChildren"
    ROW_COLUMNS = "rowColumns"
    COLUMN_CHILDREN = "columnChildren"


@dataclass(frozen=True)
class CollectionLocation:
    """Address of a collection: its kind and the owning parent's id.

    ``parent_id`` is None only for the root collection.
    """

    kind: CollectionKind
    parent_id: str | None = None

    @classmethod
    def root(cls) -> CollectionLocation:
        return cls(CollectionKind.ROOT, None)

    @classmethod
    def section_children(cls, section_id: str) -> CollectionLocation:
        return cls(CollectionKind.SECTION_CHILDREN, section_id)

    @classmethod
    def row_columns(cls, row_id: str) -> CollectionLocation:
        return cls(CollectionKind.ROW_COLUMNS, row_id)

    @classmethod
    def column_children(cls, column_id: str) -> CollectionLocation:
        return cls(CollectionKind.COLUMN_CHILDREN, column_id)


@dataclass(frozen=True)
class NodeLocation:
    """Where a node lives: its collection, index, and the node's own type."""

    collection: CollectionLocation
    index: int
    node_type: str

    @property
    def kind(self) -> CollectionKind:
        return self.collection.kind

    @property
    def parent_id(self) -> str | None:
        return self.collection.parent_id
