"""Shared schemas for pagebuilder."""

from pagebuilder.schemas.document import PageDocument
from pagebuilder.schemas.location import CollectionKind, CollectionLocation, NodeLocation
from pagebuilder.schemas.nodes import (
    COLUMN_WIDTHS,
    HEADING_KINDS,
    LEAF_KINDS,
    Column,
    ColumnWidth,
    ContentLeaf,
    LeafKind,
    Node,
    ResponsiveClassName,
    Row,
    Section,
    is_structural,
)

__all__ = [
    "COLUMN_WIDTHS",
    "HEADING_KINDS",
    "LEAF_KINDS",
    "CollectionKind",
    "CollectionLocation",
    "Column",
    "ColumnWidth",
    "ContentLeaf",
    "LeafKind",
    "Node",
    "NodeLocation",
    "PageDocument",
    "ResponsiveClassName",
    "Row",
    "Section",
    "is_structural",
]
