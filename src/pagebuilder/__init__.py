"""pagebuilder: block-tree editing engine for a drag-and-drop page builder."""

from pagebuilder.exceptions import (
    DocumentError,
    DocumentLoadError,
    PageBuilderError,
    StoreError,
)
from pagebuilder.history import History
from pagebuilder.migration import MigrationResult, normalize_blocks
from pagebuilder.schemas import (
    CollectionKind,
    CollectionLocation,
    Column,
    ContentLeaf,
    Node,
    NodeLocation,
    PageDocument,
    ResponsiveClassName,
    Row,
    Section,
)
from pagebuilder.selection import Selection
from pagebuilder.serialization import deserialize_document, load_document, serialize_document
from pagebuilder.session import EditorSession
from pagebuilder.styles import compose_class_name, resolve_responsive_classes

__all__ = [
    "CollectionKind",
    "CollectionLocation",
    "Column",
    "ContentLeaf",
    "DocumentError",
    "DocumentLoadError",
    "EditorSession",
    "History",
    "MigrationResult",
    "Node",
    "NodeLocation",
    "PageBuilderError",
    "PageDocument",
    "ResponsiveClassName",
    "Row",
    "Section",
    "Selection",
    "StoreError",
    "compose_class_name",
    "deserialize_document",
    "load_document",
    "normalize_blocks",
    "resolve_responsive_classes",
    "serialize_document",
]
