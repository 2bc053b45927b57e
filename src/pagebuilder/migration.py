"""Load-time normalization of legacy flat pages."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from pagebuilder.addressing import Tree
from pagebuilder.ids import new_id
from pagebuilder.schemas import Column, ContentLeaf, Node, Row, Section, is_structural
from pagebuilder.templates import SECTION_CLASS
from pagebuilder.utils.logging_config import get_logger

logger = get_logger(__name__)


@dataclass
class MigrationResult:
    """Outcome of :func:`normalize_blocks`."""

    blocks: Tree
    did_migrate: bool


def normalize_blocks(blocks: Sequence[Node]) -> MigrationResult:
    """Wrap a flat list of legacy leaves into section > row > column.

    Trees that already contain any section, row, or column are returned
    as-is, as are empty trees, so running this twice never double-wraps.
    """
    if not blocks or any(is_structural(node) for node in blocks):
        return MigrationResult(blocks=list(blocks), did_migrate=False)

    leaves = [node for node in blocks if isinstance(node, ContentLeaf)]
    column = Column(id=new_id(), width="1/1", class_name="space-y-4", children=leaves)
    row = Row(id=new_id(), class_name="", columns=[column])
    section = Section(
        id=new_id(),
        title="Section",
        background_image_url="",
        overlay_class_name="bg-transparent",
        class_name=SECTION_CLASS,
        children=[row],
    )
    logger.info("Migrated legacy page", extra={"leaf_count": len(leaves)})
    return MigrationResult(blocks=[section], did_migrate=True)


def migrate(blocks: Sequence[Node]) -> Tree:
    """Return the normalized tree, dropping the migration flag."""
    return normalize_blocks(blocks).blocks
