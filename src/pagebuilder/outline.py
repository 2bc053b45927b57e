"""Summaries of a page tree: headings, anchors, and the layer panel."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

from pagebuilder.addressing import iter_nodes
from pagebuilder.schemas import HEADING_KINDS, Column, ContentLeaf, Node, Row, Section

_LEAF_LABELS = {
    "h1": "H1",
    "h2": "H2",
    "h3": "H3",
    "paragraph": "Paragraph",
    "faq": "FAQ",
    "image": "Image",
    "cta": "CTA",
    "nav": "Nav",
    "card": "Card",
}
_PREVIEW_LENGTH = 32


@dataclass(frozen=True)
class HeadingEntry:
    """A heading leaf in document order."""

    id: str
    level: int
    text: str


@dataclass(frozen=True)
class SectionAnchor:
    """A root section that nav links can point at."""

    id: str
    label: str
    anchor: str


def section_anchor_id(section: Section) -> str:
    return f"sec-{section.id}"


def heading_outline(tree: Sequence[Node]) -> list[HeadingEntry]:
    """Collect h1-h3 leaves in document order."""
    return [
        HeadingEntry(id=node.id, level=HEADING_KINDS.index(node.type) + 1, text=node.text)
        for _, node in iter_nodes(tree)
        if isinstance(node, ContentLeaf) and node.type in HEADING_KINDS
    ]


def has_h1(tree: Sequence[Node]) -> bool:
    return any(entry.level == 1 for entry in heading_outline(tree))


def section_anchors(tree: Sequence[Node]) -> list[SectionAnchor]:
    """List root sections with their anchor ids and display labels."""
    return [
        SectionAnchor(id=node.id, label=(node.title or "").strip() or "Section", anchor=section_anchor_id(node))
        for node in tree
        if isinstance(node, Section)
    ]


def count_nodes(tree: Iterable[Node]) -> dict[str, int]:
    """Count nodes by type across the whole tree."""
    counts: dict[str, int] = {}
    for _, node in iter_nodes(list(tree)):
        counts[node.type] = counts.get(node.type, 0) + 1
    return counts


def node_label(node: Node) -> str:
    """Short label shown for a node in the layer panel."""
    if isinstance(node, Section):
        return f"Section: {(node.title or '').strip() or 'Section'}"
    if isinstance(node, Row):
        return f"Row ({len(node.columns)} cols)"
    if isinstance(node, Column):
        return f"Column {node.width}"
    label = _LEAF_LABELS.get(node.type, node.type.upper())
    preview = " ".join(node.text.split())
    if len(preview) > _PREVIEW_LENGTH:
        preview = preview[: _PREVIEW_LENGTH - 1] + "…"
    return f"{label}: {preview}" if preview else label


def render_layers(tree: Sequence[Node], indent: int = 2) -> str:
    """Render the layer panel as indented text, one node per line."""
    return "\n".join(" " * (depth * indent) + node_label(node) for depth, node in iter_nodes(tree))
