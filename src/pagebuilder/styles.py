"""Compose presentational class strings from per-breakpoint slots."""

from __future__ import annotations

from pagebuilder.config import PAGEBUILDER_DESKTOP_PREFIX, PAGEBUILDER_TABLET_PREFIX
from pagebuilder.schemas import Node, ResponsiveClassName

SCOPE_SEPARATOR = ":"


def prefix_classes(classes: str, prefix: str) -> str:
    """Prefix every token with ``prefix`` unless it is already scoped.

    >>> prefix_classes("text-lg hover:underline", "md:")
    'md:text-lg hover:underline'
    """
    return " ".join(
        token if SCOPE_SEPARATOR in token else f"{prefix}{token}"
        for token in classes.split()
    )


def resolve_responsive_classes(
    responsive: ResponsiveClassName | None,
    *,
    tablet_prefix: str = PAGEBUILDER_TABLET_PREFIX,
    desktop_prefix: str = PAGEBUILDER_DESKTOP_PREFIX,
) -> str:
    """Join mobile, tablet, and desktop slots into one class string.

    Mobile tokens stay unprefixed; tablet and desktop tokens get their
    breakpoint prefix. Empty slots contribute nothing.
    """
    if responsive is None:
        return ""
    parts = [
        " ".join((responsive.mobile or "").split()),
        prefix_classes(responsive.tablet or "", tablet_prefix),
        prefix_classes(responsive.desktop or "", desktop_prefix),
    ]
    return " ".join(part for part in parts if part)


def compose_class_name(node: Node, fallback: str = "") -> str:
    """Return the full class string for a node.

    The legacy ``class_name`` comes first, followed by the resolved
    responsive slots. ``fallback`` is used when both are empty.
    """
    parts = [(node.class_name or "").strip(), resolve_responsive_classes(node.responsive_class_name)]
    return " ".join(part for part in parts if part) or fallback
