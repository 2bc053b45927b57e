"""Convert page trees to and from the persisted ``{blocks: [...]}`` shape."""

from __future__ import annotations

import json
from typing import Any, Sequence

from pydantic import ValidationError

from pagebuilder.addressing import Tree
from pagebuilder.exceptions import DocumentLoadError
from pagebuilder.schemas import Node, PageDocument
from pagebuilder.utils.logging_config import get_logger

logger = get_logger(__name__)


def document_payload(tree: Sequence[Node]) -> dict[str, Any]:
    """Return the JSON-compatible dict for ``tree``."""
    return PageDocument(blocks=list(tree)).model_dump(mode="json", by_alias=True, exclude_none=True)


def serialize_document(tree: Sequence[Node]) -> str:
    """Serialize ``tree`` as a JSON page document."""
    return PageDocument(blocks=list(tree)).model_dump_json(by_alias=True, exclude_none=True)


def deserialize_document(payload: str | bytes | dict[str, Any]) -> Tree:
    """Parse a page document into a tree.

    Args:
        payload: JSON text/bytes or an already-decoded mapping.

    Returns:
        The root node list.

    Raises:
        DocumentLoadError: If the payload is not a valid page document.
    """
    try:
        if isinstance(payload, (str, bytes)):
            document = PageDocument.model_validate_json(payload)
        else:
            document = PageDocument.model_validate(payload)
    except ValidationError as exc:
        raise DocumentLoadError(f"Invalid page document: {exc.error_count()} error(s)") from exc
    return document.blocks


def load_document(payload: str | bytes | dict[str, Any] | None) -> Tree:
    """Parse a stored payload, falling back to an empty tree when unusable."""
    if payload is None:
        return []
    try:
        return deserialize_document(payload)
    except DocumentLoadError as exc:
        logger.warning("Discarding unreadable page document", extra={"error": str(exc)})
        return []


def dumps_tree(tree: Sequence[Node], *, indent: int | None = None) -> str:
    """Serialize with optional indentation for human inspection."""
    return json.dumps(document_payload(tree), indent=indent, ensure_ascii=False)
