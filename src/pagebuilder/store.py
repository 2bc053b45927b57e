"""Document store collaborators and a JSON file implementation.

The editing engine never touches storage. Hosts load a session from a store
and save it back; an optional activity sink records "page saved" events.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Protocol

from pagebuilder.config import PAGEBUILDER_DOCUMENT_KIND, PAGEBUILDER_STORE_PATH
from pagebuilder.exceptions import StoreError
from pagebuilder.file_utils import append_text_async, mkdir_async, read_text_async, write_text_async
from pagebuilder.session import EditorSession
from pagebuilder.utils.logging_config import get_logger

logger = get_logger(__name__)

SAVED_EVENT_TYPE = "page_builder_saved"


class DocumentStore(Protocol):
    """Get/set persisted page documents keyed by owner and document kind."""

    async def get(self, owner: str, kind: str) -> dict[str, Any] | None: ...

    async def set(self, owner: str, kind: str, payload: dict[str, Any]) -> None: ...


class ActivitySink(Protocol):
    """Receives activity events such as "page saved"."""

    async def record(self, owner: str, event: dict[str, Any]) -> None: ...


def _utc_now() -> str:
    return datetime.now(timezone.utc).isoformat()


def _safe_key(value: str) -> str:
    key = value.replace("/", "_").replace("\\", "_").strip(".")
    if not key:
        raise StoreError(f"Invalid store key: {value!r}")
    return key


class JsonFileDocumentStore:
    """Stores each document as ``<base>/<owner>/<kind>.json``.

    Events go to ``<base>/<owner>/events.jsonl``, one JSON object per line,
    so the store doubles as an :class:`ActivitySink`.
    """

    def __init__(self, base_path: Path | None = None) -> None:
        self.base_path = base_path or PAGEBUILDER_STORE_PATH

    def path_for(self, owner: str, kind: str) -> Path:
        return self.base_path / _safe_key(owner) / f"{_safe_key(kind)}.json"

    async def get(self, owner: str, kind: str) -> dict[str, Any] | None:
        """Return the stored payload, or None if nothing has been saved.

        Raises:
            StoreError: If the file exists but is not a JSON object.
        """
        path = self.path_for(owner, kind)
        if not path.exists():
            return None
        text = await read_text_async(path)
        try:
            payload = json.loads(text)
        except json.JSONDecodeError as exc:
            raise StoreError(f"Corrupt document at {path}: {exc}") from exc
        if not isinstance(payload, dict):
            raise StoreError(f"Document at {path} is not a JSON object")
        return payload

    async def set(self, owner: str, kind: str, payload: dict[str, Any]) -> None:
        """Merge ``payload`` into the stored document and stamp ``updatedAt``."""
        path = self.path_for(owner, kind)
        await mkdir_async(path.parent, parents=True, exist_ok=True)
        existing: dict[str, Any] = {}
        if path.exists():
            try:
                existing = await self.get(owner, kind) or {}
            except StoreError as exc:
                logger.warning("Overwriting unreadable document", extra={"path": str(path), "error": str(exc)})
        merged = {**existing, **payload, "updatedAt": _utc_now()}
        await write_text_async(path, json.dumps(merged, ensure_ascii=False))

    async def record(self, owner: str, event: dict[str, Any]) -> None:
        path = self.base_path / _safe_key(owner) / "events.jsonl"
        await mkdir_async(path.parent, parents=True, exist_ok=True)
        line = json.dumps({**event, "createdAt": _utc_now()}, ensure_ascii=False) + "\n"
        await append_text_async(path, line)


async def load_session(
    store: DocumentStore,
    owner: str,
    *,
    kind: str = PAGEBUILDER_DOCUMENT_KIND,
) -> EditorSession:
    """Open an editor session for ``owner``'s page.

    Missing, unreadable, or malformed documents open as an empty page.
    """
    try:
        payload = await store.get(owner, kind)
    except StoreError as exc:
        logger.warning("Failed to load page document", extra={"owner": owner, "kind": kind, "error": str(exc)})
        payload = None
    session = EditorSession.from_payload(payload)
    if session.did_migrate:
        logger.info("Page document migrated on load", extra={"owner": owner, "kind": kind})
    return session


async def save_session(
    store: DocumentStore,
    owner: str,
    session: EditorSession,
    *,
    kind: str = PAGEBUILDER_DOCUMENT_KIND,
    activity: ActivitySink | None = None,
) -> None:
    """Persist the session's current tree and optionally record the save."""
    payload = session.to_payload()
    await store.set(owner, kind, payload)
    logger.info("Saved page document", extra={"owner": owner, "kind": kind, "blocks": len(payload["blocks"])})
    if activity is not None:
        await activity.record(
            owner,
            {
                "type": SAVED_EVENT_TYPE,
                "label": "Page Builder saved",
                "blocksCount": len(payload["blocks"]),
            },
        )
