"""Async file helpers for local document storage."""

from __future__ import annotations

import asyncio
from pathlib import Path


async def read_text_async(path: Path, encoding: str = "utf-8") -> str:
    """Read a stored page document without blocking the event loop.

    Args:
        path: Document file under the store's base directory.
        encoding: Text encoding of the stored JSON.

    Returns:
        The raw JSON text.
    """
    return await asyncio.to_thread(path.read_text, encoding=encoding)


async def write_text_async(path: Path, content: str, encoding: str = "utf-8") -> None:
    """Replace a stored page document with ``content``.

    The parent directory must already exist; see :func:`mkdir_async`.
    """
    await asyncio.to_thread(path.write_text, content, encoding=encoding)


async def append_text_async(path: Path, content: str, encoding: str = "utf-8") -> None:
    """Append a line to an owner's event log, creating the file if needed."""
    await asyncio.to_thread(_append_text, path, content, encoding)


def _append_text(path: Path, content: str, encoding: str) -> None:
    with path.open("a", encoding=encoding) as f:
        f.write(content)


async def mkdir_async(path: Path, parents: bool = False, exist_ok: bool = False) -> None:
    """Create an owner's directory in the document store.

    Args:
        path: Directory to create.
        parents: Also create missing parent directories.
        exist_ok: Accept a directory that is already there.
    """
    await asyncio.to_thread(path.mkdir, parents=parents, exist_ok=exist_ok)
