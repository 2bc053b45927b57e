"""Identifier minting for tree nodes."""

from __future__ import annotations

from uuid import uuid4


def new_id() -> str:
    """Return a fresh, process-unique node identifier."""
    return uuid4().hex
