"""Persisted page document model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from pagebuilder.schemas.nodes import Node


class PageDocument(BaseModel):
    """The ``{blocks: [...]}`` shape exchanged with a document store."""

    model_config = ConfigDict(extra="ignore")

    blocks: list[Node] = Field(default_factory=list)
