"""Page tree node models."""

from __future__ import annotations

from typing import Annotated, Literal, Union, get_args

from pydantic import BaseModel, ConfigDict, Field

LeafKind = Literal["h1", "h2", "h3", "paragraph", "faq", "image", "cta", "nav", "card"]
ColumnWidth = Literal["1/1", "1/2", "1/3", "2/3"]

LEAF_KINDS: tuple[str, ...] = get_args(LeafKind)
COLUMN_WIDTHS: tuple[str, ...] = get_args(ColumnWidth)
HEADING_KINDS: tuple[str, ...] = ("h1", "h2", "h3")


class ResponsiveClassName(BaseModel):
    """Per-breakpoint class strings.

    Attributes:
        mobile: Classes applied at every width (unprefixed).
        tablet: Classes scoped to the tablet breakpoint.
        desktop: Classes scoped to the desktop breakpoint.
    """

    model_config = ConfigDict(frozen=True)

    mobile: str | None = None
    tablet: str | None = None
    desktop: str | None = None


class BaseNode(BaseModel):
    """Fields shared by every node shape."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    id: str = Field(..., min_length=1)
    class_name: str | None = Field(default=None, alias="className")
    responsive_class_name: ResponsiveClassName | None = Field(default=None, alias="responsiveClassName")


class ContentLeaf(BaseNode):
    """A content module placed inside a column.

    ``text`` is free-form; for ``nav`` and ``card`` leaves it holds a JSON
    payload (see :mod:`pagebuilder.payloads`).
    """

    type: LeafKind
    text: str = Field(default="", alias="content")
    alt_text: str | None = Field(default=None, alias="alt")


class Column(BaseNode):
    """A width-constrained column holding content leaves."""

    type: Literal["column"] = "column"
    width: ColumnWidth = "1/1"
    children: list[Node] = Field(default_factory=list)


class Row(BaseNode):
    """A horizontal group of columns."""

    type: Literal["row"] = "row"
    columns: list[Column] = Field(default_factory=list)


class Section(BaseNode):
    """A root-level page section holding rows."""

    type: Literal["section"] = "section"
    title: str | None = None
    background_image_url: str | None = Field(default=None, alias="backgroundUrl")
    overlay_class_name: str | None = Field(default=None, alias="overlayClassName")
    children: list[Node] = Field(default_factory=list)


Node = Annotated[Union[Section, Row, Column, ContentLeaf], Field(discriminator="type")]
StructuralNode = Union[Section, Row, Column]

Column.model_rebuild()
Row.model_rebuild()
Section.model_rebuild()


def is_structural(node: BaseNode) -> bool:
    """Return True for sections, rows and columns."""
    return isinstance(node, (Section, Row, Column))
