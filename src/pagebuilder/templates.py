"""Default leaf content and pre-built section skeletons."""

from __future__ import annotations

from typing import Literal, Sequence, get_args

from pagebuilder.ids import new_id
from pagebuilder.payloads import CardPayload, NavItem, NavLinks, dump_payload
from pagebuilder.schemas import Column, ContentLeaf, Row, Section

SectionTemplate = Literal["blank", "header", "hero", "about", "services", "footer"]
SECTION_TEMPLATES: tuple[str, ...] = get_args(SectionTemplate)

SECTION_CLASS = "relative overflow-hidden rounded-xl border border-border p-6"
COLUMN_CLASS = "space-y-4"
ROW_CLASS = "grid gap-4"

_DEFAULT_TEXT = {
    "h1": "New Heading",
    "faq": "What is your question?",
    "cta": "Get started",
}

_TEMPLATE_TITLES = {
    "blank": "Section",
    "header": "Header",
    "hero": "Hero",
    "about": "About",
    "services": "Services",
    "footer": "Footer",
}

_TEMPLATE_WIDTHS: dict[str, list[str]] = {
    "header": ["1/2", "1/2"],
    "hero": ["1/2", "1/2"],
    "about": ["1/3", "2/3"],
    "services": ["1/3", "1/3", "1/3"],
    "footer": ["1/1"],
}


def default_text(kind: str) -> str:
    """Return the starter text for a freshly inserted leaf."""
    if kind == "nav":
        return dump_payload(NavLinks(items=[NavItem(label="Home", section_id="")]))
    if kind == "card":
        return dump_payload(CardPayload(title="Card title", body="Card description"))
    return _DEFAULT_TEXT.get(kind, "")


def new_leaf(kind: str, text: str | None = None) -> ContentLeaf:
    return ContentLeaf(
        id=new_id(),
        type=kind,
        text=default_text(kind) if text is None else text,
        class_name="",
    )


def new_column(
    width: str = "1/1",
    children: Sequence[ContentLeaf] = (),
    class_name: str = COLUMN_CLASS,
) -> Column:
    return Column(id=new_id(), width=width, class_name=class_name, children=list(children))


def new_row(widths: Sequence[str], class_name: str = ROW_CLASS) -> Row:
    """Build a row with one empty column per width."""
    return Row(id=new_id(), class_name=class_name, columns=[new_column(width) for width in widths])


def new_section(
    title: str = "Section",
    children: Sequence[Row] = (),
    class_name: str = SECTION_CLASS,
    overlay_class_name: str = "bg-transparent",
) -> Section:
    return Section(
        id=new_id(),
        title=title,
        background_image_url="",
        overlay_class_name=overlay_class_name,
        class_name=class_name,
        children=list(children),
    )


def build_section(template: str = "blank") -> Section:
    """Build a section skeleton for one of :data:`SECTION_TEMPLATES`.

    Raises:
        ValueError: If ``template`` is not a known template name.
    """
    if template not in SECTION_TEMPLATES:
        raise ValueError(f"Unknown section template: {template!r}")

    title = _TEMPLATE_TITLES[template]
    if template == "blank":
        return new_section(title)

    widths = _TEMPLATE_WIDTHS[template]
    section_class = SECTION_CLASS
    columns: list[Column]

    if template == "header":
        columns = [
            new_column(widths[0], [new_leaf("h2", "Your Brand")]),
            new_column(widths[1], [new_leaf("cta", "Contact")], class_name="space-y-4 flex justify-end"),
        ]
        section_class = "relative overflow-hidden rounded-xl border border-border px-6 py-4"
    elif template == "hero":
        columns = [
            new_column(
                widths[0],
                [
                    new_leaf("h1", "Grow your business with SEO"),
                    new_leaf("paragraph", "Write a short, clear value proposition here."),
                    new_leaf("cta", "Get started"),
                ],
            ),
            new_column(widths[1], [new_leaf("image", "Hero image")]),
        ]
        section_class = "relative overflow-hidden rounded-xl border border-border p-6 bg-muted/20"
    elif template == "about":
        columns = [
            new_column(widths[0], [new_leaf("image", "About image")]),
            new_column(
                widths[1],
                [
                    new_leaf("h2", "About us"),
                    new_leaf("paragraph", "Explain who you are, what you do, and why it matters."),
                ],
            ),
        ]
    elif template == "services":
        columns = [
            new_column(
                width,
                [
                    new_leaf("h3", f"Service {number}"),
                    new_leaf("paragraph", "Describe the service in one sentence."),
                ],
                class_name="space-y-3 rounded-lg border border-border p-4 bg-background",
            )
            for number, width in enumerate(widths, start=1)
        ]
    else:  # footer
        columns = [
            new_column(
                widths[0],
                [new_leaf("paragraph", "© Your Company. All rights reserved.")],
                class_name="space-y-4 text-center",
            )
        ]
        section_class = "relative overflow-hidden rounded-xl border border-border px-6 py-6 bg-muted/20"

    row = Row(id=new_id(), class_name="", columns=columns)
    return new_section(title, [row], class_name=section_class)
