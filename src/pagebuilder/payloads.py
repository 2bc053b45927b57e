"""Structured payloads stored in ``nav`` and ``card`` leaf text."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from pagebuilder.utils.logging_config import get_logger

logger = get_logger(__name__)


class NavItem(BaseModel):
    """A navigation link pointing at a section anchor."""

    model_config = ConfigDict(populate_by_name=True)

    label: str = ""
    section_id: str = Field(default="", alias="sectionId")


class NavLinks(BaseModel):
    """Payload of a ``nav`` leaf."""

    items: list[NavItem] = Field(default_factory=list)


class CardPayload(BaseModel):
    """Payload of a ``card`` leaf."""

    title: str = ""
    body: str = ""


def parse_nav_links(text: str) -> NavLinks:
    """Parse a ``nav`` leaf's text, falling back to an empty link list."""
    try:
        return NavLinks.model_validate_json(text)
    except ValidationError as exc:
        logger.debug("Unreadable nav payload: %s", exc.errors(include_url=False))
        return NavLinks()


def parse_card(text: str) -> CardPayload:
    """Parse a ``card`` leaf's text, falling back to an empty card."""
    try:
        return CardPayload.model_validate_json(text)
    except ValidationError as exc:
        logger.debug("Unreadable card payload: %s", exc.errors(include_url=False))
        return CardPayload()


def dump_payload(payload: NavLinks | CardPayload) -> str:
    """Serialize a payload back into leaf text."""
    return payload.model_dump_json(by_alias=True)
