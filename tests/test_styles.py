"""Tests for responsive class resolution."""

from __future__ import annotations

import pytest

from pagebuilder.schemas import ContentLeaf, ResponsiveClassName
from pagebuilder.styles import compose_class_name, prefix_classes, resolve_responsive_classes


@pytest.mark.parametrize(
    ("classes", "expected"),
    [
        ("text-lg", "md:text-lg"),
        ("  p-4   m-2 ", "md:p-4 md:m-2"),
        ("hover:underline p-2", "hover:underline md:p-2"),
        ("", ""),
        ("   ", ""),
    ],
)
def test_prefix_classes(classes: str, expected: str) -> None:
    assert prefix_classes(classes, "md:") == expected


class TestResolveResponsiveClasses:
    """Tests for resolve_responsive_classes."""

    def test_concatenates_mobile_tablet_desktop(self) -> None:
        style = ResponsiveClassName(mobile="text-sm p-2", tablet="text-base", desktop="text-lg p-6")
        assert resolve_responsive_classes(style) == "text-sm p-2 md:text-base lg:text-lg lg:p-6"

    def test_empty_slots_contribute_nothing(self) -> None:
        assert resolve_responsive_classes(ResponsiveClassName(desktop="flex")) == "lg:flex"
        assert resolve_responsive_classes(ResponsiveClassName()) == ""
        assert resolve_responsive_classes(None) == ""

    def test_qualified_tokens_pass_through(self) -> None:
        style = ResponsiveClassName(tablet="sm:hidden", desktop="xl:block")
        assert resolve_responsive_classes(style) == "sm:hidden xl:block"

    def test_custom_prefixes(self) -> None:
        style = ResponsiveClassName(tablet="a", desktop="b")
        assert resolve_responsive_classes(style, tablet_prefix="t-", desktop_prefix="d-") == "t-a d-b"


class TestComposeClassName:
    """Tests for compose_class_name."""

    def test_legacy_then_responsive(self) -> None:
        leaf = ContentLeaf(
            id="x",
            type="paragraph",
            class_name=" text-muted ",
            responsive_class_name=ResponsiveClassName(mobile="text-center", tablet="text-left"),
        )
        assert compose_class_name(leaf) == "text-muted text-center md:text-left"

    def test_fallback_when_empty(self) -> None:
        leaf = ContentLeaf(id="x", type="paragraph", class_name="")
        assert compose_class_name(leaf, fallback="space-y-4") == "space-y-4"
