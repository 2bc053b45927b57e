"""Test setup for pagebuilder."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from pagebuilder.schemas import Column, ContentLeaf, ResponsiveClassName, Row, Section  # noqa: E402


@pytest.fixture
def page() -> list:
    """Two sections with fixed ids.

    S1 > R1 > C1 [P, H] and C2 [I]; S2 > R2 > C3 [].
    """
    return [
        Section(
            id="S1",
            title="Intro",
            children=[
                Row(
                    id="R1",
                    columns=[
                        Column(
                            id="C1",
                            width="1/2",
                            children=[
                                ContentLeaf(id="P", type="paragraph", text="Hello"),
                                ContentLeaf(
                                    id="H",
                                    type="h1",
                                    text="Title",
                                    responsive_class_name=ResponsiveClassName(tablet="text-xl", desktop="text-2xl"),
                                ),
                            ],
                        ),
                        Column(
                            id="C2",
                            width="1/2",
                            children=[ContentLeaf(id="I", type="image", text="Hero", alt_text="A hero")],
                        ),
                    ],
                )
            ],
        ),
        Section(
            id="S2",
            title="Outro",
            children=[Row(id="R2", columns=[Column(id="C3", width="1/1")])],
        ),
    ]


@pytest.fixture
def legacy_payload() -> dict:
    """A flat page saved before sections existed."""
    return {
        "blocks": [
            {"id": "a", "type": "h1", "content": "Welcome", "className": ""},
            {"id": "b", "type": "paragraph", "content": "First"},
            {"id": "c", "type": "faq", "content": "Why?"},
            {"id": "d", "type": "image", "content": "Photo", "alt": "A photo"},
            {"id": "e", "type": "cta", "content": "Go"},
        ]
    }
