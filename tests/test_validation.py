"""Tests for structural validation."""

from __future__ import annotations

from pagebuilder.schemas import Column, ContentLeaf, Row, Section
from pagebuilder.validation import duplicate_ids, is_valid_tree, structure_problems


def test_fixture_is_valid(page: list) -> None:
    assert structure_problems(page) == []
    assert is_valid_tree(page)


def test_reports_misplaced_nodes() -> None:
    tree = [Row(id="r", columns=[Column(id="c", children=[Section(id="s")])])]
    problems = structure_problems(tree)
    assert "row r not allowed in root" in problems
    assert "section s not allowed in columnChildren" in problems


def test_reports_empty_row() -> None:
    tree = [Section(id="s", children=[Row(id="r")])]
    assert structure_problems(tree) == ["row r has no columns"]


def test_reports_duplicate_ids() -> None:
    tree = [Section(id="x", children=[Row(id="x", columns=[Column(id="c")])])]
    assert duplicate_ids(tree) == ["x"]
    assert "duplicate id x" in structure_problems(tree)


def test_legacy_leaves_allowed_on_request() -> None:
    tree = [ContentLeaf(id="a", type="h1"), Section(id="s", children=[ContentLeaf(id="b", type="faq")])]
    assert len(structure_problems(tree)) == 2
    assert structure_problems(tree, allow_legacy=True) == []
