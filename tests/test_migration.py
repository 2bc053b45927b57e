"""Tests for legacy page migration."""

from __future__ import annotations

from pagebuilder.migration import migrate, normalize_blocks
from pagebuilder.schemas import Column, Row, Section
from pagebuilder.serialization import deserialize_document
from pagebuilder.validation import structure_problems


def test_flat_leaves_are_wrapped(legacy_payload: dict) -> None:
    """Five bare leaves become one section > row > column in order."""
    result = normalize_blocks(deserialize_document(legacy_payload))

    assert result.did_migrate
    assert len(result.blocks) == 1
    section = result.blocks[0]
    assert isinstance(section, Section)
    assert len(section.children) == 1
    row = section.children[0]
    assert isinstance(row, Row)
    assert len(row.columns) == 1
    column = row.columns[0]
    assert isinstance(column, Column)
    assert column.width == "1/1"
    assert [leaf.id for leaf in column.children] == ["a", "b", "c", "d", "e"]
    assert structure_problems(result.blocks) == []


def test_empty_tree_is_not_migrated() -> None:
    result = normalize_blocks([])
    assert not result.did_migrate
    assert result.blocks == []


def test_structured_tree_is_untouched(page: list) -> None:
    result = normalize_blocks(page)
    assert not result.did_migrate
    assert result.blocks == page


def test_migration_is_idempotent(legacy_payload: dict) -> None:
    once = migrate(deserialize_document(legacy_payload))
    assert migrate(once) == once
