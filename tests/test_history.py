"""Tests for undo/redo history."""

from __future__ import annotations

from pagebuilder.history import History
from pagebuilder.operations import insert_section


def test_commit_undo_redo_scenario() -> None:
    """Three inserts, two undos, one redo."""
    history = History()
    states = [history.current]
    for _ in range(3):
        history.commit(insert_section(history.current))
        states.append(history.current)

    assert history.undo()
    assert history.undo()
    assert history.current == states[1]

    assert history.redo()
    assert history.current == states[2]
    assert history.can_undo and history.can_redo


def test_undo_redo_on_empty_stacks_are_noops() -> None:
    history = History()
    assert not history.undo()
    assert not history.redo()
    assert history.current == []


def test_commit_clears_future() -> None:
    history = History()
    history.commit(insert_section(history.current))
    history.undo()
    assert history.can_redo

    history.commit(insert_section(history.current, "hero"))
    assert not history.can_redo
    assert len(history.past) == 1


def test_future_is_ordered_front_first() -> None:
    history = History()
    history.commit(insert_section(history.current))
    first = history.current
    history.commit(insert_section(history.current))
    second = history.current

    history.undo()
    history.undo()
    assert history.future == [first, second]


def test_reset_discards_both_stacks() -> None:
    history = History()
    history.commit(insert_section(history.current))
    history.undo()
    loaded = insert_section([], "footer")

    history.reset(loaded)

    assert history.current == loaded
    assert history.past == [] and history.future == []
    assert not history.undo()
