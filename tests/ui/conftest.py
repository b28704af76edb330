"""Fixtures for UI tests."""

import pytest

from taskpilot.ids import CounterIds
from taskpilot.model.store import BoardStore
from taskpilot.storage import MemoryStorage


@pytest.fixture
def store():
    return BoardStore(MemoryStorage(), CounterIds())


@pytest.fixture
def sprint_store(store):
    """Board "Sprint 1" (1): Todo (2) with A (5), B (6); Doing (3); Done (4)."""
    board = store.create_board("Sprint 1")
    todo = store.create_list(board.id, "Todo")
    store.create_list(board.id, "Doing")
    store.create_list(board.id, "Done")
    store.create_card(board.id, todo.id, "A", "Refers to #6.")
    store.create_card(board.id, todo.id, "B")
    return store
