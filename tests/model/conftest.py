"""Shared fixtures for model tests."""

import pytest

from taskpilot.ids import CounterIds
from taskpilot.model.store import BoardStore
from taskpilot.storage import MemoryStorage


@pytest.fixture
def storage():
    return MemoryStorage()


@pytest.fixture
def store(storage):
    """An empty store over memory storage with counter ids."""
    return BoardStore(storage, CounterIds())


@pytest.fixture
def sprint(store):
    """Board "Sprint 1" with lists Todo, Doing, Done and cards A, B in Todo.

    Counter ids: board "1", lists "2", "3", "4", cards "5", "6".
    """
    board = store.create_board("Sprint 1")
    todo = store.create_list(board.id, "Todo")
    doing = store.create_list(board.id, "Doing")
    done = store.create_list(board.id, "Done")
    a = store.create_card(board.id, todo.id, "A")
    b = store.create_card(board.id, todo.id, "B", "second card")
    return {"board": board, "todo": todo, "doing": doing, "done": done, "a": a, "b": b}
