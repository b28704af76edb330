"""Shared fixtures for CLI tests."""

import pytest

from taskpilot.ids import CounterIds
from taskpilot.model.store import BoardStore
from taskpilot.storage import FileStorage


@pytest.fixture
def boards_path(tmp_path):
    return tmp_path / "boards.json"


@pytest.fixture
def config_file(tmp_path, boards_path):
    """A config file pointing the file backend at tmp_path."""
    path = tmp_path / "config.yaml"
    path.write_text(f"backend: file\npath: {boards_path}\nids: counter\n")
    return str(path)


@pytest.fixture
def populated(config_file, boards_path):
    """Board "Sprint 1" (id 1): Todo (2) with cards A (5) and B (6), Doing (3), Done (4)."""
    store = BoardStore(FileStorage(boards_path), CounterIds())
    board = store.create_board("Sprint 1")
    todo = store.create_list(board.id, "Todo")
    store.create_list(board.id, "Doing")
    store.create_list(board.id, "Done")
    store.create_card(board.id, todo.id, "A", "First card.")
    store.create_card(board.id, todo.id, "B")
    return config_file


@pytest.fixture
def reload(boards_path):
    """Read the store back from disk."""

    def _reload():
        return BoardStore.open(FileStorage(boards_path), CounterIds())

    return _reload
