"""Tests for 'taskpilot list' commands."""

import json
from argparse import Namespace

import pytest

from taskpilot.cli.lists import list_add, list_delete, list_list, list_move, list_rename


def _list_names(store):
    return [lst.name for lst in store.get_board("1").lists]


def test_list_list(populated, capsys):
    args = Namespace(config=populated, json=False, board="1")
    assert list_list(args) == 0

    out = capsys.readouterr().out
    assert "Todo" in out
    assert "2 cards" in out
    assert "0 cards" in out


def test_list_list_json(populated, capsys):
    args = Namespace(config=populated, json=True, board="1")
    assert list_list(args) == 0

    data = json.loads(capsys.readouterr().out)
    assert data == [
        {"id": "2", "name": "Todo", "cards": 2},
        {"id": "3", "name": "Doing", "cards": 0},
        {"id": "4", "name": "Done", "cards": 0},
    ]


def test_list_add(populated, capsys, reload):
    args = Namespace(config=populated, json=False, board="1", name="Blocked")
    assert list_add(args) == 0

    assert 'Created list "Blocked" (id 7) on Sprint 1' in capsys.readouterr().out
    assert _list_names(reload()) == ["Todo", "Doing", "Done", "Blocked"]


def test_list_add_unknown_board(populated, capsys):
    args = Namespace(config=populated, json=False, board="99", name="Blocked")
    with pytest.raises(SystemExit) as exc:
        list_add(args)
    assert exc.value.code == 1
    assert "Board '99' not found" in capsys.readouterr().err


def test_list_rename(populated, capsys, reload):
    args = Namespace(config=populated, json=True, board="1", id="3", name="In progress")
    assert list_rename(args) == 0

    data = json.loads(capsys.readouterr().out)
    assert data == {"id": "3", "old_name": "Doing", "new_name": "In progress"}
    assert _list_names(reload()) == ["Todo", "In progress", "Done"]


def test_list_rename_unknown(populated, capsys):
    args = Namespace(config=populated, json=False, board="1", id="99", name="X")
    with pytest.raises(SystemExit):
        list_rename(args)

    err = capsys.readouterr().err
    assert "List '99' not found" in err
    assert "Doing" in err


def test_list_delete(populated, capsys, reload):
    args = Namespace(config=populated, json=False, board="1", id="2")
    assert list_delete(args) == 0

    assert 'Deleted list "Todo" and 2 cards' in capsys.readouterr().out
    store = reload()
    assert _list_names(store) == ["Doing", "Done"]
    assert store.find_card_list("1", "5") is None


def test_list_move(populated, capsys, reload):
    args = Namespace(config=populated, json=False, board="1", id="4", position=1)
    assert list_move(args) == 0

    assert 'Moved list "Done" to position 1' in capsys.readouterr().out
    assert _list_names(reload()) == ["Done", "Todo", "Doing"]


def test_list_move_past_end(populated, capsys, reload):
    args = Namespace(config=populated, json=True, board="1", id="2", position=10)
    assert list_move(args) == 0

    assert json.loads(capsys.readouterr().out)["position"] == 3
    assert _list_names(reload()) == ["Doing", "Done", "Todo"]


def test_list_move_rejects_position_below_one(populated, capsys, reload):
    args = Namespace(config=populated, json=False, board="1", id="2", position=0)
    with pytest.raises(SystemExit) as exc:
        list_move(args)
    assert exc.value.code == 1
    assert "Position must be 1 or more" in capsys.readouterr().err
    assert _list_names(reload()) == ["Todo", "Doing", "Done"]
