"""Tests for 'taskpilot card' commands."""

import json
from argparse import Namespace

import pytest

from taskpilot.cli.card import card_add, card_delete, card_edit, card_get, card_list, card_move


def _titles(store, list_id, board_id="1"):
    return [c.title for c in store.get_list(board_id, list_id).cards]


def test_card_list(populated, capsys):
    args = Namespace(config=populated, json=False, board="1", list=None)
    assert card_list(args) == 0

    out = capsys.readouterr().out
    assert "2  Todo" in out
    assert "  5  A" in out
    assert "  6  B" in out
    assert "3  Doing" in out


def test_card_list_filtered_json(populated, capsys):
    args = Namespace(config=populated, json=True, board="1", list="2")
    assert card_list(args) == 0

    data = json.loads(capsys.readouterr().out)
    assert [c["title"] for c in data] == ["A", "B"]
    assert data[0]["list"] == {"id": "2", "name": "Todo"}


def test_card_list_unknown_list(populated, capsys):
    args = Namespace(config=populated, json=False, board="1", list="99")
    with pytest.raises(SystemExit):
        card_list(args)
    assert "List '99' not found" in capsys.readouterr().err


def test_card_add(populated, capsys, reload):
    args = Namespace(config=populated, json=False, board="1", list="3", title="C", description="  notes  ")
    assert card_add(args) == 0

    assert "Created card 7 in Doing" in capsys.readouterr().out
    card = reload().get_card("1", "3", "7")
    assert card.title == "C"
    assert card.description == "notes"


def test_card_add_appends(populated, capsys, reload):
    args = Namespace(config=populated, json=True, board="1", list="2", title="C", description="")
    assert card_add(args) == 0

    assert json.loads(capsys.readouterr().out)["id"] == "7"
    assert _titles(reload(), "2") == ["A", "B", "C"]


def test_card_add_empty_title(populated, capsys, reload):
    args = Namespace(config=populated, json=False, board="1", list="2", title=" ", description="")
    with pytest.raises(SystemExit) as exc:
        card_add(args)
    assert exc.value.code == 1
    assert "Card title must not be empty" in capsys.readouterr().err
    assert _titles(reload(), "2") == ["A", "B"]


def test_card_get(populated, capsys):
    args = Namespace(config=populated, json=False, board="1", id="5")
    assert card_get(args) == 0

    out = capsys.readouterr().out
    assert out.splitlines()[0] == "A"
    assert "First card." in out


def test_card_get_json(populated, capsys):
    args = Namespace(config=populated, json=True, board="1", id="5")
    assert card_get(args) == 0

    data = json.loads(capsys.readouterr().out)
    assert data == {"id": "5", "title": "A", "description": "First card.", "list": {"id": "2", "name": "Todo"}}


def test_card_get_unknown(populated, capsys):
    args = Namespace(config=populated, json=False, board="1", id="99")
    with pytest.raises(SystemExit):
        card_get(args)
    assert "Card '99' not found" in capsys.readouterr().err


def test_card_edit_title_only(populated, capsys, reload):
    args = Namespace(config=populated, json=False, board="1", id="5", title="A!", description=None)
    assert card_edit(args) == 0

    assert "Updated card 5" in capsys.readouterr().out
    card = reload().get_card("1", "2", "5")
    assert card.title == "A!"
    assert card.description == "First card."


def test_card_edit_description_only(populated, capsys, reload):
    args = Namespace(config=populated, json=True, board="1", id="6", title=None, description="More.")
    assert card_edit(args) == 0

    data = json.loads(capsys.readouterr().out)
    assert data == {"id": "6", "title": "B", "description": "More."}
    assert reload().get_card("1", "2", "6").description == "More."


def test_card_delete(populated, capsys, reload):
    args = Namespace(config=populated, json=False, board="1", id="5")
    assert card_delete(args) == 0

    assert 'Deleted card 5 "A"' in capsys.readouterr().out
    assert _titles(reload(), "2") == ["B"]


def test_card_move(populated, capsys, reload):
    args = Namespace(config=populated, json=False, board="1", id="6", list="3", target_board=None, position=1)
    assert card_move(args) == 0

    assert "Moved card 6 to Doing at position 1" in capsys.readouterr().out
    store = reload()
    assert _titles(store, "3") == ["B"]
    assert _titles(store, "2") == ["A"]


def test_card_move_default_appends(populated, capsys, reload):
    first = Namespace(config=populated, json=False, board="1", id="5", list="3", target_board=None, position=None)
    assert card_move(first) == 0
    capsys.readouterr()

    args = Namespace(config=populated, json=True, board="1", id="6", list="3", target_board=None, position=None)
    assert card_move(args) == 0

    data = json.loads(capsys.readouterr().out)
    assert data["position"] == 2
    assert _titles(reload(), "3") == ["A", "B"]


def test_card_move_within_list(populated, capsys, reload):
    args = Namespace(config=populated, json=False, board="1", id="6", list="2", target_board=None, position=1)
    assert card_move(args) == 0

    assert _titles(reload(), "2") == ["B", "A"]


def test_card_move_to_other_board(populated, capsys, reload):
    from taskpilot.cli.board import board_add
    from taskpilot.cli.lists import list_add

    board_add(Namespace(config=populated, json=False, name="Sprint 2"))
    list_add(Namespace(config=populated, json=False, board="7", name="Backlog"))
    capsys.readouterr()

    args = Namespace(config=populated, json=True, board="1", id="5", list="8", target_board="7", position=None)
    assert card_move(args) == 0

    data = json.loads(capsys.readouterr().out)
    assert data["board"] == {"id": "7", "name": "Sprint 2"}
    store = reload()
    assert _titles(store, "8", board_id="7") == ["A"]
    assert _titles(store, "2") == ["B"]


def test_card_move_unknown_list(populated, capsys, reload):
    args = Namespace(config=populated, json=False, board="1", id="5", list="99", target_board=None, position=None)
    with pytest.raises(SystemExit) as exc:
        card_move(args)
    assert exc.value.code == 1
    assert _titles(reload(), "2") == ["A", "B"]


@pytest.mark.parametrize("position", [0, -2])
def test_card_move_rejects_position_below_one(populated, capsys, reload, position):
    args = Namespace(config=populated, json=True, board="1", id="5", list="3", target_board=None, position=position)
    with pytest.raises(SystemExit) as exc:
        card_move(args)
    assert exc.value.code == 1
    assert "Position must be 1 or more" in json.loads(capsys.readouterr().err)["error"]
    store = reload()
    assert _titles(store, "2") == ["A", "B"]
    assert _titles(store, "3") == []
