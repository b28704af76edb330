"""Tests for CLI argument parsing and dispatch."""

import json

import pytest

from taskpilot.cli import build_parser
from taskpilot.cli.board import board_list
from taskpilot.cli.card import card_move
from taskpilot.cli.lists import list_move
from taskpilot.cli.web import web


def test_no_command_opens_tui():
    args = build_parser().parse_args([])
    assert args.noun is None
    assert getattr(args, "func", None) is None
    assert args.config is None
    assert args.json is False


def test_board_defaults_to_list():
    args = build_parser().parse_args(["board"])
    assert args.func is board_list


def test_global_flags_after_verb():
    args = build_parser().parse_args(["board", "list", "--json", "--config", "c.yaml"])
    assert args.json is True
    assert args.config == "c.yaml"


def test_global_flags_before_noun():
    args = build_parser().parse_args(["--json", "board", "list"])
    assert args.json is True


def test_global_flags_before_noun_reach_the_verb():
    args = build_parser().parse_args(["--config", "mine.yaml", "--json", "board", "add", "X"])
    assert args.config == "mine.yaml"
    assert args.json is True
    assert args.name == "X"


def test_verb_flag_overrides_global_flag():
    args = build_parser().parse_args(["--config", "a.yaml", "card", "list", "1", "--config", "b.yaml"])
    assert args.config == "b.yaml"
    assert args.json is False


def test_card_move_args():
    args = build_parser().parse_args(["card", "move", "1", "5", "--list", "3", "--board", "7", "--position", "2"])
    assert args.func is card_move
    assert (args.board, args.id, args.list, args.target_board, args.position) == ("1", "5", "3", "7", 2)


def test_card_move_position_optional():
    args = build_parser().parse_args(["card", "move", "1", "5", "--list", "3"])
    assert args.position is None
    assert args.target_board is None


def test_list_move_requires_position():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["list", "move", "1", "2"])


def test_list_move_args():
    args = build_parser().parse_args(["list", "move", "1", "2", "--position", "3"])
    assert args.func is list_move
    assert args.position == 3


def test_web_defaults():
    args = build_parser().parse_args(["web"])
    assert args.func is web
    assert args.host == "localhost"
    assert args.port == 8617


def test_main_dispatches(populated, monkeypatch, capsys):
    from taskpilot.__main__ import main

    monkeypatch.setattr("sys.argv", ["taskpilot", "board", "list", "--config", populated])
    with pytest.raises(SystemExit) as exc:
        main()
    assert exc.value.code == 0
    assert "Sprint 1" in capsys.readouterr().out


def test_main_noun_without_verb_shows_help(monkeypatch, capsys):
    from taskpilot.__main__ import main

    monkeypatch.setattr("sys.argv", ["taskpilot", "card"])
    with pytest.raises(SystemExit):
        main()
    assert "usage:" in capsys.readouterr().out


def test_main_global_config_before_noun(config_file, reload, monkeypatch, capsys):
    from taskpilot.__main__ import main

    monkeypatch.setattr("sys.argv", ["taskpilot", "--config", config_file, "--json", "board", "add", "Roadmap"])
    with pytest.raises(SystemExit) as exc:
        main()
    assert exc.value.code == 0
    assert json.loads(capsys.readouterr().out)["name"] == "Roadmap"
    assert [b.name for b in reload().boards] == ["Roadmap"]
