"""Shared helpers for CLI command handlers."""

import json
import logging
import sys

from taskpilot.config import load_config
from taskpilot.errors import TaskPilotError
from taskpilot.ids import make_id_source
from taskpilot.model.entities import Board, BoardList, Card
from taskpilot.model.store import BoardStore
from taskpilot.storage import open_storage


def configure_logging(level: str) -> None:
    logging.basicConfig(
        format="%(asctime)s %(levelname)s %(message)s",
        stream=sys.stderr,
        level=getattr(logging, str(level).upper(), logging.WARNING),
    )


def load_store_or_die(config_file: str | None, json_mode: bool, log: bool = True) -> BoardStore:
    """Open the configured store. Exit 1 with message if it can't be read.

    log=False leaves logging unconfigured, for the TUI which owns the terminal.
    """
    try:
        config = load_config(config_file)
        if log:
            configure_logging(config["log_level"])
        storage = open_storage(config)
        return BoardStore.open(storage, make_id_source(config["ids"]))
    except (TaskPilotError, ValueError) as e:
        error(str(e), json_mode)


def find_board(store: BoardStore, board_id: str, json_mode: bool) -> Board:
    """Lookup board by ID. Exit 1 listing available boards if not found."""
    board = store.get_board(board_id)
    if board is not None:
        return board
    available = [f"  {b.id}  {b.name}" for b in store.boards]
    error(f"Board '{board_id}' not found. Available:\n" + "\n".join(available), json_mode)


def find_list(store: BoardStore, board: Board, list_id: str, json_mode: bool) -> BoardList:
    """Lookup list by ID within a board. Exit 1 listing available lists if not found."""
    lst = store.get_list(board.id, list_id)
    if lst is not None:
        return lst
    available = [f"  {lst.id}  {lst.name}" for lst in board.lists]
    error(f"List '{list_id}' not found on board '{board.name}'. Available:\n" + "\n".join(available), json_mode)


def find_card(store: BoardStore, board: Board, card_id: str, json_mode: bool) -> tuple[BoardList, Card]:
    """Lookup card by ID anywhere on a board. Exit 1 if not found."""
    lst = store.find_card_list(board.id, card_id)
    if lst is not None:
        return lst, lst.get_card(card_id)
    error(f"Card '{card_id}' not found on board '{board.name}'.", json_mode)


def require_text(value: str | None, what: str, json_mode: bool) -> str:
    """Strip value. Exit 1 if nothing is left."""
    text = (value or "").strip()
    if not text:
        error(f"{what} must not be empty.", json_mode)
    return text


def require_position(position: int, json_mode: bool) -> int:
    """Exit 1 unless position is a valid 1-indexed position."""
    if position < 1:
        error(f"Position must be 1 or more, got {position}.", json_mode)
    return position


def output_json(data: dict | list) -> None:
    """Write JSON to stdout."""
    print(json.dumps(data, indent=2))


def output_result(data: dict, text: str, json_mode: bool) -> None:
    """Output mutation result as JSON or plain text."""
    if json_mode:
        output_json(data)
    else:
        print(text)


def error(message: str, json_mode: bool) -> None:
    """Print error to stderr and exit 1."""
    if json_mode:
        print(json.dumps({"error": message}), file=sys.stderr)
    else:
        print(f"error: {message}", file=sys.stderr)
    sys.exit(1)


def plural(count: int, word: str) -> str:
    return f"{count} {word}" if count == 1 else f"{count} {word}s"
