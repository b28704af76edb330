"""CLI argument parser and dispatch for taskpilot."""

import argparse

from taskpilot.cli.board import board_add, board_delete, board_get, board_list, board_rename
from taskpilot.cli.card import card_add, card_delete, card_edit, card_get, card_list, card_move
from taskpilot.cli.lists import list_add, list_delete, list_list, list_move, list_rename
from taskpilot.cli.web import web


def build_parser() -> argparse.ArgumentParser:
    """Build the full CLI argument parser."""
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--config", default=argparse.SUPPRESS, help="Path to config file")
    common.add_argument("--json", action="store_true", default=argparse.SUPPRESS, help="Machine-readable JSON output")

    # Not from common: parent actions are shared and must keep their SUPPRESS defaults
    parser = argparse.ArgumentParser(
        prog="taskpilot",
        description="Kanban boards in the terminal. Run without a command to open the board UI.",
    )
    parser.add_argument("--config", default=None, help="Path to config file")
    parser.add_argument("--json", action="store_true", help="Machine-readable JSON output")

    nouns = parser.add_subparsers(dest="noun")

    # --- board ---
    board_p = nouns.add_parser("board", help="Board operations", parents=[common])
    board_verbs = board_p.add_subparsers(dest="verb")

    board_list_p = board_verbs.add_parser("list", help="List boards", parents=[common])
    board_list_p.set_defaults(func=board_list)

    board_add_p = board_verbs.add_parser("add", help="Create a board", parents=[common])
    board_add_p.add_argument("name", help="Board name")
    board_add_p.set_defaults(func=board_add)

    board_rename_p = board_verbs.add_parser("rename", help="Rename a board", parents=[common])
    board_rename_p.add_argument("id", help="Board ID")
    board_rename_p.add_argument("name", help="New board name")
    board_rename_p.set_defaults(func=board_rename)

    board_delete_p = board_verbs.add_parser("delete", help="Delete a board and everything on it", parents=[common])
    board_delete_p.add_argument("id", help="Board ID")
    board_delete_p.set_defaults(func=board_delete)

    board_get_p = board_verbs.add_parser("get", help="Show a board", parents=[common])
    board_get_p.add_argument("id", help="Board ID")
    board_get_p.set_defaults(func=board_get)

    # board with no verb = list
    board_p.set_defaults(func=board_list)

    # --- list ---
    list_p = nouns.add_parser("list", help="List operations", parents=[common])
    list_verbs = list_p.add_subparsers(dest="verb")

    list_list_p = list_verbs.add_parser("list", help="Show the lists on a board", parents=[common])
    list_list_p.add_argument("board", help="Board ID")
    list_list_p.set_defaults(func=list_list)

    list_add_p = list_verbs.add_parser("add", help="Create a list", parents=[common])
    list_add_p.add_argument("board", help="Board ID")
    list_add_p.add_argument("name", help="List name")
    list_add_p.set_defaults(func=list_add)

    list_rename_p = list_verbs.add_parser("rename", help="Rename a list", parents=[common])
    list_rename_p.add_argument("board", help="Board ID")
    list_rename_p.add_argument("id", help="List ID")
    list_rename_p.add_argument("name", help="New list name")
    list_rename_p.set_defaults(func=list_rename)

    list_delete_p = list_verbs.add_parser("delete", help="Delete a list and its cards", parents=[common])
    list_delete_p.add_argument("board", help="Board ID")
    list_delete_p.add_argument("id", help="List ID")
    list_delete_p.set_defaults(func=list_delete)

    list_move_p = list_verbs.add_parser("move", help="Move a list", parents=[common])
    list_move_p.add_argument("board", help="Board ID")
    list_move_p.add_argument("id", help="List ID")
    list_move_p.add_argument("--position", type=int, required=True, help="New position (1-indexed)")
    list_move_p.set_defaults(func=list_move)

    # --- card ---
    card_p = nouns.add_parser("card", help="Card operations", parents=[common])
    card_verbs = card_p.add_subparsers(dest="verb")

    card_list_p = card_verbs.add_parser("list", help="List cards", parents=[common])
    card_list_p.add_argument("board", help="Board ID")
    card_list_p.add_argument("--list", dest="list", help="Filter by list ID")
    card_list_p.set_defaults(func=card_list)

    card_add_p = card_verbs.add_parser("add", help="Create a card", parents=[common])
    card_add_p.add_argument("board", help="Board ID")
    card_add_p.add_argument("list", help="List ID")
    card_add_p.add_argument("title", help="Card title")
    card_add_p.add_argument("--description", default="", help="Card description")
    card_add_p.set_defaults(func=card_add)

    card_get_p = card_verbs.add_parser("get", help="Show a card", parents=[common])
    card_get_p.add_argument("board", help="Board ID")
    card_get_p.add_argument("id", help="Card ID")
    card_get_p.set_defaults(func=card_get)

    card_edit_p = card_verbs.add_parser("edit", help="Edit a card", parents=[common])
    card_edit_p.add_argument("board", help="Board ID")
    card_edit_p.add_argument("id", help="Card ID")
    card_edit_p.add_argument("--title", help="New title")
    card_edit_p.add_argument("--description", help="New description")
    card_edit_p.set_defaults(func=card_edit)

    card_delete_p = card_verbs.add_parser("delete", help="Delete a card", parents=[common])
    card_delete_p.add_argument("board", help="Board ID")
    card_delete_p.add_argument("id", help="Card ID")
    card_delete_p.set_defaults(func=card_delete)

    card_move_p = card_verbs.add_parser("move", help="Move a card", parents=[common])
    card_move_p.add_argument("board", help="Board ID")
    card_move_p.add_argument("id", help="Card ID")
    card_move_p.add_argument("--list", dest="list", required=True, help="Target list ID")
    card_move_p.add_argument("--board", dest="target_board", help="Target board ID (default: same board)")
    card_move_p.add_argument("--position", type=int, help="Position in list (1-indexed, default: end)")
    card_move_p.set_defaults(func=card_move)

    # --- web ---
    web_p = nouns.add_parser("web", help="Serve the board UI in a browser", parents=[common])
    web_p.add_argument("--host", default="localhost", help="Bind address (default: localhost)")
    web_p.add_argument("--port", type=int, default=8617, help="Port (default: 8617)")
    web_p.set_defaults(func=web)

    return parser
