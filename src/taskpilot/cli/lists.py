"""Handlers for 'taskpilot list' commands."""

from taskpilot.cli._common import (
    find_board,
    find_list,
    load_store_or_die,
    output_json,
    output_result,
    plural,
    require_position,
    require_text,
)


def list_list(args) -> int:
    """List the lists on a board."""
    store = load_store_or_die(args.config, args.json)
    board = find_board(store, args.board, args.json)

    items = [{"id": lst.id, "name": lst.name, "cards": len(lst.cards)} for lst in board.lists]

    if args.json:
        output_json(items)
    else:
        for c in items:
            print(f"{c['id']}  {c['name']:<16} {plural(c['cards'], 'card')}")

    return 0


def list_add(args) -> int:
    """Append a list to a board."""
    name = require_text(args.name, "List name", args.json)
    store = load_store_or_die(args.config, args.json)
    board = find_board(store, args.board, args.json)

    lst = store.create_list(board.id, name)

    output_result(
        {"id": lst.id, "name": name, "board": {"id": board.id, "name": board.name}},
        f'Created list "{name}" (id {lst.id}) on {board.name}',
        args.json,
    )
    return 0


def list_rename(args) -> int:
    """Rename a list."""
    name = require_text(args.name, "List name", args.json)
    store = load_store_or_die(args.config, args.json)
    board = find_board(store, args.board, args.json)
    lst = find_list(store, board, args.id, args.json)

    old_name = lst.name
    store.update_list(board.id, lst.id, name)

    output_result(
        {"id": lst.id, "old_name": old_name, "new_name": name},
        f'Renamed list "{old_name}" to "{name}"',
        args.json,
    )
    return 0


def list_delete(args) -> int:
    """Delete a list and its cards."""
    store = load_store_or_die(args.config, args.json)
    board = find_board(store, args.board, args.json)
    lst = find_list(store, board, args.id, args.json)

    card_count = len(lst.cards)
    store.delete_list(board.id, lst.id)

    output_result(
        {"id": lst.id, "name": lst.name, "cards": card_count},
        f'Deleted list "{lst.name}" and {plural(card_count, "card")}',
        args.json,
    )
    return 0


def list_move(args) -> int:
    """Move a list to a new position on its board."""
    require_position(args.position, args.json)
    store = load_store_or_die(args.config, args.json)
    board = find_board(store, args.board, args.json)
    lst = find_list(store, board, args.id, args.json)

    # CLI uses 1-indexed positions, model uses 0-indexed
    store.move_list(board.id, lst.id, args.position - 1)
    position = board.list_index(lst.id) + 1

    output_result(
        {"id": lst.id, "name": lst.name, "position": position},
        f'Moved list "{lst.name}" to position {position}',
        args.json,
    )
    return 0
