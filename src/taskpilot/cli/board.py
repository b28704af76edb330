"""Handlers for 'taskpilot board' commands."""

from taskpilot.cli._common import (
    find_board,
    load_store_or_die,
    output_json,
    output_result,
    plural,
    require_text,
)


def board_list(args) -> int:
    """List boards with their list counts."""
    store = load_store_or_die(args.config, args.json)

    items = [{"id": b.id, "name": b.name, "lists": len(b.lists)} for b in store.boards]

    if args.json:
        output_json(items)
    elif not items:
        print("No boards yet.")
    else:
        for b in items:
            print(f"{b['id']}  {b['name']:<20} {plural(b['lists'], 'list')}")

    return 0


def board_add(args) -> int:
    """Create a new board."""
    name = require_text(args.name, "Board name", args.json)
    store = load_store_or_die(args.config, args.json)

    board = store.create_board(name)

    output_result({"id": board.id, "name": board.name}, f'Created board "{name}" (id {board.id})', args.json)
    return 0


def board_rename(args) -> int:
    """Rename a board."""
    name = require_text(args.name, "Board name", args.json)
    store = load_store_or_die(args.config, args.json)
    board = find_board(store, args.id, args.json)

    old_name = board.name
    store.update_board(board.id, name)

    output_result(
        {"id": board.id, "old_name": old_name, "new_name": name},
        f'Renamed board "{old_name}" to "{name}"',
        args.json,
    )
    return 0


def board_delete(args) -> int:
    """Delete a board with all its lists and cards."""
    store = load_store_or_die(args.config, args.json)
    board = find_board(store, args.id, args.json)

    store.delete_board(board.id)

    output_result({"id": board.id, "name": board.name}, f'Deleted board "{board.name}"', args.json)
    return 0


def board_get(args) -> int:
    """Dump one board as its stored document."""
    store = load_store_or_die(args.config, args.json)
    board = find_board(store, args.id, args.json)

    if args.json:
        output_json(board.to_dict())
        return 0

    print(board.name)
    if not board.lists:
        print("  (no lists)")
    for lst in board.lists:
        print(f"  {lst.id}  {lst.name}")
        for card in lst.cards:
            print(f"    {card.id}  {card.title}")
    return 0

