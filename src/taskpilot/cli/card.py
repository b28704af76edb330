"""Handlers for 'taskpilot card' commands."""

from taskpilot.cli._common import (
    find_board,
    find_card,
    find_list,
    load_store_or_die,
    output_json,
    output_result,
    require_position,
    require_text,
)


def card_list(args) -> int:
    """List cards grouped by list."""
    store = load_store_or_die(args.config, args.json)
    board = find_board(store, args.board, args.json)

    lists = board.lists
    if args.list:
        lists = [find_list(store, board, args.list, args.json)]

    if args.json:
        items = [
            {"id": card.id, "title": card.title, "list": {"id": lst.id, "name": lst.name}}
            for lst in lists
            for card in lst.cards
        ]
        output_json(items)
    else:
        for lst in lists:
            print(f"{lst.id}  {lst.name}")
            for card in lst.cards:
                print(f"  {card.id}  {card.title}")

    return 0


def card_add(args) -> int:
    """Append a card to a list."""
    title = require_text(args.title, "Card title", args.json)
    store = load_store_or_die(args.config, args.json)
    board = find_board(store, args.board, args.json)
    lst = find_list(store, board, args.list, args.json)

    card = store.create_card(board.id, lst.id, title, (args.description or "").strip())

    output_result(
        {"id": card.id, "title": title, "list": {"id": lst.id, "name": lst.name}},
        f"Created card {card.id} in {lst.name}",
        args.json,
    )
    return 0


def card_get(args) -> int:
    """Show a card's title and description."""
    store = load_store_or_die(args.config, args.json)
    board = find_board(store, args.board, args.json)
    lst, card = find_card(store, board, args.id, args.json)

    if args.json:
        data = card.to_dict()
        data["list"] = {"id": lst.id, "name": lst.name}
        output_json(data)
    else:
        print(card.title)
        if card.description:
            print()
            print(card.description)

    return 0


def card_edit(args) -> int:
    """Change a card's title and/or description."""
    store = load_store_or_die(args.config, args.json)
    board = find_board(store, args.board, args.json)
    lst, card = find_card(store, board, args.id, args.json)

    title = require_text(args.title, "Card title", args.json) if args.title is not None else card.title
    description = args.description.strip() if args.description is not None else card.description
    store.update_card(board.id, lst.id, card.id, title, description)

    output_result(
        {"id": card.id, "title": title, "description": description},
        f"Updated card {card.id}",
        args.json,
    )
    return 0


def card_delete(args) -> int:
    """Delete a card."""
    store = load_store_or_die(args.config, args.json)
    board = find_board(store, args.board, args.json)
    lst, card = find_card(store, board, args.id, args.json)

    store.delete_card(board.id, lst.id, card.id)

    output_result({"id": card.id, "title": card.title}, f'Deleted card {card.id} "{card.title}"', args.json)
    return 0


def card_move(args) -> int:
    """Move a card to a list, possibly on another board."""
    if args.position is not None:
        require_position(args.position, args.json)
    store = load_store_or_die(args.config, args.json)
    board = find_board(store, args.board, args.json)
    source, card = find_card(store, board, args.id, args.json)
    target_board = find_board(store, args.target_board, args.json) if args.target_board else board
    target = find_list(store, target_board, args.list, args.json)

    # CLI uses 1-indexed positions, model uses 0-indexed; omitted appends
    position = args.position - 1 if args.position is not None else len(target.cards)
    store.move_card(board.id, source.id, card.id, target_board.id, target.id, position)
    index = target.card_index(card.id)

    output_result(
        {
            "id": card.id,
            "list": {"id": target.id, "name": target.name},
            "board": {"id": target_board.id, "name": target_board.name},
            "position": index + 1,
        },
        f"Moved card {card.id} to {target.name} at position {index + 1}",
        args.json,
    )
    return 0
