"""Board, list and card entities and their document form."""

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any

from taskpilot.errors import DocumentError


@dataclass
class Card:
    """A unit of work inside a list."""

    id: str
    title: str
    description: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "title": self.title, "description": self.description}


@dataclass
class BoardList:
    """A named, ordered column of cards."""

    id: str
    name: str
    cards: list[Card] = field(default_factory=list)

    def card_index(self, card_id: str) -> int:
        """Index of the card with card_id, or -1."""
        for i, card in enumerate(self.cards):
            if card.id == card_id:
                return i
        return -1

    def get_card(self, card_id: str) -> Card | None:
        idx = self.card_index(card_id)
        return self.cards[idx] if idx >= 0 else None

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "name": self.name, "cards": [c.to_dict() for c in self.cards]}


@dataclass
class Board:
    """A board owning an ordered sequence of lists."""

    id: str
    name: str
    lists: list[BoardList] = field(default_factory=list)

    def list_index(self, list_id: str) -> int:
        """Index of the list with list_id, or -1."""
        for i, lst in enumerate(self.lists):
            if lst.id == list_id:
                return i
        return -1

    def get_list(self, list_id: str) -> BoardList | None:
        idx = self.list_index(list_id)
        return self.lists[idx] if idx >= 0 else None

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "name": self.name, "lists": [lst.to_dict() for lst in self.lists]}


def iter_ids(boards: list[Board]) -> Iterator[str]:
    """Yield every board, list and card id in the tree."""
    for board in boards:
        yield board.id
        for lst in board.lists:
            yield lst.id
            for card in lst.cards:
                yield card.id


def to_document(boards: list[Board]) -> list[dict[str, Any]]:
    """Serialize the board tree to plain lists and dicts."""
    return [board.to_dict() for board in boards]


def _require_mapping(raw: Any, what: str) -> dict:
    if not isinstance(raw, dict):
        raise DocumentError(f"Expected {what} to be a mapping, got {type(raw).__name__}")
    return raw


def _require_list(raw: Any, what: str) -> list:
    if raw is None:
        return []
    if not isinstance(raw, list):
        raise DocumentError(f"Expected {what} to be a list, got {type(raw).__name__}")
    return raw


def _card_from_dict(raw: Any) -> Card:
    raw = _require_mapping(raw, "card")
    return Card(
        id=str(raw.get("id", "")),
        title=str(raw.get("title", "")),
        description=str(raw.get("description") or ""),
    )


def _list_from_dict(raw: Any) -> BoardList:
    raw = _require_mapping(raw, "list")
    return BoardList(
        id=str(raw.get("id", "")),
        name=str(raw.get("name", "")),
        cards=[_card_from_dict(c) for c in _require_list(raw.get("cards"), "list cards")],
    )


def _board_from_dict(raw: Any) -> Board:
    raw = _require_mapping(raw, "board")
    return Board(
        id=str(raw.get("id", "")),
        name=str(raw.get("name", "")),
        lists=[_list_from_dict(lst) for lst in _require_list(raw.get("lists"), "board lists")],
    )


def from_document(document: Any) -> list[Board]:
    """Rebuild the board tree from its document form.

    Missing lists, cards and descriptions decode as empty.
    Raises DocumentError if the shape is wrong.
    """
    if not isinstance(document, list):
        raise DocumentError(f"Expected a list of boards, got {type(document).__name__}")
    return [_board_from_dict(raw) for raw in document]
