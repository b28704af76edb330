"""Board tree model and store."""

from taskpilot.model.entities import Board, BoardList, Card, from_document, to_document
from taskpilot.model.store import BoardStore

__all__ = [
    "Board",
    "BoardList",
    "BoardStore",
    "Card",
    "from_document",
    "to_document",
]
