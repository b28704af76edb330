"""The board store: the single in-memory copy of all boards.

Every mutation that finds its target saves the full document through the
storage backend and then notifies watchers. Unknown ids are not errors:
lookups return None and mutations do nothing.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from taskpilot.ids import CounterIds, IdSource
from taskpilot.model.entities import Board, BoardList, Card, from_document, iter_ids, to_document

if TYPE_CHECKING:
    from taskpilot.storage import Storage

logger = logging.getLogger(__name__)

Callback = Callable[["BoardStore", str, Any], None]


def _insert_clamped(items: list, position: int, item: Any) -> int:
    """Insert item at position, appending when position is out of range.

    Returns the index the item landed at.
    """
    if 0 <= position <= len(items):
        items.insert(position, item)
        return position
    items.append(item)
    return len(items) - 1


class BoardStore:
    """Ordered tree of boards, lists and cards with CRUD and move operations."""

    def __init__(self, storage: Storage, id_source: IdSource | None = None):
        self.storage = storage
        self._ids = id_source if id_source is not None else CounterIds()
        self._boards: list[Board] = []
        self._watchers: list[Callback] = []

    @classmethod
    def open(cls, storage: Storage, id_source: IdSource | None = None) -> BoardStore:
        """Create a store and load it from storage."""
        store = cls(storage, id_source)
        store.load()
        return store

    # -- persistence and notification --

    def load(self) -> None:
        """Replace the in-memory tree with the stored document, if any."""
        document = self.storage.load()
        self._boards = from_document(document) if document is not None else []
        seed = getattr(self._ids, "seed", None)
        if seed is not None:
            seed(iter_ids(self._boards))
        logger.debug("loaded %d boards", len(self._boards))
        self._notify("load", None)

    def to_document(self) -> list[dict[str, Any]]:
        """The full tree in its persisted form."""
        return to_document(self._boards)

    def watch(self, callback: Callback) -> Callable[[], None]:
        """Call callback(store, operation, entity) after each mutation. Returns an unwatch callable."""
        self._watchers.append(callback)

        def unwatch() -> None:
            if callback in self._watchers:
                self._watchers.remove(callback)

        return unwatch

    def _notify(self, operation: str, entity: Any) -> None:
        for cb in list(self._watchers):
            cb(self, operation, entity)

    def _commit(self, operation: str, entity: Any) -> None:
        self.storage.save(self.to_document())
        logger.debug("%s %s", operation, getattr(entity, "id", entity))
        self._notify(operation, entity)

    def _ignored(self, operation: str, *ids: str) -> None:
        logger.debug("%s ignored, not found: %s", operation, "/".join(ids))

    # -- boards --

    @property
    def boards(self) -> list[Board]:
        """Boards in order. Mutate through the store, not this list."""
        return list(self._boards)

    def create_board(self, name: str) -> Board:
        board = Board(id=self._ids(), name=name)
        self._boards.append(board)
        self._commit("create_board", board)
        return board

    def get_board(self, board_id: str) -> Board | None:
        for board in self._boards:
            if board.id == board_id:
                return board
        return None

    def update_board(self, board_id: str, name: str) -> None:
        board = self.get_board(board_id)
        if board is None:
            self._ignored("update_board", board_id)
            return
        board.name = name
        self._commit("update_board", board)

    def delete_board(self, board_id: str) -> None:
        board = self.get_board(board_id)
        if board is None:
            self._ignored("delete_board", board_id)
            return
        self._boards.remove(board)
        self._commit("delete_board", board)

    # -- lists --

    def create_list(self, board_id: str, name: str) -> BoardList | None:
        board = self.get_board(board_id)
        if board is None:
            self._ignored("create_list", board_id)
            return None
        lst = BoardList(id=self._ids(), name=name)
        board.lists.append(lst)
        self._commit("create_list", lst)
        return lst

    def get_list(self, board_id: str, list_id: str) -> BoardList | None:
        board = self.get_board(board_id)
        if board is None:
            return None
        return board.get_list(list_id)

    def update_list(self, board_id: str, list_id: str, name: str) -> None:
        lst = self.get_list(board_id, list_id)
        if lst is None:
            self._ignored("update_list", board_id, list_id)
            return
        lst.name = name
        self._commit("update_list", lst)

    def delete_list(self, board_id: str, list_id: str) -> None:
        board = self.get_board(board_id)
        idx = board.list_index(list_id) if board is not None else -1
        if idx < 0:
            self._ignored("delete_list", board_id, list_id)
            return
        lst = board.lists.pop(idx)
        self._commit("delete_list", lst)

    def move_list(self, board_id: str, list_id: str, target_position: int) -> None:
        """Move a list within its board, appending when target_position is out of range."""
        board = self.get_board(board_id)
        idx = board.list_index(list_id) if board is not None else -1
        if idx < 0:
            self._ignored("move_list", board_id, list_id)
            return
        lst = board.lists.pop(idx)
        _insert_clamped(board.lists, target_position, lst)
        self._commit("move_list", lst)

    # -- cards --

    def create_card(self, board_id: str, list_id: str, title: str, description: str = "") -> Card | None:
        lst = self.get_list(board_id, list_id)
        if lst is None:
            self._ignored("create_card", board_id, list_id)
            return None
        card = Card(id=self._ids(), title=title, description=description)
        lst.cards.append(card)
        self._commit("create_card", card)
        return card

    def get_card(self, board_id: str, list_id: str, card_id: str) -> Card | None:
        lst = self.get_list(board_id, list_id)
        if lst is None:
            return None
        return lst.get_card(card_id)

    def find_card_list(self, board_id: str, card_id: str) -> BoardList | None:
        """Find the list on a board that holds card_id."""
        board = self.get_board(board_id)
        if board is None:
            return None
        for lst in board.lists:
            if lst.card_index(card_id) >= 0:
                return lst
        return None

    def update_card(self, board_id: str, list_id: str, card_id: str, title: str, description: str) -> None:
        card = self.get_card(board_id, list_id, card_id)
        if card is None:
            self._ignored("update_card", board_id, list_id, card_id)
            return
        card.title = title
        card.description = description
        self._commit("update_card", card)

    def delete_card(self, board_id: str, list_id: str, card_id: str) -> None:
        lst = self.get_list(board_id, list_id)
        idx = lst.card_index(card_id) if lst is not None else -1
        if idx < 0:
            self._ignored("delete_card", board_id, list_id, card_id)
            return
        card = lst.cards.pop(idx)
        self._commit("delete_card", card)

    def move_card(
        self,
        source_board_id: str,
        source_list_id: str,
        card_id: str,
        target_board_id: str,
        target_list_id: str,
        target_position: int,
    ) -> None:
        """Move a card to target_position in the target list.

        The target may be the source list. Out-of-range positions append.
        When the target list does not exist the card goes back to its
        original index and nothing is saved.
        """
        source = self.get_list(source_board_id, source_list_id)
        idx = source.card_index(card_id) if source is not None else -1
        if idx < 0:
            self._ignored("move_card", source_board_id, source_list_id, card_id)
            return

        card = source.cards.pop(idx)

        target = self.get_list(target_board_id, target_list_id)
        if target is None:
            source.cards.insert(idx, card)
            logger.warning(
                "move_card %s: target list %s/%s not found, card kept in %s",
                card_id,
                target_board_id,
                target_list_id,
                source_list_id,
            )
            return

        _insert_clamped(target.cards, target_position, card)
        self._commit("move_card", card)
