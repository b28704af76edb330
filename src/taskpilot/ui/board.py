"""Board screen showing a board's lists and cards."""

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal
from textual.screen import Screen
from textual.widgets import Footer, Static

from taskpilot.model.store import BoardStore
from taskpilot.ui.card import CardWidget
from taskpilot.ui.column import AddList, ListColumn
from taskpilot.ui.modals import ConfirmModal, NameModal
from taskpilot.ui.watcher import StoreWatcherMixin


class BoardScreen(StoreWatcherMixin, Screen):
    """One board: a row of list columns. Re-renders on every store change."""

    DEFAULT_CSS = """
    BoardScreen {
        layers: base overlay;
    }
    BoardScreen #board-header {
        height: 1;
        background: $panel;
        padding: 0 1;
    }
    BoardScreen #board-title {
        width: 1fr;
        text-style: bold;
    }
    BoardScreen #columns {
        height: 1fr;
        overflow-x: auto;
    }
    """

    BINDINGS = [
        Binding("escape", "back", "Boards"),
        ("e", "rename_board", "Rename board"),
        ("ctrl+d", "confirm_delete", "Delete board"),
        ("l", "add_list", "Add list"),
        Binding("ctrl+left", "move_list(-1)", "Move list left", show=False),
        Binding("ctrl+right", "move_list(1)", "Move list right", show=False),
    ]

    def __init__(self, store: BoardStore, board_id: str):
        self._init_watcher()
        super().__init__()
        self.store = store
        self.board_id = board_id
        self._active_draggable = None
        self._pending_focus: str | None = None

    def compose(self) -> ComposeResult:
        board = self.store.get_board(self.board_id)
        with Horizontal(id="board-header"):
            yield Static(board.name if board else "", id="board-title", markup=False)
        with Horizontal(id="columns"):
            if board is not None:
                for lst in board.lists:
                    yield ListColumn(self.store, self.board_id, lst)
            yield AddList(self.store, self.board_id)
        yield Footer()

    def on_mount(self) -> None:
        self.store_watch(self.store, self._on_store_changed)
        self.call_after_refresh(self._focus_first_card)

    def _on_store_changed(self, store: BoardStore, operation: str, entity) -> None:
        if store.get_board(self.board_id) is None:
            self.call_later(self._close)
            return
        self.call_later(self._rerender)

    def _close(self) -> None:
        if self.is_attached and self.app.screen is self:
            self.app.pop_screen()

    async def _rerender(self) -> None:
        if not self.is_attached:
            return
        await self.recompose()
        if self._pending_focus is not None:
            self._focus_card(self._pending_focus)
            self._pending_focus = None
        else:
            self._focus_first_card()

    def focus_card_later(self, card_id: str) -> None:
        """Focus card_id once the board has re-rendered."""
        self._pending_focus = card_id

    def _focus_card(self, card_id: str) -> None:
        for card in self.query(CardWidget):
            if card.card_id == card_id:
                card.focus()
                return

    def _focus_first_card(self) -> None:
        for col in self.query(ListColumn):
            focusable = [c for c in col.children if c.can_focus]
            if focusable:
                focusable[0].focus()
                return

    # -- Thin delegation: screen routes mouse events to active draggable --

    def on_mouse_move(self, event) -> None:
        if self._active_draggable is not None:
            self._active_draggable._drag_move(event.screen_x, event.screen_y)

    def on_mouse_up(self, event) -> None:
        if self._active_draggable is not None:
            self._active_draggable._drag_finish(event.screen_x, event.screen_y)

    # -- board actions --

    def action_back(self) -> None:
        if self._active_draggable is not None:
            self._active_draggable._drag_cancel()
            return
        self.app.pop_screen()

    def action_rename_board(self) -> None:
        board = self.store.get_board(self.board_id)
        if board is not None:
            self.app.push_screen(NameModal("Edit Board", board.name), self._on_renamed)

    def _on_renamed(self, name: str | None) -> None:
        if name:
            self.store.update_board(self.board_id, name)

    def action_confirm_delete(self) -> None:
        board = self.store.get_board(self.board_id)
        if board is not None:
            self.app.push_screen(ConfirmModal(f'Delete board "{board.name}"?'), self._on_delete_confirmed)

    def _on_delete_confirmed(self, confirmed: bool) -> None:
        if confirmed:
            self.store.delete_board(self.board_id)

    def action_add_list(self) -> None:
        self.query_one(AddList).action_add_list()

    def action_move_list(self, direction: int) -> None:
        """Move the list holding the focused widget one place left or right."""
        focused = self.focused
        column = next((w for w in (focused, *focused.ancestors) if isinstance(w, ListColumn)), None) if focused else None
        if column is None:
            return
        board = self.store.get_board(self.board_id)
        new_index = board.list_index(column.list_id) + direction
        if 0 <= new_index < len(board.lists):
            focused_card = focused.card_id if isinstance(focused, CardWidget) else None
            self.store.move_list(self.board_id, column.list_id, new_index)
            if focused_card is not None:
                self.focus_card_later(focused_card)
