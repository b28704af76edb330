"""Dashboard screen listing all boards."""

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import VerticalScroll
from textual.screen import Screen
from textual.widgets import Footer, Header, Static

from taskpilot.model.entities import Board
from taskpilot.model.store import BoardStore
from taskpilot.ui.board import BoardScreen
from taskpilot.ui.modals import ConfirmModal, NameModal
from taskpilot.ui.watcher import StoreWatcherMixin

EMPTY_MESSAGE = "No boards yet. Create your first board to get started!"


def list_count(board: Board) -> str:
    count = len(board.lists)
    return "1 list" if count == 1 else f"{count} lists"


def build_tile_text(board: Board) -> Text:
    """Board name in bold over a dim list count."""
    result = Text(board.name, style="bold")
    result.append("\n")
    result.append(list_count(board), style="dim")
    return result


class BoardTile(Static, can_focus=True):
    """A board on the dashboard: name and list count."""

    DEFAULT_CSS = """
    BoardTile {
        width: 100%;
        height: auto;
        padding: 0 1;
        margin-bottom: 1;
        background: $surface;
    }
    BoardTile:focus {
        background: $primary;
    }
    """

    BINDINGS = [
        ("enter", "open", "Open"),
        ("e", "rename", "Rename"),
        ("delete", "confirm_delete", "Delete"),
    ]

    def __init__(self, store: BoardStore, board: Board):
        super().__init__(build_tile_text(board))
        self.store = store
        self.board = board

    def on_click(self, event) -> None:
        event.stop()
        self.action_open()

    def action_open(self) -> None:
        self.app.push_screen(BoardScreen(self.store, self.board.id))

    def action_rename(self) -> None:
        self.app.push_screen(NameModal("Edit Board", self.board.name), self._on_renamed)

    def _on_renamed(self, name: str | None) -> None:
        if name:
            self.store.update_board(self.board.id, name)

    def action_confirm_delete(self) -> None:
        self.app.push_screen(ConfirmModal(f'Delete board "{self.board.name}"?'), self._on_delete_confirmed)

    def _on_delete_confirmed(self, confirmed: bool) -> None:
        if confirmed:
            self.store.delete_board(self.board.id)


class DashboardScreen(StoreWatcherMixin, Screen):
    """All boards, newest last."""

    DEFAULT_CSS = """
    DashboardScreen #boards {
        padding: 1 2;
    }
    DashboardScreen #empty {
        color: $text-muted;
    }
    """

    BINDINGS = [("n", "new_board", "New board")]

    def __init__(self, store: BoardStore):
        self._init_watcher()
        super().__init__()
        self.store = store

    def compose(self) -> ComposeResult:
        yield Header()
        with VerticalScroll(id="boards"):
            boards = self.store.boards
            if not boards:
                yield Static(EMPTY_MESSAGE, id="empty")
            for board in boards:
                yield BoardTile(self.store, board)
        yield Footer()

    def on_mount(self) -> None:
        self.store_watch(self.store, self._on_store_changed)
        self.call_after_refresh(self._focus_first_tile)

    def _on_store_changed(self, store: BoardStore, operation: str, entity) -> None:
        self.call_later(self._rerender)

    async def _rerender(self) -> None:
        if self.is_attached:
            await self.recompose()
            self._focus_first_tile()

    def _focus_first_tile(self) -> None:
        tiles = self.query(BoardTile)
        if tiles:
            tiles.first().focus()

    def action_new_board(self) -> None:
        self.app.push_screen(NameModal("Create New Board"), self._on_created)

    def _on_created(self, name: str | None) -> None:
        if name:
            self.store.create_board(name)
