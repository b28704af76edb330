"""Card widgets for the board UI."""

from textual.app import ComposeResult
from textual.widgets import Static

from taskpilot.model.entities import Card
from taskpilot.model.store import BoardStore
from taskpilot.ui.drag import DraggableMixin
from taskpilot.ui.markdown import description_parser_factory
from taskpilot.ui.modals import CardModal, ConfirmModal


def description_preview(description: str, width: int = 60) -> str:
    """First non-blank line of a description, shortened to width."""
    for line in description.splitlines():
        line = line.strip()
        if line:
            return line if len(line) <= width else line[: width - 1] + "…"
    return ""


class DragGhost(Static):
    """Floating overlay showing the card being dragged."""

    DEFAULT_CSS = """
    DragGhost {
        layer: overlay;
        height: auto;
        padding: 0 1;
        background: $primary-darken-2;
        border: solid $primary;
    }
    """


class CardWidget(DraggableMixin, Static, can_focus=True):
    """A single card in a list."""

    BINDINGS = [
        ("space", "open_card", "Edit"),
        ("enter", "open_card", "Edit"),
        ("delete", "confirm_delete", "Delete"),
    ]

    DEFAULT_CSS = """
    CardWidget {
        width: 100%;
        height: auto;
        padding: 0 1;
        margin-bottom: 1;
        background: $surface;
    }
    CardWidget:focus {
        background: $primary;
    }
    CardWidget.dragging {
        display: none;
    }
    CardWidget #card-title {
        text-style: bold;
    }
    CardWidget #card-description {
        color: $text-muted;
    }
    """

    def __init__(self, store: BoardStore, board_id: str, list_id: str, card: Card):
        Static.__init__(self)
        self._init_draggable()
        self.store = store
        self.board_id = board_id
        self.list_id = list_id
        self.card = card

    @property
    def card_id(self) -> str:
        return self.card.id

    def compose(self) -> ComposeResult:
        yield Static(self.card.title, id="card-title", markup=False)
        preview = description_preview(self.card.description)
        if preview:
            yield Static(preview, id="card-description", markup=False)

    def draggable_make_ghost(self):
        return DragGhost(self.card.title, markup=False)

    def draggable_clicked(self) -> None:
        self.action_open_card()

    def action_open_card(self) -> None:
        board = self.store.get_board(self.board_id)
        modal = CardModal(
            "Edit Card",
            self.card.title,
            self.card.description,
            parser_factory=description_parser_factory(board),
        )
        self.app.push_screen(modal, self._on_edited)

    def _on_edited(self, result: tuple[str, str] | None) -> None:
        if result is None:
            return
        title, description = result
        self.store.update_card(self.board_id, self.list_id, self.card_id, title, description)

    def action_confirm_delete(self) -> None:
        self.app.push_screen(ConfirmModal(f'Delete card "{self.card.title}"?'), self._on_delete_confirmed)

    def _on_delete_confirmed(self, confirmed: bool) -> None:
        if confirmed:
            self.store.delete_card(self.board_id, self.list_id, self.card_id)


class AddCard(Static, can_focus=True):
    """Button at the foot of a list that adds a card."""

    BINDINGS = [
        ("space", "add_card"),
        ("enter", "add_card"),
    ]

    DEFAULT_CSS = """
    AddCard {
        width: 100%;
        height: auto;
        padding: 0 1;
        margin-bottom: 1;
        border: dashed $surface-lighten-2;
        color: $text-muted;
        text-align: center;
    }
    AddCard:focus {
        background: $primary;
        color: $text;
    }
    """

    def __init__(self, store: BoardStore, board_id: str, list_id: str):
        super().__init__("+ Add a card")
        self.store = store
        self.board_id = board_id
        self.list_id = list_id

    def on_click(self, event) -> None:
        event.stop()
        self.action_add_card()

    def action_add_card(self) -> None:
        board = self.store.get_board(self.board_id)
        modal = CardModal("Add New Card", parser_factory=description_parser_factory(board))
        self.app.push_screen(modal, self._on_created)

    def _on_created(self, result: tuple[str, str] | None) -> None:
        if result is None:
            return
        title, description = result
        self.store.create_card(self.board_id, self.list_id, title, description)
