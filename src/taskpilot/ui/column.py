"""List column widgets for the board UI."""

from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.widgets import Rule, Static

from taskpilot.model.entities import BoardList
from taskpilot.model.store import BoardStore
from taskpilot.ui.card import AddCard, CardWidget
from taskpilot.ui.drag import CardPlaceholder, DropTarget, drop_index, midpoint
from taskpilot.ui.modals import ConfirmModal, NameModal


class ListColumn(DropTarget, Vertical):
    """A single list on the board, shown as a column of cards."""

    DEFAULT_CSS = """
    ListColumn {
        width: 1fr;
        height: auto;
        min-height: 100%;
        min-width: 28;
        max-width: 28;
        padding: 0 1;
        border-right: tall $surface-lighten-1;
    }
    ListColumn #list-header {
        height: 1;
    }
    ListColumn #list-name {
        width: 1fr;
        text-style: bold;
    }
    ListColumn .list-action {
        width: 3;
    }
    ListColumn .list-action:hover {
        background: $primary-darken-2;
    }
    ListColumn > Rule.-horizontal {
        margin: 0;
    }
    """

    BINDINGS = [
        ("r", "rename_list", "Rename list"),
        ("x", "confirm_delete", "Delete list"),
    ]

    def __init__(self, store: BoardStore, board_id: str, lst: BoardList):
        super().__init__()
        self.store = store
        self.board_id = board_id
        self.lst = lst
        self._card_placeholder: CardPlaceholder | None = None

    @property
    def list_id(self) -> str:
        return self.lst.id

    def compose(self) -> ComposeResult:
        with Horizontal(id="list-header"):
            yield Static(self.lst.name, id="list-name", markup=False)
            yield Static("✎", id="rename", classes="list-action")
            yield Static("✖", id="delete", classes="list-action")
        yield Rule()
        for card in self.lst.cards:
            yield CardWidget(self.store, self.board_id, self.list_id, card)
        yield AddCard(self.store, self.board_id, self.list_id)

    def on_click(self, event) -> None:
        widget = event.widget
        if widget is None:
            return
        if widget.id == "rename":
            event.stop()
            self.action_rename_list()
        elif widget.id == "delete":
            event.stop()
            self.action_confirm_delete()

    # -- list actions --

    def action_rename_list(self) -> None:
        self.app.push_screen(NameModal("Edit List", self.lst.name), self._on_renamed)

    def _on_renamed(self, name: str | None) -> None:
        if name:
            self.store.update_list(self.board_id, self.list_id, name)

    def action_confirm_delete(self) -> None:
        message = f'Delete list "{self.lst.name}" and all its cards?'
        self.app.push_screen(ConfirmModal(message), self._on_delete_confirmed)

    def _on_delete_confirmed(self, confirmed: bool) -> None:
        if confirmed:
            self.store.delete_list(self.board_id, self.list_id)

    # -- DropTarget: list accepting card drops --

    def _card_widgets(self, draggable=None) -> list[CardWidget]:
        return [c for c in self.children if isinstance(c, CardWidget) and c is not draggable]

    def drop_position(self, draggable, screen_y: int) -> int:
        """Model index a card dropped at screen_y would land at."""
        return drop_index([midpoint(c) for c in self._card_widgets(draggable)], screen_y)

    def drag_over(self, draggable, x: int, y: int) -> bool:
        if not isinstance(draggable, CardWidget):
            return False
        cards = self._card_widgets(draggable)
        pos = self.drop_position(draggable, y)
        insert_before = cards[pos] if pos < len(cards) else self.query_one(AddCard)
        self._ensure_card_placeholder(insert_before)
        return True

    def drag_away(self, draggable) -> None:
        if self._card_placeholder is not None and self._card_placeholder.parent is not None:
            self._card_placeholder.remove()
        self._card_placeholder = None

    def try_drop(self, draggable, x: int, y: int) -> bool:
        if not isinstance(draggable, CardWidget):
            return False
        pos = self.drop_position(draggable, y)
        self.drag_away(draggable)
        self.store.move_card(
            draggable.board_id,
            draggable.list_id,
            draggable.card_id,
            self.board_id,
            self.list_id,
            pos,
        )
        self.screen.focus_card_later(draggable.card_id)
        return True

    def _ensure_card_placeholder(self, insert_before: Static) -> None:
        if self._card_placeholder is None or self._card_placeholder.parent is not self:
            self._card_placeholder = CardPlaceholder()
            self.mount(self._card_placeholder, before=insert_before)
            return

        children = list(self.children)
        if children.index(self._card_placeholder) + 1 != children.index(insert_before):
            self.move_child(self._card_placeholder, before=insert_before)

    # -- keyboard navigation and card moves --

    def on_key(self, event) -> None:
        """Arrow key navigation and shift+arrow card movement."""
        if event.key not in ("up", "down", "left", "right", "shift+up", "shift+down", "shift+left", "shift+right"):
            return

        focused = self.screen.focused
        focusable = [c for c in self.children if c.can_focus]
        if focused not in focusable:
            return

        idx = focusable.index(focused)
        siblings = [c for c in self.parent.children if isinstance(c, ListColumn)]
        my_idx = siblings.index(self)

        if event.key == "up" and idx > 0:
            focusable[idx - 1].focus()
        elif event.key == "down" and idx < len(focusable) - 1:
            focusable[idx + 1].focus()
        elif event.key in ("left", "right"):
            new_idx = my_idx + (-1 if event.key == "left" else 1)
            if 0 <= new_idx < len(siblings):
                target_focusable = [c for c in siblings[new_idx].children if c.can_focus]
                if target_focusable:
                    target_focusable[min(idx, len(target_focusable) - 1)].focus()
        elif event.key.startswith("shift+") and isinstance(focused, CardWidget):
            self._move_card(focused, event.key, siblings, my_idx)

        event.prevent_default()
        event.stop()

    def _move_card(self, card: CardWidget, key: str, siblings: list["ListColumn"], my_idx: int) -> None:
        """Move a card via shift+arrow by updating the store."""
        card_idx = self.lst.card_index(card.card_id)

        if key in ("shift+up", "shift+down"):
            new_pos = card_idx + (-1 if key == "shift+up" else 1)
            if 0 <= new_pos < len(self.lst.cards):
                self.store.move_card(self.board_id, self.list_id, card.card_id, self.board_id, self.list_id, new_pos)
                self.screen.focus_card_later(card.card_id)
        else:
            new_idx = my_idx + (-1 if key == "shift+left" else 1)
            if 0 <= new_idx < len(siblings):
                target = siblings[new_idx]
                position = min(card_idx, len(target.lst.cards))
                self.store.move_card(self.board_id, self.list_id, card.card_id, self.board_id, target.list_id, position)
                self.screen.focus_card_later(card.card_id)


class AddList(Static, can_focus=True):
    """Column at the end of the board that adds a list."""

    BINDINGS = [
        ("space", "add_list"),
        ("enter", "add_list"),
    ]

    DEFAULT_CSS = """
    AddList {
        width: 28;
        height: 3;
        margin: 0 1;
        padding: 0 1;
        border: dashed $surface-lighten-2;
        color: $text-muted;
        content-align: center middle;
    }
    AddList:focus {
        background: $primary;
        color: $text;
    }
    """

    def __init__(self, store: BoardStore, board_id: str):
        super().__init__("+ Add a list")
        self.store = store
        self.board_id = board_id

    def on_click(self, event) -> None:
        event.stop()
        self.action_add_list()

    def action_add_list(self) -> None:
        self.app.push_screen(NameModal("Add New List"), self._on_created)

    def _on_created(self, name: str | None) -> None:
        if name:
            self.store.create_list(self.board_id, name)
