"""Modal dialogs for creating, editing and confirming."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.screen import ModalScreen
from textual.widgets import Button, Input, Label, Markdown, Static, TextArea

MODAL_CSS = """
{name} {{
    align: center middle;
}}
{name} #dialog {{
    width: 70;
    height: auto;
    border: thick $primary;
    background: $surface;
    max-height: 100%;
    overflow-y: auto;
    padding: 0 2;
}}
{name} #heading {{
    text-style: bold;
    margin-bottom: 1;
}}
{name} #error {{
    color: $error;
    height: auto;
}}
{name} #buttons {{
    width: 100%;
    height: 3;
    align: center middle;
}}
{name} Button {{
    margin: 0 2;
}}
"""


class NameModal(ModalScreen[str | None]):
    """Ask for a single name. Dismisses with the stripped name, or None on cancel."""

    DEFAULT_CSS = MODAL_CSS.format(name="NameModal")
    BINDINGS = [Binding("escape", "cancel", "Cancel")]

    def __init__(self, heading: str, value: str = "", placeholder: str = "Name"):
        super().__init__()
        self.heading = heading
        self.value = value
        self.placeholder = placeholder

    def compose(self) -> ComposeResult:
        with Vertical(id="dialog"):
            yield Label(self.heading, id="heading")
            yield Input(self.value, placeholder=self.placeholder, id="name")
            yield Static("", id="error")
            with Horizontal(id="buttons"):
                yield Button("Save", id="save", variant="primary")
                yield Button("Cancel", id="cancel")

    def on_mount(self) -> None:
        self.query_one("#name", Input).focus()

    def _submit(self) -> None:
        name = self.query_one("#name", Input).value.strip()
        if not name:
            self.query_one("#error", Static).update("Name must not be empty.")
            return
        self.dismiss(name)

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        self._submit()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        if event.button.id == "save":
            self._submit()
        else:
            self.dismiss(None)

    def action_cancel(self) -> None:
        self.dismiss(None)


class CardModal(ModalScreen[tuple[str, str] | None]):
    """Ask for a card title and description. Dismisses with (title, description) or None."""

    DEFAULT_CSS = MODAL_CSS.format(name="CardModal") + """
    CardModal #description {
        height: 4;
        margin-top: 1;
    }
    CardModal #preview-scroll {
        height: 4;
        margin-top: 1;
        border: round $surface-lighten-2;
    }
    """
    BINDINGS = [Binding("escape", "cancel", "Cancel")]

    def __init__(self, heading: str, title: str = "", description: str = "", parser_factory=None):
        super().__init__()
        self.heading = heading
        self.card_title = title
        self.description = description
        self.parser_factory = parser_factory

    def compose(self) -> ComposeResult:
        with Vertical(id="dialog"):
            yield Label(self.heading, id="heading")
            yield Input(self.card_title, placeholder="Title", id="title")
            yield TextArea(self.description, id="description")
            with VerticalScroll(id="preview-scroll"):
                yield Markdown(self.description, id="preview", parser_factory=self.parser_factory)
            yield Static("", id="error")
            with Horizontal(id="buttons"):
                yield Button("Save", id="save", variant="primary")
                yield Button("Cancel", id="cancel")

    def on_mount(self) -> None:
        self.query_one("#title", Input).focus()

    async def on_text_area_changed(self, event: TextArea.Changed) -> None:
        event.stop()
        await self.query_one("#preview", Markdown).update(event.text_area.text)

    def _submit(self) -> None:
        title = self.query_one("#title", Input).value.strip()
        description = self.query_one("#description", TextArea).text.strip()
        if not title:
            self.query_one("#error", Static).update("Title must not be empty.")
            return
        self.dismiss((title, description))

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        self._submit()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        if event.button.id == "save":
            self._submit()
        else:
            self.dismiss(None)

    def action_cancel(self) -> None:
        self.dismiss(None)


class ConfirmModal(ModalScreen[bool]):
    """Yes/no question before a destructive action."""

    DEFAULT_CSS = MODAL_CSS.format(name="ConfirmModal") + """
    ConfirmModal #heading {
        width: 100%;
        text-align: center;
    }
    """
    BINDINGS = [Binding("escape", "cancel", "Cancel")]

    def __init__(self, message: str):
        super().__init__()
        self.message = message

    def compose(self) -> ComposeResult:
        with Vertical(id="dialog"):
            yield Static(self.message, id="heading", markup=False)
            with Horizontal(id="buttons"):
                yield Button("Delete", id="yes", variant="error")
                yield Button("Cancel", id="no")

    def on_mount(self) -> None:
        self.query_one("#no", Button).focus()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        self.dismiss(event.button.id == "yes")

    def action_cancel(self) -> None:
        self.dismiss(False)
