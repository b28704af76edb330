"""Main Textual application for taskpilot."""

from textual.app import App

from taskpilot.model.store import BoardStore
from taskpilot.ui.dashboard import DashboardScreen


class TaskPilotApp(App):
    """Kanban board TUI over a BoardStore."""

    CSS = """
    Tooltip {
        padding: 0 1;
        margin: 0;
    }
    """

    TITLE = "taskpilot"
    BINDINGS = [("ctrl+q", "quit", "Quit")]

    def __init__(self, store: BoardStore):
        super().__init__()
        self.store = store

    def on_mount(self) -> None:
        self.push_screen(DashboardScreen(self.store))
