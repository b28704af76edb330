"""Textual UI for taskpilot."""

from taskpilot.ui.app import TaskPilotApp
from taskpilot.ui.board import BoardScreen
from taskpilot.ui.dashboard import DashboardScreen
from taskpilot.ui.modals import CardModal, ConfirmModal, NameModal

__all__ = [
    "BoardScreen",
    "CardModal",
    "ConfirmModal",
    "DashboardScreen",
    "NameModal",
    "TaskPilotApp",
]
