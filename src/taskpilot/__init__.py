"""Kanban boards of ordered lists and cards, with pluggable persistence."""

__version__ = "0.1.0"
