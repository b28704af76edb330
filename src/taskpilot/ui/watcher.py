"""Mixin that manages store watches with auto-cleanup."""

from __future__ import annotations

from taskpilot.model.store import BoardStore, Callback


class StoreWatcherMixin:
    """Mixin for widgets and screens that re-render on store changes.

    Subclasses should:
    - Call ``_init_watcher()`` in ``__init__``
    - Use ``self.store_watch(store, callback)`` instead of ``store.watch(...)``
    - Skip writing ``on_unmount`` -- the mixin handles cleanup
    """

    def _init_watcher(self) -> None:
        self._watches: list = []

    def store_watch(self, store: BoardStore, callback: Callback) -> None:
        """Register a watch that is removed when this widget unmounts."""
        self._watches.append(store.watch(callback))

    def on_unmount(self) -> None:
        for unwatch in self._watches:
            unwatch()
        self._watches.clear()
