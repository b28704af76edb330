"""Identifier sources for boards, lists and cards."""

import time
import uuid
from collections.abc import Callable, Iterable

IdSource = Callable[[], str]

ID_KINDS = ("counter", "timestamp", "uuid")


def compare_ids(left: str, right: str) -> int:
    """Compare two IDs, padding with leading zeros.

    Returns -1 if left < right, 0 if equal, 1 if left > right.
    """
    max_len = max(len(left), len(right))
    left_padded = left.zfill(max_len)
    right_padded = right.zfill(max_len)

    if left_padded < right_padded:
        return -1
    if left_padded > right_padded:
        return 1
    return 0


def max_id(ids: Iterable[str]) -> str | None:
    """Find the highest numeric ID, or None if there are none.

    Non-numeric IDs (uuids) never take part in counter seeding.
    """
    highest = None
    for id_ in ids:
        if not id_.isdigit():
            continue
        if highest is None or compare_ids(id_, highest) > 0:
            highest = id_
    return highest


def next_id(current_max: str | None) -> str:
    """Generate the next ID after current_max.

    - If None, returns "1"
    - If numeric (e.g., "9"), returns str(int + 1) (e.g., "10")
    """
    if current_max is None:
        return "1"
    return str(int(current_max) + 1)


class CounterIds:
    """Sequential numeric string IDs: "1", "2", "3", ..."""

    def __init__(self, start: str | None = None):
        self._last = start

    def __call__(self) -> str:
        self._last = next_id(self._last)
        return self._last

    def seed(self, ids: Iterable[str]) -> None:
        """Advance past the highest numeric id in ids."""
        highest = max_id(ids)
        if highest is None:
            return
        if self._last is None or compare_ids(highest, self._last) > 0:
            self._last = highest


class TimestampIds:
    """Millisecond timestamp IDs that never repeat within a process.

    A clock reading at or before the previous ID yields previous + 1.
    """

    def __init__(self, clock: Callable[[], float] = time.time):
        self._clock = clock
        self._last = 0

    def __call__(self) -> str:
        now = int(self._clock() * 1000)
        if now <= self._last:
            now = self._last + 1
        self._last = now
        return str(now)

    def seed(self, ids: Iterable[str]) -> None:
        highest = max_id(ids)
        if highest is not None:
            self._last = max(self._last, int(highest))


def uuid_ids() -> str:
    """Random 32 hex digit ID."""
    return uuid.uuid4().hex


def make_id_source(kind: str) -> IdSource:
    """Build an id source by name: counter, timestamp or uuid."""
    if kind == "counter":
        return CounterIds()
    if kind == "timestamp":
        return TimestampIds()
    if kind == "uuid":
        return uuid_ids
    raise ValueError(f"Unknown id source {kind!r}, expected one of: {', '.join(ID_KINDS)}")
