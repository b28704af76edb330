"""Key-value persistence for the board document."""

import copy
import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Protocol

from taskpilot.config import STORAGE_KEY
from taskpilot.errors import StorageError

logger = logging.getLogger(__name__)


class Storage(Protocol):
    """What the board store needs from a persistence backend."""

    key: str

    def load(self) -> Any | None:
        """Return the stored document, or None if nothing is stored."""
        ...

    def save(self, document: Any) -> None:
        """Replace the stored document."""
        ...


class MemoryStorage:
    """Dict-backed storage. Documents are deep-copied in and out."""

    def __init__(self, key: str = STORAGE_KEY, data: dict[str, Any] | None = None):
        self.key = key
        self.data: dict[str, Any] = data if data is not None else {}
        self.saves = 0

    def load(self) -> Any | None:
        document = self.data.get(self.key)
        return copy.deepcopy(document) if document is not None else None

    def save(self, document: Any) -> None:
        self.data[self.key] = copy.deepcopy(document)
        self.saves += 1


class FileStorage:
    """A JSON file holding {key: document}, like browser local storage on disk.

    Other keys in the file are preserved on save.
    """

    def __init__(self, path: str | Path, key: str = STORAGE_KEY):
        self.path = Path(path).expanduser()
        self.key = key

    def _read_all(self) -> dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8") or "{}")
        except json.JSONDecodeError as e:
            raise StorageError(f"{self.path}: invalid JSON: {e}")
        if not isinstance(data, dict):
            raise StorageError(f"{self.path}: expected a JSON object")
        return data

    def load(self) -> Any | None:
        document = self._read_all().get(self.key)
        logger.debug("load %s[%s]: %s", self.path, self.key, "found" if document is not None else "empty")
        return document

    def save(self, document: Any) -> None:
        data = self._read_all()
        data[self.key] = document
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp = tempfile.mkstemp(dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2)
                f.write("\n")
            os.replace(tmp, self.path)
        except BaseException:
            Path(tmp).unlink(missing_ok=True)
            raise
        logger.debug("saved %s[%s]", self.path, self.key)


def open_storage(config: dict[str, Any]) -> Storage:
    """Build the storage backend named by config["backend"]."""
    backend = config.get("backend", "file")
    key = config.get("key", STORAGE_KEY)
    if backend == "memory":
        return MemoryStorage(key=key)
    if backend == "file":
        return FileStorage(config["path"], key=key)
    if backend == "git":
        from taskpilot.git import GitStorage

        return GitStorage(Path(config["path"]).expanduser(), key=key, branch=config.get("branch", "taskpilot"))
    raise StorageError(f"Unknown storage backend {backend!r}, expected memory, file or git")
