"""Exceptions raised by taskpilot."""


class TaskPilotError(Exception):
    """Base class for taskpilot errors."""


class ConfigError(TaskPilotError):
    """The configuration file could not be read."""


class StorageError(TaskPilotError):
    """A storage backend could not load or save the board document."""


class DocumentError(StorageError):
    """A stored board document does not have the expected shape."""
