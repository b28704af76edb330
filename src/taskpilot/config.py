"""Configuration: YAML file, environment overrides, typed defaults."""

import os
from pathlib import Path
from typing import Any

import yaml

from taskpilot.errors import ConfigError

STORAGE_KEY = "taskBoardPilot-boards"
BRANCH_NAME = "taskpilot"
CONFIG_ENV = "TASKPILOT_CONFIG"
ENV_PREFIX = "TASKPILOT_"

DEFAULT_CONFIG_PATH = Path("~/.config/taskpilot/config.yaml")

DEFAULTS: dict[str, Any] = {
    "backend": "file",
    "path": "~/.local/share/taskpilot/boards.json",
    "key": STORAGE_KEY,
    "branch": BRANCH_NAME,
    "ids": "counter",
    "log-level": "WARNING",
}


def _python_key(file_key: str) -> str:
    """Convert file-style key (hyphenated) to Python-style (underscored)."""
    return file_key.replace("-", "_")


def _file_key(python_key: str) -> str:
    """Convert Python-style key (underscored) to file-style (hyphenated)."""
    return python_key.replace("_", "-")


def _coerce(file_key: str, raw: Any) -> Any:
    """Type-coerce a value using the type of its default."""
    default = DEFAULTS.get(file_key)
    if default is None:
        return raw
    if raw is None:
        return default
    if isinstance(default, bool):
        if isinstance(raw, bool):
            return raw
        return str(raw).lower() in ("true", "yes", "1")
    if isinstance(default, int):
        try:
            return int(raw)
        except (TypeError, ValueError):
            raise ConfigError(f"{file_key}: expected an integer, got {raw!r}")
    return str(raw)


def config_path(explicit: str | Path | None = None, environ: dict[str, str] | None = None) -> Path:
    """Resolve which config file to read: explicit, then $TASKPILOT_CONFIG, then the default."""
    if explicit:
        return Path(explicit).expanduser()
    env = (os.environ if environ is None else environ).get(CONFIG_ENV)
    if env:
        return Path(env).expanduser()
    return DEFAULT_CONFIG_PATH.expanduser()


def _read_file(path: Path) -> dict[str, Any]:
    if not path.exists():
        return {}
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ConfigError(f"{path}: invalid YAML: {e}")
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: expected a mapping at the top level")
    return {_file_key(str(k)): v for k, v in data.items()}


def _read_env(environ: dict[str, str]) -> dict[str, Any]:
    values: dict[str, Any] = {}
    for name, raw in environ.items():
        if not name.startswith(ENV_PREFIX) or name == CONFIG_ENV:
            continue
        values[_file_key(name[len(ENV_PREFIX) :].lower())] = raw
    return values


def load_config(path: str | Path | None = None, environ: dict[str, str] | None = None) -> dict[str, Any]:
    """Read configuration into a {key: value} dict with python-style keys.

    Later sources win: defaults, then the file, then TASKPILOT_* variables.
    Keys without a default are passed through as given.
    """
    if environ is None:
        environ = dict(os.environ)
    merged: dict[str, Any] = dict(DEFAULTS)
    merged.update(_read_file(config_path(path, environ)))
    merged.update(_read_env(environ))
    return {_python_key(k): _coerce(k, v) for k, v in merged.items()}
