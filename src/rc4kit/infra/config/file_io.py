from __future__ import annotations

import json
import logging
import tomllib
from collections.abc import Callable, Iterator
from pathlib import Path
from typing import Any

from rc4kit.infra.paths import DEFAULT_CONFIG_FILENAME, SETTING_PATH

logger = logging.getLogger(__name__)

LOCAL_FILENAMES = (DEFAULT_CONFIG_FILENAME, "settings.json")


def _read_json(path: Path) -> Any:
    return json.loads(path.read_text(encoding="utf-8"))


def _read_toml(path: Path) -> Any:
    return tomllib.loads(path.read_text(encoding="utf-8"))


# suffix -> (format name, reader); decode errors are ValueError subclasses
_READERS: dict[str, tuple[str, Callable[[Path], Any]]] = {
    ".json": ("JSON", _read_json),
    ".toml": ("TOML", _read_toml),
}


def _candidate_paths() -> Iterator[Path]:
    """Implicit settings locations: working directory first, then user dir."""
    cwd = Path.cwd()
    for name in LOCAL_FILENAMES:
        yield cwd / name
    yield SETTING_PATH


def _resolve_file_path(user_path: str | Path | None) -> Path | None:
    """Return the settings file to load, or None when there is none.

    An explicit ``user_path`` is the only candidate when given.
    """
    if user_path:
        path = Path(user_path).expanduser().resolve()
        if path.is_file():
            return path
        logger.warning("Specified file not found: %s", path)
        return None

    for candidate in _candidate_paths():
        if candidate.is_file():
            logger.debug("Using settings file: %s", candidate)
            return candidate.resolve()
    return None


def _load_by_extension(path: Path) -> dict[str, Any]:
    """Parse a ``.toml`` or ``.json`` settings file into a dict.

    Raises:
        ValueError: Unsupported suffix, unreadable or malformed content, or a
            root that is not a table/object.
    """
    ext = path.suffix.lower()
    try:
        fmt, reader = _READERS[ext]
    except KeyError:
        raise ValueError(f"Unsupported config file extension: {ext}") from None

    try:
        data = reader(path)
    except (OSError, ValueError) as e:
        raise ValueError(f"Invalid {fmt} in {path}: {e}") from e

    if not isinstance(data, dict):
        raise ValueError(f"Config root must be a dict, got {type(data)} in {path}")
    return data


def load_config(config_path: str | Path | None = None) -> dict[str, Any]:
    """
    Load configuration data from a TOML or JSON file.

    Resolution order:
        - Explicit `config_path` (if provided; no fallback when it is missing)
        - `settings.toml` or `settings.json` in the working directory
        - `SETTING_PATH` fallback path

    Args:
        config_path: Optional explicit configuration file path.

    Returns:
        Parsed configuration as a dictionary.

    Raises:
        FileNotFoundError: If no valid configuration file is found.
        ValueError: If the file cannot be parsed or contains invalid structure.
    """
    path = _resolve_file_path(config_path)

    if not path:
        raise FileNotFoundError("No valid config file found.")

    logger.debug("Loading configuration from: %s", path)
    return _load_by_extension(path)
