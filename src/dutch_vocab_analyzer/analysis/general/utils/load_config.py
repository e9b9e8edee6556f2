# src/dutch_vocab_analyzer/analysis/general/utils/load_config.py

"""Load JSON configs from the <data/> directory, with an mtime-keyed cache.

Modes:
- "raw"             -> parsed JSON as-is (cached)
- "validated_dict"  -> dict[str, Any] after an optional validator (not cached)

Data dir lookup: DUTCH_VOCAB_DATA_DIR, then DATA_DIR, then the first `data/`
found walking up from this file.
"""

from __future__ import annotations

import json
import logging
import os
import threading
from collections.abc import Callable
from pathlib import Path
from typing import Any, Literal

# ── Public surface ────────────────────────────────────────────────────────────
Mode = Literal["raw", "validated_dict"]
Validator = Callable[[dict[str, Any]], dict[str, Any]]

__all__ = [
    "Mode",
    "load_config",
    "clear_config_cache",
    "DataDirNotFound",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
]

DATA_DIR_ENV_VARS: tuple[str, ...] = ("DUTCH_VOCAB_DATA_DIR", "DATA_DIR")


# ── Exceptions ───────────────────────────────────────────────────────────────
class DataDirNotFound(FileNotFoundError):
    """Raise when neither an env var nor a parent 'data' directory gives a data dir."""


class ConfigFileNotFound(FileNotFoundError):
    """Raise when the config file is missing, unreadable or outside the data dir."""


class ConfigParseError(ValueError):
    """Raise when a config file is not valid JSON or its validator rejects it."""


class ConfigTypeError(TypeError):
    """Raise when the top-level JSON value has the wrong shape for the mode."""


# ── Logging & cache ──────────────────────────────────────────────────────────
log = logging.getLogger(__name__)
_CACHE_LOCK = threading.RLock()
# key: (path, mtime)
_CONFIG_CACHE: dict[tuple[Path, float], Any] = {}


def clear_config_cache() -> None:
    """Forget every cached config (tests, settings edited at runtime)."""
    with _CACHE_LOCK:
        _CONFIG_CACHE.clear()
    log.debug("Config cache cleared.")


# ── Data dir resolution ──────────────────────────────────────────────────────
def _candidate_data_dirs(start: Path | None = None) -> list[Path]:
    here = (start or Path(__file__)).resolve()
    return [(p / "data").resolve() for p in (here, *here.parents)]


def _default_data_dir(start: Path | None = None) -> Path:
    candidates = _candidate_data_dirs(start)
    for cand in candidates:
        if cand.is_dir():
            return cand
    tried = "\n  ".join(str(p) for p in candidates)
    raise DataDirNotFound(f"No 'data' directory found. Tried:\n  {tried}")


def _env_data_dir() -> Path | None:
    for var in DATA_DIR_ENV_VARS:
        value = os.environ.get(var)
        if value:
            return Path(value).expanduser().resolve()
    return None


def _resolve_path(file: str | os.PathLike[str], base_dir: Path | None) -> Path:
    data_dir = (base_dir or _env_data_dir() or _default_data_dir()).resolve()
    name = os.fspath(file)
    if not name.endswith(".json"):
        name += ".json"
    path = (data_dir / name).resolve()
    if not path.is_relative_to(data_dir):
        raise ConfigFileNotFound(f"Refusing to read outside the data dir: {path} (base={data_dir})")
    if not path.is_file():
        raise ConfigFileNotFound(f"Config file not found: {path}")
    return path


def _read_json(path: Path) -> Any:
    try:
        with path.open("r", encoding="utf-8") as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigParseError(f"Invalid JSON in {path}: {e}") from e
    except OSError as e:
        raise ConfigFileNotFound(f"Cannot read {path}: {e}") from e


# ── Entry point ──────────────────────────────────────────────────────────────
def load_config(
    file: str | os.PathLike[str],
    mode: Mode = "raw",
    *,
    base_dir: Path | None = None,
    validator: Validator | None = None,
) -> Any:
    """
    Does: Read <data>/<file>.json and shape it according to `mode`.
    Returns: Parsed JSON ("raw") or the validated dict ("validated_dict").
    Raises: DataDirNotFound, ConfigFileNotFound, ConfigParseError, ConfigTypeError,
            ValueError for an unknown mode.
    """
    if mode not in ("raw", "validated_dict"):
        raise ValueError(f"Unknown mode '{mode}'")

    path = _resolve_path(file, base_dir)

    if mode == "raw":
        key = (path, path.stat().st_mtime)
        with _CACHE_LOCK:
            if key in _CONFIG_CACHE:
                log.debug("Config cache HIT: %s", path.name)
                return _CONFIG_CACHE[key]
        data = _read_json(path)
        with _CACHE_LOCK:
            _CONFIG_CACHE[key] = data
        log.debug("Config cache MISS → STORED: %s", path.name)
        return data

    data = _read_json(path)
    if not isinstance(data, dict):
        raise ConfigTypeError(f"{path.name}: expected a JSON object, got {type(data).__name__}")
    if validator is not None:
        try:
            data = validator(data)
        except (TypeError, ValueError) as e:
            raise ConfigParseError(f"{path.name}: {e}") from e
    log.debug("Config loaded and validated: %s", path.name)
    return data
