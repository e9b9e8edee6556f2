# dutch_vocab_analyzer/analysis/vocab/settings.py
"""
settings.

Does: Load tunables for the orchestrator from <data>/engine_settings.json.
Returns: EngineSettings, load_settings().

Missing data dir or file → defaults. Bad values → ConfigParseError.
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any

from dutch_vocab_analyzer.analysis.general.types import EASY_THRESHOLD, MEDIUM_THRESHOLD
from dutch_vocab_analyzer.analysis.general.utils.load_config import (
    ConfigFileNotFound,
    DataDirNotFound,
    load_config,
)

__all__ = ["EngineSettings", "load_settings", "SETTINGS_FILE"]

log = logging.getLogger(__name__)

SETTINGS_FILE = "engine_settings"


@dataclass(frozen=True)
class EngineSettings:
    easy_threshold: float = EASY_THRESHOLD
    medium_threshold: float = MEDIUM_THRESHOLD
    suggestion_min_frequency: int = 2
    review_word_count: int = 3
    review_phrase_pool: int = 10
    fuzzy_threshold: float = 85.0

    def as_dict(self) -> dict[str, Any]:
        return asdict(self)


_INT_FIELDS = {"suggestion_min_frequency", "review_word_count", "review_phrase_pool"}


def _validate(data: dict[str, Any]) -> dict[str, Any]:
    known = {f.name for f in fields(EngineSettings)}
    unknown = set(data) - known
    if unknown:
        raise ValueError(f"unknown settings: {sorted(unknown)}")

    out: dict[str, Any] = {}
    for key, value in data.items():
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise TypeError(f"{key} must be a number, got {type(value).__name__}")
        if key in _INT_FIELDS:
            if int(value) != value or value < 1:
                raise ValueError(f"{key} must be a positive integer")
            value = int(value)
        elif not 0 <= value <= 100:
            raise ValueError(f"{key} must be within 0..100")
        out[key] = value

    easy = out.get("easy_threshold", EASY_THRESHOLD)
    medium = out.get("medium_threshold", MEDIUM_THRESHOLD)
    if medium > easy:
        raise ValueError("medium_threshold cannot exceed easy_threshold")
    return out


def load_settings(base_dir: Path | None = None) -> EngineSettings:
    """Does: Read engine_settings.json (validated) on top of the defaults."""
    try:
        data = load_config(SETTINGS_FILE, mode="validated_dict", base_dir=base_dir, validator=_validate)
    except (DataDirNotFound, ConfigFileNotFound):
        log.debug("No %s.json found, using default settings", SETTINGS_FILE)
        return EngineSettings()
    return EngineSettings(**data)
