"""Runtime settings, read from the environment.

``LOCALMART_DATA_DIR``    where the JSON stores live (default: ``<repo>/data``)
``LOCALMART_LOG_LEVEL``   stdlib level name (default: ``WARNING``)
``LOCALMART_LOG_FORMAT``  ``console`` or ``json`` (default: ``console``)
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"

LOG_FORMATS = ("console", "json")


@dataclass(frozen=True)
class Settings:
    data_dir: Path
    log_level: str = "WARNING"
    log_format: str = "console"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        env = os.environ if environ is None else environ

        raw_dir = env.get("LOCALMART_DATA_DIR")
        data_dir = Path(raw_dir).expanduser() if raw_dir else _DEFAULT_DATA_DIR

        log_level = env.get("LOCALMART_LOG_LEVEL", "WARNING").upper()
        if not isinstance(logging.getLevelName(log_level), int):
            log_level = "WARNING"

        log_format = env.get("LOCALMART_LOG_FORMAT", "console").lower()
        if log_format not in LOG_FORMATS:
            log_format = "console"

        return cls(data_dir=data_dir, log_level=log_level, log_format=log_format)
