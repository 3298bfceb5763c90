"""
Runtime settings read from the environment.

Environment variables (all optional):
    BOOKINGMX_DATA_FILE  - dataset (.json or .csv) to load on start
                           (default: bundled data/cities.json)
    BOOKINGMX_LOG_LEVEL  - DEBUG, INFO, WARNING, ... (default: INFO)
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional


@dataclass(frozen=True)
class Settings:
    data_file: Optional[Path] = None
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ
        data_file = env.get("BOOKINGMX_DATA_FILE")
        return cls(
            data_file=Path(data_file) if data_file else None,
            log_level=env.get("BOOKINGMX_LOG_LEVEL", "INFO").upper(),
        )
