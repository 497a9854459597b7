"""
Runtime configuration for activity-journal.

Values default from environment variables and can be overridden by
constructing Config(...) directly.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional


def _get_env_float(name: str, default: float) -> float:
    value = os.getenv(name)
    if value is None:
        return default
    try:
        return float(value)
    except ValueError:
        return default


@dataclass
class Config:
    data_dir: str = "data"
    log_level: str = "WARNING"
    default_duration_hours: float = 1.0

    @classmethod
    def from_env(cls) -> "Config":
        """
        Environment variables (all optional):
        - AJ_DATA_DIR                (directory with YYYY-MM-DD.json files)
        - AJ_LOG_LEVEL               (DEBUG, INFO, WARNING, ...)
        - AJ_DEFAULT_DURATION_HOURS  (float)
        """
        return cls(
            data_dir=os.getenv("AJ_DATA_DIR", "data"),
            log_level=os.getenv("AJ_LOG_LEVEL", "WARNING").strip().upper() or "WARNING",
            default_duration_hours=_get_env_float("AJ_DEFAULT_DURATION_HOURS", default=1.0),
        )


_DEFAULT_CONFIG: Optional[Config] = None


def get_config(force_reload: bool = False) -> Config:
    """Return a process-wide Config, re-reading the environment on request."""
    global _DEFAULT_CONFIG
    if _DEFAULT_CONFIG is None or force_reload:
        _DEFAULT_CONFIG = Config.from_env()
    return _DEFAULT_CONFIG
