"""keyloc runtime configuration.

All settings are backed by environment variables following the KL_* naming
convention.

Example:
    >>> from keyloc.config import settings
    >>> settings.parallel_readers
    False

Environment Variables:
    KL_PLATFORM: Platform whose sources are queried (default: sys.platform)
    KL_COMMAND_TIMEOUT: Per-command timeout, e.g. "5", "500ms", "2s" (default: 0, no timeout)
    KL_PARALLEL_READERS: Query all sources concurrently (default: false)
    KL_LOG_DIR: Directory for structured JSONL query logs (default: unset)
"""

from __future__ import annotations

import os
from dataclasses import dataclass


def _env(name: str, default: str) -> str:
    """Get environment variable with KL_* prefix validation."""
    if not name.startswith("KL_"):
        raise ValueError(f"Only KL_* env vars are allowed, got: {name}")
    return os.getenv(name, default)


def _env_bool(name: str, default: bool) -> bool:
    raw = _env(name, str(default))
    return raw.lower() in {"1", "true", "yes", "on"}


def _env_time_seconds(name: str, default_seconds: float) -> float:
    """Parse time value with unit suffixes (ms, s, m) and return seconds."""
    raw = _env(name, str(default_seconds)).strip().lower()
    try:
        if raw.endswith("ms"):
            return float(raw[:-2]) / 1000.0
        if raw.endswith("s"):
            return float(raw[:-1])
        if raw.endswith("m"):
            return float(raw[:-1]) * 60.0
        return float(raw)
    except ValueError:
        return default_seconds


@dataclass(frozen=True)
class Settings:
    """Centralized runtime settings for keyloc.

    Values are read from the environment when this module is imported. For
    testing, reload the module after changing the environment, or pass the
    equivalent arguments to the aggregator directly.
    """

    platform: str = _env("KL_PLATFORM", "")
    command_timeout_sec: float = _env_time_seconds("KL_COMMAND_TIMEOUT", 0.0)
    parallel_readers: bool = _env_bool("KL_PARALLEL_READERS", False)
    log_dir: str = _env("KL_LOG_DIR", "")


# Module-level instance for convenient access
settings = Settings()

__all__ = ["settings", "Settings"]
