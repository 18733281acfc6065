"""Settings read from the environment and an optional .env file."""

from __future__ import annotations

import os
from pathlib import Path

from .constants import DEFAULT_CHUNK_SIZE


def read_env_file(keys: list[str]) -> dict[str, str]:
    """Parse .env in the working directory and return values for requested keys.

    Does NOT load into os.environ; callers decide what to do with values.
    """
    env_file = Path.cwd() / ".env"
    try:
        content = env_file.read_text()
    except OSError:
        return {}

    result: dict[str, str] = {}
    wanted = set(keys)

    for line in content.splitlines():
        trimmed = line.strip()
        if not trimmed or trimmed.startswith("#"):
            continue
        eq_idx = trimmed.find("=")
        if eq_idx == -1:
            continue
        key = trimmed[:eq_idx].strip()
        if key not in wanted:
            continue
        value = trimmed[eq_idx + 1 :].strip()
        if (value.startswith('"') and value.endswith('"')) or (value.startswith("'") and value.endswith("'")):
            value = value[1:-1]
        if value:
            result[key] = value

    return result


def _get_setting(key: str, default: str) -> str:
    return os.environ.get(key) or read_env_file([key]).get(key, default)


def get_chunk_size() -> int:
    """Default copy chunk size in bytes (DISK_OPS_CHUNK_SIZE)."""
    raw = _get_setting("DISK_OPS_CHUNK_SIZE", str(DEFAULT_CHUNK_SIZE))
    try:
        size = int(raw)
    except ValueError:
        return DEFAULT_CHUNK_SIZE
    return size if size > 0 else DEFAULT_CHUNK_SIZE


def get_log_level() -> str:
    return _get_setting("LOG_LEVEL", "INFO").upper()
