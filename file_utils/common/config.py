"""Settings for file-utils sourced from the environment.

Recognised variables:
    - `FILE_UTILS_LOG_LEVEL`
    - `FILE_UTILS_COPY_BUFFER_SIZE`
    - `FILE_UTILS_ALLOW_UNSAFE_PATHS`
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .constants import DEFAULT_COPY_BUFFER_SIZE


def env_bool(key: str, default: bool = False, environ: Optional[Mapping[str, str]] = None) -> bool:
    value = (environ if environ is not None else os.environ).get(key)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def env_int(key: str, default: int, environ: Optional[Mapping[str, str]] = None) -> int:
    value = (environ if environ is not None else os.environ).get(key)
    if not value:
        return default
    try:
        return int(value)
    except ValueError:
        return default


@dataclass
class FileUtilsSettings:
    """Typed settings sourced from the environment."""

    log_level: str
    copy_buffer_size: int
    allow_unsafe_paths: bool

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "FileUtilsSettings":
        env = environ if environ is not None else os.environ
        buffer_size = env_int("FILE_UTILS_COPY_BUFFER_SIZE", DEFAULT_COPY_BUFFER_SIZE, env)
        if buffer_size < 1:
            buffer_size = DEFAULT_COPY_BUFFER_SIZE
        return cls(
            log_level=(env.get("FILE_UTILS_LOG_LEVEL") or "INFO").upper(),
            copy_buffer_size=buffer_size,
            allow_unsafe_paths=env_bool("FILE_UTILS_ALLOW_UNSAFE_PATHS", False, env),
        )
