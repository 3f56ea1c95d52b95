from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional

ENV_PREFIX = "CIPHERSUITE_"

DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def _parse_level(raw: str) -> str:
    level = raw.strip().upper()
    if level not in _LEVELS:
        raise ValueError(f"Unknown log level '{raw}'. Use one of: {', '.join(_LEVELS)}.")
    return level


@dataclass(frozen=True)
class Settings:
    log_level: str = DEFAULT_LOG_LEVEL
    log_format: str = DEFAULT_LOG_FORMAT

    @property
    def numeric_level(self) -> int:
        return getattr(logging, self.log_level)

    def with_overrides(self, *, log_level: Optional[str] = None) -> "Settings":
        if log_level is None:
            return self
        return replace(self, log_level=_parse_level(log_level))


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build Settings from CIPHERSUITE_* environment variables (defaults when unset)."""
    env = os.environ if environ is None else environ
    level = env.get(f"{ENV_PREFIX}LOG_LEVEL")
    fmt = env.get(f"{ENV_PREFIX}LOG_FORMAT")
    return Settings(
        log_level=_parse_level(level) if level else DEFAULT_LOG_LEVEL,
        log_format=fmt or DEFAULT_LOG_FORMAT,
    )
