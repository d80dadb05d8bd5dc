"""
Vectora Router Configuration.

Settings are read once and passed to the steps and the CLI. Environment
variables override the defaults:

    VECTORA_ROUTER_LOG_LEVEL        (default: INFO)
    VECTORA_ROUTER_LOG_FORMAT       "text" or "json" (default: text)
    VECTORA_ROUTER_ACTIVATE_GUARD   (default: can_activate)
    VECTORA_ROUTER_DEACTIVATE_GUARD (default: can_deactivate)
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

ENV_PREFIX = "VECTORA_ROUTER_"

@dataclass(frozen=True)
class RouterConfig:
    activate_guard: str = "can_activate"
    deactivate_guard: str = "can_deactivate"
    log_level: str = "INFO"
    log_format: str = "text"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> RouterConfig:
        """Build a config from `VECTORA_ROUTER_*` variables."""
        env = os.environ if environ is None else environ
        defaults = cls()

        def read(name: str, default: str) -> str:
            value = env.get(ENV_PREFIX + name, "").strip()
            return value or default

        log_format = read("LOG_FORMAT", defaults.log_format).lower()
        if log_format not in ("text", "json"):
            raise ValueError(f"{ENV_PREFIX}LOG_FORMAT must be 'text' or 'json', got {log_format!r}")

        return cls(
            activate_guard=read("ACTIVATE_GUARD", defaults.activate_guard),
            deactivate_guard=read("DEACTIVATE_GUARD", defaults.deactivate_guard),
            log_level=read("LOG_LEVEL", defaults.log_level).upper(),
            log_format=log_format,
        )
