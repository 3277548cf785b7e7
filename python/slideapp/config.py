"""Service settings read from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Mapping

from slidecore.engine.gamesolver.solver import BEST_FIRST_MAX_SIZE
from slidecore.exceptions import ConfigError

DEFAULT_PORT = 3000
DEFAULT_HOST = "0.0.0.0"
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_TIMEOUT = 30.0

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _int(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from None


def _timeout(env: Mapping[str, str]) -> float | None:
    raw = env.get("SOLVER_TIMEOUT")
    if raw is None:
        return DEFAULT_TIMEOUT
    raw = raw.strip()
    if not raw:
        return None
    try:
        value = float(raw)
    except ValueError:
        raise ConfigError(f"SOLVER_TIMEOUT must be a number, got {raw!r}") from None
    if value < 0:
        raise ConfigError("SOLVER_TIMEOUT must not be negative")
    # 0 disables the limit
    return value or None


@dataclass(frozen=True)
class Settings:
    port: int = DEFAULT_PORT
    host: str = DEFAULT_HOST
    log_level: str = DEFAULT_LOG_LEVEL
    solver_timeout: float | None = DEFAULT_TIMEOUT
    best_first_max_size: int = BEST_FIRST_MAX_SIZE

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None) -> Settings:
        """Build settings from ``PORT``, ``HOST``, ``LOG_LEVEL``,
        ``SOLVER_TIMEOUT`` and ``BEST_FIRST_MAX_SIZE``."""
        env = os.environ if env is None else env
        port = _int(env, "PORT", DEFAULT_PORT)
        if not 0 < port < 65536:
            raise ConfigError(f"PORT out of range: {port}")

        log_level = (env.get("LOG_LEVEL") or DEFAULT_LOG_LEVEL).strip().upper()
        if log_level not in LOG_LEVELS:
            raise ConfigError(f"Unknown LOG_LEVEL {log_level!r}")

        return cls(
            port=port,
            host=(env.get("HOST") or DEFAULT_HOST).strip(),
            log_level=log_level,
            solver_timeout=_timeout(env),
            best_first_max_size=_int(env, "BEST_FIRST_MAX_SIZE", BEST_FIRST_MAX_SIZE),
        )

    def override(self, **changes) -> Settings:
        """Return a copy with every non-``None`` keyword applied."""
        return replace(self, **{k: v for k, v in changes.items() if v is not None})
