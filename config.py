from __future__ import annotations

from dataclasses import dataclass
import os
from typing import Mapping, Optional


@dataclass(frozen=True)
class Settings:
    host: str = "127.0.0.1"
    port: int = 8080
    log_level: str = "INFO"
    score_decimals: int = 6


def _int_from_env(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def load_settings(env: Optional[Mapping[str, str]] = None) -> Settings:
    env = os.environ if env is None else env
    return Settings(
        host=env.get("HOST", "127.0.0.1"),
        port=_int_from_env(env, "PORT", 8080),
        log_level=env.get("LOG_LEVEL", "INFO").upper(),
        score_decimals=_int_from_env(env, "WPM_SCORE_DECIMALS", 6),
    )
