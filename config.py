"""
config.py — Application Settings
=================================
Everything the web shell can be tuned with, read from the environment
once at start-up.

    VISUALIZER_SECRET_KEY     session signing key (random per process if unset)
    VISUALIZER_HOST           bind address            (127.0.0.1)
    VISUALIZER_PORT           port                    (5000)
    VISUALIZER_DEBUG          Flask debug mode        (false)
    VISUALIZER_STEP_DELAY_MS  auto-play delay per step (800)
    VISUALIZER_LOG_LEVEL      logging level name      (INFO)
"""

import os
import secrets
from dataclasses import dataclass, field
from typing import Mapping, Optional


@dataclass(frozen=True)
class Settings:
    secret_key:    str  = field(default_factory=lambda: secrets.token_hex(32))
    host:          str  = "127.0.0.1"
    port:          int  = 5000
    debug:         bool = False
    step_delay_ms: int  = 800
    log_level:     str  = "INFO"

    @property
    def step_delay(self) -> float:
        """Delay in seconds, as the Stepper wants it."""
        return self.step_delay_ms / 1000


_TRUE = {"1", "true", "yes", "on"}


def _int(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")
    return value


def load_settings(env: Optional[Mapping[str, str]] = None) -> Settings:
    env = os.environ if env is None else env
    kwargs = {}
    if env.get("VISUALIZER_SECRET_KEY"):
        kwargs["secret_key"] = env["VISUALIZER_SECRET_KEY"]
    return Settings(
        host=env.get("VISUALIZER_HOST", "127.0.0.1"),
        port=_int(env, "VISUALIZER_PORT", 5000),
        debug=env.get("VISUALIZER_DEBUG", "").strip().lower() in _TRUE,
        step_delay_ms=_int(env, "VISUALIZER_STEP_DELAY_MS", 800),
        log_level=env.get("VISUALIZER_LOG_LEVEL", "INFO").upper(),
        **kwargs,
    )
