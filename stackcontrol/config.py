from __future__ import annotations

import logging
import os
import random
from dataclasses import dataclass
from pathlib import Path

_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


@dataclass(frozen=True, slots=True)
class Settings:
    # Piece RNG seed; None means draw a fresh one per session.
    seed: int | None = None
    log_level: str = "WARNING"


def project_root() -> Path:
    # stackcontrol/config.py -> stackcontrol/ -> project root
    return Path(__file__).resolve().parents[1]


def _maybe_load_dotenv() -> None:
    # Opt-in so tests and CI never pick up a developer's local .env by accident.
    if os.environ.get("STACKCONTROL_LOAD_DOTENV") != "1":
        return

    env_path = project_root() / ".env"
    if env_path.exists():
        from dotenv import load_dotenv

        load_dotenv(dotenv_path=env_path, override=False)


def load_settings() -> Settings:
    _maybe_load_dotenv()

    raw_seed = os.environ.get("STACKCONTROL_SEED", "").strip()
    seed: int | None = None
    if raw_seed:
        try:
            seed = int(raw_seed)
        except ValueError as e:
            raise ValueError(f"STACKCONTROL_SEED must be an integer, got {raw_seed!r}") from e
        if seed < 0:
            raise ValueError("STACKCONTROL_SEED must be >= 0")

    level = os.environ.get("STACKCONTROL_LOG_LEVEL", "WARNING").strip().upper()
    if level not in _LEVELS:
        raise ValueError(f"STACKCONTROL_LOG_LEVEL must be one of {sorted(_LEVELS)}, got {level!r}")

    return Settings(seed=seed, log_level=level)


def resolve_seed(seed: int | None) -> int:
    if seed is not None:
        return seed
    return random.SystemRandom().randint(1, 2**31 - 1)


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(level=getattr(logging, settings.log_level))
