"""Application configuration loaded from environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path


def _load_env_file(path: str = ".env") -> None:
    """Populate os.environ from the provided .env file if it exists."""

    env_path = Path(path)
    if not env_path.exists():
        return

    for line in env_path.read_text(encoding="utf-8").splitlines():
        stripped = line.strip()
        if not stripped or stripped.startswith("#") or "=" not in stripped:
            continue
        key, value = stripped.split("=", 1)
        os.environ.setdefault(key.strip(), value.strip())


TRUTHY_VALUES = frozenset({"1", "true", "yes", "on"})


def _env_flag(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in TRUTHY_VALUES


@dataclass(frozen=True, slots=True)
class Settings:
    """Centralised project settings based on OS environment variables."""

    environment: str = "dev"
    log_level: str = "INFO"

    board_backend: str = "json"
    board_storage_root: str = "data/board"
    board_storage_key: str = "apareri_board_v1"
    board_capacity: int = 20
    database_url: str = "sqlite+aiosqlite:///./data/board.db"

    celebrate_cooldown_ms: int = 420
    reduced_motion: bool = False


def _build_settings() -> Settings:
    _load_env_file()

    return Settings(
        environment=os.getenv("ENVIRONMENT", "dev"),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        board_backend=os.getenv("BOARD_BACKEND", "json").lower(),
        board_storage_root=os.getenv("BOARD_STORAGE_ROOT", "data/board"),
        board_storage_key=os.getenv("BOARD_STORAGE_KEY", "apareri_board_v1"),
        board_capacity=int(os.getenv("BOARD_CAPACITY", "20")),
        database_url=os.getenv("DATABASE_URL", "sqlite+aiosqlite:///./data/board.db"),
        celebrate_cooldown_ms=int(os.getenv("CELEBRATE_COOLDOWN_MS", "420")),
        reduced_motion=_env_flag("REDUCED_MOTION"),
    )


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance to avoid re-reading configuration."""

    return _build_settings()
