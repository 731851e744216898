"""
Centralized configuration for the game backend.

Configuration is loaded from (in order of precedence):
1. Environment variables
2. .env file (if exists)
3. Default values

Usage:
    from imposter.config import Settings
    settings = Settings.from_env()
    print(settings.PORT)
"""

from __future__ import annotations
import os
import random
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

from .constants import (
    DEFAULT_ALLOWED_ORIGINS,
    DEFAULT_CLEANUP_EVERY_MS,
    DEFAULT_GAME_TTL_MS,
)

_env_path = Path.cwd() / ".env"
if _env_path.exists():
    load_dotenv(_env_path)


def get_env(key: str, default: str = "") -> str:
    """Get environment variable with default."""
    return os.environ.get(key, default)


def get_env_bool(key: str, default: bool = False) -> bool:
    """Get boolean environment variable."""
    val = os.environ.get(key, "").lower()
    if val in ("true", "1", "yes", "on"):
        return True
    if val in ("false", "0", "no", "off"):
        return False
    return default


def get_env_int(key: str, default: int = 0) -> int:
    """Get integer environment variable."""
    try:
        return int(os.environ.get(key, str(default)))
    except ValueError:
        return default


def get_env_optional_int(key: str) -> int | None:
    """Get integer environment variable, or None if unset or not an integer."""
    try:
        return int(os.environ.get(key, ""))
    except ValueError:
        return None


def get_env_list(key: str, default: list[str]) -> list[str]:
    """Get comma-separated environment variable as a list."""
    raw = os.environ.get(key)
    if raw is None:
        return list(default)
    return [item.strip() for item in raw.split(",") if item.strip()]


@dataclass
class Settings:
    """Server configuration."""
    HOST: str = "0.0.0.0"
    PORT: int = 8080
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"

    # Session lifetime
    GAME_TTL_MS: int = DEFAULT_GAME_TTL_MS
    CLEANUP_EVERY_MS: int = DEFAULT_CLEANUP_EVERY_MS

    # CORS for the mobile client (Expo dev servers by default)
    ALLOWED_ORIGINS: list[str] = field(default_factory=lambda: list(DEFAULT_ALLOWED_ORIGINS))

    # Seed for reproducible draws; None means system entropy
    RANDOM_SEED: int | None = None

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT == "production"

    @property
    def game_ttl_seconds(self) -> float:
        return self.GAME_TTL_MS / 1000.0

    @property
    def cleanup_interval_seconds(self) -> float:
        return self.CLEANUP_EVERY_MS / 1000.0

    def make_rng(self) -> random.Random:
        """Random source shared by the allocator and imposter selection."""
        return random.Random(self.RANDOM_SEED)

    @classmethod
    def from_env(cls) -> "Settings":
        """Load configuration from environment variables."""
        return cls(
            HOST=get_env("HOST", "0.0.0.0"),
            PORT=get_env_int("PORT", 8080),
            ENVIRONMENT=get_env("ENVIRONMENT", "development"),
            LOG_LEVEL=get_env("LOG_LEVEL", "INFO"),
            GAME_TTL_MS=get_env_int("GAME_TTL_MS", DEFAULT_GAME_TTL_MS),
            CLEANUP_EVERY_MS=get_env_int("CLEANUP_EVERY_MS", DEFAULT_CLEANUP_EVERY_MS),
            ALLOWED_ORIGINS=get_env_list("ALLOWED_ORIGINS", DEFAULT_ALLOWED_ORIGINS),
            RANDOM_SEED=get_env_optional_int("RANDOM_SEED"),
        )
