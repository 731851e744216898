"""
Pytest fixtures for game backend tests.
"""

import random

import pytest

from imposter.api.service import GameService
from imposter.catalog import Category, CategoryCatalog
from imposter.config import Settings
from imposter.session import SessionManager

TTL_SECONDS = 45 * 60
SWEEP_SECONDS = 5 * 60


class FakeClock:
    """Manually advanced clock for TTL tests."""

    def __init__(self, start: float = 1_000_000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def rng() -> random.Random:
    """Seeded random source for reproducible draws."""
    return random.Random(1234)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def small_catalog() -> CategoryCatalog:
    """A tiny catalog: one hinted category, one without hints, one empty."""
    return CategoryCatalog([
        Category.build("animals", "Animals", [
            ("Elephant", "Big"),
            ("Giraffe", "Tall"),
            ("Penguin", "Cold"),
            ("Kangaroo", "Jump"),
            ("Dolphin", "Smart"),
        ]),
        Category.build("colors", "Colors", [
            ("Red", None),
            ("Green", None),
            ("Blue", None),
        ]),
        Category.build("empty", "Nothing Here", []),
    ])


@pytest.fixture
def session_manager(clock: FakeClock) -> SessionManager:
    return SessionManager(ttl_seconds=TTL_SECONDS, clock=clock)


@pytest.fixture
def service(small_catalog, session_manager, rng) -> GameService:
    """Game service wired to the small catalog and the fake clock."""
    return GameService(
        catalog=small_catalog,
        session_manager=session_manager,
        rng=rng,
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(
        ENVIRONMENT="test",
        GAME_TTL_MS=TTL_SECONDS * 1000,
        CLEANUP_EVERY_MS=SWEEP_SECONDS * 1000,
        RANDOM_SEED=1234,
    )


@pytest.fixture
def create_payload() -> dict:
    """A valid create-game body."""
    return {
        "categoryIds": ["animals"],
        "numPlayers": 5,
        "numImposters": 1,
        "hintsEnabled": True,
    }
