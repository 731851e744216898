"""
API Models - Request and response types for the game service.

These models define the contract between the HTTP layer and the service.
They are plain dataclasses so the service stays framework-agnostic.

Design principles:
- Raw request bodies are validated into typed requests at the boundary
  (CreateGameRequest.from_payload); the service never sees raw dicts
- Validation order is fixed and each failure has its own error code
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from ..catalog import Category, WordEntry
from ..constants import (
    MAX_CATEGORY_IDS,
    MAX_CUSTOM_CATEGORIES,
    MAX_PLAYERS,
    MIN_IMPOSTERS,
    MIN_PLAYERS,
)
from ..errors import (
    InvalidCustomCategory,
    InvalidFlag,
    InvalidImposterCount,
    InvalidPlayerCount,
    MissingCategory,
    TooManyCategories,
    TooManyCustomCategories,
    ValidationFailed,
)


class Role(str, Enum):
    PLAYER = "player"
    IMPOSTER = "imposter"


def as_integer(value: Any) -> int | None:
    """
    Return value as an int if it is an integral JSON number, else None.

    Booleans are rejected even though bool subclasses int; 5.0 counts.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return None


# =============================================================================
# Request Models
# =============================================================================

@dataclass
class CustomCategoryInput:
    """A category defined by the client for a single game."""
    id: str
    name: str
    words: list[WordEntry] = field(default_factory=list)

    @classmethod
    def from_payload(cls, payload: Any) -> "CustomCategoryInput":
        if not isinstance(payload, dict):
            raise InvalidCustomCategory()

        category_id = payload.get("id")
        name = payload.get("name")
        words = payload.get("words")
        if not isinstance(category_id, str) or not isinstance(name, str):
            raise InvalidCustomCategory()
        if not isinstance(words, list):
            raise InvalidCustomCategory(f"Custom category {category_id} needs a list of words")

        entries = []
        for item in words:
            if not isinstance(item, dict) or not isinstance(item.get("word"), str):
                raise InvalidCustomCategory(f"Custom category {category_id} has a malformed word")
            hint = item.get("hint")
            if hint is not None and not isinstance(hint, str):
                raise InvalidCustomCategory(f"Custom category {category_id} has a malformed hint")
            entries.append(WordEntry(word=item["word"], hint=hint))

        return cls(id=category_id, name=name, words=entries)

    def to_category(self) -> Category:
        return Category(id=self.id, name=self.name, words=tuple(self.words))


@dataclass
class CreateGameRequest:
    """Validated request to create a game."""
    category_ids: list[str]
    num_players: int
    num_imposters: int
    hints_enabled: bool
    custom_categories: list[CustomCategoryInput] = field(default_factory=list)

    @classmethod
    def from_payload(cls, payload: Any) -> "CreateGameRequest":
        """
        Validate a raw create-game body.

        Checks run in this order, the first failure wins:
        1. at least one category id (categoryIds, or legacy categoryId)
        2. numPlayers in [3, 20]
        3. numImposters in [1, numPlayers - 1]
        4. hintsEnabled is a boolean
        5. at most 10 category ids and 50 custom categories

        Category resolution and word checks need the catalog and happen
        in the service.
        """
        if not isinstance(payload, dict):
            raise ValidationFailed()

        category_ids = payload.get("categoryIds")
        legacy_id = payload.get("categoryId")
        if isinstance(category_ids, list) and category_ids:
            ids = [str(c) for c in category_ids]
        elif legacy_id:
            ids = [str(legacy_id)]
        else:
            raise MissingCategory()

        num_players = as_integer(payload.get("numPlayers"))
        if num_players is None or not MIN_PLAYERS <= num_players <= MAX_PLAYERS:
            raise InvalidPlayerCount()

        num_imposters = as_integer(payload.get("numImposters"))
        if num_imposters is None or not MIN_IMPOSTERS <= num_imposters < num_players:
            raise InvalidImposterCount()

        hints_enabled = payload.get("hintsEnabled")
        if not isinstance(hints_enabled, bool):
            raise InvalidFlag()

        if len(ids) > MAX_CATEGORY_IDS:
            raise TooManyCategories()

        raw_custom = payload.get("customCategories")
        if raw_custom is None:
            raw_custom = []
        if not isinstance(raw_custom, list):
            raise InvalidCustomCategory("customCategories must be a list")
        if len(raw_custom) > MAX_CUSTOM_CATEGORIES:
            raise TooManyCustomCategories()

        return cls(
            category_ids=ids,
            num_players=num_players,
            num_imposters=num_imposters,
            hints_enabled=hints_enabled,
            custom_categories=[CustomCategoryInput.from_payload(c) for c in raw_custom],
        )


# =============================================================================
# Response Models
# =============================================================================

@dataclass
class CreateGameResponse:
    game_id: str
    num_players: int


@dataclass
class RevealResponse:
    """What one player sees when they reveal."""
    role: Role
    word: str | None = None
    hint: str | None = None

    @property
    def is_imposter(self) -> bool:
        return self.role == Role.IMPOSTER


@dataclass
class SolutionResponse:
    word: str
    imposters: list[int]


@dataclass
class CategorySummary:
    id: str
    name: str
