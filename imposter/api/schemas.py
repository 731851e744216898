"""
Pydantic Schemas for API - Request/response models for OpenAPI.

These models define the exact JSON contract with the mobile app. Field
names are snake_case in Python and camelCase on the wire.

Request bodies are deliberately loose (Any-typed fields): the ordered
validation in CreateGameRequest.from_payload decides which error code a
bad body gets, instead of a generic framework 422.

Error Codes:
- MISSING_CATEGORY, INVALID_PLAYER_COUNT, INVALID_IMPOSTER_COUNT,
  INVALID_FLAG, TOO_MANY_CATEGORIES, TOO_MANY_CUSTOM_CATEGORIES,
  INVALID_CUSTOM_CATEGORY, WORD_TOO_LONG, HINT_TOO_LONG,
  INVALID_PLAYER_NUMBER, VALIDATION_ERROR: 400
- UNKNOWN_CATEGORY, SESSION_NOT_FOUND, NOT_FOUND: 404
- ALREADY_REVEALED: 409
- TOO_MANY_WORDS: 413
- EMPTY_WORD_SET, INTERNAL_ERROR: 500
"""

from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from ..errors import ErrorCode

__all__ = [
    "ErrorCode",
    "CreateGameBody",
    "RevealBody",
    "CategoryItem",
    "CreateGameResult",
    "PlayerReveal",
    "ImposterReveal",
    "SolutionResult",
    "HealthResponse",
    "ErrorResponse",
]


class CamelModel(BaseModel):
    """Base model with camelCase aliases that also accepts field names."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# =============================================================================
# Request Models
# =============================================================================

class CreateGameBody(CamelModel):
    """Request to create a new game."""
    category_ids: Optional[Any] = Field(None, description="Selected category ids (1-10)")
    category_id: Optional[Any] = Field(None, description="Legacy single category id")
    num_players: Any = Field(None, description="Number of players (3-20)")
    num_imposters: Any = Field(None, description="Number of imposters (1 to numPlayers-1)")
    hints_enabled: Any = Field(None, description="Whether imposters receive a hint")
    custom_categories: Optional[Any] = Field(
        None, description="Up to 50 client-defined categories: {id, name, words: [{word, hint?}]}"
    )


class RevealBody(CamelModel):
    """Request to reveal one player's role."""
    player_number: Any = Field(None, description="1-based player number")


# =============================================================================
# Response Models
# =============================================================================

class CategoryItem(BaseModel):
    """A built-in category."""
    id: str
    name: str


class CreateGameResult(CamelModel):
    """Response after creating a game."""
    game_id: str
    num_players: int


class PlayerReveal(BaseModel):
    """Reveal result for a regular player: the secret word."""
    role: Literal["player"] = "player"
    word: str


class ImposterReveal(BaseModel):
    """Reveal result for an imposter: the hint, if hints are on."""
    role: Literal["imposter"] = "imposter"
    hint: Optional[str] = None


class SolutionResult(BaseModel):
    """The word and the sorted imposter player numbers."""
    word: str
    imposters: list[int]


class HealthResponse(BaseModel):
    """Health check response."""
    ok: bool = True


class ErrorResponse(BaseModel):
    """Standard error response."""
    error: str = Field(..., description="Human-readable error message")
    error_code: ErrorCode = Field(..., description="Machine-readable error code")
    details: Optional[dict[str, Any]] = Field(None, description="Additional error context")
