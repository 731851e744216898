"""
Error taxonomy for the game backend.

Every failure the core can report is a GameError subclass carrying:
- code: machine-stable ErrorCode (what clients switch on)
- status_code: the HTTP status the API layer responds with
- message: human-readable text, safe to show to players

Categories:
- Client input errors (4xx): safe to retry after fixing the request
- State conflicts (409): the reveal already happened
- Not found (404): unknown or expired game, unknown category
- Server faults (5xx): misconfigured categories; message stays generic

The core never retries anything itself.
"""

from __future__ import annotations
from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Structured error codes."""
    MISSING_CATEGORY = "MISSING_CATEGORY"
    INVALID_PLAYER_COUNT = "INVALID_PLAYER_COUNT"
    INVALID_IMPOSTER_COUNT = "INVALID_IMPOSTER_COUNT"
    INVALID_FLAG = "INVALID_FLAG"
    TOO_MANY_CATEGORIES = "TOO_MANY_CATEGORIES"
    TOO_MANY_CUSTOM_CATEGORIES = "TOO_MANY_CUSTOM_CATEGORIES"
    INVALID_CUSTOM_CATEGORY = "INVALID_CUSTOM_CATEGORY"
    UNKNOWN_CATEGORY = "UNKNOWN_CATEGORY"
    EMPTY_WORD_SET = "EMPTY_WORD_SET"
    TOO_MANY_WORDS = "TOO_MANY_WORDS"
    WORD_TOO_LONG = "WORD_TOO_LONG"
    HINT_TOO_LONG = "HINT_TOO_LONG"
    SESSION_NOT_FOUND = "SESSION_NOT_FOUND"
    INVALID_PLAYER_NUMBER = "INVALID_PLAYER_NUMBER"
    ALREADY_REVEALED = "ALREADY_REVEALED"
    POOL_NOT_FOUND = "POOL_NOT_FOUND"
    EMPTY_POOL = "EMPTY_POOL"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    NOT_FOUND = "NOT_FOUND"
    HTTP_ERROR = "HTTP_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class GameError(Exception):
    """Base class for every error the game core reports."""

    code: ErrorCode = ErrorCode.INTERNAL_ERROR
    status_code: int = 500
    default_message: str = "Internal server error"

    def __init__(self, message: str | None = None, details: dict[str, Any] | None = None):
        self.message = message or self.default_message
        self.details = details
        super().__init__(self.message)

    @property
    def is_server_fault(self) -> bool:
        return self.status_code >= 500


# =============================================================================
# Client input errors
# =============================================================================

class ValidationFailed(GameError):
    code = ErrorCode.VALIDATION_ERROR
    status_code = 400
    default_message = "Request body must be a JSON object"


class MissingCategory(GameError):
    code = ErrorCode.MISSING_CATEGORY
    status_code = 400
    default_message = "categoryIds (or categoryId) is required"


class InvalidPlayerCount(GameError):
    code = ErrorCode.INVALID_PLAYER_COUNT
    status_code = 400
    default_message = "numPlayers must be an integer between 3 and 20"


class InvalidImposterCount(GameError):
    code = ErrorCode.INVALID_IMPOSTER_COUNT
    status_code = 400
    default_message = "numImposters must be >= 1 and < numPlayers"


class InvalidFlag(GameError):
    code = ErrorCode.INVALID_FLAG
    status_code = 400
    default_message = "hintsEnabled must be boolean"


class TooManyCategories(GameError):
    code = ErrorCode.TOO_MANY_CATEGORIES
    status_code = 400
    default_message = "Too many categories selected"


class TooManyCustomCategories(GameError):
    code = ErrorCode.TOO_MANY_CUSTOM_CATEGORIES
    status_code = 400
    default_message = "Too many custom categories"


class InvalidCustomCategory(GameError):
    code = ErrorCode.INVALID_CUSTOM_CATEGORY
    status_code = 400
    default_message = "Custom categories need an id, a name and a list of words"


class UnknownCategory(GameError):
    code = ErrorCode.UNKNOWN_CATEGORY
    status_code = 404
    default_message = "One or more categoryIds are unknown"


class TooManyWords(GameError):
    code = ErrorCode.TOO_MANY_WORDS
    status_code = 413
    default_message = "Too many words in selected categories"


class WordTooLong(GameError):
    code = ErrorCode.WORD_TOO_LONG
    status_code = 400
    default_message = "Word too long"


class HintTooLong(GameError):
    code = ErrorCode.HINT_TOO_LONG
    status_code = 400
    default_message = "Hint too long"


class InvalidPlayerNumber(GameError):
    code = ErrorCode.INVALID_PLAYER_NUMBER
    status_code = 400
    default_message = "playerNumber is out of range"


# =============================================================================
# Not found / conflict
# =============================================================================

class SessionNotFound(GameError):
    code = ErrorCode.SESSION_NOT_FOUND
    status_code = 404
    default_message = "Game not found"


class AlreadyRevealed(GameError):
    code = ErrorCode.ALREADY_REVEALED
    status_code = 409
    default_message = "This player has already revealed"


class PoolNotFound(GameError):
    """Raised by the allocator for a category that was never registered."""
    code = ErrorCode.POOL_NOT_FOUND
    status_code = 500


# =============================================================================
# Server faults
# =============================================================================

class EmptyWordSet(GameError):
    code = ErrorCode.EMPTY_WORD_SET
    status_code = 500
    default_message = "Selected categories have no words configured"


class EmptyPool(GameError):
    code = ErrorCode.EMPTY_POOL
    status_code = 500
