"""
API Module - Mobile app interface.

Exposes the game core via a small REST API. The mobile app:
1. Lists the built-in categories
2. Creates a game (players, imposters, categories, hints)
3. Passes the phone around; each player reveals their role once
4. Fetches the solution at the end of the round

All state is in-memory and expires after a fixed TTL.
"""

from .models import (
    # Requests
    CreateGameRequest,
    CustomCategoryInput,
    # Responses
    CreateGameResponse,
    RevealResponse,
    SolutionResponse,
    CategorySummary,
    # Shared
    Role,
)
from .service import GameService
from .app import create_app

__all__ = [
    # Requests
    "CreateGameRequest",
    "CustomCategoryInput",
    # Responses
    "CreateGameResponse",
    "RevealResponse",
    "SolutionResponse",
    "CategorySummary",
    # Shared
    "Role",
    # Service
    "GameService",
    "create_app",
]
