"""
Game Service - Business logic layer between the API and the game core.

The service:
1. Resolves categories (custom before built-in) and validates word sets
2. Feeds the word allocator and draws the secret word
3. Picks imposters and stores the new session
4. Runs the one-shot reveal protocol
5. Formats results for the client

This layer is framework-agnostic (can be used with FastAPI, Flask, etc.)
"""

from __future__ import annotations
import logging
import random
from dataclasses import dataclass, field
from typing import Any

from .models import (
    CategorySummary,
    CreateGameRequest,
    CreateGameResponse,
    RevealResponse,
    Role,
    SolutionResponse,
    as_integer,
)
from ..catalog import Category, CategoryCatalog, create_builtin_catalog
from ..constants import MAX_HINT_LENGTH, MAX_TOTAL_WORDS, MAX_WORD_LENGTH
from ..errors import (
    AlreadyRevealed,
    EmptyWordSet,
    HintTooLong,
    InvalidPlayerNumber,
    SessionNotFound,
    TooManyWords,
    UnknownCategory,
    WordTooLong,
)
from ..session import GameSession, SessionManager
from ..words import WordAllocator

logger = logging.getLogger(__name__)


def pick_unique_numbers(count: int, max_inclusive: int, rng: random.Random) -> frozenset[int]:
    """
    Pick `count` distinct numbers from 1..max_inclusive.

    Rejection sampling: draw, and retry on a duplicate.
    """
    if not 0 <= count <= max_inclusive:
        raise ValueError(f"Cannot pick {count} distinct numbers from 1..{max_inclusive}")

    chosen: set[int] = set()
    while len(chosen) < count:
        chosen.add(rng.randint(1, max_inclusive))
    return frozenset(chosen)


@dataclass
class GameService:
    """
    Main game service.

    Usage:
        service = GameService()

        # Create a game
        response = service.create_game(CreateGameRequest.from_payload(body))

        # Each player reveals once
        reveal = service.reveal(response.game_id, 3)

        # After the round
        solution = service.solution(response.game_id)
    """
    catalog: CategoryCatalog = field(default_factory=create_builtin_catalog)
    session_manager: SessionManager = field(default_factory=SessionManager)
    rng: random.Random = None  # type: ignore
    allocator: WordAllocator = None  # type: ignore

    def __post_init__(self):
        if self.rng is None:
            self.rng = random.Random()
        if self.allocator is None:
            self.allocator = WordAllocator(rng=self.rng)

    # =========================================================================
    # Categories
    # =========================================================================

    def list_categories(self) -> list[CategorySummary]:
        """Id and name of every built-in category."""
        return [CategorySummary(id=c["id"], name=c["name"]) for c in self.catalog.summaries()]

    def _resolve_categories(self, request: CreateGameRequest) -> list[Category]:
        """Resolve every requested id; custom definitions shadow built-ins."""
        custom_by_id = {c.id: c.to_category() for c in request.custom_categories}

        resolved = []
        unknown = []
        for category_id in request.category_ids:
            category = custom_by_id.get(category_id)
            if category is None:
                category = self.catalog.get(category_id)
            if category is None:
                unknown.append(category_id)
            else:
                resolved.append(category)

        if unknown:
            raise UnknownCategory(details={"unknown": unknown})
        return resolved

    # =========================================================================
    # Game lifecycle
    # =========================================================================

    def create_game(self, request: CreateGameRequest) -> CreateGameResponse:
        """
        Create a new game.

        All checks run before anything is registered or stored, so a
        rejected request leaves no trace.
        """
        categories = self._resolve_categories(request)

        combined_words = [w for c in categories for w in c.words]
        if not combined_words:
            logger.error(
                f"Categories {request.category_ids} have no words configured"
            )
            raise EmptyWordSet()

        if len(combined_words) > MAX_TOTAL_WORDS:
            raise TooManyWords()

        for entry in combined_words:
            if len(entry.word) > MAX_WORD_LENGTH:
                raise WordTooLong()
            if entry.hint and len(entry.hint) > MAX_HINT_LENGTH:
                raise HintTooLong()

        for category_id, category in zip(request.category_ids, categories):
            self.allocator.register_pool(category_id, category.words)

        # Only the source category's pool is consumed for this game
        source_id = self.rng.choice(request.category_ids)
        chosen = self.allocator.draw(source_id)

        imposters = pick_unique_numbers(
            request.num_imposters, request.num_players, self.rng
        )

        session = GameSession(
            category_ids=tuple(request.category_ids),
            num_players=request.num_players,
            num_imposters=request.num_imposters,
            hints_enabled=request.hints_enabled,
            chosen=chosen,
            imposters=imposters,
            created_at=self.session_manager.clock(),
        )
        game_id = self.session_manager.add_session(session)

        logger.info(
            f"Game created: {request.num_players} players, "
            f"{request.num_imposters} imposter(s), source={source_id}",
            extra={"game_id": game_id},
        )
        return CreateGameResponse(game_id=game_id, num_players=request.num_players)

    def reveal(self, game_id: str, player_number: Any) -> RevealResponse:
        """
        Reveal one player's role. Each player number succeeds exactly once.

        The check and the state change happen under the session lock, so
        two concurrent reveals for the same player cannot both succeed.
        """
        with self.session_manager.locked_session(game_id) as session:
            number = as_integer(player_number)
            if number is None or not 1 <= number <= session.num_players:
                raise InvalidPlayerNumber(
                    f"playerNumber must be 1..{session.num_players}"
                )

            if session.is_revealed(number):
                raise AlreadyRevealed()

            session.revealed.add(number)

            logger.debug(
                f"Player revealed ({len(session.revealed)}/{session.num_players})",
                extra={"game_id": game_id, "player_number": number},
            )

            if session.is_imposter(number):
                hint = session.chosen.hint if session.hints_enabled else None
                return RevealResponse(role=Role.IMPOSTER, hint=hint)

            return RevealResponse(role=Role.PLAYER, word=session.chosen.word)

    def solution(self, game_id: str) -> SolutionResponse:
        """The word and the imposters. Read-only."""
        session = self.session_manager.get_session(game_id)
        if session is None:
            raise SessionNotFound()

        return SolutionResponse(
            word=session.chosen.word,
            imposters=session.sorted_imposters(),
        )

    def end_game(self, game_id: str) -> bool:
        """Drop a game before its TTL runs out."""
        return self.session_manager.end_session(game_id)

    def list_games(self) -> list[str]:
        """List live game IDs."""
        return self.session_manager.list_sessions()
