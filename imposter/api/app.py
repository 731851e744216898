"""
FastAPI Application - REST API for the mobile app.

Endpoints:
    GET    /health                   Liveness check
    GET    /categories               Built-in categories (id, name)
    POST   /games                    Create a game
    POST   /games/{game_id}/reveal   Reveal one player's role (once)
    GET    /games/{game_id}/solution Word and imposters

All responses are JSON. Errors use a single shape:
    {"error": "<message>", "error_code": "<ERROR_CODE>"}

Unmatched routes return 404 {"error": "Not found"}; unexpected faults
return 500 with a generic message and are logged server-side.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional, Union

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .models import CreateGameRequest, Role
from .schemas import (
    # Request models
    CreateGameBody,
    RevealBody,
    # Response models
    CategoryItem,
    CreateGameResult,
    ErrorResponse,
    HealthResponse,
    ImposterReveal,
    PlayerReveal,
    SolutionResult,
    # Enums
    ErrorCode,
)
from .service import GameService
from .. import __version__
from ..config import Settings
from ..errors import GameError
from ..logging_config import game_id_var, setup_logging
from ..session import SessionManager, SessionSweeper

logger = logging.getLogger(__name__)


def create_service(settings: Settings) -> GameService:
    """Build the process-wide service from settings."""
    return GameService(
        session_manager=SessionManager(ttl_seconds=settings.game_ttl_seconds),
        rng=settings.make_rng(),
    )


def create_app(
    service: Optional[GameService] = None,
    settings: Optional[Settings] = None,
) -> FastAPI:
    """
    Create the FastAPI application.

    Args:
        service: Optional GameService instance (creates new if not provided)
        settings: Optional Settings (loaded from the environment if not provided)

    Returns:
        FastAPI application instance
    """
    settings = settings or Settings.from_env()
    game_service = service or create_service(settings)
    sweeper = SessionSweeper(
        game_service.session_manager,
        interval_seconds=settings.cleanup_interval_seconds,
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        await sweeper.start()
        logger.info(f"Game server started (environment={settings.ENVIRONMENT})")
        yield
        await sweeper.stop()

    app = FastAPI(
        title="Imposter Game API",
        description="Session backend for the imposter word game.",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.service = game_service
    app.state.sweeper = sweeper

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOWED_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    if not settings.is_production:
        @app.middleware("http")
        async def log_requests(request: Request, call_next):
            response = await call_next(request)
            logger.info(f"{request.method} {request.url.path} -> {response.status_code}")
            return response

    # =========================================================================
    # Error helpers
    # =========================================================================

    def make_error_response(
        error_code: ErrorCode,
        message: str,
        status_code: int = 400,
        details: Optional[dict] = None,
    ) -> JSONResponse:
        """Create a standardized error response."""
        return JSONResponse(
            status_code=status_code,
            content=ErrorResponse(
                error=message,
                error_code=error_code,
                details=details,
            ).model_dump(mode="json", exclude_none=True),
        )

    @app.exception_handler(GameError)
    async def handle_game_error(request: Request, exc: GameError) -> JSONResponse:
        if exc.is_server_fault:
            logger.error(f"{request.method} {request.url.path} failed: {exc.code.value}: {exc.message}")
            return make_error_response(exc.code, exc.default_message, exc.status_code)
        return make_error_response(exc.code, exc.message, exc.status_code, exc.details)

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
        return make_error_response(
            ErrorCode.VALIDATION_ERROR,
            "Request body must be a JSON object",
        )

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        if exc.status_code == 404:
            return make_error_response(ErrorCode.NOT_FOUND, "Not found", status_code=404)
        return make_error_response(
            ErrorCode.HTTP_ERROR, str(exc.detail), status_code=exc.status_code
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        return make_error_response(
            ErrorCode.INTERNAL_ERROR, "Internal server error", status_code=500
        )

    # =========================================================================
    # System
    # =========================================================================

    @app.get(
        "/health",
        response_model=HealthResponse,
        tags=["System"],
        summary="Health check",
    )
    async def health_check() -> HealthResponse:
        """Health check endpoint for load balancers."""
        return HealthResponse(ok=True)

    # =========================================================================
    # Categories
    # =========================================================================

    @app.get(
        "/categories",
        response_model=list[CategoryItem],
        tags=["Categories"],
        summary="List built-in categories",
    )
    async def list_categories() -> list[CategoryItem]:
        return [CategoryItem(id=c.id, name=c.name) for c in game_service.list_categories()]

    # =========================================================================
    # Games
    # =========================================================================

    @app.post(
        "/games",
        response_model=CreateGameResult,
        responses={
            400: {"model": ErrorResponse, "description": "Invalid parameters"},
            404: {"model": ErrorResponse, "description": "Unknown category"},
            413: {"model": ErrorResponse, "description": "Too many words"},
            500: {"model": ErrorResponse, "description": "Category has no words"},
        },
        tags=["Games"],
        summary="Create a new game",
    )
    def create_game(body: Optional[CreateGameBody] = None) -> CreateGameResult:
        """
        Create a new game.

        **Request Body:**
        ```json
        {
            "categoryIds": ["animals", "food"],
            "numPlayers": 5,
            "numImposters": 1,
            "hintsEnabled": true,
            "customCategories": [
                {"id": "office", "name": "Office", "words": [{"word": "Stapler", "hint": "Click"}]}
            ]
        }
        ```
        """
        payload = body.model_dump(by_alias=True) if body is not None else {}
        request = CreateGameRequest.from_payload(payload)
        response = game_service.create_game(request)
        return CreateGameResult(game_id=response.game_id, num_players=response.num_players)

    @app.post(
        "/games/{game_id}/reveal",
        response_model=Union[PlayerReveal, ImposterReveal],
        responses={
            400: {"model": ErrorResponse, "description": "Invalid player number"},
            404: {"model": ErrorResponse, "description": "Game not found"},
            409: {"model": ErrorResponse, "description": "Player already revealed"},
        },
        tags=["Games"],
        summary="Reveal one player's role",
    )
    def reveal(game_id: str, body: Optional[RevealBody] = None) -> Union[PlayerReveal, ImposterReveal]:
        """
        Reveal the role of one player. Works exactly once per player:
        later calls get 409, so the client must keep the first response.
        """
        game_id_var.set(game_id)
        player_number = body.player_number if body is not None else None
        result = game_service.reveal(game_id, player_number)
        if result.role == Role.IMPOSTER:
            return ImposterReveal(hint=result.hint)
        return PlayerReveal(word=result.word)

    @app.get(
        "/games/{game_id}/solution",
        response_model=SolutionResult,
        responses={404: {"model": ErrorResponse, "description": "Game not found"}},
        tags=["Games"],
        summary="Get the word and the imposters",
    )
    def solution(game_id: str) -> SolutionResult:
        game_id_var.set(game_id)
        result = game_service.solution(game_id)
        return SolutionResult(word=result.word, imposters=result.imposters)

    return app


# For running directly: uvicorn imposter.api.app:app
settings = Settings.from_env()
setup_logging(level=settings.LOG_LEVEL, environment=settings.ENVIRONMENT)
app = create_app(settings=settings)
