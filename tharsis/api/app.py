"""
FastAPI Application - REST API over the rules engine.

Endpoints:
    POST   /api/v1/games                          Create a game
    GET    /api/v1/games                          List games
    GET    /api/v1/games/{id}                     Game summary
    DELETE /api/v1/games/{id}                     End a game
    GET    /api/v1/games/{id}/snapshot            Full serialized state
    POST   /api/v1/games/{id}/operations          Apply a raw operation
    POST   /api/v1/games/{id}/play                Play a card from hand
    POST   /api/v1/games/{id}/actions             Use an action card
    GET    /api/v1/games/{id}/actions             Legal turn actions
    POST   /api/v1/games/{id}/standard-projects   Run a standard project
    POST   /api/v1/games/{id}/advance             Production phase
    GET    /api/v1/games/{id}/victory-points      Scores
    GET    /api/v1/games/{id}/tiles               Tile status at a location
    POST   /api/v1/games/{id}/search              Enumerate generation plays

Move endpoints always answer 200 with a PlayResponse whose status is
PLAYABLE, PARTIAL or UNPLAYABLE; only malformed requests and missing
games are errors. Pass `commit=false` to preview a move.
"""

from typing import Annotated, Optional, Union
import os

from ..engine_core.coordinates import SpecialLocation

# Environment configuration
THARSIS_ENV = os.getenv("THARSIS_ENV", "development")
THARSIS_DEFAULT_CATALOG = os.getenv("THARSIS_DEFAULT_CATALOG", "base")
ALLOWED_ORIGINS = os.getenv("ALLOWED_ORIGINS", "*").split(",")

API_VERSION = "1.0.0"


def create_app(service=None):
    """
    Create the FastAPI application.

    Args:
        service: Optional GameService instance (creates new if not provided)

    Returns:
        FastAPI application instance
    """
    from fastapi import FastAPI, Query
    from fastapi.middleware.cors import CORSMiddleware
    from fastapi.responses import JSONResponse

    from .service import GameService
    from .schemas import (
        # Request models
        CreateGameRequest,
        PlayCardRequest,
        PerformActionRequest,
        StandardProjectRequest,
        ApplyOperationRequest,
        SearchRequest,
        # Response models
        ActionsResponse,
        ErrorResponse,
        GameListResponse,
        GameResponse,
        HealthResponse,
        PlayResponse,
        SearchResponse,
        SnapshotResponse,
        TileStatusResponse,
        VictoryPointsResponse,
        # Enums
        ErrorCode,
        # Nested models
        LocationInfo,
    )

    app = FastAPI(
        title="Tharsis Engine API",
        description="""
Rules engine for Terraforming Mars.

## Moves

`/play`, `/actions` and `/standard-projects` resolve a move against the
current game. The response status is one of:

- **PLAYABLE**: every decision was answered; with `commit=true` the
  game now reflects the move
- **PARTIAL**: a decision is still open, see `pending_choice`; resend
  the move with one more entry in `choices`
- **UNPLAYABLE**: the rules forbid the move, see `reason`

## Error Codes

| Code | Description |
|------|-------------|
| `GAME_NOT_FOUND` | Game does not exist |
| `UNKNOWN_CARD` | Card name is not in the game's catalog |
| `NOT_PERMITTED` | Operation would break a game invariant |
| `VALIDATION_ERROR` | Malformed request |
        """,
        version=API_VERSION,
        docs_url="/api/docs",
        redoc_url="/api/redoc",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    api_service = service or GameService(default_catalog=THARSIS_DEFAULT_CATALOG)

    # =========================================================================
    # Error helpers
    # =========================================================================

    status_codes = {
        ErrorCode.GAME_NOT_FOUND: 404,
        ErrorCode.UNKNOWN_CARD: 400,
        ErrorCode.NOT_PERMITTED: 409,
        ErrorCode.VALIDATION_ERROR: 422,
    }

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
            ).model_dump(mode="json"),
        )

    def respond(result):
        """Pass a service result through, turning ErrorResponse into a JSON error."""
        if isinstance(result, ErrorResponse):
            return make_error_response(
                result.error_code,
                result.error,
                status_code=status_codes.get(result.error_code, 400),
                details=result.details,
            )
        return result

    error_responses = {
        404: {"model": ErrorResponse, "description": "Game not found"},
        422: {"model": ErrorResponse, "description": "Invalid request"},
    }

    # =========================================================================
    # Game Endpoints
    # =========================================================================

    @app.post(
        "/api/v1/games",
        response_model=GameResponse,
        responses={
            400: {"model": ErrorResponse, "description": "Unknown card"},
            422: {"model": ErrorResponse, "description": "Unknown catalog or bad setup"},
        },
        tags=["Games"],
        summary="Create a new game",
    )
    async def create_game(request: CreateGameRequest) -> Union[GameResponse, JSONResponse]:
        """
        Create a new game from player setups.

        Cards are named from the chosen catalog; the rest of the catalog
        is shuffled into the draw deck using `random_seed`.
        """
        return respond(api_service.create_game(request))

    @app.get(
        "/api/v1/games",
        response_model=GameListResponse,
        tags=["Games"],
        summary="List games",
    )
    async def list_games() -> GameListResponse:
        games = api_service.list_games()
        return GameListResponse(games=games, count=len(games))

    @app.get(
        "/api/v1/games/{game_id}",
        response_model=GameResponse,
        responses={404: {"model": ErrorResponse}},
        tags=["Games"],
        summary="Get game summary",
    )
    async def get_game(game_id: str) -> Union[GameResponse, JSONResponse]:
        return respond(api_service.get_game(game_id))

    @app.delete(
        "/api/v1/games/{game_id}",
        responses={404: {"model": ErrorResponse}},
        tags=["Games"],
        summary="End a game",
    )
    async def end_game(game_id: str):
        """End a game and release it."""
        if not api_service.end_game(game_id):
            return make_error_response(
                ErrorCode.GAME_NOT_FOUND,
                f"Game {game_id} not found",
                status_code=404,
            )
        return {"success": True, "game_id": game_id}

    @app.get(
        "/api/v1/games/{game_id}/snapshot",
        response_model=SnapshotResponse,
        responses={404: {"model": ErrorResponse}},
        tags=["Games"],
        summary="Get the full game state",
    )
    async def get_snapshot(game_id: str) -> Union[SnapshotResponse, JSONResponse]:
        return respond(api_service.get_snapshot(game_id))

    @app.post(
        "/api/v1/games/{game_id}/operations",
        response_model=GameResponse,
        responses={**error_responses, 409: {"model": ErrorResponse}},
        tags=["Games"],
        summary="Apply a raw game operation",
    )
    async def apply_operation(
        game_id: str, request: ApplyOperationRequest
    ) -> Union[GameResponse, JSONResponse]:
        """
        Apply one state transition directly.

        Operations that would break a game invariant (negative resources,
        occupied tiles, cards not in hand) are refused with NOT_PERMITTED
        and leave the game untouched.
        """
        return respond(api_service.apply_operation(game_id, request.operation))

    @app.post(
        "/api/v1/games/{game_id}/advance",
        response_model=GameResponse,
        responses={404: {"model": ErrorResponse}},
        tags=["Games"],
        summary="Run the production phase",
    )
    async def advance_generation(game_id: str) -> Union[GameResponse, JSONResponse]:
        """Convert energy to heat, produce, untap action cards and start the next generation."""
        return respond(api_service.advance_generation(game_id))

    # =========================================================================
    # Move Endpoints
    # =========================================================================

    @app.post(
        "/api/v1/games/{game_id}/play",
        response_model=PlayResponse,
        responses=error_responses,
        tags=["Moves"],
        summary="Play a card from hand",
    )
    async def play_card(game_id: str, request: PlayCardRequest) -> Union[PlayResponse, JSONResponse]:
        return respond(api_service.play_card(
            game_id,
            request.player_id,
            request.card_name,
            request.choices,
            commit=request.commit,
        ))

    @app.post(
        "/api/v1/games/{game_id}/actions",
        response_model=PlayResponse,
        responses=error_responses,
        tags=["Moves"],
        summary="Use an action on a played card",
    )
    async def perform_action(
        game_id: str, request: PerformActionRequest
    ) -> Union[PlayResponse, JSONResponse]:
        return respond(api_service.perform_action(
            game_id,
            request.player_id,
            request.instance_id,
            request.action_index,
            request.choices,
            commit=request.commit,
        ))

    @app.get(
        "/api/v1/games/{game_id}/actions",
        response_model=ActionsResponse,
        responses=error_responses,
        tags=["Moves"],
        summary="List legal turn actions",
    )
    async def legal_actions(
        game_id: str,
        player_id: Annotated[int, Query(description="Player whose turn it is")],
    ) -> Union[ActionsResponse, JSONResponse]:
        """
        List every turn action the player could start right now.

        Placement targets are not enumerated; an action listed here may
        still come back PARTIAL when played.
        """
        result = api_service.legal_actions(game_id, player_id)
        if isinstance(result, ErrorResponse):
            return respond(result)
        return ActionsResponse(player_id=player_id, actions=result)

    @app.post(
        "/api/v1/games/{game_id}/standard-projects",
        response_model=PlayResponse,
        responses=error_responses,
        tags=["Moves"],
        summary="Run a standard project",
    )
    async def standard_project(
        game_id: str, request: StandardProjectRequest
    ) -> Union[PlayResponse, JSONResponse]:
        return respond(api_service.standard_project(
            game_id,
            request.player_id,
            request.project,
            request.choices,
            commit=request.commit,
        ))

    # =========================================================================
    # Query Endpoints
    # =========================================================================

    @app.get(
        "/api/v1/games/{game_id}/victory-points",
        response_model=VictoryPointsResponse,
        responses={404: {"model": ErrorResponse}},
        tags=["Queries"],
        summary="Current victory points per player",
    )
    async def victory_points(game_id: str) -> Union[VictoryPointsResponse, JSONResponse]:
        return respond(api_service.victory_points(game_id))

    @app.get(
        "/api/v1/games/{game_id}/tiles",
        response_model=TileStatusResponse,
        responses=error_responses,
        tags=["Queries"],
        summary="What occupies a location",
    )
    async def tile_status(
        game_id: str,
        x: Annotated[Optional[int], Query(description="Column on Mars")] = None,
        y: Annotated[Optional[int], Query(description="Row on Mars")] = None,
        special: Annotated[Optional[SpecialLocation], Query(description="Named off-Mars space")] = None,
    ) -> Union[TileStatusResponse, JSONResponse]:
        """Give either `x` and `y`, or `special`."""
        return respond(api_service.tile_status(game_id, LocationInfo(x=x, y=y, special=special)))

    @app.post(
        "/api/v1/games/{game_id}/search",
        response_model=SearchResponse,
        responses={**error_responses, 400: {"model": ErrorResponse}},
        tags=["Queries"],
        summary="Enumerate one player's possible generations",
    )
    def search(game_id: str, request: SearchRequest) -> Union[SearchResponse, JSONResponse]:
        """
        Enumerate every affordable purchase of the offered cards and every
        way to play the resulting hand. At most 10 cards may be offered.
        """
        return respond(api_service.search(
            game_id,
            request.player_id,
            request.offered_cards,
            all_orderings=request.all_orderings,
        ))

    # =========================================================================
    # Health Check
    # =========================================================================

    @app.get(
        "/health",
        response_model=HealthResponse,
        tags=["System"],
        summary="Health check",
    )
    async def health_check() -> HealthResponse:
        """Health check endpoint for load balancers."""
        return HealthResponse(
            status="healthy",
            service="tharsis-engine",
            version=API_VERSION,
        )

    @app.get("/", tags=["System"])
    async def root():
        """Root endpoint with API info."""
        return {
            "name": "Tharsis Engine API",
            "version": API_VERSION,
            "environment": THARSIS_ENV,
            "docs": "/api/docs",
            "health": "/health",
        }

    return app


# For running directly: uvicorn tharsis.api.app:app
app = create_app()
