"""
API Module - HTTP interface to the engine.

Exposes the engine via a REST API:
1. Create games from player setups and a card catalog
2. Resolve card plays, card actions and standard projects
3. Query legal actions, tile statuses and scores
4. Search one player's possible generations

Games live in memory for the lifetime of the service.
"""

from .schemas import (
    # Requests
    CreateGameRequest,
    PlayCardRequest,
    PerformActionRequest,
    StandardProjectRequest,
    ApplyOperationRequest,
    SearchRequest,
    # Responses
    GameResponse,
    PlayResponse,
    SearchResponse,
    ErrorResponse,
    ErrorCode,
    # Shared
    ChoiceInfo,
    LocationInfo,
    PlayerInfo,
)
from .service import GameService
from .app import create_app

__all__ = [
    # Requests
    "CreateGameRequest",
    "PlayCardRequest",
    "PerformActionRequest",
    "StandardProjectRequest",
    "ApplyOperationRequest",
    "SearchRequest",
    # Responses
    "GameResponse",
    "PlayResponse",
    "SearchResponse",
    "ErrorResponse",
    "ErrorCode",
    # Shared
    "ChoiceInfo",
    "LocationInfo",
    "PlayerInfo",
    # Service
    "GameService",
    "create_app",
]
