"""
Pydantic Schemas for API - Request/response models for OpenAPI.

These models define the contract between HTTP callers and the engine.
All responses include explicit types for OpenAPI schema generation.

Error Codes:
- GAME_NOT_FOUND: Game id does not exist
- UNKNOWN_CARD: Card name is not in the game's catalog
- NOT_PERMITTED: The rules forbid the requested move
- VALIDATION_ERROR: The request is malformed
"""

from enum import Enum
from typing import Optional, Any
from pydantic import BaseModel, Field

from ..catalog.resource import Resource
from ..engine_core.coordinates import SpecialLocation
from ..engine_core.operation import GameOperation, PlayStatus, StandardProject


# =============================================================================
# Enums
# =============================================================================

class ErrorCode(str, Enum):
    """Structured error codes."""
    GAME_NOT_FOUND = "GAME_NOT_FOUND"
    UNKNOWN_CARD = "UNKNOWN_CARD"
    NOT_PERMITTED = "NOT_PERMITTED"
    VALIDATION_ERROR = "VALIDATION_ERROR"


# =============================================================================
# Shared Models
# =============================================================================

class LocationInfo(BaseModel):
    """A tile location: (x, y) on Mars, or a named off-Mars space."""
    x: Optional[int] = None
    y: Optional[int] = None
    special: Optional[SpecialLocation] = None


class PlayerInfo(BaseModel):
    """Player information for display."""
    player_id: int
    terraform_rating: int
    resources: dict[Resource, int] = Field(default_factory=dict)
    production: dict[Resource, int] = Field(default_factory=dict)
    hand: list[str] = Field(default_factory=list)
    played_cards: list[str] = Field(default_factory=list)
    victory_points: int = 0


class ChoiceInfo(BaseModel):
    """An answer to one pending decision; set the fields the decision needs."""
    location: Optional[LocationInfo] = None
    player_id: Optional[int] = Field(None, description="Target player")
    instance_id: Optional[int] = Field(None, description="Target card instance (with player_id)")
    option_index: Optional[int] = Field(None, description="Index into a ONE_OF impact's options")


class PendingChoiceInfo(BaseModel):
    """A decision the caller still has to answer."""
    choice_type: str
    impact: str
    options: list[Any] = Field(default_factory=list)


# =============================================================================
# Request Models
# =============================================================================

class PlayerSetup(BaseModel):
    """Starting position of one player."""
    player_id: int
    megacredits: int = Field(0, ge=0)
    resources: dict[Resource, int] = Field(default_factory=dict)
    production: dict[Resource, int] = Field(default_factory=dict)
    hand: list[str] = Field(default_factory=list, description="Card names")
    played_cards: list[str] = Field(default_factory=list, description="Card names")
    terraform_rating: Optional[int] = Field(None, description="Defaults to 20, or 14 when solo")


class CreateGameRequest(BaseModel):
    """Request to create a new game."""
    catalog: Optional[str] = Field(None, description="Built-in catalog name")
    players: list[PlayerSetup] = Field(..., min_length=1)
    random_seed: int = Field(0, description="Seed for deck order and reshuffles")


class PlayCardRequest(BaseModel):
    player_id: int
    card_name: str
    choices: list[ChoiceInfo] = Field(default_factory=list)
    commit: bool = Field(True, description="Apply the result to the game when fully playable")


class PerformActionRequest(BaseModel):
    player_id: int
    instance_id: int
    action_index: int = 0
    choices: list[ChoiceInfo] = Field(default_factory=list)
    commit: bool = True


class StandardProjectRequest(BaseModel):
    player_id: int
    project: StandardProject
    choices: list[ChoiceInfo] = Field(default_factory=list)
    commit: bool = True


class ApplyOperationRequest(BaseModel):
    operation: GameOperation


class SearchRequest(BaseModel):
    player_id: int
    offered_cards: list[str] = Field(default_factory=list, max_length=10)
    all_orderings: bool = False


# =============================================================================
# Response Models
# =============================================================================

class ErrorResponse(BaseModel):
    """Standard error response."""
    error: str = Field(..., description="Human-readable error message")
    error_code: ErrorCode = Field(..., description="Machine-readable error code")
    details: Optional[dict[str, Any]] = Field(None, description="Additional error context")
    api_version: str = Field("v1", description="API version")


class GameResponse(BaseModel):
    """Summary of a game."""
    game_id: str
    catalog: str
    generation: int
    oxygen: int
    temperature: int
    oceans: int
    players: list[PlayerInfo] = Field(default_factory=list)
    deck_size: int = 0
    discard_size: int = 0
    api_version: str = "v1"


class SnapshotResponse(BaseModel):
    game_id: str
    snapshot: dict[str, Any] = Field(..., description="Round-trippable game snapshot")
    api_version: str = "v1"


class PlayResponse(BaseModel):
    """Outcome of resolving a move."""
    status: PlayStatus
    reason: Optional[str] = None
    operations: list[GameOperation] = Field(default_factory=list)
    pending_choice: Optional[PendingChoiceInfo] = None
    committed: bool = False
    game: Optional[GameResponse] = None
    api_version: str = "v1"


class ActionsResponse(BaseModel):
    player_id: int
    actions: list[str]


class VictoryPointsResponse(BaseModel):
    game_id: str
    scores: dict[int, int]


class TileStatusResponse(BaseModel):
    location: LocationInfo
    kind: str
    owner: Optional[int] = None
    detail: Optional[str] = Field(None, description="City kind or special tile")


class GenerationPlayInfo(BaseModel):
    purchased: list[str]
    turns: list[str]
    megacredits: int
    terraform_rating: int
    victory_points: int


class SearchResponse(BaseModel):
    count: int
    plays: list[GenerationPlayInfo] = Field(default_factory=list)


class GameListResponse(BaseModel):
    games: list[str]
    count: int


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    service: str
    version: str
