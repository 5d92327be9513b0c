"""
Engine Core - Deterministic game state management and effect resolution.

The engine is the runtime that:
1. Holds the board, the players and the deck (Game)
2. Applies operations via the reducer
3. Resolves cards, card actions and standard projects into operations
4. Enumerates legal turn actions
5. Searches the plays available in one generation
"""

from .errors import InvariantViolation, NotYetHandled
from .coordinates import Coordinates, SpecialLocation, TileLocation
from .board import BoardSpace, LocationRestriction, MarsBoard, TileStatus, standard_board
from .player import PlayerState, PlayerStateBuilder, PlayedCard, ActiveEffect
from .operation import (
    Choice,
    GameOperation,
    OperationType,
    PendingChoice,
    PlayAttempt,
    PlayerTurn,
    PlayStatus,
    StandardProject,
    TurnAction,
)
from .state import Game
from .reducer import Reducer, execute_operation
from .effect_resolver import EffectResolver
from .action_generator import ActionGenerator, legal_turn_actions
from .generation_search import GenerationPlay, GenerationSearch, get_possible_generation_plays
from .snapshot import GameSnapshot, dump_game, load_game

__all__ = [
    "InvariantViolation",
    "NotYetHandled",
    "Coordinates",
    "SpecialLocation",
    "TileLocation",
    "BoardSpace",
    "LocationRestriction",
    "MarsBoard",
    "TileStatus",
    "standard_board",
    "PlayerState",
    "PlayerStateBuilder",
    "PlayedCard",
    "ActiveEffect",
    "Choice",
    "GameOperation",
    "OperationType",
    "PendingChoice",
    "PlayAttempt",
    "PlayerTurn",
    "PlayStatus",
    "StandardProject",
    "TurnAction",
    "Game",
    "Reducer",
    "execute_operation",
    "EffectResolver",
    "ActionGenerator",
    "legal_turn_actions",
    "GenerationPlay",
    "GenerationSearch",
    "get_possible_generation_plays",
    "GameSnapshot",
    "dump_game",
    "load_game",
]
