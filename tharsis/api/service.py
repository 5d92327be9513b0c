"""
API Service - Business logic layer between the API and the engine.

The service:
1. Translates API requests to engine calls
2. Keeps games in memory, keyed by id
3. Formats engine results as response models

This layer is framework-agnostic (can be used with FastAPI, Flask, etc.)
Failures come back as ErrorResponse values rather than exceptions.
"""

from __future__ import annotations
import json
import logging
import random
import uuid
from dataclasses import dataclass, field
from typing import Callable

from ..catalog import BUILTIN_CATALOGS, CardCatalog, UnknownCardError
from ..catalog.resource import Resource
from ..engine_core.action_generator import legal_turn_actions
from ..engine_core.coordinates import TileLocation
from ..engine_core.effect_resolver import EffectResolver, default_resolver
from ..engine_core.errors import InvariantViolation
from ..engine_core.generation_search import GenerationSearch
from ..engine_core.operation import Choice, GameOperation, PlayAttempt, StandardProject
from ..engine_core.player import PlayerStateBuilder
from ..engine_core.snapshot import dump_game
from ..engine_core.state import Game
from .schemas import (
    ChoiceInfo,
    CreateGameRequest,
    ErrorCode,
    ErrorResponse,
    GameResponse,
    GenerationPlayInfo,
    LocationInfo,
    PendingChoiceInfo,
    PlayerInfo,
    PlayResponse,
    SearchResponse,
    SnapshotResponse,
    TileStatusResponse,
    VictoryPointsResponse,
)

logger = logging.getLogger(__name__)

DEFAULT_CATALOG = "base"


@dataclass
class GameService:
    """
    In-memory games plus the engine calls the API exposes.

    Usage:
        service = GameService()
        created = service.create_game(request)
        result = service.play_card(created.game_id, PlayCardRequest(...))
    """
    catalogs: dict[str, Callable[[], CardCatalog]] = field(default_factory=lambda: dict(BUILTIN_CATALOGS))
    default_catalog: str = DEFAULT_CATALOG
    resolver: EffectResolver = field(default_factory=default_resolver)

    _games: dict[str, Game] = field(default_factory=dict)
    _game_catalogs: dict[str, CardCatalog] = field(default_factory=dict)

    # =========================================================================
    # Games
    # =========================================================================

    def create_game(self, request: CreateGameRequest) -> GameResponse | ErrorResponse:
        catalog_name = request.catalog or self.default_catalog
        factory = self.catalogs.get(catalog_name)
        if factory is None:
            return ErrorResponse(
                error=f"Unknown catalog '{catalog_name}'",
                error_code=ErrorCode.VALIDATION_ERROR,
                details={"available": sorted(self.catalogs)},
            )
        catalog = factory()

        solo = len(request.players) == 1
        players = []
        dealt: set[str] = set()
        try:
            for setup in request.players:
                builder = PlayerStateBuilder(setup.player_id)
                if solo:
                    builder.solo()
                if setup.terraform_rating is not None:
                    builder.with_terraform_rating(setup.terraform_rating)
                builder.with_resources(setup.resources).with_megacredits(setup.megacredits)
                builder.with_production(setup.production)
                builder.with_hand(catalog.resolve(setup.hand))
                builder.with_played_cards(catalog.resolve(setup.played_cards))
                dealt.update(setup.hand)
                dealt.update(setup.played_cards)
                players.append(builder.build())
        except UnknownCardError as e:
            return ErrorResponse(error=str(e), error_code=ErrorCode.UNKNOWN_CARD)

        deck = [card for card in catalog if card.name not in dealt]
        random.Random(request.random_seed).shuffle(deck)
        try:
            game = Game.new(players, draw_deck=deck, random_seed=request.random_seed)
        except ValueError as e:
            return ErrorResponse(error=str(e), error_code=ErrorCode.VALIDATION_ERROR)

        game_id = uuid.uuid4().hex[:12]
        self._games[game_id] = game
        self._game_catalogs[game_id] = catalog
        logger.info("Created game %s with %d players (%s catalog)", game_id, len(players), catalog.name)
        return self._game_response(game_id)

    def list_games(self) -> list[str]:
        return sorted(self._games)

    def get_game(self, game_id: str) -> GameResponse | ErrorResponse:
        if game_id not in self._games:
            return _not_found(game_id)
        return self._game_response(game_id)

    def get_snapshot(self, game_id: str) -> SnapshotResponse | ErrorResponse:
        game = self._games.get(game_id)
        if game is None:
            return _not_found(game_id)
        return SnapshotResponse(game_id=game_id, snapshot=json.loads(dump_game(game)))

    def end_game(self, game_id: str) -> bool:
        self._game_catalogs.pop(game_id, None)
        return self._games.pop(game_id, None) is not None

    # =========================================================================
    # Moves
    # =========================================================================

    def apply_operation(self, game_id: str, operation: GameOperation) -> GameResponse | ErrorResponse:
        """Apply a raw operation; one that would corrupt the game is refused."""
        game = self._games.get(game_id)
        if game is None:
            return _not_found(game_id)
        if operation.player_id is not None and game.get_player(operation.player_id) is None:
            return ErrorResponse(
                error=f"Unknown player {operation.player_id}",
                error_code=ErrorCode.VALIDATION_ERROR,
            )
        candidate = game.clone()
        try:
            candidate.execute_operation(operation)
        except InvariantViolation as e:
            return ErrorResponse(error=str(e), error_code=ErrorCode.NOT_PERMITTED)
        self._games[game_id] = candidate
        return self._game_response(game_id)

    def play_card(
        self, game_id: str, player_id: int, card_name: str, choices: list[ChoiceInfo], commit: bool = True
    ) -> PlayResponse | ErrorResponse:
        game = self._games.get(game_id)
        if game is None:
            return _not_found(game_id)
        if game.get_player(player_id) is None:
            return _unknown_player(player_id)
        card = self._game_catalogs[game_id].get(card_name)
        if card is None:
            return ErrorResponse(
                error=f"Unknown card '{card_name}'",
                error_code=ErrorCode.UNKNOWN_CARD,
            )
        parsed = _to_choices(choices)
        if isinstance(parsed, ErrorResponse):
            return parsed
        attempt = self.resolver.play_card(game, player_id, card, parsed)
        return self._finish(game_id, attempt, commit)

    def perform_action(
        self,
        game_id: str,
        player_id: int,
        instance_id: int,
        action_index: int,
        choices: list[ChoiceInfo],
        commit: bool = True,
    ) -> PlayResponse | ErrorResponse:
        game = self._games.get(game_id)
        if game is None:
            return _not_found(game_id)
        if game.get_player(player_id) is None:
            return _unknown_player(player_id)
        parsed = _to_choices(choices)
        if isinstance(parsed, ErrorResponse):
            return parsed
        attempt = self.resolver.perform_action(game, player_id, instance_id, action_index, parsed)
        return self._finish(game_id, attempt, commit)

    def standard_project(
        self,
        game_id: str,
        player_id: int,
        project: StandardProject,
        choices: list[ChoiceInfo],
        commit: bool = True,
    ) -> PlayResponse | ErrorResponse:
        game = self._games.get(game_id)
        if game is None:
            return _not_found(game_id)
        if game.get_player(player_id) is None:
            return _unknown_player(player_id)
        parsed = _to_choices(choices)
        if isinstance(parsed, ErrorResponse):
            return parsed
        attempt = self.resolver.perform_standard_project(game, player_id, project, parsed)
        return self._finish(game_id, attempt, commit)

    def advance_generation(self, game_id: str) -> GameResponse | ErrorResponse:
        game = self._games.get(game_id)
        if game is None:
            return _not_found(game_id)
        game.advance_generation()
        return self._game_response(game_id)

    def legal_actions(self, game_id: str, player_id: int) -> list[str] | ErrorResponse:
        game = self._games.get(game_id)
        if game is None:
            return _not_found(game_id)
        if game.get_player(player_id) is None:
            return _unknown_player(player_id)
        return [action.describe() for action in legal_turn_actions(game, player_id)]

    # =========================================================================
    # Queries
    # =========================================================================

    def victory_points(self, game_id: str) -> VictoryPointsResponse | ErrorResponse:
        game = self._games.get(game_id)
        if game is None:
            return _not_found(game_id)
        return VictoryPointsResponse(game_id=game_id, scores=game.scores())

    def tile_status(self, game_id: str, location: LocationInfo) -> TileStatusResponse | ErrorResponse:
        game = self._games.get(game_id)
        if game is None:
            return _not_found(game_id)
        try:
            tile_location = _to_location(location)
        except ValueError as e:
            return ErrorResponse(error=str(e), error_code=ErrorCode.VALIDATION_ERROR)
        if game.board.get_space(tile_location) is None:
            return ErrorResponse(
                error=f"{tile_location} is not on the board",
                error_code=ErrorCode.VALIDATION_ERROR,
            )
        status = game.get_tile_status(tile_location)
        detail = status.city_kind or status.special_tile
        return TileStatusResponse(
            location=location,
            kind=status.kind.value,
            owner=status.owner,
            detail=detail.value if detail else None,
        )

    def search(
        self, game_id: str, player_id: int, offered_cards: list[str], all_orderings: bool = False
    ) -> SearchResponse | ErrorResponse:
        game = self._games.get(game_id)
        if game is None:
            return _not_found(game_id)
        if game.get_player(player_id) is None:
            return _unknown_player(player_id)
        try:
            offered = self._game_catalogs[game_id].resolve(offered_cards)
            plays = GenerationSearch(game, player_id, self.resolver).run(offered, all_orderings)
        except UnknownCardError as e:
            return ErrorResponse(error=str(e), error_code=ErrorCode.UNKNOWN_CARD)
        except ValueError as e:
            return ErrorResponse(error=str(e), error_code=ErrorCode.VALIDATION_ERROR)
        return SearchResponse(
            count=len(plays),
            plays=[
                GenerationPlayInfo(
                    purchased=[card.name for card in play.purchased],
                    turns=[turn.action.describe() for turn in play.turns],
                    megacredits=play.final_state.resource(Resource.MEGACREDITS),
                    terraform_rating=play.final_state.terraform_rating,
                    victory_points=play.final_game.get_total_victory_points(player_id),
                )
                for play in plays
            ],
        )

    # =========================================================================
    # Conversion helpers
    # =========================================================================

    def _finish(self, game_id: str, attempt: PlayAttempt, commit: bool) -> PlayResponse:
        committed = False
        if commit and attempt.is_playable:
            self._games[game_id] = attempt.resulting_game
            committed = True
        pending = None
        if attempt.pending_choice is not None:
            pending = PendingChoiceInfo(
                choice_type=attempt.pending_choice.choice_type.value,
                impact=attempt.pending_choice.impact.impact_type.value,
                options=[_describe_option(o) for o in attempt.pending_choice.options],
            )
        return PlayResponse(
            status=attempt.status,
            reason=attempt.reason,
            operations=list(attempt.operations),
            pending_choice=pending,
            committed=committed,
            game=self._game_response(game_id),
        )

    def _game_response(self, game_id: str) -> GameResponse:
        game = self._games[game_id]
        return GameResponse(
            game_id=game_id,
            catalog=self._game_catalogs[game_id].name,
            generation=game.generation,
            oxygen=game.board.oxygen,
            temperature=game.board.temperature,
            oceans=game.board.ocean_count,
            players=[
                PlayerInfo(
                    player_id=pid,
                    terraform_rating=player.terraform_rating,
                    resources=dict(player.resources),
                    production=dict(player.production),
                    hand=[card.name for card in player.hand],
                    played_cards=[played.card.name for played in player.played_cards],
                    victory_points=game.get_total_victory_points(pid),
                )
                for pid, player in ((pid, game.players[pid]) for pid in game.player_ids)
            ],
            deck_size=len(game.draw_deck),
            discard_size=len(game.discard_pile),
        )


def _not_found(game_id: str) -> ErrorResponse:
    return ErrorResponse(error=f"Game {game_id} not found", error_code=ErrorCode.GAME_NOT_FOUND)


def _unknown_player(player_id: int) -> ErrorResponse:
    return ErrorResponse(error=f"Unknown player {player_id}", error_code=ErrorCode.VALIDATION_ERROR)


def _to_location(location: LocationInfo) -> TileLocation:
    if location.special is not None:
        return TileLocation.off_mars(location.special)
    if location.x is None or location.y is None:
        raise ValueError("A location needs x and y, or a special location")
    return TileLocation.on_mars(location.x, location.y)


def _to_choices(choices: list[ChoiceInfo]) -> list[Choice] | ErrorResponse:
    try:
        return _parse_choices(choices)
    except ValueError as e:
        return ErrorResponse(error=str(e), error_code=ErrorCode.VALIDATION_ERROR)


def _parse_choices(choices: list[ChoiceInfo]) -> list[Choice]:
    return [
        Choice(
            location=_to_location(c.location) if c.location else None,
            player_id=c.player_id,
            instance_id=c.instance_id,
            option_index=c.option_index,
        )
        for c in choices
    ]


def _describe_option(option) -> object:
    if isinstance(option, TileLocation):
        if option.coordinates is not None:
            return {"x": option.coordinates.x, "y": option.coordinates.y}
        return {"special": option.special.value}
    if isinstance(option, tuple):
        return {"player_id": option[0], "instance_id": option[1]}
    return option
