"""
Snapshots - Round-trippable serialized form of a Game.

The pydantic models mirror the engine state field for field. Maps keyed
by composite values (tile locations, (card, resource) pairs) become
lists of entries, sets become sorted lists. load_game(dump_game(g))
returns a Game equal to g.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from ..catalog.card import Card, CardEffect, CityKind, SpecialTile
from ..catalog.resource import CardResource, Resource
from .board import BoardSpace, MarsBoard
from .coordinates import Coordinates, TileLocation
from .operation import GameOperation
from .player import ActiveEffect, PlayedCard, PlayerState
from .state import Game

SNAPSHOT_VERSION = 1


# ============================================================================
# Board
# ============================================================================

class CityEntry(BaseModel):
    location: TileLocation
    city_kind: CityKind
    owner: int


class GreeneryEntry(BaseModel):
    coordinates: Coordinates
    owner: int


class SpecialTileEntry(BaseModel):
    coordinates: Coordinates
    tile: SpecialTile
    owner: int


class BoardSnapshot(BaseModel):
    spaces: list[BoardSpace]
    cities: list[CityEntry] = Field(default_factory=list)
    oceans: list[Coordinates] = Field(default_factory=list)
    greeneries: list[GreeneryEntry] = Field(default_factory=list)
    special_tiles: list[SpecialTileEntry] = Field(default_factory=list)
    oxygen: int
    temperature: int

    @classmethod
    def from_board(cls, board: MarsBoard) -> BoardSnapshot:
        return cls(
            spaces=[board.spaces[location] for location in board.locations()],
            cities=[
                CityEntry(location=location, city_kind=kind, owner=owner)
                for location, (kind, owner) in sorted(
                    board.cities.items(), key=lambda item: item[0].sort_key()
                )
            ],
            oceans=sorted(board.oceans),
            greeneries=[
                GreeneryEntry(coordinates=c, owner=owner)
                for c, owner in sorted(board.greeneries.items())
            ],
            special_tiles=[
                SpecialTileEntry(coordinates=c, tile=tile, owner=owner)
                for c, (tile, owner) in sorted(board.special_tiles.items())
            ],
            oxygen=board.oxygen,
            temperature=board.temperature,
        )

    def to_board(self) -> MarsBoard:
        return MarsBoard(
            spaces={space.location: space for space in self.spaces},
            cities={e.location: (e.city_kind, e.owner) for e in self.cities},
            oceans=set(self.oceans),
            greeneries={e.coordinates: e.owner for e in self.greeneries},
            special_tiles={e.coordinates: (e.tile, e.owner) for e in self.special_tiles},
            oxygen=self.oxygen,
            temperature=self.temperature,
        )


# ============================================================================
# Players
# ============================================================================

class CardResourceEntry(BaseModel):
    instance_id: int
    card_resource: CardResource
    count: int


class PlayerSnapshot(BaseModel):
    player_id: int
    resources: dict[Resource, int]
    production: dict[Resource, int]
    played_cards: list[PlayedCard] = Field(default_factory=list)
    card_resources: list[CardResourceEntry] = Field(default_factory=list)
    tapped_active_cards: list[int] = Field(default_factory=list)
    hand: list[Card] = Field(default_factory=list)
    terraform_rating: int
    effects: list[ActiveEffect] = Field(default_factory=list)
    next_card_this_generation_effects: list[CardEffect] = Field(default_factory=list)
    next_instance_id: int = 0

    @classmethod
    def from_player(cls, player: PlayerState) -> PlayerSnapshot:
        return cls(
            player_id=player.player_id,
            resources=dict(player.resources),
            production=dict(player.production),
            played_cards=list(player.played_cards),
            card_resources=[
                CardResourceEntry(instance_id=iid, card_resource=cr, count=count)
                for (iid, cr), count in sorted(
                    player.card_resources.items(), key=lambda item: (item[0][0], item[0][1].value)
                )
            ],
            tapped_active_cards=sorted(player.tapped_active_cards),
            hand=list(player.hand),
            terraform_rating=player.terraform_rating,
            effects=list(player.effects),
            next_card_this_generation_effects=list(player.next_card_this_generation_effects),
            next_instance_id=player.next_instance_id,
        )

    def to_player(self) -> PlayerState:
        return PlayerState(
            player_id=self.player_id,
            resources=dict(self.resources),
            production=dict(self.production),
            played_cards=list(self.played_cards),
            card_resources={(e.instance_id, e.card_resource): e.count for e in self.card_resources},
            tapped_active_cards=set(self.tapped_active_cards),
            hand=list(self.hand),
            terraform_rating=self.terraform_rating,
            effects=list(self.effects),
            next_card_this_generation_effects=list(self.next_card_this_generation_effects),
            next_instance_id=self.next_instance_id,
        )


# ============================================================================
# Game
# ============================================================================

class GameSnapshot(BaseModel):
    version: int = SNAPSHOT_VERSION
    board: BoardSnapshot
    players: list[PlayerSnapshot]
    draw_deck: list[Card] = Field(default_factory=list)
    discard_pile: list[Card] = Field(default_factory=list)
    random_seed: int = 0
    reshuffle_count: int = 0
    generation: int = 1
    claimed_milestones: dict[str, int] = Field(default_factory=dict)
    funded_awards: dict[str, int] = Field(default_factory=dict)
    operation_log: list[GameOperation] = Field(default_factory=list)

    @classmethod
    def from_game(cls, game: Game) -> GameSnapshot:
        return cls(
            board=BoardSnapshot.from_board(game.board),
            players=[PlayerSnapshot.from_player(game.players[pid]) for pid in game.player_ids],
            draw_deck=list(game.draw_deck),
            discard_pile=list(game.discard_pile),
            random_seed=game.random_seed,
            reshuffle_count=game.reshuffle_count,
            generation=game.generation,
            claimed_milestones=dict(game.claimed_milestones),
            funded_awards=dict(game.funded_awards),
            operation_log=list(game.operation_log),
        )

    def to_game(self) -> Game:
        if self.version != SNAPSHOT_VERSION:
            raise ValueError(f"Unsupported snapshot version {self.version}")
        return Game(
            board=self.board.to_board(),
            players={p.player_id: p.to_player() for p in self.players},
            draw_deck=list(self.draw_deck),
            discard_pile=list(self.discard_pile),
            random_seed=self.random_seed,
            reshuffle_count=self.reshuffle_count,
            generation=self.generation,
            claimed_milestones=dict(self.claimed_milestones),
            funded_awards=dict(self.funded_awards),
            operation_log=list(self.operation_log),
        )


def dump_game(game: Game, indent: int | None = None) -> str:
    return GameSnapshot.from_game(game).model_dump_json(indent=indent)


def load_game(text: str) -> Game:
    return GameSnapshot.model_validate_json(text).to_game()
