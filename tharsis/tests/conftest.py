"""
Pytest fixtures for Tharsis tests.
"""

import pytest

from ..catalog import CardCatalog, base_game, corporate_era
from ..catalog.resource import Resource
from ..engine_core.board import MarsBoard, standard_board
from ..engine_core.coordinates import TileLocation
from ..engine_core.effect_resolver import EffectResolver
from ..engine_core.player import PlayerStateBuilder
from ..engine_core.state import Game


@pytest.fixture
def catalog() -> CardCatalog:
    """Corporate era catalog (includes every base card)."""
    return corporate_era()


@pytest.fixture
def base_catalog() -> CardCatalog:
    return base_game()


@pytest.fixture
def board() -> MarsBoard:
    """An empty standard board."""
    return standard_board()


@pytest.fixture
def resolver() -> EffectResolver:
    return EffectResolver()


@pytest.fixture
def make_game(catalog):
    """
    Build a game from keyword setups, one dict per player.

    Example:
        make_game({"megacredits": 30, "hand": ["Sponsors"]}, {"production": {...}})
    """
    def _make(*setups, deck=(), discard=(), random_seed=0):
        players = []
        for player_id, setup in enumerate(setups):
            builder = PlayerStateBuilder(player_id)
            builder.with_resources(setup.get("resources", {}))
            builder.with_megacredits(setup.get("megacredits", 0))
            builder.with_production(setup.get("production", {}))
            builder.with_hand(catalog.resolve(setup.get("hand", [])))
            builder.with_played_cards(catalog.resolve(setup.get("played", [])))
            for name, card_resource, amount in setup.get("card_resources", []):
                builder.with_card_resource(name, card_resource, amount)
            if "terraform_rating" in setup:
                builder.with_terraform_rating(setup["terraform_rating"])
            players.append(builder.build())
        game = Game.new(players, draw_deck=catalog.resolve(deck), random_seed=random_seed)
        game.discard_pile.extend(catalog.resolve(discard))
        return game
    return _make


@pytest.fixture
def two_player_game(make_game) -> Game:
    """Two players with some money and nothing in play."""
    return make_game({"megacredits": 40}, {"megacredits": 40})


# Spaces reserved for oceans on the standard board
OCEAN_SPACES = [
    (5, -1), (3, -3), (7, -3), (4, -4), (8, -4), (5, -5),
    (8, -5), (5, -6), (6, -7), (8, -7), (4, -8), (7, -8),
]


def at(x: int, y: int) -> TileLocation:
    return TileLocation.on_mars(x, y)


def mc(game: Game, player_id: int = 0) -> int:
    return game.player(player_id).resource(Resource.MEGACREDITS)


def instance_of(game: Game, player_id: int, name: str) -> int:
    return game.player(player_id).find_played(name).instance_id
