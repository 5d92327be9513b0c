"""
Tests for game state, scoring and snapshots.
"""

import pytest
from pydantic import ValidationError

from ..catalog import Card, CardKind, CardRequirement, CardTag, PaymentCost
from ..catalog.card import CityKind
from ..catalog.resource import CardResource, Resource
from ..engine_core.board import TileStatus
from ..engine_core.operation import Choice, StandardProject
from ..engine_core.player import PlayerStateBuilder
from ..engine_core.snapshot import dump_game, load_game
from ..engine_core.state import Game
from .conftest import at, instance_of


class TestGame:
    """Tests for game construction and cloning."""

    def test_duplicate_player_ids(self):
        with pytest.raises(ValueError):
            Game.new([PlayerStateBuilder(0).build(), PlayerStateBuilder(0).build()])

    def test_unknown_player(self, two_player_game):
        assert two_player_game.get_player(5) is None
        with pytest.raises(ValueError):
            two_player_game.player(5)

    def test_clone_is_independent(self, two_player_game):
        copy = two_player_game.clone()
        copy.player(0).resources[Resource.HEAT] = 10
        copy.board.place(at(4, -5), TileStatus.greenery(0))

        assert two_player_game.player(0).resource(Resource.HEAT) == 0
        assert two_player_game.get_tile_status(at(4, -5)).is_empty

    def test_builder_rejects_negative_resources(self):
        with pytest.raises(ValueError):
            PlayerStateBuilder(0).with_megacredits(-1).build()

    def test_solo_rating(self):
        assert PlayerStateBuilder(0).solo().build().terraform_rating == 14

    def test_purchase_cards(self, make_game, catalog):
        player = make_game({"megacredits": 7}).player(0)
        cards = catalog.resolve(["Sponsors", "Mine", "Power Plant"])
        assert not player.purchase_cards(cards)
        assert player.hand == []
        assert player.purchase_cards(cards[:2])
        assert player.resource(Resource.MEGACREDITS) == 1


class TestRequirements:
    """Tests for card requirement checks."""

    def test_wild_tags_do_not_meet_tag_requirements(self, board):
        wild = Card(name="Wild Survey", kind=CardKind.AUTOMATIC, tags=(CardTag.WILD,), cost=PaymentCost.megacredits(3))
        lab = Card(
            name="Field Lab",
            kind=CardKind.AUTOMATIC,
            tags=(),
            cost=PaymentCost.megacredits(2),
            requirements=(CardRequirement.min_tags(CardTag.SCIENCE, 1),),
        )
        player = PlayerStateBuilder(0).with_megacredits(10).with_played_cards([wild]).with_hand([lab]).build()

        assert player.active_tag_count_for_action(CardTag.SCIENCE) == 1
        assert player.active_tag_count(CardTag.SCIENCE) == 0
        assert player.unmet_requirements(board, lab)
        assert player.can_play_card(board, lab) is None


class TestScoring:
    """Tests for victory points."""

    def test_starting_score_is_rating(self, two_player_game):
        assert two_player_game.scores() == {0: 20, 1: 20}

    def test_points_per_jovian_tag(self, make_game):
        game = make_game({
            "played": [
                "Ganymede Colony", "Water Import From Europa",
                "Io Mining Industries", "Lagrange Observatory",
            ],
        })
        assert game.get_total_victory_points(0) == 20 + 9 + 1

    def test_capital_and_greenery_adjacency(self, two_player_game):
        board = two_player_game.board
        board.place(at(4, -5), TileStatus.city(CityKind.CAPITAL, 0))
        for x, y in [(5, -6), (4, -4), (5, -5)]:
            board.place(at(x, y), TileStatus.ocean())
        board.place(at(3, -5), TileStatus.greenery(1))
        board.place(at(3, -4), TileStatus.greenery(1))

        assert two_player_game.scores() == {0: 25, 1: 22}

    def test_points_per_card_resource(self, make_game):
        game = make_game({
            "played": ["Pets", "Search For Life"],
            "card_resources": [("Pets", CardResource.ANIMAL, 5)],
        })
        assert game.get_total_victory_points(0) == 20 + 2

        search = instance_of(game, 0, "Search For Life")
        game.player(0).card_resources[(search, CardResource.SCIENCE)] = 1
        assert game.get_total_victory_points(0) == 20 + 2 + 3

    def test_points_per_cities_in_play(self, make_game):
        game = make_game({"played": ["Immigration Shuttles"]}, {})
        for i, (x, y) in enumerate([(2, -6), (4, -2), (6, -4)]):
            game.board.place(at(x, y), TileStatus.city(CityKind.REGULAR, i % 2))
        assert game.get_total_victory_points(0) == 20 + 1


class TestSnapshot:
    """Tests for the serialized game form."""

    def test_fresh_game_round_trip(self, two_player_game):
        assert load_game(dump_game(two_player_game)) == two_player_game

    def test_played_game_round_trip(self, make_game, catalog, resolver):
        game = make_game(
            {"megacredits": 60, "hand": ["Pets", "Media Group"], "played": ["Regolith Eaters"]},
            {"megacredits": 10, "production": {Resource.HEAT: 2}},
            deck=["Sponsors", "Mine"],
            discard=["Fish"],
            random_seed=11,
        )
        game = resolver.play_card(game, 0, catalog.get("Pets")).resulting_game
        game = resolver.play_card(game, 0, catalog.get("Media Group")).resulting_game
        game = resolver.perform_standard_project(
            game, 0, StandardProject.CITY, [Choice.at(at(4, -5))]
        ).resulting_game
        eaters = instance_of(game, 0, "Regolith Eaters")
        game = resolver.perform_action(game, 0, eaters).resulting_game
        game.claimed_milestones["Mayor"] = 1

        restored = load_game(dump_game(game, indent=2))

        assert restored == game
        assert restored.scores() == game.scores()
        assert restored.player(0).tapped_active_cards == {eaters}

    def test_invalid_snapshot(self):
        with pytest.raises(ValidationError):
            load_game('{"version": 1}')
