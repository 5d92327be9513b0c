"""
Tests for the reducer (state transitions).

Tests:
- Resource and production changes
- Drawing, reshuffling and discarding
- Tile placement through operations
- Invariant violations
- Generation advance
"""

import pytest

from ..catalog.card import CityKind
from ..catalog.resource import CardResource, Resource
from ..engine_core.errors import InvariantViolation
from ..engine_core.operation import GameOperation, OperationType
from ..engine_core.reducer import handled_operation_types
from .conftest import at, instance_of, mc


class TestEconomy:
    """Tests for resource and production operations."""

    def test_change_resources(self, two_player_game):
        game = two_player_game
        game.execute_operation(GameOperation.change_resources(0, Resource.MEGACREDITS, -15))
        assert mc(game) == 25
        assert mc(game, 1) == 40

    def test_negative_balance_is_violation(self, two_player_game):
        with pytest.raises(InvariantViolation):
            two_player_game.execute_operation(
                GameOperation.change_resources(0, Resource.MEGACREDITS, -41)
            )

    def test_megacredit_production_floor_is_terraform_rating(self, make_game):
        game = make_game({"terraform_rating": 3})
        game.execute_operation(GameOperation.change_production(0, Resource.MEGACREDITS, -3))
        assert game.player(0).production_of(Resource.MEGACREDITS) == -3
        with pytest.raises(InvariantViolation):
            game.execute_operation(GameOperation.change_production(0, Resource.MEGACREDITS, -1))

    def test_other_production_floor_is_zero(self, two_player_game):
        with pytest.raises(InvariantViolation):
            two_player_game.execute_operation(GameOperation.change_production(0, Resource.HEAT, -1))

    def test_card_resource_needs_supporting_card(self, make_game):
        game = make_game({"played": ["Sponsors", "Regolith Eaters"]})
        eaters = instance_of(game, 0, "Regolith Eaters")
        game.execute_operation(GameOperation.change_card_resource(0, eaters, CardResource.MICROBE, 2))
        assert game.player(0).card_resource_count(eaters, CardResource.MICROBE) == 2

        sponsors = instance_of(game, 0, "Sponsors")
        with pytest.raises(InvariantViolation):
            game.execute_operation(GameOperation.change_card_resource(0, sponsors, CardResource.MICROBE, 1))

    def test_operations_are_logged(self, two_player_game):
        op = GameOperation.change_resources(1, Resource.HEAT, 3)
        two_player_game.execute_operation(op)
        assert two_player_game.operation_log == [op]


class TestDeck:
    """Tests for drawing and reshuffling."""

    def test_draw_from_top(self, make_game):
        game = make_game({}, deck=["Sponsors", "Mine", "Power Plant"])
        game.execute_operation(GameOperation.draw_cards(0, 2))
        assert [c.name for c in game.player(0).hand] == ["Sponsors", "Mine"]
        assert [c.name for c in game.draw_deck] == ["Power Plant"]

    def test_reshuffle_when_deck_runs_out(self, make_game):
        game = make_game(
            {},
            deck=["Sponsors", "Mine"],
            discard=["Power Plant", "Research", "Pets"],
            random_seed=7,
        )
        game.execute_operation(GameOperation.draw_cards(0, 4))

        hand = [c.name for c in game.player(0).hand]
        assert hand[:2] == ["Sponsors", "Mine"]
        assert len(hand) == 4
        assert len(game.draw_deck) == 1
        assert game.discard_pile == []
        assert game.reshuffle_count == 1

    def test_reshuffle_is_deterministic(self, make_game):
        def drawn(seed):
            game = make_game({}, discard=["Power Plant", "Research", "Pets", "Mine", "Fish"], random_seed=seed)
            game.execute_operation(GameOperation.draw_cards(0, 5))
            return [c.name for c in game.player(0).hand]

        assert drawn(3) == drawn(3)

    def test_draw_more_than_available(self, make_game):
        game = make_game({}, deck=["Sponsors", "Mine"], discard=["Power Plant", "Research", "Pets"])
        with pytest.raises(InvariantViolation):
            game.execute_operation(GameOperation.draw_cards(0, 6))

    def test_discard_moves_card_to_pile(self, make_game, catalog):
        game = make_game({"hand": ["Sponsors"]})
        sponsors = catalog.get("Sponsors")
        game.execute_operation(GameOperation.discard_cards(0, (sponsors,)))
        assert game.player(0).hand == []
        assert game.discard_pile == [sponsors]

    def test_discard_card_not_in_hand(self, make_game, catalog):
        game = make_game({})
        with pytest.raises(InvariantViolation):
            game.execute_operation(GameOperation.discard_cards(0, (catalog.get("Sponsors"),)))


class TestCardsIntoPlay:
    """Tests for putting cards into play."""

    def test_put_card_into_play(self, make_game, catalog):
        game = make_game({"hand": ["Sponsors"]})
        game.execute_operation(GameOperation.put_card_into_play(0, catalog.get("Sponsors"), 0))
        player = game.player(0)
        assert player.hand == []
        assert player.find_played("Sponsors").instance_id == 0
        assert player.next_instance_id == 1

    def test_reused_instance_id(self, make_game, catalog):
        game = make_game({"hand": ["Sponsors"], "played": ["Mine"]})
        with pytest.raises(InvariantViolation):
            game.execute_operation(GameOperation.put_card_into_play(0, catalog.get("Sponsors"), 0))

    def test_action_used_twice(self, make_game):
        game = make_game({"played": ["Regolith Eaters"]})
        eaters = instance_of(game, 0, "Regolith Eaters")
        game.execute_operation(GameOperation.mark_card_action_used(0, eaters))
        with pytest.raises(InvariantViolation):
            game.execute_operation(GameOperation.mark_card_action_used(0, eaters))
        game.execute_operation(GameOperation.reset_card_actions())
        assert game.player(0).tapped_active_cards == set()


class TestTiles:
    """Tests for placement operations."""

    def test_place_city(self, two_player_game):
        two_player_game.execute_operation(GameOperation.place_city_tile(1, at(4, -5), CityKind.REGULAR))
        status = two_player_game.get_tile_status(at(4, -5))
        assert status.is_city
        assert status.owner == 1

    def test_place_on_occupied(self, two_player_game):
        two_player_game.execute_operation(GameOperation.place_ocean(at(5, -1)))
        with pytest.raises(InvariantViolation):
            two_player_game.execute_operation(GameOperation.place_greenery(0, at(5, -1)))

    def test_missing_fields(self, two_player_game):
        with pytest.raises(InvariantViolation):
            two_player_game.execute_operation(GameOperation(OperationType.PLACE_OCEAN))
        with pytest.raises(InvariantViolation):
            two_player_game.execute_operation(
                GameOperation(OperationType.CHANGE_RESOURCES, player_id=0, count=5)
            )
        assert two_player_game.operation_log == []

    def test_unknown_player(self, two_player_game):
        with pytest.raises(ValueError):
            two_player_game.execute_operation(GameOperation.change_resources(9, Resource.HEAT, 1))


class TestMilestonesAndAwards:
    """Tests for claim and fund operations."""

    def test_claim_twice(self, two_player_game):
        two_player_game.execute_operation(GameOperation.claim_milestone(0, "Mayor"))
        with pytest.raises(InvariantViolation):
            two_player_game.execute_operation(GameOperation.claim_milestone(1, "Mayor"))

    def test_unknown_award(self, two_player_game):
        with pytest.raises(InvariantViolation):
            two_player_game.execute_operation(GameOperation.fund_award(0, "Hoverlord"))


class TestAdvanceGeneration:
    """Tests for the production phase."""

    def test_production_phase(self, make_game):
        game = make_game(
            {
                "megacredits": 5,
                "resources": {Resource.ENERGY: 3, Resource.HEAT: 1},
                "production": {Resource.MEGACREDITS: 2, Resource.ENERGY: 1, Resource.PLANTS: 2},
                "played": ["Regolith Eaters"],
            },
        )
        game.player(0).tapped_active_cards.add(instance_of(game, 0, "Regolith Eaters"))

        game.advance_generation()

        player = game.player(0)
        assert game.generation == 2
        assert player.resource(Resource.MEGACREDITS) == 5 + 20 + 2
        assert player.resource(Resource.HEAT) == 4
        assert player.resource(Resource.ENERGY) == 1
        assert player.resource(Resource.PLANTS) == 2
        assert player.tapped_active_cards == set()


class TestDispatch:
    """Every operation type has a handler."""

    def test_all_operation_types_handled(self):
        assert handled_operation_types() == set(OperationType)


class TestReplay:
    """Replaying the operation log reproduces the game."""

    def test_replay_across_generation_advance(self, make_game, catalog, resolver):
        game = make_game({
            "megacredits": 10,
            "resources": {Resource.ENERGY: 3},
            "production": {Resource.MEGACREDITS: 2},
        })
        initial = game.clone()

        assert game.purchase_cards(0, catalog.resolve(["Sponsors"]))
        game = resolver.play_card(game, 0, catalog.get("Sponsors")).resulting_game
        game.advance_generation()

        replayed = initial.clone()
        replayed.apply_operations(game.operation_log)

        assert replayed == game
        assert replayed.generation == 2
        assert replayed.player(0).resource(Resource.HEAT) == 3
        assert replayed.player(0).resource(Resource.MEGACREDITS) == 10 - 3 - 6 + 20 + 4

    def test_purchase_without_funds(self, make_game, catalog):
        game = make_game({"megacredits": 5})
        cards = tuple(catalog.resolve(["Sponsors", "Mine"]))
        assert not game.purchase_cards(0, cards)
        with pytest.raises(InvariantViolation):
            game.execute_operation(GameOperation.purchase_cards(0, cards))
        assert game.player(0).hand == []
        assert game.operation_log == []

    def test_failed_production_leaves_player_untouched(self, make_game):
        game = make_game({"megacredits": 5, "resources": {Resource.ENERGY: 3}})
        player = game.player(0)
        player.production[Resource.PLANTS] = -1
        before = player.clone()

        with pytest.raises(InvariantViolation):
            game.execute_operation(GameOperation.produce(0))

        assert game.player(0) == before
        assert game.operation_log == []
