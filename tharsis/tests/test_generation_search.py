"""
Tests for generation search and legal action generation.
"""

import pytest

from ..catalog.resource import Resource
from ..engine_core.action_generator import legal_turn_actions
from ..engine_core.board import MAX_TEMPERATURE
from ..engine_core.generation_search import (
    MAX_OFFERED_CARDS,
    GenerationSearch,
    get_possible_generation_plays,
)
from ..engine_core.coordinates import SpecialLocation, TileLocation
from ..engine_core.operation import (
    GameOperation,
    OperationType,
    StandardProject,
    TurnAction,
    TurnActionType,
)
from ..engine_core.player import PlayerStateBuilder
from .conftest import OCEAN_SPACES, at, instance_of


def solo_player(megacredits):
    return PlayerStateBuilder(0).with_megacredits(megacredits).solo().build()


class TestGenerationSearch:
    """Tests for the purchase and play enumeration."""

    def test_two_cards(self, catalog):
        offered = catalog.resolve(["Sponsors", "Power Plant"])
        plays = get_possible_generation_plays(solo_player(50), [], offered)
        assert len(plays) == 9

    def test_three_cards(self, catalog):
        offered = catalog.resolve(["Sponsors", "Power Plant", "Mine"])
        plays = get_possible_generation_plays(solo_player(50), [], offered)
        assert len(plays) == 27

    def test_budget_limits_purchases(self, catalog):
        offered = catalog.resolve(["Sponsors", "Power Plant", "Mine"])
        plays = get_possible_generation_plays(solo_player(6), [], offered)

        assert len(plays) == 7
        assert all(len(play.purchased) <= 2 for play in plays)
        assert all(len(play.turns) == 1 for play in plays)

    def test_every_play_ends_with_pass(self, catalog):
        offered = catalog.resolve(["Sponsors"])
        plays = get_possible_generation_plays(solo_player(20), [], offered)
        for play in plays:
            assert play.turns[-1].action == TurnAction.pass_turn()

    def test_final_state(self, catalog):
        offered = catalog.resolve(["Sponsors"])
        plays = get_possible_generation_plays(solo_player(20), [], offered)

        played = [p for p in plays if len(p.turns) == 2]
        assert len(played) == 1
        final = played[0].final_state
        assert final.resource(Resource.MEGACREDITS) == 20 - 3 - 6
        assert final.production_of(Resource.MEGACREDITS) == 2
        assert final.hand == []

    def test_input_state_untouched(self, catalog):
        player = solo_player(50)
        before = player.clone()
        get_possible_generation_plays(player, [], catalog.resolve(["Sponsors", "Mine"]))
        assert player == before

    def test_too_many_offered(self, catalog):
        offered = catalog.cards[:MAX_OFFERED_CARDS + 1]
        with pytest.raises(ValueError):
            get_possible_generation_plays(solo_player(50), [], offered)

    def test_all_orderings(self, make_game, catalog):
        game = make_game({"megacredits": 50})
        search = GenerationSearch(game, 0)
        plays = search.run(catalog.resolve(["Sponsors", "Power Plant"]), all_orderings=True)

        # {}: 1, {S}: 2, {P}: 2, {S, P}: stop, S, S-P, P, P-S
        assert len(plays) == 10
        assert search.stats.affordable_subsets == 4

    def test_plays_city_with_single_legal_space(self, catalog):
        offered = catalog.resolve(["Ganymede Colony"])
        plays = get_possible_generation_plays(solo_player(50), [], offered)

        played = [p for p in plays if len(p.turns) == 2]
        assert len(plays) == 3
        assert len(played) == 1
        colony = played[0].final_game.get_tile_status(TileLocation.off_mars(SpecialLocation.GANYMEDE_COLONY))
        assert colony.is_city
        assert colony.owner == 0

    def test_branches_over_every_ocean_space(self, make_game, catalog):
        game = make_game({"megacredits": 50}, deck=["Mine", "Power Plant", "Research"])
        plays = GenerationSearch(game, 0).run(catalog.resolve(["Black Polar Dust"]))

        played = [p for p in plays if len(p.turns) == 2]
        assert len(played) == len(OCEAN_SPACES)
        oceans = {
            op.location for p in played for op in p.turns[0].operations
            if op.op_type == OperationType.PLACE_OCEAN
        }
        assert oceans == {at(x, y) for x, y in OCEAN_SPACES}
        assert all(p.final_game.board.ocean_count == 1 for p in played)

    def test_purchase_is_logged(self, make_game, catalog):
        game = make_game({"megacredits": 10})
        plays = GenerationSearch(game, 0).run(catalog.resolve(["Sponsors"]))
        bought = [p for p in plays if p.purchased]
        assert all(
            p.final_game.operation_log[0] == GameOperation.purchase_cards(0, tuple(p.purchased))
            for p in bought
        )


class TestActionGenerator:
    """Tests for legal turn actions."""

    def test_pass_is_last(self, make_game):
        actions = legal_turn_actions(make_game({}), 0)
        assert actions == [TurnAction.pass_turn()]

    def test_affordable_standard_projects(self, make_game):
        actions = legal_turn_actions(make_game({"megacredits": 11}), 0)
        projects = [a.project for a in actions if a.action_type == TurnActionType.STANDARD_PROJECT]
        assert projects == [StandardProject.POWER_PLANT]
        assert actions[-1].action_type == TurnActionType.PASS

    def test_maxed_temperature_hides_asteroid(self, make_game):
        game = make_game({"megacredits": 30})
        game.board.temperature = MAX_TEMPERATURE
        projects = {a.project for a in legal_turn_actions(game, 0)}
        assert StandardProject.ASTEROID not in projects
        assert StandardProject.AQUIFER in projects

    def test_playable_cards(self, make_game, catalog):
        game = make_game({"megacredits": 6, "hand": ["Sponsors", "Lake Marineris", "Io Mining Industries"]})
        plays = [a.card.name for a in legal_turn_actions(game, 0) if a.action_type == TurnActionType.PLAY_CARD]
        assert plays == ["Sponsors"]

    def test_card_actions_and_taps(self, make_game):
        game = make_game({"played": ["Regolith Eaters"]})
        eaters = instance_of(game, 0, "Regolith Eaters")

        actions = legal_turn_actions(game, 0)
        assert TurnAction.perform_action(eaters, 0) in actions
        assert TurnAction.perform_action(eaters, 1) in actions

        game.player(0).tapped_active_cards.add(eaters)
        assert legal_turn_actions(game, 0) == [TurnAction.pass_turn()]

    def test_milestones_and_awards(self, make_game):
        game = make_game({"megacredits": 8, "terraform_rating": 35})
        actions = legal_turn_actions(game, 0)
        assert TurnAction.claim_milestone("Terraformer") in actions
        assert TurnAction.fund_award("Banker") in actions
