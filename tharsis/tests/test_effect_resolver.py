"""
Tests for the effect resolver.

Tests:
- Card plays (payment, production, requirements)
- Placement decisions and partially playable results
- Passive effects (rebates, impact triggers, discounts, protections)
- Card actions
- Standard projects, milestones and awards
"""

from ..catalog.card import CardActionType, EffectType, ImpactType
from ..catalog.resource import CardResource, Resource
from ..engine_core.board import MAX_OCEANS, MAX_TEMPERATURE, TileStatus
from ..engine_core.effect_resolver import (
    handled_action_types,
    handled_effect_types,
    handled_impact_types,
)
from ..engine_core.operation import (
    Choice,
    ChoiceType,
    OperationType,
    PlayStatus,
    StandardProject,
    TurnAction,
)
from .conftest import OCEAN_SPACES, at, instance_of, mc


def fill_oceans(game):
    for x, y in OCEAN_SPACES[:MAX_OCEANS]:
        game.board.place(at(x, y), TileStatus.ocean())


class TestPlayCard:
    """Tests for playing cards from hand."""

    def test_simple_card(self, make_game, catalog, resolver):
        game = make_game({"megacredits": 10, "hand": ["Sponsors"]})
        attempt = resolver.play_card(game, 0, catalog.get("Sponsors"))

        assert attempt.status == PlayStatus.PLAYABLE
        assert [op.op_type for op in attempt.operations] == [
            OperationType.CHANGE_RESOURCES,
            OperationType.PUT_CARD_INTO_PLAY,
            OperationType.CHANGE_PRODUCTION,
        ]
        after = attempt.resulting_game.player(0)
        assert after.resource(Resource.MEGACREDITS) == 4
        assert after.production_of(Resource.MEGACREDITS) == 2
        assert after.find_played("Sponsors") is not None

    def test_input_game_is_untouched(self, make_game, catalog, resolver):
        game = make_game({"megacredits": 10, "hand": ["Sponsors"]})
        before = game.clone()
        resolver.play_card(game, 0, catalog.get("Sponsors"))
        assert game == before

    def test_operations_replay_to_same_state(self, make_game, catalog, resolver):
        game = make_game({"megacredits": 10, "hand": ["Sponsors"]})
        attempt = resolver.play_card(game, 0, catalog.get("Sponsors"))
        game.apply_operations(attempt.operations)
        assert game.players == attempt.resulting_game.players

    def test_card_not_in_hand(self, make_game, catalog, resolver):
        game = make_game({"megacredits": 10})
        attempt = resolver.play_card(game, 0, catalog.get("Sponsors"))
        assert attempt.is_unplayable
        assert "not in hand" in attempt.reason

    def test_unmet_requirement(self, make_game, catalog, resolver):
        game = make_game({"megacredits": 30, "hand": ["Lake Marineris"]})
        attempt = resolver.play_card(game, 0, catalog.get("Lake Marineris"))
        assert attempt.is_unplayable

    def test_cannot_afford(self, make_game, catalog, resolver):
        game = make_game({"megacredits": 5, "hand": ["Sponsors"]})
        assert resolver.play_card(game, 0, catalog.get("Sponsors")).is_unplayable

    def test_steel_pays_for_building(self, make_game, catalog, resolver):
        game = make_game({"megacredits": 6, "resources": {Resource.STEEL: 2}, "hand": ["Nuclear Power"]})
        attempt = resolver.play_card(game, 0, catalog.get("Nuclear Power"))

        assert attempt.is_playable
        after = attempt.resulting_game.player(0)
        assert after.resource(Resource.STEEL) == 0
        assert after.resource(Resource.MEGACREDITS) == 0
        assert after.production_of(Resource.ENERGY) == 3

    def test_production_floor(self, make_game, catalog, resolver):
        game = make_game({"megacredits": 20, "hand": ["Nuclear Power"], "terraform_rating": 1})
        assert resolver.play_card(game, 0, catalog.get("Nuclear Power")).is_unplayable

    def test_perform_turn_dispatch(self, make_game, catalog, resolver):
        game = make_game({"megacredits": 10, "hand": ["Sponsors"]})
        attempt = resolver.perform_turn(game, 0, TurnAction.play_card(catalog.get("Sponsors")))
        assert attempt.is_playable
        assert resolver.perform_turn(game, 0, TurnAction.pass_turn()).operations == ()


class TestPlacement:
    """Tests for impacts that need a location."""

    def test_aquifer_needs_a_location(self, make_game, resolver):
        game = make_game({"megacredits": 30})
        attempt = resolver.perform_standard_project(game, 0, StandardProject.AQUIFER)

        assert attempt.status == PlayStatus.PARTIALLY_PLAYABLE
        assert attempt.pending_choice.choice_type == ChoiceType.LOCATION
        assert len(attempt.pending_choice.options) == 12
        assert attempt.remaining[0].impact_type == ImpactType.PLACE_OCEAN

    def test_aquifer_with_location(self, make_game, resolver):
        game = make_game({"megacredits": 30})
        attempt = resolver.perform_standard_project(
            game, 0, StandardProject.AQUIFER, [Choice.at(at(5, -1))]
        )

        assert attempt.is_playable
        result = attempt.resulting_game
        assert result.board.ocean_count == 1
        assert result.player(0).terraform_rating == 21
        assert result.player(0).resource(Resource.STEEL) == 2
        assert mc(result) == 12

    def test_resume_partial_play(self, make_game, resolver):
        game = make_game({"megacredits": 30})
        partial = resolver.perform_standard_project(game, 0, StandardProject.AQUIFER)

        attempt = resolver.resolve_impacts(
            partial.resulting_game, 0, partial.remaining, [Choice.at(at(3, -3))]
        )

        assert attempt.is_playable
        assert attempt.resulting_game.player(0).resource(Resource.PLANTS) == 2
        assert mc(attempt.resulting_game) == 12

    def test_illegal_location(self, make_game, resolver):
        game = make_game({"megacredits": 30})
        attempt = resolver.perform_standard_project(
            game, 0, StandardProject.AQUIFER, [Choice.at(at(4, -3))]
        )
        assert attempt.is_unplayable

    def test_greenery_with_ocean_bonus(self, make_game, resolver):
        game = make_game({"megacredits": 30})
        game.board.place(at(4, -4), TileStatus.ocean())

        attempt = resolver.perform_standard_project(
            game, 0, StandardProject.GREENERY, [Choice.at(at(4, -3))]
        )

        result = attempt.resulting_game
        assert attempt.is_playable
        assert mc(result) == 9
        assert result.player(0).resource(Resource.PLANTS) == 1
        assert result.board.oxygen == 1
        assert result.player(0).terraform_rating == 21

    def test_ocean_cap_skips_without_rating(self, make_game, catalog, resolver):
        game = make_game({"megacredits": 20, "hand": ["Black Polar Dust"]})
        fill_oceans(game)

        attempt = resolver.play_card(game, 0, catalog.get("Black Polar Dust"))

        assert attempt.is_playable
        player = attempt.resulting_game.player(0)
        assert player.terraform_rating == 20
        assert player.production_of(Resource.HEAT) == 3
        assert attempt.resulting_game.board.ocean_count == MAX_OCEANS


class TestPassiveEffects:
    """Tests for effects reacting to cards and impacts."""

    def test_event_rebate(self, make_game, catalog, resolver):
        game = make_game({"megacredits": 20, "played": ["Media Group"], "hand": ["Release Of Inert Gases"]})
        attempt = resolver.play_card(game, 0, catalog.get("Release Of Inert Gases"))

        result = attempt.resulting_game
        assert mc(result) == 9
        assert result.player(0).terraform_rating == 22

    def test_own_tags_trigger_own_effect(self, make_game, catalog, resolver):
        game = make_game({"megacredits": 10, "hand": ["Mars University"]})
        attempt = resolver.play_card(game, 0, catalog.get("Mars University"))
        assert mc(attempt.resulting_game) == 3

    def test_opponent_effect_on_any_ocean(self, make_game, resolver):
        game = make_game({"megacredits": 30}, {"played": ["Arctic Algae"]})
        attempt = resolver.perform_standard_project(
            game, 0, StandardProject.AQUIFER, [Choice.at(at(5, -1))]
        )
        assert attempt.resulting_game.player(1).resource(Resource.PLANTS) == 2
        assert attempt.resulting_game.player(0).resource(Resource.PLANTS) == 0

    def test_own_effect_on_city(self, make_game, resolver):
        game = make_game({"megacredits": 30, "played": ["Rover Construction"]})
        attempt = resolver.perform_standard_project(
            game, 0, StandardProject.CITY, [Choice.at(at(4, -5))]
        )

        result = attempt.resulting_game
        assert attempt.is_playable
        assert mc(result) == 30 - 25 + 2
        assert result.player(0).production_of(Resource.MEGACREDITS) == 1
        assert result.player(0).resource(Resource.PLANTS) == 1

    def test_card_resource_on_any_city(self, make_game, resolver):
        game = make_game({"megacredits": 30}, {"played": ["Pets"]})
        pets = instance_of(game, 1, "Pets")
        attempt = resolver.perform_standard_project(
            game, 0, StandardProject.CITY, [Choice.at(at(4, -5))]
        )
        assert attempt.resulting_game.player(1).card_resource_count(pets, CardResource.ANIMAL) == 1

    def test_next_card_discount(self, make_game, catalog, resolver):
        game = make_game({"megacredits": 5, "hand": ["Indentured Workers", "Nuclear Power"]})

        first = resolver.play_card(game, 0, catalog.get("Indentured Workers"))
        assert first.is_playable
        assert mc(first.resulting_game) == 5

        second = resolver.play_card(first.resulting_game, 0, catalog.get("Nuclear Power"))
        assert second.is_playable
        assert mc(second.resulting_game) == 3
        assert second.resulting_game.player(0).next_card_this_generation_effects == []

    def test_discount_expires_with_generation(self, make_game, catalog, resolver):
        game = make_game({"megacredits": 5, "hand": ["Indentured Workers"]})
        played = resolver.play_card(game, 0, catalog.get("Indentured Workers")).resulting_game
        played.advance_generation()
        assert played.player(0).next_card_this_generation_effects == []


class TestTargets:
    """Tests for impacts that pick a player or a card."""

    def test_reduce_opponent_production(self, make_game, catalog, resolver):
        game = make_game(
            {"megacredits": 10, "hand": ["Heat Trappers"]},
            {"production": {Resource.HEAT: 2}},
        )
        card = catalog.get("Heat Trappers")

        partial = resolver.play_card(game, 0, card)
        assert partial.status == PlayStatus.PARTIALLY_PLAYABLE
        assert partial.pending_choice.options == (1,)

        attempt = resolver.play_card(game, 0, card, [Choice.player(1)])
        assert attempt.resulting_game.player(1).production_of(Resource.HEAT) == 0
        assert attempt.resulting_game.player(0).production_of(Resource.ENERGY) == 1

    def test_reduce_production_without_targets(self, make_game, catalog, resolver):
        game = make_game({"megacredits": 10, "hand": ["Heat Trappers"]}, {})
        assert resolver.play_card(game, 0, catalog.get("Heat Trappers")).is_playable

    def test_destroy_plants(self, make_game, catalog, resolver):
        game = make_game({"megacredits": 20, "hand": ["Asteroid"]}, {"resources": {Resource.PLANTS: 5}})
        attempt = resolver.play_card(game, 0, catalog.get("Asteroid"), [Choice.player(1)])

        result = attempt.resulting_game
        assert attempt.is_playable
        assert result.player(1).resource(Resource.PLANTS) == 2
        assert result.player(0).resource(Resource.TITANIUM) == 2
        assert result.board.temperature == -28

    def test_copy_building_production(self, make_game, catalog, resolver):
        game = make_game({
            "megacredits": 10,
            "production": {Resource.STEEL: 1},
            "played": ["Mine"],
            "hand": ["Robotic Workforce"],
        })
        mine = instance_of(game, 0, "Mine")

        attempt = resolver.play_card(game, 0, catalog.get("Robotic Workforce"), [Choice.card(0, mine)])

        assert attempt.is_playable
        assert attempt.resulting_game.player(0).production_of(Resource.STEEL) == 2


class TestCardActions:
    """Tests for actions printed on active cards."""

    def test_one_of_action(self, make_game, resolver):
        game = make_game({"played": ["Extreme-Cold Fungus"]})
        fungus = instance_of(game, 0, "Extreme-Cold Fungus")

        partial = resolver.perform_action(game, 0, fungus)
        assert partial.pending_choice.choice_type == ChoiceType.OPTION

        attempt = resolver.perform_action(game, 0, fungus, 0, [Choice.option(0)])
        result = attempt.resulting_game
        assert result.player(0).resource(Resource.PLANTS) == 1
        assert fungus in result.player(0).tapped_active_cards

        again = resolver.perform_action(result, 0, fungus, 0, [Choice.option(0)])
        assert again.is_unplayable

    def test_spend_card_resource(self, make_game, resolver):
        game = make_game({
            "played": ["Regolith Eaters"],
            "card_resources": [("Regolith Eaters", CardResource.MICROBE, 2)],
        })
        eaters = instance_of(game, 0, "Regolith Eaters")

        attempt = resolver.perform_action(game, 0, eaters, 1)

        result = attempt.resulting_game
        assert attempt.is_playable
        assert result.board.oxygen == 1
        assert result.player(0).terraform_rating == 21
        assert result.player(0).card_resource_count(eaters, CardResource.MICROBE) == 0

    def test_not_enough_card_resources(self, make_game, resolver):
        game = make_game({
            "played": ["Regolith Eaters"],
            "card_resources": [("Regolith Eaters", CardResource.MICROBE, 1)],
        })
        eaters = instance_of(game, 0, "Regolith Eaters")
        assert resolver.perform_action(game, 0, eaters, 1).is_unplayable

    def test_missing_action_index(self, make_game, resolver):
        game = make_game({"played": ["Regolith Eaters"]})
        eaters = instance_of(game, 0, "Regolith Eaters")
        assert resolver.perform_action(game, 0, eaters, 5).is_unplayable

    def test_steal_animal(self, make_game, resolver):
        game = make_game(
            {"played": ["Predators"]},
            {"played": ["Fish"], "card_resources": [("Fish", CardResource.ANIMAL, 2)]},
        )
        predators = instance_of(game, 0, "Predators")
        fish = instance_of(game, 1, "Fish")

        attempt = resolver.perform_action(game, 0, predators, 0, [Choice.card(1, fish)])

        result = attempt.resulting_game
        assert attempt.is_playable
        assert result.player(1).card_resource_count(fish, CardResource.ANIMAL) == 1
        assert result.player(0).card_resource_count(predators, CardResource.ANIMAL) == 1

    def test_protected_animals(self, make_game, resolver):
        game = make_game(
            {"played": ["Predators"]},
            {"played": ["Pets"], "card_resources": [("Pets", CardResource.ANIMAL, 2)]},
        )
        predators = instance_of(game, 0, "Predators")
        assert resolver.perform_action(game, 0, predators).is_unplayable

    def test_reveal_hit(self, make_game, catalog, resolver):
        game = make_game({"megacredits": 5, "played": ["Search For Life"]}, deck=["Ants", "Sponsors"])
        search = instance_of(game, 0, "Search For Life")

        attempt = resolver.perform_action(game, 0, search)

        result = attempt.resulting_game
        assert attempt.is_playable
        assert result.player(0).card_resource_count(search, CardResource.SCIENCE) == 1
        assert result.discard_pile == [catalog.get("Ants")]
        assert result.player(0).hand == []
        assert mc(result) == 4

    def test_reveal_miss(self, make_game, catalog, resolver):
        game = make_game({"megacredits": 5, "played": ["Search For Life"]}, deck=["Sponsors"])
        search = instance_of(game, 0, "Search For Life")

        attempt = resolver.perform_action(game, 0, search)

        result = attempt.resulting_game
        assert attempt.is_playable
        assert result.player(0).card_resource_count(search, CardResource.SCIENCE) == 0
        assert result.discard_pile == [catalog.get("Sponsors")]

    def test_reveal_with_empty_deck(self, make_game, resolver):
        game = make_game({"megacredits": 5, "played": ["Search For Life"]})
        search = instance_of(game, 0, "Search For Life")
        assert resolver.perform_action(game, 0, search).is_unplayable


class TestStandardProjects:
    """Tests for standard projects."""

    def test_power_plant(self, make_game, resolver):
        game = make_game({"megacredits": 11})
        attempt = resolver.perform_standard_project(game, 0, StandardProject.POWER_PLANT)
        assert attempt.is_playable
        assert attempt.resulting_game.player(0).production_of(Resource.ENERGY) == 1
        assert mc(attempt.resulting_game) == 0

    def test_asteroid_at_max_temperature(self, make_game, resolver):
        game = make_game({"megacredits": 30})
        game.board.temperature = MAX_TEMPERATURE
        assert resolver.perform_standard_project(game, 0, StandardProject.ASTEROID).is_unplayable

    def test_aquifer_with_oceans_maxed(self, make_game, resolver):
        game = make_game({"megacredits": 30})
        fill_oceans(game)
        assert resolver.perform_standard_project(game, 0, StandardProject.AQUIFER).is_unplayable

    def test_convert_heat(self, make_game, resolver):
        game = make_game({"resources": {Resource.HEAT: 9}})
        attempt = resolver.perform_standard_project(game, 0, StandardProject.CONVERT_HEAT)
        result = attempt.resulting_game
        assert result.player(0).resource(Resource.HEAT) == 1
        assert result.board.temperature == -28
        assert result.player(0).terraform_rating == 21


class TestMilestonesAndAwards:
    """Tests for claiming milestones and funding awards."""

    def test_claim_terraformer(self, make_game, resolver):
        game = make_game({"megacredits": 10, "terraform_rating": 35})
        attempt = resolver.claim_milestone(game, 0, "Terraformer")

        result = attempt.resulting_game
        assert attempt.is_playable
        assert result.claimed_milestones == {"Terraformer": 0}
        assert mc(result) == 2
        assert result.get_total_victory_points(0) == 35 + 5

        assert resolver.claim_milestone(result, 0, "Terraformer").is_unplayable

    def test_milestone_not_reached(self, make_game, resolver):
        game = make_game({"megacredits": 10})
        assert resolver.claim_milestone(game, 0, "Terraformer").is_unplayable

    def test_award_costs_rise(self, make_game, resolver):
        game = make_game({"megacredits": 30})
        first = resolver.fund_award(game, 0, "Banker").resulting_game
        second = resolver.fund_award(first, 0, "Miner").resulting_game
        assert mc(second) == 30 - 8 - 14
        assert resolver.fund_award(second, 0, "Banker").is_unplayable

    def test_award_scoring(self, make_game, resolver):
        game = make_game(
            {"megacredits": 10, "production": {Resource.MEGACREDITS: 3}},
            {"production": {Resource.MEGACREDITS: 1}},
        )
        result = resolver.fund_award(game, 1, "Banker")
        assert result.is_unplayable

        result = resolver.fund_award(game, 0, "Banker").resulting_game
        assert result.scores() == {0: 20 + 5, 1: 20 + 2}


class TestDispatch:
    """Every impact, action and effect type has a handler."""

    def test_all_impacts_handled(self):
        assert handled_impact_types() == set(ImpactType)

    def test_all_actions_handled(self):
        assert handled_action_types() == set(CardActionType)

    def test_all_effects_handled(self):
        assert handled_effect_types() == set(EffectType)
