"""
Effect Resolver - Turns cards, card actions and standard projects into operations.

The resolver works on a scratch clone of the game and applies every
operation as soon as it is emitted, so later impacts see the effect of
earlier ones. The result is a PlayAttempt:

- UNPLAYABLE when a rule forbids the move (with a reason)
- PARTIALLY_PLAYABLE when a decision is missing; resume with
  resolve_impacts() on the resulting game and the remaining impacts
- PLAYABLE with the full operation list

Decisions (placement locations, target players, target cards, ONE_OF
options) are answered by Choice values, consumed in the order the
decisions come up.

Passive effects fire from here:
- tag triggers right after a card is put into play, once per tag
- impact triggers after each impact resolves (placement bonuses and
  trigger gains never fire further triggers)
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Any, Callable, Iterable, TYPE_CHECKING

from ..catalog.card import (
    Card, CardAction, CardActionType, CardEffect, CityKind, EffectType,
    ImmediateImpact, ImpactType, any_card_discount, gain_production,
    place_city, place_greenery, place_ocean, raise_temperature, reduce_any_production,
)
from ..catalog.resource import PaymentCost, Resource
from .board import (
    city_restrictions, greenery_restrictions, ocean_restrictions, special_tile_restrictions,
)
from .errors import NotYetHandled
from .milestones import (
    MILESTONE_COST, award_unavailable_reason, milestone_unavailable_reason, next_award_cost,
)
from .operation import (
    Choice, ChoiceType, GameOperation, PendingChoice, PlayAttempt, StandardProject,
    TurnAction, TurnActionType,
)
from .player import ActiveEffect, PlayedCard, PlayerId, PlayerState

if TYPE_CHECKING:
    from .state import Game

logger = logging.getLogger(__name__)


STANDARD_PROJECTS: dict[StandardProject, tuple[PaymentCost, tuple[ImmediateImpact, ...]]] = {
    StandardProject.POWER_PLANT: (PaymentCost.megacredits(11), (gain_production(Resource.ENERGY, 1),)),
    StandardProject.ASTEROID: (PaymentCost.megacredits(14), (raise_temperature(),)),
    StandardProject.AQUIFER: (PaymentCost.megacredits(18), (place_ocean(),)),
    StandardProject.GREENERY: (PaymentCost.megacredits(23), (place_greenery(),)),
    StandardProject.CITY: (
        PaymentCost.megacredits(25),
        (place_city(CityKind.REGULAR), gain_production(Resource.MEGACREDITS, 1)),
    ),
    StandardProject.CONVERT_PLANTS: (PaymentCost.of(Resource.PLANTS, 8), (place_greenery(),)),
    StandardProject.CONVERT_HEAT: (PaymentCost.of(Resource.HEAT, 8), (raise_temperature(),)),
}


# ============================================================================
# Resolution bookkeeping
# ============================================================================

@dataclass(frozen=True)
class _Rejection:
    reason: str


class _Skipped:
    """Marker outcome: the impact had nothing to do."""


SKIPPED = _Skipped()


@dataclass(frozen=True)
class _TriggerEvent:
    """Something passive effects may react to: a resolved impact or a played card."""
    actor: PlayerId
    impact: ImmediateImpact | None = None
    card: Card | None = None


class _Resolution:
    """Scratch game, the acting player, queued choices and emitted operations."""

    def __init__(
        self,
        game: Game,
        player_id: PlayerId,
        choices: Iterable[Choice] = (),
        source: int | None = None,
    ):
        self.game = game.clone()
        self.player_id = player_id
        self.source = source
        self.choices = list(choices)
        self.operations: list[GameOperation] = []

    @property
    def player(self) -> PlayerState:
        return self.game.player(self.player_id)

    def emit(self, operation: GameOperation) -> None:
        self.game.execute_operation(operation)
        self.operations.append(operation)

    def pay(self, payment: dict[Resource, int]) -> None:
        for resource in Resource:
            amount = payment.get(resource, 0)
            if amount:
                self.emit(GameOperation.change_resources(self.player_id, resource, -amount))

    def choose(self, pending: PendingChoice) -> tuple[Any, PendingChoice | _Rejection | None]:
        """The answer to `pending`, or the outcome to stop resolution with."""
        if not self.choices:
            return None, pending
        choice = self.choices.pop(0)
        if not pending.accepts(choice):
            return None, _Rejection(
                f"{choice} is not a legal answer for {pending.impact.impact_type.value}"
            )
        return pending.answer_of(choice), None


# ============================================================================
# Resolver
# ============================================================================

class EffectResolver:
    """
    Resolves turn actions into PlayAttempts.

    Stateless - every call clones the game it is given and never
    mutates it.
    """

    # =========================================================================
    # Entry points
    # =========================================================================

    def play_card(
        self, game: Game, player_id: PlayerId, card: Card, choices: Iterable[Choice] = ()
    ) -> PlayAttempt:
        player = game.player(player_id)
        if card not in player.hand:
            return PlayAttempt.unplayable(f"{card.name} is not in hand")
        reasons = player.unmet_requirements(game.board, card)
        if reasons:
            return PlayAttempt.unplayable("; ".join(reasons))
        for resource, delta in card.own_production.items():
            if delta < 0 and not player.can_reduce_production(resource, -delta):
                return PlayAttempt.unplayable(
                    f"not enough {resource.value} production to lose {-delta}"
                )

        instance_id = player.next_instance_id
        res = _Resolution(game, player_id, choices, source=instance_id)
        res.pay(player.payment_for(player.effective_cost(card)))
        res.emit(GameOperation.put_card_into_play(player_id, card, instance_id))
        if res.player.next_card_this_generation_effects:
            res.emit(GameOperation.consume_next_card_effects(player_id))
        for effect in card.effects:
            res.emit(GameOperation.add_effect(player_id, instance_id, effect))
        for resource in Resource:
            delta = card.own_production.get(resource, 0)
            if delta:
                res.emit(GameOperation.change_production(player_id, resource, delta))

        self._fire(res, _TriggerEvent(player_id, card=card))

        impacts = list(card.immediate_impacts)
        for resource in Resource:
            delta = card.any_production.get(resource, 0)
            if delta < 0:
                impacts.append(reduce_any_production(resource, -delta))
        logger.debug("Player %s plays %s", player_id, card.name)
        return self._run(res, impacts)

    def perform_action(
        self,
        game: Game,
        player_id: PlayerId,
        instance_id: int,
        action_index: int = 0,
        choices: Iterable[Choice] = (),
    ) -> PlayAttempt:
        player = game.player(player_id)
        played = player.get_played(instance_id)
        if played is None:
            return PlayAttempt.unplayable(f"card #{instance_id} is not in play")
        if not played.card.actions:
            return PlayAttempt.unplayable(f"{played.card.name} has no actions")
        if instance_id in player.tapped_active_cards:
            return PlayAttempt.unplayable(f"{played.card.name} was already used this generation")
        if not 0 <= action_index < len(played.card.actions):
            return PlayAttempt.unplayable(f"{played.card.name} has no action {action_index}")

        action = played.card.actions[action_index]
        res = _Resolution(game, player_id, choices, source=instance_id)
        res.emit(GameOperation.mark_card_action_used(player_id, instance_id))
        handler = self._get_action_handler(action.action_type)
        return handler(res, played, action)

    def perform_standard_project(
        self,
        game: Game,
        player_id: PlayerId,
        project: StandardProject,
        choices: Iterable[Choice] = (),
    ) -> PlayAttempt:
        cost, impacts = STANDARD_PROJECTS[project]
        board = game.board
        if project in (StandardProject.ASTEROID, StandardProject.CONVERT_HEAT) and board.temperature_maxed:
            return PlayAttempt.unplayable("temperature is already at its maximum")
        if project == StandardProject.AQUIFER and board.oceans_maxed:
            return PlayAttempt.unplayable("every ocean is already placed")
        payment = game.player(player_id).payment_for(cost)
        if payment is None:
            return PlayAttempt.unplayable(f"cannot pay {cost.amount} ({cost.currency.value})")
        res = _Resolution(game, player_id, choices)
        res.pay(payment)
        return self._run(res, impacts)

    def claim_milestone(self, game: Game, player_id: PlayerId, name: str) -> PlayAttempt:
        reason = milestone_unavailable_reason(
            name, game.player(player_id), game.board, game.claimed_milestones
        )
        if reason:
            return PlayAttempt.unplayable(reason)
        res = _Resolution(game, player_id)
        res.emit(GameOperation.change_resources(player_id, Resource.MEGACREDITS, -MILESTONE_COST))
        res.emit(GameOperation.claim_milestone(player_id, name))
        return PlayAttempt.playable(res.operations, res.game)

    def fund_award(self, game: Game, player_id: PlayerId, name: str) -> PlayAttempt:
        reason = award_unavailable_reason(name, game.player(player_id), game.funded_awards)
        if reason:
            return PlayAttempt.unplayable(reason)
        res = _Resolution(game, player_id)
        cost = next_award_cost(len(game.funded_awards))
        res.emit(GameOperation.change_resources(player_id, Resource.MEGACREDITS, -cost))
        res.emit(GameOperation.fund_award(player_id, name))
        return PlayAttempt.playable(res.operations, res.game)

    def resolve_impacts(
        self,
        game: Game,
        player_id: PlayerId,
        impacts: Iterable[ImmediateImpact],
        choices: Iterable[Choice] = (),
        source: int | None = None,
    ) -> PlayAttempt:
        """Resolve loose impacts, e.g. the remainder of a partially played card."""
        res = _Resolution(game, player_id, choices, source=source)
        return self._run(res, list(impacts))

    def perform_turn(
        self,
        game: Game,
        player_id: PlayerId,
        action: TurnAction,
        choices: Iterable[Choice] = (),
    ) -> PlayAttempt:
        """Dispatch a TurnAction to the matching entry point."""
        if action.action_type == TurnActionType.PLAY_CARD:
            return self.play_card(game, player_id, action.card, choices)
        if action.action_type == TurnActionType.PERFORM_ACTION:
            return self.perform_action(game, player_id, action.instance_id, action.action_index, choices)
        if action.action_type == TurnActionType.STANDARD_PROJECT:
            return self.perform_standard_project(game, player_id, action.project, choices)
        if action.action_type == TurnActionType.CLAIM_MILESTONE:
            return self.claim_milestone(game, player_id, action.name)
        if action.action_type == TurnActionType.FUND_AWARD:
            return self.fund_award(game, player_id, action.name)
        return PlayAttempt.playable([], game.clone())

    # =========================================================================
    # Impact loop
    # =========================================================================

    def _run(self, res: _Resolution, impacts: Iterable[ImmediateImpact]) -> PlayAttempt:
        queue = list(impacts)
        while queue:
            impact = queue.pop(0)
            outcome = self._get_impact_handler(impact.impact_type)(res, impact)
            if isinstance(outcome, PendingChoice):
                return PlayAttempt.partial(
                    res.operations, [impact] + queue, outcome, res.source, res.game
                )
            if isinstance(outcome, _Rejection):
                return PlayAttempt.unplayable(outcome.reason)
            if isinstance(outcome, list):
                queue[0:0] = outcome
                continue
            if outcome is None:
                self._fire(res, _TriggerEvent(res.player_id, impact=impact))
        return PlayAttempt.playable(res.operations, res.game)

    def _apply_bonuses(self, res: _Resolution, bonuses: list[ImmediateImpact]) -> None:
        for bonus in bonuses:
            outcome = self._get_impact_handler(bonus.impact_type)(res, bonus)
            if outcome is not None and outcome is not SKIPPED:
                raise NotYetHandled(f"Placement bonus {bonus.impact_type.value} needs a decision")

    def _get_impact_handler(self, impact_type: ImpactType) -> Callable:
        """Get the handler function for an impact type."""
        handlers = {
            ImpactType.RAISE_TEMPERATURE: self._impact_raise_temperature,
            ImpactType.RAISE_OXYGEN: self._impact_raise_oxygen,
            ImpactType.RAISE_TERRAFORM_RATING: self._impact_raise_terraform_rating,
            ImpactType.GAIN_TERRAFORM_RATING_PER_OWN_TAG: self._impact_terraform_rating_per_tag,
            ImpactType.PLACE_OCEAN: self._impact_place_ocean,
            ImpactType.PLACE_GREENERY: self._impact_place_greenery,
            ImpactType.PLACE_CITY: self._impact_place_city,
            ImpactType.PLACE_SPECIAL_TILE: self._impact_place_special_tile,
            ImpactType.DRAW_CARD: self._impact_draw_card,
            ImpactType.ADD_RESOURCE_TO_SAME_CARD: self._impact_add_to_same_card,
            ImpactType.ADD_RESOURCE_TO_ANOTHER_CARD: self._impact_add_to_own_card,
            ImpactType.ADD_RESOURCE_TO_ANY_CARD: self._impact_add_to_own_card,
            ImpactType.REMOVE_RESOURCE_FROM_ANY_CARD: self._impact_remove_from_any_card,
            ImpactType.GAIN_RESOURCE: self._impact_gain_resource,
            ImpactType.GAIN_RESOURCE_PER_CITY: self._impact_gain_resource_per_city,
            ImpactType.GAIN_RESOURCE_PER_CITY_ON_MARS: self._impact_gain_resource_per_city,
            ImpactType.DESTROY_OWN_PLANTS: self._impact_destroy_own_plants,
            ImpactType.DESTROY_ANY_PLANTS: self._impact_destroy_any_plants,
            ImpactType.GAIN_PRODUCTION: self._impact_gain_production,
            ImpactType.GAIN_PRODUCTION_PER_CITY: self._impact_gain_production_per_city,
            ImpactType.GAIN_PRODUCTION_PER_CITY_ON_MARS: self._impact_gain_production_per_city,
            ImpactType.GAIN_PRODUCTION_PER_OWN_TAG: self._impact_gain_production_per_tag,
            ImpactType.GAIN_PRODUCTION_PER_OPPONENT_TAG: self._impact_gain_production_per_tag,
            ImpactType.GAIN_PRODUCTION_PER_ANY_TAG: self._impact_gain_production_per_tag,
            ImpactType.REDUCE_ANY_PRODUCTION: self._impact_reduce_any_production,
            ImpactType.COPY_PRODUCTION_OF_CARD: self._impact_copy_production,
            ImpactType.DISCOUNT_NEXT_CARD: self._impact_discount_next_card,
            ImpactType.ONE_OF: self._impact_one_of,
        }
        return handlers.get(impact_type)

    # =========================================================================
    # Global parameters
    # =========================================================================

    def _impact_raise_temperature(self, res: _Resolution, impact: ImmediateImpact):
        if res.game.board.temperature_maxed:
            return SKIPPED
        res.emit(GameOperation.raise_temperature())
        res.emit(GameOperation.raise_terraform_rating(res.player_id))
        return None

    def _impact_raise_oxygen(self, res: _Resolution, impact: ImmediateImpact):
        if res.game.board.oxygen_maxed:
            return SKIPPED
        res.emit(GameOperation.raise_oxygen())
        res.emit(GameOperation.raise_terraform_rating(res.player_id))
        return None

    def _impact_raise_terraform_rating(self, res: _Resolution, impact: ImmediateImpact):
        res.emit(GameOperation.raise_terraform_rating(res.player_id, impact.count))
        return None

    def _impact_terraform_rating_per_tag(self, res: _Resolution, impact: ImmediateImpact):
        gained = impact.count * (res.player.active_tag_count(impact.tag) // impact.per)
        if not gained:
            return SKIPPED
        res.emit(GameOperation.raise_terraform_rating(res.player_id, gained))
        return None

    # =========================================================================
    # Tiles
    # =========================================================================

    def _choose_location(self, res: _Resolution, impact: ImmediateImpact, restrictions):
        """Returns (location, None) or (None, outcome to stop with)."""
        legal = res.game.board.legal_locations(res.player_id, restrictions)
        if not legal:
            return None, _Rejection(f"no legal location for {impact.impact_type.value}")
        return res.choose(PendingChoice(ChoiceType.LOCATION, impact, tuple(legal)))

    def _impact_place_ocean(self, res: _Resolution, impact: ImmediateImpact):
        board = res.game.board
        if board.oceans_maxed:
            return SKIPPED
        location, stop = self._choose_location(res, impact, ocean_restrictions(impact.location_kind))
        if stop:
            return stop
        bonuses = board.get_placement_bonuses(location)
        res.emit(GameOperation.place_ocean(location))
        res.emit(GameOperation.raise_terraform_rating(res.player_id))
        self._apply_bonuses(res, bonuses)
        return None

    def _impact_place_greenery(self, res: _Resolution, impact: ImmediateImpact):
        location, stop = self._choose_location(res, impact, greenery_restrictions(impact.location_kind))
        if stop:
            return stop
        bonuses = res.game.board.get_placement_bonuses(location)
        res.emit(GameOperation.place_greenery(res.player_id, location))
        if not res.game.board.oxygen_maxed:
            res.emit(GameOperation.raise_oxygen())
            res.emit(GameOperation.raise_terraform_rating(res.player_id))
        self._apply_bonuses(res, bonuses)
        return None

    def _impact_place_city(self, res: _Resolution, impact: ImmediateImpact):
        city_kind = impact.city_kind or CityKind.REGULAR
        location, stop = self._choose_location(res, impact, city_restrictions(city_kind))
        if stop:
            return stop
        bonuses = res.game.board.get_placement_bonuses(location)
        res.emit(GameOperation.place_city_tile(res.player_id, location, city_kind))
        self._apply_bonuses(res, bonuses)
        return None

    def _impact_place_special_tile(self, res: _Resolution, impact: ImmediateImpact):
        restrictions = special_tile_restrictions(impact.special_tile)
        location, stop = self._choose_location(res, impact, restrictions)
        if stop:
            return stop
        bonuses = res.game.board.get_placement_bonuses(location)
        res.emit(GameOperation.place_special_tile(res.player_id, location, impact.special_tile))
        self._apply_bonuses(res, bonuses)
        return None

    # =========================================================================
    # Cards and card resources
    # =========================================================================

    def _impact_draw_card(self, res: _Resolution, impact: ImmediateImpact):
        available = len(res.game.draw_deck) + len(res.game.discard_pile)
        count = min(impact.count, available)
        if not count:
            return SKIPPED
        res.emit(GameOperation.draw_cards(res.player_id, count))
        return None

    def _impact_add_to_same_card(self, res: _Resolution, impact: ImmediateImpact):
        if res.source is None:
            return _Rejection("there is no card to hold the resources")
        res.emit(GameOperation.change_card_resource(
            res.player_id, res.source, impact.card_resource, impact.count
        ))
        return None

    def _impact_add_to_own_card(self, res: _Resolution, impact: ImmediateImpact):
        exclude_source = impact.impact_type == ImpactType.ADD_RESOURCE_TO_ANOTHER_CARD
        candidates = tuple(
            (res.player_id, played.instance_id)
            for played in res.player.played_cards
            if played.card.supported_card_resource() == impact.card_resource
            and not (exclude_source and played.instance_id == res.source)
        )
        if not candidates:
            return SKIPPED
        target, stop = res.choose(PendingChoice(ChoiceType.CARD, impact, candidates))
        if stop:
            return stop
        res.emit(GameOperation.change_card_resource(
            res.player_id, target[1], impact.card_resource, impact.count
        ))
        return None

    def _impact_remove_from_any_card(self, res: _Resolution, impact: ImmediateImpact):
        candidates = []
        for pid in res.game.player_ids:
            owner = res.game.player(pid)
            for played in owner.played_cards:
                if owner.card_resource_count(played.instance_id, impact.card_resource) <= 0:
                    continue
                if pid != res.player_id and impact.card_resource in owner.protected_card_resources(
                    played.instance_id
                ):
                    continue
                candidates.append((pid, played.instance_id))
        if not candidates:
            return _Rejection(f"no card holds removable {impact.card_resource.value} resources")
        target, stop = res.choose(PendingChoice(ChoiceType.CARD, impact, tuple(candidates)))
        if stop:
            return stop
        pid, instance_id = target
        held = res.game.player(pid).card_resource_count(instance_id, impact.card_resource)
        res.emit(GameOperation.change_card_resource(
            pid, instance_id, impact.card_resource, -min(impact.count, held)
        ))
        return None

    # =========================================================================
    # Resources
    # =========================================================================

    def _impact_gain_resource(self, res: _Resolution, impact: ImmediateImpact):
        if res.player.resource(impact.resource) + impact.count < 0:
            return _Rejection(f"not enough {impact.resource.value}")
        if not impact.count:
            return SKIPPED
        res.emit(GameOperation.change_resources(res.player_id, impact.resource, impact.count))
        return None

    def _impact_gain_resource_per_city(self, res: _Resolution, impact: ImmediateImpact):
        on_mars_only = impact.impact_type == ImpactType.GAIN_RESOURCE_PER_CITY_ON_MARS
        gained = impact.count * res.game.board.city_count(on_mars_only=on_mars_only)
        if not gained:
            return SKIPPED
        res.emit(GameOperation.change_resources(res.player_id, impact.resource, gained))
        return None

    def _impact_destroy_own_plants(self, res: _Resolution, impact: ImmediateImpact):
        if res.player.resource(Resource.PLANTS) < impact.count:
            return _Rejection(f"not enough plants to lose {impact.count}")
        res.emit(GameOperation.change_resources(res.player_id, Resource.PLANTS, -impact.count))
        return None

    def _impact_destroy_any_plants(self, res: _Resolution, impact: ImmediateImpact):
        targets = tuple(
            pid for pid in res.game.player_ids
            if res.game.player(pid).resource(Resource.PLANTS) > 0
        )
        if not targets:
            return SKIPPED
        target, stop = res.choose(PendingChoice(ChoiceType.PLAYER, impact, targets))
        if stop:
            return stop
        lost = min(impact.count, res.game.player(target).resource(Resource.PLANTS))
        res.emit(GameOperation.change_resources(target, Resource.PLANTS, -lost))
        return None

    # =========================================================================
    # Production
    # =========================================================================

    def _change_own_production(self, res: _Resolution, resource: Resource, delta: int):
        if not delta:
            return SKIPPED
        if delta < 0 and not res.player.can_reduce_production(resource, -delta):
            return _Rejection(f"not enough {resource.value} production to lose {-delta}")
        res.emit(GameOperation.change_production(res.player_id, resource, delta))
        return None

    def _impact_gain_production(self, res: _Resolution, impact: ImmediateImpact):
        return self._change_own_production(res, impact.resource, impact.count)

    def _impact_gain_production_per_city(self, res: _Resolution, impact: ImmediateImpact):
        on_mars_only = impact.impact_type == ImpactType.GAIN_PRODUCTION_PER_CITY_ON_MARS
        cities = res.game.board.city_count(on_mars_only=on_mars_only)
        return self._change_own_production(res, impact.resource, impact.count * cities)

    def _impact_gain_production_per_tag(self, res: _Resolution, impact: ImmediateImpact):
        if impact.impact_type == ImpactType.GAIN_PRODUCTION_PER_OWN_TAG:
            counted = [res.player]
        elif impact.impact_type == ImpactType.GAIN_PRODUCTION_PER_OPPONENT_TAG:
            counted = res.game.opponents_of(res.player_id)
        else:
            counted = [res.game.player(pid) for pid in res.game.player_ids]
        tags = sum(player.active_tag_count(impact.tag) for player in counted)
        return self._change_own_production(res, impact.resource, impact.count * (tags // impact.per))

    def _impact_reduce_any_production(self, res: _Resolution, impact: ImmediateImpact):
        targets = tuple(
            pid for pid in res.game.player_ids
            if res.game.player(pid).can_reduce_production(impact.resource, impact.count)
        )
        if not targets:
            return SKIPPED
        target, stop = res.choose(PendingChoice(ChoiceType.PLAYER, impact, targets))
        if stop:
            return stop
        res.emit(GameOperation.change_production(target, impact.resource, -impact.count))
        return None

    def _impact_copy_production(self, res: _Resolution, impact: ImmediateImpact):
        candidates = tuple(
            (res.player_id, played.instance_id)
            for played in res.player.played_cards
            if played.instance_id != res.source
            and played.card.has_tag(impact.tag)
            and any(played.card.own_production.values())
        )
        if not candidates:
            return SKIPPED
        target, stop = res.choose(PendingChoice(ChoiceType.CARD, impact, candidates))
        if stop:
            return stop
        copied = res.player.get_played(target[1]).card
        for resource in Resource:
            delta = copied.own_production.get(resource, 0)
            if delta < 0 and not res.player.can_reduce_production(resource, -delta):
                return _Rejection(f"cannot copy {copied.name}: not enough {resource.value} production")
        for resource in Resource:
            delta = copied.own_production.get(resource, 0)
            if delta:
                res.emit(GameOperation.change_production(res.player_id, resource, delta))
        return None

    # =========================================================================
    # Misc
    # =========================================================================

    def _impact_discount_next_card(self, res: _Resolution, impact: ImmediateImpact):
        res.emit(GameOperation.add_effect(
            res.player_id, None, any_card_discount(impact.count), next_card_only=True
        ))
        return None

    def _impact_one_of(self, res: _Resolution, impact: ImmediateImpact):
        indexes = tuple(range(len(impact.options)))
        index, stop = res.choose(PendingChoice(ChoiceType.OPTION, impact, indexes))
        if stop:
            return stop
        return [impact.options[index]]

    # =========================================================================
    # Card actions
    # =========================================================================

    def _get_action_handler(self, action_type: CardActionType) -> Callable:
        """Get the handler function for a card action type."""
        handlers = {
            CardActionType.CAUSE_FREE_IMPACT: self._action_free,
            CardActionType.SPEND_RESOURCE: self._action_spend_resource,
            CardActionType.SPEND_SAME_CARD_RESOURCE: self._action_spend_card_resource,
            CardActionType.SPEND_PRODUCTION: self._action_spend_production,
            CardActionType.REVEAL_CARD_FOR_TAG: self._action_reveal_card,
        }
        return handlers.get(action_type)

    def _action_free(self, res: _Resolution, played: PlayedCard, action: CardAction) -> PlayAttempt:
        return self._run(res, action.impacts)

    def _action_spend_resource(self, res: _Resolution, played: PlayedCard, action: CardAction) -> PlayAttempt:
        payment = res.player.payment_for(action.cost)
        if payment is None:
            return PlayAttempt.unplayable(f"cannot pay {action.cost.amount} ({action.cost.currency.value})")
        res.pay(payment)
        return self._run(res, action.impacts)

    def _action_spend_card_resource(
        self, res: _Resolution, played: PlayedCard, action: CardAction
    ) -> PlayAttempt:
        held = res.player.card_resource_count(played.instance_id, action.card_resource)
        if held < action.count:
            return PlayAttempt.unplayable(
                f"{played.card.name} holds {held} {action.card_resource.value}, needs {action.count}"
            )
        res.emit(GameOperation.change_card_resource(
            res.player_id, played.instance_id, action.card_resource, -action.count
        ))
        return self._run(res, action.impacts)

    def _action_spend_production(self, res: _Resolution, played: PlayedCard, action: CardAction) -> PlayAttempt:
        if not res.player.can_reduce_production(action.resource, action.count):
            return PlayAttempt.unplayable(f"not enough {action.resource.value} production")
        res.emit(GameOperation.change_production(res.player_id, action.resource, -action.count))
        return self._run(res, action.impacts)

    def _action_reveal_card(self, res: _Resolution, played: PlayedCard, action: CardAction) -> PlayAttempt:
        payment = res.player.payment_for(action.cost)
        if payment is None:
            return PlayAttempt.unplayable(f"cannot pay {action.cost.amount} ({action.cost.currency.value})")
        if not res.game.draw_deck and not res.game.discard_pile:
            return PlayAttempt.unplayable("there is no card left to reveal")
        res.pay(payment)
        res.emit(GameOperation.draw_cards(res.player_id, 1))
        revealed = res.player.hand[-1]
        res.emit(GameOperation.discard_cards(res.player_id, (revealed,)))
        if not revealed.has_tag(action.tag):
            logger.debug("Revealed %s: no %s tag", revealed.name, action.tag.value)
            return PlayAttempt.playable(res.operations, res.game)
        return self._run(res, action.impacts)

    # =========================================================================
    # Passive effects
    # =========================================================================

    def _fire(self, res: _Resolution, event: _TriggerEvent) -> None:
        """Let every player's passive effects react to `event`."""
        for pid in res.game.player_ids:
            for active in list(res.game.player(pid).effects):
                handler = self._get_effect_handler(active.effect.effect_type)
                handler(res, pid, active, event)

    def _get_effect_handler(self, effect_type: EffectType) -> Callable:
        """Get the handler function for an effect type."""
        handlers = {
            EffectType.ANY_CARD_DISCOUNT: self._effect_passive,
            EffectType.CARD_DISCOUNT_FOR_TAG: self._effect_passive,
            EffectType.INCREASED_METALS_VALUE: self._effect_passive,
            EffectType.CANNOT_REMOVE_THIS_CARD_RESOURCE: self._effect_passive,
            EffectType.CANNOT_REMOVE_ANY_CARD_RESOURCES: self._effect_passive,
            EffectType.REBATE_AFTER_PLAYING_CARD_TAG: self._effect_rebate,
            EffectType.GAIN_PRODUCTION_FOR_ANY_TAG_PLAYED: self._effect_production_for_tag,
            EffectType.GAIN_CARD_RESOURCE_FOR_OWN_IMPACT: self._effect_card_resource_for_impact,
            EffectType.GAIN_CARD_RESOURCE_FOR_ANY_IMPACT: self._effect_card_resource_for_impact,
            EffectType.GAIN_RESOURCE_FOR_OWN_IMPACT: self._effect_resource_for_impact,
            EffectType.GAIN_RESOURCE_FOR_ANY_IMPACT: self._effect_resource_for_impact,
            EffectType.GAIN_PRODUCTION_FOR_OWN_IMPACT: self._effect_production_for_impact,
            EffectType.GAIN_PRODUCTION_FOR_ANY_IMPACT: self._effect_production_for_impact,
        }
        return handlers.get(effect_type)

    def _effect_passive(self, res, owner, active, event) -> None:
        # read directly by PlayerState (discounts, metal values, protections)
        return None

    def _effect_rebate(self, res: _Resolution, owner: PlayerId, active: ActiveEffect, event: _TriggerEvent) -> None:
        if event.card is None or owner != event.actor:
            return
        occurrences = event.card.tags.count(active.effect.tag)
        if occurrences:
            res.emit(GameOperation.change_resources(
                owner, Resource.MEGACREDITS, active.effect.count * occurrences
            ))

    def _effect_production_for_tag(
        self, res: _Resolution, owner: PlayerId, active: ActiveEffect, event: _TriggerEvent
    ) -> None:
        if event.card is None:
            return
        occurrences = event.card.tags.count(active.effect.tag)
        if occurrences:
            res.emit(GameOperation.change_production(
                owner, active.effect.resource, active.effect.count * occurrences
            ))

    def _effect_card_resource_for_impact(self, res, owner, active, event) -> None:
        if _impact_triggers(active.effect, owner, event):
            res.emit(GameOperation.change_card_resource(
                owner, active.source, active.effect.card_resource, active.effect.count
            ))

    def _effect_resource_for_impact(self, res, owner, active, event) -> None:
        if _impact_triggers(active.effect, owner, event):
            res.emit(GameOperation.change_resources(owner, active.effect.resource, active.effect.count))

    def _effect_production_for_impact(self, res, owner, active, event) -> None:
        if _impact_triggers(active.effect, owner, event):
            res.emit(GameOperation.change_production(owner, active.effect.resource, active.effect.count))


def _impact_triggers(effect: CardEffect, owner: PlayerId, event: _TriggerEvent) -> bool:
    if event.impact is None:
        return False
    if effect.is_own_trigger and owner != event.actor:
        return False
    return any(event.impact.matches(trigger) for trigger in effect.triggers)


_RESOLVER = EffectResolver()


def default_resolver() -> EffectResolver:
    return _RESOLVER


def handled_impact_types() -> set[ImpactType]:
    return {t for t in ImpactType if _RESOLVER._get_impact_handler(t) is not None}


def handled_action_types() -> set[CardActionType]:
    return {t for t in CardActionType if _RESOLVER._get_action_handler(t) is not None}


def handled_effect_types() -> set[EffectType]:
    return {t for t in EffectType if _RESOLVER._get_effect_handler(t) is not None}
