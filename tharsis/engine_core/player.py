"""
Player State - Per-player economy.

Holds resources, production, hand, played cards, card-bound resources,
terraform rating and the passive effects contributed by played cards.
Answers affordability and requirement questions and computes victory
points. Mutation goes through the reducer; the only methods here that
mutate are purchase_cards() and advance_generation(), the whole-player
transitions behind the PURCHASE_CARDS and PRODUCE operations.
"""

from __future__ import annotations
import copy
from dataclasses import dataclass, field
from typing import Callable, Iterable

from ..catalog.card import (
    Card, CardEffect, CardKind, CardRequirement, CardTag, CityKind, EffectType,
    RequirementType, SpecialTile, VictoryPointType,
)
from ..catalog.resource import (
    DIRECT_COST_RESOURCES, CardResource, PaymentCost, Resource,
)
from .board import MarsBoard
from .coordinates import TileLocation
from .errors import InvariantViolation

PlayerId = int

CARD_PRICE = 3
STARTING_TERRAFORM_RATING = 20
SOLO_STARTING_TERRAFORM_RATING = 14
BASE_STEEL_VALUE = 2
BASE_TITANIUM_VALUE = 3


def empty_pool() -> dict[Resource, int]:
    return {resource: 0 for resource in Resource}


@dataclass(frozen=True)
class PlayedCard:
    """A card in play; instance ids are unique per player."""
    instance_id: int
    card: Card


@dataclass(frozen=True)
class ActiveEffect:
    """A passive effect and the played card that contributes it."""
    source: int
    effect: CardEffect


@dataclass
class PlayerState:
    player_id: PlayerId
    resources: dict[Resource, int] = field(default_factory=empty_pool)
    production: dict[Resource, int] = field(default_factory=empty_pool)
    played_cards: list[PlayedCard] = field(default_factory=list)
    card_resources: dict[tuple[int, CardResource], int] = field(default_factory=dict)
    tapped_active_cards: set[int] = field(default_factory=set)
    hand: list[Card] = field(default_factory=list)
    terraform_rating: int = STARTING_TERRAFORM_RATING
    effects: list[ActiveEffect] = field(default_factory=list)
    next_card_this_generation_effects: list[CardEffect] = field(default_factory=list)
    next_instance_id: int = 0

    def clone(self) -> PlayerState:
        return copy.deepcopy(self)

    # =========================================================================
    # Lookups
    # =========================================================================

    def resource(self, resource: Resource) -> int:
        return self.resources.get(resource, 0)

    def production_of(self, resource: Resource) -> int:
        return self.production.get(resource, 0)

    def get_played(self, instance_id: int) -> PlayedCard | None:
        for played in self.played_cards:
            if played.instance_id == instance_id:
                return played
        return None

    def find_played(self, name: str) -> PlayedCard | None:
        for played in self.played_cards:
            if played.card.name == name:
                return played
        return None

    def active_cards(self) -> list[PlayedCard]:
        return [p for p in self.played_cards if p.card.kind == CardKind.ACTIVE]

    def card_resource_count(self, instance_id: int, card_resource: CardResource) -> int:
        return self.card_resources.get((instance_id, card_resource), 0)

    def supported_card_resource(self, instance_id: int) -> CardResource | None:
        played = self.get_played(instance_id)
        return played.card.supported_card_resource() if played else None

    def effects_of_type(self, effect_type: EffectType) -> list[ActiveEffect]:
        return [e for e in self.effects if e.effect.effect_type == effect_type]

    @property
    def steel_value(self) -> int:
        return BASE_STEEL_VALUE + self._metal_bonus()

    @property
    def titanium_value(self) -> int:
        return BASE_TITANIUM_VALUE + self._metal_bonus()

    def _metal_bonus(self) -> int:
        return sum(e.effect.count for e in self.effects_of_type(EffectType.INCREASED_METALS_VALUE))

    def protected_card_resources(self, instance_id: int) -> set[CardResource]:
        """Card resource kinds that other players may not remove from a card."""
        protected = set()
        for active in self.effects:
            effect = active.effect
            if effect.effect_type == EffectType.CANNOT_REMOVE_ANY_CARD_RESOURCES:
                protected.update(effect.card_resources)
            elif (
                effect.effect_type == EffectType.CANNOT_REMOVE_THIS_CARD_RESOURCE
                and active.source == instance_id
            ):
                protected.add(effect.card_resource)
        return protected

    # =========================================================================
    # Tags
    # =========================================================================

    def active_tag_count(self, tag: CardTag) -> int:
        """Tags on non-event cards in play."""
        if tag == CardTag.EVENT:
            raise ValueError("Event tags are not counted as active tags; use event_count()")
        return sum(
            played.card.tags.count(tag)
            for played in self.played_cards
            if not played.card.is_event
        )

    def active_tag_count_for_action(self, tag: CardTag) -> int:
        """Like active_tag_count(), with wild tags matching anything."""
        count = self.active_tag_count(tag)
        if tag != CardTag.WILD:
            count += self.active_tag_count(CardTag.WILD)
        return count

    def event_count(self) -> int:
        return sum(1 for played in self.played_cards if played.card.is_event)

    # =========================================================================
    # Paying
    # =========================================================================

    def can_purchase(self, count: int) -> bool:
        return self.resource(Resource.MEGACREDITS) >= CARD_PRICE * count

    def purchase_cards(self, cards: Iterable[Card]) -> bool:
        """Buy cards into hand at the fixed price. False (no change) if unaffordable."""
        cards = list(cards)
        price = CARD_PRICE * len(cards)
        if not self.can_purchase(len(cards)):
            return False
        self.resources[Resource.MEGACREDITS] -= price
        self.hand.extend(cards)
        return True

    def card_discount(self, card: Card) -> int:
        discount = 0
        for effect in [e.effect for e in self.effects] + self.next_card_this_generation_effects:
            if effect.effect_type == EffectType.ANY_CARD_DISCOUNT:
                discount += effect.count
            elif effect.effect_type == EffectType.CARD_DISCOUNT_FOR_TAG and card.has_tag(effect.tag):
                discount += effect.count
        return discount

    def effective_cost(self, card: Card) -> PaymentCost:
        """The printed cost minus every applicable discount."""
        return card.cost.discounted(self.card_discount(card))

    def payment_for(self, cost: PaymentCost) -> dict[Resource, int] | None:
        """
        A deterministic way to pay `cost`, or None if it can't be paid.

        Metals are spent first (titanium before steel) without overpaying,
        megacredits cover the rest. If megacredits fall short, one more
        metal unit may overpay to close the gap.
        """
        direct = DIRECT_COST_RESOURCES.get(cost.currency)
        if direct is not None:
            if self.resource(direct) < cost.amount:
                return None
            return {direct: cost.amount} if cost.amount else {}

        metals = []
        if cost.accepts_titanium:
            metals.append((Resource.TITANIUM, self.titanium_value))
        if cost.accepts_steel:
            metals.append((Resource.STEEL, self.steel_value))

        payment: dict[Resource, int] = {}
        remaining = cost.amount
        for metal, value in metals:
            used = min(self.resource(metal), remaining // value)
            if used:
                payment[metal] = used
                remaining -= used * value

        if self.resource(Resource.MEGACREDITS) < remaining:
            for metal, value in metals:
                if self.resource(metal) > payment.get(metal, 0):
                    payment[metal] = payment.get(metal, 0) + 1
                    remaining = max(0, remaining - value)
                    break
            else:
                return None
            if self.resource(Resource.MEGACREDITS) < remaining:
                return None

        if remaining:
            payment[Resource.MEGACREDITS] = remaining
        return payment

    def can_afford(self, cost: PaymentCost) -> bool:
        return self.payment_for(cost) is not None

    # =========================================================================
    # Requirements
    # =========================================================================

    def unmet_requirements(self, board: MarsBoard, card: Card) -> list[str]:
        """Human-readable reasons why `card` can't be played right now."""
        reasons = []
        for requirement in card.requirements:
            check, describe = _REQUIREMENT_CHECKS[requirement.requirement_type]
            if not check(self, board, requirement):
                reasons.append(describe(requirement))
        cost = self.effective_cost(card)
        if not self.can_afford(cost):
            reasons.append(f"cannot pay {cost.amount} ({cost.currency.value})")
        return reasons

    def meets_requirements(self, board: MarsBoard, card: Card) -> bool:
        return all(
            _REQUIREMENT_CHECKS[r.requirement_type][0](self, board, r)
            for r in card.requirements
        )

    def can_play_card(self, board: MarsBoard, card: Card) -> PaymentCost | None:
        """The cost to pay if every requirement holds and it is affordable, else None."""
        if not self.meets_requirements(board, card):
            return None
        cost = self.effective_cost(card)
        if not self.can_afford(cost):
            return None
        return cost

    # =========================================================================
    # Scoring
    # =========================================================================

    def card_victory_points(self, board: MarsBoard, played: PlayedCard) -> int:
        points = played.card.points
        if points is None:
            return 0
        if points.vp_type == VictoryPointType.IMMEDIATE:
            return points.points
        if points.vp_type == VictoryPointType.PER_CITY:
            return points.points * board.city_count(owner=self.player_id)
        if points.vp_type == VictoryPointType.PER_N_CITIES:
            return board.city_count() // points.per
        if points.vp_type == VictoryPointType.PER_TAG:
            return points.points * (self.active_tag_count(points.tag) // points.per)
        count = self.card_resource_count(played.instance_id, points.card_resource)
        if points.vp_type == VictoryPointType.PER_CARD_RESOURCE:
            return points.points * (count // points.per)
        if points.vp_type == VictoryPointType.FIXED_IF_ANY_CARD_RESOURCE:
            return points.points if count > 0 else 0
        raise InvariantViolation(f"Unknown victory point formula {points.vp_type}")

    def tile_victory_points(self, board: MarsBoard) -> int:
        total = len(board.greeneries_owned_by(self.player_id))
        for location, city_kind in board.cities_owned_by(self.player_id):
            if city_kind == CityKind.CAPITAL:
                total += board.count_adjacent_oceans(location)
            total += board.count_adjacent_greeneries(location)
        for coordinates, tile in board.special_tiles_owned_by(self.player_id):
            if tile == SpecialTile.COMMERCIAL_DISTRICT:
                total += board.count_adjacent_cities(TileLocation(coordinates=coordinates))
        return total

    def get_total_victory_points(self, board: MarsBoard) -> int:
        """Terraform rating + card formulas + greeneries + city adjacency."""
        return (
            self.terraform_rating
            + sum(self.card_victory_points(board, played) for played in self.played_cards)
            + self.tile_victory_points(board)
        )

    # =========================================================================
    # Generation
    # =========================================================================

    def advance_generation(self) -> None:
        """Energy becomes heat, TR pays out, production is applied, taps clear."""
        balances = {resource: self.resource(resource) for resource in Resource}
        balances[Resource.HEAT] += balances[Resource.ENERGY]
        balances[Resource.ENERGY] = 0
        balances[Resource.MEGACREDITS] += self.terraform_rating
        for resource in Resource:
            balances[resource] += self.production_of(resource)
            if balances[resource] < 0:
                raise InvariantViolation(
                    f"Player {self.player_id} would end with {balances[resource]} {resource.value}"
                )
        self.resources.update(balances)
        self.tapped_active_cards.clear()
        self.next_card_this_generation_effects.clear()

    def production_floor(self, resource: Resource) -> int:
        if resource == Resource.MEGACREDITS:
            return -self.terraform_rating
        return 0

    def can_reduce_production(self, resource: Resource, amount: int) -> bool:
        return self.production_of(resource) - amount >= self.production_floor(resource)


# ============================================================================
# Requirement checks: (predicate, description)
# ============================================================================

def _describe(template: str) -> Callable[[CardRequirement], str]:
    def describe(requirement: CardRequirement) -> str:
        return template.format(
            value=requirement.value,
            tag=requirement.tag.value if requirement.tag else "",
            resource=requirement.resource.value if requirement.resource else "",
        )
    return describe


_REQUIREMENT_CHECKS = {
    RequirementType.MAX_OXYGEN: (
        lambda p, b, r: b.oxygen <= r.value,
        _describe("oxygen must be at most {value}%"),
    ),
    RequirementType.MIN_OXYGEN: (
        lambda p, b, r: b.oxygen >= r.value,
        _describe("oxygen must be at least {value}%"),
    ),
    RequirementType.MAX_TEMPERATURE: (
        lambda p, b, r: b.temperature <= r.value,
        _describe("temperature must be at most {value}C"),
    ),
    RequirementType.MIN_TEMPERATURE: (
        lambda p, b, r: b.temperature >= r.value,
        _describe("temperature must be at least {value}C"),
    ),
    RequirementType.MAX_OCEANS: (
        lambda p, b, r: b.ocean_count <= r.value,
        _describe("at most {value} oceans may be placed"),
    ),
    RequirementType.MIN_OCEANS: (
        lambda p, b, r: b.ocean_count >= r.value,
        _describe("at least {value} oceans must be placed"),
    ),
    RequirementType.MIN_TAGS: (
        lambda p, b, r: p.active_tag_count(r.tag) >= r.value,
        _describe("requires {value} {tag} tags"),
    ),
    RequirementType.MIN_CITIES: (
        lambda p, b, r: b.city_count() >= r.value,
        _describe("requires {value} cities in play"),
    ),
    RequirementType.MIN_OWNED_GREENERIES: (
        lambda p, b, r: len(b.greeneries_owned_by(p.player_id)) >= r.value,
        _describe("requires {value} owned greeneries"),
    ),
    RequirementType.MIN_PRODUCTION: (
        lambda p, b, r: p.production_of(r.resource) >= r.value,
        _describe("requires {value} {resource} production"),
    ),
}


# ============================================================================
# Builder
# ============================================================================

class PlayerStateBuilder:
    """
    Builds a starting PlayerState.

    Played cards get fresh instance ids and contribute their passive
    effects, as if they had been played.
    """

    def __init__(self, player_id: PlayerId):
        self._player = PlayerState(player_id=player_id)

    def with_resource(self, resource: Resource, amount: int) -> PlayerStateBuilder:
        self._player.resources[resource] = amount
        return self

    def with_resources(self, resources: dict[Resource, int]) -> PlayerStateBuilder:
        for resource, amount in resources.items():
            self.with_resource(resource, amount)
        return self

    def with_megacredits(self, amount: int) -> PlayerStateBuilder:
        return self.with_resource(Resource.MEGACREDITS, amount)

    def with_production(self, production: dict[Resource, int]) -> PlayerStateBuilder:
        self._player.production.update(production)
        return self

    def with_hand(self, cards: Iterable[Card]) -> PlayerStateBuilder:
        self._player.hand.extend(cards)
        return self

    def with_played_cards(self, cards: Iterable[Card]) -> PlayerStateBuilder:
        player = self._player
        for card in cards:
            instance_id = player.next_instance_id
            player.next_instance_id += 1
            player.played_cards.append(PlayedCard(instance_id, card))
            player.effects.extend(ActiveEffect(instance_id, effect) for effect in card.effects)
        return self

    def with_card_resource(self, card_name: str, card_resource: CardResource, amount: int) -> PlayerStateBuilder:
        played = self._player.find_played(card_name)
        if played is None:
            raise ValueError(f"'{card_name}' is not in play")
        self._player.card_resources[(played.instance_id, card_resource)] = amount
        return self

    def with_terraform_rating(self, rating: int) -> PlayerStateBuilder:
        self._player.terraform_rating = rating
        return self

    def solo(self) -> PlayerStateBuilder:
        return self.with_terraform_rating(SOLO_STARTING_TERRAFORM_RATING)

    def build(self) -> PlayerState:
        for resource, amount in self._player.resources.items():
            if amount < 0:
                raise ValueError(f"Negative starting {resource.value}: {amount}")
        return self._player.clone()
