"""
Card Model - Static card definitions and their effect vocabulary.

A Card is an immutable value. Everything a card can do is described
with a small set of closed variant types:
- ImmediateImpact: applied once, when the card is played (or an action used)
- CardAction: repeatable once per generation (Active cards only)
- CardEffect: passive, always-on while the card is in play
- CardRequirement: global/private conditions for playing the card
- VictoryPointValue: end-of-game scoring formula

Each variant type is a single frozen dataclass carrying an enum
discriminator plus typed optional parameters. The interpreter dispatches
on the discriminator (see engine_core.effect_resolver).
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator

from .resource import CardResource, PaymentCost, Resource


class CardDefinitionError(ValueError):
    """Raised when a card definition breaks a structural invariant."""


class CardTag(str, Enum):
    BUILDING = "building"
    SPACE = "space"
    POWER = "power"
    SCIENCE = "science"
    JOVIAN = "jovian"
    EARTH = "earth"
    PLANT = "plant"
    MICROBE = "microbe"
    ANIMAL = "animal"
    CITY = "city"
    WILD = "wild"
    EVENT = "event"


class CardKind(str, Enum):
    """Card colors: blue (active), green (automatic), red (event)."""
    ACTIVE = "active"
    AUTOMATIC = "automatic"
    EVENT = "event"


class LocationKind(str, Enum):
    """Where an ocean or greenery is allowed to go, when not the default."""
    REGULAR_LAND = "regular_land"
    RESERVED_FOR_OCEAN = "reserved_for_ocean"


class CityKind(str, Enum):
    REGULAR = "regular"
    CAPITAL = "capital"  # scores 1 VP per adjacent ocean
    NOCTIS_CITY = "noctis_city"
    PHOBOS_SPACE_HAVEN = "phobos_space_haven"
    GANYMEDE_COLONY = "ganymede_colony"
    LAVA_TUBE_SETTLEMENT = "lava_tube_settlement"
    URBANIZED_AREA = "urbanized_area"  # between two cities
    RESEARCH_OUTPOST = "research_outpost"  # next to no other tile


class SpecialTile(str, Enum):
    NUCLEAR_ZONE = "nuclear_zone"
    RESTRICTED_AREA = "restricted_area"
    LAVA_FLOWS = "lava_flows"
    COMMERCIAL_DISTRICT = "commercial_district"  # scores 1 VP per adjacent city
    NATURAL_PRESERVE = "natural_preserve"
    INDUSTRIAL_CENTER = "industrial_center"
    MOHOLE_AREA = "mohole_area"
    MINING_AREA = "mining_area"
    MINING_RIGHTS = "mining_rights"
    ECOLOGICAL_ZONE = "ecological_zone"


# ============================================================================
# Immediate impacts
# ============================================================================

class ImpactType(str, Enum):
    """Types of immediate impacts."""
    # Global parameters
    RAISE_TEMPERATURE = "raise_temperature"
    RAISE_OXYGEN = "raise_oxygen"
    RAISE_TERRAFORM_RATING = "raise_terraform_rating"
    GAIN_TERRAFORM_RATING_PER_OWN_TAG = "gain_terraform_rating_per_own_tag"

    # Tile placement
    PLACE_OCEAN = "place_ocean"
    PLACE_GREENERY = "place_greenery"
    PLACE_CITY = "place_city"
    PLACE_SPECIAL_TILE = "place_special_tile"

    # Cards and card resources
    DRAW_CARD = "draw_card"
    ADD_RESOURCE_TO_SAME_CARD = "add_resource_to_same_card"
    ADD_RESOURCE_TO_ANOTHER_CARD = "add_resource_to_another_card"
    ADD_RESOURCE_TO_ANY_CARD = "add_resource_to_any_card"
    REMOVE_RESOURCE_FROM_ANY_CARD = "remove_resource_from_any_card"

    # Resources
    GAIN_RESOURCE = "gain_resource"
    GAIN_RESOURCE_PER_CITY = "gain_resource_per_city"
    GAIN_RESOURCE_PER_CITY_ON_MARS = "gain_resource_per_city_on_mars"
    DESTROY_OWN_PLANTS = "destroy_own_plants"
    DESTROY_ANY_PLANTS = "destroy_any_plants"

    # Production
    GAIN_PRODUCTION = "gain_production"
    GAIN_PRODUCTION_PER_CITY = "gain_production_per_city"
    GAIN_PRODUCTION_PER_CITY_ON_MARS = "gain_production_per_city_on_mars"
    GAIN_PRODUCTION_PER_OWN_TAG = "gain_production_per_own_tag"
    GAIN_PRODUCTION_PER_OPPONENT_TAG = "gain_production_per_opponent_tag"
    GAIN_PRODUCTION_PER_ANY_TAG = "gain_production_per_any_tag"
    REDUCE_ANY_PRODUCTION = "reduce_any_production"
    COPY_PRODUCTION_OF_CARD = "copy_production_of_card"

    # Misc
    DISCOUNT_NEXT_CARD = "discount_next_card"
    ONE_OF = "one_of"


@dataclass(frozen=True)
class ImmediateImpact:
    """
    A one-shot change caused by playing a card or using an action.

    Parameters not used by an impact type stay at their defaults.
    Per-tag impacts read as: gain `count` per `per` tags of `tag`.
    """
    impact_type: ImpactType
    count: int = 0
    resource: Resource | None = None
    card_resource: CardResource | None = None
    tag: CardTag | None = None
    per: int = 1
    city_kind: CityKind | None = None
    location_kind: LocationKind | None = None
    special_tile: SpecialTile | None = None
    options: tuple[ImmediateImpact, ...] = ()

    def matches(self, trigger: ImmediateImpact) -> bool:
        """
        Check if this impact satisfies a trigger pattern.

        A trigger matches on impact type; any parameter the trigger
        leaves unset acts as a wildcard.
        """
        if self.impact_type != trigger.impact_type:
            return False
        for attr in ("resource", "card_resource", "tag", "city_kind", "location_kind", "special_tile"):
            wanted = getattr(trigger, attr)
            if wanted is not None and getattr(self, attr) != wanted:
                return False
        return True

    def walk(self) -> Iterator[ImmediateImpact]:
        """Yield this impact and every nested option."""
        yield self
        for option in self.options:
            yield from option.walk()


def raise_temperature() -> ImmediateImpact:
    return ImmediateImpact(ImpactType.RAISE_TEMPERATURE)


def raise_oxygen() -> ImmediateImpact:
    return ImmediateImpact(ImpactType.RAISE_OXYGEN)


def raise_terraform_rating(count: int = 1) -> ImmediateImpact:
    return ImmediateImpact(ImpactType.RAISE_TERRAFORM_RATING, count=count)


def gain_terraform_rating_per_own_tag(count: int, tag: CardTag, per: int = 1) -> ImmediateImpact:
    return ImmediateImpact(
        ImpactType.GAIN_TERRAFORM_RATING_PER_OWN_TAG, count=count, tag=tag, per=per,
    )


def place_ocean(location_kind: LocationKind | None = None) -> ImmediateImpact:
    """Place an ocean; None means the usual reserved ocean spaces."""
    return ImmediateImpact(ImpactType.PLACE_OCEAN, location_kind=location_kind)


def place_greenery(location_kind: LocationKind | None = None) -> ImmediateImpact:
    """Place a greenery; None means any land space."""
    return ImmediateImpact(ImpactType.PLACE_GREENERY, location_kind=location_kind)


def place_city(city_kind: CityKind | None = CityKind.REGULAR) -> ImmediateImpact:
    """Place a city. city_kind=None is only meaningful as a trigger pattern."""
    return ImmediateImpact(ImpactType.PLACE_CITY, city_kind=city_kind)


def place_special_tile(tile: SpecialTile) -> ImmediateImpact:
    return ImmediateImpact(ImpactType.PLACE_SPECIAL_TILE, special_tile=tile)


def draw_card(count: int = 1) -> ImmediateImpact:
    return ImmediateImpact(ImpactType.DRAW_CARD, count=count)


def add_resource_to_same_card(card_resource: CardResource, count: int = 1) -> ImmediateImpact:
    return ImmediateImpact(
        ImpactType.ADD_RESOURCE_TO_SAME_CARD, card_resource=card_resource, count=count,
    )


def add_resource_to_another_card(card_resource: CardResource, count: int = 1) -> ImmediateImpact:
    return ImmediateImpact(
        ImpactType.ADD_RESOURCE_TO_ANOTHER_CARD, card_resource=card_resource, count=count,
    )


def add_resource_to_any_card(card_resource: CardResource, count: int = 1) -> ImmediateImpact:
    return ImmediateImpact(
        ImpactType.ADD_RESOURCE_TO_ANY_CARD, card_resource=card_resource, count=count,
    )


def remove_resource_from_any_card(card_resource: CardResource, count: int = 1) -> ImmediateImpact:
    return ImmediateImpact(
        ImpactType.REMOVE_RESOURCE_FROM_ANY_CARD, card_resource=card_resource, count=count,
    )


def gain_resource(resource: Resource, count: int) -> ImmediateImpact:
    return ImmediateImpact(ImpactType.GAIN_RESOURCE, resource=resource, count=count)


def gain_resource_per_city(resource: Resource, count: int, on_mars_only: bool = False) -> ImmediateImpact:
    impact_type = (
        ImpactType.GAIN_RESOURCE_PER_CITY_ON_MARS if on_mars_only
        else ImpactType.GAIN_RESOURCE_PER_CITY
    )
    return ImmediateImpact(impact_type, resource=resource, count=count)


def gain_production(resource: Resource, count: int) -> ImmediateImpact:
    return ImmediateImpact(ImpactType.GAIN_PRODUCTION, resource=resource, count=count)


def gain_production_per_city(resource: Resource, count: int, on_mars_only: bool = False) -> ImmediateImpact:
    impact_type = (
        ImpactType.GAIN_PRODUCTION_PER_CITY_ON_MARS if on_mars_only
        else ImpactType.GAIN_PRODUCTION_PER_CITY
    )
    return ImmediateImpact(impact_type, resource=resource, count=count)


def gain_production_per_own_tag(tag: CardTag, per: int, resource: Resource, count: int) -> ImmediateImpact:
    return ImmediateImpact(
        ImpactType.GAIN_PRODUCTION_PER_OWN_TAG, tag=tag, per=per, resource=resource, count=count,
    )


def gain_production_per_opponent_tag(tag: CardTag, per: int, resource: Resource, count: int) -> ImmediateImpact:
    return ImmediateImpact(
        ImpactType.GAIN_PRODUCTION_PER_OPPONENT_TAG, tag=tag, per=per, resource=resource, count=count,
    )


def gain_production_per_any_tag(tag: CardTag, per: int, resource: Resource, count: int) -> ImmediateImpact:
    return ImmediateImpact(
        ImpactType.GAIN_PRODUCTION_PER_ANY_TAG, tag=tag, per=per, resource=resource, count=count,
    )


def reduce_any_production(resource: Resource, count: int) -> ImmediateImpact:
    return ImmediateImpact(ImpactType.REDUCE_ANY_PRODUCTION, resource=resource, count=count)


def destroy_own_plants(count: int) -> ImmediateImpact:
    return ImmediateImpact(ImpactType.DESTROY_OWN_PLANTS, count=count)


def destroy_any_plants(count: int) -> ImmediateImpact:
    return ImmediateImpact(ImpactType.DESTROY_ANY_PLANTS, count=count)


def copy_production_of_card(tag: CardTag) -> ImmediateImpact:
    return ImmediateImpact(ImpactType.COPY_PRODUCTION_OF_CARD, tag=tag)


def discount_next_card(count: int) -> ImmediateImpact:
    return ImmediateImpact(ImpactType.DISCOUNT_NEXT_CARD, count=count)


def one_of(*options: ImmediateImpact) -> ImmediateImpact:
    return ImmediateImpact(ImpactType.ONE_OF, options=tuple(options))


# ============================================================================
# Actions
# ============================================================================

class CardActionType(str, Enum):
    CAUSE_FREE_IMPACT = "cause_free_impact"
    SPEND_RESOURCE = "spend_resource"
    SPEND_SAME_CARD_RESOURCE = "spend_same_card_resource"
    SPEND_PRODUCTION = "spend_production"
    # pay, then reveal and discard the top card of the deck;
    # the impacts apply only if the revealed card has `tag`
    REVEAL_CARD_FOR_TAG = "reveal_card_for_tag"


@dataclass(frozen=True)
class CardAction:
    """A repeatable once-per-generation action printed on an Active card."""
    action_type: CardActionType
    impacts: tuple[ImmediateImpact, ...] = ()
    cost: PaymentCost | None = None
    resource: Resource | None = None
    card_resource: CardResource | None = None
    count: int = 0
    tag: CardTag | None = None


def free_action(*impacts: ImmediateImpact) -> CardAction:
    return CardAction(CardActionType.CAUSE_FREE_IMPACT, impacts=tuple(impacts))


def spend_resource_action(cost: PaymentCost, *impacts: ImmediateImpact) -> CardAction:
    return CardAction(CardActionType.SPEND_RESOURCE, impacts=tuple(impacts), cost=cost)


def spend_card_resource_action(
    card_resource: CardResource, count: int, *impacts: ImmediateImpact
) -> CardAction:
    return CardAction(
        CardActionType.SPEND_SAME_CARD_RESOURCE,
        impacts=tuple(impacts),
        card_resource=card_resource,
        count=count,
    )


def spend_production_action(resource: Resource, count: int, *impacts: ImmediateImpact) -> CardAction:
    return CardAction(
        CardActionType.SPEND_PRODUCTION, impacts=tuple(impacts), resource=resource, count=count,
    )


def reveal_card_action(cost: PaymentCost, tag: CardTag, *impacts: ImmediateImpact) -> CardAction:
    return CardAction(
        CardActionType.REVEAL_CARD_FOR_TAG, impacts=tuple(impacts), cost=cost, tag=tag,
    )


# ============================================================================
# Passive effects
# ============================================================================

class EffectType(str, Enum):
    ANY_CARD_DISCOUNT = "any_card_discount"
    CARD_DISCOUNT_FOR_TAG = "card_discount_for_tag"
    # megacredits back after putting a tag into play
    REBATE_AFTER_PLAYING_CARD_TAG = "rebate_after_playing_card_tag"
    INCREASED_METALS_VALUE = "increased_metals_value"
    CANNOT_REMOVE_THIS_CARD_RESOURCE = "cannot_remove_this_card_resource"
    CANNOT_REMOVE_ANY_CARD_RESOURCES = "cannot_remove_any_card_resources"
    # gain (card) resource / production when own / anyone's move has a matching impact
    GAIN_CARD_RESOURCE_FOR_OWN_IMPACT = "gain_card_resource_for_own_impact"
    GAIN_RESOURCE_FOR_OWN_IMPACT = "gain_resource_for_own_impact"
    GAIN_CARD_RESOURCE_FOR_ANY_IMPACT = "gain_card_resource_for_any_impact"
    GAIN_RESOURCE_FOR_ANY_IMPACT = "gain_resource_for_any_impact"
    GAIN_PRODUCTION_FOR_OWN_IMPACT = "gain_production_for_own_impact"
    GAIN_PRODUCTION_FOR_ANY_IMPACT = "gain_production_for_any_impact"
    GAIN_PRODUCTION_FOR_ANY_TAG_PLAYED = "gain_production_for_any_tag_played"


@dataclass(frozen=True)
class CardEffect:
    """An always-on effect contributed by a played card."""
    effect_type: EffectType
    count: int = 0
    tag: CardTag | None = None
    resource: Resource | None = None
    card_resource: CardResource | None = None
    card_resources: tuple[CardResource, ...] = ()
    triggers: tuple[ImmediateImpact, ...] = ()

    @property
    def is_own_trigger(self) -> bool:
        return self.effect_type in (
            EffectType.GAIN_CARD_RESOURCE_FOR_OWN_IMPACT,
            EffectType.GAIN_RESOURCE_FOR_OWN_IMPACT,
            EffectType.GAIN_PRODUCTION_FOR_OWN_IMPACT,
        )

    @property
    def is_any_trigger(self) -> bool:
        return self.effect_type in (
            EffectType.GAIN_CARD_RESOURCE_FOR_ANY_IMPACT,
            EffectType.GAIN_RESOURCE_FOR_ANY_IMPACT,
            EffectType.GAIN_PRODUCTION_FOR_ANY_IMPACT,
        )


def any_card_discount(count: int) -> CardEffect:
    return CardEffect(EffectType.ANY_CARD_DISCOUNT, count=count)


def card_discount_for_tag(tag: CardTag, count: int) -> CardEffect:
    return CardEffect(EffectType.CARD_DISCOUNT_FOR_TAG, tag=tag, count=count)


def rebate_after_playing_tag(tag: CardTag, count: int) -> CardEffect:
    return CardEffect(EffectType.REBATE_AFTER_PLAYING_CARD_TAG, tag=tag, count=count)


def increased_metals_value(count: int) -> CardEffect:
    return CardEffect(EffectType.INCREASED_METALS_VALUE, count=count)


def cannot_remove_this_card_resource(card_resource: CardResource) -> CardEffect:
    return CardEffect(EffectType.CANNOT_REMOVE_THIS_CARD_RESOURCE, card_resource=card_resource)


def cannot_remove_any_card_resources(*card_resources: CardResource) -> CardEffect:
    return CardEffect(EffectType.CANNOT_REMOVE_ANY_CARD_RESOURCES, card_resources=tuple(card_resources))


def on_impact(
    effect_type: EffectType,
    count: int,
    *triggers: ImmediateImpact,
    resource: Resource | None = None,
    card_resource: CardResource | None = None,
) -> CardEffect:
    """Build one of the GAIN_*_FOR_*_IMPACT effects."""
    return CardEffect(
        effect_type,
        count=count,
        resource=resource,
        card_resource=card_resource,
        triggers=tuple(triggers),
    )


def gain_production_for_any_tag_played(resource: Resource, count: int, tag: CardTag) -> CardEffect:
    return CardEffect(
        EffectType.GAIN_PRODUCTION_FOR_ANY_TAG_PLAYED, resource=resource, count=count, tag=tag,
    )


# ============================================================================
# Requirements and scoring
# ============================================================================

class RequirementType(str, Enum):
    MAX_OXYGEN = "max_oxygen"
    MIN_OXYGEN = "min_oxygen"
    MAX_TEMPERATURE = "max_temperature"
    MIN_TEMPERATURE = "min_temperature"
    MAX_OCEANS = "max_oceans"
    MIN_OCEANS = "min_oceans"
    MIN_TAGS = "min_tags"
    MIN_CITIES = "min_cities"
    MIN_OWNED_GREENERIES = "min_owned_greeneries"
    MIN_PRODUCTION = "min_production"


@dataclass(frozen=True)
class CardRequirement:
    requirement_type: RequirementType
    value: int
    tag: CardTag | None = None
    resource: Resource | None = None

    @classmethod
    def max_oxygen(cls, value: int) -> CardRequirement:
        return cls(RequirementType.MAX_OXYGEN, value)

    @classmethod
    def min_oxygen(cls, value: int) -> CardRequirement:
        return cls(RequirementType.MIN_OXYGEN, value)

    @classmethod
    def max_temperature(cls, value: int) -> CardRequirement:
        return cls(RequirementType.MAX_TEMPERATURE, value)

    @classmethod
    def min_temperature(cls, value: int) -> CardRequirement:
        return cls(RequirementType.MIN_TEMPERATURE, value)

    @classmethod
    def max_oceans(cls, value: int) -> CardRequirement:
        return cls(RequirementType.MAX_OCEANS, value)

    @classmethod
    def min_oceans(cls, value: int) -> CardRequirement:
        return cls(RequirementType.MIN_OCEANS, value)

    @classmethod
    def min_tags(cls, tag: CardTag, value: int) -> CardRequirement:
        return cls(RequirementType.MIN_TAGS, value, tag=tag)

    @classmethod
    def min_cities(cls, value: int) -> CardRequirement:
        return cls(RequirementType.MIN_CITIES, value)

    @classmethod
    def min_owned_greeneries(cls, value: int) -> CardRequirement:
        return cls(RequirementType.MIN_OWNED_GREENERIES, value)

    @classmethod
    def min_production(cls, resource: Resource, value: int) -> CardRequirement:
        return cls(RequirementType.MIN_PRODUCTION, value, resource=resource)


class VictoryPointType(str, Enum):
    IMMEDIATE = "immediate"
    PER_CITY = "per_city"  # `points` per owned city
    PER_N_CITIES = "per_n_cities"  # 1 point per `per` cities in play
    PER_TAG = "per_tag"  # `points` per `per` tags of `tag`
    PER_CARD_RESOURCE = "per_card_resource"  # `points` per `per` resources on this card
    FIXED_IF_ANY_CARD_RESOURCE = "fixed_if_any_card_resource"


@dataclass(frozen=True)
class VictoryPointValue:
    vp_type: VictoryPointType
    points: int = 1
    per: int = 1
    tag: CardTag | None = None
    card_resource: CardResource | None = None

    @classmethod
    def immediate(cls, points: int) -> VictoryPointValue:
        return cls(VictoryPointType.IMMEDIATE, points=points)

    @classmethod
    def per_city(cls, points: int = 1) -> VictoryPointValue:
        return cls(VictoryPointType.PER_CITY, points=points)

    @classmethod
    def per_n_cities(cls, per: int) -> VictoryPointValue:
        return cls(VictoryPointType.PER_N_CITIES, per=per)

    @classmethod
    def per_tag(cls, points: int, per: int, tag: CardTag) -> VictoryPointValue:
        return cls(VictoryPointType.PER_TAG, points=points, per=per, tag=tag)

    @classmethod
    def per_card_resource(cls, points: int, per: int, card_resource: CardResource) -> VictoryPointValue:
        return cls(VictoryPointType.PER_CARD_RESOURCE, points=points, per=per, card_resource=card_resource)

    @classmethod
    def fixed_if_any_card_resource(cls, points: int, card_resource: CardResource) -> VictoryPointValue:
        return cls(VictoryPointType.FIXED_IF_ANY_CARD_RESOURCE, points=points, card_resource=card_resource)


# ============================================================================
# Card
# ============================================================================

@dataclass(frozen=True)
class Card:
    """
    A card definition.

    Identity is the name: names are unique within a catalog, so hashing
    by name keeps cards cheap to use as dict keys and set members.
    """
    name: str
    kind: CardKind
    tags: tuple[CardTag, ...]
    cost: PaymentCost
    requirements: tuple[CardRequirement, ...] = ()
    points: VictoryPointValue | None = None
    own_production: dict[Resource, int] = field(default_factory=dict)
    any_production: dict[Resource, int] = field(default_factory=dict)
    immediate_impacts: tuple[ImmediateImpact, ...] = ()
    actions: tuple[CardAction, ...] = ()
    effects: tuple[CardEffect, ...] = ()

    def __post_init__(self):
        for name in ("tags", "requirements", "immediate_impacts", "actions", "effects"):
            value = getattr(self, name)
            if not isinstance(value, tuple):
                object.__setattr__(self, name, tuple(value))

        # Either there are no actions, or the card is active
        if bool(self.actions) != (self.kind == CardKind.ACTIVE):
            raise CardDefinitionError(
                f"Card '{self.name}': actions must be present exactly when the card is active"
            )
        if self.kind == CardKind.EVENT:
            if self.effects:
                raise CardDefinitionError(f"Event card '{self.name}' has passive effects")
            if CardTag.EVENT not in self.tags:
                raise CardDefinitionError(f"Event card '{self.name}' lacks the event tag")
        if CardTag.CITY in self.tags and not self.places_city:
            raise CardDefinitionError(f"City card '{self.name}' does not place a city")

    def __hash__(self):
        return hash(self.name)

    @property
    def is_event(self) -> bool:
        return self.kind == CardKind.EVENT

    @property
    def places_city(self) -> bool:
        return any(
            impact.impact_type == ImpactType.PLACE_CITY
            for impact in self.all_impacts()
        )

    def has_tag(self, tag: CardTag) -> bool:
        return tag in self.tags

    def all_impacts(self) -> Iterator[ImmediateImpact]:
        """Every impact the card can cause, including action impacts and options."""
        for impact in self.immediate_impacts:
            yield from impact.walk()
        for action in self.actions:
            for impact in action.impacts:
                yield from impact.walk()

    def supported_card_resource(self) -> CardResource | None:
        """
        The card resource this card can hold, derived from its shape.

        A card holds resources if anything printed on it refers to
        resources on this same card.
        """
        for impact in self.all_impacts():
            if impact.impact_type == ImpactType.ADD_RESOURCE_TO_SAME_CARD:
                return impact.card_resource
        for action in self.actions:
            if action.action_type == CardActionType.SPEND_SAME_CARD_RESOURCE:
                return action.card_resource
        for effect in self.effects:
            if effect.effect_type in (
                EffectType.GAIN_CARD_RESOURCE_FOR_OWN_IMPACT,
                EffectType.GAIN_CARD_RESOURCE_FOR_ANY_IMPACT,
                EffectType.CANNOT_REMOVE_THIS_CARD_RESOURCE,
            ):
                return effect.card_resource
        if self.points and self.points.card_resource is not None:
            return self.points.card_resource
        return None
