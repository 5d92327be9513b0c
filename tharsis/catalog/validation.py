"""
Catalog Validation - Consistency checks over card definitions.

Card construction already enforces the structural invariants
(see Card.__post_init__). This module checks what a single card
cannot see on its own, or what is merely suspicious:
1. Names are unique within a catalog
2. Cost class agrees with the Building / Space tags
3. Each card refers to at most one kind of card resource
4. Impact parameters are complete (resource given, per > 0, ...)
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable

from .card import (
    Card, CardActionType, CardTag, EffectType, ImmediateImpact, ImpactType,
    RequirementType, VictoryPointType,
)
from .resource import CostCurrency


class CatalogValidationError(ValueError):
    """Raised when catalog validation fails."""

    def __init__(self, errors: list[str]):
        self.errors = errors
        super().__init__(f"Catalog validation failed with {len(errors)} error(s): {errors[:3]}")


@dataclass
class ValidationResult:
    """Result of validation, with errors and warnings."""
    valid: bool
    errors: list[str]
    warnings: list[str]


# Impacts that need a standard resource
_RESOURCE_IMPACTS = {
    ImpactType.GAIN_RESOURCE,
    ImpactType.GAIN_RESOURCE_PER_CITY,
    ImpactType.GAIN_RESOURCE_PER_CITY_ON_MARS,
    ImpactType.GAIN_PRODUCTION,
    ImpactType.GAIN_PRODUCTION_PER_CITY,
    ImpactType.GAIN_PRODUCTION_PER_CITY_ON_MARS,
    ImpactType.GAIN_PRODUCTION_PER_OWN_TAG,
    ImpactType.GAIN_PRODUCTION_PER_OPPONENT_TAG,
    ImpactType.GAIN_PRODUCTION_PER_ANY_TAG,
    ImpactType.REDUCE_ANY_PRODUCTION,
}

# Impacts that need a card resource
_CARD_RESOURCE_IMPACTS = {
    ImpactType.ADD_RESOURCE_TO_SAME_CARD,
    ImpactType.ADD_RESOURCE_TO_ANOTHER_CARD,
    ImpactType.ADD_RESOURCE_TO_ANY_CARD,
    ImpactType.REMOVE_RESOURCE_FROM_ANY_CARD,
}

# Impacts that need a tag
_TAG_IMPACTS = {
    ImpactType.GAIN_TERRAFORM_RATING_PER_OWN_TAG,
    ImpactType.GAIN_PRODUCTION_PER_OWN_TAG,
    ImpactType.GAIN_PRODUCTION_PER_OPPONENT_TAG,
    ImpactType.GAIN_PRODUCTION_PER_ANY_TAG,
    ImpactType.COPY_PRODUCTION_OF_CARD,
}


def validate_catalog(cards: Iterable[Card]) -> ValidationResult:
    """
    Validate a list of cards.

    Returns ValidationResult with errors and warnings.
    """
    errors: list[str] = []
    warnings: list[str] = []

    seen: set[str] = set()
    card_list = list(cards)
    for card in card_list:
        if card.name in seen:
            errors.append(f"Duplicate card name '{card.name}'")
        seen.add(card.name)

        errors.extend(f"Card '{card.name}': {e}" for e in validate_card(card))

    if not card_list:
        warnings.append("Catalog has no cards")

    return ValidationResult(
        valid=len(errors) == 0,
        errors=errors,
        warnings=warnings,
    )


def validate_card(card: Card) -> list[str]:
    """Validate a single card definition beyond its construction invariants."""
    errors = []
    if not card.name:
        errors.append("empty name")

    errors.extend(_validate_cost_class(card))

    # One kind of card resource per card
    kinds = {i.card_resource for i in card.all_impacts() if i.impact_type == ImpactType.ADD_RESOURCE_TO_SAME_CARD}
    kinds |= {
        a.card_resource for a in card.actions
        if a.action_type == CardActionType.SPEND_SAME_CARD_RESOURCE
    }
    if card.points and card.points.card_resource is not None:
        kinds.add(card.points.card_resource)
    if len(kinds) > 1:
        errors.append(f"holds more than one card resource kind: {sorted(k.value for k in kinds)}")

    for impact in card.all_impacts():
        errors.extend(_validate_impact(impact))

    for action in card.actions:
        if action.action_type in (CardActionType.SPEND_RESOURCE, CardActionType.REVEAL_CARD_FOR_TAG):
            if action.cost is None:
                errors.append(f"action {action.action_type.value} has no cost")
        if action.action_type == CardActionType.SPEND_PRODUCTION and action.resource is None:
            errors.append("spend-production action has no resource")
        if action.action_type == CardActionType.REVEAL_CARD_FOR_TAG and action.tag is None:
            errors.append("reveal action has no tag")
        if not action.impacts:
            errors.append(f"action {action.action_type.value} has no impacts")

    for effect in card.effects:
        if effect.effect_type.value.endswith("_impact") and not effect.triggers:
            errors.append(f"effect {effect.effect_type.value} has no triggers")
        if effect.effect_type == EffectType.CARD_DISCOUNT_FOR_TAG and effect.tag is None:
            errors.append("tag discount has no tag")

    for requirement in card.requirements:
        if requirement.requirement_type == RequirementType.MIN_TAGS and requirement.tag is None:
            errors.append("tag requirement has no tag")
        if requirement.requirement_type == RequirementType.MIN_PRODUCTION and requirement.resource is None:
            errors.append("production requirement has no resource")

    if card.points is not None:
        if card.points.per <= 0:
            errors.append("victory point divisor must be positive")
        if card.points.vp_type == VictoryPointType.PER_TAG and card.points.tag is None:
            errors.append("per-tag victory points have no tag")

    return errors


def _validate_cost_class(card: Card) -> list[str]:
    building = card.has_tag(CardTag.BUILDING)
    space = card.has_tag(CardTag.SPACE)
    currency = card.cost.currency
    expected = CostCurrency.MEGACREDITS
    if building and space:
        expected = CostCurrency.SPACE_OR_BUILDING
    elif building:
        expected = CostCurrency.BUILDING
    elif space:
        expected = CostCurrency.SPACE
    if currency != expected:
        return [f"cost class {currency.value} does not match tags (expected {expected.value})"]
    return []


def _validate_impact(impact: ImmediateImpact) -> list[str]:
    errors = []
    kind = impact.impact_type.value
    if impact.impact_type in _RESOURCE_IMPACTS and impact.resource is None:
        errors.append(f"{kind} has no resource")
    if impact.impact_type in _CARD_RESOURCE_IMPACTS and impact.card_resource is None:
        errors.append(f"{kind} has no card resource")
    if impact.impact_type in _TAG_IMPACTS and impact.tag is None:
        errors.append(f"{kind} has no tag")
    if impact.per <= 0:
        errors.append(f"{kind} has non-positive divisor {impact.per}")
    if impact.impact_type == ImpactType.PLACE_SPECIAL_TILE and impact.special_tile is None:
        errors.append(f"{kind} has no tile")
    if impact.impact_type == ImpactType.ONE_OF and len(impact.options) < 2:
        errors.append("one_of needs at least two options")
    return errors


def ensure_valid(cards: Iterable[Card]) -> None:
    """Raise CatalogValidationError if the cards do not validate."""
    result = validate_catalog(cards)
    if not result.valid:
        raise CatalogValidationError(result.errors)
