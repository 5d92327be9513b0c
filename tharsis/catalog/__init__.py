"""
Card catalog: card definitions, their effect vocabulary, and built-in catalogs.
"""

from .resource import CardResource, CostCurrency, PaymentCost, Resource
from .card import (
    Card,
    CardAction,
    CardActionType,
    CardDefinitionError,
    CardEffect,
    CardKind,
    CardRequirement,
    CardTag,
    CityKind,
    EffectType,
    ImmediateImpact,
    ImpactType,
    LocationKind,
    RequirementType,
    SpecialTile,
    VictoryPointType,
    VictoryPointValue,
)
from .catalog import CardCatalog, UnknownCardError
from .validation import CatalogValidationError, ValidationResult, validate_catalog
from .base import base_game
from .corporate import corporate_era

BUILTIN_CATALOGS = {
    "base": base_game,
    "corporate": corporate_era,
}

__all__ = [
    "Resource",
    "CardResource",
    "CostCurrency",
    "PaymentCost",
    "Card",
    "CardAction",
    "CardActionType",
    "CardDefinitionError",
    "CardEffect",
    "CardKind",
    "CardRequirement",
    "CardTag",
    "CityKind",
    "EffectType",
    "ImmediateImpact",
    "ImpactType",
    "LocationKind",
    "RequirementType",
    "SpecialTile",
    "VictoryPointType",
    "VictoryPointValue",
    "CardCatalog",
    "UnknownCardError",
    "CatalogValidationError",
    "ValidationResult",
    "validate_catalog",
    "base_game",
    "corporate_era",
    "BUILTIN_CATALOGS",
]
