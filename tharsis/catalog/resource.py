"""
Resources - The currencies of the game.

Two families:
- Standard resources held in a player's pool (megacredits, steel, ...)
- Card resources that sit on a specific played card (microbes, animals, ...)

PaymentCost describes how a card (or card action) is paid for.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum


class Resource(str, Enum):
    """Standard resources; every player has a balance and a production of each."""
    MEGACREDITS = "megacredits"
    STEEL = "steel"
    TITANIUM = "titanium"
    PLANTS = "plants"
    ENERGY = "energy"
    HEAT = "heat"


class CardResource(str, Enum):
    """Resources that live on a played card."""
    MICROBE = "microbe"
    PLANT = "plant"
    ANIMAL = "animal"
    SCIENCE = "science"
    FIGHTER = "fighter"


class CostCurrency(str, Enum):
    """
    Cost classes.

    BUILDING and SPACE are megacredit costs that may be partly paid
    with steel / titanium at the player's conversion rate.
    """
    MEGACREDITS = "megacredits"
    BUILDING = "building"
    SPACE = "space"
    SPACE_OR_BUILDING = "space_or_building"
    STEEL = "steel"
    TITANIUM = "titanium"
    PLANTS = "plants"
    ENERGY = "energy"
    HEAT = "heat"


# Cost classes that are paid directly from a single resource pool
DIRECT_COST_RESOURCES: dict[CostCurrency, Resource] = {
    CostCurrency.MEGACREDITS: Resource.MEGACREDITS,
    CostCurrency.STEEL: Resource.STEEL,
    CostCurrency.TITANIUM: Resource.TITANIUM,
    CostCurrency.PLANTS: Resource.PLANTS,
    CostCurrency.ENERGY: Resource.ENERGY,
    CostCurrency.HEAT: Resource.HEAT,
}

# Cost classes that accept megacredits topped up with metal
METAL_COST_CLASSES = frozenset({
    CostCurrency.BUILDING,
    CostCurrency.SPACE,
    CostCurrency.SPACE_OR_BUILDING,
})


@dataclass(frozen=True)
class PaymentCost:
    """An amount in a given cost class."""
    currency: CostCurrency
    amount: int

    def __post_init__(self):
        if self.amount < 0:
            raise ValueError(f"Negative cost: {self.amount}")

    @property
    def accepts_steel(self) -> bool:
        return self.currency in (CostCurrency.BUILDING, CostCurrency.SPACE_OR_BUILDING)

    @property
    def accepts_titanium(self) -> bool:
        return self.currency in (CostCurrency.SPACE, CostCurrency.SPACE_OR_BUILDING)

    def discounted(self, discount: int) -> PaymentCost:
        """Return the cost reduced by `discount`, never below zero."""
        return PaymentCost(self.currency, max(0, self.amount - discount))

    @classmethod
    def megacredits(cls, amount: int) -> PaymentCost:
        return cls(CostCurrency.MEGACREDITS, amount)

    @classmethod
    def building(cls, amount: int) -> PaymentCost:
        return cls(CostCurrency.BUILDING, amount)

    @classmethod
    def space(cls, amount: int) -> PaymentCost:
        return cls(CostCurrency.SPACE, amount)

    @classmethod
    def space_or_building(cls, amount: int) -> PaymentCost:
        return cls(CostCurrency.SPACE_OR_BUILDING, amount)

    @classmethod
    def of(cls, resource: Resource, amount: int) -> PaymentCost:
        """Cost paid directly with a standard resource."""
        return cls(CostCurrency(resource.value), amount)
