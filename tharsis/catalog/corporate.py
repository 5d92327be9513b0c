"""
Corporate Era - Extension cards, layered on top of the base catalog.
"""

from __future__ import annotations

from .base import (
    ACTIVE, AUTOMATIC, BUILDING, EARTH, EVENT, JOVIAN, MC, POWER, SCIENCE, SPACE,
    base_game, card,
)
from .card import (
    CardRequirement, CardTag, copy_production_of_card, discount_next_card,
    gain_production_per_any_tag, gain_production_per_opponent_tag, gain_production_per_own_tag,
    gain_resource, gain_resource_per_city, increased_metals_value, any_card_discount, card_discount_for_tag,
    gain_production_for_any_tag_played, rebate_after_playing_tag, spend_resource_action,
)
from .catalog import CardCatalog
from .resource import PaymentCost, Resource


def _corporate_cards():
    req = CardRequirement
    return [
        card("Earth Office", AUTOMATIC, (EARTH,), 1,
             effects=(card_discount_for_tag(EARTH, 3),)),
        card("Earth Catapult", AUTOMATIC, (EARTH,), 23, points=2,
             effects=(any_card_discount(2),)),
        card("Anti-Gravity Technology", AUTOMATIC, (SCIENCE,), 14,
             requirements=(req.min_tags(SCIENCE, 7),), points=3,
             effects=(any_card_discount(2),)),
        card("Advanced Alloys", AUTOMATIC, (SCIENCE,), 9,
             effects=(increased_metals_value(1),)),
        card("Media Group", AUTOMATIC, (EARTH,), 6,
             effects=(rebate_after_playing_tag(CardTag.EVENT, 3),)),
        card("Mars University", AUTOMATIC, (SCIENCE, BUILDING), 8, points=1,
             effects=(rebate_after_playing_tag(SCIENCE, 1),)),
        card("Indentured Workers", EVENT, (), 0, points=-1,
             impacts=(discount_next_card(8),)),
        card("Robotic Workforce", AUTOMATIC, (SCIENCE,), 9,
             impacts=(copy_production_of_card(BUILDING),)),
        card("Medical Lab", AUTOMATIC, (SCIENCE, BUILDING), 13, points=1,
             impacts=(gain_production_per_own_tag(BUILDING, 2, MC, 1),)),
        card("Gene Repair", AUTOMATIC, (SCIENCE,), 12,
             requirements=(req.min_tags(SCIENCE, 3),), points=2,
             production={MC: 2}),
        card("Satellites", AUTOMATIC, (SPACE,), 10,
             impacts=(gain_production_per_own_tag(SPACE, 1, MC, 1),)),
        card("Toll Station", AUTOMATIC, (SPACE,), 12,
             impacts=(gain_production_per_opponent_tag(SPACE, 1, MC, 1),)),
        card("Galilean Waystation", AUTOMATIC, (SPACE,), 15, points=1,
             impacts=(gain_production_per_any_tag(JOVIAN, 1, MC, 1),)),
        card("Power Supply Consortium", AUTOMATIC, (POWER,), 5,
             requirements=(req.min_tags(POWER, 2),),
             production={Resource.ENERGY: 1}, any_production={Resource.ENERGY: -1}),
        card("Trans-Neptune Probe", AUTOMATIC, (SCIENCE, SPACE), 6, points=1),
        card("Martian Rails", ACTIVE, (BUILDING,), 13,
             actions=(spend_resource_action(PaymentCost.of(Resource.ENERGY, 1),
                                            gain_resource_per_city(MC, 1, on_mars_only=True)),)),
        card("Saturn Systems", AUTOMATIC, (JOVIAN,), 22, points=1,
             production={Resource.TITANIUM: 1},
             effects=(gain_production_for_any_tag_played(MC, 1, JOVIAN),)),
        card("Investment Loan", EVENT, (EARTH,), 3,
             production={MC: -1}, impacts=(gain_resource(MC, 10),)),
        card("Cartel", AUTOMATIC, (EARTH,), 8,
             impacts=(gain_production_per_own_tag(EARTH, 1, MC, 1),)),
    ]


def corporate_era() -> CardCatalog:
    """Base game plus the corporate-era extension, as a fresh catalog."""
    return base_game().extended("corporate", _corporate_cards())
