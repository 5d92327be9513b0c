"""
Base Game - Hand-authored card catalog.

A representative subset of the base game deck. Cost classes follow
the tags: Building cards accept steel, Space cards accept titanium.
"""

from __future__ import annotations
from typing import Iterable

from .card import (
    Card, CardAction, CardEffect, CardKind, CardRequirement, CardTag, CityKind,
    EffectType, ImmediateImpact, LocationKind, SpecialTile, VictoryPointValue,
    add_resource_to_another_card, add_resource_to_same_card, cannot_remove_any_card_resources,
    cannot_remove_this_card_resource, destroy_any_plants, destroy_own_plants, draw_card,
    free_action, gain_production, gain_production_per_city, gain_production_per_own_tag,
    gain_resource, gain_terraform_rating_per_own_tag, on_impact, one_of, place_city,
    place_greenery, place_ocean, place_special_tile, raise_oxygen, raise_temperature,
    raise_terraform_rating, remove_resource_from_any_card, reveal_card_action,
    spend_card_resource_action, spend_production_action, spend_resource_action,
)
from .catalog import CardCatalog
from .resource import CardResource, PaymentCost, Resource

ACTIVE = CardKind.ACTIVE
AUTOMATIC = CardKind.AUTOMATIC
EVENT = CardKind.EVENT

BUILDING = CardTag.BUILDING
SPACE = CardTag.SPACE
POWER = CardTag.POWER
SCIENCE = CardTag.SCIENCE
JOVIAN = CardTag.JOVIAN
EARTH = CardTag.EARTH
PLANT = CardTag.PLANT
MICROBE = CardTag.MICROBE
ANIMAL = CardTag.ANIMAL
CITY = CardTag.CITY

MC = Resource.MEGACREDITS
STEEL = Resource.STEEL
TITANIUM = Resource.TITANIUM
PLANTS = Resource.PLANTS
ENERGY = Resource.ENERGY
HEAT = Resource.HEAT


def cost_for_tags(tags: Iterable[CardTag], amount: int) -> PaymentCost:
    """The printed cost of a card, in the cost class implied by its tags."""
    tags = set(tags)
    if BUILDING in tags and SPACE in tags:
        return PaymentCost.space_or_building(amount)
    if BUILDING in tags:
        return PaymentCost.building(amount)
    if SPACE in tags:
        return PaymentCost.space(amount)
    return PaymentCost.megacredits(amount)


def card(
    name: str,
    kind: CardKind,
    tags: tuple[CardTag, ...],
    cost: int,
    *,
    requirements: tuple[CardRequirement, ...] = (),
    points: VictoryPointValue | int | None = None,
    production: dict[Resource, int] | None = None,
    any_production: dict[Resource, int] | None = None,
    impacts: tuple[ImmediateImpact, ...] = (),
    actions: tuple[CardAction, ...] = (),
    effects: tuple[CardEffect, ...] = (),
) -> Card:
    """Shorthand constructor used by the built-in catalogs."""
    if kind == EVENT:
        tags = (*tags, CardTag.EVENT)
    if isinstance(points, int):
        points = VictoryPointValue.immediate(points)
    return Card(
        name=name,
        kind=kind,
        tags=tags,
        cost=cost_for_tags(tags, cost),
        requirements=requirements,
        points=points,
        own_production=dict(production or {}),
        any_production=dict(any_production or {}),
        immediate_impacts=impacts,
        actions=actions,
        effects=effects,
    )


def _base_cards() -> list[Card]:
    req = CardRequirement
    vp = VictoryPointValue
    return [
        # --- Jovian / space ------------------------------------------------
        card("Ganymede Colony", AUTOMATIC, (JOVIAN, SPACE, CITY), 20,
             points=vp.per_tag(1, 1, JOVIAN),
             impacts=(place_city(CityKind.GANYMEDE_COLONY),)),
        card("Water Import From Europa", ACTIVE, (JOVIAN, SPACE), 25,
             points=vp.per_tag(1, 1, JOVIAN),
             actions=(spend_resource_action(PaymentCost.space(12), place_ocean()),)),
        card("Methane From Titan", AUTOMATIC, (JOVIAN, SPACE), 28,
             requirements=(req.min_oxygen(2),), points=2,
             production={HEAT: 2, PLANTS: 2}),
        card("Io Mining Industries", AUTOMATIC, (JOVIAN, SPACE), 41,
             points=vp.per_tag(1, 1, JOVIAN),
             production={TITANIUM: 2, MC: 2}),
        card("Terraforming Ganymede", AUTOMATIC, (JOVIAN, SPACE), 33, points=2,
             impacts=(gain_terraform_rating_per_own_tag(1, JOVIAN),)),
        card("Asteroid Mining", AUTOMATIC, (JOVIAN, SPACE), 30, points=2,
             production={TITANIUM: 2}),
        card("Asteroid Mining Consortium", AUTOMATIC, (JOVIAN,), 13,
             requirements=(req.min_production(TITANIUM, 1),), points=1,
             production={TITANIUM: 1}, any_production={TITANIUM: -1}),
        card("Vesta Shipyard", AUTOMATIC, (JOVIAN, SPACE), 15, points=1,
             production={TITANIUM: 1}),
        card("Beam From A Thorium Asteroid", AUTOMATIC, (JOVIAN, SPACE, POWER), 32,
             requirements=(req.min_tags(JOVIAN, 1),), points=1,
             production={HEAT: 3, ENERGY: 3}),
        card("Colonizer Training Camp", AUTOMATIC, (JOVIAN, BUILDING), 8,
             requirements=(req.max_oxygen(5),), points=2),
        card("Immigration Shuttles", AUTOMATIC, (EARTH, SPACE), 31,
             points=vp.per_n_cities(3), production={MC: 5}),
        card("Phobos Space Haven", AUTOMATIC, (SPACE, CITY), 25, points=3,
             production={TITANIUM: 1},
             impacts=(place_city(CityKind.PHOBOS_SPACE_HAVEN),)),
        card("Space Elevator", ACTIVE, (SPACE, BUILDING), 27, points=2,
             production={TITANIUM: 1},
             actions=(spend_resource_action(PaymentCost.of(STEEL, 1), gain_resource(MC, 5)),)),
        card("Space Station", AUTOMATIC, (SPACE,), 10, points=1,
             effects=(CardEffect(EffectType.CARD_DISCOUNT_FOR_TAG, tag=SPACE, count=2),)),
        card("Security Fleet", ACTIVE, (SPACE,), 12,
             points=vp.per_card_resource(1, 1, CardResource.FIGHTER),
             actions=(spend_resource_action(
                 PaymentCost.of(TITANIUM, 1), add_resource_to_same_card(CardResource.FIGHTER)),)),
        card("Lagrange Observatory", AUTOMATIC, (SCIENCE, SPACE), 9, points=1,
             impacts=(draw_card(1),)),
        card("Soletta", AUTOMATIC, (SPACE,), 35, production={HEAT: 7}),

        # --- Events ----------------------------------------------------------
        card("Asteroid", EVENT, (SPACE,), 14,
             impacts=(raise_temperature(), gain_resource(TITANIUM, 2), destroy_any_plants(3))),
        card("Comet", EVENT, (SPACE,), 21,
             impacts=(raise_temperature(), place_ocean(), destroy_any_plants(3))),
        card("Big Asteroid", EVENT, (SPACE,), 27,
             impacts=(raise_temperature(), raise_temperature(), gain_resource(TITANIUM, 4),
                      destroy_any_plants(4))),
        card("Deimos Down", EVENT, (SPACE,), 31,
             impacts=(raise_temperature(), raise_temperature(), raise_temperature(),
                      gain_resource(STEEL, 4), destroy_any_plants(8))),
        card("Giant Ice Asteroid", EVENT, (SPACE,), 36,
             impacts=(raise_temperature(), raise_temperature(), place_ocean(), place_ocean(),
                      destroy_any_plants(6))),
        card("Towing A Comet", EVENT, (SPACE,), 23,
             impacts=(gain_resource(PLANTS, 2), place_ocean(), raise_oxygen())),
        card("Imported Hydrogen", EVENT, (EARTH, SPACE), 16,
             impacts=(one_of(gain_resource(PLANTS, 3),
                             add_resource_to_another_card(CardResource.MICROBE, 3),
                             add_resource_to_another_card(CardResource.ANIMAL, 2)),
                      place_ocean())),
        card("Nitrogen-Rich Asteroid", EVENT, (SPACE,), 31,
             impacts=(raise_terraform_rating(2), raise_temperature(), gain_production(PLANTS, 1))),
        card("Release Of Inert Gases", EVENT, (), 14, impacts=(raise_terraform_rating(2),)),
        card("Interstellar Colony Ship", EVENT, (EARTH, SPACE), 24,
             requirements=(req.min_tags(SCIENCE, 5),), points=4),
        card("Lava Flows", EVENT, (), 18,
             impacts=(place_special_tile(SpecialTile.LAVA_FLOWS), raise_temperature(),
                      raise_temperature())),
        card("Lake Marineris", AUTOMATIC, (), 18,
             requirements=(req.min_temperature(0),), points=2,
             impacts=(place_ocean(), place_ocean())),
        card("Ice Cap Melting", EVENT, (), 5,
             requirements=(req.min_temperature(2),), impacts=(place_ocean(),)),
        card("Permafrost Extraction", EVENT, (), 8,
             requirements=(req.min_temperature(-8),), impacts=(place_ocean(),)),
        card("Virus", EVENT, (MICROBE,), 1,
             impacts=(one_of(remove_resource_from_any_card(CardResource.ANIMAL, 2),
                             destroy_any_plants(5)),)),
        card("Bribed Committee", EVENT, (EARTH,), 7, points=-2,
             impacts=(raise_terraform_rating(2),)),

        # --- Cities ---------------------------------------------------------
        card("Capital", AUTOMATIC, (CITY, BUILDING), 26,
             requirements=(req.min_oceans(4),),
             production={ENERGY: -2, MC: 5},
             impacts=(place_city(CityKind.CAPITAL),)),
        card("Domed Crater", AUTOMATIC, (CITY, BUILDING), 24,
             requirements=(req.max_oxygen(7),), points=1,
             production={ENERGY: -1, MC: 3},
             impacts=(place_city(), gain_resource(PLANTS, 3))),
        card("Noctis City", AUTOMATIC, (CITY, BUILDING), 18,
             production={ENERGY: -1, MC: 3},
             impacts=(place_city(CityKind.NOCTIS_CITY),)),
        card("Cupola City", AUTOMATIC, (CITY, BUILDING), 16,
             requirements=(req.max_oxygen(9),),
             production={ENERGY: -1, MC: 3}, impacts=(place_city(),)),
        card("Underground City", AUTOMATIC, (CITY, BUILDING), 18,
             production={ENERGY: -2, STEEL: 2}, impacts=(place_city(),)),
        card("Urbanized Area", AUTOMATIC, (CITY, BUILDING), 10,
             production={ENERGY: -1, MC: 2},
             impacts=(place_city(CityKind.URBANIZED_AREA),)),
        card("Lava Tube Settlement", AUTOMATIC, (CITY, BUILDING), 15,
             production={ENERGY: -1, MC: 2},
             impacts=(place_city(CityKind.LAVA_TUBE_SETTLEMENT),)),
        card("Research Outpost", AUTOMATIC, (SCIENCE, CITY, BUILDING), 18,
             effects=(CardEffect(EffectType.ANY_CARD_DISCOUNT, count=1),),
             impacts=(place_city(CityKind.RESEARCH_OUTPOST),)),
        card("Immigrant City", AUTOMATIC, (CITY, BUILDING), 13,
             production={ENERGY: -1, MC: -2},
             impacts=(place_city(),),
             effects=(on_impact(EffectType.GAIN_PRODUCTION_FOR_ANY_IMPACT, 1, place_city(None),
                                resource=MC),)),
        card("Rover Construction", AUTOMATIC, (BUILDING,), 8, points=1,
             effects=(on_impact(EffectType.GAIN_RESOURCE_FOR_ANY_IMPACT, 2, place_city(None),
                                resource=MC),)),
        card("Zeppelins", AUTOMATIC, (), 13,
             requirements=(req.min_oxygen(5),), points=1,
             impacts=(gain_production_per_city(MC, 1, on_mars_only=True),)),
        card("Rad-Suits", AUTOMATIC, (), 6,
             requirements=(req.min_cities(2),), points=1, production={MC: 1}),

        # --- Special tiles --------------------------------------------------
        card("Natural Preserve", AUTOMATIC, (SCIENCE, BUILDING), 9,
             requirements=(req.max_oxygen(4),), points=1, production={MC: 1},
             impacts=(place_special_tile(SpecialTile.NATURAL_PRESERVE),)),
        card("Nuclear Zone", AUTOMATIC, (EARTH,), 10, points=-2,
             impacts=(place_special_tile(SpecialTile.NUCLEAR_ZONE), raise_temperature(),
                      raise_temperature())),
        card("Mohole Area", AUTOMATIC, (BUILDING,), 20, production={HEAT: 4},
             impacts=(place_special_tile(SpecialTile.MOHOLE_AREA),)),
        card("Industrial Center", ACTIVE, (BUILDING,), 4,
             impacts=(place_special_tile(SpecialTile.INDUSTRIAL_CENTER),),
             actions=(spend_resource_action(PaymentCost.megacredits(7), gain_production(STEEL, 1)),)),
        card("Commercial District", AUTOMATIC, (BUILDING,), 16,
             production={ENERGY: -1, MC: 4},
             impacts=(place_special_tile(SpecialTile.COMMERCIAL_DISTRICT),)),
        card("Mining Rights", AUTOMATIC, (BUILDING,), 9,
             impacts=(place_special_tile(SpecialTile.MINING_RIGHTS),)),
        card("Mining Area", AUTOMATIC, (BUILDING,), 4,
             impacts=(place_special_tile(SpecialTile.MINING_AREA),)),
        card("Restricted Area", ACTIVE, (SCIENCE,), 11,
             impacts=(place_special_tile(SpecialTile.RESTRICTED_AREA),),
             actions=(spend_resource_action(PaymentCost.megacredits(2), draw_card(1)),)),
        card("Ecological Zone", AUTOMATIC, (ANIMAL, PLANT), 12,
             requirements=(req.min_owned_greeneries(1),),
             points=vp.per_card_resource(1, 2, CardResource.ANIMAL),
             impacts=(place_special_tile(SpecialTile.ECOLOGICAL_ZONE),),
             effects=(on_impact(EffectType.GAIN_CARD_RESOURCE_FOR_OWN_IMPACT, 1, place_greenery(),
                                card_resource=CardResource.ANIMAL),)),

        # --- Plants ----------------------------------------------------------
        card("Tundra Farming", AUTOMATIC, (PLANT,), 16,
             requirements=(req.min_temperature(-6),), points=2,
             production={PLANTS: 1, MC: 2}, impacts=(gain_resource(PLANTS, 1),)),
        card("Arctic Algae", AUTOMATIC, (PLANT,), 12,
             requirements=(req.max_temperature(-12),),
             impacts=(gain_resource(PLANTS, 1),),
             effects=(on_impact(EffectType.GAIN_RESOURCE_FOR_ANY_IMPACT, 2, place_ocean(),
                                resource=PLANTS),)),
        card("Eos Chasma National Park", AUTOMATIC, (PLANT, BUILDING), 16,
             requirements=(req.min_temperature(-12),), points=1,
             production={MC: 2},
             impacts=(add_resource_to_another_card(CardResource.ANIMAL), gain_resource(PLANTS, 3))),
        card("Mangrove", AUTOMATIC, (PLANT,), 12,
             requirements=(req.min_temperature(4),), points=1,
             impacts=(place_greenery(LocationKind.RESERVED_FOR_OCEAN),)),
        card("Trees", AUTOMATIC, (PLANT,), 13,
             requirements=(req.min_temperature(-4),), points=1,
             production={PLANTS: 3}, impacts=(gain_resource(PLANTS, 1),)),
        card("Heather", AUTOMATIC, (PLANT,), 6,
             requirements=(req.min_temperature(-14),), points=1,
             production={PLANTS: 1}, impacts=(gain_resource(PLANTS, 1),)),
        card("Grass", AUTOMATIC, (PLANT,), 11,
             requirements=(req.min_temperature(-16),),
             production={PLANTS: 1}, impacts=(gain_resource(PLANTS, 3),)),
        card("Bushes", AUTOMATIC, (PLANT,), 10,
             requirements=(req.min_temperature(-10),),
             production={PLANTS: 2}, impacts=(gain_resource(PLANTS, 2),)),
        card("Algae", AUTOMATIC, (PLANT,), 10,
             requirements=(req.min_oceans(5),),
             production={PLANTS: 2}, impacts=(gain_resource(PLANTS, 1),)),
        card("Adapted Lichen", AUTOMATIC, (PLANT,), 9, production={PLANTS: 1}),
        card("Kelp Farming", AUTOMATIC, (PLANT,), 17,
             requirements=(req.min_oceans(6),), points=1,
             production={MC: 2, PLANTS: 3}, impacts=(gain_resource(PLANTS, 2),)),
        card("Moss", AUTOMATIC, (PLANT,), 4,
             requirements=(req.min_oceans(3),),
             production={PLANTS: 1}, impacts=(destroy_own_plants(1),)),
        card("Insects", AUTOMATIC, (MICROBE,), 9,
             requirements=(req.min_oxygen(6),),
             impacts=(gain_production_per_own_tag(PLANT, 1, PLANTS, 1),)),
        card("Cloud Seeding", AUTOMATIC, (), 11,
             requirements=(req.min_oceans(3),),
             production={MC: -1, PLANTS: 2}, any_production={HEAT: -1}),
        card("Black Polar Dust", AUTOMATIC, (), 15,
             production={MC: -2, HEAT: 3}, impacts=(place_ocean(),)),

        # --- Microbes / animals ---------------------------------------------
        card("Search For Life", ACTIVE, (SCIENCE,), 3,
             requirements=(req.max_oxygen(6),),
             points=vp.fixed_if_any_card_resource(3, CardResource.SCIENCE),
             actions=(reveal_card_action(
                 PaymentCost.megacredits(1), MICROBE,
                 add_resource_to_same_card(CardResource.SCIENCE)),)),
        card("Regolith Eaters", ACTIVE, (SCIENCE, MICROBE), 13,
             actions=(free_action(add_resource_to_same_card(CardResource.MICROBE)),
                      spend_card_resource_action(CardResource.MICROBE, 2, raise_oxygen()))),
        card("GHG Producing Bacteria", ACTIVE, (SCIENCE, MICROBE), 8,
             requirements=(req.min_oxygen(4),),
             actions=(free_action(add_resource_to_same_card(CardResource.MICROBE)),
                      spend_card_resource_action(CardResource.MICROBE, 2, raise_temperature()))),
        card("Nitrite Reducing Bacteria", ACTIVE, (MICROBE,), 11,
             impacts=(add_resource_to_same_card(CardResource.MICROBE, 3),),
             actions=(free_action(add_resource_to_same_card(CardResource.MICROBE)),
                      spend_card_resource_action(CardResource.MICROBE, 3,
                                                 raise_terraform_rating()))),
        card("Ants", ACTIVE, (MICROBE,), 9,
             requirements=(req.min_oxygen(4),),
             points=vp.per_card_resource(1, 2, CardResource.MICROBE),
             actions=(free_action(remove_resource_from_any_card(CardResource.MICROBE),
                                  add_resource_to_same_card(CardResource.MICROBE)),)),
        card("Tardigrades", ACTIVE, (MICROBE,), 4,
             points=vp.per_card_resource(1, 4, CardResource.MICROBE),
             actions=(free_action(add_resource_to_same_card(CardResource.MICROBE)),)),
        card("Symbiotic Fungus", ACTIVE, (MICROBE,), 4,
             requirements=(req.min_temperature(-14),),
             actions=(free_action(add_resource_to_another_card(CardResource.MICROBE)),)),
        card("Extreme-Cold Fungus", ACTIVE, (MICROBE,), 13,
             requirements=(req.max_temperature(-10),),
             actions=(free_action(one_of(gain_resource(PLANTS, 1),
                                         add_resource_to_another_card(CardResource.MICROBE, 2))),)),
        card("Archaebacteria", AUTOMATIC, (MICROBE,), 6,
             requirements=(req.max_temperature(-18),), production={PLANTS: 1}),
        card("Predators", ACTIVE, (ANIMAL,), 14,
             requirements=(req.min_oxygen(11),),
             points=vp.per_card_resource(1, 1, CardResource.ANIMAL),
             actions=(free_action(remove_resource_from_any_card(CardResource.ANIMAL),
                                  add_resource_to_same_card(CardResource.ANIMAL)),)),
        card("Fish", ACTIVE, (ANIMAL,), 9,
             requirements=(req.min_temperature(2),),
             points=vp.per_card_resource(1, 1, CardResource.ANIMAL),
             any_production={PLANTS: -1},
             actions=(free_action(add_resource_to_same_card(CardResource.ANIMAL)),)),
        card("Small Animals", ACTIVE, (ANIMAL,), 6,
             requirements=(req.min_oxygen(6),),
             points=vp.per_card_resource(1, 2, CardResource.ANIMAL),
             any_production={PLANTS: -1},
             actions=(free_action(add_resource_to_same_card(CardResource.ANIMAL)),)),
        card("Birds", ACTIVE, (ANIMAL,), 10,
             requirements=(req.min_oxygen(13),),
             points=vp.per_card_resource(1, 1, CardResource.ANIMAL),
             any_production={PLANTS: -2},
             actions=(free_action(add_resource_to_same_card(CardResource.ANIMAL)),)),
        card("Livestock", ACTIVE, (ANIMAL,), 13,
             requirements=(req.min_oxygen(9),),
             points=vp.per_card_resource(1, 1, CardResource.ANIMAL),
             production={PLANTS: -1, MC: 2},
             actions=(free_action(add_resource_to_same_card(CardResource.ANIMAL)),)),
        card("Pets", AUTOMATIC, (EARTH, ANIMAL), 10,
             points=vp.per_card_resource(1, 2, CardResource.ANIMAL),
             impacts=(add_resource_to_same_card(CardResource.ANIMAL),),
             effects=(on_impact(EffectType.GAIN_CARD_RESOURCE_FOR_ANY_IMPACT, 1, place_city(None),
                                card_resource=CardResource.ANIMAL),
                      cannot_remove_this_card_resource(CardResource.ANIMAL))),
        card("Protected Habitats", AUTOMATIC, (), 5,
             effects=(cannot_remove_any_card_resources(
                 CardResource.PLANT, CardResource.ANIMAL, CardResource.MICROBE),)),

        # --- Power / industry ------------------------------------------------
        card("Deep Well Heating", AUTOMATIC, (POWER, BUILDING), 13,
             production={ENERGY: 1}, impacts=(raise_temperature(),)),
        card("Nuclear Power", AUTOMATIC, (POWER, BUILDING), 10,
             production={MC: -2, ENERGY: 3}),
        card("Geothermal Power", AUTOMATIC, (POWER, BUILDING), 11, production={ENERGY: 2}),
        card("Power Plant", AUTOMATIC, (POWER, BUILDING), 4, production={ENERGY: 1}),
        card("Solar Power", AUTOMATIC, (POWER, BUILDING), 11, points=1, production={ENERGY: 1}),
        card("Peroxide Power", AUTOMATIC, (POWER, BUILDING), 7, production={MC: -1, ENERGY: 2}),
        card("Lunar Beam", AUTOMATIC, (EARTH, POWER), 13,
             production={MC: -2, HEAT: 2, ENERGY: 2}),
        card("Lightning Harvest", AUTOMATIC, (POWER,), 8,
             requirements=(req.min_tags(SCIENCE, 3),), points=1,
             production={ENERGY: 1, MC: 1}),
        card("Power Grid", AUTOMATIC, (POWER,), 18,
             impacts=(gain_production_per_own_tag(POWER, 1, ENERGY, 1),)),
        card("Biomass Combustors", AUTOMATIC, (POWER, BUILDING), 4,
             requirements=(req.min_oxygen(6),), points=-1,
             production={ENERGY: 2}, any_production={PLANTS: -1}),
        card("Heat Trappers", AUTOMATIC, (POWER, BUILDING), 6, points=-1,
             production={ENERGY: 1}, any_production={HEAT: -2}),
        card("Carbonate Processing", AUTOMATIC, (BUILDING,), 6, production={ENERGY: -1, HEAT: 3}),
        card("Food Factory", AUTOMATIC, (BUILDING,), 12, points=1,
             production={PLANTS: -1, MC: 4}),
        card("Mine", AUTOMATIC, (BUILDING,), 4, production={STEEL: 1}),
        card("Strip Mine", AUTOMATIC, (BUILDING,), 25,
             production={ENERGY: -2, STEEL: 2, TITANIUM: 1},
             impacts=(raise_oxygen(), raise_oxygen())),
        card("Great Escarpment Consortium", AUTOMATIC, (), 6,
             requirements=(req.min_production(STEEL, 1),),
             production={STEEL: 1}, any_production={STEEL: -1}),
        card("Development Center", ACTIVE, (SCIENCE, BUILDING), 11,
             actions=(spend_resource_action(PaymentCost.of(ENERGY, 1), draw_card(1)),)),
        card("Equatorial Magnetizer", ACTIVE, (BUILDING,), 11,
             actions=(spend_production_action(ENERGY, 1, raise_terraform_rating()),)),
        card("Water Splitting Plant", ACTIVE, (BUILDING,), 12,
             requirements=(req.min_oceans(2),),
             actions=(spend_resource_action(PaymentCost.of(ENERGY, 3), raise_oxygen()),)),
        card("Steelworks", ACTIVE, (BUILDING,), 15,
             actions=(spend_resource_action(PaymentCost.of(ENERGY, 4), gain_resource(STEEL, 2),
                                            raise_oxygen()),)),
        card("Ironworks", ACTIVE, (BUILDING,), 11,
             actions=(spend_resource_action(PaymentCost.of(ENERGY, 4), gain_resource(STEEL, 1),
                                            raise_oxygen()),)),
        card("Ore Processor", ACTIVE, (BUILDING,), 13,
             actions=(spend_resource_action(PaymentCost.of(ENERGY, 4), gain_resource(TITANIUM, 1),
                                            raise_oxygen()),)),
        card("Aquifer Pumping", ACTIVE, (BUILDING,), 18,
             actions=(spend_resource_action(PaymentCost.building(8), place_ocean()),)),
        card("Caretaker Contract", ACTIVE, (), 3,
             requirements=(req.min_temperature(0),),
             actions=(spend_resource_action(PaymentCost.of(HEAT, 8), raise_terraform_rating()),)),
        card("Electro Catapult", ACTIVE, (BUILDING,), 17,
             requirements=(req.max_oxygen(8),), points=1,
             production={ENERGY: -1},
             actions=(spend_resource_action(PaymentCost.of(PLANTS, 1), gain_resource(MC, 7)),)),

        # --- Science / earth ------------------------------------------------
        card("Research", AUTOMATIC, (SCIENCE, SCIENCE), 11, points=1,
             impacts=(draw_card(2),)),
        card("Physics Complex", ACTIVE, (SCIENCE, BUILDING), 12,
             points=vp.per_card_resource(2, 1, CardResource.SCIENCE),
             actions=(spend_resource_action(PaymentCost.of(ENERGY, 6),
                                            add_resource_to_same_card(CardResource.SCIENCE)),)),
        card("Sponsors", AUTOMATIC, (EARTH,), 6, production={MC: 2}),
        card("Miranda Resort", AUTOMATIC, (JOVIAN, SPACE), 12, points=1,
             impacts=(gain_production_per_own_tag(EARTH, 1, MC, 1),)),
    ]


def base_game() -> CardCatalog:
    """A fresh base-game catalog."""
    return CardCatalog("base", _base_cards())
