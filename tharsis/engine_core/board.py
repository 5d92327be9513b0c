"""
Mars Board - Shared board state and tile placement.

The board keeps four disjoint occupancy indexes:
- cities: location -> (city kind, owner); the only index that may hold off-Mars locations
- oceans: set of coordinates
- greeneries: coordinates -> owner
- special tiles: coordinates -> (tile, owner)

No location ever appears in more than one index. Every insert goes
through place(), which raises InvariantViolation on double occupancy.
Placement legality is decided separately by is_placement_allowed()
against a list of LocationRestriction values.
"""

from __future__ import annotations
import copy
import logging
from dataclasses import dataclass, field
from enum import Enum
from functools import partial
from typing import Iterable, Iterator

from ..catalog.card import (
    CityKind, ImmediateImpact, ImpactType, LocationKind, SpecialTile, draw_card, gain_resource,
)
from ..catalog.resource import Resource
from .coordinates import Coordinates, SpecialLocation, TileLocation
from .errors import InvariantViolation

logger = logging.getLogger(__name__)

PlayerId = int

MAX_OXYGEN = 14
OXYGEN_STEP = 1
MIN_TEMPERATURE = -30
MAX_TEMPERATURE = 8
TEMPERATURE_STEP = 2
MAX_OCEANS = 9
OCEAN_ADJACENCY_BONUS = 2


class Designation(str, Enum):
    LAND = "land"
    RESERVED_FOR_OCEAN = "reserved_for_ocean"
    VOLCANIC = "volcanic"
    OFF_MARS = "off_mars"


@dataclass(frozen=True)
class BoardSpace:
    """Static metadata for one location of the board layout."""
    location: TileLocation
    designations: frozenset[Designation]
    special_locations: frozenset[SpecialLocation] = frozenset()
    placement_bonus: tuple[ImmediateImpact, ...] = ()
    name: str | None = None

    def has(self, designation: Designation) -> bool:
        return designation in self.designations


# ============================================================================
# Tile status
# ============================================================================

class TileKind(str, Enum):
    EMPTY = "empty"
    OCEAN = "ocean"
    CITY = "city"
    GREENERY = "greenery"
    SPECIAL_TILE = "special_tile"


@dataclass(frozen=True)
class TileStatus:
    """
    What occupies a location.

    Also used to describe the occupant to insert when placing a tile.
    """
    kind: TileKind
    owner: PlayerId | None = None
    city_kind: CityKind | None = None
    special_tile: SpecialTile | None = None

    @classmethod
    def empty(cls) -> TileStatus:
        return cls(TileKind.EMPTY)

    @classmethod
    def ocean(cls) -> TileStatus:
        return cls(TileKind.OCEAN)

    @classmethod
    def city(cls, city_kind: CityKind, owner: PlayerId) -> TileStatus:
        return cls(TileKind.CITY, owner=owner, city_kind=city_kind)

    @classmethod
    def greenery(cls, owner: PlayerId) -> TileStatus:
        return cls(TileKind.GREENERY, owner=owner)

    @classmethod
    def special(cls, tile: SpecialTile, owner: PlayerId) -> TileStatus:
        return cls(TileKind.SPECIAL_TILE, owner=owner, special_tile=tile)

    @property
    def is_empty(self) -> bool:
        return self.kind == TileKind.EMPTY

    @property
    def is_city(self) -> bool:
        return self.kind == TileKind.CITY

    def __str__(self) -> str:
        if self.kind == TileKind.CITY:
            return f"city[{self.city_kind.value}]@p{self.owner}"
        if self.kind == TileKind.GREENERY:
            return f"greenery@p{self.owner}"
        if self.kind == TileKind.SPECIAL_TILE:
            return f"{self.special_tile.value}@p{self.owner}"
        return self.kind.value


# ============================================================================
# Location restrictions
# ============================================================================

class RestrictionType(str, Enum):
    LAND_TILE = "land_tile"
    RESERVED_FOR_OCEAN = "reserved_for_ocean"
    ON_STEEL_OR_TITANIUM_PLACEMENT_BONUS = "on_steel_or_titanium_placement_bonus"
    AT_SPECIAL_LOCATION = "at_special_location"
    ADJACENT_TO_OWNED_TILE = "adjacent_to_owned_tile"
    # soft rule: never blocks a placement
    ADJACENT_TO_OWNED_TILE_IF_ABLE = "adjacent_to_owned_tile_if_able"
    NOT_NEXT_TO_ANY_OTHER_TILE = "not_next_to_any_other_tile"
    NOT_NEXT_TO_A_CITY = "not_next_to_a_city"
    NEXT_TO_A_CITY = "next_to_a_city"
    NEXT_TO_AT_LEAST_TWO_CITIES = "next_to_at_least_two_cities"
    NEXT_TO_A_GREENERY = "next_to_a_greenery"


@dataclass(frozen=True)
class LocationRestriction:
    restriction_type: RestrictionType
    special_location: SpecialLocation | None = None


LAND_TILE = LocationRestriction(RestrictionType.LAND_TILE)
RESERVED_FOR_OCEAN = LocationRestriction(RestrictionType.RESERVED_FOR_OCEAN)
ON_STEEL_OR_TITANIUM = LocationRestriction(RestrictionType.ON_STEEL_OR_TITANIUM_PLACEMENT_BONUS)
ADJACENT_TO_OWNED_TILE = LocationRestriction(RestrictionType.ADJACENT_TO_OWNED_TILE)
ADJACENT_TO_OWNED_TILE_IF_ABLE = LocationRestriction(RestrictionType.ADJACENT_TO_OWNED_TILE_IF_ABLE)
NOT_NEXT_TO_ANY_OTHER_TILE = LocationRestriction(RestrictionType.NOT_NEXT_TO_ANY_OTHER_TILE)
NOT_NEXT_TO_A_CITY = LocationRestriction(RestrictionType.NOT_NEXT_TO_A_CITY)
NEXT_TO_A_CITY = LocationRestriction(RestrictionType.NEXT_TO_A_CITY)
NEXT_TO_AT_LEAST_TWO_CITIES = LocationRestriction(RestrictionType.NEXT_TO_AT_LEAST_TWO_CITIES)
NEXT_TO_A_GREENERY = LocationRestriction(RestrictionType.NEXT_TO_A_GREENERY)


def at_special_location(special: SpecialLocation) -> LocationRestriction:
    return LocationRestriction(RestrictionType.AT_SPECIAL_LOCATION, special_location=special)


def city_restrictions(city_kind: CityKind) -> tuple[LocationRestriction, ...]:
    """Where a city of the given kind may go."""
    if city_kind == CityKind.NOCTIS_CITY:
        return (at_special_location(SpecialLocation.NOCTIS_CITY),)
    if city_kind == CityKind.PHOBOS_SPACE_HAVEN:
        return (at_special_location(SpecialLocation.PHOBOS_SPACE_HAVEN),)
    if city_kind == CityKind.GANYMEDE_COLONY:
        return (at_special_location(SpecialLocation.GANYMEDE_COLONY),)
    if city_kind == CityKind.LAVA_TUBE_SETTLEMENT:
        return (at_special_location(SpecialLocation.VOLCANIC_AREA), NOT_NEXT_TO_A_CITY)
    if city_kind == CityKind.URBANIZED_AREA:
        return (LAND_TILE, NEXT_TO_AT_LEAST_TWO_CITIES)
    if city_kind == CityKind.RESEARCH_OUTPOST:
        return (LAND_TILE, NOT_NEXT_TO_ANY_OTHER_TILE)
    return (LAND_TILE, NOT_NEXT_TO_A_CITY)


_SPECIAL_TILE_RESTRICTIONS: dict[SpecialTile, tuple[LocationRestriction, ...]] = {
    SpecialTile.NUCLEAR_ZONE: (LAND_TILE,),
    SpecialTile.RESTRICTED_AREA: (LAND_TILE,),
    SpecialTile.LAVA_FLOWS: (at_special_location(SpecialLocation.VOLCANIC_AREA),),
    SpecialTile.COMMERCIAL_DISTRICT: (LAND_TILE,),
    SpecialTile.NATURAL_PRESERVE: (LAND_TILE, NOT_NEXT_TO_ANY_OTHER_TILE),
    SpecialTile.INDUSTRIAL_CENTER: (LAND_TILE, NEXT_TO_A_CITY),
    SpecialTile.MOHOLE_AREA: (RESERVED_FOR_OCEAN,),
    SpecialTile.MINING_RIGHTS: (LAND_TILE, ON_STEEL_OR_TITANIUM),
    SpecialTile.MINING_AREA: (LAND_TILE, ON_STEEL_OR_TITANIUM, ADJACENT_TO_OWNED_TILE),
    SpecialTile.ECOLOGICAL_ZONE: (LAND_TILE, NEXT_TO_A_GREENERY),
}


def special_tile_restrictions(tile: SpecialTile) -> tuple[LocationRestriction, ...]:
    return _SPECIAL_TILE_RESTRICTIONS[tile]


def ocean_restrictions(location_kind: LocationKind | None = None) -> tuple[LocationRestriction, ...]:
    if location_kind == LocationKind.REGULAR_LAND:
        return (LAND_TILE,)
    return (RESERVED_FOR_OCEAN,)


def greenery_restrictions(location_kind: LocationKind | None = None) -> tuple[LocationRestriction, ...]:
    if location_kind == LocationKind.RESERVED_FOR_OCEAN:
        return (RESERVED_FOR_OCEAN,)
    return (LAND_TILE, ADJACENT_TO_OWNED_TILE_IF_ABLE)


# ============================================================================
# Board
# ============================================================================

@dataclass
class MarsBoard:
    """Mutable shared board state."""
    spaces: dict[TileLocation, BoardSpace]
    cities: dict[TileLocation, tuple[CityKind, PlayerId]] = field(default_factory=dict)
    oceans: set[Coordinates] = field(default_factory=set)
    greeneries: dict[Coordinates, PlayerId] = field(default_factory=dict)
    special_tiles: dict[Coordinates, tuple[SpecialTile, PlayerId]] = field(default_factory=dict)
    oxygen: int = 0
    temperature: int = MIN_TEMPERATURE

    def __post_init__(self):
        self.check_exclusivity()

    def clone(self) -> MarsBoard:
        return copy.deepcopy(self)

    # =========================================================================
    # Invariants
    # =========================================================================

    def check_exclusivity(self) -> None:
        """Raise InvariantViolation unless every location is in at most one index."""
        seen: set[TileLocation] = set()
        indexed = [
            *self.cities,
            *(TileLocation(coordinates=c) for c in self.oceans),
            *(TileLocation(coordinates=c) for c in self.greeneries),
            *(TileLocation(coordinates=c) for c in self.special_tiles),
        ]
        for location in indexed:
            if location in seen:
                raise InvariantViolation(f"Location {location} is occupied twice")
            if location not in self.spaces:
                raise InvariantViolation(f"Location {location} is not on the board")
            seen.add(location)
        if len(self.oceans) > MAX_OCEANS:
            raise InvariantViolation(f"{len(self.oceans)} oceans exceed the maximum of {MAX_OCEANS}")
        if not 0 <= self.oxygen <= MAX_OXYGEN:
            raise InvariantViolation(f"Oxygen {self.oxygen} out of range")
        if not MIN_TEMPERATURE <= self.temperature <= MAX_TEMPERATURE:
            raise InvariantViolation(f"Temperature {self.temperature} out of range")

    # =========================================================================
    # Queries
    # =========================================================================

    @property
    def ocean_count(self) -> int:
        return len(self.oceans)

    @property
    def oceans_maxed(self) -> bool:
        return len(self.oceans) >= MAX_OCEANS

    @property
    def oxygen_maxed(self) -> bool:
        return self.oxygen >= MAX_OXYGEN

    @property
    def temperature_maxed(self) -> bool:
        return self.temperature >= MAX_TEMPERATURE

    def get_space(self, location: TileLocation) -> BoardSpace | None:
        return self.spaces.get(location)

    def locations(self) -> list[TileLocation]:
        return sorted(self.spaces, key=TileLocation.sort_key)

    def get_tile_status(self, location: TileLocation) -> TileStatus:
        """Resolve city -> ocean -> greenery -> special tile -> empty."""
        city = self.cities.get(location)
        if city is not None:
            return TileStatus.city(city[0], city[1])
        coordinates = location.coordinates
        if coordinates is None:
            return TileStatus.empty()
        if coordinates in self.oceans:
            return TileStatus.ocean()
        owner = self.greeneries.get(coordinates)
        if owner is not None:
            return TileStatus.greenery(owner)
        special = self.special_tiles.get(coordinates)
        if special is not None:
            return TileStatus.special(special[0], special[1])
        return TileStatus.empty()

    def get_neighbor_tile_status(self, location: TileLocation) -> Iterator[TileStatus]:
        for neighbor in location.neighbors():
            yield self.get_tile_status(neighbor)

    def count_adjacent_oceans(self, location: TileLocation) -> int:
        return sum(1 for n in location.neighbors() if n.coordinates in self.oceans)

    def count_adjacent_cities(self, location: TileLocation) -> int:
        return sum(1 for n in location.neighbors() if n in self.cities)

    def count_adjacent_greeneries(self, location: TileLocation) -> int:
        return sum(1 for n in location.neighbors() if n.coordinates in self.greeneries)

    def count_adjacent_tiles(self, location: TileLocation) -> int:
        return sum(1 for status in self.get_neighbor_tile_status(location) if not status.is_empty)

    def has_adjacent_owned_tile(self, player: PlayerId, location: TileLocation) -> bool:
        return any(s.owner == player for s in self.get_neighbor_tile_status(location))

    def cities_owned_by(self, player: PlayerId) -> list[tuple[TileLocation, CityKind]]:
        return [
            (location, kind)
            for location, (kind, owner) in self.cities.items()
            if owner == player
        ]

    def city_count(self, on_mars_only: bool = False, owner: PlayerId | None = None) -> int:
        return sum(
            1 for location, (_, city_owner) in self.cities.items()
            if (not on_mars_only or location.is_on_mars)
            and (owner is None or city_owner == owner)
        )

    def greeneries_owned_by(self, player: PlayerId) -> list[Coordinates]:
        return [c for c, owner in self.greeneries.items() if owner == player]

    def special_tiles_owned_by(self, player: PlayerId) -> list[tuple[Coordinates, SpecialTile]]:
        return [(c, tile) for c, (tile, owner) in self.special_tiles.items() if owner == player]

    def get_placement_bonuses(self, location: TileLocation) -> list[ImmediateImpact]:
        """
        The static placement bonus plus 2 MC per adjacent ocean.

        The ocean money is merged into an existing megacredit gain when
        the static bonus already has one.
        """
        space = self.spaces.get(location)
        bonuses = list(space.placement_bonus) if space else []
        extra = OCEAN_ADJACENCY_BONUS * self.count_adjacent_oceans(location)
        if extra == 0:
            return bonuses
        for i, bonus in enumerate(bonuses):
            if bonus.impact_type == ImpactType.GAIN_RESOURCE and bonus.resource == Resource.MEGACREDITS:
                bonuses[i] = gain_resource(Resource.MEGACREDITS, bonus.count + extra)
                return bonuses
        bonuses.append(gain_resource(Resource.MEGACREDITS, extra))
        return bonuses

    # =========================================================================
    # Placement
    # =========================================================================

    def check_restriction(
        self, player: PlayerId, location: TileLocation, restriction: LocationRestriction
    ) -> bool:
        check = _RESTRICTION_CHECKS[restriction.restriction_type]
        return check(self, player, location, restriction)

    def is_placement_allowed(
        self,
        player: PlayerId,
        location: TileLocation,
        restrictions: Iterable[LocationRestriction],
    ) -> bool:
        """Whether `location` is on the board, empty, and passes every restriction."""
        if location not in self.spaces:
            return False
        if not self.get_tile_status(location).is_empty:
            return False
        return all(self.check_restriction(player, location, r) for r in restrictions)

    def legal_locations(
        self, player: PlayerId, restrictions: Iterable[LocationRestriction]
    ) -> list[TileLocation]:
        """Every location passing `restrictions`, in board order."""
        restrictions = tuple(restrictions)
        return [
            location for location in self.locations()
            if self.is_placement_allowed(player, location, restrictions)
        ]

    def validate_and_place(
        self,
        player: PlayerId,
        location: TileLocation,
        occupant: TileStatus,
        restrictions: Iterable[LocationRestriction],
    ) -> bool:
        """
        Validate, then insert. On rejection nothing changes.

        Oceans additionally need the global ocean count to be below its cap.
        """
        if occupant.kind == TileKind.OCEAN and self.oceans_maxed:
            return False
        if not self.is_placement_allowed(player, location, restrictions):
            return False
        self.place(location, occupant)
        return True

    def can_place_city(
        self,
        player: PlayerId,
        location: TileLocation,
        city_kind: CityKind,
        restrictions: Iterable[LocationRestriction],
    ) -> bool:
        return self.validate_and_place(
            player, location, TileStatus.city(city_kind, player), restrictions
        )

    def place(self, location: TileLocation, occupant: TileStatus) -> None:
        """Insert a tile. Raises InvariantViolation if the location is taken."""
        if location not in self.spaces:
            raise InvariantViolation(f"Location {location} is not on the board")
        current = self.get_tile_status(location)
        if not current.is_empty:
            raise InvariantViolation(f"Location {location} is already occupied by {current}")

        if occupant.kind == TileKind.CITY:
            self.cities[location] = (occupant.city_kind, occupant.owner)
            return

        coordinates = location.coordinates
        if coordinates is None:
            raise InvariantViolation(f"Only cities can be placed off Mars, got {occupant.kind.value}")
        if occupant.kind == TileKind.OCEAN:
            if self.oceans_maxed:
                raise InvariantViolation("All oceans are already placed")
            self.oceans.add(coordinates)
        elif occupant.kind == TileKind.GREENERY:
            self.greeneries[coordinates] = occupant.owner
        elif occupant.kind == TileKind.SPECIAL_TILE:
            self.special_tiles[coordinates] = (occupant.special_tile, occupant.owner)
        else:
            raise InvariantViolation("Cannot place an empty tile")
        logger.debug("Placed %s at %s", occupant, location)

    # =========================================================================
    # Global parameters
    # =========================================================================

    def raise_temperature(self) -> None:
        if self.temperature_maxed:
            raise InvariantViolation("Temperature is already at its maximum")
        self.temperature += TEMPERATURE_STEP

    def raise_oxygen(self) -> None:
        if self.oxygen_maxed:
            raise InvariantViolation("Oxygen is already at its maximum")
        self.oxygen += OXYGEN_STEP

    def render(self) -> str:
        """One line per occupied location plus the global parameters."""
        lines = [
            f"oxygen={self.oxygen} temperature={self.temperature} oceans={self.ocean_count}",
        ]
        for location in self.locations():
            status = self.get_tile_status(location)
            space = self.spaces[location]
            label = f" {space.name}" if space.name else ""
            if not status.is_empty:
                lines.append(f"{location}{label}: {status}")
        return "\n".join(lines)


def _check_land(board, player, location, restriction):
    return board.spaces[location].has(Designation.LAND)


def _check_reserved_for_ocean(board, player, location, restriction):
    return board.spaces[location].has(Designation.RESERVED_FOR_OCEAN)


def _check_metal_bonus(board, player, location, restriction):
    return any(
        bonus.impact_type == ImpactType.GAIN_RESOURCE
        and bonus.resource in (Resource.STEEL, Resource.TITANIUM)
        for bonus in board.spaces[location].placement_bonus
    )


def _check_special_location(board, player, location, restriction):
    return restriction.special_location in board.spaces[location].special_locations


def _check_adjacent_owned(board, player, location, restriction):
    return board.has_adjacent_owned_tile(player, location)


def _always(board, player, location, restriction):
    return True


def _check_isolated(board, player, location, restriction):
    return board.count_adjacent_tiles(location) == 0


def _check_no_city(board, player, location, restriction):
    return board.count_adjacent_cities(location) == 0


def _check_one_city(board, player, location, restriction):
    return board.count_adjacent_cities(location) >= 1


def _check_two_cities(board, player, location, restriction):
    return board.count_adjacent_cities(location) >= 2


def _check_greenery(board, player, location, restriction):
    return board.count_adjacent_greeneries(location) >= 1


_RESTRICTION_CHECKS = {
    RestrictionType.LAND_TILE: _check_land,
    RestrictionType.RESERVED_FOR_OCEAN: _check_reserved_for_ocean,
    RestrictionType.ON_STEEL_OR_TITANIUM_PLACEMENT_BONUS: _check_metal_bonus,
    RestrictionType.AT_SPECIAL_LOCATION: _check_special_location,
    RestrictionType.ADJACENT_TO_OWNED_TILE: _check_adjacent_owned,
    RestrictionType.ADJACENT_TO_OWNED_TILE_IF_ABLE: _always,
    RestrictionType.NOT_NEXT_TO_ANY_OTHER_TILE: _check_isolated,
    RestrictionType.NOT_NEXT_TO_A_CITY: _check_no_city,
    RestrictionType.NEXT_TO_A_CITY: _check_one_city,
    RestrictionType.NEXT_TO_AT_LEAST_TWO_CITIES: _check_two_cities,
    RestrictionType.NEXT_TO_A_GREENERY: _check_greenery,
}


# ============================================================================
# Standard layout
# ============================================================================

def _land(x: int, y: int, *bonus: ImmediateImpact) -> BoardSpace:
    return BoardSpace(TileLocation.on_mars(x, y), frozenset({Designation.LAND}), placement_bonus=bonus)


def _ocean(x: int, y: int, *bonus: ImmediateImpact) -> BoardSpace:
    return BoardSpace(
        TileLocation.on_mars(x, y), frozenset({Designation.RESERVED_FOR_OCEAN}), placement_bonus=bonus,
    )


def _volcano(name: str, x: int, y: int, *bonus: ImmediateImpact) -> BoardSpace:
    return BoardSpace(
        TileLocation.on_mars(x, y),
        frozenset({Designation.LAND, Designation.VOLCANIC}),
        special_locations=frozenset({SpecialLocation.VOLCANIC_AREA}),
        placement_bonus=bonus,
        name=name,
    )


def _off_mars(name: str, special: SpecialLocation) -> BoardSpace:
    return BoardSpace(
        TileLocation.off_mars(special),
        frozenset({Designation.OFF_MARS}),
        special_locations=frozenset({special}),
        name=name,
    )


def standard_spaces() -> list[BoardSpace]:
    """The Tharsis layout, row by row from the top, plus the off-Mars colonies."""
    plants = partial(gain_resource, Resource.PLANTS)
    steel = partial(gain_resource, Resource.STEEL)
    titanium = partial(gain_resource, Resource.TITANIUM)

    return [
        _volcano("Arsia Mons", 0, 0, plants(2)),
        _volcano("Pavonis Mons", 1, 0, plants(1), titanium(1)),
        _volcano("Ascraeus Mons", 2, 0, draw_card(1)),
        _land(3, 0),
        _land(4, 0, steel(2)),

        _land(0, -1, plants(1)),
        _land(1, -1, plants(2)),
        _land(2, -1, plants(1)),
        _land(3, -1),
        _volcano("Tharsis Tholus", 4, -1, steel(1)),
        _ocean(5, -1, steel(2)),

        _land(0, -2),
        _land(1, -2, plants(2)),
        BoardSpace(
            TileLocation.on_mars(2, -2),
            frozenset({Designation.LAND}),
            special_locations=frozenset({SpecialLocation.NOCTIS_CITY}),
            placement_bonus=(plants(2),),
            name="Noctis City",
        ),
        _land(3, -2, plants(1)),
        _land(4, -2),
        _land(5, -2),
        _land(6, -2),

        _land(0, -3, steel(2)),
        _land(1, -3),
        _land(2, -3, plants(1)),
        _ocean(3, -3, plants(2)),
        _land(4, -3, plants(1)),
        _land(5, -3),
        _land(6, -3),
        _ocean(7, -3, draw_card(1)),

        _land(0, -4, steel(1)),
        _land(1, -4),
        _land(2, -4),
        _land(3, -4, plants(1)),
        _ocean(4, -4, plants(2)),
        _land(5, -4, plants(2)),
        _land(6, -4),
        _land(7, -4),
        _ocean(8, -4),

        _land(1, -5, steel(2)),
        _land(2, -5),
        _land(3, -5),
        _land(4, -5, plants(1)),
        _ocean(5, -5, plants(2)),
        _land(6, -5, plants(1)),
        _land(7, -5),
        _ocean(8, -5, draw_card(2)),

        _land(2, -6),
        _land(3, -6, draw_card(1)),
        _land(4, -6),
        _ocean(5, -6, plants(1)),
        _land(6, -6, plants(2)),
        _land(7, -6, plants(1)),
        _land(8, -6, steel(1)),

        _land(3, -7),
        _land(4, -7),
        _land(5, -7, plants(1)),
        _ocean(6, -7, plants(1)),
        _land(7, -7, plants(2)),
        _ocean(8, -7, plants(2)),

        _ocean(4, -8, titanium(2)),
        _land(5, -8, titanium(1)),
        _land(6, -8),
        _ocean(7, -8, plants(1)),
        _land(8, -8, plants(2)),

        _off_mars("Phobos Space Haven", SpecialLocation.PHOBOS_SPACE_HAVEN),
        _off_mars("Ganymede Colony", SpecialLocation.GANYMEDE_COLONY),
    ]


def standard_board() -> MarsBoard:
    """A fresh, empty standard board."""
    return MarsBoard(spaces={space.location: space for space in standard_spaces()})
