"""
Coordinates - Hex-grid geometry of the Mars board.

Cube coordinates with the third axis dropped: every point satisfies
x + y + z = 0, so z = -(x + y) is derived.
- (0, 0) is the left-most hex of the top row
- x increases toward the bottom-right, y decreases downward
- the center row has z = 0
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Iterator

MIN_X, MAX_X = 0, 8
MIN_Y, MAX_Y = -8, 0
MIN_Z, MAX_Z = -4, 4

# Clockwise, starting from the "+x, -y" direction
NEIGHBOR_OFFSETS: tuple[tuple[int, int], ...] = (
    (1, -1),
    (0, -1),
    (-1, 0),
    (-1, 1),
    (0, 1),
    (1, 0),
)


@dataclass(frozen=True, order=True)
class Coordinates:
    """A point on the hex grid."""
    x: int
    y: int

    @property
    def z(self) -> int:
        return -(self.x + self.y)

    def is_in_bounds(self) -> bool:
        return (
            MIN_X <= self.x <= MAX_X
            and MIN_Y <= self.y <= MAX_Y
            and MIN_Z <= self.z <= MAX_Z
        )

    def neighbors_within_bounds(self) -> Iterator[Coordinates]:
        """Yield the in-bounds neighbors, in fixed clockwise order."""
        for dx, dy in NEIGHBOR_OFFSETS:
            neighbor = Coordinates(self.x + dx, self.y + dy)
            if neighbor.is_in_bounds():
                yield neighbor

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


class SpecialLocation(str, Enum):
    """Named locations some tiles are tied to."""
    NOCTIS_CITY = "noctis_city"
    PHOBOS_SPACE_HAVEN = "phobos_space_haven"
    GANYMEDE_COLONY = "ganymede_colony"
    VOLCANIC_AREA = "volcanic_area"


@dataclass(frozen=True)
class TileLocation:
    """
    Where a tile can sit: a hex on Mars, or a named off-Mars location.

    Exactly one of `coordinates` / `special` is set.
    """
    coordinates: Coordinates | None = None
    special: SpecialLocation | None = None

    def __post_init__(self):
        if (self.coordinates is None) == (self.special is None):
            raise ValueError("TileLocation needs exactly one of coordinates / special")

    @classmethod
    def on_mars(cls, x: int, y: int) -> TileLocation:
        return cls(coordinates=Coordinates(x, y))

    @classmethod
    def off_mars(cls, special: SpecialLocation) -> TileLocation:
        return cls(special=special)

    @property
    def is_on_mars(self) -> bool:
        return self.coordinates is not None

    def neighbors(self) -> Iterator[TileLocation]:
        """Adjacent on-Mars locations; off-Mars locations have none."""
        if self.coordinates is None:
            return
        for neighbor in self.coordinates.neighbors_within_bounds():
            yield TileLocation(coordinates=neighbor)

    def sort_key(self) -> tuple:
        if self.coordinates is not None:
            return (0, self.coordinates.x, self.coordinates.y, "")
        return (1, 0, 0, self.special.value)

    def __str__(self) -> str:
        if self.coordinates is not None:
            return str(self.coordinates)
        return self.special.value
