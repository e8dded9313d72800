"""Mini README: Immutable airspace snapshots.

Structure:
    * Node - routing grid cell addressed by longitude/latitude offsets.
    * Point - continuous position of an airplane or cell centre.
    * Direction - compass headings with unit vectors on the grid.
    * Airport / Airplane - tagged locations and the aircraft routed to them.
    * Map - grid dimensions, row-major routing grid and airports.
    * ValidationResult - server verdict on a submitted flight plan.

All objects are frozen; the planner only reads and compares them. A fresh
snapshot is fetched for every detection event.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterable, Optional, Tuple


@dataclass(frozen=True, slots=True)
class Node:
    """Routing grid cell. Equality and hashing use the coordinates only."""

    longitude: int
    latitude: int
    restricted: bool = field(default=False, compare=False)

    def __str__(self) -> str:
        return f"({self.longitude}, {self.latitude})"


@dataclass(frozen=True, slots=True)
class Point:
    """Continuous position on the game canvas."""

    x: float
    y: float


class Direction(str, Enum):
    """Eight compass headings on the routing grid."""

    NORTH = "north"
    NORTH_EAST = "north_east"
    EAST = "east"
    SOUTH_EAST = "south_east"
    SOUTH = "south"
    SOUTH_WEST = "south_west"
    WEST = "west"
    NORTH_WEST = "north_west"

    @property
    def unit_vector(self) -> Tuple[int, int]:
        """Return the ``(Δlongitude, Δlatitude)`` step for this heading."""

        return _UNIT_VECTORS[self]


_UNIT_VECTORS: Dict[Direction, Tuple[int, int]] = {
    Direction.NORTH: (0, 1),
    Direction.NORTH_EAST: (1, 1),
    Direction.EAST: (1, 0),
    Direction.SOUTH_EAST: (1, -1),
    Direction.SOUTH: (0, -1),
    Direction.SOUTH_WEST: (-1, -1),
    Direction.WEST: (-1, 0),
    Direction.NORTH_WEST: (-1, 1),
}


@dataclass(frozen=True, slots=True)
class Airport:
    """Landing location matched to airplanes through ``tag``."""

    tag: str
    node: Node


@dataclass(frozen=True, slots=True)
class Airplane:
    """Airplane snapshot; ``flight_plan[0]`` is the next node it flies to."""

    id: str
    tag: str
    point: Optional[Point] = None
    flight_plan: Tuple[Node, ...] = ()


@dataclass(frozen=True, slots=True)
class Map:
    """Routing grid snapshot stored row-major, southernmost row first."""

    width: int
    height: int
    routing_grid: Tuple[Node, ...]
    airports: Tuple[Airport, ...] = ()

    def __post_init__(self) -> None:
        if self.width < 1 or self.height < 1:
            raise ValueError("Map dimensions must be positive")
        if len(self.routing_grid) != self.width * self.height:
            raise ValueError(
                f"Routing grid holds {len(self.routing_grid)} nodes, expected {self.width * self.height}"
            )

    @classmethod
    def build(
        cls,
        width: int,
        height: int,
        *,
        restricted: Iterable[Tuple[int, int]] = (),
        airports: Optional[Dict[str, Tuple[int, int]]] = None,
    ) -> "Map":
        """Create a map from dimensions, restricted coordinates and airport tags."""

        blocked = set(restricted)
        half_width = (width - 1) // 2
        half_height = (height - 1) // 2
        grid = tuple(
            Node(longitude=longitude, latitude=latitude, restricted=(longitude, latitude) in blocked)
            for latitude in range(-half_height, height - half_height)
            for longitude in range(-half_width, width - half_width)
        )
        airport_nodes = tuple(
            Airport(tag=tag, node=Node(longitude=longitude, latitude=latitude))
            for tag, (longitude, latitude) in (airports or {}).items()
        )
        return cls(width=width, height=height, routing_grid=grid, airports=airport_nodes)


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Errors reported by the server for a submitted flight plan."""

    errors: Tuple[str, ...] = ()

    @property
    def ok(self) -> bool:
        return not self.errors
