"""Mini README: Grid coordinate model.

Structure:
    * center_offset / longitude_bounds / latitude_bounds - grid extents.
    * contains - bounds check for signed coordinates.
    * standardize / grid_index - signed offsets to zero-based positions.
    * node_at - resolve a node from the map's flat routing grid.

The game addresses cells by offsets from the grid centre. Centre offsets
truncate, so an even-sized grid has one more cell on the positive side of
the origin than on the negative side. Every function here is pure.
"""

from __future__ import annotations

from typing import Tuple

from ..exceptions import OffGridError
from .models import Map, Node


def center_offset(airspace_map: Map) -> Tuple[int, int]:
    """Return the ``(x, y)`` position of the origin cell."""

    return (airspace_map.width - 1) // 2, (airspace_map.height - 1) // 2


def longitude_bounds(airspace_map: Map) -> Tuple[int, int]:
    """Inclusive ``(min, max)`` longitude present on the map."""

    half_width, _ = center_offset(airspace_map)
    return -half_width, airspace_map.width - 1 - half_width


def latitude_bounds(airspace_map: Map) -> Tuple[int, int]:
    """Inclusive ``(min, max)`` latitude present on the map."""

    _, half_height = center_offset(airspace_map)
    return -half_height, airspace_map.height - 1 - half_height


def standardize(airspace_map: Map, longitude: int, latitude: int) -> Tuple[int, int]:
    """Convert signed offsets into zero-based ``(x, y)`` grid coordinates."""

    half_width, half_height = center_offset(airspace_map)
    return longitude + half_width, latitude + half_height


def contains(airspace_map: Map, longitude: int, latitude: int) -> bool:
    x, y = standardize(airspace_map, longitude, latitude)
    return 0 <= x < airspace_map.width and 0 <= y < airspace_map.height


def grid_index(airspace_map: Map, longitude: int, latitude: int) -> int:
    """Index of the cell in the row-major routing grid."""

    if not contains(airspace_map, longitude, latitude):
        raise OffGridError(
            f"({longitude}, {latitude}) lies outside the {airspace_map.width}x{airspace_map.height} grid"
        )
    x, y = standardize(airspace_map, longitude, latitude)
    return y * airspace_map.width + x


def node_at(airspace_map: Map, longitude: int, latitude: int) -> Node:
    """Return the routing grid node at the given offsets."""

    return airspace_map.routing_grid[grid_index(airspace_map, longitude, latitude)]
