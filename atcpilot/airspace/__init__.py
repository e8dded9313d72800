"""Mini README: Airspace data model and grid coordinate helpers.

``models`` holds the read-only snapshots received from the game server and
``grid`` translates between signed longitude/latitude offsets and positions
in the map's flat routing grid.
"""

from .grid import (
    center_offset,
    contains,
    grid_index,
    latitude_bounds,
    longitude_bounds,
    node_at,
    standardize,
)
from .models import Airplane, Airport, Direction, Map, Node, Point, ValidationResult

__all__ = [
    "Airplane",
    "Airport",
    "Direction",
    "Map",
    "Node",
    "Point",
    "ValidationResult",
    "center_offset",
    "contains",
    "grid_index",
    "latitude_bounds",
    "longitude_bounds",
    "node_at",
    "standardize",
]
