"""Mini README: Direction of travel and the no-reversal neighbour filter.

Structure:
    * direction_of - bucket a displacement into one of eight headings.
    * filter_behind - predicate rejecting the cell behind an origin node.

Airplanes may not turn back on themselves. Comparing the airplane's point
with the point of its next node tells us where it came from, and
``filter_behind`` removes that cell from the neighbours of the next node.
"""

from __future__ import annotations

from typing import Callable

from ..airspace.models import Direction, Node, Point


def direction_of(origin: Point, target: Point) -> Direction:
    """Heading of ``origin`` as seen from ``target``.

    The displacement is ``origin - target``. A zero horizontal component
    with a non-positive vertical one, including identical points, resolves
    to ``SOUTH``.
    """

    dx = origin.x - target.x
    dy = origin.y - target.y
    if dx == 0:
        return Direction.NORTH if dy > 0 else Direction.SOUTH
    if dx < 0:
        if dy == 0:
            return Direction.WEST
        return Direction.SOUTH_WEST if dy < 0 else Direction.NORTH_WEST
    if dy == 0:
        return Direction.EAST
    return Direction.SOUTH_EAST if dy < 0 else Direction.NORTH_EAST


def filter_behind(direction: Direction, origin: Node) -> Callable[[Node], bool]:
    """Return a predicate that is ``False`` only for the cell behind ``origin``."""

    d_lon, d_lat = direction.unit_vector
    behind = (origin.longitude + d_lon, origin.latitude + d_lat)

    def is_allowed(node: Node) -> bool:
        return (node.longitude, node.latitude) != behind

    return is_allowed
