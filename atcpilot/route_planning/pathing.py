"""Mini README: Neighbour enumeration and breadth-first route search.

Structure:
    * neighbours - unrestricted cells in the 3x3 box around a node.
    * SearchOutcome / RouteSearchResult - tagged result of a search.
    * bfs - shortest path search over an implicit grid graph.

The search keeps whole partial paths in its queue, so the first path that
reaches the goal is returned as-is. Expansion follows the neighbour order
(latitude ascending, then longitude ascending), which makes the choice
between equally short routes deterministic.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Deque, List, Sequence, Set, Tuple

from ..airspace.grid import latitude_bounds, longitude_bounds, node_at
from ..airspace.models import Map, Node
from ..logging_utils import get_logger

LOGGER = get_logger(__name__)

NeighbourFn = Callable[[Node], Sequence[Node]]


def neighbours(node: Node, airspace_map: Map) -> List[Node]:
    """Return the unrestricted cells surrounding ``node``, clipped to the map."""

    min_lon, max_lon = longitude_bounds(airspace_map)
    min_lat, max_lat = latitude_bounds(airspace_map)
    longitudes = range(max(min_lon, node.longitude - 1), min(max_lon, node.longitude + 1) + 1)
    latitudes = range(max(min_lat, node.latitude - 1), min(max_lat, node.latitude + 1) + 1)

    found: List[Node] = []
    for latitude in latitudes:
        for longitude in longitudes:
            if longitude == node.longitude and latitude == node.latitude:
                continue
            candidate = node_at(airspace_map, longitude, latitude)
            if not candidate.restricted:
                found.append(candidate)
    return found


class SearchOutcome(str, Enum):
    """How a route search ended."""

    FOUND = "found"
    UNREACHABLE = "unreachable"
    ALREADY_ARRIVED = "already_arrived"


@dataclass(frozen=True, slots=True)
class RouteSearchResult:
    """Search outcome together with the route to submit.

    ``UNREACHABLE`` carries only the start node and ``ALREADY_ARRIVED`` an
    empty path, matching what the game expects for those situations.
    """

    outcome: SearchOutcome
    path: Tuple[Node, ...] = ()

    @property
    def found(self) -> bool:
        return self.outcome is SearchOutcome.FOUND

    def as_flight_plan(self) -> List[Node]:
        return list(self.path)


def bfs(start: Node, goal: Node, neighbour_fn: NeighbourFn) -> RouteSearchResult:
    """Breadth-first search from ``start`` to ``goal``."""

    if start == goal:
        LOGGER.warning("Start %s is already the goal", start)
        return RouteSearchResult(SearchOutcome.ALREADY_ARRIVED)

    LOGGER.debug("Searching for a route from %s to %s", start, goal)
    visited: Set[Node] = {start}
    queue: Deque[Tuple[Node, ...]] = deque([(start,)])
    while queue:
        path = queue.popleft()
        for neighbour in neighbour_fn(path[-1]):
            candidate = path + (neighbour,)
            if neighbour == goal:
                return RouteSearchResult(SearchOutcome.FOUND, candidate)
            if neighbour not in visited:
                visited.add(neighbour)
                queue.append(candidate)

    LOGGER.error("No path from %s to %s", start, goal)
    return RouteSearchResult(SearchOutcome.UNREACHABLE, (start,))
