"""Mini README: Text rendering of a map and a flight plan.

Structure:
    * render_flight_plan - draw the grid with airports, plan order and
      restricted cells.

Rows run from north (top) to south, columns from west to east. Each cell is
four characters wide: ``  A `` marks an airport, a right-aligned number the
1-based position in the plan, ``  * `` an open cell and blanks a restricted
cell.
"""

from __future__ import annotations

from typing import Dict, List, Sequence, Set, Tuple

from ..airspace.grid import latitude_bounds, longitude_bounds
from ..airspace.models import Map, Node


def render_flight_plan(airspace_map: Map, flight_plan: Sequence[Node]) -> str:
    """Return a multi-line drawing of ``flight_plan`` on ``airspace_map``."""

    restricted: Set[Tuple[int, int]] = {
        (node.longitude, node.latitude) for node in airspace_map.routing_grid if node.restricted
    }
    airports: Set[Tuple[int, int]] = {
        (airport.node.longitude, airport.node.latitude) for airport in airspace_map.airports
    }
    plan_order: Dict[Tuple[int, int], int] = {}
    for index, node in enumerate(flight_plan):
        plan_order.setdefault((node.longitude, node.latitude), index)

    min_lon, max_lon = longitude_bounds(airspace_map)
    min_lat, max_lat = latitude_bounds(airspace_map)
    rows: List[str] = []
    for latitude in range(max_lat, min_lat - 1, -1):
        cells = []
        for longitude in range(min_lon, max_lon + 1):
            key = (longitude, latitude)
            if key in restricted:
                cells.append("    ")
            elif key in airports:
                cells.append("  A ")
            elif key in plan_order:
                cells.append(f" {plan_order[key] + 1:>2} ")
            else:
                cells.append("  * ")
        rows.append("".join(cells))
    return "\n".join(rows)
