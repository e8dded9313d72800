"""Mini README: Flight plan orchestration for detected airplanes.

Structure:
    * airport_for_airplane - resolve the destination airport by tag.
    * FlightPlanner - fetches state from the game services, searches for a
      route and submits it.

Handling a detection runs strictly in order: validate the event, fetch the
map, resolve the destination, work out the direction of travel, search and
submit. Missing server data abandons the plan quietly and keeps whatever
the airplane is already flying; only a malformed event or an unknown
destination raise.

Airplanes are not allowed to turn straight back. With
``enforce_no_reversal`` the cell behind the airplane's next node is left out
of the search. For an airplane heading north (^) the usable neighbours of
its next node are::

    * * *
    * ^ *
    * x *
"""

from __future__ import annotations

import logging
from typing import Callable, List, Optional, Sequence

from ..airspace.models import Airplane, Airport, Direction, Map, Node
from ..control.base import AirTrafficServices
from ..control.events import AirplaneDetected
from ..exceptions import MissingAirplaneError, UnknownDestinationError
from ..export.map_visualizer import render_flight_plan
from ..logging_utils import get_logger
from .direction import direction_of, filter_behind
from .pathing import NeighbourFn, SearchOutcome, bfs, neighbours

LOGGER = get_logger(__name__)

Visualizer = Callable[[Map, Sequence[Node]], str]


def airport_for_airplane(airspace_map: Map, airplane: Airplane) -> Airport:
    """Return the airport whose tag matches the airplane's tag."""

    for airport in airspace_map.airports:
        if airport.tag == airplane.tag:
            return airport
    raise UnknownDestinationError(f"No matching airport for airplane {airplane.id} (tag '{airplane.tag}')")


class FlightPlanner:
    """Compute and submit flight plans using the injected game services."""

    def __init__(
        self,
        services: AirTrafficServices,
        *,
        enforce_no_reversal: bool = False,
        visualizer: Optional[Visualizer] = render_flight_plan,
    ) -> None:
        self.services = services
        self.enforce_no_reversal = enforce_no_reversal
        self.visualizer = visualizer
        LOGGER.debug(
            "Initialised FlightPlanner with %s enforce_no_reversal=%s",
            services.metadata(),
            enforce_no_reversal,
        )

    async def handle_airplane_detected(self, event: AirplaneDetected) -> Optional[List[Node]]:
        """Plan and submit a route; ``None`` when planning was abandoned."""

        airplane = event.airplane
        if airplane is None:
            raise MissingAirplaneError("Received AirplaneDetected event without an airplane")

        airspace_map = await self.services.get_map()
        if airspace_map is None:
            LOGGER.error("No map available; abandoning plan for airplane %s", airplane.id)
            return None

        airport = airport_for_airplane(airspace_map, airplane)
        next_node = airplane.flight_plan[0] if airplane.flight_plan else None
        LOGGER.info("Detected airplane %s heading towards %s", airplane.id, next_node)

        flight_plan = await self.generate_flight_plan(airplane, airport, airspace_map)
        if not flight_plan:
            LOGGER.info("Nothing to submit for airplane %s", airplane.id)
            return flight_plan

        LOGGER.info("New flight plan acquired for %s: %s", airplane.id, " -> ".join(map(str, flight_plan)))
        if self.visualizer is not None and LOGGER.isEnabledFor(logging.DEBUG):
            LOGGER.debug("Flight plan for %s:\n%s", airplane.id, self.visualizer(airspace_map, flight_plan))

        result = await self.services.update_flight_plan(airplane.id, flight_plan)
        if not result.ok:
            LOGGER.error("Flight plan for %s invalid. Errors: %s", airplane.id, "; ".join(result.errors))
        else:
            LOGGER.info("Updated %s's flight plan.", airplane.id)
        return flight_plan

    async def generate_flight_plan(self, airplane: Airplane, airport: Airport, airspace_map: Map) -> List[Node]:
        """Search a route from the airplane's next node to ``airport``.

        Returns the airplane's current plan unchanged whenever the direction
        of travel cannot be determined.
        """

        current_plan = list(airplane.flight_plan)
        if not current_plan:
            LOGGER.error("No node in the flight plan of %s to start from", airplane.id)
            return current_plan
        next_node = current_plan[0]

        next_point = await self.services.node_to_point(next_node)
        if next_point is None:
            LOGGER.error("Can't determine point of node %s", next_node)
            return current_plan
        if airplane.point is None:
            LOGGER.error("Can't determine point of airplane %s", airplane.id)
            return current_plan

        heading = direction_of(airplane.point, next_point)
        LOGGER.debug("Airplane %s approaches %s from the %s", airplane.id, next_node, heading.value)
        result = bfs(next_node, airport.node, self.neighbour_function(airspace_map, heading, next_node))
        if result.outcome is SearchOutcome.UNREACHABLE:
            LOGGER.warning("Airport %s unreachable for %s; holding at %s", airport.tag, airplane.id, next_node)
        return result.as_flight_plan()

    def neighbour_function(self, airspace_map: Map, heading: Direction, origin: Node) -> NeighbourFn:
        """Bind the neighbour enumerator to the map, dropping the reversal cell if enforced."""

        is_allowed = filter_behind(heading, origin)

        def neighbour_fn(node: Node) -> List[Node]:
            found = neighbours(node, airspace_map)
            if self.enforce_no_reversal:
                return [candidate for candidate in found if is_allowed(candidate)]
            return found

        return neighbour_fn
