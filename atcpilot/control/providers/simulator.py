"""Mini README: In-memory stand-in for the auto traffic control server.

Structure:
    * demo_map - small map with a restricted block and two airports.
    * SimulatedAirspace - provider serving a fixed map and scripted events.

The simulator lets the controller run without a game server. It converts
nodes to points with a fixed cell size, validates submitted flight plans
the way the server does for the common mistakes, and records every
accepted plan so callers can inspect them.
"""

from __future__ import annotations

import asyncio
from typing import AsyncIterator, Dict, Iterable, List, Optional, Sequence, Tuple

from ...airspace.grid import contains, node_at
from ...airspace.models import Airplane, Map, Node, Point, ValidationResult
from ...logging_utils import get_logger
from ..base import AirTrafficServices
from ..events import AirplaneDetected, Event, GameStopped
from ..registry import REGISTRY

LOGGER = get_logger(__name__)

DEFAULT_CELL_SIZE = 32.0


def demo_map() -> Map:
    """11x11 map with a restricted block around the origin."""

    return Map.build(
        11,
        11,
        restricted=[(0, 0), (0, 1), (1, 0), (-1, 0), (0, -1)],
        airports={"red": (-3, 2), "blue": (3, -3)},
    )


def demo_airplanes() -> List[Airplane]:
    return [
        Airplane(
            id="AT-0001",
            tag="red",
            point=Point(5 * DEFAULT_CELL_SIZE, -4 * DEFAULT_CELL_SIZE),
            flight_plan=(Node(4, -4),),
        ),
        Airplane(
            id="AT-0002",
            tag="blue",
            point=Point(-5 * DEFAULT_CELL_SIZE, 5 * DEFAULT_CELL_SIZE),
            flight_plan=(Node(-4, 4),),
        ),
    ]


class SimulatedAirspace(AirTrafficServices):
    """Provider that keeps the whole game in memory."""

    provider_name = "simulator"

    def __init__(
        self,
        connection_string: Optional[str] = None,
        *,
        airspace_map: Optional[Map] = None,
        cell_size: float = DEFAULT_CELL_SIZE,
        event_interval: float = 0.0,
    ) -> None:
        super().__init__(connection_string)
        self.airspace_map = airspace_map if airspace_map is not None else demo_map()
        self.cell_size = cell_size
        self.event_interval = event_interval
        self.started = False
        self.airplanes: Dict[str, Airplane] = {}
        self.flight_plans: Dict[str, Tuple[Node, ...]] = {}
        self._queue: "asyncio.Queue[Event]" = asyncio.Queue()

    def load_demo_scenario(self, airplanes: Optional[Iterable[Airplane]] = None, *, score: int = 0) -> None:
        """Queue detections for the demo airplanes followed by a game stop."""

        for airplane in airplanes if airplanes is not None else demo_airplanes():
            self.spawn_airplane(airplane)
        self.stop_game(score)

    def spawn_airplane(self, airplane: Airplane) -> None:
        self.airplanes[airplane.id] = airplane
        self._queue.put_nowait(AirplaneDetected(airplane=airplane))
        LOGGER.debug("Queued detection of airplane %s", airplane.id)

    def stop_game(self, score: int) -> None:
        self._queue.put_nowait(GameStopped(score=score))

    async def start_game(self) -> None:
        self.started = True
        LOGGER.info("Started a new simulated game")

    async def get_map(self) -> Optional[Map]:
        return self.airspace_map

    async def node_to_point(self, node: Node) -> Optional[Point]:
        if not contains(self.airspace_map, node.longitude, node.latitude):
            return None
        return Point(node.longitude * self.cell_size, node.latitude * self.cell_size)

    async def update_flight_plan(self, airplane_id: str, flight_plan: Sequence[Node]) -> ValidationResult:
        errors = self.validate_flight_plan(airplane_id, flight_plan)
        if not errors:
            self.flight_plans[airplane_id] = tuple(flight_plan)
            LOGGER.debug("Accepted flight plan for %s with %s nodes", airplane_id, len(flight_plan))
        return ValidationResult(errors=tuple(errors))

    def validate_flight_plan(self, airplane_id: str, flight_plan: Sequence[Node]) -> List[str]:
        """Return every problem the server would report for the plan."""

        if airplane_id not in self.airplanes:
            return [f"unknown airplane {airplane_id}"]
        errors: List[str] = []
        previous: Optional[Node] = None
        for node in flight_plan:
            if not contains(self.airspace_map, node.longitude, node.latitude):
                errors.append(f"node {node} is outside the map")
            elif node_at(self.airspace_map, node.longitude, node.latitude).restricted:
                errors.append(f"node {node} is restricted")
            if previous is not None and (
                max(abs(node.longitude - previous.longitude), abs(node.latitude - previous.latitude)) != 1
            ):
                errors.append(f"step from {previous} to {node} is not to a neighbouring node")
            previous = node
        return errors

    async def events(self) -> AsyncIterator[Event]:
        while True:
            # A zero-second sleep still lets scheduled planning tasks run.
            await asyncio.sleep(self.event_interval)
            event = await self._queue.get()
            yield event
            if isinstance(event, GameStopped):
                return


REGISTRY.register(SimulatedAirspace)
