"""Mini README: Event loop driving the flight planner.

Structure:
    * TrafficController - consumes the event stream and schedules planning.

Each detection becomes its own ``asyncio`` task, so plans for different
airplanes overlap while they wait on the server. Planning tasks only read
the shared map and write their own airplane's plan, which is why no lock
guards them. A ``GameStopped`` notification ends the run immediately and
cancels whatever is still in flight.
"""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING, Optional, Set

from ..logging_utils import get_logger
from .base import AirTrafficServices
from .events import AirplaneDetected, GameStopped

if TYPE_CHECKING:
    from ..route_planning.planner import FlightPlanner

LOGGER = get_logger(__name__)


class TrafficController:
    """Subscribe to game events and plan a route for every detected airplane."""

    def __init__(self, services: AirTrafficServices, planner: "FlightPlanner") -> None:
        self.services = services
        self.planner = planner
        self._in_flight: Set["asyncio.Task[object]"] = set()

    async def run(self) -> Optional[int]:
        """Play one game; return the final score, or ``None`` if the stream closed."""

        await self.services.start_game()
        async for event in self.services.events():
            if isinstance(event, AirplaneDetected):
                self._schedule(event)
            elif isinstance(event, GameStopped):
                LOGGER.info("Game stopped! Score: %s", event.score)
                for task in list(self._in_flight):
                    task.cancel()
                return event.score
            else:
                LOGGER.warning("Ignoring unknown event %r", event)

        LOGGER.info("Event stream closed.")
        if self._in_flight:
            await asyncio.gather(*self._in_flight, return_exceptions=True)
        return None

    def _schedule(self, event: AirplaneDetected) -> None:
        task = asyncio.create_task(self.planner.handle_airplane_detected(event))
        self._in_flight.add(task)
        task.add_done_callback(self._finished)

    def _finished(self, task: "asyncio.Task[object]") -> None:
        self._in_flight.discard(task)
        if task.cancelled():
            return
        error = task.exception()
        if error is not None:
            LOGGER.error("Dropped detection event: %s", error, exc_info=error)
