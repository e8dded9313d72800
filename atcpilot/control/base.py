"""Mini README: Abstract contract for the game server services.

Structure:
    * AirTrafficServices - abstract interface implemented by providers.

The planner never talks to a transport directly; it receives an
``AirTrafficServices`` instance and awaits its map, node-to-point and
flight-plan calls. Providers decide how those calls reach the server.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import AsyncIterator, Dict, Optional, Sequence

from ..airspace.models import Map, Node, Point, ValidationResult
from ..logging_utils import get_logger
from .events import Event

LOGGER = get_logger(__name__)


class AirTrafficServices(ABC):
    """Base interface for game server integrations."""

    provider_name: str = "generic"

    def __init__(self, connection_string: Optional[str] = None) -> None:
        self.connection_string = connection_string
        LOGGER.debug(
            "Initialising %s provider with connection '%s'", self.provider_name, connection_string
        )

    @abstractmethod
    async def start_game(self) -> None:
        """Ask the server to start a new game."""

    @abstractmethod
    async def get_map(self) -> Optional[Map]:
        """Return the current map snapshot, or ``None`` when unavailable."""

    @abstractmethod
    async def node_to_point(self, node: Node) -> Optional[Point]:
        """Return the canvas position of ``node``, or ``None`` when unknown."""

    @abstractmethod
    async def update_flight_plan(self, airplane_id: str, flight_plan: Sequence[Node]) -> ValidationResult:
        """Submit a new flight plan and return the server's verdict."""

    @abstractmethod
    def events(self) -> AsyncIterator[Event]:
        """Stream game events until the game stops or the stream closes."""

    def metadata(self) -> Dict[str, str]:
        """Return diagnostic metadata for logs and the planning service."""

        return {
            "provider": self.provider_name,
            "connection": self.connection_string or "not configured",
        }
