"""Mini README: Route planning subsystem for detected airplanes.

Exports the pure search building blocks (neighbours, direction filter,
breadth-first search) and the ``FlightPlanner`` that wires them to the game
services.
"""

from .direction import direction_of, filter_behind
from .pathing import RouteSearchResult, SearchOutcome, bfs, neighbours
from .planner import FlightPlanner, airport_for_airplane

__all__ = [
    "FlightPlanner",
    "RouteSearchResult",
    "SearchOutcome",
    "airport_for_airplane",
    "bfs",
    "direction_of",
    "filter_behind",
    "neighbours",
]
