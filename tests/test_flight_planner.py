"""Mini README: Tests for the flight plan orchestrator.

Structure:
    * RecordingServices - test double recording every collaborator call.
    * Scenario tests driving ``FlightPlanner`` through the success path, the
      soft failures that keep the current plan and the fatal event errors.

Coroutines are executed with ``asyncio.run`` so no async test plugin is
required.
"""

from __future__ import annotations

import asyncio
import logging
from typing import List, Optional, Sequence, Tuple

import pytest

from atcpilot.airspace import Airplane, Map, Node, Point, ValidationResult
from atcpilot.control import AirTrafficServices, AirplaneDetected
from atcpilot.control.providers import SimulatedAirspace
from atcpilot.exceptions import MissingAirplaneError, UnknownDestinationError
from atcpilot.export import render_flight_plan
from atcpilot.route_planning import FlightPlanner

CELL = 32.0


class RecordingServices(AirTrafficServices):
    """In-memory collaborator that records submissions."""

    provider_name = "recording"

    def __init__(self, airspace_map: Optional[Map], *, errors: Tuple[str, ...] = ()) -> None:
        super().__init__()
        self.airspace_map = airspace_map
        self.errors = errors
        self.submitted: List[Tuple[str, List[Node]]] = []

    async def start_game(self) -> None:
        return None

    async def get_map(self) -> Optional[Map]:
        return self.airspace_map

    async def node_to_point(self, node: Node) -> Optional[Point]:
        return Point(node.longitude * CELL, node.latitude * CELL)

    async def update_flight_plan(self, airplane_id: str, flight_plan: Sequence[Node]) -> ValidationResult:
        self.submitted.append((airplane_id, list(flight_plan)))
        return ValidationResult(errors=self.errors)

    async def events(self):
        return
        yield


def airplane(next_node=(-2, -2), point=(-3, -2), tag="red", plane_id="AT-0001") -> Airplane:
    return Airplane(
        id=plane_id,
        tag=tag,
        point=None if point is None else Point(point[0] * CELL, point[1] * CELL),
        flight_plan=(Node(*next_node),) if next_node is not None else (),
    )


def coords(nodes):
    return [(node.longitude, node.latitude) for node in nodes]


def test_detected_airplane_gets_shortest_plan_submitted() -> None:
    simulator = SimulatedAirspace(airspace_map=Map.build(5, 5, airports={"red": (2, 2)}), cell_size=CELL)
    plane = airplane()
    simulator.spawn_airplane(plane)
    planner = FlightPlanner(simulator)

    plan = asyncio.run(planner.handle_airplane_detected(AirplaneDetected(airplane=plane)))

    assert coords(plan) == [(-2, -2), (-1, -1), (0, 0), (1, 1), (2, 2)]
    assert simulator.flight_plans["AT-0001"] == tuple(plan)


def test_missing_airplane_is_a_hard_failure() -> None:
    services = RecordingServices(Map.build(5, 5, airports={"red": (2, 2)}))
    planner = FlightPlanner(services)

    with pytest.raises(MissingAirplaneError):
        asyncio.run(planner.handle_airplane_detected(AirplaneDetected(airplane=None)))
    assert services.submitted == []


def test_missing_map_abandons_planning() -> None:
    services = RecordingServices(None)
    planner = FlightPlanner(services)

    result = asyncio.run(planner.handle_airplane_detected(AirplaneDetected(airplane=airplane())))

    assert result is None
    assert services.submitted == []


def test_unmatched_destination_aborts_without_submission() -> None:
    services = RecordingServices(Map.build(5, 5, airports={"blue": (2, 2)}))
    planner = FlightPlanner(services)

    with pytest.raises(UnknownDestinationError):
        asyncio.run(planner.handle_airplane_detected(AirplaneDetected(airplane=airplane(tag="red"))))
    assert services.submitted == []


def test_unknown_airplane_point_keeps_current_plan() -> None:
    airspace_map = Map.build(5, 5, airports={"red": (2, 2)})
    services = RecordingServices(airspace_map)
    planner = FlightPlanner(services)
    plane = airplane(point=None)

    plan = asyncio.run(planner.generate_flight_plan(plane, airspace_map.airports[0], airspace_map))

    assert plan == list(plane.flight_plan)


def test_empty_committed_plan_is_returned_unchanged() -> None:
    services = RecordingServices(Map.build(5, 5, airports={"red": (2, 2)}))
    planner = FlightPlanner(services)

    plan = asyncio.run(planner.handle_airplane_detected(AirplaneDetected(airplane=airplane(next_node=None))))

    assert plan == []
    assert services.submitted == []


def test_airplane_already_at_airport_submits_nothing() -> None:
    services = RecordingServices(Map.build(5, 5, airports={"red": (2, 2)}))
    planner = FlightPlanner(services)

    plan = asyncio.run(
        planner.handle_airplane_detected(AirplaneDetected(airplane=airplane(next_node=(2, 2), point=(1, 2))))
    )

    assert plan == []
    assert services.submitted == []


def test_unreachable_airport_submits_single_node_fallback() -> None:
    services = RecordingServices(Map.build(5, 5, restricted=[(1, 1), (1, 2), (2, 1)], airports={"red": (2, 2)}))
    planner = FlightPlanner(services)

    asyncio.run(planner.handle_airplane_detected(AirplaneDetected(airplane=airplane())))

    assert services.submitted == [("AT-0001", [Node(-2, -2)])]


def test_rejected_plan_is_logged_not_raised(caplog) -> None:
    services = RecordingServices(Map.build(5, 5, airports={"red": (2, 2)}), errors=("sharp turn",))
    planner = FlightPlanner(services)

    with caplog.at_level(logging.ERROR):
        plan = asyncio.run(planner.handle_airplane_detected(AirplaneDetected(airplane=airplane())))

    assert len(plan) == 5
    assert len(services.submitted) == 1
    assert "sharp turn" in caplog.text


def test_reversal_cell_only_dropped_when_enforced() -> None:
    """An airplane arriving from the north-east may not route back through that cell."""

    airspace_map = Map.build(5, 5, airports={"red": (2, 2)})
    plane = airplane(next_node=(0, 0), point=(1, 1))
    airport = airspace_map.airports[0]

    relaxed = FlightPlanner(RecordingServices(airspace_map))
    strict = FlightPlanner(RecordingServices(airspace_map), enforce_no_reversal=True)

    relaxed_plan = asyncio.run(relaxed.generate_flight_plan(plane, airport, airspace_map))
    strict_plan = asyncio.run(strict.generate_flight_plan(plane, airport, airspace_map))

    assert coords(relaxed_plan) == [(0, 0), (1, 1), (2, 2)]
    assert coords(strict_plan) == [(0, 0), (1, 0), (2, 1), (2, 2)]


def test_planner_renders_plans_by_default_and_logs_provider_metadata(caplog) -> None:
    services = RecordingServices(Map.build(5, 5, airports={"red": (2, 2)}))

    with caplog.at_level(logging.DEBUG, logger="atcpilot.route_planning.planner"):
        planner = FlightPlanner(services)
        asyncio.run(planner.handle_airplane_detected(AirplaneDetected(airplane=airplane())))

    assert planner.visualizer is render_flight_plan
    assert "'provider': 'recording'" in caplog.text
    assert "  4 " in caplog.text


def test_planner_without_visualizer_skips_rendering(caplog) -> None:
    services = RecordingServices(Map.build(5, 5, airports={"red": (2, 2)}))
    planner = FlightPlanner(services, visualizer=None)

    with caplog.at_level(logging.DEBUG, logger="atcpilot.route_planning.planner"):
        asyncio.run(planner.handle_airplane_detected(AirplaneDetected(airplane=airplane())))

    assert "Flight plan for AT-0001:" not in caplog.text
    assert len(services.submitted) == 1
