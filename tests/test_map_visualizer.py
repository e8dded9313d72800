"""Mini README: Tests for the text map renderer."""

from atcpilot.airspace import Map, Node
from atcpilot.export import render_flight_plan


def test_render_marks_airport_plan_and_restricted_cells():
    airspace_map = Map.build(3, 3, restricted=[(-1, 1)], airports={"red": (1, 1)})
    rendering = render_flight_plan(airspace_map, [Node(-1, -1), Node(0, 0)])
    assert rendering.split("\n") == [
        "      *   A ",
        "  *   2   * ",
        "  1   *   * ",
    ]
