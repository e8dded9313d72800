"""Mini README: Tests for the route search building blocks.

Validates neighbour enumeration order and clipping, the direction and
no-reversal helpers, and the breadth-first search outcomes on small grids.
"""

from __future__ import annotations

import pytest

from atcpilot.airspace import Direction, Map, Node, Point
from atcpilot.route_planning import (
    SearchOutcome,
    bfs,
    direction_of,
    filter_behind,
    neighbours,
)


def coords(nodes):
    return [(node.longitude, node.latitude) for node in nodes]


def open_grid_neighbours(airspace_map):
    return lambda node: neighbours(node, airspace_map)


def test_interior_node_has_eight_neighbours_in_latitude_major_order():
    airspace_map = Map.build(5, 5)
    found = neighbours(Node(0, 0), airspace_map)
    assert coords(found) == [
        (-1, -1), (0, -1), (1, -1),
        (-1, 0), (1, 0),
        (-1, 1), (0, 1), (1, 1),
    ]


def test_corner_neighbours_are_clipped_to_the_grid():
    airspace_map = Map.build(5, 5)
    assert coords(neighbours(Node(-2, -2), airspace_map)) == [(-1, -2), (-2, -1), (-1, -1)]
    assert len(neighbours(Node(2, 0), airspace_map)) == 5


def test_restricted_neighbours_are_skipped():
    airspace_map = Map.build(5, 5, restricted=[(0, 1), (1, 1)])
    found = coords(neighbours(Node(0, 0), airspace_map))
    assert len(found) == 6
    assert (0, 1) not in found and (1, 1) not in found


@pytest.mark.parametrize(
    "origin,expected",
    [
        (Point(10, 0), Direction.EAST),
        (Point(-10, 0), Direction.WEST),
        (Point(0, 10), Direction.NORTH),
        (Point(0, -10), Direction.SOUTH),
        (Point(3, 4), Direction.NORTH_EAST),
        (Point(3, -4), Direction.SOUTH_EAST),
        (Point(-3, 4), Direction.NORTH_WEST),
        (Point(-3, -4), Direction.SOUTH_WEST),
    ],
)
def test_direction_of_buckets_displacement(origin, expected):
    assert direction_of(origin, Point(0, 0)) == expected


def test_direction_of_identical_points_is_south():
    """Zero displacement falls into the south bucket by convention."""

    assert direction_of(Point(7, 7), Point(7, 7)) is Direction.SOUTH


def test_filter_behind_excludes_exactly_one_neighbour():
    airspace_map = Map.build(5, 5)
    is_allowed = filter_behind(Direction.EAST, Node(0, 0))
    kept = [node for node in neighbours(Node(0, 0), airspace_map) if is_allowed(node)]
    assert len(kept) == 7
    assert (1, 0) not in coords(kept)


def test_bfs_start_equal_to_goal_has_already_arrived():
    result = bfs(Node(1, 1), Node(1, 1, restricted=True), lambda node: [Node(0, 0)])
    assert result.outcome is SearchOutcome.ALREADY_ARRIVED
    assert result.as_flight_plan() == []


def test_bfs_diagonal_route_across_open_grid():
    airspace_map = Map.build(5, 5)
    result = bfs(Node(-2, -2), Node(2, 2), open_grid_neighbours(airspace_map))
    assert result.found
    assert coords(result.path) == [(-2, -2), (-1, -1), (0, 0), (1, 1), (2, 2)]


def test_bfs_routes_around_restricted_centre():
    open_map = Map.build(5, 5)
    blocked_map = Map.build(5, 5, restricted=[(0, 0)])

    direct = bfs(Node(-1, -1), Node(1, 1), open_grid_neighbours(open_map))
    detour = bfs(Node(-1, -1), Node(1, 1), open_grid_neighbours(blocked_map))

    assert len(direct.path) == 3
    assert coords(detour.path) == [(-1, -1), (0, -1), (1, 0), (1, 1)]
    assert Node(0, 0) not in detour.path


def test_bfs_unreachable_goal_returns_start_only():
    airspace_map = Map.build(5, 5, restricted=[(1, 1), (1, 2), (2, 1)])
    result = bfs(Node(-2, -2), Node(2, 2), open_grid_neighbours(airspace_map))
    assert result.outcome is SearchOutcome.UNREACHABLE
    assert result.as_flight_plan() == [Node(-2, -2)]


def test_bfs_without_edges_is_unreachable():
    result = bfs(Node(0, 0), Node(3, 3), lambda node: [])
    assert result.outcome is SearchOutcome.UNREACHABLE
    assert result.path == (Node(0, 0),)


@pytest.mark.parametrize("goal", [(3, 0), (-3, 2), (1, -3), (3, 3), (0, 1)])
def test_bfs_path_length_matches_chebyshev_distance_on_open_grid(goal):
    airspace_map = Map.build(7, 7)
    start = Node(0, 0)
    result = bfs(start, Node(*goal), open_grid_neighbours(airspace_map))
    assert len(result.path) == max(abs(goal[0]), abs(goal[1])) + 1
    for previous, current in zip(result.path, result.path[1:]):
        assert max(abs(current.longitude - previous.longitude), abs(current.latitude - previous.latitude)) == 1

