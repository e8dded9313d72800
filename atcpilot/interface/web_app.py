"""Mini README: FastAPI planning service for the ATC pilot.

Structure:
    * PlanRouteRequest - request body describing a grid and a route query.
    * create_application - application factory wiring the routes.

The service exposes the route search without a running game so operators
can check how the planner routes around restricted cells. Responses carry
the search outcome, the path and the text rendering of the grid.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from fastapi import FastAPI, HTTPException
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from ..airspace.grid import contains, node_at
from ..airspace.models import Direction, Map, Node
from ..configuration import get_settings
from ..control import REGISTRY
from ..export.map_visualizer import render_flight_plan
from ..logging_utils import get_logger
from ..route_planning import bfs, filter_behind, neighbours

LOGGER = get_logger(__name__)


class PlanRouteRequest(BaseModel):
    """Grid description plus the start and goal of the route."""

    width: int = Field(..., ge=1, le=256)
    height: int = Field(..., ge=1, le=256)
    restricted: List[Tuple[int, int]] = Field(default_factory=list)
    start: Tuple[int, int]
    goal: Tuple[int, int]
    heading: Optional[Direction] = Field(
        None,
        description="Side of the start node the airplane approaches from.",
    )
    enforce_no_reversal: bool = False


def create_application() -> FastAPI:
    """Create the FastAPI application with routes and dependencies."""

    app = FastAPI(title="ATC Pilot Planning Service", version="0.1.0")
    settings = get_settings()

    @app.get("/health")
    async def health() -> JSONResponse:
        """Report configuration details useful when debugging deployments."""

        return JSONResponse(
            {
                "status": "ok",
                "environment": settings.environment,
                "service_provider": settings.service_provider,
                "available_providers": list(REGISTRY.available_providers()),
            }
        )

    @app.post("/plan-route")
    async def plan_route(request: PlanRouteRequest) -> JSONResponse:
        """Search the shortest route between two cells of the described grid."""

        airspace_map = Map.build(request.width, request.height, restricted=request.restricted)
        for label, (longitude, latitude) in (("start", request.start), ("goal", request.goal)):
            if not contains(airspace_map, longitude, latitude):
                raise HTTPException(status_code=400, detail=f"{label} ({longitude}, {latitude}) is outside the grid")
        start = node_at(airspace_map, *request.start)
        goal = node_at(airspace_map, *request.goal)

        is_allowed = None
        if request.enforce_no_reversal:
            if request.heading is None:
                raise HTTPException(status_code=400, detail="enforce_no_reversal requires a heading")
            is_allowed = filter_behind(request.heading, start)

        def neighbour_fn(node: Node) -> List[Node]:
            found = neighbours(node, airspace_map)
            if is_allowed is None:
                return found
            return [candidate for candidate in found if is_allowed(candidate)]

        result = bfs(start, goal, neighbour_fn)
        LOGGER.info("Planned %s route with %s nodes", result.outcome.value, len(result.path))
        return JSONResponse(
            {
                "outcome": result.outcome.value,
                "path": [[node.longitude, node.latitude] for node in result.path],
                "rendering": render_flight_plan(airspace_map, result.path),
            }
        )

    return app
