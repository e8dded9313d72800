"""Mini README: Entry point CLI for the ATC pilot.

This script exposes a Typer CLI with two commands: ``run`` plays a game
against the configured service provider, planning a route for every
detected airplane, and ``serve`` starts the FastAPI planning service with
uvicorn. Both draw defaults from ``ATCPILOT_`` environment variables.
"""

from __future__ import annotations

import asyncio
from typing import Optional

import typer
import uvicorn

from atcpilot.configuration import get_settings
from atcpilot.control import REGISTRY, TrafficController
from atcpilot.control.providers import SimulatedAirspace
from atcpilot.logging_utils import configure_root_logger
from atcpilot.route_planning import FlightPlanner

cli = typer.Typer(help="Steer airplanes to their airports in auto traffic control.")


@cli.command()
def run(
    provider: Optional[str] = typer.Option(None, help="Registered service provider to use."),
    server: Optional[str] = typer.Option(
        None, help="Game server address. Used by external providers only; the simulator ignores it."
    ),
    enforce_no_reversal: Optional[bool] = typer.Option(
        None,
        "--enforce-no-reversal/--allow-reversal",
        help="Exclude the cell behind each airplane from route searches.",
    ),
    event_interval: float = typer.Option(
        0.1, help="Seconds between simulated events (simulator provider only)."
    ),
) -> None:
    """Play one game and print the final score."""

    settings = get_settings()
    configure_root_logger(settings.log_level)
    REGISTRY.discover()

    identifier = provider or settings.service_provider
    try:
        services = REGISTRY.create(identifier, connection_string=server or settings.server_address)
    except KeyError as error:
        typer.echo(f"{error.args[0]}. Available: {', '.join(REGISTRY.available_providers())}", err=True)
        raise typer.Exit(code=2) from error
    if isinstance(services, SimulatedAirspace):
        services.event_interval = event_interval
        services.load_demo_scenario()

    planner = FlightPlanner(
        services,
        enforce_no_reversal=settings.enforce_no_reversal if enforce_no_reversal is None else enforce_no_reversal,
    )
    score = asyncio.run(TrafficController(services, planner).run())
    if score is None:
        typer.echo("Event stream closed before the game stopped.")
    else:
        typer.echo(f"Game stopped! Score: {score}")


@cli.command()
def serve(
    host: str = typer.Option(None, help="Host interface to bind."),
    port: int = typer.Option(None, help="Port to listen on."),
    production: bool = typer.Option(
        False, help="Use production server settings (disable auto-reload)."
    ),
) -> None:
    """Start the planning service using uvicorn."""

    settings = get_settings()
    effective_host = host or settings.interface_host
    effective_port = port or settings.interface_port
    configure_root_logger(settings.log_level)

    # Browsers cannot open the 0.0.0.0 sentinel, so point operators at localhost.
    browser_host = "127.0.0.1" if effective_host in {"0.0.0.0", "::"} else effective_host
    typer.echo(
        f"Starting planning service on {effective_host}:{effective_port}.\n"
        f"API docs at http://{browser_host}:{effective_port}/docs"
    )
    uvicorn.run(
        "atcpilot.interface.web_app:create_application",
        host=effective_host,
        port=effective_port,
        factory=True,
        reload=not production,
    )


if __name__ == "__main__":
    cli()
