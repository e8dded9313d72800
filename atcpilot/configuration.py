"""Mini README: Centralised configuration models and helpers for the ATC pilot.

Structure:
    * AtcPilotSettings - Pydantic model describing runtime configuration.
    * get_settings - cached accessor for environment-aware settings.

Usage:
    Import ``get_settings`` to read environment variables (prefixed with
    ``ATCPILOT_``), choose the game service provider and toggle the
    no-reversal neighbour filter. The configuration is cached so the cost of
    validation is incurred only once per process.
"""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AtcPilotSettings(BaseSettings):
    """Runtime configuration for the ATC pilot."""

    model_config = SettingsConfigDict(
        env_prefix="ATCPILOT_",
        env_file=".env",
        case_sensitive=False,
    )

    environment: str = Field(
        "development",
        description="Environment label controlling debug toggles and logging levels.",
    )
    server_address: str = Field(
        "localhost:4747",
        description=(
            "Address of the auto traffic control game server. Used by external"
            " providers only; the bundled simulator ignores it."
        ),
    )
    service_provider: str = Field(
        "simulator",
        description="Registered provider used to talk to the game server.",
    )
    enforce_no_reversal: bool = Field(
        False,
        description=(
            "Drop the neighbour directly behind an airplane while searching so"
            " planned routes never start with a reversal."
        ),
    )
    log_level: str = Field(
        "INFO",
        description="Root logging level name.",
    )
    interface_host: str = Field(
        "0.0.0.0",
        description="Network interface for the planning service to bind to.",
    )
    interface_port: int = Field(
        8000,
        description="Default port the planning service exposes.",
        ge=1,
        le=65535,
    )

    @field_validator("log_level")
    @classmethod
    def _normalise_level(cls, value: str) -> str:
        """Accept any casing but reject names the logging module does not know."""

        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level '{value}'")
        return level


@lru_cache()
def get_settings() -> AtcPilotSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return AtcPilotSettings()
