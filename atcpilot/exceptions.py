"""Mini README: Exception hierarchy shared by the ATC pilot.

Structure:
    * AtcPilotError - base class for every error raised by the package.
    * MissingAirplaneError - detection event arrived without an airplane.
    * UnknownDestinationError - no airport matches the airplane's tag.
    * OffGridError - coordinates fall outside the routing grid.

Search and neighbour helpers never raise for routing failures; they report
them through return values. These exceptions cover contract violations only.
"""


class AtcPilotError(Exception):
    """Base exception for all ATC pilot errors."""


class MissingAirplaneError(AtcPilotError, ValueError):
    """Raised when an ``AirplaneDetected`` event carries no airplane."""


class UnknownDestinationError(AtcPilotError, LookupError):
    """Raised when an airplane's tag matches none of the map's airports."""


class OffGridError(AtcPilotError, IndexError):
    """Raised when a longitude/latitude pair lies outside the map."""
