"""Mini README: Core package initializer for the ATC pilot.

The package steers airplanes across the auto traffic control grid: it
listens for detection events, searches the routing grid for a path to the
destination airport and submits the resulting flight plan. Only the logging
helper is re-exported here so importing the package stays cheap.
"""

from .logging_utils import get_logger

__all__ = ["get_logger"]
