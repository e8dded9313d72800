"""Mini README: Game server integration and the event-driven control loop.

The package is divided into ``base`` for the collaborator contract,
``events`` for stream notifications, ``registry`` for provider plugins,
``providers`` for concrete implementations and ``controller`` for the loop
that turns detections into planning tasks.
"""

from .base import AirTrafficServices
from .controller import TrafficController
from .events import AirplaneDetected, Event, GameStopped
from .registry import REGISTRY, ServiceProviderRegistry
from . import providers  # noqa: F401  # ensure built-in providers register on import

__all__ = [
    "AirTrafficServices",
    "AirplaneDetected",
    "Event",
    "GameStopped",
    "REGISTRY",
    "ServiceProviderRegistry",
    "TrafficController",
]
