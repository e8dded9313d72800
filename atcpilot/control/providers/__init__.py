"""Mini README: Concrete game server providers.

New providers should export a subclass of ``AirTrafficServices`` and call
``REGISTRY.register`` during module import to keep the system discoverable.
"""

from .simulator import SimulatedAirspace, demo_map

__all__ = ["SimulatedAirspace", "demo_map"]
