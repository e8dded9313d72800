"""Mini README: Provider registry enabling extensible game server integrations.

Structure:
    * ServiceProviderRegistry - manages registration and instantiation of
      ``AirTrafficServices`` implementations.

Built-in providers register on import; third-party packages can plug in via
the ``atcpilot.providers`` entry-point group.
"""

from __future__ import annotations

from typing import Dict, Iterable, Optional, Type

from .base import AirTrafficServices
from ..logging_utils import get_logger
from ..utils.plugin_loader import load_entry_point_plugins

LOGGER = get_logger(__name__)

PROVIDER_ENTRY_POINT_GROUP = "atcpilot.providers"


class ServiceProviderRegistry:
    """Simple registry for mapping provider identifiers to classes."""

    def __init__(self) -> None:
        self._providers: Dict[str, Type[AirTrafficServices]] = {}

    def register(self, provider: Type[AirTrafficServices]) -> None:
        """Register a new provider class with the registry."""

        identifier = provider.provider_name.lower()
        LOGGER.debug("Registering provider '%s'", identifier)
        self._providers[identifier] = provider

    def available_providers(self) -> Iterable[str]:
        """Return iterable of provider identifiers for display."""

        return sorted(self._providers.keys())

    def discover(self, group: str = PROVIDER_ENTRY_POINT_GROUP) -> int:
        """Register provider classes exposed through entry points."""

        registered = 0
        for plugin in load_entry_point_plugins(group):
            if isinstance(plugin, type) and issubclass(plugin, AirTrafficServices):
                self.register(plugin)
                registered += 1
            else:
                LOGGER.warning("Ignoring entry point %r; not an AirTrafficServices subclass", plugin)
        return registered

    def create(self, identifier: str, *, connection_string: Optional[str] = None) -> AirTrafficServices:
        """Instantiate a provider matching the identifier."""

        provider_cls = self._providers.get(identifier.lower())
        if not provider_cls:
            raise KeyError(f"Unknown service provider '{identifier}'")
        LOGGER.info("Creating provider '%s'", identifier)
        return provider_cls(connection_string=connection_string)


REGISTRY = ServiceProviderRegistry()
