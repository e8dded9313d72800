"""Mini README: Utility helper functions for the ATC pilot.

Currently exports the entry-point loader used by the provider registry to
discover third-party game server integrations.
"""

from .plugin_loader import load_entry_point_plugins

__all__ = ["load_entry_point_plugins"]
