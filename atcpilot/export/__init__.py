"""Mini README: Rendering helpers for flight plans.

Exports the text visualiser used when logging freshly computed plans and
by the planning service responses.
"""

from .map_visualizer import render_flight_plan

__all__ = ["render_flight_plan"]
