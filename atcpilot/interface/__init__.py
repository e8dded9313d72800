"""Mini README: Interactive interfaces for the ATC pilot.

Exports the FastAPI application factory powering the planning service. The
command line entry point lives in ``main_control_tower.py`` at the project
root.
"""

from .web_app import create_application

__all__ = ["create_application"]
