"""Mini README: Notifications delivered by the game's event stream."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from ..airspace.models import Airplane


@dataclass(frozen=True, slots=True)
class AirplaneDetected:
    """A new airplane entered the airspace and needs a flight plan."""

    airplane: Optional[Airplane]


@dataclass(frozen=True, slots=True)
class GameStopped:
    """Terminal notification carrying the final score."""

    score: int


Event = Union[AirplaneDetected, GameStopped]
