"""Route record value type and the handle used to address stored records."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Dict, NewType

# Stable identifier of one stored record instance, issued by RouteCatalog.
RouteHandle = NewType("RouteHandle", int)


@dataclass(frozen=True)
class RouteRecord:
    """One train route.

    Attributes:
        start: Start station name.
        destination: Destination station name.
        stoppages: Number of intermediate stops.
        duration: Travel time in hours.
    """

    start: str
    destination: str
    stoppages: int = 0
    duration: float = 0.0

    def __post_init__(self) -> None:
        if not self.start:
            raise ValueError("start station must not be empty")
        if not self.destination:
            raise ValueError("destination must not be empty")
        if self.stoppages < 0:
            raise ValueError("stoppages must be >= 0")
        if isinstance(self.stoppages, float) and not self.stoppages.is_integer():
            raise ValueError("stoppages must be a whole number")
        if not math.isfinite(self.duration):
            raise ValueError("duration must be a finite number")
        if self.duration < 0:
            raise ValueError("duration must be >= 0")
        # Normalise numeric types so equality survives a save/load cycle.
        object.__setattr__(self, "stoppages", int(self.stoppages))
        object.__setattr__(self, "duration", float(self.duration))

    @property
    def key(self) -> tuple[str, str]:
        """The (start, destination) pair used for lookup and deletion."""
        return (self.start, self.destination)

    def matches(self, start: str, destination: str) -> bool:
        return self.start == start and self.destination == destination

    def to_dict(self) -> Dict[str, Any]:
        return {
            "start": self.start,
            "destination": self.destination,
            "stoppages": self.stoppages,
            "duration": self.duration,
        }

    def describe(self) -> str:
        """Human readable one-liner used by the shell."""
        return (
            f"Start Station: {self.start}, Destination: {self.destination}, "
            f"Stoppages: {self.stoppages}, Duration: {self.duration:.2f} hours"
        )
