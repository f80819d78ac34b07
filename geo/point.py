"""
Purpose: Bounded 2-D coordinate used for courier positions and order stops.
What it does:
- Defines Point (x, y), each coordinate constrained to [0, 100]
- Straight-line (Euclidean) distance between two points

Rule: No road network, no ETA. Plain geometry only.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

MIN_COORDINATE = 0.0
MAX_COORDINATE = 100.0


def _validate_coordinate(value: float, name: str) -> None:
    # NaN fails this check as well.
    if not MIN_COORDINATE <= value <= MAX_COORDINATE:
        raise ValueError(
            f"{name} coordinate must be in range [{MIN_COORDINATE:g}, {MAX_COORDINATE:g}]. Got: {value}"
        )


@dataclass(frozen=True)
class Point:
    """
    A location on the service grid.

    Frozen so a Point can be shared between snapshots; any copy made through
    dataclasses.replace goes through the same range check.
    """
    x: float
    y: float

    def __post_init__(self) -> None:
        _validate_coordinate(self.x, "X")
        _validate_coordinate(self.y, "Y")

    def distance_to(self, other: Point) -> float:
        return math.hypot(self.x - other.x, self.y - other.y)

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"
