"""
Purpose: Core data models for the couriers domain.
What it does:
Defines the structure of a Courier, its transport type and its status
without relying on any storage or framework constraints.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, replace
from enum import Enum
from typing import Dict

from geo.point import Point


class CourierStatus(str, Enum):
    """
    Dispatch-relevant state of a courier.
    Only the dispatch engine moves a courier between these.
    """
    FREE = "FREE"
    BUSY = "BUSY"
    OFFLINE = "OFFLINE"


class CourierType(str, Enum):
    """
    How the courier moves. Each type carries two constants:
    - transport_weight: multiplier on distance when scoring (lower is favored)
    - max_weight_kg: heaviest order the courier can carry
    """
    PEDESTRIAN = "PEDESTRIAN"
    BICYCLE = "BICYCLE"
    CAR = "CAR"

    @property
    def transport_weight(self) -> float:
        return _TRANSPORT_WEIGHTS[self]

    @property
    def max_weight_kg(self) -> float:
        return _MAX_WEIGHT_KG[self]

    def can_carry(self, weight_kg: float) -> bool:
        # Boundary inclusive: a 5.0 kg order fits a pedestrian.
        return weight_kg <= self.max_weight_kg


_TRANSPORT_WEIGHTS: Dict[CourierType, float] = {
    CourierType.PEDESTRIAN: 1.5,
    CourierType.BICYCLE: 1.0,
    CourierType.CAR: 0.7,
}

_MAX_WEIGHT_KG: Dict[CourierType, float] = {
    CourierType.PEDESTRIAN: 5.0,
    CourierType.BICYCLE: 15.0,
    CourierType.CAR: 50.0,
}


@dataclass(frozen=True)
class Courier:
    """
    A stateless snapshot of a courier at a specific point in time.
    State changes produce a new snapshot which is saved back to the store.
    """
    id: str
    location: Point
    courier_type: CourierType
    status: CourierStatus = CourierStatus.FREE

    # Fairness signal for the matching tie-break. Reset policy lives outside the engine.
    completed_orders_today: int = 0

    def __post_init__(self) -> None:
        if self.completed_orders_today < 0:
            raise ValueError(
                f"completed_orders_today must be >= 0. Got: {self.completed_orders_today}"
            )

    @classmethod
    def new(
        cls,
        courier_type: str | CourierType,
        x: float,
        y: float,
        courier_id: str | None = None,
    ) -> Courier:
        if isinstance(courier_type, str):
            courier_type = CourierType(courier_type.upper())

        return cls(
            id=courier_id or str(uuid.uuid4()),
            location=Point(x, y),
            courier_type=courier_type,
        )

    def with_location(self, location: Point) -> Courier:
        return replace(self, location=location)

    def __str__(self) -> str:
        return f"Courier {self.id} [{self.courier_type.value}] at {self.location} ({self.status.value})"
