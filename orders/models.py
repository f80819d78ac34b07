"""
Purpose: Domain models for the Orders capability.
What it does:
- Defines the Order snapshot (id, pickup/delivery points, priority, weight,
  timestamps, status, assigned courier reference)
- Defines OrderStatus:
  CREATED | SEARCHING | QUEUED | ASSIGNED | COMPLETED | CANCELLED

Defines the model validation rules (priority 1-10, weight > 0).

Rule: No matching, no queue logic. Models only.
"""
from __future__ import annotations

import math
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from geo.point import Point

MIN_PRIORITY = 1
MAX_PRIORITY = 10


class OrderStatus(str, Enum):
    CREATED = "CREATED"
    SEARCHING = "SEARCHING"
    QUEUED = "QUEUED"
    ASSIGNED = "ASSIGNED"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class Order:
    """
    Represents a single delivery order.

    Snapshots are immutable; dispatch transitions build a new Order via
    dataclasses.replace, which re-runs the validation below.
    """

    id: str
    pickup_location: Point
    delivery_location: Point
    priority: int
    weight_kg: float

    status: OrderStatus = OrderStatus.CREATED
    created_at: datetime = field(default_factory=_utcnow)

    # Weak reference to Courier.id, set once the order is ASSIGNED.
    assigned_courier_id: Optional[str] = None

    def __post_init__(self) -> None:
        if isinstance(self.priority, bool) or not isinstance(self.priority, int):
            raise ValueError(f"Priority must be an integer. Got: {self.priority!r}")
        if self.priority < MIN_PRIORITY or self.priority > MAX_PRIORITY:
            raise ValueError(
                f"Priority must be between {MIN_PRIORITY} and {MAX_PRIORITY}. Got: {self.priority}"
            )
        if not math.isfinite(self.weight_kg) or self.weight_kg <= 0:
            raise ValueError(f"Weight must be a finite number greater than 0. Got: {self.weight_kg}")

    @staticmethod  # Factory method to create a fresh order with a generated id
    def new(
        pickup_location: Point,
        delivery_location: Point,
        priority: int,
        weight_kg: float,
    ) -> Order:
        return Order(
            id=str(uuid.uuid4()),
            pickup_location=pickup_location,
            delivery_location=delivery_location,
            priority=priority,
            weight_kg=weight_kg,
        )

    def __str__(self) -> str:
        return f"Order {self.id} ({self.status.value}, priority={self.priority}, weight={self.weight_kg}kg)"
