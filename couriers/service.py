"""
Purpose: Application service for courier management.
What it does:
- Registers couriers and looks them up
- Applies location telemetry (best effort, outside the dispatch lock)
- Delegates availability changes to the dispatch engine, which is the only
  component allowed to touch courier status
"""

from __future__ import annotations

import logging
from typing import List

from dispatch.dispatcher import Dispatcher
from geo.point import Point

from .models import Courier, CourierType
from .store import InMemoryCourierStore

logger = logging.getLogger(__name__)


class CourierNotFound(LookupError):
    """Raised when a courier id is not in the store."""
    pass


class CourierService:
    def __init__(self, courier_store: InMemoryCourierStore, dispatcher: Dispatcher):
        self.courier_store = courier_store
        self.dispatcher = dispatcher

    def register_courier(self, courier_type: str | CourierType, x: float, y: float) -> Courier:
        courier = self.courier_store.save(Courier.new(courier_type, x, y))
        logger.info(f"Courier registered: {courier.id} [{courier.courier_type.value}] at {courier.location}")

        # New free capacity may unblock the backlog.
        self.dispatcher.reprocess_queue()
        return self.get_courier(courier.id)

    def get_courier(self, courier_id: str) -> Courier:
        courier = self.courier_store.find_by_id(courier_id)
        if courier is None:
            raise CourierNotFound(f"Courier not found: {courier_id}")
        return courier

    def get_free_couriers(self) -> List[Courier]:
        return self.courier_store.find_free()

    def get_all_couriers(self) -> List[Courier]:
        return self.courier_store.find_all()

    def update_location(self, courier_id: str, x: float, y: float) -> Courier:
        location = Point(x, y)
        courier = self.courier_store.update(courier_id, lambda current: current.with_location(location))
        if courier is None:
            raise CourierNotFound(f"Courier not found: {courier_id}")
        logger.info(f"Courier {courier_id} location updated to {location}")
        return courier

    def set_availability(self, courier_id: str, online: bool) -> Courier:
        if online:
            courier = self.dispatcher.set_courier_online(courier_id)
        else:
            courier = self.dispatcher.set_courier_offline(courier_id)

        if courier is None:
            raise CourierNotFound(f"Courier not found: {courier_id}")
        return courier
