"""
Purpose: Application service for the order lifecycle.
What it does:
- Creates orders and hands them straight to the dispatch engine
- Looks orders up, completes and cancels them

Rule: Status changes go through the Dispatcher; this layer never sets
Order.status itself.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from dispatch.dispatcher import Dispatcher
from geo.point import Point

from .models import Order, OrderStatus
from .store import InMemoryOrderStore

logger = logging.getLogger(__name__)


class OrderNotFound(LookupError):
    """Raised when an order id is not in the store."""
    pass


class OrderService:
    def __init__(self, order_store: InMemoryOrderStore, dispatcher: Dispatcher):
        self.order_store = order_store
        self.dispatcher = dispatcher

    def create_order(
        self,
        pickup_location: Point,
        delivery_location: Point,
        priority: int,
        weight_kg: float,
    ) -> Order:
        order = self.order_store.save(Order.new(pickup_location, delivery_location, priority, weight_kg))
        logger.info(f"Order created: {order.id} with priority {order.priority} and weight {order.weight_kg}kg")

        # Trigger dispatch (search for courier)
        return self.dispatcher.dispatch(order)

    def get_order(self, order_id: str) -> Order:
        order = self.order_store.find_by_id(order_id)
        if order is None:
            raise OrderNotFound(f"Order not found: {order_id}")
        return order

    def get_all_orders(self, status: Optional[OrderStatus] = None) -> List[Order]:
        if status is not None:
            return self.order_store.find_by_status(status)
        return self.order_store.find_all()

    def complete_order(self, order_id: str) -> Order:
        return self.dispatcher.complete_order(self.get_order(order_id))

    def cancel_order(self, order_id: str) -> Order:
        return self.dispatcher.cancel_order(self.get_order(order_id))
