"""
Purpose: Keyed storage for order snapshots.
What it does:
- Declares the OrderStore interface the dispatch engine consumes
- Provides InMemoryOrderStore (lock-guarded dict, safe for concurrent get/put)

Rule: Storage owns no state transitions. The dispatch engine decides
what status an order has; the store only keeps the latest snapshot.
"""

from __future__ import annotations

import threading
from typing import Callable, Dict, List, Optional, Protocol

from .models import Order, OrderStatus


class OrderStore(Protocol):
    def find_by_id(self, order_id: str) -> Optional[Order]: ...

    def save(self, order: Order) -> Order: ...

    def update(
        self, order_id: str, change: Callable[[Order], Order], default: Optional[Order] = None
    ) -> Optional[Order]: ...

    def count_by_status(self, status: OrderStatus) -> int: ...

    def count(self) -> int: ...


class InMemoryOrderStore:
    """
    In-memory order map. Every method holds the lock only for the single
    read or write it performs.
    """

    def __init__(self) -> None:
        self._orders: Dict[str, Order] = {}
        self._lock = threading.Lock()

    def save(self, order: Order) -> Order:
        with self._lock:
            self._orders[order.id] = order
        return order

    def update(
        self,
        order_id: str,
        change: Callable[[Order], Order],
        default: Optional[Order] = None,
    ) -> Optional[Order]:
        """
        Atomically apply `change` to the stored snapshot and save the result.
        When the order is not stored yet, `change` is applied to `default`
        instead; with no default, returns None. Exceptions raised by
        `change` propagate and leave the stored snapshot untouched.
        """
        with self._lock:
            current = self._orders.get(order_id, default)
            if current is None:
                return None
            updated = change(current)
            self._orders[order_id] = updated
            return updated

    def find_by_id(self, order_id: str) -> Optional[Order]:
        with self._lock:
            return self._orders.get(order_id)

    def find_all(self) -> List[Order]:
        with self._lock:
            return list(self._orders.values())

    def find_by_status(self, status: OrderStatus) -> List[Order]:
        with self._lock:
            return [order for order in self._orders.values() if order.status == status]

    def count_by_status(self, status: OrderStatus) -> int:
        with self._lock:
            return sum(1 for order in self._orders.values() if order.status == status)

    def count(self) -> int:
        with self._lock:
            return len(self._orders)

    def delete_by_id(self, order_id: str) -> None:
        with self._lock:
            self._orders.pop(order_id, None)

    def clear(self) -> None:
        with self._lock:
            self._orders.clear()
