"""
Purpose: Orchestrator / decision pipeline (the "glue").
What it does:
Accepts an order, asks the matching strategy for the best free courier and
commits the assignment. Orders that cannot be served right now wait in a
FIFO backlog that is reprocessed whenever a courier frees up.

Concurrency: one process-wide lock covers "read free couriers -> pick best
-> commit" so two requests can never both grab the same courier.
"""

from __future__ import annotations

import logging
import threading
from collections import deque
from dataclasses import dataclass
from typing import Deque, Dict, Optional

from couriers.models import Courier, CourierStatus
from couriers.store import CourierStore
from orders.models import Order, OrderStatus
from orders.store import OrderStore

from .scoring import MatchingStrategy, find_best_courier
from .state_machines.courier_state import (
    handle_courier_assignment,
    handle_courier_offline,
    handle_courier_online,
    handle_courier_release,
)
from .state_machines.order_state import (
    OrderStateException,
    transition_order_to_assigned,
    transition_order_to_cancelled,
    transition_order_to_completed,
    transition_order_to_queued,
    transition_order_to_searching,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DispatchStats:
    total_orders: int
    orders_by_status: Dict[str, int]
    total_couriers: int
    couriers_by_status: Dict[str, int]
    total_assignments: int
    queued_orders: int

    def to_dict(self) -> Dict[str, object]:
        return {
            "totalOrders": self.total_orders,
            "ordersByStatus": dict(self.orders_by_status),
            "totalCouriers": self.total_couriers,
            "couriersByStatus": dict(self.couriers_by_status),
            "totalAssignments": self.total_assignments,
            "queuedOrders": self.queued_orders,
        }


class Dispatcher:
    """
    Coordinates the assignment of Orders to Couriers.

    Owns the backlog of order ids and the total-assignments counter.
    Courier and order snapshots themselves live in the injected stores.
    """

    def __init__(
        self,
        courier_store: CourierStore,
        order_store: OrderStore,
        matching_strategy: Optional[MatchingStrategy] = None,
    ):
        self.courier_store = courier_store
        self.order_store = order_store
        self.matching_strategy = matching_strategy or find_best_courier

        self._dispatch_lock = threading.Lock()
        self._queue: Deque[str] = deque()
        self._total_assignments = 0

    # --- Public API ---

    def dispatch(self, order: Order) -> Order:
        """
        Find the best free courier for `order` and assign it, or park the
        order in the backlog when nobody can take it.

        The transition is checked against the stored snapshot, not the
        caller's copy, so an order assigned in the meantime raises
        OrderStateException instead of losing its courier.

        Returns the committed snapshot (ASSIGNED or QUEUED).
        """
        # Persisted before taking the lock so a stats read can observe SEARCHING.
        searching = self.order_store.update(order.id, transition_order_to_searching, default=order)
        logger.info(f"Searching for courier for order {searching.id}")

        with self._dispatch_lock:
            # A concurrent dispatch of the same order may have committed first.
            current = self.order_store.find_by_id(searching.id) or searching
            if current.status != OrderStatus.SEARCHING:
                raise OrderStateException(
                    f"Order {current.id} was {current.status.value} before it could be matched"
                )

            best_courier = self.matching_strategy(current, self.courier_store.find_free())
            if best_courier is not None:
                assigned = self._assign(current, best_courier)
                if assigned is not None:
                    if assigned.id in self._queue:
                        self._queue.remove(assigned.id)
                    return assigned

            queued = self.order_store.save(transition_order_to_queued(current))
            # A re-dispatched backlog order keeps its original place in line.
            if queued.id not in self._queue:
                self._queue.append(queued.id)
            logger.warning(
                f"No courier available for order {queued.id}; queued at position "
                f"{self._queue.index(queued.id) + 1}"
            )
            return queued

    def complete_order(self, order: Order) -> Order:
        """
        Mark an ASSIGNED order COMPLETED, free its courier and let the
        backlog absorb the freed capacity.

        Raises OrderStateException (before any write) when the order is not ASSIGNED.
        """
        with self._dispatch_lock:
            # The caller may hold an outdated snapshot; the store has the truth.
            current = self.order_store.find_by_id(order.id) or order
            completed = self.order_store.save(transition_order_to_completed(current))

            if completed.assigned_courier_id is not None:
                courier = self.courier_store.update(completed.assigned_courier_id, handle_courier_release)
                if courier is not None:
                    logger.info(
                        f"Courier {courier.id} [{courier.courier_type.value}] is now FREE "
                        f"after completing order {completed.id}"
                    )

            logger.info(f"Order {completed.id} completed")
            self._process_queue()
            return completed

    def cancel_order(self, order: Order) -> Order:
        """
        Cancel a backlog order. The queue entry stays where it is and is
        dropped as stale when reprocessing reaches it.
        """
        with self._dispatch_lock:
            current = self.order_store.find_by_id(order.id) or order
            cancelled = self.order_store.save(transition_order_to_cancelled(current))
            logger.info(f"Order {cancelled.id} cancelled while queued")
            return cancelled

    def set_courier_offline(self, courier_id: str) -> Optional[Courier]:
        with self._dispatch_lock:
            courier = self.courier_store.update(courier_id, handle_courier_offline)
            if courier is not None:
                logger.info(f"Courier {courier.id} went OFFLINE")
            return courier

    def set_courier_online(self, courier_id: str) -> Optional[Courier]:
        with self._dispatch_lock:
            courier = self.courier_store.update(courier_id, handle_courier_online)
            if courier is not None:
                logger.info(f"Courier {courier.id} is back online")
                self._process_queue()
                # Reprocessing may already have handed it an order.
                courier = self.courier_store.find_by_id(courier_id)
            return courier

    def reprocess_queue(self) -> None:
        """
        Offer current free capacity to the backlog (e.g. after a courier registers).
        """
        with self._dispatch_lock:
            self._process_queue()

    def get_queue_size(self) -> int:
        return len(self._queue)

    def get_stats(self) -> DispatchStats:
        """
        Snapshot of system counters. Does not take the dispatch lock, so
        values may be slightly stale under concurrent writes.
        """
        orders_by_status = {
            status.value: self.order_store.count_by_status(status) for status in OrderStatus
        }
        couriers_by_status = {
            status.value: self.courier_store.count_by_status(status) for status in CourierStatus
        }
        return DispatchStats(
            total_orders=self.order_store.count(),
            orders_by_status=orders_by_status,
            total_couriers=self.courier_store.count(),
            couriers_by_status=couriers_by_status,
            total_assignments=self._total_assignments,
            queued_orders=len(self._queue),
        )

    # --- Internal helpers (caller must hold the dispatch lock) ---

    def _assign(self, order: Order, courier: Courier) -> Optional[Order]:
        """
        Commit courier first, then order. Returns None, with nothing written,
        when the courier was removed from the store after it was matched.
        A courier that is no longer FREE raises CourierStateException
        before the order is written.
        """
        busy = self.courier_store.update(courier.id, handle_courier_assignment)
        if busy is None:
            logger.warning(f"Courier {courier.id} disappeared before order {order.id} could be assigned")
            return None

        assigned = self.order_store.save(transition_order_to_assigned(order, busy.id))
        self._total_assignments += 1

        logger.info(f"Order {assigned.id} assigned to courier {busy.id} [{busy.courier_type.value}]")
        return assigned

    def _process_queue(self) -> None:
        """
        Head-of-line backlog reprocessing.

        Only the head is tried on each step. If it cannot be matched the pass
        stops, even if a later order could use the free courier, so FIFO
        order is never violated.
        """
        while self._queue:
            order_id = self._queue[0]
            order = self.order_store.find_by_id(order_id)

            if order is None or order.status != OrderStatus.QUEUED:
                # Stale entry (cancelled or changed elsewhere).
                self._queue.popleft()
                logger.debug(f"Dropped stale queue entry {order_id}")
                continue

            best_courier = self.matching_strategy(order, self.courier_store.find_free())
            if best_courier is None:
                break

            # A vanished courier leaves the head in place for the next pass.
            if self._assign(order, best_courier) is None:
                break

            self._queue.popleft()
            logger.info(f"Queued order {order.id} picked up; {len(self._queue)} left in backlog")
