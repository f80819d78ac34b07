"""
Order lifecycle transitions.

    CREATED -> SEARCHING -> ASSIGNED | QUEUED
    QUEUED  -> ASSIGNED  (queue reprocessing only)
    QUEUED  -> CANCELLED
    ASSIGNED -> COMPLETED

Every function checks the current status before building the new snapshot,
so a rejected transition never produces a partial change.
"""

from dataclasses import replace

from orders.models import Order, OrderStatus


class OrderStateException(Exception):
    """Raised when an invalid state transition is attempted."""
    pass


DISPATCHABLE_STATUSES = frozenset({OrderStatus.CREATED, OrderStatus.SEARCHING, OrderStatus.QUEUED})


def transition_order_to_searching(order: Order) -> Order:
    """
    Called when an order is submitted (or re-submitted) for dispatch.
    Orders that already hold a courier, or are finished, cannot search again.
    """
    if order.status not in DISPATCHABLE_STATUSES:
        raise OrderStateException(f"Cannot dispatch order {order.id} from {order.status.value}")
    return replace(order, status=OrderStatus.SEARCHING, assigned_courier_id=None)


def transition_order_to_queued(order: Order) -> Order:
    if order.status != OrderStatus.SEARCHING:
        raise OrderStateException(f"Cannot queue order {order.id} from {order.status.value}")
    return replace(order, status=OrderStatus.QUEUED)


def transition_order_to_assigned(order: Order, courier_id: str) -> Order:
    """
    Locks the order to a courier. Reachable from SEARCHING (direct match)
    or QUEUED (backlog reprocessing).
    """
    if order.status not in (OrderStatus.SEARCHING, OrderStatus.QUEUED):
        raise OrderStateException(f"Order {order.id} cannot be assigned. Current: {order.status.value}")
    return replace(order, status=OrderStatus.ASSIGNED, assigned_courier_id=courier_id)


def transition_order_to_completed(order: Order) -> Order:
    if order.status != OrderStatus.ASSIGNED:
        raise OrderStateException(
            f"Only ASSIGNED orders can be completed. Current status: {order.status.value}"
        )
    return replace(order, status=OrderStatus.COMPLETED)


def transition_order_to_cancelled(order: Order) -> Order:
    """
    Only backlog orders can be cancelled; an assigned order already holds a courier.
    """
    if order.status != OrderStatus.QUEUED:
        raise OrderStateException(
            f"Only QUEUED orders can be cancelled. Current status: {order.status.value}"
        )
    return replace(order, status=OrderStatus.CANCELLED)
