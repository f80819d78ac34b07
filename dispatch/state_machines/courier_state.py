from dataclasses import replace

from couriers.models import Courier, CourierStatus


class CourierStateException(Exception):
    """Raised when an invalid courier transition is attempted."""
    pass


def handle_courier_assignment(courier: Courier) -> Courier:
    """
    Called when the dispatch engine commits an order to this courier.
    """
    if courier.status != CourierStatus.FREE:
        raise CourierStateException(f"Courier {courier.id} is not FREE. Current: {courier.status.value}")

    # Because Courier is a frozen dataclass, we must return a new instance via replace
    return replace(courier, status=CourierStatus.BUSY)


def handle_courier_release(courier: Courier) -> Courier:
    """
    Called when the courier's order is completed. Counts the delivery
    towards the fairness tie-break.
    """
    return replace(
        courier,
        status=CourierStatus.FREE,
        completed_orders_today=courier.completed_orders_today + 1,
    )


def handle_courier_offline(courier: Courier) -> Courier:
    # A busy courier must finish (or be completed) before going offline.
    if courier.status == CourierStatus.BUSY:
        raise CourierStateException(f"Courier {courier.id} is BUSY and cannot go offline")
    return replace(courier, status=CourierStatus.OFFLINE)


def handle_courier_online(courier: Courier) -> Courier:
    if courier.status == CourierStatus.BUSY:
        raise CourierStateException(f"Courier {courier.id} is BUSY")
    return replace(courier, status=CourierStatus.FREE)
