from dataclasses import replace

import pytest

from couriers.models import CourierStatus, CourierType
from dispatch.state_machines.courier_state import (
    CourierStateException,
    handle_courier_assignment,
    handle_courier_offline,
    handle_courier_online,
    handle_courier_release,
)
from dispatch.state_machines.order_state import (
    OrderStateException,
    transition_order_to_assigned,
    transition_order_to_cancelled,
    transition_order_to_completed,
    transition_order_to_queued,
    transition_order_to_searching,
)
from orders.models import OrderStatus


def test_happy_path_created_to_completed(make_order):
    order = make_order()

    searching = transition_order_to_searching(order)
    assigned = transition_order_to_assigned(searching, "courier-1")
    completed = transition_order_to_completed(assigned)

    assert searching.status == OrderStatus.SEARCHING
    assert assigned.status == OrderStatus.ASSIGNED
    assert assigned.assigned_courier_id == "courier-1"
    assert completed.status == OrderStatus.COMPLETED
    # Snapshots are never mutated in place
    assert order.status == OrderStatus.CREATED


def test_queued_order_can_be_assigned_later(make_order):
    queued = transition_order_to_queued(transition_order_to_searching(make_order()))

    assigned = transition_order_to_assigned(queued, "courier-7")

    assert queued.status == OrderStatus.QUEUED
    assert assigned.status == OrderStatus.ASSIGNED


@pytest.mark.parametrize(
    "status",
    [OrderStatus.CREATED, OrderStatus.SEARCHING, OrderStatus.QUEUED, OrderStatus.COMPLETED, OrderStatus.CANCELLED],
)
def test_only_assigned_orders_complete(make_order, status):
    with pytest.raises(OrderStateException, match="Only ASSIGNED orders can be completed"):
        transition_order_to_completed(replace(make_order(), status=status))


@pytest.mark.parametrize("status", [OrderStatus.ASSIGNED, OrderStatus.COMPLETED, OrderStatus.CANCELLED])
def test_orders_past_matching_cannot_be_dispatched_again(make_order, status):
    with pytest.raises(OrderStateException):
        transition_order_to_searching(replace(make_order(), status=status))


def test_queue_requires_searching(make_order):
    with pytest.raises(OrderStateException):
        transition_order_to_queued(make_order())


def test_assignment_requires_searching_or_queued(make_order):
    with pytest.raises(OrderStateException):
        transition_order_to_assigned(make_order(), "courier-1")


def test_only_queued_orders_cancel(make_order):
    queued = transition_order_to_queued(transition_order_to_searching(make_order()))

    assert transition_order_to_cancelled(queued).status == OrderStatus.CANCELLED
    with pytest.raises(OrderStateException):
        transition_order_to_cancelled(transition_order_to_assigned(queued, "courier-1"))


def test_courier_assignment_and_release(make_courier):
    courier = make_courier(CourierType.CAR, completed_orders_today=2)

    busy = handle_courier_assignment(courier)
    free = handle_courier_release(busy)

    assert busy.status == CourierStatus.BUSY
    assert free.status == CourierStatus.FREE
    assert free.completed_orders_today == 3


def test_busy_courier_cannot_be_assigned_again(make_courier):
    busy = handle_courier_assignment(make_courier())

    with pytest.raises(CourierStateException):
        handle_courier_assignment(busy)


def test_offline_and_back_online(make_courier):
    offline = handle_courier_offline(make_courier())

    assert offline.status == CourierStatus.OFFLINE
    assert handle_courier_online(offline).status == CourierStatus.FREE


def test_busy_courier_cannot_go_offline(make_courier):
    with pytest.raises(CourierStateException):
        handle_courier_offline(handle_courier_assignment(make_courier()))
