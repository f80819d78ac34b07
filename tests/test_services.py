import pytest

from couriers.models import CourierStatus, CourierType
from couriers.service import CourierNotFound, CourierService
from geo.point import Point
from orders.models import OrderStatus
from orders.service import OrderNotFound, OrderService


@pytest.fixture
def courier_service(courier_store, dispatcher):
    return CourierService(courier_store, dispatcher)


@pytest.fixture
def order_service(order_store, dispatcher):
    return OrderService(order_store, dispatcher)


def test_register_and_lookup_courier(courier_service):
    courier = courier_service.register_courier("BICYCLE", 25, 30)

    assert courier_service.get_courier(courier.id) == courier
    assert courier.courier_type == CourierType.BICYCLE
    assert courier_service.get_free_couriers() == [courier]
    assert courier_service.get_all_couriers() == [courier]


def test_unknown_courier_raises(courier_service):
    with pytest.raises(CourierNotFound):
        courier_service.get_courier("nope")
    with pytest.raises(CourierNotFound):
        courier_service.update_location("nope", 1, 1)
    with pytest.raises(CourierNotFound):
        courier_service.set_availability("nope", online=False)


def test_registering_a_courier_serves_the_backlog(courier_service, order_service):
    waiting = order_service.create_order(Point(10, 10), Point(20, 20), priority=5, weight_kg=2.0)
    assert waiting.status == OrderStatus.QUEUED

    courier = courier_service.register_courier(CourierType.CAR, 12, 12)

    assert courier.status == CourierStatus.BUSY
    assert order_service.get_order(waiting.id).assigned_courier_id == courier.id


def test_location_update_keeps_status(courier_service, order_service):
    courier = courier_service.register_courier(CourierType.CAR, 10, 10)
    order_service.create_order(Point(10, 10), Point(20, 20), priority=5, weight_kg=2.0)

    moved = courier_service.update_location(courier.id, 11, 12)

    assert moved.location == Point(11, 12)
    assert moved.status == CourierStatus.BUSY


def test_location_update_rejects_out_of_range(courier_service):
    courier = courier_service.register_courier(CourierType.CAR, 10, 10)

    with pytest.raises(ValueError):
        courier_service.update_location(courier.id, 10, 120)
    assert courier_service.get_courier(courier.id).location == Point(10, 10)


def test_availability_round_trip(courier_service):
    courier = courier_service.register_courier(CourierType.PEDESTRIAN, 1, 1)

    assert courier_service.set_availability(courier.id, online=False).status == CourierStatus.OFFLINE
    assert courier_service.get_free_couriers() == []
    assert courier_service.set_availability(courier.id, online=True).status == CourierStatus.FREE


def test_create_order_dispatches_immediately(courier_service, order_service):
    courier = courier_service.register_courier(CourierType.BICYCLE, 50, 50)

    order = order_service.create_order(Point(51, 51), Point(60, 60), priority=8, weight_kg=3.0)

    assert order.status == OrderStatus.ASSIGNED
    assert order.assigned_courier_id == courier.id
    assert order_service.get_order(order.id) == order


def test_complete_and_cancel_by_id(courier_service, order_service):
    courier_service.register_courier(CourierType.CAR, 50, 50)
    assigned = order_service.create_order(Point(50, 50), Point(60, 60), priority=5, weight_kg=1.0)
    waiting = order_service.create_order(Point(50, 50), Point(60, 60), priority=5, weight_kg=1.0)
    late = order_service.create_order(Point(50, 50), Point(60, 60), priority=5, weight_kg=1.0)

    assert order_service.cancel_order(waiting.id).status == OrderStatus.CANCELLED
    assert order_service.complete_order(assigned.id).status == OrderStatus.COMPLETED
    assert order_service.get_order(late.id).status == OrderStatus.ASSIGNED

    assert [o.id for o in order_service.get_all_orders(OrderStatus.CANCELLED)] == [waiting.id]
    assert len(order_service.get_all_orders()) == 3


def test_unknown_order_raises(order_service):
    with pytest.raises(OrderNotFound):
        order_service.get_order("nope")
    with pytest.raises(OrderNotFound):
        order_service.complete_order("nope")
