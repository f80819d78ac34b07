import os
from dataclasses import replace

import django
import pytest

from couriers.models import Courier, CourierType
from couriers.store import InMemoryCourierStore
from dispatch.dispatcher import Dispatcher
from geo.point import Point
from orders.models import Order
from orders.store import InMemoryOrderStore


def pytest_configure(config):
    # The API tests exercise the Django project under backend/.
    os.environ.setdefault("DJANGO_SETTINGS_MODULE", "delivery_backend.settings")
    os.environ.setdefault("DELIVERY_SEED_COURIERS", "false")
    django.setup()


@pytest.fixture
def courier_store():
    return InMemoryCourierStore()


@pytest.fixture
def order_store():
    return InMemoryOrderStore()


@pytest.fixture
def dispatcher(courier_store, order_store):
    return Dispatcher(courier_store, order_store)


@pytest.fixture
def make_courier():
    def _make(courier_type=CourierType.BICYCLE, x=0.0, y=0.0, completed_orders_today=0, courier_id=None):
        courier = Courier.new(courier_type, x, y, courier_id=courier_id)
        return replace(courier, completed_orders_today=completed_orders_today)
    return _make


@pytest.fixture
def make_order():
    def _make(pickup=(50.0, 50.0), delivery=(60.0, 60.0), priority=5, weight_kg=1.0):
        return Order.new(Point(*pickup), Point(*delivery), priority, weight_kg)
    return _make
