"""
Process-wide wiring of stores, engine and services for the API.

Everything is in memory, so one container per process is the whole
"database". Views call get_container(); tests call reset_container().
"""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Optional

from django.conf import settings

from couriers.service import CourierService
from couriers.store import InMemoryCourierStore
from dispatch.dispatcher import Dispatcher
from dispatch.policy import DispatchPolicy
from dispatch.scoring import score_based_strategy
from orders.service import OrderService
from orders.store import InMemoryOrderStore

from .bootstrap import seed_couriers


@dataclass(frozen=True)
class DeliveryContainer:
    courier_store: InMemoryCourierStore
    order_store: InMemoryOrderStore
    dispatcher: Dispatcher
    courier_service: CourierService
    order_service: OrderService


_container: Optional[DeliveryContainer] = None
_container_lock = threading.Lock()


def build_container(seed: bool = False) -> DeliveryContainer:
    policy = DispatchPolicy(
        priority_coefficient=settings.DISPATCH_PRIORITY_COEFFICIENT,
        tie_break_distance=settings.DISPATCH_TIE_BREAK_DISTANCE,
    )

    courier_store = InMemoryCourierStore()
    order_store = InMemoryOrderStore()
    dispatcher = Dispatcher(courier_store, order_store, matching_strategy=score_based_strategy(policy))

    container = DeliveryContainer(
        courier_store=courier_store,
        order_store=order_store,
        dispatcher=dispatcher,
        courier_service=CourierService(courier_store, dispatcher),
        order_service=OrderService(order_store, dispatcher),
    )
    if seed:
        seed_couriers(container.courier_service)
    return container


def get_container() -> DeliveryContainer:
    global _container
    with _container_lock:
        if _container is None:
            _container = build_container(seed=settings.DELIVERY_SEED_COURIERS)
        return _container


def reset_container(seed: bool = False) -> DeliveryContainer:
    global _container
    with _container_lock:
        _container = build_container(seed=seed)
        return _container
