"""
Demo couriers for local runs (enabled with DELIVERY_SEED_COURIERS).
"""

import logging

from couriers.models import CourierType
from couriers.service import CourierService

logger = logging.getLogger(__name__)

SEED_COURIERS = [
    (CourierType.PEDESTRIAN, 10, 10),
    (CourierType.BICYCLE, 25, 30),
    (CourierType.CAR, 50, 50),
    (CourierType.BICYCLE, 80, 20),
    (CourierType.CAR, 15, 75),
    (CourierType.PEDESTRIAN, 60, 90),
    (CourierType.CAR, 35, 45),
    (CourierType.BICYCLE, 70, 65),
]


def seed_couriers(courier_service: CourierService) -> None:
    logger.info("Initializing demo couriers...")

    for courier_type, x, y in SEED_COURIERS:
        courier_service.register_courier(courier_type, x, y)

    logger.info(f"Initialized {len(SEED_COURIERS)} demo couriers")
