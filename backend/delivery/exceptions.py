"""
Maps domain exceptions to HTTP responses.

Registered as REST_FRAMEWORK["EXCEPTION_HANDLER"]. DRF's own exceptions
(serializer ValidationError, NotFound, ...) keep their default handling.
"""

import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from couriers.service import CourierNotFound
from dispatch.state_machines import CourierStateException, OrderStateException
from orders.service import OrderNotFound

logger = logging.getLogger(__name__)


def _error(status_code: int, message: str) -> Response:
    return Response({"status": status_code, "message": message}, status=status_code)


def domain_exception_handler(exc, context):
    response = exception_handler(exc, context)
    if response is not None:
        return response

    if isinstance(exc, (OrderNotFound, CourierNotFound)):
        logger.warning(f"Not found: {exc}")
        return _error(status.HTTP_404_NOT_FOUND, str(exc))

    if isinstance(exc, (OrderStateException, CourierStateException)):
        logger.warning(f"Invalid state transition: {exc}")
        return _error(status.HTTP_409_CONFLICT, str(exc))

    if isinstance(exc, ValueError):
        logger.warning(f"Invalid argument: {exc}")
        return _error(status.HTTP_400_BAD_REQUEST, str(exc))

    # Anything else propagates to Django's 500 handling.
    return None
