from .order_state import OrderStateException
from .courier_state import CourierStateException

__all__ = ["OrderStateException", "CourierStateException"]
