"""
Couriers domain package.

Public API:
- Domain models: Courier, CourierType, CourierStatus
- Storage: InMemoryCourierStore
"""
from .models import Courier, CourierType, CourierStatus
from .store import CourierStore, InMemoryCourierStore

__all__ = [
    "Courier",
    "CourierType",
    "CourierStatus",
    "CourierStore",
    "InMemoryCourierStore",
]
