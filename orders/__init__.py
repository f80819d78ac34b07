"""
Orders domain package.

Public API:
- Domain models: Order, OrderStatus
- Storage: InMemoryOrderStore
"""
from .models import Order, OrderStatus
from .store import OrderStore, InMemoryOrderStore

__all__ = ["Order",
           "OrderStatus",
             "OrderStore",
               "InMemoryOrderStore",
               ]
