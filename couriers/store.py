"""
Purpose: Keyed storage for courier snapshots.
What it does:
- Declares the CourierStore interface the dispatch engine consumes
- Provides InMemoryCourierStore: a dict guarded by a lock, safe for
  concurrent get/put from request threads

Rule: Storage only. No matching, no state transition rules.
Process lifetime only; nothing survives a restart.
"""

from __future__ import annotations

import threading
from typing import Callable, Dict, List, Optional, Protocol

from .models import Courier, CourierStatus


class CourierStore(Protocol):
    def find_free(self) -> List[Courier]: ...

    def find_by_id(self, courier_id: str) -> Optional[Courier]: ...

    def save(self, courier: Courier) -> Courier: ...

    def update(self, courier_id: str, change: Callable[[Courier], Courier]) -> Optional[Courier]: ...

    def count_by_status(self, status: CourierStatus) -> int: ...

    def count(self) -> int: ...


class InMemoryCourierStore:
    """
    Thread-safe in-memory courier map.

    Insertion order is preserved, so find_free() returns couriers in
    registration order. The matching strategy relies on that for
    deterministic tie resolution.
    """

    def __init__(self) -> None:
        self._couriers: Dict[str, Courier] = {}
        self._lock = threading.Lock()

    def save(self, courier: Courier) -> Courier:
        with self._lock:
            self._couriers[courier.id] = courier
        return courier

    def update(self, courier_id: str, change: Callable[[Courier], Courier]) -> Optional[Courier]:
        """
        Atomically apply `change` to the stored snapshot and save the result.

        Lets independent writers (location telemetry vs. dispatch status)
        modify different fields without overwriting each other. Returns None
        when the courier does not exist. Exceptions raised by `change`
        propagate and leave the stored snapshot untouched.
        """
        with self._lock:
            current = self._couriers.get(courier_id)
            if current is None:
                return None
            updated = change(current)
            self._couriers[courier_id] = updated
            return updated

    def find_by_id(self, courier_id: str) -> Optional[Courier]:
        with self._lock:
            return self._couriers.get(courier_id)

    def find_all(self) -> List[Courier]:
        with self._lock:
            return list(self._couriers.values())

    def find_by_status(self, status: CourierStatus) -> List[Courier]:
        with self._lock:
            return [courier for courier in self._couriers.values() if courier.status == status]

    def find_free(self) -> List[Courier]:
        return self.find_by_status(CourierStatus.FREE)

    def count_by_status(self, status: CourierStatus) -> int:
        with self._lock:
            return sum(1 for courier in self._couriers.values() if courier.status == status)

    def count(self) -> int:
        with self._lock:
            return len(self._couriers)

    def delete_by_id(self, courier_id: str) -> None:
        with self._lock:
            self._couriers.pop(courier_id, None)

    def clear(self) -> None:
        with self._lock:
            self._couriers.clear()
