# inventory_api/core/locks.py

import threading
from contextlib import contextmanager


class ProductLockRegistry:
    """One lock per product id, alive while someone holds or waits for it.

    Serializes the read-check-write sequence on a product's stock inside this
    process. Row locks taken with SELECT ... FOR UPDATE cover other processes
    on databases that support them.
    """

    def __init__(self):
        self._guard = threading.Lock()
        self._locks: dict[int, threading.Lock] = {}
        self._users: dict[int, int] = {}

    def __len__(self) -> int:
        with self._guard:
            return len(self._locks)

    def _acquire_entry(self, product_id: int) -> threading.Lock:
        with self._guard:
            lock = self._locks.setdefault(product_id, threading.Lock())
            self._users[product_id] = self._users.get(product_id, 0) + 1
            return lock

    def _release_entry(self, product_id: int):
        with self._guard:
            remaining = self._users[product_id] - 1
            if remaining:
                self._users[product_id] = remaining
            else:
                # Last holder or waiter gone
                del self._users[product_id]
                del self._locks[product_id]

    @contextmanager
    def hold(self, product_id: int):
        lock = self._acquire_entry(product_id)
        try:
            with lock:
                yield
        finally:
            self._release_entry(product_id)


product_locks = ProductLockRegistry()
