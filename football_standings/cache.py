"""Thread-safe TTL cache with a bounded entry count."""

from __future__ import annotations

import threading
import time
from collections import OrderedDict
from typing import Any, Callable, Generic, Hashable, Optional, Tuple, TypeVar

V = TypeVar("V")


class TTLCache(Generic[V]):
    """
    Maps keys to values that expire ``ttl`` seconds after being written.

    Once more than ``max_entries`` keys are held, the least recently used
    entry is evicted. Reads refresh recency; they do not extend expiry.
    """

    def __init__(
        self,
        ttl: float,
        max_entries: int = 1000,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if max_entries < 1:
            raise ValueError("max_entries must be at least 1")
        self.ttl = float(ttl)
        self.max_entries = int(max_entries)
        self._clock = clock
        self._d: "OrderedDict[Hashable, Tuple[float, V]]" = OrderedDict()
        self._l = threading.Lock()

    def get(self, key: Hashable) -> Optional[V]:
        now = self._clock()
        with self._l:
            entry = self._d.get(key)
            if entry is None:
                return None
            expires, value = entry
            if now >= expires:
                del self._d[key]
                return None
            self._d.move_to_end(key)
            return value

    def put(self, key: Hashable, value: V) -> None:
        expires = self._clock() + self.ttl
        with self._l:
            self._d[key] = (expires, value)
            self._d.move_to_end(key)
            while len(self._d) > self.max_entries:
                self._d.popitem(last=False)

    def evict(self, key: Hashable) -> bool:
        with self._l:
            return self._d.pop(key, None) is not None

    def clear(self) -> None:
        with self._l:
            self._d.clear()

    def __len__(self) -> int:
        return len(self._d)

    def __contains__(self, key: Any) -> bool:
        return self.get(key) is not None
