from __future__ import annotations
import threading
import time
from collections import deque
from typing import Callable, Deque

from netsapiens.config import RateLimit


class RateLimiter:
    """
    Sliding window over the last `per_milliseconds`.
    try_acquire() never waits: it either takes a slot or reports the window is full.
    """

    def __init__(self, limit: RateLimit, clock: Callable[[], float] = time.monotonic) -> None:
        self.limit = limit
        self._clock = clock
        self._window = limit.per_milliseconds / 1000.0
        self._stamps: Deque[float] = deque()
        self._lock = threading.Lock()

    def try_acquire(self) -> bool:
        if not self.limit.enabled:
            return True

        with self._lock:
            now = self._clock()
            while self._stamps and now - self._stamps[0] >= self._window:
                self._stamps.popleft()
            if len(self._stamps) >= self.limit.requests:
                return False
            self._stamps.append(now)
            return True

    def describe(self) -> str:
        return f"{self.limit.requests} requests per {self.limit.per_milliseconds} ms"
