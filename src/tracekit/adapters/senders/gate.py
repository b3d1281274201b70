from __future__ import annotations

import sys
import threading
import time


class PermitGate:
    """Counting permit pool with blocking acquire and drain-then-grant reset.

    Unlike `threading.Semaphore`, the pool can be reset atomically and
    exposes how many callers are currently waiting.
    """

    def __init__(self, permits: int = sys.maxsize) -> None:
        if permits < 0:
            raise ValueError(f"permits must be >= 0, got {permits}")
        self._cond = threading.Condition(threading.Lock())
        self._permits = int(permits)
        self._waiting = 0

    @property
    def available(self) -> int:
        with self._cond:
            return self._permits

    @property
    def waiting(self) -> int:
        with self._cond:
            return self._waiting

    def acquire(self) -> None:
        """Take one permit, waiting for as long as it takes."""
        with self._cond:
            if self._permits > 0:
                self._permits -= 1
                return
            self._waiting += 1
            self._cond.notify_all()
            try:
                while self._permits <= 0:
                    self._cond.wait()
                self._permits -= 1
            finally:
                self._waiting -= 1

    def reset(self, permits: int) -> None:
        """Revoke every available permit, then grant exactly `permits`."""
        if permits < 0:
            raise ValueError(f"permits must be >= 0, got {permits}")
        with self._cond:
            self._permits = int(permits)
            self._cond.notify_all()

    def wait_for_waiters(self, count: int, timeout: float | None = None) -> bool:
        """Block until at least `count` callers are parked in `acquire`."""
        deadline = None if timeout is None else time.monotonic() + timeout
        with self._cond:
            while self._waiting < count:
                if deadline is None:
                    self._cond.wait()
                    continue
                remaining = deadline - time.monotonic()
                if remaining <= 0:
                    return False
                self._cond.wait(remaining)
            return True
