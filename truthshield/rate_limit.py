"""
Rate Limiter — Per-Client Request Throttling

Sliding window rate limiter backed by an in-memory dict, keyed by
client address. The scoring engine is cheap; this guards the API
surface from scripted flooding, nothing more.

Defaults: 60 requests/minute, 1000/hour. Override via env.
"""

from __future__ import annotations

import os
import threading
import time
from collections import OrderedDict
from dataclasses import dataclass, field
from typing import Optional

from fastapi import HTTPException


# Maximum number of unique clients tracked before LRU eviction
MAX_TRACKED_CLIENTS = 5000


@dataclass
class RateWindow:
    """Sliding window counter."""
    timestamps: list[float] = field(default_factory=list)

    def count_within(self, window_seconds: float, now: Optional[float] = None) -> int:
        cutoff = (now or time.time()) - window_seconds
        return sum(1 for t in self.timestamps if t > cutoff)

    def prune(self, window_seconds: float, now: Optional[float] = None):
        cutoff = (now or time.time()) - window_seconds
        self.timestamps = [t for t in self.timestamps if t > cutoff]

    def record(self, now: Optional[float] = None):
        self.timestamps.append(now or time.time())


@dataclass
class RateLimits:
    per_minute: int = 60
    per_hour: int = 1000


DEFAULT_LIMITS = RateLimits(
    per_minute=int(os.getenv("TRUTHSHIELD_RATE_PER_MINUTE", "60")),
    per_hour=int(os.getenv("TRUTHSHIELD_RATE_PER_HOUR", "1000")),
)

RATE_LIMIT_ENABLED = os.getenv("TRUTHSHIELD_RATE_LIMIT", "true").lower() == "true"


class RateLimiter:
    """
    LRU-bounded store of per-client windows.

    One module-level instance serves the API; tests build their own
    with tight limits.
    """

    def __init__(
        self,
        limits: Optional[RateLimits] = None,
        enabled: bool = True,
        max_clients: int = MAX_TRACKED_CLIENTS,
    ):
        self.limits = limits or DEFAULT_LIMITS
        self.enabled = enabled
        self.max_clients = max_clients
        self._windows: OrderedDict[str, RateWindow] = OrderedDict()
        self._lock = threading.Lock()

    def check(self, client_id: Optional[str]) -> None:
        """
        Check and record one request for a client.

        Args:
            client_id: Client identifier (remote address). None = no limit.

        Raises:
            HTTPException 429 if a limit is exceeded.
        """
        if not self.enabled or client_id is None:
            return

        now = time.time()
        with self._lock:
            if client_id not in self._windows:
                if len(self._windows) >= self.max_clients:
                    self._windows.popitem(last=False)
                self._windows[client_id] = RateWindow()
            else:
                self._windows.move_to_end(client_id)

            window = self._windows[client_id]
            # Trim to the hour window; the per-minute count must not prune
            window.prune(3600, now)

            if window.count_within(60, now) >= self.limits.per_minute:
                retry = 60 - int(now % 60)
                raise HTTPException(
                    status_code=429,
                    detail=f"Rate limit exceeded: {self.limits.per_minute} requests/minute. "
                           f"Retry after {retry} seconds.",
                    headers={"Retry-After": str(retry)},
                )

            if window.count_within(3600, now) >= self.limits.per_hour:
                raise HTTPException(
                    status_code=429,
                    detail=f"Rate limit exceeded: {self.limits.per_hour} requests/hour.",
                    headers={"Retry-After": "3600"},
                )

            window.record(now)

    def usage(self, client_id: str) -> dict:
        with self._lock:
            window = self._windows.get(client_id)
            if not window:
                return {"minute": 0, "hour": 0}
            return {
                "minute": window.count_within(60),
                "hour": window.count_within(3600),
            }

    def tracked_clients(self) -> int:
        with self._lock:
            return len(self._windows)

    def cleanup_stale(self, max_age: float = 7200):
        """Remove windows with no recent activity."""
        cutoff = time.time() - max_age
        with self._lock:
            stale = [
                k for k, w in self._windows.items()
                if not w.timestamps or w.timestamps[-1] < cutoff
            ]
            for k in stale:
                del self._windows[k]


rate_limiter = RateLimiter(enabled=RATE_LIMIT_ENABLED)


def check_rate_limit(client_id: Optional[str]) -> None:
    rate_limiter.check(client_id)
