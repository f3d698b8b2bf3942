"""
In-memory request throttling.

UidRateLimiter: token bucket per reporting uid with a hard refill (the bucket
resets to full capacity once the refill window has elapsed since its last
reset; there is no per-second trickle).

OriginRateLimitMiddleware: sliding-window cap per client address, applied to
every route regardless of uid.

Neither persists state nor evicts keys; memory grows with the number of
distinct uids and client addresses seen by the process.
"""

from __future__ import annotations

import json
import logging
import math
import threading
import time
from collections import defaultdict, deque
from dataclasses import dataclass
from typing import Callable, Deque, Dict, Optional

logger = logging.getLogger(__name__)

Clock = Callable[[], float]

DEFAULT_UID_CAPACITY = 60
DEFAULT_REFILL_SECONDS = 60.0
DEFAULT_ORIGIN_LIMIT = 120
DEFAULT_ORIGIN_WINDOW_SECONDS = 60.0


@dataclass
class _Bucket:
    tokens: int
    last_reset: float


class UidRateLimiter:
    """Token bucket keyed by uid.

    allow() is a check-and-consume operation guarded by a lock so the
    read-modify-write of a bucket is safe under threaded servers too.
    """

    def __init__(
        self,
        capacity: int = DEFAULT_UID_CAPACITY,
        refill_seconds: float = DEFAULT_REFILL_SECONDS,
        clock: Clock = time.monotonic,
    ) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        if refill_seconds <= 0:
            raise ValueError("refill_seconds must be positive")
        self.capacity = capacity
        self.refill_seconds = refill_seconds
        self._clock = clock
        self._buckets: Dict[str, _Bucket] = {}
        self._lock = threading.Lock()

    def allow(self, uid: str) -> bool:
        """Consume one token for uid; False when the bucket is empty."""
        now = self._clock()
        with self._lock:
            bucket = self._buckets.get(uid)
            if bucket is None:
                bucket = _Bucket(tokens=self.capacity, last_reset=now)
                self._buckets[uid] = bucket
            elif now - bucket.last_reset >= self.refill_seconds:
                bucket.tokens = self.capacity
                bucket.last_reset = now
            if bucket.tokens <= 0:
                return False
            bucket.tokens -= 1
            return True

    def remaining(self, uid: str) -> int:
        """Tokens left for uid without consuming (full capacity for unseen uids)."""
        with self._lock:
            bucket = self._buckets.get(uid)
            if bucket is None:
                return self.capacity
            if self._clock() - bucket.last_reset >= self.refill_seconds:
                return self.capacity
            return bucket.tokens

    def __len__(self) -> int:
        return len(self._buckets)


class SlidingWindowCounter:
    """Per-key request timestamps within a trailing window."""

    def __init__(
        self,
        limit: int = DEFAULT_ORIGIN_LIMIT,
        window_seconds: float = DEFAULT_ORIGIN_WINDOW_SECONDS,
        clock: Clock = time.monotonic,
    ) -> None:
        self.limit = limit
        self.window_seconds = window_seconds
        self._clock = clock
        self._requests: Dict[str, Deque[float]] = defaultdict(deque)
        self._lock = threading.Lock()

    def hit(self, key: str) -> tuple[bool, int, float]:
        """Record a request for key.

        Returns (allowed, remaining, reset_after_seconds).
        """
        now = self._clock()
        with self._lock:
            window = self._requests[key]
            while window and window[0] <= now - self.window_seconds:
                window.popleft()
            if len(window) >= self.limit:
                reset_after = window[0] + self.window_seconds - now
                return False, 0, max(0.0, reset_after)
            window.append(now)
            reset_after = window[0] + self.window_seconds - now
            return True, self.limit - len(window), max(0.0, reset_after)


class OriginRateLimitMiddleware:
    """ASGI middleware rejecting clients that exceed the per-origin window."""

    def __init__(
        self,
        app,
        limit: int = DEFAULT_ORIGIN_LIMIT,
        window_seconds: float = DEFAULT_ORIGIN_WINDOW_SECONDS,
        clock: Clock = time.monotonic,
    ) -> None:
        self.app = app
        self.counter = SlidingWindowCounter(limit, window_seconds, clock)

    @staticmethod
    def _client_key(scope) -> str:
        client: Optional[tuple] = scope.get("client")
        if client:
            return str(client[0])
        return "unknown"

    def _headers(self, remaining: int, reset_after: float) -> list[tuple[bytes, bytes]]:
        return [
            (b"ratelimit-limit", str(self.counter.limit).encode()),
            (b"ratelimit-remaining", str(remaining).encode()),
            (b"ratelimit-reset", str(math.ceil(reset_after)).encode()),
        ]

    async def __call__(self, scope, receive, send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        key = self._client_key(scope)
        allowed, remaining, reset_after = self.counter.hit(key)
        rate_headers = self._headers(remaining, reset_after)

        if not allowed:
            logger.warning("Origin rate limit exceeded for %s", key)
            body = json.dumps({"error": "too many requests"}).encode("utf-8")
            await send(
                {
                    "type": "http.response.start",
                    "status": 429,
                    "headers": [
                        (b"content-type", b"application/json"),
                        (b"content-length", str(len(body)).encode()),
                        (b"retry-after", str(math.ceil(reset_after)).encode()),
                        *rate_headers,
                    ],
                }
            )
            await send({"type": "http.response.body", "body": body})
            return

        async def send_with_headers(message) -> None:
            if message["type"] == "http.response.start":
                message = dict(message)
                message["headers"] = list(message.get("headers", [])) + rate_headers
            await send(message)

        await self.app(scope, receive, send_with_headers)
