"""
/**
 * @file translate_relay/middleware/rate_limit.py
 * @description 按客户端地址的固定窗口限流（15 分钟 / 100 次）。
 */
"""

from __future__ import annotations

import logging
import math
import threading
import time
from dataclasses import dataclass
from typing import Callable, Dict, Tuple

from fastapi.responses import JSONResponse
from starlette.datastructures import MutableHeaders
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from translate_relay.utils import is_api_path


WINDOW_SECONDS = 15 * 60
MAX_REQUESTS = 100
RATE_LIMIT_MESSAGE = {"error": "Too many requests, please try again later."}

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RateLimitResult:
    allowed: bool
    limit: int
    remaining: int
    reset_after: float


class RateLimitStore:
    """Counter table: client key -> (window start, hit count)."""

    # expired entries are swept once the table grows past this size
    PURGE_THRESHOLD = 10000

    def __init__(
        self,
        window_seconds: float = WINDOW_SECONDS,
        max_requests: int = MAX_REQUESTS,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.window_seconds = window_seconds
        self.max_requests = max_requests
        self._clock = clock
        self._counters: Dict[str, Tuple[float, int]] = {}
        self._lock = threading.Lock()

    def hit(self, key: str) -> RateLimitResult:
        with self._lock:
            now = self._clock()
            window_start, count = self._counters.get(key, (now, 0))
            if now - window_start >= self.window_seconds:
                window_start, count = now, 0
            count += 1
            self._counters[key] = (window_start, count)
            if len(self._counters) > self.PURGE_THRESHOLD:
                self._purge_expired(now)

        return RateLimitResult(
            allowed=count <= self.max_requests,
            limit=self.max_requests,
            remaining=max(self.max_requests - count, 0),
            reset_after=max(window_start + self.window_seconds - now, 0.0),
        )

    def _purge_expired(self, now: float) -> None:
        expired = [k for k, (start, _) in self._counters.items() if now - start >= self.window_seconds]
        for k in expired:
            del self._counters[k]

    def __len__(self) -> int:
        with self._lock:
            return len(self._counters)


def client_key(scope: Scope) -> str:
    client = scope.get("client")
    if client:
        return str(client[0])
    return "unknown"


class RateLimitMiddleware:
    def __init__(self, app: ASGIApp, store: RateLimitStore, prefix: str = "/api/"):
        self.app = app
        self.store = store
        self.prefix = prefix

    @staticmethod
    def _headers(result: RateLimitResult) -> Dict[str, str]:
        return {
            "RateLimit-Limit": str(result.limit),
            "RateLimit-Remaining": str(result.remaining),
            "RateLimit-Reset": str(math.ceil(result.reset_after)),
        }

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http" or not is_api_path(scope["path"], self.prefix):
            await self.app(scope, receive, send)
            return

        key = client_key(scope)
        result = self.store.hit(key)
        rate_headers = self._headers(result)

        if not result.allowed:
            logger.warning(f"Rate limit exceeded for {key} on {scope['path']}")
            response = JSONResponse(status_code=429, content=RATE_LIMIT_MESSAGE)
            response.headers.update(rate_headers)
            response.headers["Retry-After"] = rate_headers["RateLimit-Reset"]
            await response(scope, receive, send)
            return

        async def send_wrapper(message: Message) -> None:
            if message["type"] == "http.response.start":
                headers = MutableHeaders(scope=message)
                for name, value in rate_headers.items():
                    headers[name] = value
            await send(message)

        await self.app(scope, receive, send_wrapper)
