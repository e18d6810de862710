"""
/**
 * @file translate_relay/middleware/origin_gate.py
 * @description 跨域来源校验：非本地来源直接拒绝，不进入后续管道。
 */
"""

from typing import Callable, Optional

from starlette.datastructures import Headers
from starlette.types import ASGIApp, Receive, Scope, Send

from translate_relay.middleware.errors import CorsRejectedError
from translate_relay.utils import is_allowed_origin


class OriginGateMiddleware:
    def __init__(self, app: ASGIApp, is_allowed: Callable[[Optional[str]], bool] = is_allowed_origin):
        self.app = app
        self.is_allowed = is_allowed

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "http":
            origin = Headers(scope=scope).get("origin")
            if not self.is_allowed(origin):
                raise CorsRejectedError(origin)
        await self.app(scope, receive, send)
