"""
/**
 * @file translate_relay/middleware/preflight.py
 * @description OPTIONS 预检应答：对所有放行来源的 OPTIONS 请求直接返回 200。
 */
"""

from typing import Dict, Optional, Sequence

from fastapi.responses import PlainTextResponse
from starlette.datastructures import Headers
from starlette.types import ASGIApp, Receive, Scope, Send


CORS_ALLOW_METHODS = ("GET", "POST", "PUT", "DELETE", "OPTIONS")
CORS_ALLOW_HEADERS = ("Content-Type", "Authorization", "Accept")


class PreflightMiddleware:
    def __init__(
        self,
        app: ASGIApp,
        allow_methods: Sequence[str] = CORS_ALLOW_METHODS,
        allow_headers: Sequence[str] = CORS_ALLOW_HEADERS,
        allow_credentials: bool = True,
    ):
        self.app = app
        self.allow_methods = ", ".join(allow_methods)
        self.allow_headers = ", ".join(allow_headers)
        self.allow_credentials = allow_credentials

    def ack_headers(self, origin: Optional[str]) -> Dict[str, str]:
        # requested headers are not checked, the allow-list is only advertised
        headers = {
            "Access-Control-Allow-Methods": self.allow_methods,
            "Access-Control-Allow-Headers": self.allow_headers,
            "Vary": "Origin, Access-Control-Request-Headers",
        }
        if origin:
            headers["Access-Control-Allow-Origin"] = origin
        if self.allow_credentials:
            headers["Access-Control-Allow-Credentials"] = "true"
        return headers

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http" or scope["method"] != "OPTIONS":
            await self.app(scope, receive, send)
            return

        origin = Headers(scope=scope).get("origin")
        response = PlainTextResponse("OK", status_code=200, headers=self.ack_headers(origin))
        await response(scope, receive, send)
