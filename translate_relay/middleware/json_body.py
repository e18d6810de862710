"""
/**
 * @file translate_relay/middleware/json_body.py
 * @description 请求体预解析：JSON 格式错误的请求在到达路由之前被拒绝。
 */
"""

import json

from starlette.datastructures import Headers
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from translate_relay.middleware.errors import MalformedBodyError, PayloadTooLargeError
from translate_relay.utils import is_json_content_type


MAX_BODY_BYTES = 100 * 1024


class JsonBodyMiddleware:
    def __init__(self, app: ASGIApp, max_body_bytes: int = MAX_BODY_BYTES):
        self.app = app
        self.max_body_bytes = max_body_bytes

    async def _read_body(self, receive: Receive) -> bytes:
        chunks = []
        size = 0
        more_body = True
        while more_body:
            message = await receive()
            if message["type"] != "http.request":
                break
            chunk = message.get("body", b"")
            size += len(chunk)
            if size > self.max_body_bytes:
                raise PayloadTooLargeError(f"Request body exceeds {self.max_body_bytes} bytes")
            chunks.append(chunk)
            more_body = message.get("more_body", False)
        return b"".join(chunks)

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http" or not is_json_content_type(Headers(scope=scope).get("content-type")):
            await self.app(scope, receive, send)
            return

        body = await self._read_body(receive)
        if body.strip():
            try:
                json.loads(body)
            except ValueError as e:
                raise MalformedBodyError(str(e)) from e

        body_sent = False

        async def replay() -> Message:
            nonlocal body_sent
            if not body_sent:
                body_sent = True
                return {"type": "http.request", "body": body, "more_body": False}
            return await receive()

        await self.app(scope, replay, send)
