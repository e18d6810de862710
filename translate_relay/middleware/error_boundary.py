"""
/**
 * @file translate_relay/middleware/error_boundary.py
 * @description 兜底中间件：把未处理异常转换为 JSON 错误。
 * @note 管道中挂载两次：最外层只会遇到跨域拒绝，内层（安全头与 CORS 之内）处理请求体与路由异常，
 *       使这些错误响应同样带上安全头与 CORS 头。
 */
"""

import logging

from starlette.types import ASGIApp, Message, Receive, Scope, Send

from translate_relay.middleware.errors import CorsRejectedError, MalformedBodyError, PayloadTooLargeError, error_response


logger = logging.getLogger(__name__)


class ErrorBoundaryMiddleware:
    def __init__(self, app: ASGIApp):
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        response_started = False

        async def send_wrapper(message: Message) -> None:
            nonlocal response_started
            if message["type"] == "http.response.start":
                response_started = True
            await send(message)

        try:
            await self.app(scope, receive, send_wrapper)
        except Exception as exc:
            if response_started:
                raise
            if isinstance(exc, CorsRejectedError):
                logger.warning(f"Rejected origin {exc.origin!r} on {scope.get('path')}")
            elif not isinstance(exc, (MalformedBodyError, PayloadTooLargeError)):
                logger.exception(f"Unhandled error on {scope.get('method')} {scope.get('path')}")
            response = error_response(exc)
            await response(scope, receive, send)
