"""
/**
 * @file translate_relay/middleware/__init__.py
 * @description 请求管道中间件导出。
 */
"""

from .error_boundary import ErrorBoundaryMiddleware
from .errors import CorsRejectedError, MalformedBodyError, PayloadTooLargeError, error_response
from .json_body import JsonBodyMiddleware
from .origin_gate import OriginGateMiddleware
from .preflight import CORS_ALLOW_HEADERS, CORS_ALLOW_METHODS, PreflightMiddleware
from .rate_limit import RateLimitMiddleware, RateLimitStore
from .security_headers import SecurityHeadersMiddleware

__all__ = [
    "ErrorBoundaryMiddleware",
    "CorsRejectedError",
    "MalformedBodyError",
    "PayloadTooLargeError",
    "error_response",
    "JsonBodyMiddleware",
    "OriginGateMiddleware",
    "PreflightMiddleware",
    "CORS_ALLOW_HEADERS",
    "CORS_ALLOW_METHODS",
    "RateLimitMiddleware",
    "RateLimitStore",
    "SecurityHeadersMiddleware",
]
