"""
/**
 * @file translate_relay/middleware/errors.py
 * @description 管道异常类型与兜底错误响应。
 */
"""

from fastapi.responses import JSONResponse


class CorsRejectedError(Exception):
    def __init__(self, origin: str):
        super().__init__("Not allowed by CORS")
        self.origin = origin


class MalformedBodyError(Exception):
    pass


class PayloadTooLargeError(Exception):
    pass


def error_response(exc: Exception) -> JSONResponse:
    if isinstance(exc, CorsRejectedError):
        return JSONResponse(status_code=403, content={"error": "CORS Error: Origin not allowed"})
    if isinstance(exc, MalformedBodyError):
        return JSONResponse(status_code=400, content={"error": "Invalid JSON body"})
    if isinstance(exc, PayloadTooLargeError):
        return JSONResponse(status_code=413, content={"error": "Request body too large"})
    # unclassified failures carry no detail
    return JSONResponse(status_code=500, content={"error": "Internal Server Error"})
