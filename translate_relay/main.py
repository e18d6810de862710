"""
/**
 * @file translate_relay/main.py
 * @description FastAPI 应用入口（仅装配中间件管道与路由）。
 */
"""

import logging
import os
from typing import Optional

import uvicorn
from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from watchdog.events import FileSystemEventHandler
from watchdog.observers import Observer

from translate_relay.config import CONFIG_LOCAL_PATH, CONFIG_PATH, load_settings, reload_settings
from translate_relay.controllers import health_router, models_router, translate_router
from translate_relay.middleware import (
    CORS_ALLOW_HEADERS,
    CORS_ALLOW_METHODS,
    ErrorBoundaryMiddleware,
    JsonBodyMiddleware,
    OriginGateMiddleware,
    PreflightMiddleware,
    RateLimitMiddleware,
    RateLimitStore,
    SecurityHeadersMiddleware,
)
from translate_relay.utils import ALLOWED_ORIGIN_REGEX

load_dotenv()
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("translate_relay")


class ConfigEventHandler(FileSystemEventHandler):
    """Reloads settings when config.json or config.local.json changes"""
    def on_modified(self, event):
        if event.is_directory:
            return
        if event.src_path in (CONFIG_PATH, CONFIG_LOCAL_PATH):
            reload_settings()


async def _validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info(f"Request body rejected on {request.url.path}: {exc.errors()}")
    return JSONResponse(status_code=400, content={"error": "Missing required fields"})


def create_app(rate_limit_store: Optional[RateLimitStore] = None) -> FastAPI:
    app = FastAPI(title="Translate Relay")
    app.state.rate_limit_store = rate_limit_store or RateLimitStore()
    app.state.config_observer = None

    @app.on_event("startup")
    async def startup_event():
        load_settings()
        try:
            observer = Observer()
            config_dir = os.path.dirname(CONFIG_PATH)
            observer.schedule(ConfigEventHandler(), config_dir, recursive=False)
            observer.start()
            app.state.config_observer = observer
            logger.info(f"Config watcher started on {config_dir}")
        except OSError as e:
            logger.error(f"Failed to start config watcher: {e}")

    @app.on_event("shutdown")
    async def shutdown_event():
        observer = app.state.config_observer
        if observer:
            observer.stop()
            observer.join()
            app.state.config_observer = None

    app.add_exception_handler(RequestValidationError, _validation_error_handler)

    # add_middleware wraps outward: the last one added runs first
    app.add_middleware(RateLimitMiddleware, store=app.state.rate_limit_store)
    app.add_middleware(JsonBodyMiddleware)
    # body and route failures are answered here so the headers below still apply
    app.add_middleware(ErrorBoundaryMiddleware)
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origin_regex=ALLOWED_ORIGIN_REGEX,
        allow_credentials=True,
        allow_methods=list(CORS_ALLOW_METHODS),
        allow_headers=list(CORS_ALLOW_HEADERS),
    )
    app.add_middleware(PreflightMiddleware)
    app.add_middleware(OriginGateMiddleware)
    # only origin rejections reach this one
    app.add_middleware(ErrorBoundaryMiddleware)

    app.include_router(health_router)
    app.include_router(translate_router)
    app.include_router(models_router)
    return app


app = create_app()


def run() -> None:
    settings = load_settings()
    logger.info(f"Server ready at http://localhost:{settings.port}")
    logger.info("CORS configured for localhost and 127.0.0.1 origins")
    uvicorn.run(app, host=settings.host, port=settings.port, log_level="info")


if __name__ == "__main__":
    run()
