"""
Middlewares HTTP del proxy
- Logging de cada request y response
- Alerta de requests lentos
- Pre-chequeo del caché de respuestas
"""
import logging
import time
from typing import Callable

from fastapi import Request, Response
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from football_proxy.core.cache import MISS, request_cache_key

logger = logging.getLogger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Middleware que logea método, path, cliente, status y tiempo de
    procesamiento de cada request. Añade el header X-Process-Time.
    """

    def __init__(self, app: ASGIApp):
        super().__init__(app)

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start_time = time.perf_counter()
        client_host = request.client.host if request.client else None

        logger.info(
            f"[REQUEST] {request.method} {request.url.path} | "
            f"Client: {client_host} | "
            f"Query: {dict(request.query_params)}"
        )

        try:
            response = await call_next(request)
        except Exception as e:
            process_time = time.perf_counter() - start_time
            logger.error(
                f"[REQUEST] ERROR en {request.method} {request.url.path} | "
                f"Time: {process_time:.3f}s | "
                f"Error: {str(e)}",
                exc_info=True
            )
            raise

        process_time = time.perf_counter() - start_time
        response.headers["X-Process-Time"] = str(process_time)

        log_level = logging.INFO if response.status_code < 400 else logging.WARNING
        logger.log(
            log_level,
            f"[REQUEST] {request.method} {request.url.path} | "
            f"Status: {response.status_code} | "
            f"Time: {process_time:.3f}s"
        )
        return response


class PerformanceMonitoringMiddleware(BaseHTTPMiddleware):
    """Alerta sobre requests que superan el umbral (p.ej. API externa lenta)"""

    def __init__(self, app: ASGIApp, slow_request_threshold: float = 5.0):
        super().__init__(app)
        self.slow_request_threshold = slow_request_threshold

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start_time = time.perf_counter()

        response = await call_next(request)

        process_time = time.perf_counter() - start_time
        if process_time > self.slow_request_threshold:
            logger.warning(
                f"[PERFORMANCE] Request lento detectado: "
                f"{request.method} {request.url.path} | "
                f"Tiempo: {process_time:.3f}s (umbral: {self.slow_request_threshold}s)"
            )

        return response


class ResponseCacheMiddleware(BaseHTTPMiddleware):
    """
    Si la ruta exacta del request está en caché y no ha expirado, responde
    directamente sin llegar al handler. El caché se lee de
    ``app.state.response_cache``.
    """

    def __init__(self, app: ASGIApp, path_prefix: str = "/api/"):
        super().__init__(app)
        self.path_prefix = path_prefix

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        if request.method != "GET" or not request.url.path.startswith(self.path_prefix):
            return await call_next(request)

        cache = request.app.state.response_cache
        key = request_cache_key(request)

        cached = cache.get(key, MISS)
        if cached is not MISS:
            logger.info(f"[CACHE HIT] {key}")
            return JSONResponse(cached)

        logger.info(f"[CACHE MISS] {key}")
        return await call_next(request)
