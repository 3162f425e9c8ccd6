import logging
import sys
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import ValidationError as SettingsError

from football_proxy.api.routers import football, health
from football_proxy.core.cache import ResponseCache
from football_proxy.core.config import Settings, get_settings
from football_proxy.core.errors import ProxyError
from football_proxy.core.logging_config import setup_logging
from football_proxy.middleware import (
    PerformanceMonitoringMiddleware,
    RequestLoggingMiddleware,
    ResponseCacheMiddleware,
)
from football_proxy.services.football_data_client import FootballDataClient

logger = logging.getLogger(__name__)


def load_settings() -> Settings:
    """Carga la configuración; sin FOOTBALL_API_KEY el proceso termina"""
    try:
        return get_settings()
    except SettingsError:
        logger.error("ERROR: FOOTBALL_API_KEY environment variable is required")
        logger.error("Please set FOOTBALL_API_KEY in your .env file")
        sys.exit(1)


def create_app(
    settings: Optional[Settings] = None,
    cache: Optional[ResponseCache] = None,
    upstream: Optional[FootballDataClient] = None,
) -> FastAPI:
    s = settings or load_settings()
    setup_logging(level=s.LOG_LEVEL, log_dir=s.LOG_DIR, to_file=s.LOG_TO_FILE)

    app = FastAPI(
        title="Football Data Proxy",
        version="1.0.0",
        description="Proxy con caché para football-data.org",
    )

    # Colaboradores compartidos entre requests
    app.state.response_cache = cache or ResponseCache()
    app.state.upstream = upstream or FootballDataClient(s.FOOTBALL_API_KEY)

    # ============== MIDDLEWARES ==============
    # El último en añadirse es el más externo

    app.add_middleware(ResponseCacheMiddleware, path_prefix="/api/")
    app.add_middleware(PerformanceMonitoringMiddleware, slow_request_threshold=s.SLOW_REQUEST_THRESHOLD)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[s.CORS_ORIGIN],
        allow_methods=["GET"],
        allow_headers=["*"],
    )
    logger.info(f"✓ CORS configurado para origen: {s.CORS_ORIGIN}")

    # ============== ERRORES ==============

    @app.exception_handler(ProxyError)
    async def proxy_error_handler(request: Request, exc: ProxyError):
        return JSONResponse(status_code=exc.status_code, content={"message": exc.message})

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.error(f"Error no controlado en {request.url.path}: {exc}", exc_info=exc)
        return JSONResponse(status_code=500, content={"message": "Internal server error."})

    # ============== ROUTERS ==============

    app.include_router(football.router)
    app.include_router(health.router)

    @app.get("/")
    def root():
        return {
            "message": "Football Data Proxy",
            "version": "1.0.0",
            "endpoints": [
                "/api/league-data/{leagueCode}",
                "/api/team/{teamId}",
                "/api/match/{matchId}",
                "/health",
                "/docs",
            ],
        }

    @app.on_event("startup")
    async def startup_event():
        logger.info("=" * 80)
        logger.info(f"Server is running on http://{s.HOST}:{s.PORT}")
        logger.info(f"CORS origin: {s.CORS_ORIGIN}")
        logger.info("=" * 80)

    @app.on_event("shutdown")
    async def shutdown_event():
        logger.info("Cerrando cliente HTTP de la API externa...")
        await app.state.upstream.aclose()

    return app


app = create_app()


def run():
    import uvicorn

    s = load_settings()
    # proxy_headers: la IP real llega en X-Forwarded-For detrás de Render/Heroku
    uvicorn.run(
        app,
        host=s.HOST,
        port=s.PORT,
        proxy_headers=True,
        forwarded_allow_ips="*",
        log_config=None,
    )


if __name__ == "__main__":
    run()
