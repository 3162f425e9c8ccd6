from fastapi import APIRouter, Depends, Request

from football_proxy.api.deps import get_response_cache
from football_proxy.core.cache import ResponseCache
from football_proxy.schemas.football import VALID_LEAGUE_CODES, HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
def health(request: Request, cache: ResponseCache = Depends(get_response_cache)):
    """
    Health check del proxy

    **Información incluida:**
    - URL de la API externa
    - Estado del caché
    - Códigos de liga válidos
    """
    upstream = request.app.state.upstream
    return {
        "status": "ok",
        "upstream": getattr(upstream, "base_url", "unknown"),
        "cache": cache.get_stats(),
        "league_codes": VALID_LEAGUE_CODES,
    }
