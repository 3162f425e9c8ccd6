"""Endpoints de datos de fútbol (proxy de football-data.org)"""
from fastapi import APIRouter, Depends, Request

from football_proxy.api.deps import get_league_service, get_response_cache, get_upstream_client
from football_proxy.core.cache import ResponseCache, request_cache_key
from football_proxy.schemas.football import ERROR_RESPONSES, LeagueDataResponse
from football_proxy.services.football_data_client import FootballDataClient
from football_proxy.services.league_service import LeagueDataService
from football_proxy.services.resource_proxy import match_proxy, team_proxy
from football_proxy.services.validators import validate_league_code

router = APIRouter(prefix="/api", tags=["Football Data"])


# ===== ENDPOINTS: LIGAS =====

@router.get(
    "/league-data/{league_code}",
    response_model=LeagueDataResponse,
    responses=ERROR_RESPONSES,
)
async def get_league_data(
    league_code: str,
    request: Request,
    service: LeagueDataService = Depends(get_league_service),
):
    """
    Clasificación, partidos y goleadores de una competición.

    - **league_code**: PL, PD, BL1, SA, FL1, CL o PPL
    - **CL**: sin goleadores (siempre lista vacía)
    - **Caché**: 5 minutos por ruta
    """
    code = validate_league_code(league_code)
    return await service.get_league_data(code, request_cache_key(request))


# ===== ENDPOINTS: RECURSOS INDIVIDUALES =====

@router.get("/team/{team_id}", responses=ERROR_RESPONSES)
async def get_team(
    team_id: str,
    request: Request,
    client: FootballDataClient = Depends(get_upstream_client),
    cache: ResponseCache = Depends(get_response_cache),
):
    """Datos de un equipo tal cual los devuelve la API externa"""
    return await team_proxy.fetch(team_id, client, cache, request_cache_key(request))


@router.get("/match/{match_id}", responses=ERROR_RESPONSES)
async def get_match(
    match_id: str,
    request: Request,
    client: FootballDataClient = Depends(get_upstream_client),
    cache: ResponseCache = Depends(get_response_cache),
):
    """Datos de un partido tal cual los devuelve la API externa"""
    return await match_proxy.fetch(match_id, client, cache, request_cache_key(request))
