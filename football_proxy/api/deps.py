"""Dependencias: los colaboradores viven en app.state y se inyectan aquí"""
from fastapi import Request

from football_proxy.core.cache import ResponseCache
from football_proxy.services.football_data_client import FootballDataClient
from football_proxy.services.league_service import LeagueDataService


def get_response_cache(request: Request) -> ResponseCache:
    return request.app.state.response_cache


def get_upstream_client(request: Request) -> FootballDataClient:
    return request.app.state.upstream


def get_league_service(request: Request) -> LeagueDataService:
    """Agregador ligado al cliente y caché de la aplicación"""
    return LeagueDataService(get_upstream_client(request), get_response_cache(request))
