"""Esquemas Pydantic para la API de fútbol"""
from enum import Enum
from typing import Any, Dict, List

from pydantic import BaseModel


class LeagueCode(str, Enum):
    """Competiciones soportadas por el proxy"""
    PL = "PL"
    PD = "PD"
    BL1 = "BL1"
    SA = "SA"
    FL1 = "FL1"
    CL = "CL"
    PPL = "PPL"


VALID_LEAGUE_CODES: List[str] = [code.value for code in LeagueCode]

# Competición continental: no tiene goleadores en fase de grupos
CONTINENTAL_LEAGUE = LeagueCode.CL


class LeagueDataResponse(BaseModel):
    """Clasificación, partidos y goleadores de una liga"""
    standings: Any = None
    matches: Any = None
    scorers: Any = None


class ErrorResponse(BaseModel):
    message: str


class CacheStats(BaseModel):
    size: int
    ttl_seconds: int


class HealthResponse(BaseModel):
    status: str
    upstream: str
    cache: CacheStats
    league_codes: List[str]


ERROR_RESPONSES: Dict[int, Dict[str, Any]] = {
    400: {"model": ErrorResponse, "description": "Parámetro inválido"},
    502: {"model": ErrorResponse, "description": "Fallo en la API externa"},
    504: {"model": ErrorResponse, "description": "Timeout de la API externa"},
}
