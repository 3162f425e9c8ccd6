"""
Agregador de datos de liga.

Para un código de liga lanza en paralelo las peticiones de clasificación,
partidos y (salvo la Champions) goleadores, espera a que terminen todas
y devuelve el payload combinado. Si falla cualquiera, falla todo y no se
cachea nada.
"""
from typing import Any, Dict, List

from football_proxy.core.cache import ResponseCache
from football_proxy.core.concurrency import settle_all
from football_proxy.core.errors import AggregateFailure
from football_proxy.core.logging_config import TimingLogger, get_logger
from football_proxy.schemas.football import CONTINENTAL_LEAGUE, LeagueCode
from football_proxy.services.football_data_client import FootballDataClient

logger = get_logger(__name__)


class LeagueDataService:
    """Fan-out + merge + caché para /api/league-data"""

    def __init__(self, client: FootballDataClient, cache: ResponseCache):
        self.client = client
        self.cache = cache

    @staticmethod
    def build_endpoints(league_code: LeagueCode) -> List[str]:
        """Rutas en orden fijo: standings, matches, scorers (el orden importa)"""
        code = league_code.value
        endpoints = [
            f"/competitions/{code}/standings",
            f"/competitions/{code}/matches",
        ]
        if league_code != CONTINENTAL_LEAGUE:
            endpoints.append(f"/competitions/{code}/scorers")
        return endpoints

    async def get_league_data(self, league_code: LeagueCode, cache_key: str) -> Dict[str, Any]:
        endpoints = self.build_endpoints(league_code)

        async with TimingLogger(f"Fan-out {league_code.value} ({len(endpoints)} requests)", __name__):
            outcomes = await settle_all(self.client.get(endpoint) for endpoint in endpoints)

        failed = []
        for endpoint, outcome in zip(endpoints, outcomes):
            if not outcome.ok:
                failed.append(endpoint)
                logger.error(f"--> Request to endpoint '{endpoint}' FAILED.")
                logger.error(f"--> Reason: {outcome.error}")

        if failed:
            raise AggregateFailure(failed)

        # Ensamblado por posición
        payload = {
            "standings": _field(outcomes[0].value, "standings"),
            "matches": _field(outcomes[1].value, "matches"),
            "scorers": _field(outcomes[2].value, "scorers") if len(outcomes) > 2 else [],
        }
        self.cache.set(cache_key, payload)
        return payload


def _field(body: Any, name: str) -> Any:
    if isinstance(body, dict):
        return body.get(name)
    return None
