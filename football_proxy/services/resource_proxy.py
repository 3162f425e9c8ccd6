"""Proxy genérico para recursos individuales (equipo, partido)"""
from typing import Any, Callable

from football_proxy.core.cache import ResponseCache
from football_proxy.core.errors import UpstreamError, UpstreamTimeout, ValidationError
from football_proxy.core.logging_config import get_logger
from football_proxy.services.football_data_client import FootballDataClient
from football_proxy.services.validators import is_positive_int_id

logger = get_logger(__name__)


class ResourceProxy:
    """
    Valida un identificador, hace exactamente una llamada a la API externa
    y devuelve (y cachea) el cuerpo tal cual.

    Args:
        name: Nombre del recurso para mensajes y logs ("team", "match")
        path_template: Plantilla de la ruta externa, p.ej. "/teams/{id}"
        id_predicate: Función que decide si el identificador es válido
    """

    def __init__(
        self,
        name: str,
        path_template: str,
        id_predicate: Callable[[str], bool] = is_positive_int_id,
    ):
        self.name = name
        self.path_template = path_template
        self.id_predicate = id_predicate

    def validate(self, resource_id: str) -> str:
        if not self.id_predicate(resource_id):
            raise ValidationError(f"Invalid {self.name} ID. Must be a positive integer.")
        return resource_id

    async def fetch(
        self,
        resource_id: str,
        client: FootballDataClient,
        cache: ResponseCache,
        cache_key: str,
    ) -> Any:
        self.validate(resource_id)
        context = f"{self.name} {resource_id}"

        try:
            data = await client.get(self.path_template.format(id=resource_id))
        except UpstreamTimeout:
            logger.error(f"API Timeout Error on {context}")
            raise
        except UpstreamError as e:
            message = e.upstream_message or f"Failed to fetch {context}."
            logger.error(f"API Error on {context} (Status: {e.status_code}): {message}")
            raise UpstreamError(e.upstream_status, message) from e

        cache.set(cache_key, data)
        return data


team_proxy = ResourceProxy("team", "/teams/{id}")
match_proxy = ResourceProxy("match", "/matches/{id}")
