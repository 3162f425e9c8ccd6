"""Cliente HTTP para la API de football-data.org"""
from typing import Any, Optional

import httpx

from football_proxy.core.errors import UpstreamError, UpstreamTimeout
from football_proxy.core.logging_config import get_logger

logger = get_logger(__name__)


class FootballDataClient:
    """
    Cliente delgado ligado a la URL base, al token y a un timeout fijo.

    Cada llamada es un único intento: los reintentos, si los hay, son
    responsabilidad de quien llama.
    """

    BASE_URL = "https://api.football-data.org/v4"
    TIMEOUT_SECONDS = 10.0

    def __init__(
        self,
        api_key: str,
        base_url: str = BASE_URL,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url
        self._client = httpx.AsyncClient(
            base_url=base_url,
            headers={"X-Auth-Token": api_key},
            timeout=self.TIMEOUT_SECONDS,
            transport=transport,
        )

    async def get(self, path: str) -> Any:
        """
        GET a la API externa

        Returns:
            Cuerpo JSON de la respuesta

        Raises:
            UpstreamTimeout: sin respuesta en 10 segundos
            UpstreamError: status no 2xx o error de conexión
        """
        try:
            response = await self._client.get(path)
        except httpx.TimeoutException as e:
            raise UpstreamTimeout() from e
        except httpx.RequestError as e:
            # Sin respuesta: no hay status que propagar
            raise UpstreamError(message=None) from e

        if not response.is_success:
            raise UpstreamError(response.status_code, self._error_message(response))

        try:
            return response.json()
        except ValueError as e:
            # 2xx con cuerpo que no es JSON
            raise UpstreamError(message=None) from e

    @staticmethod
    def _error_message(response: httpx.Response) -> Optional[str]:
        try:
            body = response.json()
        except ValueError:
            return None
        if isinstance(body, dict) and isinstance(body.get("message"), str):
            return body["message"]
        return None

    async def aclose(self) -> None:
        await self._client.aclose()
