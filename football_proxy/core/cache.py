"""Caché de respuestas con TTL fijo"""
import logging
import time
from typing import Any, Callable, Dict, Optional

from starlette.requests import Request

logger = logging.getLogger(__name__)

# 5 minutos para todas las entradas
CACHE_TTL_SECONDS = 300

# Marca de fallo en get(): un payload JSON null es un valor válido
MISS = object()


class ResponseCache:
    """
    Caché clave -> payload JSON con expiración perezosa.

    - La clave es la ruta completa del request (incluida la query string)
    - Una entrada es visible mientras ``now - inserted_at < ttl``
    - Las entradas expiradas se eliminan al leerlas, no hay barrido
    - Sin límite de tamaño: las claves válidas son pocas
    """

    def __init__(self, ttl_seconds: int = CACHE_TTL_SECONDS, clock: Callable[[], float] = time.time):
        self.store: Dict[str, tuple[float, Any]] = {}
        self.ttl = ttl_seconds
        self._clock = clock

    def _lookup(self, key: str) -> Optional[tuple[float, Any]]:
        entry = self.store.get(key)
        if entry is None:
            return None

        inserted_at, _ = entry
        if self._clock() - inserted_at >= self.ttl:
            del self.store[key]
            return None

        return entry

    def has(self, key: str) -> bool:
        return self._lookup(key) is not None

    def get(self, key: str, default: Any = None) -> Any:
        """Obtiene un valor del caché si no ha expirado, o ``default``"""
        entry = self._lookup(key)
        return entry[1] if entry is not None else default

    def set(self, key: str, value: Any) -> None:
        """Guarda (o sobrescribe) un valor con el timestamp actual"""
        self.store[key] = (self._clock(), value)
        logger.debug(f"[CACHE SET] {key}")

    def clear(self) -> None:
        self.store.clear()

    def get_stats(self) -> Dict[str, Any]:
        return {
            "size": len(self.store),
            "ttl_seconds": self.ttl,
        }


def request_cache_key(request: Request) -> str:
    """Ruta original del request, con query string si la hay"""
    query = request.url.query
    return f"{request.url.path}?{query}" if query else request.url.path
