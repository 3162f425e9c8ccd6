"""Taxonomía de errores del proxy.

Todos los errores se traducen en el borde del handler a un cuerpo
``{"message": ...}`` con el status correspondiente.
"""
from typing import List, Optional


class ProxyError(Exception):
    """Error base con status HTTP y mensaje seguro para el cliente"""

    status_code: int = 500
    message: str = "Internal server error."

    def __init__(self, message: Optional[str] = None, status_code: Optional[int] = None):
        if message is not None:
            self.message = message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)


class ValidationError(ProxyError):
    """Parámetro inválido, se rechaza antes de llamar a la API externa"""

    status_code = 400


class UpstreamError(ProxyError):
    """La API externa respondió con un status no 2xx (o no respondió)"""

    message = "Failed to fetch data from the provider."

    def __init__(self, status_code: Optional[int] = None, message: Optional[str] = None):
        # Sin respuesta de la API -> 500
        self.upstream_status = status_code
        self.upstream_message = message
        super().__init__(message=message, status_code=status_code or 500)


class UpstreamTimeout(ProxyError):
    status_code = 504
    message = "The request to the data provider timed out."


class AggregateFailure(ProxyError):
    """Falló al menos una sub-petición de un fan-out"""

    status_code = 502
    message = "Failed to fetch data from the provider. Check backend logs for details."

    def __init__(self, failed_paths: List[str]):
        # Solo para diagnóstico en logs, nunca se envía al cliente
        self.failed_paths = list(failed_paths)
        super().__init__()
