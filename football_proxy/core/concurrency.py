"""Fan-out concurrente que espera a que todas las tareas terminen"""
import asyncio
from typing import Any, Awaitable, Iterable, List, Optional


class UpstreamOutcome:
    """Resultado de una sub-petición: cuerpo JSON o error"""

    def __init__(self, value: Any = None, error: Optional[BaseException] = None):
        self.value = value
        self.error = error

    @property
    def ok(self) -> bool:
        return self.error is None

    def __repr__(self) -> str:
        if self.ok:
            return "UpstreamOutcome(ok)"
        return f"UpstreamOutcome(error={self.error!r})"


async def settle_all(awaitables: Iterable[Awaitable[Any]]) -> List[UpstreamOutcome]:
    """
    Lanza todas las tareas a la vez y espera a que todas terminen.

    A diferencia de ``asyncio.gather`` sin ``return_exceptions``, un fallo
    no corta a las demás: se devuelve un ``UpstreamOutcome`` por tarea, en
    el mismo orden en que se recibieron.
    """
    results = await asyncio.gather(*awaitables, return_exceptions=True)

    outcomes = []
    for result in results:
        if isinstance(result, Exception):
            outcomes.append(UpstreamOutcome(error=result))
        elif isinstance(result, BaseException):
            # Cancelación y similares se propagan
            raise result
        else:
            outcomes.append(UpstreamOutcome(value=result))
    return outcomes
