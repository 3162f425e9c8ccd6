"""Validación de parámetros de entrada antes de tocar la API externa"""
import re

from football_proxy.core.errors import ValidationError
from football_proxy.schemas.football import VALID_LEAGUE_CODES, LeagueCode

# Solo dígitos ASCII: \d aceptaría también dígitos Unicode
_POSITIVE_INT_RE = re.compile(r"[0-9]+")


def validate_league_code(raw: str) -> LeagueCode:
    """Devuelve el LeagueCode o lanza ValidationError con la lista de códigos válidos"""
    try:
        return LeagueCode(raw)
    except ValueError:
        raise ValidationError(
            f"Invalid league code. Must be one of: {', '.join(VALID_LEAGUE_CODES)}"
        ) from None


def is_positive_int_id(raw: str) -> bool:
    return bool(raw) and _POSITIVE_INT_RE.fullmatch(raw) is not None and int(raw) > 0
