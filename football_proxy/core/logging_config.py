"""
Configuración centralizada de logging para el proxy
- Logs rotativos con límite de 50MB
- Formato detallado con timestamps
- Archivos separados para errores, tiempos y requests
"""
import logging
import sys
from datetime import datetime
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional, Union

# Formato detallado para logs
LOG_FORMAT = (
    "%(asctime)s | %(levelname)-8s | %(name)-40s | "
    "%(funcName)-20s | Line %(lineno)-4d | %(message)s"
)
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Configuración de tamaños
MAX_BYTES = 50 * 1024 * 1024  # 50 MB
BACKUP_COUNT = 5


def _rotating_handler(path: Path, level: int, formatter: logging.Formatter, tag: Optional[str] = None):
    handler = RotatingFileHandler(
        filename=path,
        maxBytes=MAX_BYTES,
        backupCount=BACKUP_COUNT,
        encoding="utf-8",
    )
    handler.setLevel(level)
    if tag:
        handler.addFilter(lambda record: tag in record.getMessage())
    handler.setFormatter(formatter)
    return handler


def setup_logging(level: Union[int, str] = logging.INFO, log_dir: str = "logs", to_file: bool = True):
    """
    Configura el sistema de logging de la aplicación

    Args:
        level: Nivel de logging (logging.DEBUG, "INFO", etc.)
        log_dir: Directorio para los archivos rotativos
        to_file: Si es False solo se loguea en consola
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    # ============== ROOT LOGGER ==============
    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    # ============== CONSOLE HANDLER ==============
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    # ============== FILE HANDLERS ==============
    if to_file:
        logs_dir = Path(log_dir)
        logs_dir.mkdir(parents=True, exist_ok=True)

        root_logger.addHandler(_rotating_handler(logs_dir / "app.log", logging.INFO, formatter))
        root_logger.addHandler(_rotating_handler(logs_dir / "errors.log", logging.ERROR, formatter))
        # Solo logs de timing
        root_logger.addHandler(
            _rotating_handler(logs_dir / "performance.log", logging.DEBUG, formatter, tag="[TIMING]")
        )
        # Solo logs de requests
        root_logger.addHandler(
            _rotating_handler(logs_dir / "requests.log", logging.INFO, formatter, tag="[REQUEST]")
        )

    # ============== LOGGERS ESPECÍFICOS ==============

    # Reducir verbosidad de librerías externas
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)

    logger = logging.getLogger(__name__)
    logger.info(f"Sistema de logging inicializado - Nivel: {logging.getLevelName(level)}")
    if to_file:
        logger.info(f"Directorio de logs: {Path(log_dir).absolute()}")


class TimingLogger:
    """
    Context manager para medir y loggear tiempos de ejecución

    Uso:
        with TimingLogger("Fan-out PL"):
            # código a medir
            pass

    También funciona con ``async with``.
    """

    def __init__(self, operation_name: str, logger_name: str = None, level: int = logging.INFO):
        self.operation_name = operation_name
        self.logger = logging.getLogger(logger_name or __name__)
        self.level = level
        self.start_time = None

    def __enter__(self):
        self.start_time = datetime.now()
        self.logger.log(self.level, f"[TIMING] Iniciando: {self.operation_name}")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        elapsed = (datetime.now() - self.start_time).total_seconds()

        if exc_type is None:
            self.logger.log(
                self.level,
                f"[TIMING] Completado: {self.operation_name} | "
                f"Tiempo: {elapsed:.3f}s"
            )
        else:
            self.logger.error(
                f"[TIMING] Error en: {self.operation_name} | "
                f"Tiempo antes del error: {elapsed:.3f}s | "
                f"Error: {exc_val}"
            )

        return False  # No suprimir la excepción

    async def __aenter__(self):
        return self.__enter__()

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        return self.__exit__(exc_type, exc_val, exc_tb)


def get_logger(name: str) -> logging.Logger:
    """Obtiene un logger configurado"""
    return logging.getLogger(name)
