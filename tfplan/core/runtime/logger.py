"""
Logging centralizado con loguru.

stdout queda reservado para los renderers: los logs van a stderr (y opcionalmente
a un archivo con rotación).
"""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger


CONSOLE_FORMAT = "<level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"


def setup_logger(level: str = "WARNING", log_file: Optional[Path] = None, verbose: bool = False) -> None:
    """
    Configura los sinks de loguru.

    Args:
        level: Nivel mínimo para stderr
        log_file: Archivo de log (rotado a 10 MB); None para no escribir archivo
        verbose: Fuerza DEBUG en stderr
    """
    logger.remove()

    logger.add(
        sys.stderr,
        format=CONSOLE_FORMAT,
        level="DEBUG" if verbose else level,
        colorize=None,
    )

    if log_file is not None:
        log_path = Path(log_file).expanduser()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_path,
            format=FILE_FORMAT,
            level="DEBUG",
            rotation="10 MB",
            retention=3,
            encoding="utf-8",
        )
