"""
Logging loguru de CineScope : console lisible et fichier JSON.
"""

import sys

from loguru import logger

from .config import Settings

CONSOLE_FORMAT = "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | {message}"


def configure_logging(settings: Settings) -> None:
    """Remplace les handlers par defaut selon les settings.

    La console suit settings.log_level ; le fichier garde tout a partir de
    DEBUG pour tracer les appels TMDB.
    """
    logger.remove()
    logger.add(sys.stderr, level=settings.log_level, format=CONSOLE_FORMAT, colorize=True)

    settings.log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        settings.log_file,
        level="DEBUG",
        serialize=True,
        rotation=settings.log_rotation_size,
        retention=settings.log_retention_count,
        enqueue=True,
    )
