"""
Loguru sink configuration shared by the CLI and the API.
"""

import sys

from loguru import logger

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)


def configure_logging(level: str = "INFO", serialize: bool = False) -> None:
    """Configure logging with loguru.

    Args:
        level: Minimum level written to stderr
        serialize: Emit JSON records instead of the coloured console format
    """
    logger.remove()

    if serialize:
        logger.add(sys.stderr, level=level.upper(), serialize=True)
    else:
        logger.add(sys.stderr, format=CONSOLE_FORMAT, level=level.upper())
