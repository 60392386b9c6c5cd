import sys
from loguru import logger


def configure_logging(level: str = "INFO"):
    """Route loguru output to a single stderr sink at ``level``."""
    logger.remove()
    logger.add(
        sys.stderr,
        level=level.upper(),
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | {name}:{function} - {message}",
    )
