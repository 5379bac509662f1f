import logging

from .settings import settings


def configure_logging(level: str | None = None) -> None:
    """Configure root logging for applications and test sessions.

    Args:
        level: Level name such as "DEBUG"; falls back to settings.log_level
    """
    level_name = (level or settings.log_level).upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format='%(asctime)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S',
        force=True
    )
