"""Logging configuration for scripts and the API process."""

import logging
import sys

from blog.config import Settings


def setup_logging(settings: Settings) -> None:
    """Configure stdlib logging for third-party libraries and scripts.

    Args:
        settings: Application settings
    """
    level = logging.DEBUG if settings.debug else logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )

    logging.getLogger("asyncpg").setLevel(logging.WARNING)
    logging.getLogger("alembic").setLevel(logging.INFO)
    logging.getLogger("blog").setLevel(level)

    logger = logging.getLogger(__name__)
    logger.info(
        f"Logging configured: environment={settings.environment}, level={logging.getLevelName(level)}"
    )
