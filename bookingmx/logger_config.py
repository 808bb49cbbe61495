"""Centralized logging configuration."""

import sys

from loguru import logger

log_format = ' | '.join(
    (
        '<lk>{time:YYYY-MM-DD HH:mm:ss.SSS}</>',
        '<lvl>{level:<8}</>',
        '<c>{name}::{function}:{line}</>',
        '{message}',
    )
)


def configure_logging(level: str = 'INFO') -> None:
    """Replace loguru's default handler with a single stderr sink at the given level."""
    logger.remove()
    logger.add(sys.stderr, format=log_format, level=level.upper())


__all__ = ['configure_logging', 'logger']
