import sys

from loguru import logger

from queens.errors import ConfigError

LOG_FORMAT = "<green>{time:HH:mm:ss.SSS}</green> | <level>{level: <7}</level> | <cyan>{name}</cyan> - {message}"


def configure_logging(level: str = "INFO", *, sink=None) -> int:
    """Replace loguru's default handler with a single compact one; return its id.

    An unknown level raises ConfigError and leaves the current handlers alone.
    """
    level = str(level).upper()
    try:
        logger.level(level)
    except ValueError:
        raise ConfigError(f"unknown log level: {level!r}") from None
    logger.remove()
    return logger.add(
        sink or sys.stderr,
        level=level,
        format=LOG_FORMAT,
        colorize=sink is None,
    )
