"""Logging setup for bibterm"""
from loguru import logger
import sys
from pathlib import Path


def setup_logger(config, verbose: bool = False):
    """
    Configure loguru logger based on config settings

    Lookup results own stdout, so console logging goes to stderr.

    Args:
        config: Config object with logging settings
        verbose: Force DEBUG level on the console handler

    Returns:
        logger: Configured loguru logger instance
    """
    # Remove default handler
    logger.remove()

    level = "DEBUG" if verbose else config.logging['level']

    # Console output
    if config.logging['console'] or verbose:
        logger.add(
            sys.stderr,
            level=level,
            format="<level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>",
            colorize=None
        )

    # File output
    if config.logging['file']:
        log_path = Path(config.logging['path'])
        log_path.parent.mkdir(parents=True, exist_ok=True)

        logger.add(
            str(log_path),
            rotation=f"{config.logging['max_size_mb']} MB",
            retention=config.logging['backup_count'],
            level=level,
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}",
        )

    return logger
