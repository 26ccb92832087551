"""
Scrape.do Python SDK

"""

import logging
import os

from .client import ScrapedoClient
from .client_async import AsyncScrapedoClient
from .types import ScrapeModifiers, ScrapeOptions, ScrapeResult, UsageStats
from .utils.error_handler import (
    ScrapedoError,
    RateLimitError,
    UnauthorizedError,
    RequestTimeoutError,
    ClientCanceledError,
    TargetError,
    UnknownScrapedoError,
)

__version__ = "0.2.0"

# Define the logger for the Scrape.do project
logger: logging.Logger = logging.getLogger("scrapedo")


def _configure_logger() -> None:
    """
    Configure the scrapedo logger for console output.

    The function attaches a handler for console output with a specific format and date
    format to the scrapedo logger.
    """
    try:
        formatter = logging.Formatter(
            "[%(asctime)s - %(name)s:%(lineno)d - %(levelname)s] %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)

        logger.addHandler(console_handler)
    except Exception as e:
        logger.error("Failed to configure logging: %s", e)


def setup_logging() -> None:
    """Set up logging based on the SCRAPEDO_LOGGING_LEVEL environment variable."""
    if logger.hasHandlers():
        return

    if not (env := os.getenv("SCRAPEDO_LOGGING_LEVEL", "").upper()):
        logger.addHandler(logging.NullHandler())
        return

    _configure_logger()

    if env == "DEBUG":
        logger.setLevel(logging.DEBUG)
    elif env == "INFO":
        logger.setLevel(logging.INFO)
    elif env in ("WARNING", "WARN"):
        logger.setLevel(logging.WARNING)
    elif env == "ERROR":
        logger.setLevel(logging.ERROR)
    elif env == "CRITICAL":
        logger.setLevel(logging.CRITICAL)
    else:
        logger.setLevel(logging.INFO)
        logger.warning("Unknown logging level: %s, defaulting to INFO", env)

setup_logging()
logger.debug("Debugging logger setup")

__all__ = [
    'ScrapedoClient',
    'AsyncScrapedoClient',
    'ScrapeModifiers',
    'ScrapeOptions',
    'ScrapeResult',
    'UsageStats',
    'ScrapedoError',
    'RateLimitError',
    'UnauthorizedError',
    'RequestTimeoutError',
    'ClientCanceledError',
    'TargetError',
    'UnknownScrapedoError',
]
