import logging
import os
from typing import Optional


def configure_logging(level_name: Optional[str] = None) -> None:
    """Configure root logging; the level defaults to the LOG_LEVEL environment variable."""
    level_name = (level_name or os.getenv("LOG_LEVEL", "INFO")).upper()
    level = getattr(logging, level_name, logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def get_logger(name: str) -> logging.Logger:
    """Return a logger with the given name."""
    return logging.getLogger(name)
