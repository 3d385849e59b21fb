"""Environment and utility functions."""

import logging
import os
import sys

from pydantic import ValidationError

from ..config import (
    CAPACITY_ENV_KEY,
    DEFAULT_CAPACITY,
    LOG_DATE_FORMAT,
    LOG_FORMAT,
    LOG_LEVEL_ENV_KEY,
)
from ..domain.value_objects.config import CacheConfig
from ..exceptions import ConfigurationError


def setup_logging(level: int = logging.INFO, log_file: str | None = None) -> None:
    """Set up logging configuration.
    
    Logs are written to console (stderr) and optionally a file.
    
    Args:
        level: Logging level
        log_file: Path to log file (None to disable file logging)
    """
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    
    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, mode='a', encoding='utf-8')
            file_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
            handlers.append(file_handler)
        except OSError as e:
            # Fall back to console-only if file logging fails
            print(f"Warning: Could not open log file '{log_file}': {e}", file=sys.stderr)
    
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        handlers=handlers,
        force=True  # Replace any existing handlers
    )


def log_level_from_env() -> int:
    """Resolve the log level named in the environment, defaulting to INFO."""
    name = os.getenv(LOG_LEVEL_ENV_KEY, "").strip().upper()
    if not name:
        return logging.INFO
    
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        logging.getLogger(__name__).warning(
            f"Unknown log level {name!r} in {LOG_LEVEL_ENV_KEY}, using INFO"
        )
        return logging.INFO
    return level


def load_config() -> CacheConfig:
    """Load store configuration from the environment.
    
    Returns:
        Validated configuration
        
    Raises:
        ConfigurationError: If the capacity is not a positive integer
    """
    raw = os.getenv(CAPACITY_ENV_KEY, "").strip()
    if not raw:
        return CacheConfig(capacity=DEFAULT_CAPACITY)
    
    try:
        return CacheConfig(capacity=int(raw))
    except (ValueError, ValidationError) as e:
        raise ConfigurationError(
            f"Invalid {CAPACITY_ENV_KEY}={raw!r}: {e}",
            config_key="capacity",
        ) from e
