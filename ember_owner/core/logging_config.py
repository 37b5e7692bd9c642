"""
Centralized logging configuration.

Library modules only ever ask for a logger; the command line (or the host
application) decides where records go by calling `setup_logging`.
"""

import logging
import sys
from typing import Optional
from pathlib import Path

PACKAGE_LOGGER = 'ember_owner'

# Silent unless the host configures logging
logging.getLogger(PACKAGE_LOGGER).addHandler(logging.NullHandler())


def setup_logging(
    level: str = 'INFO',
    format_string: Optional[str] = None,
    log_file: Optional[str] = None
) -> None:
    """
    Configure logging for the entire process.
    
    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL);
            unknown names fall back to INFO
        format_string: Custom format string (uses default if None)
        log_file: Optional log file path, parent directories are created
    """
    if format_string is None:
        format_string = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    
    log_level = getattr(logging, level.upper(), logging.INFO)
    
    # stdout belongs to command output
    handlers = [logging.StreamHandler(sys.stderr)]
    
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file))
    
    logging.basicConfig(
        level=log_level,
        format=format_string,
        handlers=handlers,
        force=True
    )


def get_logger(name: str) -> logging.Logger:
    """Get a logger for a module (typically called with __name__)."""
    return logging.getLogger(name)


def configure_from_settings(settings) -> None:
    """Configure logging from a settings object's log_level and log_format."""
    setup_logging(
        level=settings.log_level,
        format_string=settings.log_format
    )
