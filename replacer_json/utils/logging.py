"""
logging.py
Logging setup shared by the library and the command line tool.
"""

import logging
import os
from typing import Optional

LOG_LEVEL_ENV = "REPLACER_JSON_LOG_LEVEL"
_DEFAULT_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def configure_logging(level: Optional[str] = None) -> None:
    """
    Configure stdlib logging once.
    Respects the REPLACER_JSON_LOG_LEVEL env var if `level` is None; defaults to INFO.
    """
    lvl = (level or os.environ.get(LOG_LEVEL_ENV) or "INFO").upper()
    logging.basicConfig(level=getattr(logging, lvl, logging.INFO), format=_DEFAULT_FORMAT)


def get_logger(name: str) -> logging.Logger:
    """Return the named logger; handlers come from configure_logging()."""
    return logging.getLogger(name)
