"""
Logging Setup

The library only creates module loggers; hosts call configure_logging()
once at startup.
"""

import logging
import sys
from typing import Optional

from alphacore.core.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: Optional[str] = None) -> None:
    """Configure root logging from settings (or an explicit level)."""
    log_level = getattr(logging, (level or settings.log_level).upper(), logging.INFO)
    logging.basicConfig(
        format=LOG_FORMAT,
        stream=sys.stdout,
        level=log_level,
    )
    logging.getLogger("alphacore").setLevel(log_level)
