"""Logging setup shared by the API and scripts."""
import logging
import sys
from typing import Optional

from taxid.core.config import settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FMT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: Optional[str] = None) -> logging.Logger:
    """Configure the root logger with a single console handler. Returns root logger."""
    root = logging.getLogger()
    root.setLevel(level or settings.log_level)
    for h in list(root.handlers):
        root.removeHandler(h)
    ch = logging.StreamHandler(sys.stdout)
    ch.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FMT))
    root.addHandler(ch)
    return root
