import logging, sys
from typing import Optional

from lookup.settings import LOG_LEVEL

def setup_logging(level: Optional[str] = None):
    """Root stdout logging for the service and the CLIs. Safe to call twice."""
    logger = logging.getLogger()
    if logger.handlers:  # don’t double add during reload
        return
    level = level or LOG_LEVEL
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    h = logging.StreamHandler(sys.stdout)
    # threadName shows which ticket a line came from
    h.setFormatter(logging.Formatter(
        "%(asctime)s %(levelname)s %(threadName)s %(name)s :: %(message)s"
    ))
    logger.addHandler(h)
    logging.getLogger("urllib3").setLevel(logging.WARNING)
