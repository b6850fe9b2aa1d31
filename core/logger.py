import logging
import sys
from core.config import get_settings

settings = get_settings()

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s %(message)s"

def setup_logger(name: str, level: str = "INFO") -> logging.Logger:
  """Build the process logger writing to stdout, once per name."""
  log = logging.getLogger(name)
  if not log.handlers:
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    log.addHandler(handler)
  log.setLevel(level.upper())
  log.propagate = False
  return log

logger = setup_logger(settings.APP_NAME, settings.LOG_LEVEL)
