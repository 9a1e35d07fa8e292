"""Logging setup for the entrypoints."""
from __future__ import annotations

import logging
import sys

LOG_FORMAT = '%(asctime)s %(levelname)-8s %(name)s: %(message)s'


def configure_logging(level: str = 'INFO') -> None:
  """Send records of the ``odoo_query`` loggers to stderr at ``level``.

  Calling it again only changes the level.
  """
  logger = logging.getLogger('odoo_query')
  logger.setLevel(level.upper())
  logger.propagate = False

  if not any(isinstance(handler, logging.StreamHandler) for handler in logger.handlers):
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
