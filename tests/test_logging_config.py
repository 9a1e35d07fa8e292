import logging

import pytest

from odoo_query.common.logging_config import LOG_FORMAT, configure_logging


@pytest.fixture
def package_logger():
  logger = logging.getLogger('odoo_query')
  saved = (logger.level, logger.propagate, list(logger.handlers))
  yield logger
  logger.setLevel(saved[0])
  logger.propagate = saved[1]
  logger.handlers[:] = saved[2]


def test_configure_twice_keeps_one_handler(package_logger: logging.Logger):
  configure_logging('debug')
  configure_logging('WARNING')

  assert package_logger.level == logging.WARNING
  assert len(package_logger.handlers) == 1
  assert package_logger.handlers[0].formatter._fmt == LOG_FORMAT
  assert package_logger.propagate is False
