import logging

import pytest

from pdftitle.logging_config import LOGGER_NAME


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop handlers bound to captured streams between tests."""
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
