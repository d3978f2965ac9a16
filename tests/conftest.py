import logging

import pytest

from forg.logs import PACKAGE_LOGGER_NAME


@pytest.fixture(autouse=True)
def reset_package_logger():
    yield

    logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
