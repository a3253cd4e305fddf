import logging

import pytest

from vidcheck.utils.logging_config import LOGGER_NAME


@pytest.fixture(autouse=True)
def reset_package_logger():
    yield
    package_logger = logging.getLogger(LOGGER_NAME)
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()
    package_logger.setLevel(logging.NOTSET)
