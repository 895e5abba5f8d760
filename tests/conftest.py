import logging

import numpy as np
import pytest

from mvpa_common.logging_utils import LOGGER_NAME


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Close handlers installed by setup_logging so tests do not leak files or stdout handlers."""
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers = []
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def small_matrix():
    return np.array([[1, 2, 3], [4, 5, 6]])
