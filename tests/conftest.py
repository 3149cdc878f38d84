import logging

import pytest


@pytest.fixture(autouse=True)
def _restore_package_logger():
    """Undo initialize_logging() so later tests keep propagating to caplog."""
    logger = logging.getLogger('slink')
    handlers, level, propagate = logger.handlers[:], logger.level, logger.propagate
    yield logger
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate
