import logging

import pytest

from lispr.interpreter import Interpreter, evaluate_source, make_root_environment


@pytest.fixture
def env():
    """Fresh root environment for each test."""
    return make_root_environment()


@pytest.fixture
def run(env):
    """Evaluate the first expression of source text in the test's environment."""
    def _run(source):
        return evaluate_source(source, env)
    return _run


@pytest.fixture
def interp():
    return Interpreter()


@pytest.fixture
def lispr_logger():
    """Restore the `lispr` logger after tests that reconfigure it."""
    logger = logging.getLogger("lispr")
    handlers, level, propagate = list(logger.handlers), logger.level, logger.propagate
    yield logger
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate
