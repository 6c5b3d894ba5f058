"""Pytest fixtures for mazechase framework tests."""
import copy

import pytest

from mazechase import logging as mlog


@pytest.fixture
def logging_config():
    """Give a test its own logging configuration and sinks, restored after."""
    saved = copy.deepcopy(mlog._config)
    yield mlog._config
    mlog.close_all_sinks()
    mlog._config.clear()
    mlog._config.update(saved)
