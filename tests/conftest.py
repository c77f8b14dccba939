import pytest
from piper.logger.logger import logger


@pytest.fixture
def propagating_logger(monkeypatch):
    # The package logger does not propagate; caplog listens on the root logger.
    monkeypatch.setattr(logger, "propagate", True)
    return logger
