import os

import pytest
import structlog

from bincodec.conf.get_settings import CONFIG_YAML_ENV_VAR, reset_global_settings

# XXX: loggers return their event instead of printing it, so nothing leaks into doctest output
structlog.configure(logger_factory=structlog.ReturnLoggerFactory())

os.environ.pop(CONFIG_YAML_ENV_VAR, None)


@pytest.fixture(autouse=True)
def _reset_settings():
    reset_global_settings()
    yield
    reset_global_settings()
