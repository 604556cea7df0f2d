"""Root test configuration: isolate env vars and loguru sinks per test"""

import os
import sys

import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Drop DOCSTORE_* env vars so the developer's shell never leaks into tests."""
    for name in list(os.environ):
        if name.startswith("DOCSTORE_"):
            monkeypatch.delenv(name)


@pytest.fixture(autouse=True)
def reset_logging():
    """Restore loguru's single stderr sink after tests that reconfigure it."""
    yield
    logger.remove()
    logger.add(lambda msg: sys.stderr.write(msg))
