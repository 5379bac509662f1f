import os

import pytest

from property_attributes.config import configure_logging


@pytest.fixture(scope="session", autouse=True)
def configure_test_logging():
    """Configure logging for all test sessions"""
    configure_logging(os.getenv("TEST_LOG_LEVEL", "INFO"))
