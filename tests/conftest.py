import logging

import pytest

from objmodel import Runtime

logger = logging.getLogger(__name__)


@pytest.fixture
def runtime():
    """Provide a fresh Runtime, sharing no classes or layouts with other tests."""
    return Runtime()
