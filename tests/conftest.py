"""
Root pytest configuration file for MCP Jira Tempo tests.
"""

import os
from unittest.mock import patch

import pytest


@pytest.fixture
def anyio_backend():
    """Run the anyio-marked tests on asyncio only."""
    return "asyncio"


@pytest.fixture
def clean_env():
    """Run a test with none of the server's environment variables set."""
    with patch.dict(os.environ, {}, clear=True):
        yield
