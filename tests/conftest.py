"""
Global pytest configuration and fixtures.
"""

import os
from unittest.mock import patch

import httpx
import pytest

from solodit_mcp.solodit_client import SoloditClient


@pytest.fixture(autouse=True)
def clean_env():
    """Keep tests independent of the host environment."""
    with patch.dict(os.environ, {}, clear=True):
        yield


@pytest.fixture
def make_client():
    def _make(transport: httpx.MockTransport, api_key: str = "test-key") -> SoloditClient:
        return SoloditClient(
            api_key=api_key,
            base_url="https://solodit.test/api/v1/solodit/",
            transport=transport,
        )

    return _make
