"""
Tests for environment-driven settings.
"""

import os
from unittest.mock import patch

from solodit_mcp.settings import DEFAULT_BASE_URL, Settings


class TestSettings:
    def test_defaults(self):
        settings = Settings(_env_file=None)
        assert settings.solodit_api_key == ""
        assert settings.solodit_base_url == DEFAULT_BASE_URL
        assert settings.solodit_timeout is None
        assert settings.mcp_transport_mode == "stdio"
        assert settings.log_level == "INFO"

    def test_environment_overrides(self):
        with patch.dict(
            os.environ,
            {
                "SOLODIT_API_KEY": "env-key",
                "SOLODIT_BASE_URL": "https://staging.test/api",
                "SOLODIT_TIMEOUT": "15",
                "MCP_TRANSPORT_MODE": "http",
                "MCP_PORT": "9001",
            },
        ):
            settings = Settings(_env_file=None)

        assert settings.solodit_api_key == "env-key"
        assert settings.solodit_base_url == "https://staging.test/api"
        assert settings.solodit_timeout == 15.0
        assert settings.mcp_transport_mode == "http"
        assert settings.mcp_port == 9001

    def test_env_file(self, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("SOLODIT_API_KEY=file-key\n")
        assert Settings(_env_file=env_file).solodit_api_key == "file-key"
