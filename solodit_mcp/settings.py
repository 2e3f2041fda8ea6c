from __future__ import annotations

from fastmcp.server.server import Transport
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://solodit.cyfrin.io/api/v1/solodit"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Solodit
    solodit_base_url: str = DEFAULT_BASE_URL
    solodit_api_key: str = ""
    solodit_timeout: float | None = None

    # MCP Server
    mcp_transport_mode: Transport = "stdio"
    mcp_host: str = "127.0.0.1"
    mcp_port: int = 8000

    log_level: str = "INFO"


settings = Settings()
