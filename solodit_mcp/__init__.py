import logging

from solodit_mcp.server import mcp
from .settings import settings


def main():
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger(__name__).info(
        "Starting Solodit MCP server (transport=%s)", settings.mcp_transport_mode
    )
    if settings.mcp_transport_mode == "stdio":
        mcp.run(transport="stdio")
    else:
        mcp.run(
            transport=settings.mcp_transport_mode,
            host=settings.mcp_host,
            port=settings.mcp_port,
        )


if __name__ == "__main__":
    main()
