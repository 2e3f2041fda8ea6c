from solodit_mcp.server import mcp

# Serves the MCP endpoint at /mcp plus the /health route registered on the server.
app = mcp.http_app()
