"""
MCP (Model Context Protocol) module.
"""

from primevue_mcp.mcp.exceptions import (
    MCPError,
    MCPInvalidParamsError,
    MCPMethodNotFoundError,
    MCPProtocolError,
    MCPResourceNotFoundError,
)
from primevue_mcp.mcp.server import MCPServer
from primevue_mcp.mcp.transport import StdioServerTransport, Transport

__all__ = [
    "MCPServer",
    "Transport",
    "StdioServerTransport",
    "MCPError",
    "MCPProtocolError",
    "MCPMethodNotFoundError",
    "MCPInvalidParamsError",
    "MCPResourceNotFoundError",
]
