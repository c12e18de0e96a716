"""
MCP-specific exceptions.

Each carries the JSON-RPC error code reported to the client.
"""

PARSE_ERROR = -32700
INTERNAL_ERROR = -32603


class MCPError(Exception):
    """Base exception for MCP-related errors."""

    def __init__(self, message: str, code: int | None = None):
        self.message = message
        self.code = code
        super().__init__(self.message)


class MCPProtocolError(MCPError):
    """Raised when a message is not a valid request."""

    def __init__(self, message: str, code: int = -32600):
        super().__init__(f"Protocol error: {message}", code=code)


class MCPMethodNotFoundError(MCPError):
    """Raised for a method the server does not implement."""

    def __init__(self, method: str):
        self.method = method
        super().__init__(f"Unknown method: {method}", code=-32601)


class MCPInvalidParamsError(MCPError):
    """Raised when request parameters fail validation."""

    def __init__(self, message: str):
        super().__init__(message, code=-32602)


class MCPResourceNotFoundError(MCPError):
    """Raised when a resource URI resolves to nothing."""

    def __init__(self, uri: str, message: str | None = None):
        self.uri = uri
        super().__init__(message or f"Resource not found: {uri}", code=-32002)

