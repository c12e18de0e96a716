"""
primevue-mcp - PrimeVue documentation served over the Model Context Protocol.
"""

from primevue_mcp.config import ServerConfig, load_config
from primevue_mcp.docs import (
    DocumentStore,
    LoadResult,
    PrimeVueDoc,
    QueryEngine,
    ResourceAddress,
    ResultEntry,
    load_documents,
)
from primevue_mcp.mcp import MCPServer
from primevue_mcp.server import build_server, run_server

__version__ = "0.1.0"
__all__ = [
    "ServerConfig",
    "load_config",
    "PrimeVueDoc",
    "DocumentStore",
    "LoadResult",
    "load_documents",
    "QueryEngine",
    "ResultEntry",
    "ResourceAddress",
    "MCPServer",
    "build_server",
    "run_server",
]
