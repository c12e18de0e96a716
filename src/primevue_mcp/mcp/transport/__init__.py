"""
MCP Transport layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, AsyncIterator

if TYPE_CHECKING:
    from primevue_mcp.mcp.server import MCPServer


class Transport(ABC):
    """Abstract base class for server-side MCP transports."""

    @abstractmethod
    async def connect(self) -> None:
        """Open the underlying streams."""
        pass

    @abstractmethod
    async def close(self) -> None:
        """Close the underlying streams."""
        pass

    @abstractmethod
    async def send(self, message: dict[str, Any]) -> None:
        """Send a message to the client."""
        pass

    @abstractmethod
    def receive(self) -> AsyncIterator[Any]:
        """Yield decoded messages until the client disconnects."""
        pass

    async def serve(self, server: "MCPServer") -> None:
        """Answer every incoming message until the input ends."""
        async with self:
            async for message in self.receive():
                response = await server.handle_message(message)
                if response is not None:
                    await self.send(response)

    async def __aenter__(self) -> "Transport":
        await self.connect()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()


from primevue_mcp.mcp.transport.stdio import StdioServerTransport  # noqa: E402

__all__ = ["Transport", "StdioServerTransport"]
