"""
Stdio transport for MCP: one JSON-RPC message per line.
"""

import asyncio
import json
import sys
from typing import Any, AsyncIterator, TextIO

from primevue_mcp.mcp.exceptions import PARSE_ERROR
from primevue_mcp.mcp.transport import Transport
from primevue_mcp.utils.logging import get_logger

logger = get_logger(__name__)


class StdioServerTransport(Transport):
    """
    Transport for serving MCP over stdio (stdin/stdout).

    Streams default to the process's stdin and stdout, resolved on
    connect so they can be swapped in tests. Input is read from the
    binary buffer when the stream has one.
    """

    def __init__(
        self,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None
    ):
        self._stdin = stdin
        self._stdout = stdout
        self._write_lock = asyncio.Lock()

    async def connect(self) -> None:
        """Bind to the streams."""
        self._stdin = self._stdin or sys.stdin
        self._stdout = self._stdout or sys.stdout
        logger.debug("Stdio transport connected")

    async def close(self) -> None:
        """Flush pending output."""
        if self._stdout:
            self._stdout.flush()
        logger.debug("Stdio transport closed")

    async def send(self, message: dict[str, Any]) -> None:
        """Write a message as a single line."""
        if self._stdout is None:
            raise RuntimeError("Not connected")

        data = json.dumps(message) + "\n"
        async with self._write_lock:
            self._stdout.write(data)
            self._stdout.flush()

        logger.debug(f"Sent: {message}")

    async def receive(self) -> AsyncIterator[Any]:
        """Read lines until EOF, yielding decoded messages."""
        if self._stdin is None:
            raise RuntimeError("Not connected")

        # Invalid UTF-8 becomes U+FFFD and then fails as a parse error
        stream = getattr(self._stdin, "buffer", self._stdin)

        while True:
            line = await asyncio.to_thread(stream.readline)
            if not line:
                break
            if isinstance(line, bytes):
                line = line.decode("utf-8", errors="replace")

            line = line.strip()
            if not line:
                continue

            try:
                message = json.loads(line)
            except json.JSONDecodeError as e:
                logger.warning(f"Failed to parse message: {e}")
                await self.send({
                    "jsonrpc": "2.0",
                    "id": None,
                    "error": {"code": PARSE_ERROR, "message": f"Parse error: {e}"}
                })
                continue

            logger.debug(f"Received: {message}")
            yield message
