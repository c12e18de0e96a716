"""
MCP Type definitions.

Field names are snake_case in Python and camelCase on the wire.
"""

from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

PROTOCOL_VERSION = "2024-11-05"


class WireModel(BaseModel):
    """Base for models serialized with their protocol field names."""
    model_config = ConfigDict(populate_by_name=True)

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


class ToolDefinition(WireModel):
    """Definition of an MCP tool."""
    name: str
    description: str = ""
    input_schema: dict[str, Any] = Field(
        default_factory=lambda: {"type": "object", "properties": {}, "required": []},
        alias="inputSchema",
    )


class ResourceDefinition(WireModel):
    """Definition of a concrete MCP resource."""
    uri: str
    name: str
    description: Optional[str] = None
    mime_type: str = Field(default="text/plain", alias="mimeType")


class ResourceTemplateDefinition(WireModel):
    """Definition of a parameterized MCP resource."""
    uri_template: str = Field(alias="uriTemplate")
    name: str
    description: Optional[str] = None
    mime_type: str = Field(default="text/plain", alias="mimeType")


class ResourceContent(WireModel):
    """Content of a resource."""
    uri: str
    mime_type: str = Field(default="text/plain", alias="mimeType")
    text: Optional[str] = None
    blob: Optional[str] = None


class TextContent(WireModel):
    """A text content block."""
    type: Literal["text"] = "text"
    text: str


class ToolResult(WireModel):
    """Result of calling a tool."""
    content: list[TextContent] = Field(default_factory=list)
    is_error: Optional[bool] = Field(default=None, alias="isError")


class ServerInfo(WireModel):
    """Information about an MCP server."""
    name: str
    version: str


class InitializeResult(WireModel):
    """Result of initialization."""
    protocol_version: str = Field(default=PROTOCOL_VERSION, alias="protocolVersion")
    capabilities: dict[str, Any]
    server_info: ServerInfo = Field(alias="serverInfo")
