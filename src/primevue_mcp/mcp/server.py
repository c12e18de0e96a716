"""
MCP Server base class for creating MCP servers.
"""

from __future__ import annotations

import base64
import inspect
import json
import re
import typing
from typing import Any, Callable, Optional
from urllib.parse import unquote

from pydantic import BaseModel, ConfigDict, ValidationError, create_model

from primevue_mcp.mcp.exceptions import (
    INTERNAL_ERROR,
    MCPError,
    MCPInvalidParamsError,
    MCPMethodNotFoundError,
    MCPProtocolError,
    MCPResourceNotFoundError,
)
from primevue_mcp.mcp.types import (
    InitializeResult,
    ResourceContent,
    ResourceDefinition,
    ResourceTemplateDefinition,
    ServerInfo,
    TextContent,
    ToolDefinition,
    ToolResult,
)
from primevue_mcp.utils.logging import get_logger

logger = get_logger(__name__)


def error_response(request_id: Any, code: int, message: str) -> dict[str, Any]:
    """Build a JSON-RPC error envelope."""
    return {
        "jsonrpc": "2.0",
        "id": request_id,
        "error": {"code": code, "message": message},
    }


class MCPServer:
    """
    Base class for creating MCP servers.

    Use decorators to define tools and resources:

    @server.tool()
    def my_tool(arg: Annotated[str, Field(description="Input")]) -> str:
        '''Tool description'''
        return f"Result: {arg}"

    @server.resource("docs://{path}")
    def my_resource(path: str) -> str:
        return lookup(path)

    Tool arguments are validated against a pydantic model built from the
    function signature before the function is called.
    """

    def __init__(
        self,
        name: str = "primevue-docs",
        version: str = "0.1.0"
    ):
        self.name = name
        self.version = version
        self._tools: dict[str, ToolHandler] = {}
        self._resources: dict[str, ResourceHandler] = {}

    def tool(
        self,
        name: str | None = None,
        description: str | None = None
    ) -> Callable:
        """Decorator to register a tool."""
        def decorator(func: Callable) -> Callable:
            tool_name = name or func.__name__
            tool_desc = description or inspect.getdoc(func) or ""

            arguments_model = self._build_arguments_model(tool_name, func)

            self._tools[tool_name] = ToolHandler(
                name=tool_name,
                description=tool_desc,
                input_schema=self._build_schema(arguments_model),
                arguments_model=arguments_model,
                handler=func
            )
            logger.debug(f"Registered tool: {tool_name}")
            return func

        return decorator

    def resource(
        self,
        uri_template: str,
        name: str | None = None,
        description: str | None = None,
        mime_type: str = "text/plain",
        lister: Callable[[], list[ResourceDefinition]] | None = None
    ) -> Callable:
        """
        Decorator to register a resource template.

        Args:
            uri_template: URI with ``{param}`` placeholders
            name: Resource name (defaults to the function name)
            description: Resource description
            mime_type: Default mime type of the returned content
            lister: Optional callable enumerating concrete resources
        """
        def decorator(func: Callable) -> Callable:
            self._resources[uri_template] = ResourceHandler(
                uri_template=uri_template,
                name=name or func.__name__,
                description=description or inspect.getdoc(func) or "",
                mime_type=mime_type,
                pattern=self._compile_uri_template(uri_template),
                handler=func,
                lister=lister
            )
            logger.debug(f"Registered resource: {uri_template}")
            return func

        return decorator

    def _build_arguments_model(self, tool_name: str, func: Callable) -> type[BaseModel]:
        """Build a pydantic model from the function signature."""
        hints = typing.get_type_hints(func, include_extras=True)
        fields: dict[str, Any] = {}

        for param_name, param in inspect.signature(func).parameters.items():
            annotation = hints.get(param_name, str)
            default = ... if param.default is inspect.Parameter.empty else param.default
            fields[param_name] = (annotation, default)

        model_name = "".join(part.title() for part in tool_name.split("_")) + "Arguments"
        return create_model(
            model_name,
            __config__=ConfigDict(extra="forbid", strict=True),
            **fields
        )

    def _build_schema(self, model: type[BaseModel]) -> dict[str, Any]:
        """Build the advertised JSON schema from an arguments model."""
        schema = model.model_json_schema()
        properties = {}

        for prop_name, prop in schema.get("properties", {}).items():
            prop = {k: v for k, v in prop.items() if k != "title"}

            # Optional[X] is advertised as X and left out of "required"
            variants = [v for v in prop.pop("anyOf", []) if v.get("type") != "null"]
            if len(variants) == 1:
                prop.update(variants[0])
            elif variants:
                prop["anyOf"] = variants
            if "default" in prop and prop["default"] is None:
                del prop["default"]

            properties[prop_name] = prop

        return {
            "type": "object",
            "properties": properties,
            "required": schema.get("required", []),
            "additionalProperties": False
        }

    def _compile_uri_template(self, template: str) -> re.Pattern[str]:
        """
        Compile a URI template into a regex.

        A placeholder matches one path segment, except a placeholder that
        ends the template, which may span several.
        """
        parts = re.split(r"(\{\w+\})", template)
        regex = ""

        for index, part in enumerate(parts):
            match = re.fullmatch(r"\{(\w+)\}", part)
            if not match:
                regex += re.escape(part)
                continue
            trailing = index == len(parts) - 2 and parts[-1] == ""
            regex += f"(?P<{match.group(1)}>{'.+' if trailing else '[^/]+'})"

        return re.compile(regex)

    async def handle_message(self, message: Any) -> dict[str, Any] | None:
        """
        Handle one JSON-RPC message.

        Returns:
            The response envelope, or None for notifications
        """
        if not isinstance(message, dict):
            return error_response(None, -32600, "Protocol error: expected an object")

        if "method" not in message and ("result" in message or "error" in message):
            # A response to a server-initiated request; nothing was sent.
            return None

        request_id = message.get("id")
        method = message.get("method")
        if message.get("jsonrpc") != "2.0" or not isinstance(method, str):
            error = MCPProtocolError("invalid JSON-RPC request")
            return error_response(request_id, error.code, error.message)

        if "id" not in message:
            logger.debug(f"Notification: {method}")
            return None

        params = message.get("params") or {}
        try:
            if not isinstance(params, dict):
                raise MCPInvalidParamsError("params must be an object")
            result = await self.handle_request(method, params)
        except MCPError as e:
            logger.info(f"{method} failed: {e.message}")
            return error_response(request_id, e.code or INTERNAL_ERROR, e.message)
        except Exception as e:
            logger.exception(f"Unhandled error in {method}")
            return error_response(request_id, INTERNAL_ERROR, str(e))

        return {"jsonrpc": "2.0", "id": request_id, "result": result}

    async def handle_request(
        self,
        method: str,
        params: dict[str, Any]
    ) -> dict[str, Any]:
        """Handle an incoming request."""
        if method == "initialize":
            return await self._handle_initialize(params)
        elif method == "ping":
            return {}
        elif method == "tools/list":
            return await self._handle_tools_list()
        elif method == "tools/call":
            return await self._handle_tools_call(params)
        elif method == "resources/list":
            return await self._handle_resources_list()
        elif method == "resources/templates/list":
            return await self._handle_resource_templates_list()
        elif method == "resources/read":
            return await self._handle_resources_read(params)
        else:
            raise MCPMethodNotFoundError(method)

    async def _handle_initialize(self, params: dict[str, Any]) -> dict[str, Any]:
        """Handle initialize request."""
        client = params.get("clientInfo") or {}
        logger.info(f"Initialize from client: {client.get('name', 'unknown')}")

        return InitializeResult(
            capabilities={
                "tools": {},
                "resources": {}
            },
            server_info=ServerInfo(name=self.name, version=self.version)
        ).to_wire()

    async def _handle_tools_list(self) -> dict[str, Any]:
        """Handle tools/list request."""
        tools = [
            ToolDefinition(
                name=handler.name,
                description=handler.description,
                input_schema=handler.input_schema
            ).to_wire()
            for handler in self._tools.values()
        ]
        return {"tools": tools}

    async def _handle_tools_call(self, params: dict[str, Any]) -> dict[str, Any]:
        """Handle tools/call request."""
        name = params.get("name")
        arguments = params.get("arguments") or {}

        if name not in self._tools:
            raise MCPInvalidParamsError(f"Unknown tool: {name}")

        handler = self._tools[name]
        if not isinstance(arguments, dict):
            raise MCPInvalidParamsError(f"Arguments for tool {name} must be an object")

        try:
            validated = handler.arguments_model.model_validate(arguments)
        except ValidationError as e:
            raise MCPInvalidParamsError(
                f"Invalid arguments for tool {name}: {self._describe_errors(e)}"
            ) from e

        try:
            result = handler.handler(**dict(validated))
            if inspect.isawaitable(result):
                result = await result
        except Exception as e:
            logger.exception(f"Tool {name} raised")
            return ToolResult(
                content=[TextContent(text=f"Error executing tool {name}: {e}")],
                is_error=True
            ).to_wire()

        # Format result as MCP content
        if isinstance(result, str):
            text = result
        elif isinstance(result, dict):
            text = json.dumps(result)
        else:
            text = str(result)

        return ToolResult(content=[TextContent(text=text)]).to_wire()

    async def _handle_resources_list(self) -> dict[str, Any]:
        """Handle resources/list request."""
        resources = []
        for handler in self._resources.values():
            if handler.lister is None:
                continue
            resources.extend(r.to_wire() for r in handler.lister())
        return {"resources": resources}

    async def _handle_resource_templates_list(self) -> dict[str, Any]:
        """Handle resources/templates/list request."""
        templates = [
            ResourceTemplateDefinition(
                uri_template=handler.uri_template,
                name=handler.name,
                description=handler.description or None,
                mime_type=handler.mime_type
            ).to_wire()
            for handler in self._resources.values()
        ]
        return {"resourceTemplates": templates}

    async def _handle_resources_read(self, params: dict[str, Any]) -> dict[str, Any]:
        """Handle resources/read request."""
        uri = params.get("uri")
        if not isinstance(uri, str) or not uri:
            raise MCPInvalidParamsError("resources/read requires a uri")

        # Find matching resource handler
        handler = None
        match = None
        for candidate in self._resources.values():
            match = candidate.pattern.fullmatch(uri)
            if match:
                handler = candidate
                break

        if handler is None or match is None:
            raise MCPResourceNotFoundError(uri)

        uri_params = {k: unquote(v) for k, v in match.groupdict().items()}
        result = handler.handler(**uri_params)

        if inspect.isawaitable(result):
            result = await result

        if isinstance(result, ResourceContent):
            # Contents always carry the URI exactly as requested
            content = result.model_copy(update={"uri": uri})
        elif isinstance(result, bytes):
            content = ResourceContent(
                uri=uri,
                mime_type=handler.mime_type,
                blob=base64.b64encode(result).decode("ascii")
            )
        else:
            content = ResourceContent(uri=uri, mime_type=handler.mime_type, text=str(result))

        return {"contents": [content.to_wire()]}

    @staticmethod
    def _describe_errors(error: ValidationError) -> str:
        parts = []
        for item in error.errors():
            location = ".".join(str(p) for p in item["loc"]) or "arguments"
            parts.append(f"{location}: {item['msg']}")
        return "; ".join(parts)

    def __repr__(self) -> str:
        return (
            f"MCPServer(name={self.name!r}, tools={list(self._tools)}, "
            f"resources={list(self._resources)})"
        )


class ToolHandler(BaseModel):
    """Handler for a tool."""
    model_config = ConfigDict(arbitrary_types_allowed=True)

    name: str
    description: str
    input_schema: dict[str, Any]
    arguments_model: type[BaseModel]
    handler: Callable


class ResourceHandler(BaseModel):
    """Handler for a resource template."""
    model_config = ConfigDict(arbitrary_types_allowed=True)

    uri_template: str
    name: str
    description: str
    mime_type: str
    pattern: re.Pattern
    handler: Callable
    lister: Optional[Callable] = None
