"""
PrimeVue documentation MCP server: tools and resources over the corpus.
"""

from typing import Annotated, Optional

from pydantic import Field

from primevue_mcp.config import ServerConfig
from primevue_mcp.docs import (
    DocumentStore,
    QueryEngine,
    ResourceAddress,
    load_documents,
)
from primevue_mcp.mcp import MCPResourceNotFoundError, MCPServer, StdioServerTransport
from primevue_mcp.mcp.types import ResourceContent, ResourceDefinition
from primevue_mcp.utils.logging import get_logger

logger = get_logger(__name__)


def build_server(store: DocumentStore, config: Optional[ServerConfig] = None) -> MCPServer:
    """
    Create an MCP server exposing ``store``.

    Args:
        store: Loaded documents; shared read-only by every handler
        config: Server settings (defaults when omitted)

    Returns:
        Server with the search, component and category tools and the
        per-document resource template registered
    """
    config = config or ServerConfig()
    address = ResourceAddress(config.namespace)
    engine = QueryEngine(
        store,
        address=address,
        api_marker=config.api_marker,
        snippet_lines=config.snippet_lines,
    )
    server = MCPServer(name=config.name, version=config.version)

    def list_documents() -> list[ResourceDefinition]:
        return [
            ResourceDefinition(
                uri=address.uri(doc.id),
                name=doc.title,
                description=f"{doc.title} ({doc.category})",
                mime_type=doc.content.type,
            )
            for doc in store
        ]

    @server.resource(
        address.template,
        name=config.name,
        description="PrimeVue documentation page (e.g. components/accordion)",
        mime_type="text/markdown",
        lister=list_documents,
    )
    def read_document(docPath: str) -> ResourceContent:
        doc = store.get(address.doc_id(docPath))
        if doc is None:
            raise MCPResourceNotFoundError(
                address.uri(address.doc_id(docPath)),
                f"Documentation not found: {docPath}",
            )
        return ResourceContent(
            uri=address.uri(doc.id),
            mime_type=doc.content.type,
            text=doc.content.text,
        )

    @server.tool(name="search_primevue_docs", description="Search PrimeVue documentation")
    def search_primevue_docs(
        query: Annotated[str, Field(description="Search query for PrimeVue documentation")],
        component: Annotated[
            Optional[str], Field(description="Specific component name to search within")
        ] = None,
    ) -> str:
        return engine.format_search(query, component)

    @server.tool(
        name="get_component_api",
        description="Get the API reference section of a PrimeVue component",
    )
    def get_component_api(
        component: Annotated[str, Field(description='Component name (e.g., "accordion", "button")')],
    ) -> str:
        return engine.get_component_api(component)

    @server.tool(
        name="list_categories",
        description="List documentation pages grouped by category",
    )
    def list_categories(
        category: Annotated[Optional[str], Field(description="Filter by specific category")] = None,
    ) -> str:
        return engine.list_categories(category)

    return server


async def run_server(config: ServerConfig) -> None:
    """Load the corpus, then serve MCP over stdio until stdin closes."""
    result = load_documents(config.docs_path)
    for warning in result.warnings:
        logger.warning(str(warning))
    logger.info(f"Loaded {len(result.store)} PrimeVue documentation files from {config.docs_path}")

    server = build_server(result.store, config)
    logger.info("PrimeVue MCP server running on stdio")
    await StdioServerTransport().serve(server)
