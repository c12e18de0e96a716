"""Read-only queries over the document store."""

from typing import Optional

from pydantic import BaseModel, Field

from .document import PrimeVueDoc
from .resources import ResourceAddress
from .store import DocumentStore


class ResultEntry(BaseModel):
    """A single search hit."""
    component: str
    category: str
    id: str
    snippet: str
    uri: str
    tags: list[str] = Field(default_factory=list)

    def render(self) -> str:
        return (
            f"**{self.component}** ({self.category})\n"
            f"Tags: {', '.join(self.tags)}\n"
            f"{self.snippet}\n"
            f"(URI: {self.uri})\n"
        )


class QueryEngine:
    """
    Search, component lookup and category listing over a DocumentStore.

    Every operation is a pure read; nothing here mutates the store and
    unknown names produce explanatory text rather than exceptions.
    """

    def __init__(
        self,
        store: DocumentStore,
        address: Optional[ResourceAddress] = None,
        api_marker: str = "### API",
        snippet_lines: int = 3,
    ):
        self.store = store
        self.address = address or ResourceAddress()
        self.api_marker = api_marker
        self.snippet_lines = snippet_lines

    def search(self, query: str, component: Optional[str] = None) -> list[ResultEntry]:
        """Case-insensitive substring search over title, content and tags.

        Args:
            query: Text to look for
            component: Only consider documents whose title contains this

        Returns:
            Entries whose title matches first, then the rest, each group
            in store order
        """
        term = query.lower()
        title_hits: list[ResultEntry] = []
        other_hits: list[ResultEntry] = []

        for doc in self.store:
            if component and component.lower() not in doc.title.lower():
                continue

            title_match = term in doc.title.lower()
            if not (
                title_match
                or term in doc.content.text.lower()
                or any(term in tag.lower() for tag in doc.tags)
            ):
                continue

            entry = ResultEntry(
                component=doc.title,
                category=doc.category,
                id=doc.id,
                snippet=self._snippet(doc, term),
                uri=self.address.uri(doc.id),
                tags=list(doc.tags),
            )
            (title_hits if title_match else other_hits).append(entry)

        return title_hits + other_hits

    def format_search(self, query: str, component: Optional[str] = None) -> str:
        results = self.search(query, component)
        body = "\n".join(entry.render() for entry in results)
        return f'Found {len(results)} results for "{query}":\n\n{body}'

    def get_component_api(self, component: str) -> str:
        """Return the API section of a component page.

        Falls back to a listing of every known page when nothing matches.
        """
        doc = self.find_component(component)
        if doc is None:
            available = "\n".join(
                f"**{category}**: {', '.join(titles)}"
                for category, titles in self.group_by_category().items()
            )
            return f'Component "{component}" not found.\n\nAvailable components:\n{available}'

        content = doc.content.value
        start = content.find(self.api_marker)
        api_content = content[start:] if start > -1 else content

        return (
            f"# {doc.title} API Reference\n"
            f"Category: {doc.category}\n"
            f"Tags: {', '.join(doc.tags)}\n\n"
            f"{api_content}"
        )

    def find_component(self, component: str) -> Optional[PrimeVueDoc]:
        name = component.lower()
        for doc in self.store:
            if doc.title.lower() == name:
                return doc
        return self.store.get(self.address.doc_id(f"components/{name}"))

    def list_categories(self, category: Optional[str] = None) -> str:
        groups = self.group_by_category(category)
        result = "\n\n".join(
            f"**{name}** ({len(titles)} items)\n" + "\n".join(f"  - {t}" for t in titles)
            for name, titles in groups.items()
        )

        if category:
            return f'Components in "{category}" category:\n\n{result}'
        return f"PrimeVue Documentation Categories:\n\n{result}"

    def group_by_category(self, category: Optional[str] = None) -> dict[str, list[str]]:
        """Map category name to sorted titles, categories in sorted order."""
        groups: dict[str, list[str]] = {}
        for doc in self.store:
            if category and doc.category.lower() != category.lower():
                continue
            groups.setdefault(doc.category, []).append(doc.title)
        return {name: sorted(groups[name]) for name in sorted(groups)}

    def _snippet(self, doc: PrimeVueDoc, term: str) -> str:
        lines = [
            line for line in doc.content.text.split("\n")
            if term in line.lower()
        ][:self.snippet_lines]
        if lines:
            return "\n".join(lines)
        return f"{doc.title} documentation"
