"""PrimeVue documentation corpus: models, store and queries."""

from .document import MISSING_CONTENT, DocContent, DocMetadata, PrimeVueDoc
from .query import QueryEngine, ResultEntry
from .resources import ResourceAddress
from .store import DocumentStore, LoadResult, LoadWarning, load_documents

__all__ = [
    "MISSING_CONTENT",
    "DocContent",
    "DocMetadata",
    "PrimeVueDoc",
    "DocumentStore",
    "LoadResult",
    "LoadWarning",
    "load_documents",
    "QueryEngine",
    "ResultEntry",
    "ResourceAddress",
]
