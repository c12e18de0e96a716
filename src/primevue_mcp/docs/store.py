"""In-memory document store loaded from a directory of JSON files."""

from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Iterable, Iterator, Optional

from .document import PrimeVueDoc
from primevue_mcp.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class LoadWarning:
    """A problem encountered while loading the corpus."""
    path: Path
    message: str

    def __str__(self) -> str:
        return f"{self.path}: {self.message}"


class DocumentStore:
    """
    Read-only mapping from document id to document.

    Iteration is ordered by id so every query sees the same base order.
    """

    def __init__(self, documents: Iterable[PrimeVueDoc] = ()):
        docs: dict[str, PrimeVueDoc] = {}
        for doc in documents:
            docs[doc.id] = doc
        self._docs = MappingProxyType(dict(sorted(docs.items())))

    def get(self, doc_id: str) -> Optional[PrimeVueDoc]:
        return self._docs.get(doc_id)

    @property
    def documents(self) -> tuple[PrimeVueDoc, ...]:
        return tuple(self._docs.values())

    def ids(self) -> list[str]:
        return list(self._docs)

    def __contains__(self, doc_id: object) -> bool:
        return doc_id in self._docs

    def __iter__(self) -> Iterator[PrimeVueDoc]:
        return iter(self._docs.values())

    def __len__(self) -> int:
        return len(self._docs)

    def __repr__(self) -> str:
        return f"DocumentStore(documents={len(self)})"


@dataclass
class LoadResult:
    """Outcome of loading a corpus: the store plus per-file warnings."""
    store: DocumentStore
    warnings: list[LoadWarning] = field(default_factory=list)


class _Loader:
    def __init__(self) -> None:
        self.docs: dict[str, PrimeVueDoc] = {}
        self.origins: dict[str, Path] = {}
        self.warnings: list[LoadWarning] = []

    def walk(self, directory: Path) -> None:
        try:
            entries = sorted(directory.iterdir())
        except OSError as e:
            self.warnings.append(LoadWarning(directory, f"Error reading directory: {e}"))
            return

        for entry in entries:
            # Symlinks are never followed.
            if entry.is_symlink():
                logger.debug(f"Skipping symlink: {entry}")
                continue
            if entry.is_dir():
                self.walk(entry)
            elif entry.is_file() and entry.name.endswith(".json"):
                self.load_file(entry)

    def load_file(self, path: Path) -> None:
        try:
            doc = PrimeVueDoc.model_validate_json(path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            self.warnings.append(LoadWarning(path, f"Error loading document: {e}"))
            return

        previous = self.origins.get(doc.id)
        if previous is not None:
            self.warnings.append(LoadWarning(
                path, f"Duplicate id {doc.id} (replaces {previous})"
            ))

        self.docs[doc.id] = doc
        self.origins[doc.id] = path
        logger.debug(f"Loaded: {doc.id} from {path}")


def load_documents(root: str | Path) -> LoadResult:
    """
    Load every ``*.json`` document below ``root``.

    Loading is fail-soft: unreadable directories and malformed files are
    reported as warnings and skipped. Symlinks below the root are ignored.
    A missing root yields an empty store.
    When two files share an id the later one (in sorted path order) wins.

    Args:
        root: Corpus root directory

    Returns:
        LoadResult with the populated store and any warnings
    """
    loader = _Loader()
    loader.walk(Path(root))
    return LoadResult(
        store=DocumentStore(loader.docs.values()),
        warnings=loader.warnings,
    )
