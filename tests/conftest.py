"""
Test configuration and fixtures.
"""

import json
from pathlib import Path

import pytest

from primevue_mcp.docs import DocumentStore, PrimeVueDoc, load_documents


def write_doc(
    root: Path,
    category: str,
    name: str,
    content: str,
    title: str | None = None,
    tags: list[str] | None = None,
    namespace: str = "primevue",
) -> Path:
    """Write a document the way the converter lays it out."""
    doc = {
        "schema": "1.0",
        "id": f"/{namespace}/{category.lower()}/{name}",
        "title": title if title is not None else name.replace("-", " "),
        "tags": tags if tags is not None else [category],
        "content": {"type": "text/markdown", "value": content},
        "metadata": {
            "source": "https://primevue.org",
            "file": f"{category}/{name}.md",
            "created": "2024-05-01T12:00:00.000Z",
            "updated": "2024-05-01T12:00:00.000Z",
        },
    }
    path = root / category / f"{name}.json"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(doc, indent=2), encoding="utf-8")
    return path


@pytest.fixture
def example_corpus(tmp_path):
    """Two component pages: button (with an API section) and accordion."""
    root = tmp_path / "mcp"
    write_doc(root, "components", "button", "Button usage. ### API\nprops: label", tags=["components"])
    write_doc(root, "components", "accordion", "Accordion usage", tags=["components"])
    return root


@pytest.fixture
def example_store(example_corpus):
    return load_documents(example_corpus).store


@pytest.fixture
def docs_corpus(tmp_path):
    """A small corpus spanning several categories."""
    root = tmp_path / "docs"
    write_doc(
        root, "components", "datatable",
        "# DataTable\nDataTable displays data in tabular format.\n"
        "Sorting is enabled per column.\n### API\nprops: value, sortField\nevents: sort",
        title="DataTable",
    )
    write_doc(
        root, "components", "button",
        "# Button\nButton is an extension to the standard input element.\n### API\nprops: label, icon",
        title="Button",
    )
    write_doc(
        root, "components", "splitbutton",
        "# SplitButton\nSplitButton groups a set of commands in an overlay.\nUses a Button internally.",
        title="SplitButton",
    )
    write_doc(
        root, "forms", "inputtext",
        "# InputText\nInputText is an extension to standard input.\nSupports sorting of nothing.",
        title="InputText",
        tags=["forms", "input"],
    )
    write_doc(
        root, "theming", "styled-mode",
        "Styled mode uses design tokens.",
        tags=["theming", "Sorting"],
    )
    return root


@pytest.fixture
def docs_store(docs_corpus):
    return load_documents(docs_corpus).store


def make_doc(doc_id: str, title: str, content: str = "body", file: str = "", tags=None) -> PrimeVueDoc:
    return PrimeVueDoc(
        id=doc_id,
        title=title,
        tags=tags or [],
        content={"type": "text/markdown", "value": content},
        metadata={"source": "https://primevue.org", "file": file},
    )


@pytest.fixture
def empty_store():
    return DocumentStore()
