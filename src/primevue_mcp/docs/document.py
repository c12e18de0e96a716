"""Document data structures for the PrimeVue corpus."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

MISSING_CONTENT = "_No content available._"
UNKNOWN_CATEGORY = "Unknown"


class DocContent(BaseModel):
    """Typed body of a documentation page."""
    model_config = ConfigDict(frozen=True)

    type: str = "text/markdown"
    value: str = MISSING_CONTENT

    @field_validator("value", mode="before")
    @classmethod
    def _mark_missing(cls, value: Optional[str]) -> str:
        if value is None or (isinstance(value, str) and not value.strip()):
            return MISSING_CONTENT
        return value

    @property
    def text(self) -> str:
        """The body, or an empty string when the page had none."""
        return "" if self.value == MISSING_CONTENT else self.value


class DocMetadata(BaseModel):
    """Provenance of a documentation page."""
    model_config = ConfigDict(frozen=True)

    source: str = ""
    file: str = ""
    created: Optional[datetime] = None
    updated: Optional[datetime] = None


class PrimeVueDoc(BaseModel):
    """One documentation page, as written by the converter."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    schema_version: str = Field(default="1.0", alias="schema")
    id: str
    title: str
    tags: list[str] = Field(default_factory=list)
    content: DocContent = Field(default_factory=DocContent)
    metadata: DocMetadata = Field(default_factory=DocMetadata)

    @property
    def category(self) -> str:
        """First segment of the source file path."""
        return self.metadata.file.split("/")[0] or UNKNOWN_CATEGORY

    def __repr__(self) -> str:
        return f"PrimeVueDoc(id={self.id!r}, title={self.title!r})"
