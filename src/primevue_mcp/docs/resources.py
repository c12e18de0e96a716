"""Addressing scheme mapping resource paths to document ids."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ResourceAddress:
    """
    Maps ``<namespace>://{docPath}`` onto document ids ``/<namespace>/{docPath}``.
    """
    namespace: str = "primevue"

    @property
    def prefix(self) -> str:
        return f"/{self.namespace}/"

    @property
    def template(self) -> str:
        return f"{self.namespace}://{{docPath}}"

    def doc_id(self, doc_path: str) -> str:
        return self.prefix + doc_path.lstrip("/")

    def doc_path(self, doc_id: str) -> str:
        if doc_id.startswith(self.prefix):
            return doc_id[len(self.prefix):]
        return doc_id.lstrip("/")

    def uri(self, doc_id: str) -> str:
        return f"{self.namespace}://{self.doc_path(doc_id)}"
