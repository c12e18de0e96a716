"""
Configuration utilities.
"""

import json
from pathlib import Path

import yaml

from pydantic import BaseModel, field_validator


class ServerConfig(BaseModel):
    """Configuration for the PrimeVue documentation server."""
    name: str = "primevue-docs"
    version: str = "0.1.0"

    # Corpus settings
    docs_path: Path = Path("./mcp")
    namespace: str = "primevue"

    # Query settings
    api_marker: str = "### API"
    snippet_lines: int = 3

    log_level: str = "INFO"

    @field_validator("namespace")
    @classmethod
    def _strip_slashes(cls, value: str) -> str:
        value = value.strip("/")
        if not value:
            raise ValueError("namespace must not be empty")
        return value

    @field_validator("log_level")
    @classmethod
    def _check_level(cls, value: str) -> str:
        value = value.upper()
        if value not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level: {value}")
        return value

    @classmethod
    def from_yaml(cls, path: Path) -> "ServerConfig":
        """Load configuration from YAML file."""
        with open(path) as f:
            data = yaml.safe_load(f) or {}
        return cls(**data)

    @classmethod
    def from_file(cls, path: str | Path) -> "ServerConfig":
        """Load configuration from file (YAML or JSON)."""
        path = Path(path)

        if path.suffix in (".yaml", ".yml"):
            return cls.from_yaml(path)
        elif path.suffix == ".json":
            with open(path) as f:
                data = json.load(f)
            return cls(**data)
        else:
            raise ValueError(f"Unsupported config file format: {path.suffix}")


def load_config(path: str | Path | None = None) -> ServerConfig:
    """
    Load server configuration from file.

    Args:
        path: Path to config file; defaults to ``primevue-mcp.yaml``

    Returns:
        ServerConfig instance (defaults when the file does not exist)
    """
    path = Path(path or "primevue-mcp.yaml")

    if not path.exists():
        return ServerConfig()

    return ServerConfig.from_file(path)
