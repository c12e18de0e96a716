"""Command line entry point."""

import asyncio
from pathlib import Path
from typing import Optional

import click

from primevue_mcp.config import load_config
from primevue_mcp.server import run_server
from primevue_mcp.utils.logging import set_log_level


@click.command(name="primevue-mcp")
@click.argument("docs_path", required=False, type=click.Path(file_okay=False, path_type=Path))
@click.option(
    "--config", "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="YAML or JSON configuration file",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
    help="Logging verbosity (logs go to stderr)",
)
def main(docs_path: Optional[Path], config_path: Optional[Path], log_level: Optional[str]) -> None:
    """Serve PrimeVue documentation over MCP on stdio.

    DOCS_PATH is the directory of converted JSON pages (default: ./mcp).
    """
    config = load_config(config_path)
    overrides = {}
    if docs_path is not None:
        overrides["docs_path"] = docs_path
    if log_level is not None:
        overrides["log_level"] = log_level.upper()
    if overrides:
        config = config.model_copy(update=overrides)

    set_log_level(config.log_level)

    try:
        asyncio.run(run_server(config))
    except KeyboardInterrupt:
        pass
