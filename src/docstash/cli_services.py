"""CLI service layer for docstash.

Shared console handles, exit codes, logging setup and document loading for
the CLI commands.
"""
from __future__ import annotations

import json
import logging
from datetime import datetime
from pathlib import Path

import typer
from pydantic import TypeAdapter, ValidationError
from rich.console import Console
from rich.logging import RichHandler

from docstash.config import DocstashConfig, get_config
from docstash.exceptions import ConfigError, DocumentLoadError
from docstash.models import Document
from docstash.services import DocumentService, get_service_factory

# Exit codes
EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_INVALID_ARG = 2

console = Console(stderr=False)  # stdout for normal output
error_console = Console(stderr=True)  # stderr for errors

_documents_adapter = TypeAdapter(list[Document])


def _escape_rich(text: str) -> str:
    """Escape brackets to prevent Rich markup interpretation."""
    return text.replace("[", "\\[").replace("]", "\\]")


def configure_logging(verbose: bool) -> None:
    """Route docstash log records to stderr through Rich."""
    package_logger = logging.getLogger("docstash")
    package_logger.handlers.clear()
    if verbose:
        package_logger.addHandler(
            RichHandler(console=error_console, show_path=False)
        )
        package_logger.setLevel(logging.DEBUG)
    else:
        package_logger.setLevel(logging.WARNING)


def require_config() -> DocstashConfig:
    """Load config, exiting with an error message if it is invalid."""
    try:
        return get_config()
    except ConfigError as e:
        error_console.print("[red]Error: Invalid configuration[/red]")
        error_console.print(f"[dim]{_escape_rich(str(e))}[/dim]")
        raise typer.Exit(code=EXIT_ERROR)


def create_document_service() -> DocumentService:
    """Create a document service over a fresh in-memory store."""
    return get_service_factory(require_config()).create_document_service()


def load_documents(path: Path) -> list[Document]:
    """Read a JSON array of documents from a file.

    Raises:
        DocumentLoadError: If the file cannot be read or is not a valid
            list of documents.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise DocumentLoadError(f"Failed to read {path}: {e}") from e

    try:
        payload = json.loads(raw)
    except json.JSONDecodeError as e:
        raise DocumentLoadError(
            f"Invalid JSON in {path} at position {e.pos}: {e.msg}"
        ) from e

    try:
        return _documents_adapter.validate_python(payload)
    except ValidationError as e:
        raise DocumentLoadError(f"Invalid documents in {path}: {e}") from e


def parse_timestamp(value: str | None, option_name: str) -> datetime | None:
    """Parse an ISO 8601 timestamp option, exiting on invalid input."""
    if value is None:
        return None
    try:
        return datetime.fromisoformat(value)
    except ValueError:
        error_console.print(
            f"[red]Error:[/red] {option_name} must be an ISO 8601 timestamp, "
            f"got {_escape_rich(value)}"
        )
        raise typer.Exit(code=EXIT_INVALID_ARG)
