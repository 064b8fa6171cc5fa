"""CLI entry point for docstash."""

from __future__ import annotations

import json
from pathlib import Path

import typer
from rich.table import Table

from docstash import __version__
from docstash.cli_services import (
    EXIT_ERROR,
    EXIT_SUCCESS,
    _escape_rich,
    configure_logging,
    console,
    create_document_service,
    error_console,
    load_documents,
    parse_timestamp,
    require_config,
)
from docstash.exceptions import DocumentLoadError, DuplicateDocumentError
from docstash.models import Author, Document, SearchRequest

app = typer.Typer(
    name="docstash",
    help="In-memory document repository with multi-criterion search",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)


def _print_titles(heading: str, documents: list[Document]) -> None:
    console.print(f"[bold]{_escape_rich(heading)}[/bold]")
    if not documents:
        console.print("[yellow]No results found[/yellow]")
    for doc in documents:
        console.print(f"  {_escape_rich(doc.title)}")


def _print_table(documents: list[Document]) -> None:
    table = Table(title=f"{len(documents)} matching document(s)")
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Title")
    table.add_column("Author")
    table.add_column("Created", style="dim")
    for doc in documents:
        author = doc.author.name or doc.author.id
        table.add_row(
            _escape_rich(doc.id or ""),
            _escape_rich(doc.title),
            _escape_rich(author),
            doc.created.isoformat() if doc.created else "",
        )
    console.print(table)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log saves and searches to stderr. Also set by DOCSTASH_VERBOSE.",
    ),
    version: bool | None = typer.Option(
        None,
        "--version",
        help="Show version information",
        is_flag=True,
    ),
):
    """docstash - In-memory document repository.

    Save documents and search them by title prefix, content, author and
    creation time.
    """
    if version:
        console.print(f"docstash version {__version__}")
        raise typer.Exit(code=EXIT_SUCCESS)

    config = require_config()
    configure_logging(verbose or config.verbose)

    if ctx.invoked_subcommand is None:
        console.print("[bold]docstash[/bold] - In-memory document repository")
        console.print("Use --help for usage information")
        raise typer.Exit(code=EXIT_SUCCESS)


@app.command()
def demo() -> None:
    """Save two sample documents and run example searches over them."""
    service = create_document_service()

    taras = Author(id="1", name="Taras")
    larysa = Author(id="2", name="Larysa")
    first = service.save(
        Document(title="Document One", content="lyrics", author=taras)
    )
    service.save(Document(title="Document Two", content="writings", author=larysa))

    _print_titles(
        "Search results for documents starting with 'Document':",
        service.search(SearchRequest(title_prefixes=["Document"])),
    )
    console.print()
    _print_titles(
        "Search results for documents containing 'lyrics' or 'writings':",
        service.search(SearchRequest(contains_contents=["lyrics", "writings"])),
    )
    console.print()
    _print_titles(
        f"Search results for documents by {taras.name}:",
        service.search(SearchRequest(author_ids=[taras.id])),
    )

    found = service.find_by_id(first.id)
    if found is not None:
        console.print(
            f"\nDocument found with ID {_escape_rich(first.id)}: {_escape_rich(found.title)}"
        )


@app.command()
def search(
    documents_file: Path = typer.Argument(
        ...,
        help="JSON file holding an array of documents to load",
    ),
    title: list[str] | None = typer.Option(
        None, "--title", "-t", help="Title prefix (repeatable, any may match)"
    ),
    contains: list[str] | None = typer.Option(
        None, "--contains", "-c", help="Content substring (repeatable, any may match)"
    ),
    author: list[str] | None = typer.Option(
        None, "--author", "-a", help="Author id (repeatable, any may match)"
    ),
    created_from: str | None = typer.Option(
        None, "--from", help="Inclusive lower bound on creation time (ISO 8601)"
    ),
    created_to: str | None = typer.Option(
        None, "--to", help="Inclusive upper bound on creation time (ISO 8601)"
    ),
    as_json: bool = typer.Option(False, "--json", help="Print results as JSON"),
) -> None:
    """Load documents from a file and search them.

    Loaded documents are saved in file order; any "created" values in the
    file are replaced by the save time.
    """
    request = SearchRequest(
        title_prefixes=title or None,
        contains_contents=contains or None,
        author_ids=author or None,
        created_from=parse_timestamp(created_from, "--from"),
        created_to=parse_timestamp(created_to, "--to"),
    )

    try:
        documents = load_documents(documents_file)
    except DocumentLoadError as e:
        error_console.print(f"[red]Error loading documents:[/red] {_escape_rich(str(e))}")
        raise typer.Exit(code=EXIT_ERROR)

    service = create_document_service()
    try:
        for doc in documents:
            service.save(doc)
    except DuplicateDocumentError as e:
        error_console.print(f"[red]Error:[/red] {_escape_rich(str(e))}")
        raise typer.Exit(code=EXIT_ERROR)

    results = service.search(request)

    if as_json:
        typer.echo(json.dumps([doc.model_dump(mode="json") for doc in results], indent=2))
        return

    if not results:
        console.print("[yellow]No results found[/yellow]")
        return
    _print_table(results)
