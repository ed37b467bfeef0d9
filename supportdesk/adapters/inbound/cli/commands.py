"""CLI interface for the support desk answer engine."""

import json
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.prompt import Prompt
from rich.table import Table
from rich.text import Text

from ....config.logging import setup_logging
from ....config.settings import settings
from ....core.domain import AnswerResult
from ...common.exception_handler import format_exception_json

app = typer.Typer(
    name="supportdesk",
    help="Support desk answer engine - answers chat questions from ingested website content",
    add_completion=False,
)

console = Console(legacy_windows=False)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Configure logging before any command runs."""
    setup_logging("DEBUG" if verbose else settings.log_level, json_format=settings.log_json)


def handle_cli_error(exc: Exception) -> None:
    """Print an error with its support desk code.

    With ``DEBUG=true`` the full payload, stack trace included, is shown.
    """
    payload = format_exception_json(exc, include_trace=settings.debug)
    if settings.debug:
        details = json.dumps(payload, indent=2, default=str)
        console.print(Panel(details, title="[bold red]Error[/]", border_style="red"))
        return

    error = payload["error"]
    console.print(f"\n[red]Error {escape('[' + error['code'] + ']')}:[/] {escape(error['message'])}")
    location = payload.get("location") or {}
    if location:
        console.print(
            f"[dim]{error['type']} at {location.get('file')}:{location.get('line')} "
            f"in {location.get('method')}[/]"
        )
    console.print("[dim]Set DEBUG=true for full details[/]")


def print_answer(result: AnswerResult) -> None:
    """Render an answer and its sources."""
    # Corpus text is shown verbatim, never parsed as markup
    console.print(Panel(Text(result.response), title="[bold blue]Assistant[/]", border_style="blue"))
    if result.sources:
        console.print("[dim]Sources:[/]")
        for source in result.sources:
            console.print(f"  [dim]{escape(source)}[/]")


@app.command()
def ask(
    question: str = typer.Argument(..., help="Question to answer from the corpus"),
) -> None:
    """Ask a single question and get an answer."""
    from ....composition.container import get_answer_service

    try:
        service = get_answer_service()
    except Exception as exc:
        handle_cli_error(exc)
        raise typer.Exit(1)

    print_answer(service.answer_query(question))


@app.command()
def chat() -> None:
    """Start an interactive chat session."""
    from ....composition.container import get_answer_service

    console.print(
        Panel.fit(
            "[bold blue]Support Desk[/]\n"
            "[dim]Answers come from ingested website content[/]\n\n"
            "Examples:\n"
            "• How do I apply for admission?\n"
            "• When are fees due?\n\n"
            "[dim]Type 'quit' or 'exit' to leave[/]",
            title="Welcome",
            border_style="blue",
        )
    )

    try:
        service = get_answer_service()
    except Exception as exc:
        handle_cli_error(exc)
        raise typer.Exit(1)

    while True:
        try:
            query = Prompt.ask("\n[bold cyan]You[/]")

            if query.lower() in ("quit", "exit", "q"):
                console.print("[dim]Goodbye![/]")
                break

            if not query.strip():
                continue

            console.print()
            print_answer(service.answer_query(query))

        except (KeyboardInterrupt, EOFError):
            console.print("\n[dim]Goodbye![/]")
            break


@app.command()
def ingest(
    path: Path = typer.Argument(..., exists=True, dir_okay=False, help="Extracted page text file"),
    url: str = typer.Option(..., "--url", "-u", help="Source URL of the page"),
    title: str | None = typer.Option(None, "--title", "-t", help="Page title"),
    description: str | None = typer.Option(None, "--description", "-d", help="Page description"),
) -> None:
    """Add already-extracted page text to the corpus."""
    from ....composition.container import get_ingestion_service

    try:
        service = get_ingestion_service()
        added = service.ingest_page(
            url,
            path.read_text(encoding="utf-8"),
            title=title,
            description=description,
        )
    except Exception as exc:
        handle_cli_error(exc)
        raise typer.Exit(1)

    console.print(f"[green]Stored {added} documents from {escape(url)}[/]")


@app.command()
def documents(
    limit: int = typer.Option(20, "--limit", "-n", min=1, help="Maximum documents to show"),
) -> None:
    """List stored documents, newest first."""
    from ....composition.container import get_ingestion_service

    try:
        stored = get_ingestion_service().list_documents(limit)
    except Exception as exc:
        handle_cli_error(exc)
        raise typer.Exit(1)

    if not stored:
        console.print("[yellow]Corpus is empty.[/]")
        return

    table = Table(title="Stored documents")
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Source")
    table.add_column("Title")
    table.add_column("Preview", overflow="ellipsis")
    for doc in stored:
        preview = doc.content.replace("\n", " ")[:60]
        table.add_row(
            Text(doc.doc_id),
            Text(doc.metadata.source_url or "-"),
            Text(doc.metadata.title or "-"),
            Text(preview),
        )
    console.print(table)


@app.command()
def delete(
    doc_id: str = typer.Argument(..., help="ID of the document to remove"),
) -> None:
    """Remove one document from the corpus."""
    from ....composition.container import get_ingestion_service

    try:
        get_ingestion_service().delete_document(doc_id)
    except Exception as exc:
        handle_cli_error(exc)
        raise typer.Exit(1)

    console.print(f"[green]Deleted document {escape(doc_id)}[/]")


@app.command()
def serve(
    host: str = typer.Option("127.0.0.1", help="Bind address"),
    port: int = typer.Option(8000, help="Bind port"),
) -> None:
    """Run the HTTP API with uvicorn."""
    import uvicorn

    uvicorn.run("supportdesk.adapters.inbound.api.main:app", host=host, port=port)


@app.command()
def status() -> None:
    """Show the current status of the document store."""
    from ....composition.container import get_document_store

    console.print("[bold]Support Desk Status[/]\n")
    console.print(f"Backend: {settings.store_backend}")
    if settings.store_backend == "sqlite":
        console.print(f"Database: {settings.database_path}")

    try:
        total = get_document_store().count()
    except Exception as exc:
        handle_cli_error(exc)
        raise typer.Exit(1)

    if total == 0:
        console.print("\n[yellow]Corpus is empty. Run 'supportdesk ingest' to add pages.[/]")
    else:
        console.print(f"\n[green]Total: {total} documents[/]")


if __name__ == "__main__":
    app()
