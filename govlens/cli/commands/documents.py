# govlens/cli/commands/documents.py

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from typing import Optional

from ..context import open_context
from ...core.analyzer import find_document, preview_document
from ...core.classifier import classify
from ...core.tables import collect_tables

app = typer.Typer()
console = Console()


def list_documents(
    corpus: Optional[str] = typer.Option(None, "--corpus", "-c", help="Corpus path or URL (defaults to the active corpus)"),
):
    """List documents in the corpus"""
    ctx = open_context(corpus)
    documents = ctx.safe_corpus

    if not documents:
        console.print("[yellow]Corpus is empty[/yellow]")
        return

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Document")
    table.add_column("Text", justify="right")
    table.add_column("Tables", justify="right")
    table.add_column("Type")

    for doc in documents:
        table.add_row(
            escape(doc.id),
            f"{doc.text_length / 1024:.1f} KB",
            str(len(doc.tables)),
            classify(doc).value,
        )

    console.print(table)
    console.print(f"\nTotal: {len(documents)} document(s)")


def show(
    doc_id: str = typer.Argument(..., help="Document identifier (file name)"),
    corpus: Optional[str] = typer.Option(None, "--corpus", "-c", help="Corpus path or URL (defaults to the active corpus)"),
    max_chars: Optional[int] = typer.Option(None, "--max-chars", min=1, help="Preview length in characters"),
):
    """Preview the beginning of a document"""
    ctx = open_context(corpus)
    document = find_document(ctx.safe_corpus, doc_id)
    if document is None:
        console.print(f"[red]✗[/red] Document not found: {doc_id}", style="bold")
        raise typer.Exit(1)

    limit = max_chars or ctx.config.get_analysis_config()['preview_chars']
    preview = preview_document(document, limit)

    console.print(f"[bold]{escape(preview.source_id)}[/bold] [dim]({document.text_length} characters)[/dim]\n")
    console.print(escape(preview.text), highlight=False)
    if preview.truncated:
        console.print("\n[dim](Truncated for display)[/dim]")


def tables(
    corpus: Optional[str] = typer.Option(None, "--corpus", "-c", help="Corpus path or URL (defaults to the active corpus)"),
):
    """List tables extracted from every document"""
    ctx = open_context(corpus)
    entries = collect_tables(ctx.safe_corpus)

    if not entries:
        console.print("[yellow]No tables found[/yellow]")
        return

    for entry in entries:
        console.print(f"[bold cyan]{escape(entry.source_id)}[/bold cyan] [dim]table {entry.local_index}[/dim]")
        console.print(escape(entry.content), highlight=False)
        console.print()

    console.print(f"Total: {len(entries)} table(s)")
