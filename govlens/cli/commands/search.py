# govlens/cli/commands/search.py

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from typing import List, Optional, Tuple
import requests

from ..context import open_context
from ...core.models import DocumentCategory, SearchFilters, SearchStatus

app = typer.Typer()
console = Console()


def _render_snippet(snippet: str, start_tag: str, end_tag: str) -> str:
    """Escape Rich markup in the snippet and turn highlight markers into styling"""
    rendered = escape(snippet)
    return rendered.replace(escape(start_tag), "[bold yellow]").replace(escape(end_tag), "[/bold yellow]")


def _remote_search(
    server: str,
    query: str,
    entity: Optional[str],
    category: Optional[DocumentCategory],
) -> Tuple[str, List[dict]]:
    """Run the query against a running govlens server"""
    try:
        response = requests.post(
            f"{server.rstrip('/')}/search",
            json={
                'query': query,
                'entity_filter': entity,
                'category_filter': category.value if category else None,
            },
            timeout=30
        )
    except requests.RequestException as e:
        console.print(f"[red]✗[/red] Failed to communicate with server: {e}", style="bold")
        console.print("\nStart one with: govlens server start")
        raise typer.Exit(1)

    if response.status_code != 200:
        console.print(f"[red]✗[/red] Search failed: {response.text}", style="bold")
        raise typer.Exit(1)

    data = response.json()
    return data['status'], data['results']


def search(
    query: str = typer.Argument("", help="Text to look for (case-insensitive)"),
    entity: Optional[str] = typer.Option(None, "--entity", "-e", help="Only documents containing this exact name"),
    category: Optional[str] = typer.Option(None, "--category", "-t", help="Only documents of this type (act, report, notice)"),
    corpus: Optional[str] = typer.Option(None, "--corpus", "-c", help="Corpus path or URL (defaults to the active corpus)"),
    server: Optional[str] = typer.Option(None, "--server", help="Query a running server instead, e.g. http://127.0.0.1:8000"),
):
    """Search documents by text and filters"""
    parsed_category = None
    if category:
        try:
            parsed_category = DocumentCategory.parse(category)
        except ValueError as e:
            console.print(f"[red]✗[/red] {e}", style="bold")
            raise typer.Exit(1)

    start_tag, end_tag = "<mark>", "</mark>"

    if server:
        status, results = _remote_search(server, query, entity, parsed_category)
        hits = [(r['source_id'], r['snippet']) for r in results]
    else:
        ctx = open_context(corpus, analyze=False)
        search_config = ctx.config.get_search_config()
        start_tag, end_tag = search_config['highlight_start'], search_config['highlight_end']

        result = ctx.safe_searcher.search(
            query,
            SearchFilters(entity=entity, category=parsed_category),
        )
        status = result.status.value
        hits = [(hit.source_id, hit.snippet) for hit in result.hits]

    if status == SearchStatus.NO_QUERY.value:
        console.print("[yellow]Type at least 2 characters, or add a filter[/yellow]")
        return

    if not hits:
        console.print("[yellow]No matches found[/yellow]")
        return

    console.print(f"Found {len(hits)} document(s):\n")
    for source_id, snippet in hits:
        console.print(Panel(
            _render_snippet(snippet, start_tag, end_tag),
            title=f"[bold cyan]{escape(source_id)}[/bold cyan]",
            title_align="left",
            border_style="blue",
            padding=(0, 1)
        ))
