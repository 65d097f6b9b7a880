# govlens/cli/commands/analysis.py

import typer
from rich.console import Console
from rich.table import Table
from typing import Optional, Sequence

from ..context import open_context
from ...core.models import EntityCount

app = typer.Typer()
console = Console()


def _entity_table(title: str, entries: Sequence[EntityCount], limit: int) -> Table:
    table = Table(title=title, show_header=True, header_style="bold magenta", title_justify="left")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Name")
    table.add_column("Mentions", justify="right")

    for i, entry in enumerate(entries[:limit], 1):
        table.add_row(str(i), entry.name, str(entry.count))
    return table


@app.command()
def analyze(
    corpus: Optional[str] = typer.Option(None, "--corpus", "-c", help="Corpus path or URL (defaults to the active corpus)"),
    limit: int = typer.Option(10, "--limit", "-n", min=1, help="Rows to show per entity list"),
):
    """Extract entities, rank words and classify documents"""
    ctx = open_context(corpus, analyze=True)
    snapshot = ctx.safe_snapshot
    stats = snapshot.stats

    console.print("\n[bold]Corpus Analysis[/bold]")
    console.print(f"[dim]{'─' * 60}[/dim]")
    console.print(f"  Documents: {stats.document_count}")
    console.print(f"  Estimated words: {stats.estimated_words:,}")
    console.print(f"  Legislative acts found: {stats.unique_acts}")
    console.print(f"  Tables: {stats.table_count}")
    console.print()

    if snapshot.ministries:
        console.print(_entity_table("Top Ministries Referenced", snapshot.ministries, limit))
    else:
        console.print("[yellow]No ministries found[/yellow]")

    if snapshot.departments:
        console.print(_entity_table("Departments", snapshot.departments, limit))

    if snapshot.acts:
        console.print(_entity_table("Legislative Acts", snapshot.acts, limit))
    else:
        console.print("[yellow]No acts found[/yellow]")

    if snapshot.words:
        words = ", ".join(f"{w.name} ({w.count})" for w in snapshot.words[:limit * 2])
        console.print(f"\n[bold]Frequent words:[/bold] {words}")

    categories = Table(title="Document Types", show_header=True, header_style="bold magenta", box=None)
    categories.add_column("Category")
    categories.add_column("Documents", justify="right")
    for entry in snapshot.category_counts:
        categories.add_row(entry.category.value, str(entry.count))
    console.print()
    console.print(categories)
    console.print()
