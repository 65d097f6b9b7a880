# govlens/cli/commands/info.py

import typer
from rich.console import Console

from ..context import CorpusContext

app = typer.Typer()
console = Console()


@app.command()
def show_status():
    """Show overall system status"""
    ctx = CorpusContext()
    source = ctx.config.get_active_corpus()

    console.print("\n[bold]GovLens - System Status[/bold]")
    console.print(f"[dim]{'─' * 60}[/dim]")

    console.print(f"\n[bold]Configuration:[/bold]")
    console.print(f"  Config directory: {ctx.config.config_dir}")
    console.print(f"  Config file: {ctx.config.global_config_path}")

    search_config = ctx.config.get_search_config()
    console.print(f"  Category filter strategy: {search_config['category_strategy']}")

    console.print(f"\n[bold]Corpus:[/bold]")
    if not source:
        console.print("  No active corpus")
        console.print()
        return

    console.print(f"  Active: {source}")
    try:
        corpus = ctx.load_corpus(source, analyze=False)
        console.print(f"  Documents: {len(corpus)}")
    except (ValueError, FileNotFoundError) as e:
        console.print(f"  Status: [red]UNAVAILABLE[/red] ({e})")

    console.print()
