# govlens/cli/commands/corpus.py

import typer
from rich.console import Console
from pathlib import Path

from ..context import CorpusContext
from ...utils.logging import get_logger

app = typer.Typer()
console = Console()
logger = get_logger('cli.corpus')


def _is_url(source: str) -> bool:
    return source.startswith(('http://', 'https://'))


@app.command()
def use(
    source: str = typer.Argument(..., help="Path to a JSON corpus, a directory of .txt files, or an http(s) URL"),
    check: bool = typer.Option(True, "--check/--no-check", help="Load the corpus once to validate it"),
):
    """Set the active corpus"""
    ctx = CorpusContext()

    if not _is_url(source):
        path = Path(source).expanduser()
        if not path.exists():
            console.print(f"[red]✗[/red] Path not found: {path}", style="bold")
            raise typer.Exit(1)
        source = str(path.resolve())

    if check:
        try:
            corpus = ctx.load_corpus(source, analyze=False)
        except (ValueError, FileNotFoundError) as e:
            console.print(f"[red]✗[/red] {e}", style="bold")
            raise typer.Exit(1)
        console.print(f"Loaded {len(corpus)} document(s)")

    ctx.config.set_active_corpus(source)
    logger.info(f"Active corpus set to {source}")
    console.print(f"[green]✓[/green] Active corpus: [bold]{source}[/bold]")


@app.command()
def show():
    """Show the active corpus"""
    ctx = CorpusContext()
    source = ctx.config.get_active_corpus()

    if not source:
        console.print("[yellow]No active corpus[/yellow]")
        console.print("  govlens corpus use <path-or-url>")
        return

    console.print(f"Active corpus: [bold]{source}[/bold]")


@app.command()
def clear():
    """Forget the active corpus"""
    ctx = CorpusContext()
    ctx.config.clear_active_corpus()
    console.print("[green]✓[/green] Active corpus cleared")
