# govlens/cli/commands/server.py
import os
import typer
import uvicorn
from rich.console import Console
from typing import Optional

from ..context import CorpusContext
from ...utils import get_logger

app = typer.Typer()
console = Console()
logger = get_logger('cli.server')


@app.command()
def start(
    port: int = typer.Option(8000, "--port", "-p", help="Port to run server on"),
    host: str = typer.Option("127.0.0.1", "--host", help="Interface to bind"),
    corpus: Optional[str] = typer.Option(None, "--corpus", "-c", help="Corpus path or URL (defaults to the active corpus)"),
):
    """Start the GovLens API server in the foreground"""
    ctx = CorpusContext()

    try:
        source = corpus or ctx.ensure_active_corpus()
    except ValueError as e:
        console.print(f"[red]✗[/red] {e}", style="bold")
        raise typer.Exit(1)

    from ...server.app import app as api_app

    api_app.state.corpus_source = source
    api_app.state.port = port

    log_level = os.environ.get('GOVLENS_LOG_LEVEL', 'info')
    if os.environ.get('GOVLENS_DEBUG') == '1':
        log_level = 'debug'

    console.print(f"Starting server for corpus [bold]{source}[/bold] on http://{host}:{port}")
    logger.info(f"Starting server on {host}:{port} for {source}")

    uvicorn.run(api_app, host=host, port=port, log_level=log_level)
