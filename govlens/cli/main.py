# govlens/cli/main.py

import os

import typer

from .commands import analysis, corpus, documents, info, search, server
from ..config.settings import Config
from ..utils.logging import setup_logging

app = typer.Typer(
    name="govlens",
    help="Entity extraction, word frequency and search over government document texts",
    add_completion=False,
    no_args_is_help=True,
)

app.add_typer(corpus.app, name="corpus", help="Choose the corpus other commands read")
app.add_typer(server.app, name="server", help="Serve analysis and search over HTTP")

# Single commands registered at root level
ROOT_COMMANDS = {
    "analyze": analysis.analyze,
    "search": search.search,
    "list": documents.list_documents,
    "show": documents.show,
    "tables": documents.tables,
    "status": info.show_status,
}

for command_name, command in ROOT_COMMANDS.items():
    app.command(name=command_name)(command)


@app.callback()
def callback(
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Print debug logs to the console"),
):
    """
    GovLens - pattern-based insight into government notices
    """
    if verbose:
        # Read by `server start` to raise uvicorn's log level
        os.environ['GOVLENS_DEBUG'] = '1'

    setup_logging(Config().config_dir, debug=verbose)


def main():
    app()
