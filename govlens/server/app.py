# govlens/server/app.py
import argparse
import os
import sys

from fastapi import FastAPI
import uvicorn

from .. import __version__
from .lifecycle import lifespan
from .routes import admin, analysis, documents, search

# Create FastAPI app
app = FastAPI(
    title="GovLens",
    description="Entity extraction, word frequency and search over government document texts",
    version=__version__,
    lifespan=lifespan
)

# Include routers
app.include_router(analysis.router)
app.include_router(search.router)
app.include_router(documents.router)
app.include_router(admin.router)


@app.get("/status")
async def root_status():
    """Root status endpoint (redirects to admin status)"""
    from fastapi.responses import RedirectResponse
    return RedirectResponse(url="/admin/status")


def main():
    """Main entry point for running the server"""
    parser = argparse.ArgumentParser()
    parser.add_argument('--port', type=int, default=8000)
    parser.add_argument('--host', type=str, default='127.0.0.1')
    parser.add_argument('--corpus', type=str, default=None,
                        help="Corpus path or URL (defaults to the active corpus)")
    args = parser.parse_args()

    app.state.corpus_source = args.corpus
    app.state.port = args.port

    # Determine log level from environment or default to info
    log_level = os.environ.get('GOVLENS_LOG_LEVEL', 'info')
    if os.environ.get('GOVLENS_DEBUG') == '1':
        log_level = 'debug'

    sys.stderr.write(f"Starting uvicorn on {args.host}:{args.port} with log_level={log_level}...\n")
    sys.stderr.flush()

    uvicorn.run(app, host=args.host, port=args.port, log_level=log_level)


if __name__ == "__main__":
    main()
