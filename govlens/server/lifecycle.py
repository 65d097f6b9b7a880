# govlens/server/lifecycle.py

import sys
import traceback
from contextlib import asynccontextmanager
from typing import Optional

from ..config import Config
from ..cli.context import CorpusContext
from ..utils.logging import get_logger

logger = get_logger('server.lifecycle')


class ServerLifecycle:
    """Manages server startup and shutdown"""

    def __init__(self):
        self.corpus_context: Optional[CorpusContext] = None
        self.config: Optional[Config] = None
        self.corpus_source: Optional[str] = None

    def setup(self, corpus_source: Optional[str], config: Optional[Config] = None):
        """Load the corpus and compute the analysis snapshot"""
        self.config = config or Config()
        self.corpus_context = CorpusContext(config=self.config)

        self.corpus_source = corpus_source or self.config.get_active_corpus()
        if not self.corpus_source:
            logger.warning("No corpus configured; serving without a corpus until /admin/reload")
            return

        logger.info(f"Loading corpus '{self.corpus_source}'...")
        corpus = self.corpus_context.load_corpus(self.corpus_source, analyze=True)
        logger.info(f"✓ Server ready with {len(corpus)} documents")

    def reload(self, corpus_source: Optional[str] = None) -> int:
        """Reload the corpus (optionally from a new source) and recompute the snapshot"""
        if self.corpus_context is None:
            self.corpus_context = CorpusContext(config=self.config or Config())

        source = corpus_source or self.corpus_source
        if not source:
            raise ValueError("No corpus source to reload")

        corpus = self.corpus_context.load_corpus(source, analyze=True)
        self.corpus_source = source
        return len(corpus)

    def shutdown(self):
        """Cleanup server resources"""
        logger.info("Shutting down server...")

        if self.corpus_context:
            self.corpus_context.unload()

        logger.info("✓ Server shut down")


# Global lifecycle instance
lifecycle = ServerLifecycle()


@asynccontextmanager
async def lifespan(app):
    """FastAPI lifespan context manager"""
    try:
        corpus_source = getattr(app.state, 'corpus_source', None)
        logger.info(f"Starting server lifecycle for corpus '{corpus_source}'")

        lifecycle.setup(corpus_source)

        logger.info("Server lifecycle startup completed successfully")

        yield

    except Exception as e:
        error_msg = f"FATAL: Server startup failed during lifespan: {e}"
        logger.error(error_msg, exc_info=True)

        sys.stderr.write(f"\n{'='*60}\n")
        sys.stderr.write(f"{error_msg}\n")
        sys.stderr.write(f"{'='*60}\n")
        sys.stderr.write(traceback.format_exc())
        sys.stderr.write(f"{'='*60}\n\n")
        sys.stderr.flush()

        raise

    finally:
        # Shutdown - always runs even if startup failed
        try:
            lifecycle.shutdown()
        except Exception as e:
            logger.error(f"Error during shutdown: {e}", exc_info=True)
