# govlens/server/dependencies.py
from fastapi import HTTPException

from .lifecycle import lifecycle


def get_corpus_context():
    """Dependency to get corpus context"""
    if not lifecycle.corpus_context:
        raise HTTPException(status_code=503, detail="Server not initialized")
    return lifecycle.corpus_context


def get_corpus_context_with_corpus():
    """
    Get corpus context and ensure a corpus is loaded.
    Raises HTTP 503 if no corpus is loaded.
    """
    corpus_context = get_corpus_context()

    if corpus_context.corpus is None:
        raise HTTPException(
            status_code=503,
            detail="No corpus is currently loaded. Load one using the /admin/reload endpoint."
        )

    if corpus_context.searcher is None or corpus_context.snapshot is None:
        raise HTTPException(
            status_code=503,
            detail="Corpus components not fully initialized. Try reloading the corpus."
        )

    return corpus_context
