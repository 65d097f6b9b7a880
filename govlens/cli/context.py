# govlens/cli/context.py

from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console

from ..config import Config
from ..core import AnalysisSnapshot, Document, LoaderRegistry, Searcher, run_analysis
from ..utils.logging import get_logger

logger = get_logger('cli.context')
console = Console()


class CorpusContext:
    """
    Manages the active corpus and the resources derived from it.

    The analysis snapshot is computed once per load; the searcher always
    reads the live corpus.
    """

    def __init__(self, config_dir: Optional[Path] = None, config: Optional[Config] = None):
        self.config = config or Config(config_dir)

        # Currently loaded resources
        self.source: Optional[str] = None
        self.loader_registry = LoaderRegistry()
        self.corpus: Optional[List[Document]] = None
        self.snapshot: Optional[AnalysisSnapshot] = None
        self.searcher: Optional[Searcher] = None

    @property
    def safe_corpus(self) -> List[Document]:
        """Get corpus with type assertion for type checker"""
        if self.corpus is None:
            raise RuntimeError("Corpus not loaded. Load a corpus first.")
        return self.corpus

    @property
    def safe_searcher(self) -> Searcher:
        """Get searcher with type assertion for type checker"""
        if self.searcher is None:
            raise RuntimeError("Searcher not initialized. Load a corpus first.")
        return self.searcher

    @property
    def safe_snapshot(self) -> AnalysisSnapshot:
        """Get analysis snapshot with type assertion for type checker"""
        if self.snapshot is None:
            raise RuntimeError("Analysis not available. Load a corpus first.")
        return self.snapshot

    def get_active_corpus_source(self) -> Optional[str]:
        """Get the source of the loaded corpus, falling back to the configured one"""
        if self.source:
            return self.source
        return self.config.get_active_corpus()

    def ensure_active_corpus(self) -> str:
        """Ensure there is a corpus source to load, raise error if not"""
        source = self.get_active_corpus_source()
        if not source:
            raise ValueError(
                "No active corpus. Set one with 'govlens corpus use <path-or-url>' "
                "or pass --corpus"
            )
        return source

    def load_corpus(self, source: Optional[str] = None, analyze: bool = True) -> List[Document]:
        """
        Load a corpus and build the searcher (and optionally the analysis snapshot).

        Args:
            source: Path or URL; defaults to the active corpus
            analyze: Run the batch analysis pass right away

        Returns:
            Loaded documents
        """
        source = source or self.ensure_active_corpus()

        logger.info(f"Loading corpus from {source}")
        corpus = self.loader_registry.load_corpus(source)

        self.source = source
        self.corpus = corpus
        self.searcher = self._build_searcher(corpus)
        self.snapshot = self.analyze() if analyze else None
        return corpus

    def load_documents(self, documents: List[Document], source: str = "<memory>", analyze: bool = True):
        """Use an already-built corpus (embedding, tests)"""
        self.source = source
        self.corpus = list(documents)
        self.searcher = self._build_searcher(self.corpus)
        self.snapshot = self.analyze() if analyze else None

    def analyze(self) -> AnalysisSnapshot:
        """Run the analysis pass over the loaded corpus with configured thresholds"""
        settings = self.config.get_analysis_config()
        self.snapshot = run_analysis(
            self.safe_corpus,
            entity_min_length=settings['entity_min_length'],
            word_min_length=settings['word_min_length'],
            top_words=settings['top_words'],
        )
        return self.snapshot

    def _build_searcher(self, corpus: List[Document]) -> Searcher:
        settings = self.config.get_search_config()
        return Searcher(
            corpus,
            min_query_length=settings['min_query_length'],
            snippet_context=settings['snippet_context'],
            filtered_snippet_context=settings['filtered_snippet_context'],
            highlight_start=settings['highlight_start'],
            highlight_end=settings['highlight_end'],
            category_strategy=settings['category_strategy'],
        )

    def unload(self):
        """Drop loaded resources"""
        self.corpus = None
        self.snapshot = None
        self.searcher = None


def open_context(corpus: Optional[str] = None, analyze: bool = False) -> CorpusContext:
    """
    Load a corpus for a CLI command, exiting with an error message on failure.

    Args:
        corpus: Explicit source; defaults to the active corpus
        analyze: Also compute the analysis snapshot
    """
    ctx = CorpusContext()
    try:
        ctx.load_corpus(corpus, analyze=analyze)
    except (ValueError, FileNotFoundError) as e:
        console.print(f"[red]✗[/red] {e}", style="bold")
        raise typer.Exit(1)
    return ctx
