# govlens/core/__init__.py
"""Core analysis and search functionality"""

from .models import (
    AnalysisSnapshot,
    Document,
    DocumentCategory,
    EntityCount,
    SearchFilters,
    SearchHit,
    SearchResult,
    SearchStatus,
    TableEntry,
)
from .extractor import PatternExtractor, extract_entities
from .frequency import count_frequency
from .tokenizer import tokenize, word_frequency
from .classifier import classify
from .tables import collect_tables
from .searcher import Searcher, search
from .analyzer import run_analysis
from .loaders import LoaderRegistry

__all__ = [
    'AnalysisSnapshot',
    'Document',
    'DocumentCategory',
    'EntityCount',
    'SearchFilters',
    'SearchHit',
    'SearchResult',
    'SearchStatus',
    'TableEntry',
    'PatternExtractor',
    'extract_entities',
    'count_frequency',
    'tokenize',
    'word_frequency',
    'classify',
    'collect_tables',
    'Searcher',
    'search',
    'run_analysis',
    'LoaderRegistry',
]
