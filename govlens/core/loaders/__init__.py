# govlens/core/loaders/__init__.py
"""Corpus loading subsystem"""

from .base import CorpusLoader, parse_corpus_payload
from .remote import HttpCorpusLoader
from .json_file import JsonCorpusLoader
from .text import TextDirectoryLoader
from .registry import LoaderRegistry

__all__ = [
    'CorpusLoader',
    'parse_corpus_payload',
    'HttpCorpusLoader',
    'JsonCorpusLoader',
    'TextDirectoryLoader',
    'LoaderRegistry',
]
