# govlens/core/loaders/registry.py

from typing import List, Optional

from .base import CorpusLoader
from .remote import HttpCorpusLoader
from .json_file import JsonCorpusLoader
from .text import TextDirectoryLoader
from ..models import Document


class LoaderRegistry:
    """
    Registry for corpus loaders.
    Routes a source (path or URL) to the loader that can read it.
    """

    def __init__(self):
        self.loaders: List[CorpusLoader] = []
        self._register_default_loaders()

    def _register_default_loaders(self):
        """Register built-in loaders"""
        # Order matters - first match wins
        self.loaders.append(HttpCorpusLoader())
        self.loaders.append(JsonCorpusLoader())
        self.loaders.append(TextDirectoryLoader())

    def get_loader(self, source: str) -> Optional[CorpusLoader]:
        """
        Get appropriate loader for a source

        Args:
            source: File path, directory or URL

        Returns:
            CorpusLoader instance or None if no loader supports the source
        """
        for loader in self.loaders:
            if loader.supports(source):
                return loader
        return None

    def register(self, loader: CorpusLoader, prepend: bool = True):
        """
        Register a custom loader

        Args:
            loader: CorpusLoader instance
            prepend: If True, add to beginning (higher priority)
        """
        if prepend:
            self.loaders.insert(0, loader)
        else:
            self.loaders.append(loader)

    def load_corpus(self, source: str) -> List[Document]:
        """
        Load a corpus using the appropriate loader

        Raises:
            ValueError: If no loader supports the source
        """
        source = str(source)
        loader = self.get_loader(source)
        if loader is None:
            raise ValueError(
                f"No loader available for corpus source: {source}. "
                "Expected a .json file, a directory of .txt files or an http(s) URL"
            )
        return loader.load(source)
