# govlens/core/loaders/text.py
from pathlib import Path
from typing import List

from .base import CorpusLoader
from ..models import Document
from ...utils.logging import get_logger

logger = get_logger('loaders.text')


class TextDirectoryLoader(CorpusLoader):
    """Loader for a directory of plain-text extractions, one document per file"""

    SUPPORTED_EXTENSIONS = ['.txt', '.text']

    def _read(self, file_path: Path) -> str:
        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                return f.read()
        except UnicodeDecodeError:
            # OCR output is not always UTF-8
            try:
                with open(file_path, 'r', encoding='latin-1') as f:
                    return f.read()
            except Exception as e:
                raise ValueError(f"Could not decode file {file_path}: {e}")

    def load(self, source: str) -> List[Document]:
        """Load every text file in the directory, sorted by name"""
        directory = Path(source)
        if not directory.exists():
            raise FileNotFoundError(f"Directory not found: {directory}")

        files = sorted(
            f for f in directory.iterdir()
            if f.is_file() and f.suffix.lower() in self.SUPPORTED_EXTENSIONS
        )

        documents = []
        for file_path in files:
            text = self._read(file_path)
            documents.append(Document(
                id=file_path.name,
                text=text,
                text_length=len(text),
            ))

        logger.info(f"Loaded {len(documents)} text documents from {directory}")
        return documents

    def supports(self, source: str) -> bool:
        """Check if source is a local directory"""
        if source.startswith(('http://', 'https://')):
            return False
        return Path(source).is_dir()
