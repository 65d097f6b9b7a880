# govlens/core/loaders/json_file.py
import json
from pathlib import Path
from typing import List

from .base import CorpusLoader, parse_corpus_payload
from ..models import Document
from ...utils.logging import get_logger

logger = get_logger('loaders.json')


class JsonCorpusLoader(CorpusLoader):
    """Loader for a corpus exported as a single JSON file"""

    SUPPORTED_EXTENSIONS = ['.json']

    def load(self, source: str) -> List[Document]:
        """Load JSON corpus file"""
        file_path = Path(source)
        if not file_path.exists():
            raise FileNotFoundError(f"File not found: {file_path}")

        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                payload = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in corpus file {file_path}: {e}")
        except UnicodeDecodeError as e:
            raise ValueError(f"Could not decode corpus file {file_path}: {e}")

        documents = parse_corpus_payload(payload)
        logger.info(f"Loaded {len(documents)} documents from {file_path}")
        return documents

    def supports(self, source: str) -> bool:
        """Check if source is a local JSON file"""
        if source.startswith(('http://', 'https://')):
            return False
        return Path(source).suffix.lower() in self.SUPPORTED_EXTENSIONS
