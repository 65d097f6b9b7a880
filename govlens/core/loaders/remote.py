# govlens/core/loaders/remote.py
from typing import List

import requests

from .base import CorpusLoader, parse_corpus_payload
from ..models import Document
from ...utils.logging import get_logger

logger = get_logger('loaders.remote')


class HttpCorpusLoader(CorpusLoader):
    """Loader for a JSON corpus served over HTTP(S)"""

    def __init__(self, timeout: float = 30, session: requests.Session = None):
        self.timeout = timeout
        self.session = session or requests.Session()

    def load(self, source: str) -> List[Document]:
        """Fetch and parse a remote JSON corpus"""
        try:
            response = self.session.get(source, timeout=self.timeout)
            response.raise_for_status()
            payload = response.json()
        except requests.RequestException as e:
            raise ValueError(f"Failed to fetch corpus from {source}: {e}")
        except ValueError as e:
            # response.json() raises a ValueError subclass on bad bodies
            raise ValueError(f"Invalid JSON corpus at {source}: {e}")

        documents = parse_corpus_payload(payload)
        logger.info(f"Fetched {len(documents)} documents from {source}")
        return documents

    def supports(self, source: str) -> bool:
        return source.startswith(('http://', 'https://'))
