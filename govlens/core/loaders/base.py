# govlens/core/loaders/base.py
from abc import ABC, abstractmethod
from typing import Any, List

from ..models import Document


def parse_corpus_payload(payload: Any) -> List[Document]:
    """
    Turn a decoded JSON corpus into documents.

    Accepts either a list of records or an object with a ``documents`` list.
    Records without an identifier get a positional one.

    Raises:
        ValueError: If the payload has neither shape
    """
    if isinstance(payload, dict):
        payload = payload.get('documents')

    if not isinstance(payload, list):
        raise ValueError(
            "Invalid corpus payload: expected a list of documents "
            "or an object with a 'documents' list"
        )

    documents = []
    for position, record in enumerate(payload, start=1):
        if not isinstance(record, dict):
            raise ValueError(f"Invalid corpus payload: document #{position} is not an object")
        documents.append(Document.from_record(record, default_id=f"document-{position}"))
    return documents


class CorpusLoader(ABC):
    """Base class for corpus loaders"""

    @abstractmethod
    def load(self, source: str) -> List[Document]:
        """
        Load every document from a source

        Args:
            source: File path, directory or URL

        Returns:
            Documents in load order

        Raises:
            FileNotFoundError: If a local source doesn't exist
            ValueError: If the source can't be parsed
        """
        pass

    @abstractmethod
    def supports(self, source: str) -> bool:
        """Check if this loader can handle the source"""
        pass
