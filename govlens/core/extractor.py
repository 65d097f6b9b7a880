# govlens/core/extractor.py

from typing import Dict, List, Sequence

from .models import Document, ExtractedMentions
from .rules import ENTITY_RULES, PatternRule
from ..utils.logging import get_logger

logger = get_logger('core.extractor')


class PatternExtractor:
    """
    Applies the entity rule table to every document of a corpus.

    Matches are collected per document and concatenated in corpus order;
    nothing is merged or deduplicated at this stage.
    """

    def __init__(self, rules: Dict[str, PatternRule] = None):
        self.rules = rules if rules is not None else ENTITY_RULES

    def extract_document(self, document: Document) -> Dict[str, List[str]]:
        """
        Run every rule over a single document.

        Args:
            document: Document to scan (empty text yields no matches)

        Returns:
            Mapping of entity kind to raw matched substrings
        """
        text = document.text or ""
        return {kind: rule.find_all(text) for kind, rule in self.rules.items()}

    def extract(self, corpus: Sequence[Document]) -> Dict[str, List[str]]:
        """Run every rule over every document, concatenating matches per kind"""
        mentions: Dict[str, List[str]] = {kind: [] for kind in self.rules}

        for document in corpus:
            for kind, matches in self.extract_document(document).items():
                mentions[kind].extend(matches)

        logger.debug(
            "Extracted mentions from %d documents: %s",
            len(corpus),
            ", ".join(f"{kind}={len(found)}" for kind, found in mentions.items()),
        )
        return mentions


def extract_entities(corpus: Sequence[Document]) -> ExtractedMentions:
    """
    Extract ministry, department and act mentions from a corpus.

    Args:
        corpus: Ordered documents; none are skipped

    Returns:
        ExtractedMentions with raw matches in corpus order
    """
    mentions = PatternExtractor().extract(corpus)
    return ExtractedMentions(
        ministries=tuple(mentions.get('ministries', ())),
        departments=tuple(mentions.get('departments', ())),
        acts=tuple(mentions.get('acts', ())),
    )
