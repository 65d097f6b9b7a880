# govlens/core/tokenizer.py

import re
from typing import FrozenSet, List, Sequence

from .frequency import count_frequency
from .models import Document, EntityCount
from ..utils.logging import get_logger

logger = get_logger('core.tokenizer')

MIN_TOKEN_LENGTH = 5

# Shorter words never become tokens, so only words of five letters or more are listed
DOMAIN_STOPWORDS = frozenset({
    # legal / administrative filler
    'section', 'sections', 'government', 'ministry', 'department', 'notification',
    'hereby', 'thereof', 'therein', 'thereto', 'hereinafter', 'whereas', 'under',
    'shall', 'provided', 'clause', 'subsection', 'order', 'orders', 'office',
    'officer', 'india', 'indian', 'gazette', 'extraordinary', 'public', 'rules',
    'authority', 'respect', 'purpose', 'purposes', 'namely', 'above', 'below',
    'following', 'specified', 'published', 'official', 'secretary', 'state',
    'states', 'central', 'dated', 'number', 'paragraph', 'schedule', 'annexure',
    'subject', 'regarding', 'including', 'accordance', 'behalf',
})

ENGLISH_STOPWORDS = frozenset({
    'about', 'after', 'again', 'against', 'among', 'because', 'before', 'being',
    'between', 'could', 'doing', 'during', 'every', 'further', 'having', 'other',
    'ought', 'their', 'theirs', 'there', 'these', 'those', 'through', 'until',
    'where', 'which', 'while', 'would', 'yours', 'yourself', 'yourselves',
    'itself', 'myself', 'ourselves', 'themselves', 'herself', 'himself',
    'should', 'might', 'within', 'without', 'upon', 'since', 'though', 'whether',
    'therefore', 'however', 'also', 'such', 'shall', 'made', 'make', 'first',
    'second', 'third', 'another', 'around', 'across', 'along', 'already',
    'still', 'whose', 'whom', 'what', 'when', 'above', 'below', 'under', 'over',
})

STOPWORDS: FrozenSet[str] = frozenset(
    word for word in DOMAIN_STOPWORDS | ENGLISH_STOPWORDS
    if len(word) >= MIN_TOKEN_LENGTH
)

_TOKEN_PATTERN = re.compile(r"[^\W\d_]+")


def tokenize(text: str, stopwords: FrozenSet[str] = STOPWORDS) -> List[str]:
    """
    Split text into lowercase word tokens for frequency analysis.

    Tokens are maximal runs of letters (any script) at least five long; shorter
    runs are never emitted. Stopwords are removed afterwards.

    Args:
        text: Raw document text
        stopwords: Tokens to drop

    Returns:
        Tokens in order of appearance
    """
    if not text:
        return []
    return [
        token for token in _TOKEN_PATTERN.findall(text.lower())
        if len(token) >= MIN_TOKEN_LENGTH and token not in stopwords
    ]


def word_frequency(
    corpus: Sequence[Document],
    min_length: int = 2,
    top_n: int = 50,
) -> List[EntityCount]:
    """
    Corpus-wide word ranking, truncated to the ``top_n`` most frequent.

    Args:
        corpus: Documents to tokenize
        min_length: Aggregator noise threshold for tokens
        top_n: Number of entries kept

    Returns:
        Ranked EntityCount list of at most ``top_n`` entries
    """
    tokens: List[str] = []
    for document in corpus:
        tokens.extend(tokenize(document.text))

    ranked = count_frequency(tokens, min_length)
    logger.debug("Tokenized %d tokens into %d distinct words", len(tokens), len(ranked))
    return ranked[:max(0, top_n)]
