# govlens/core/analyzer.py
"""
Batch analysis pass over a loaded corpus.

Every stage is a pure function of the corpus (or of an earlier stage's
output); ``run_analysis`` composes them into one immutable snapshot.
"""

from typing import Dict, List, Optional, Sequence

from .classifier import classify_corpus, count_categories
from .extractor import extract_entities
from .frequency import count_frequency
from .models import (
    AnalysisSnapshot,
    CorpusStats,
    Document,
    DocumentPreview,
    DocumentSize,
    EntityCount,
    ExtractedMentions,
)
from .tables import collect_tables
from .tokenizer import word_frequency
from ..utils.logging import get_logger

logger = get_logger('core.analyzer')

CHARS_PER_WORD = 6


def rank_entities(mentions: ExtractedMentions, min_length: int = 5) -> Dict[str, List[EntityCount]]:
    """Deduplicate and rank each entity kind"""
    return {
        'ministries': count_frequency(mentions.ministries, min_length),
        'departments': count_frequency(mentions.departments, min_length),
        'acts': count_frequency(mentions.acts, min_length),
    }


def document_sizes(corpus: Sequence[Document]) -> List[DocumentSize]:
    """Text length per document, in corpus order"""
    return [DocumentSize(source_id=doc.id, text_length=doc.text_length) for doc in corpus]


def corpus_stats(
    corpus: Sequence[Document],
    acts: Sequence[EntityCount] = (),
    table_count: Optional[int] = None,
) -> CorpusStats:
    """
    Headline numbers for a corpus.

    Word count is estimated from character count, not tokenized.
    """
    total_characters = sum(len(doc.text or "") for doc in corpus)
    if table_count is None:
        table_count = sum(len(doc.tables or ()) for doc in corpus)
    return CorpusStats(
        document_count=len(corpus),
        total_characters=total_characters,
        estimated_words=total_characters // CHARS_PER_WORD,
        unique_acts=len(acts),
        table_count=table_count,
    )


def run_analysis(
    corpus: Sequence[Document],
    entity_min_length: int = 5,
    word_min_length: int = 2,
    top_words: int = 50,
) -> AnalysisSnapshot:
    """
    Compute the corpus-level analysis snapshot.

    Args:
        corpus: Ordered documents
        entity_min_length: Noise threshold for entity mentions
        word_min_length: Noise threshold for word tokens
        top_words: Number of ranked words kept

    Returns:
        AnalysisSnapshot; an empty corpus gives empty lists and zero stats
    """
    ranked = rank_entities(extract_entities(corpus), entity_min_length)
    words = word_frequency(corpus, min_length=word_min_length, top_n=top_words)
    tables = collect_tables(corpus)
    categories = classify_corpus(corpus)

    snapshot = AnalysisSnapshot(
        ministries=tuple(ranked['ministries']),
        departments=tuple(ranked['departments']),
        acts=tuple(ranked['acts']),
        words=tuple(words),
        tables=tuple(tables),
        categories=tuple(categories),
        category_counts=tuple(count_categories(categories)),
        document_sizes=tuple(document_sizes(corpus)),
        stats=corpus_stats(corpus, ranked['acts'], table_count=len(tables)),
    )

    logger.info(
        "Analyzed %d documents: %d ministries, %d departments, %d acts, %d tables",
        snapshot.stats.document_count,
        len(snapshot.ministries),
        len(snapshot.departments),
        len(snapshot.acts),
        len(snapshot.tables),
    )
    return snapshot


def find_document(corpus: Sequence[Document], doc_id: str) -> Optional[Document]:
    """First document with the given id, or None"""
    for document in corpus:
        if document.id == doc_id:
            return document
    return None


def preview_document(document: Document, max_chars: int = 5000) -> DocumentPreview:
    """Leading slice of a document's text for display"""
    text = document.text or ""
    return DocumentPreview(
        source_id=document.id,
        text=text[:max_chars],
        truncated=len(text) > max_chars,
    )
