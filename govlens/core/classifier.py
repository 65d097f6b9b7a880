# govlens/core/classifier.py

from typing import List, Sequence, Tuple

from .models import CategoryCount, Document, DocumentCategory

# Evaluated top to bottom, first match wins
CLASSIFICATION_RULES: Tuple[Tuple[DocumentCategory, Tuple[str, ...]], ...] = (
    (DocumentCategory.ACTS_AND_RULES, ("act,", "act 19", "act 20")),
    (DocumentCategory.REPORTS, ("report", "annual")),
)

DEFAULT_CATEGORY = DocumentCategory.NOTICES_AND_OTHERS


def classify_text(text: str) -> DocumentCategory:
    """Assign a category from case-insensitive keyword heuristics"""
    lowered = (text or "").lower()
    for category, markers in CLASSIFICATION_RULES:
        if any(marker in lowered for marker in markers):
            return category
    return DEFAULT_CATEGORY


def classify(document: Document) -> DocumentCategory:
    """Classify a single document"""
    return classify_text(document.text)


def classify_corpus(corpus: Sequence[Document]) -> List[Tuple[str, DocumentCategory]]:
    """Category of every document, in corpus order"""
    return [(document.id, classify(document)) for document in corpus]


def count_categories(
    classified: Sequence[Tuple[str, DocumentCategory]]
) -> List[CategoryCount]:
    """Documents per category, every category listed (zero counts included)"""
    totals = {category: 0 for category in DocumentCategory}
    for _, category in classified:
        totals[category] += 1
    return [CategoryCount(category=category, count=count) for category, count in totals.items()]
