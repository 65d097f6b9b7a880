# govlens/core/predicates.py
"""
Document predicates used to filter search results.

Category filtering has two independent strategies. ``keyword`` checks the
lowercased text for a single marker word per category and is what search
uses by default. ``classifier`` reuses the document classifier. They can
disagree (a report that mentions an "act" passes the keyword filter for
ActsAndRules but is classified as Reports). Callers select one by name.
"""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Type

from .classifier import classify
from .models import Document, DocumentCategory, SearchFilters


class DocumentPredicate(ABC):
    """Yes/no test over a single document"""

    @abstractmethod
    def matches(self, document: Document) -> bool:
        pass

    def __call__(self, document: Document) -> bool:
        return self.matches(document)


class EntityPredicate(DocumentPredicate):
    """Raw text contains the entity name verbatim (case-sensitive)"""

    def __init__(self, entity: str):
        self.entity = entity

    def matches(self, document: Document) -> bool:
        return self.entity in (document.text or "")


class KeywordCategoryPredicate(DocumentPredicate):
    """Lowercased text contains the category's marker word"""

    CATEGORY_KEYWORDS: Dict[DocumentCategory, str] = {
        DocumentCategory.ACTS_AND_RULES: "act",
        DocumentCategory.REPORTS: "report",
        DocumentCategory.NOTICES_AND_OTHERS: "notice",
    }

    def __init__(self, category: DocumentCategory):
        self.category = category
        self.keyword = self.CATEGORY_KEYWORDS[category]

    def matches(self, document: Document) -> bool:
        return self.keyword in (document.text or "").lower()


class ClassifierCategoryPredicate(DocumentPredicate):
    """Document classifier assigns exactly this category"""

    def __init__(self, category: DocumentCategory):
        self.category = category

    def matches(self, document: Document) -> bool:
        return classify(document) == self.category


CATEGORY_STRATEGIES: Dict[str, Type[DocumentPredicate]] = {
    'keyword': KeywordCategoryPredicate,
    'classifier': ClassifierCategoryPredicate,
}


def category_predicate(category: DocumentCategory, strategy: str = 'keyword') -> DocumentPredicate:
    """Build a category predicate for the named strategy"""
    if strategy not in CATEGORY_STRATEGIES:
        raise ValueError(
            f"Unknown category strategy '{strategy}'. "
            f"Available: {', '.join(CATEGORY_STRATEGIES)}"
        )
    return CATEGORY_STRATEGIES[strategy](category)


def build_predicates(filters: Optional[SearchFilters], strategy: str = 'keyword') -> List[DocumentPredicate]:
    """Translate active filters into predicates (all must hold)"""
    predicates: List[DocumentPredicate] = []
    if filters is None:
        return predicates
    if filters.entity:
        predicates.append(EntityPredicate(filters.entity))
    if filters.category is not None:
        predicates.append(category_predicate(filters.category, strategy))
    return predicates
