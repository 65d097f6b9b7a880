# govlens/core/searcher.py

import re
from typing import List, Optional, Sequence

from .models import Document, SearchFilters, SearchHit, SearchResult, SearchStatus
from .predicates import DocumentPredicate, build_predicates
from ..utils.logging import get_logger

logger = get_logger('core.searcher')

FILTER_ONLY_SNIPPET = "Document matches filters"
ELLIPSIS = "..."


def build_snippet(
    text: str,
    query: str,
    match_start: int,
    match_end: int,
    context: int,
    start_tag: str = "<mark>",
    end_tag: str = "</mark>",
) -> str:
    """
    Cut a window around a match and highlight the query inside it.

    Args:
        text: Original (case-preserved) document text
        query: Normalized query that was matched
        match_start: Start of the first match in ``text``
        match_end: End of the first match in ``text``
        context: Characters kept on each side of the match
        start_tag: Marker inserted before each highlighted occurrence
        end_tag: Marker inserted after each highlighted occurrence

    Returns:
        Excerpt with every case-insensitive occurrence of ``query`` wrapped
        in the markers, and ``...`` on each edge that was clipped
    """
    start = max(0, match_start - context)
    end = min(len(text), match_end + context)
    window = text[start:end]

    highlighted = re.sub(
        re.escape(query),
        lambda match: f"{start_tag}{match.group(0)}{end_tag}",
        window,
        flags=re.IGNORECASE,
    )

    prefix = ELLIPSIS if start > 0 else ""
    suffix = ELLIPSIS if end < len(text) else ""
    return f"{prefix}{highlighted}{suffix}"


class Searcher:
    """
    Substring search over a live corpus with categorical filters.

    Each call scans the corpus from scratch; nothing is cached between
    queries. Results come back in corpus order, one hit per matching
    document.
    """

    def __init__(
        self,
        corpus: Sequence[Document],
        min_query_length: int = 2,
        snippet_context: int = 40,
        filtered_snippet_context: int = 60,
        highlight_start: str = "<mark>",
        highlight_end: str = "</mark>",
        category_strategy: str = "keyword",
    ):
        self.corpus = corpus
        self.min_query_length = min_query_length
        self.snippet_context = snippet_context
        self.filtered_snippet_context = filtered_snippet_context
        self.highlight_start = highlight_start
        self.highlight_end = highlight_end
        self.category_strategy = category_strategy

    @staticmethod
    def normalize_query(query: Optional[str]) -> str:
        """Lowercase the query; whitespace is part of the substring"""
        return (query or "").lower()

    def search(
        self,
        query: Optional[str],
        filters: Optional[SearchFilters] = None,
    ) -> SearchResult:
        """
        Run one query against the corpus.

        Args:
            query: Free text; matched case-insensitively as a substring
            filters: Optional entity/category filters, AND-combined

        Returns:
            SearchResult. ``NO_QUERY`` when the query is below the minimum
            length (or blank) and no filter is active; otherwise ``OK`` with
            zero or more hits.
        """
        normalized = self.normalize_query(query)
        filters = filters or SearchFilters()
        predicates = build_predicates(filters, self.category_strategy)
        blank = not normalized.strip()

        if not filters.active and (len(normalized) < self.min_query_length or blank):
            logger.debug("Query %r below minimum length, not searching", normalized)
            return SearchResult(status=SearchStatus.NO_QUERY)

        if blank:
            hits = self._filter_only(predicates)
        else:
            context = self.filtered_snippet_context if filters.active else self.snippet_context
            hits = self._text_search(normalized, predicates, context)

        logger.debug("Query %r with filters %s matched %d documents", normalized, filters, len(hits))
        return SearchResult(status=SearchStatus.OK, hits=tuple(hits))

    def _filter_only(self, predicates: List[DocumentPredicate]) -> List[SearchHit]:
        return [
            SearchHit(source_id=document.id, snippet=FILTER_ONLY_SNIPPET)
            for document in self.corpus
            if all(predicate(document) for predicate in predicates)
        ]

    def _text_search(
        self,
        query: str,
        predicates: List[DocumentPredicate],
        context: int,
    ) -> List[SearchHit]:
        # Match on the original text so offsets stay valid where lower() changes length
        pattern = re.compile(re.escape(query), re.IGNORECASE)
        hits: List[SearchHit] = []
        for document in self.corpus:
            text = document.text or ""
            match = pattern.search(text)
            if match is None:
                continue
            if not all(predicate(document) for predicate in predicates):
                continue

            hits.append(SearchHit(
                source_id=document.id,
                snippet=build_snippet(
                    text,
                    query,
                    match.start(),
                    match.end(),
                    context,
                    self.highlight_start,
                    self.highlight_end,
                ),
            ))
        return hits


def search(
    corpus: Sequence[Document],
    query: Optional[str],
    filters: Optional[SearchFilters] = None,
    **settings,
) -> SearchResult:
    """Run a single query; ``settings`` are passed to :class:`Searcher`"""
    return Searcher(corpus, **settings).search(query, filters)
