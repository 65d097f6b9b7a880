# govlens/server/routes/analysis.py

from fastapi import APIRouter, Depends, HTTPException, Query
from typing import Optional

from ..models import (
    AnalysisResponse, EntityListResponse, EntityCountItem,
    WordListResponse, CategoryListResponse, DocumentCategoryItem,
    CategoryCountItem, StatsResponse
)
from ..dependencies import get_corpus_context_with_corpus
from ...cli.context import CorpusContext

router = APIRouter(prefix="/analysis", tags=["analysis"])

ENTITY_KINDS = ('ministries', 'departments', 'acts')


@router.get("", response_model=AnalysisResponse)
async def analysis(corpus_context: CorpusContext = Depends(get_corpus_context_with_corpus)):
    """Full analysis snapshot computed when the corpus was loaded"""
    return AnalysisResponse(**corpus_context.safe_snapshot.to_dict())


@router.get("/entities/{kind}", response_model=EntityListResponse)
async def entities(
    kind: str,
    limit: Optional[int] = Query(None, ge=1, description="Return only the top N entries"),
    corpus_context: CorpusContext = Depends(get_corpus_context_with_corpus)
):
    """
    Ranked entity mentions of one kind.

    - **kind**: ministries, departments or acts
    - **limit**: Top N entries (all when omitted)
    """
    if kind not in ENTITY_KINDS:
        raise HTTPException(
            status_code=404,
            detail=f"Unknown entity kind '{kind}'. Available: {', '.join(ENTITY_KINDS)}"
        )

    ranked = corpus_context.safe_snapshot.entities(kind)
    selected = ranked[:limit] if limit else ranked

    return EntityListResponse(
        kind=kind,
        entities=[EntityCountItem(name=e.name, count=e.count) for e in selected],
        total=len(ranked),
    )


@router.get("/words", response_model=WordListResponse)
async def words(corpus_context: CorpusContext = Depends(get_corpus_context_with_corpus)):
    """Most frequent words across the corpus"""
    return WordListResponse(
        words=[EntityCountItem(name=w.name, count=w.count) for w in corpus_context.safe_snapshot.words]
    )


@router.get("/categories", response_model=CategoryListResponse)
async def categories(corpus_context: CorpusContext = Depends(get_corpus_context_with_corpus)):
    """Document type per document and totals per type"""
    snapshot = corpus_context.safe_snapshot
    return CategoryListResponse(
        categories=[
            DocumentCategoryItem(source_id=source_id, category=category.value)
            for source_id, category in snapshot.categories
        ],
        counts=[
            CategoryCountItem(category=c.category.value, count=c.count)
            for c in snapshot.category_counts
        ],
    )


@router.get("/stats", response_model=StatsResponse)
async def stats(corpus_context: CorpusContext = Depends(get_corpus_context_with_corpus)):
    """Headline corpus numbers"""
    return StatsResponse(**corpus_context.safe_snapshot.to_dict()['stats'])
