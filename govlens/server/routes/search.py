# govlens/server/routes/search.py

from fastapi import APIRouter, Depends, HTTPException

from ..models import SearchRequest, SearchResponse, SearchResultItem
from ..dependencies import get_corpus_context_with_corpus
from ...cli.context import CorpusContext
from ...core.models import DocumentCategory, SearchFilters
from ...utils.logging import get_logger

logger = get_logger('server.search')

router = APIRouter(prefix="/search", tags=["search"])


@router.post("", response_model=SearchResponse)
async def search(
    request: SearchRequest,
    corpus_context: CorpusContext = Depends(get_corpus_context_with_corpus)
):
    """
    Search the live corpus by substring and filters.

    - **query**: Case-insensitive text; may be empty when a filter is given
    - **entity_filter**: Exact, case-sensitive name the document must contain
    - **category_filter**: Document type the document must match

    A `no_query` status means the query was too short and no filter was
    set; `ok` with no results means nothing matched.
    """
    category = None
    if request.category_filter:
        try:
            category = DocumentCategory.parse(request.category_filter)
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e))

    try:
        result = corpus_context.safe_searcher.search(
            request.query,
            SearchFilters(entity=request.entity_filter, category=category),
        )
    except Exception as e:
        logger.error(f"Search failed: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))

    return SearchResponse(
        status=result.status.value,
        query=request.query,
        results=[
            SearchResultItem(source_id=hit.source_id, snippet=hit.snippet)
            for hit in result.hits
        ],
    )
