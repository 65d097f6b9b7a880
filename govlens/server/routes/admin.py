# govlens/server/routes/admin.py
from fastapi import APIRouter, Depends, HTTPException

from ..models import StatusResponse, ReloadRequest, ReloadResponse
from ..dependencies import get_corpus_context
from ..lifecycle import lifecycle
from ...cli.context import CorpusContext
from ...utils.logging import get_logger

logger = get_logger('server.admin')

router = APIRouter(prefix="/admin", tags=["admin"])


@router.get("/status", response_model=StatusResponse)
async def status(corpus_context: CorpusContext = Depends(get_corpus_context)):
    """
    Get current server status.

    Returns the corpus source and the number of loaded documents.
    """
    # No corpus: report zeros instead of erroring
    if corpus_context.corpus is None:
        return StatusResponse(
            status="running",
            corpus=corpus_context.get_active_corpus_source(),
            num_documents=0,
        )

    return StatusResponse(
        status="running",
        corpus=corpus_context.source,
        num_documents=len(corpus_context.corpus),
    )


@router.post("/reload", response_model=ReloadResponse)
async def reload(
    request: ReloadRequest,
    corpus_context: CorpusContext = Depends(get_corpus_context)
):
    """
    Reload the corpus and recompute the analysis snapshot.

    - **corpus**: Path or URL to load; defaults to the current corpus
    """
    try:
        num_documents = lifecycle.reload(request.corpus)
    except FileNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"Corpus reload failed: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))

    return ReloadResponse(
        status="success",
        corpus=lifecycle.corpus_source,
        num_documents=num_documents,
    )
