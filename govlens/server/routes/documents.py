# govlens/server/routes/documents.py

from fastapi import APIRouter, Depends, HTTPException, Query
from typing import Optional

from ..models import (
    ListDocumentsResponse, DocumentListItem,
    TableListResponse, TableItem,
    DocumentPreviewResponse
)
from ..dependencies import get_corpus_context_with_corpus
from ...cli.context import CorpusContext
from ...core.analyzer import find_document, preview_document

router = APIRouter(prefix="/documents", tags=["documents"])


@router.get("", response_model=ListDocumentsResponse)
async def list_documents(corpus_context: CorpusContext = Depends(get_corpus_context_with_corpus)):
    """List documents in load order with their size, table count and type"""
    categories = dict(corpus_context.safe_snapshot.categories)
    return ListDocumentsResponse(
        documents=[
            DocumentListItem(
                id=doc.id,
                text_length=doc.text_length,
                num_tables=len(doc.tables),
                category=categories[doc.id].value,
            )
            for doc in corpus_context.safe_corpus
        ]
    )


@router.get("/tables", response_model=TableListResponse)
async def list_tables(corpus_context: CorpusContext = Depends(get_corpus_context_with_corpus)):
    """Every extracted table, numbered per document"""
    entries = corpus_context.safe_snapshot.tables
    return TableListResponse(
        tables=[TableItem(**entry.to_dict()) for entry in entries],
        total=len(entries),
    )


@router.get("/{doc_id}/preview", response_model=DocumentPreviewResponse)
async def preview(
    doc_id: str,
    max_chars: Optional[int] = Query(None, ge=1, description="Preview length in characters"),
    corpus_context: CorpusContext = Depends(get_corpus_context_with_corpus)
):
    """Leading part of a document's text"""
    document = find_document(corpus_context.safe_corpus, doc_id)
    if document is None:
        raise HTTPException(status_code=404, detail=f"Document not found: {doc_id}")

    limit = max_chars or corpus_context.config.get_analysis_config()['preview_chars']
    result = preview_document(document, limit)

    return DocumentPreviewResponse(
        id=result.source_id,
        text=result.text,
        truncated=result.truncated,
    )
