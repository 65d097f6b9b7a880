# govlens/server/models.py

from pydantic import BaseModel, Field, field_validator
from typing import Optional, List


# Request Models
class SearchRequest(BaseModel):
    query: str = Field("", description="Free-text query (case-insensitive substring)")
    entity_filter: Optional[str] = Field(None, description="Only documents whose text contains this exact name")
    category_filter: Optional[str] = Field(
        None,
        description="Only documents of this type: ActsAndRules, Reports, NoticesAndOthers (or act, report, notice)"
    )

    @field_validator('query', mode='before')
    @classmethod
    def default_query(cls, value):
        return "" if value is None else value


class ReloadRequest(BaseModel):
    corpus: Optional[str] = Field(None, description="Corpus path or URL; defaults to the current one")


# Response Models
class EntityCountItem(BaseModel):
    name: str
    count: int


class TableItem(BaseModel):
    source_id: str
    local_index: int
    content: str


class DocumentCategoryItem(BaseModel):
    source_id: str
    category: str


class CategoryCountItem(BaseModel):
    category: str
    count: int


class DocumentSizeItem(BaseModel):
    source_id: str
    text_length: int


class StatsResponse(BaseModel):
    document_count: int
    total_characters: int
    estimated_words: int
    unique_acts: int
    table_count: int


class AnalysisResponse(BaseModel):
    ministries: List[EntityCountItem]
    departments: List[EntityCountItem]
    acts: List[EntityCountItem]
    words: List[EntityCountItem]
    tables: List[TableItem]
    categories: List[DocumentCategoryItem]
    category_counts: List[CategoryCountItem]
    document_sizes: List[DocumentSizeItem]
    stats: StatsResponse


class EntityListResponse(BaseModel):
    kind: str
    entities: List[EntityCountItem]
    total: int


class WordListResponse(BaseModel):
    words: List[EntityCountItem]


class CategoryListResponse(BaseModel):
    categories: List[DocumentCategoryItem]
    counts: List[CategoryCountItem]


class SearchResultItem(BaseModel):
    source_id: str
    snippet: str


class SearchResponse(BaseModel):
    status: str  # "no_query" or "ok"
    query: str
    results: List[SearchResultItem]


class DocumentListItem(BaseModel):
    id: str
    text_length: int
    num_tables: int
    category: str


class ListDocumentsResponse(BaseModel):
    documents: List[DocumentListItem]


class TableListResponse(BaseModel):
    tables: List[TableItem]
    total: int


class DocumentPreviewResponse(BaseModel):
    id: str
    text: str
    truncated: bool


class StatusResponse(BaseModel):
    status: str
    corpus: Optional[str]
    num_documents: int


class ReloadResponse(BaseModel):
    status: str
    corpus: str
    num_documents: int
