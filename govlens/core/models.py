"""Data models for corpus analysis and search."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Tuple


class DocumentCategory(str, Enum):
    """Coarse document type assigned by heuristic."""

    ACTS_AND_RULES = "ActsAndRules"
    REPORTS = "Reports"
    NOTICES_AND_OTHERS = "NoticesAndOthers"

    @classmethod
    def parse(cls, value: str) -> "DocumentCategory":
        """Resolve a category from its value, member name or short alias (case-insensitive)."""
        needle = value.strip().lower()
        for category in cls:
            if needle in (category.value.lower(), category.name.lower()):
                return category
        if needle in _CATEGORY_ALIASES:
            return cls(_CATEGORY_ALIASES[needle])
        raise ValueError(
            f"Unknown category '{value}'. "
            f"Expected one of: {', '.join(c.value for c in cls)}"
        )


_CATEGORY_ALIASES = {
    'act': "ActsAndRules",
    'acts': "ActsAndRules",
    'report': "Reports",
    'reports': "Reports",
    'notice': "NoticesAndOthers",
    'notices': "NoticesAndOthers",
    'other': "NoticesAndOthers",
}


class SearchStatus(str, Enum):
    NO_QUERY = "no_query"
    OK = "ok"


def _render_table(table: Any) -> str:
    """Flatten one raw table extraction into display text."""
    if table is None:
        return ""
    if isinstance(table, str):
        return table
    if isinstance(table, (list, tuple)):
        lines = []
        for row in table:
            if isinstance(row, (list, tuple)):
                lines.append(" | ".join("" if cell is None else str(cell) for cell in row))
            else:
                lines.append(str(row))
        return "\n".join(lines)
    return str(table)


@dataclass(frozen=True)
class Document:
    """A single extracted document as handed over by the corpus loader."""

    id: str
    text: str = ""
    text_length: int = 0
    tables: Tuple[str, ...] = ()

    @classmethod
    def from_record(cls, record: Mapping[str, Any], default_id: Optional[str] = None) -> "Document":
        """
        Build a document from a raw extraction record.

        Missing text becomes an empty string and missing tables an empty
        sequence; neither is reported as an error.

        Args:
            record: Mapping with ``id``/``fileName``, ``text``, ``textLength``
                and ``tables`` keys (all optional except an identifier)
            default_id: Identifier used when the record carries none

        Returns:
            Document instance
        """
        doc_id = record.get('id') or record.get('fileName') or record.get('file_name') or default_id
        if doc_id is None:
            raise ValueError("Document record has no 'id' or 'fileName'")

        text = record.get('text') or ""
        if not isinstance(text, str):
            text = str(text)

        text_length = record.get('textLength', record.get('text_length'))
        if text_length is None:
            text_length = len(text)

        raw_tables = record.get('tables') or []
        tables = tuple(_render_table(table) for table in raw_tables)

        return cls(
            id=str(doc_id),
            text=text,
            text_length=max(0, int(text_length)),
            tables=tables,
        )


@dataclass(frozen=True)
class EntityCount:
    name: str
    count: int

    def to_dict(self) -> Dict[str, Any]:
        return {'name': self.name, 'count': self.count}


@dataclass(frozen=True)
class ExtractedMentions:
    """Raw (not yet deduplicated) pattern matches, in corpus order."""

    ministries: Tuple[str, ...] = ()
    departments: Tuple[str, ...] = ()
    acts: Tuple[str, ...] = ()


@dataclass(frozen=True)
class TableEntry:
    source_id: str
    local_index: int  # 1-based, restarts for every document
    content: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            'source_id': self.source_id,
            'local_index': self.local_index,
            'content': self.content,
        }


@dataclass(frozen=True)
class SearchFilters:
    """Categorical filters, AND-combined with each other and the text query."""

    entity: Optional[str] = None
    category: Optional[DocumentCategory] = None

    @property
    def active(self) -> bool:
        return bool(self.entity) or self.category is not None


@dataclass(frozen=True)
class SearchHit:
    source_id: str
    snippet: str

    def to_dict(self) -> Dict[str, Any]:
        return {'source_id': self.source_id, 'snippet': self.snippet}


@dataclass(frozen=True)
class SearchResult:
    """
    Outcome of one query.

    ``NO_QUERY`` means the query was too short to run and no filter was
    active; it always carries zero hits. ``OK`` with zero hits means the
    corpus was scanned and nothing matched.
    """

    status: SearchStatus
    hits: Tuple[SearchHit, ...] = ()

    @property
    def is_no_query(self) -> bool:
        return self.status is SearchStatus.NO_QUERY

    def __len__(self) -> int:
        return len(self.hits)

    def __iter__(self):
        return iter(self.hits)


@dataclass(frozen=True)
class CategoryCount:
    category: DocumentCategory
    count: int


@dataclass(frozen=True)
class DocumentSize:
    source_id: str
    text_length: int


@dataclass(frozen=True)
class DocumentPreview:
    source_id: str
    text: str
    truncated: bool


@dataclass(frozen=True)
class CorpusStats:
    document_count: int = 0
    total_characters: int = 0
    estimated_words: int = 0
    unique_acts: int = 0
    table_count: int = 0


@dataclass(frozen=True)
class AnalysisSnapshot:
    """Corpus-level analysis computed once after load."""

    ministries: Tuple[EntityCount, ...] = ()
    departments: Tuple[EntityCount, ...] = ()
    acts: Tuple[EntityCount, ...] = ()
    words: Tuple[EntityCount, ...] = ()
    tables: Tuple[TableEntry, ...] = ()
    categories: Tuple[Tuple[str, DocumentCategory], ...] = ()
    category_counts: Tuple[CategoryCount, ...] = ()
    document_sizes: Tuple[DocumentSize, ...] = ()
    stats: CorpusStats = field(default_factory=CorpusStats)

    def entities(self, kind: str) -> Tuple[EntityCount, ...]:
        """Entity list by kind name (ministries, departments, acts)."""
        if kind not in ('ministries', 'departments', 'acts'):
            raise KeyError(kind)
        return getattr(self, kind)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'ministries': [e.to_dict() for e in self.ministries],
            'departments': [e.to_dict() for e in self.departments],
            'acts': [e.to_dict() for e in self.acts],
            'words': [w.to_dict() for w in self.words],
            'tables': [t.to_dict() for t in self.tables],
            'categories': [
                {'source_id': source_id, 'category': category.value}
                for source_id, category in self.categories
            ],
            'category_counts': [
                {'category': c.category.value, 'count': c.count}
                for c in self.category_counts
            ],
            'document_sizes': [
                {'source_id': s.source_id, 'text_length': s.text_length}
                for s in self.document_sizes
            ],
            'stats': {
                'document_count': self.stats.document_count,
                'total_characters': self.stats.total_characters,
                'estimated_words': self.stats.estimated_words,
                'unique_acts': self.stats.unique_acts,
                'table_count': self.stats.table_count,
            },
        }
