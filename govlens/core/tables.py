# govlens/core/tables.py

from typing import List, Sequence

from .models import Document, TableEntry


def collect_tables(corpus: Sequence[Document]) -> List[TableEntry]:
    """
    Flatten per-document tables into one corpus-wide listing.

    Order is corpus order, then each document's own table order. The
    ``local_index`` is the 1-based position within the source document and
    restarts for every document.
    """
    entries: List[TableEntry] = []
    for document in corpus:
        for position, content in enumerate(document.tables or (), start=1):
            entries.append(TableEntry(
                source_id=document.id,
                local_index=position,
                content=content,
            ))
    return entries
