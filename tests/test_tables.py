from govlens.core.models import Document
from govlens.core.tables import collect_tables


def test_local_index_restarts_per_document() -> None:
    corpus = [
        Document(id="a.pdf", text="", tables=("t1", "t2")),
        Document(id="b.pdf", text="", tables=("t3",)),
    ]

    entries = collect_tables(corpus)

    assert [(e.source_id, e.local_index, e.content) for e in entries] == [
        ("a.pdf", 1, "t1"),
        ("a.pdf", 2, "t2"),
        ("b.pdf", 1, "t3"),
    ]


def test_documents_without_tables_are_skipped(sample_corpus) -> None:
    entries = collect_tables(sample_corpus)

    assert [(e.source_id, e.local_index) for e in entries] == [
        ("finance_notice.pdf", 1),
        ("finance_notice.pdf", 2),
        ("annual_report.pdf", 1),
    ]
    assert entries[2].content == "Item | Amount\nRoads | 12"


def test_empty_corpus() -> None:
    assert collect_tables([]) == []
