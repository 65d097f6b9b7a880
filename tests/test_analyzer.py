import pytest

from govlens.core.analyzer import (
    CHARS_PER_WORD,
    corpus_stats,
    find_document,
    preview_document,
    rank_entities,
    run_analysis,
)
from govlens.core.models import AnalysisSnapshot, Document, DocumentCategory, EntityCount, ExtractedMentions


def test_run_analysis_on_sample_corpus(sample_corpus) -> None:
    snapshot = run_analysis(sample_corpus)

    assert snapshot.ministries == (
        EntityCount("Ministry of Finance", 2),
        EntityCount("Ministry of Road Transport", 1),
    )
    assert snapshot.departments == (EntityCount("Department of Revenue", 1),)
    assert snapshot.acts == (EntityCount("Companies Act, 2013", 1),)
    assert snapshot.words[0] == EntityCount("highways", 3)
    assert [(t.source_id, t.local_index) for t in snapshot.tables] == [
        ("finance_notice.pdf", 1),
        ("finance_notice.pdf", 2),
        ("annual_report.pdf", 1),
    ]
    assert [category for _, category in snapshot.categories] == [
        DocumentCategory.ACTS_AND_RULES,
        DocumentCategory.REPORTS,
        DocumentCategory.NOTICES_AND_OTHERS,
        DocumentCategory.NOTICES_AND_OTHERS,
    ]
    assert [(c.category, c.count) for c in snapshot.category_counts] == [
        (DocumentCategory.ACTS_AND_RULES, 1),
        (DocumentCategory.REPORTS, 1),
        (DocumentCategory.NOTICES_AND_OTHERS, 2),
    ]
    assert [s.text_length for s in snapshot.document_sizes] == [83, 170, 87, 0]


def test_stats_on_sample_corpus(sample_corpus) -> None:
    stats = run_analysis(sample_corpus).stats
    total = sum(len(doc.text) for doc in sample_corpus)

    assert stats.document_count == 4
    assert stats.total_characters == total
    assert stats.estimated_words == total // CHARS_PER_WORD
    assert stats.unique_acts == 1
    assert stats.table_count == 3


def test_end_to_end_analysis(e2e_corpus) -> None:
    snapshot = run_analysis(e2e_corpus)

    assert snapshot.ministries == (EntityCount("Ministry of Finance", 1),)
    assert snapshot.departments == (EntityCount("Department of Revenue", 1),)
    assert snapshot.acts == (EntityCount("Companies Act, 2013", 1),)
    assert snapshot.categories == (("notice.pdf", DocumentCategory.ACTS_AND_RULES),)
    assert snapshot.tables == ()
    assert snapshot.stats.total_characters == 83
    assert snapshot.stats.estimated_words == 13


def test_analysis_is_deterministic(sample_corpus) -> None:
    assert run_analysis(sample_corpus) == run_analysis(sample_corpus)


def test_empty_corpus_gives_empty_snapshot() -> None:
    snapshot = run_analysis([])

    assert snapshot.ministries == ()
    assert snapshot.words == ()
    assert snapshot.tables == ()
    assert snapshot.stats.document_count == 0
    assert snapshot.stats.total_characters == 0
    assert all(c.count == 0 for c in snapshot.category_counts)


def test_top_words_limit(sample_corpus) -> None:
    snapshot = run_analysis(sample_corpus, top_words=2)

    assert [w.name for w in snapshot.words] == ["highways", "finance"]


def test_snapshot_to_dict(sample_corpus) -> None:
    data = run_analysis(sample_corpus).to_dict()

    assert data["ministries"][0] == {"name": "Ministry of Finance", "count": 2}
    assert data["categories"][1] == {"source_id": "annual_report.pdf", "category": "Reports"}
    assert data["category_counts"][2] == {"category": "NoticesAndOthers", "count": 2}
    assert data["tables"][2]["content"] == "Item | Amount\nRoads | 12"
    assert data["stats"]["table_count"] == 3


def test_entities_by_kind(sample_corpus) -> None:
    snapshot = run_analysis(sample_corpus)

    assert snapshot.entities("acts") == snapshot.acts
    with pytest.raises(KeyError):
        snapshot.entities("courts")


def test_corpus_stats_counts_tables_without_hint() -> None:
    corpus = [Document(id="a", text="abcdef", tables=("t1", "t2"))]

    stats = corpus_stats(corpus)

    assert stats.table_count == 2
    assert stats.estimated_words == 1
    assert stats.unique_acts == 0


def test_find_and_preview_document(sample_corpus) -> None:
    document = find_document(sample_corpus, "annual_report.pdf")

    preview = preview_document(document, max_chars=20)

    assert preview.source_id == "annual_report.pdf"
    assert preview.text == "Annual Report of the"
    assert preview.truncated
    assert find_document(sample_corpus, "missing.pdf") is None


def test_preview_short_document_is_not_truncated(sample_corpus) -> None:
    preview = preview_document(sample_corpus[0])

    assert preview.text == sample_corpus[0].text
    assert not preview.truncated


def test_snapshot_defaults() -> None:
    assert AnalysisSnapshot().stats.document_count == 0


def test_rank_entities_per_kind() -> None:
    mentions = ExtractedMentions(
        ministries=("Ministry of Finance", "Ministry of Defence", "Ministry of Finance"),
        acts=("Act", "Companies Act"),
    )

    ranked = rank_entities(mentions)

    assert ranked == {
        'ministries': [EntityCount("Ministry of Finance", 2), EntityCount("Ministry of Defence", 1)],
        'departments': [],
        'acts': [EntityCount("Companies Act", 1)],
    }
