import json
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from govlens.server.app import app


@pytest.fixture
def client(corpus_file: Path):
    app.state.corpus_source = str(corpus_file)
    with TestClient(app) as test_client:
        yield test_client
    app.state.corpus_source = None


@pytest.fixture
def empty_client():
    app.state.corpus_source = None
    with TestClient(app) as test_client:
        yield test_client


def test_status(client: TestClient, corpus_file: Path) -> None:
    response = client.get("/admin/status")

    assert response.status_code == 200
    assert response.json() == {
        "status": "running",
        "corpus": str(corpus_file),
        "num_documents": 4,
    }


def test_root_status_redirects(client: TestClient) -> None:
    response = client.get("/status")

    assert response.status_code == 200
    assert response.json()["num_documents"] == 4


def test_full_analysis(client: TestClient) -> None:
    data = client.get("/analysis").json()

    assert data["ministries"][0] == {"name": "Ministry of Finance", "count": 2}
    assert data["acts"] == [{"name": "Companies Act, 2013", "count": 1}]
    assert data["stats"]["document_count"] == 4
    assert data["stats"]["table_count"] == 3
    assert len(data["document_sizes"]) == 4


def test_entities_by_kind_with_limit(client: TestClient) -> None:
    data = client.get("/analysis/entities/ministries", params={"limit": 1}).json()

    assert data == {
        "kind": "ministries",
        "entities": [{"name": "Ministry of Finance", "count": 2}],
        "total": 2,
    }


def test_unknown_entity_kind(client: TestClient) -> None:
    assert client.get("/analysis/entities/courts").status_code == 404


def test_invalid_limit(client: TestClient) -> None:
    assert client.get("/analysis/entities/acts", params={"limit": 0}).status_code == 422


def test_words_categories_and_stats(client: TestClient) -> None:
    words = client.get("/analysis/words").json()["words"]
    categories = client.get("/analysis/categories").json()
    stats = client.get("/analysis/stats").json()

    assert words[0] == {"name": "highways", "count": 3}
    assert categories["counts"] == [
        {"category": "ActsAndRules", "count": 1},
        {"category": "Reports", "count": 1},
        {"category": "NoticesAndOthers", "count": 2},
    ]
    assert categories["categories"][0] == {"source_id": "finance_notice.pdf", "category": "ActsAndRules"}
    assert stats["unique_acts"] == 1


def test_search_text(client: TestClient) -> None:
    data = client.post("/search", json={"query": "Finance"}).json()

    assert data["status"] == "ok"
    assert data["query"] == "Finance"
    assert [r["source_id"] for r in data["results"]] == ["finance_notice.pdf", "annual_report.pdf"]
    assert "<mark>Finance</mark>" in data["results"][0]["snippet"]


def test_search_short_query_is_no_query(client: TestClient) -> None:
    data = client.post("/search", json={"query": "a"}).json()

    assert data == {"status": "no_query", "query": "a", "results": []}


def test_search_without_matches(client: TestClient) -> None:
    data = client.post("/search", json={"query": "zzzz"}).json()

    assert data["status"] == "ok"
    assert data["results"] == []


def test_search_filter_only(client: TestClient) -> None:
    data = client.post("/search", json={
        "query": None,
        "entity_filter": "Department of Revenue",
    }).json()

    assert data["status"] == "ok"
    assert data["results"] == [
        {"source_id": "finance_notice.pdf", "snippet": "Document matches filters"},
    ]


def test_search_category_alias(client: TestClient) -> None:
    data = client.post("/search", json={"query": "", "category_filter": "notice"}).json()

    assert [r["source_id"] for r in data["results"]] == ["tender_notice.pdf"]


def test_search_bad_category(client: TestClient) -> None:
    response = client.post("/search", json={"query": "finance", "category_filter": "circular"})

    assert response.status_code == 400
    assert "Unknown category" in response.json()["detail"]


def test_list_documents(client: TestClient) -> None:
    documents = client.get("/documents").json()["documents"]

    assert documents[1] == {
        "id": "annual_report.pdf",
        "text_length": 170,
        "num_tables": 1,
        "category": "Reports",
    }
    assert [d["id"] for d in documents][-1] == "scanned_blank.pdf"


def test_list_tables(client: TestClient) -> None:
    data = client.get("/documents/tables").json()

    assert data["total"] == 3
    assert data["tables"][2] == {
        "source_id": "annual_report.pdf",
        "local_index": 1,
        "content": "Item | Amount\nRoads | 12",
    }


def test_preview(client: TestClient) -> None:
    data = client.get("/documents/annual_report.pdf/preview", params={"max_chars": 13}).json()

    assert data == {"id": "annual_report.pdf", "text": "Annual Report", "truncated": True}


def test_preview_missing_document(client: TestClient) -> None:
    assert client.get("/documents/missing.pdf/preview").status_code == 404


def test_reload_new_source(client: TestClient, tmp_path: Path) -> None:
    path = tmp_path / "single.json"
    path.write_text(json.dumps([{"fileName": "one.pdf", "text": "Ministry of Defence"}]))

    response = client.post("/admin/reload", json={"corpus": str(path)})

    assert response.status_code == 200
    assert response.json() == {"status": "success", "corpus": str(path), "num_documents": 1}
    assert client.get("/analysis/entities/ministries").json()["entities"] == [
        {"name": "Ministry of Defence", "count": 1},
    ]


def test_reload_missing_file_keeps_current_corpus(client: TestClient, tmp_path: Path) -> None:
    response = client.post("/admin/reload", json={"corpus": str(tmp_path / "gone.json")})

    assert response.status_code == 404
    assert client.get("/admin/status").json()["num_documents"] == 4


def test_reload_unsupported_source(client: TestClient, tmp_path: Path) -> None:
    response = client.post("/admin/reload", json={"corpus": str(tmp_path / "report.pdf")})

    assert response.status_code == 400


def test_no_corpus_returns_503(empty_client: TestClient) -> None:
    assert empty_client.get("/admin/status").json()["num_documents"] == 0
    assert empty_client.get("/analysis").status_code == 503
    assert empty_client.post("/search", json={"query": "finance"}).status_code == 503
    assert empty_client.post("/admin/reload", json={}).status_code == 400
