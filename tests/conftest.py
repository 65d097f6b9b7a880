import json
from pathlib import Path

import pytest

from govlens.core.models import Document


SAMPLE_RECORDS = [
    {
        "fileName": "finance_notice.pdf",
        "text": (
            "The Ministry of Finance issued the Companies Act, 2013 "
            "under Department of Revenue."
        ),
        "textLength": 83,
        "tables": ["Year | Revenue\n2013 | 100", "Year | Expenditure\n2013 | 90"],
    },
    {
        "fileName": "annual_report.pdf",
        "text": (
            "Annual Report of the Ministry of Road Transport and Highways. "
            "The Ministry of Finance reviewed allocations. Highways budget "
            "allocations increased; highways maintenance continued."
        ),
        "textLength": 170,
        "tables": [[["Item", "Amount"], ["Roads", 12]]],
    },
    {
        "fileName": "tender_notice.pdf",
        "text": "Public notice inviting contractors to tender for bridge construction and bridge repairs.",
        "textLength": 87,
    },
    {
        "fileName": "scanned_blank.pdf",
        "text": None,
        "textLength": 0,
        "tables": [],
    },
]


@pytest.fixture(autouse=True)
def govlens_home(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    home = tmp_path / "govlens-home"
    monkeypatch.setenv("GOVLENS_HOME", str(home))
    return home


@pytest.fixture
def sample_records() -> list:
    return json.loads(json.dumps(SAMPLE_RECORDS))


@pytest.fixture
def sample_corpus(sample_records) -> list:
    return [Document.from_record(record) for record in sample_records]


@pytest.fixture
def corpus_file(tmp_path: Path, sample_records) -> Path:
    path = tmp_path / "extracted_data.json"
    path.write_text(json.dumps(sample_records), encoding="utf-8")
    return path


@pytest.fixture
def e2e_corpus() -> list:
    return [
        Document(
            id="notice.pdf",
            text="The Ministry of Finance issued the Companies Act, 2013 under Department of Revenue.",
            text_length=83,
        )
    ]
