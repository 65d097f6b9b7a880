from govlens.core.models import Document
from govlens.core.tokenizer import STOPWORDS, tokenize, word_frequency


def test_tokenize_lowercases_and_drops_short_words() -> None:
    assert tokenize("Bridge TENDER for the Road") == ["bridge", "tender"]


def test_tokenize_removes_domain_stopwords() -> None:
    text = "The Government notified Section 12 of the Finance Rules"
    assert tokenize(text) == ["notified", "finance"]


def test_tokens_are_maximal_letter_runs() -> None:
    assert tokenize("abc12defgh foo-barbaz under_score") == ["defgh", "barbaz", "score"]


def test_tokens_keep_accented_and_non_latin_letters() -> None:
    assert tokenize("Municipalité RÉGIME") == ["municipalité", "régime"]
    assert tokenize("Министерство финансов") == ["министерство", "финансов"]


def test_stopwords_are_all_tokenizable_length() -> None:
    assert STOPWORDS
    assert all(len(word) >= 5 for word in STOPWORDS)
    assert {"section", "government", "ministry", "department"} <= STOPWORDS


def test_tokenize_empty_text() -> None:
    assert tokenize("") == []
    assert tokenize(None) == []


def test_word_frequency_ranks_corpus(sample_corpus) -> None:
    words = word_frequency(sample_corpus)

    assert [(w.name, w.count) for w in words[:4]] == [
        ("highways", 3),
        ("finance", 2),
        ("allocations", 2),
        ("bridge", 2),
    ]
    assert words[4].name == "issued"
    assert all(w.name not in STOPWORDS for w in words)


def test_word_frequency_keeps_top_fifty() -> None:
    vocabulary = [f"token{chr(97 + i // 26)}{chr(97 + i % 26)}" for i in range(60)]
    text = " ".join(w.replace("token", "words") for w in vocabulary)
    corpus = [Document(id="many", text=text)]

    words = word_frequency(corpus)

    assert len(words) == 50
    assert words[0].name == "wordsaa"


def test_word_frequency_empty_corpus() -> None:
    assert word_frequency([]) == []
