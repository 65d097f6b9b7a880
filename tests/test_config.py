from pathlib import Path

import pytest
import yaml

from govlens.config import Config


def test_config_dir_from_environment(govlens_home: Path) -> None:
    config = Config()

    assert config.config_dir == govlens_home
    assert config.logs_dir.is_dir()


def test_explicit_config_dir(tmp_path: Path) -> None:
    config = Config(tmp_path / "custom")

    assert config.global_config_path == tmp_path / "custom" / "config.yaml"


def test_defaults_without_config_file() -> None:
    config = Config()

    assert config.get_active_corpus() is None
    assert config.get_analysis_config() == Config.DEFAULT_ANALYSIS_CONFIG
    assert config.get_search_config()["snippet_context"] == 40
    assert config.get_search_config()["category_strategy"] == "keyword"


def test_active_corpus_round_trip() -> None:
    config = Config()
    config.set_active_corpus("/data/extracted_data.json")

    assert Config().get_active_corpus() == "/data/extracted_data.json"

    config.clear_active_corpus()
    assert Config().get_active_corpus() is None


def test_sections_overlay_known_keys(govlens_home: Path) -> None:
    config = Config()
    config.global_config_path.write_text(yaml.safe_dump({
        "search": {"snippet_context": 25, "unknown": 1, "highlight_start": None},
        "analysis": {"top_words": 10},
    }))

    search = config.get_search_config()
    assert search["snippet_context"] == 25
    assert search["highlight_start"] == "<mark>"
    assert "unknown" not in search
    assert config.get_analysis_config()["top_words"] == 10


def test_update_section() -> None:
    config = Config()
    config.update_section("search", {"category_strategy": "classifier"})

    assert config.get_search_config()["category_strategy"] == "classifier"
    with pytest.raises(ValueError):
        config.update_section("server", {"port": 1})
