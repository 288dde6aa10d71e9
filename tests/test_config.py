"""Tests for configuration loading and saving."""

import json

from minutescribe.core.config import AppConfig, ConfigManager


def test_defaults_when_missing(tmp_path):
    """A missing config file gives the defaults."""
    config = ConfigManager(tmp_path / "config.json").config
    assert config == AppConfig()
    assert config.store_key == "SavedMinutes"
    assert config.title_max_words == 10
    assert config.summary_max_chars == 100
    assert config.entity_model == "en_core_web_sm"


def test_corrupt_file_falls_back_to_defaults(tmp_path):
    """Unreadable config falls back to defaults."""
    path = tmp_path / "config.json"
    path.write_text("{oops", encoding="utf-8")
    assert ConfigManager(path).config == AppConfig()


def test_save_and_reload(tmp_path):
    """Saved settings survive a reload."""
    path = tmp_path / "nested" / "config.json"
    manager = ConfigManager(path)
    manager.set_data_directory(str(tmp_path / "data"))

    assert json.loads(path.read_text(encoding="utf-8"))["data_directory"] == str(tmp_path / "data")
    reloaded = ConfigManager(path)
    assert reloaded.get_data_directory() == tmp_path / "data"


def test_loads_custom_values(tmp_path):
    """Values from the file override defaults."""
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"title_max_words": 5, "log_level": "DEBUG"}), encoding="utf-8")

    config = ConfigManager(path).config
    assert config.title_max_words == 5
    assert config.log_level == "DEBUG"
