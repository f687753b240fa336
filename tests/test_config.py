"""Tests for configuration loading."""

import logging
from pathlib import Path

from habitkit.config import DATA_DIR, Config, load_config


class TestLoadConfig:
    def test_missing_file_gives_defaults(self, tmp_path):
        config = load_config(tmp_path / "missing.conf")
        assert config == Config()

    def test_parses_values(self, tmp_path):
        path = tmp_path / "habitkit.conf"
        path.write_text(
            "# habitkit settings\n"
            "\n"
            'DATA_DIR="~/habits/data" # where JSON lives\n'
            "date_format = '%Y-%m-%d'\n"
            "SHOW_COMPLETED=no  # hide done items\n"
            "not a setting\n"
        )
        config = load_config(path)
        assert config.data_dir == "~/habits/data"
        assert config.date_format == "%Y-%m-%d"
        assert config.show_completed is False

    def test_invalid_bool_keeps_default(self, tmp_path, caplog):
        path = tmp_path / "habitkit.conf"
        path.write_text("SHOW_COMPLETED=sometimes\n")
        with caplog.at_level(logging.WARNING):
            config = load_config(path)
        assert config.show_completed is True
        assert "SHOW_COMPLETED" in caplog.text

    def test_unknown_keys_ignored(self, tmp_path):
        path = tmp_path / "habitkit.conf"
        path.write_text("THEME=dark\n")
        assert load_config(path) == Config()


class TestResolvedDataDir:
    def test_default(self):
        assert Config().resolved_data_dir() == DATA_DIR

    def test_expands_user(self):
        config = Config(data_dir="~/habits")
        assert config.resolved_data_dir() == Path.home() / "habits"
