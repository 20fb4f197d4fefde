"""Tests for daybook.core.config."""

import json
import os

import pytest
import yaml

from daybook.core.config import Config
from daybook.core.exceptions import ConfigurationError


class TestConfig:
    def test_defaults(self):
        config = Config()
        assert config.get("journal.keyword") == "journal"
        assert config.get("notes.file_type") == "org"
        assert config.get("notes.components_order") == ["identifier", "signature", "title", "keywords"]
        assert config.get("logging.level") == "WARNING"

    def test_custom_env_prefix(self, monkeypatch):
        monkeypatch.setenv("MYAPP_JOURNAL__KEYWORD", "diary")
        config = Config(env_prefix="MYAPP_")
        assert config.get("journal.keyword") == "diary"

    def test_yaml_config_file(self, tmp_config_file, tmp_dir):
        config = Config(config_file=tmp_config_file)
        assert config.get("journal.title_format") == "day-date-month-year"
        assert config.get("notes.directory") == os.path.join(tmp_dir, "notes")

    def test_json_config_file(self, tmp_dir):
        config_path = os.path.join(tmp_dir, "config.json")
        with open(config_path, "w") as f:
            json.dump({"journal": {"keyword": ["journal", "work"]}}, f)

        config = Config(config_file=config_path)
        assert config.get("journal.keyword") == ["journal", "work"]
        # untouched keys keep their defaults
        assert config.get("journal.title_format") == "day-date-month-year-24h"

    def test_env_overrides_file(self, tmp_config_file, monkeypatch):
        monkeypatch.setenv("DAYBOOK_JOURNAL__KEYWORD", "diary")
        config = Config(config_file=tmp_config_file)
        assert config.get("journal.keyword") == "diary"

    def test_broken_yaml_raises(self, tmp_dir):
        config_path = os.path.join(tmp_dir, "config.yaml")
        with open(config_path, "w") as f:
            f.write("journal: [unclosed\n")
        with pytest.raises(ConfigurationError, match="Cannot parse"):
            Config(config_file=config_path)

    def test_non_mapping_file_raises(self, tmp_dir):
        config_path = os.path.join(tmp_dir, "config.yaml")
        with open(config_path, "w") as f:
            f.write("- journal\n- work\n")
        with pytest.raises(ConfigurationError, match="must hold a mapping"):
            Config(config_file=config_path)

    def test_missing_file_uses_defaults(self, tmp_dir):
        config = Config(config_file=os.path.join(tmp_dir, "nope.yaml"))
        assert config.get("journal.keyword") == "journal"

    def test_get_missing_key(self):
        config = Config()
        assert config.get("nonexistent.key") is None
        assert config.get("nonexistent.key", "fallback") == "fallback"

    def test_extra_defaults(self):
        config = Config(defaults={"journal": {"keyword": "log"}})
        assert config.get("journal.keyword") == "log"
        assert config.get("journal.title_format") == "day-date-month-year-24h"

    def test_file_written_by_yaml_dump(self, tmp_dir):
        config_path = os.path.join(tmp_dir, "config.yml")
        with open(config_path, "w") as f:
            yaml.dump({"notes": {"file_type": "text"}}, f)
        config = Config(config_file=config_path)
        assert config.get("notes.file_type") == "text"
