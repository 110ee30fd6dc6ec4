"""
Tests for ConfigManager: default file creation, merging and persistence.
"""

import json

from categorydesk.managers import ConfigManager, DEFAULT_CONFIG


def test_missing_file_is_created_with_defaults(tmp_path):
    config = ConfigManager(tmp_path)

    loaded = config.load_config()

    assert loaded == DEFAULT_CONFIG
    assert json.loads((tmp_path / "config.json").read_text()) == DEFAULT_CONFIG


def test_existing_file_is_merged_with_defaults(tmp_path):
    (tmp_path / "config.json").write_text(json.dumps({"server_port": 9000}))
    config = ConfigManager(tmp_path)

    config.load_config()

    assert config.get("server_port") == 9000
    assert config.get("server_url") == "http://localhost"
    assert config.get("request_timeout") is None


def test_set_persists_immediately(tmp_path):
    config = ConfigManager(tmp_path)
    config.load_config()

    config.set("log_level", "DEBUG")

    reloaded = ConfigManager(tmp_path)
    reloaded.load_config()
    assert reloaded.get("log_level") == "DEBUG"


def test_get_falls_back_to_default_argument(tmp_path):
    config = ConfigManager(tmp_path)
    assert config.get("unknown", "fallback") == "fallback"


def test_update_writes_several_keys(tmp_path):
    config = ConfigManager(tmp_path)
    config.load_config()

    config.update({"server_url": "https://categories.example.org", "server_port": 443})

    saved = json.loads((tmp_path / "config.json").read_text())
    assert saved["server_url"] == "https://categories.example.org"
    assert saved["server_port"] == 443
