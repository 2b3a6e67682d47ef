"""Tests for emiplan.core.config."""

import json
import os

import pytest
import yaml

from emiplan.core.config import Config, get_config, reset_config
from emiplan.core.exceptions import ConfigurationError


@pytest.fixture(autouse=True)
def _reset_singleton():
    """Reset config singleton between tests."""
    reset_config()
    yield
    reset_config()


class TestConfig:
    def test_defaults(self):
        config = Config()
        assert config.get("display.currency_symbol") == "₹"
        assert config.get("display.grouping") == "indian"
        assert config.get("logging.level") == "WARNING"
        assert config.get("defaults.start_date") is None

    def test_yaml_config_file(self, tmp_dir):
        config_path = os.path.join(tmp_dir, "config.yaml")
        with open(config_path, "w") as f:
            yaml.dump({"display": {"currency_symbol": "$", "grouping": "western"}}, f)

        config = Config(config_file=config_path)
        assert config.get("display.currency_symbol") == "$"
        assert config.get("display.grouping") == "western"
        # Untouched defaults survive the merge
        assert config.get("logging.level") == "WARNING"

    def test_json_config_file(self, tmp_dir):
        config_path = os.path.join(tmp_dir, "config.json")
        with open(config_path, "w") as f:
            json.dump({"logging": {"level": "DEBUG"}}, f)

        config = Config(config_file=config_path)
        assert config.get("logging.level") == "DEBUG"

    def test_missing_file_uses_defaults(self, tmp_dir):
        config = Config(config_file=os.path.join(tmp_dir, "nope.yaml"))
        assert config.get("display.grouping") == "indian"

    def test_env_overrides_file(self, tmp_dir, monkeypatch):
        config_path = os.path.join(tmp_dir, "config.yaml")
        with open(config_path, "w") as f:
            yaml.dump({"display": {"grouping": "indian"}}, f)

        monkeypatch.setenv("EMIPLAN_DISPLAY__GROUPING", "western")
        config = Config(config_file=config_path)
        assert config.get("display.grouping") == "western"

    def test_custom_env_prefix(self, monkeypatch):
        monkeypatch.setenv("MYAPP_LOGGING__LEVEL", "INFO")
        config = Config(env_prefix="MYAPP_")
        assert config.get("logging.level") == "INFO"

    def test_invalid_grouping(self, monkeypatch):
        monkeypatch.setenv("EMIPLAN_DISPLAY__GROUPING", "roman")
        with pytest.raises(ConfigurationError, match="grouping"):
            Config()

    def test_malformed_yaml(self, tmp_dir):
        config_path = os.path.join(tmp_dir, "config.yaml")
        with open(config_path, "w") as f:
            f.write("display: [unclosed\n")
        with pytest.raises(ConfigurationError):
            Config(config_file=config_path)

    def test_non_mapping_file(self, tmp_dir):
        config_path = os.path.join(tmp_dir, "config.yaml")
        with open(config_path, "w") as f:
            f.write("- just\n- a list\n")
        with pytest.raises(ConfigurationError):
            Config(config_file=config_path)

    def test_unsupported_extension(self, tmp_dir):
        config_path = os.path.join(tmp_dir, "config.toml")
        with open(config_path, "w") as f:
            f.write("x = 1\n")
        with pytest.raises(ConfigurationError, match="Unsupported"):
            Config(config_file=config_path)

    def test_extra_defaults(self):
        config = Config(defaults={"display": {"currency_symbol": "Rs. "}})
        assert config.get("display.currency_symbol") == "Rs. "

    def test_get_missing_key(self):
        config = Config()
        assert config.get("nonexistent.key") is None
        assert config.get("nonexistent.key", "fallback") == "fallback"

    def test_set(self):
        config = Config()
        config.set("defaults.start_date", "2025-01-01")
        assert config.get("defaults.start_date") == "2025-01-01"
        config.set("new.nested.key", 1)
        assert config.get("new.nested.key") == 1


class TestSingleton:
    def test_get_config_returns_same_instance(self):
        assert get_config() is get_config()

    def test_reset(self):
        first = get_config()
        reset_config()
        assert get_config() is not first
