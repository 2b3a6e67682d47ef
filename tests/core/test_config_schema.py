"""Tests for emiplan.core.config_schema and Config.validated()."""

import os
from datetime import date

import pytest
import yaml
from pydantic import ValidationError

from emiplan.core.config import Config, reset_config
from emiplan.core.config_schema import EmiPlanConfig
from emiplan.core.exceptions import ConfigurationError


@pytest.fixture(autouse=True)
def _reset_singleton():
    reset_config()
    yield
    reset_config()


class TestConfigSchema:
    def test_defaults_populate(self):
        cfg = EmiPlanConfig()
        assert cfg.display.currency_symbol == "₹"
        assert cfg.display.grouping == "indian"
        assert cfg.logging.level == "WARNING"
        assert cfg.logging.file is None
        assert cfg.defaults.start_date is None

    def test_valid_config(self):
        cfg = EmiPlanConfig.model_validate(
            {
                "display": {"currency_symbol": "$", "grouping": "western"},
                "logging": {"level": "debug", "file": "~/emiplan.log"},
                "defaults": {"start_date": "2025-04-01"},
            }
        )
        assert cfg.display.grouping == "western"
        assert cfg.logging.level == "DEBUG"
        assert cfg.logging.file == "~/emiplan.log"
        assert cfg.defaults.start_date == date(2025, 4, 1)

    def test_grouping_rejected(self):
        with pytest.raises(ValidationError, match="grouping"):
            EmiPlanConfig.model_validate({"display": {"grouping": "roman"}})

    def test_level_rejected(self):
        with pytest.raises(ValidationError, match="level"):
            EmiPlanConfig.model_validate({"logging": {"level": "chatty"}})

    def test_blank_log_file_is_none(self):
        cfg = EmiPlanConfig.model_validate({"logging": {"file": "  "}})
        assert cfg.logging.file is None

    def test_extra_keys_allowed_at_root(self):
        cfg = EmiPlanConfig.model_validate({"custom_section": {"key": "value"}})
        assert cfg.model_extra["custom_section"] == {"key": "value"}


class TestConfigValidated:
    def test_yaml_date_is_typed(self, tmp_dir):
        config_path = os.path.join(tmp_dir, "config.yaml")
        with open(config_path, "w") as f:
            f.write("defaults:\n  start_date: 2025-04-01\n")

        validated = Config(config_file=config_path).validated()
        assert isinstance(validated, EmiPlanConfig)
        assert validated.defaults.start_date == date(2025, 4, 1)

    def test_env_date_is_parsed(self, monkeypatch):
        monkeypatch.setenv("EMIPLAN_DEFAULTS__START_DATE", "2026-02-01")
        assert Config().validated().defaults.start_date == date(2026, 2, 1)

    def test_bad_date_raises_configuration_error(self, monkeypatch):
        monkeypatch.setenv("EMIPLAN_DEFAULTS__START_DATE", "next tuesday")
        with pytest.raises(ConfigurationError, match="defaults.start_date"):
            Config()

    def test_bad_level_raises_configuration_error(self, tmp_dir):
        config_path = os.path.join(tmp_dir, "config.yaml")
        with open(config_path, "w") as f:
            yaml.dump({"logging": {"level": "chatty"}}, f)

        with pytest.raises(ConfigurationError, match="logging.level"):
            Config(config_file=config_path)

    def test_set_is_checked_on_validated(self):
        config = Config()
        config.set("display.grouping", "roman")
        with pytest.raises(ConfigurationError, match="display.grouping"):
            config.validated()
