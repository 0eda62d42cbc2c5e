"""
Tests for configuration loading.
"""

import pytest

from italian_holidays.config.manager import ConfigManager
from italian_holidays.data.schemas import Config, DateFormat


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Remove any ITALIAN_HOLIDAYS_* variables from the environment."""
    for env_var in ConfigManager.ENV_MAPPINGS:
        monkeypatch.delenv(env_var, raising=False)


class TestConfigManager:
    """Tests for ConfigManager."""

    def test_missing_file_uses_defaults(self, tmp_path):
        cfg = ConfigManager(str(tmp_path / "missing.yaml")).load_config()

        assert cfg.holiday_language == "it"
        assert cfg.date_format == DateFormat.ITALIAN
        assert cfg.api_port == 8000

    def test_default_settings_file(self):
        cfg = ConfigManager().load_config()
        assert cfg.output_directory == "results"

    def test_nested_yaml(self, tmp_path):
        path = tmp_path / "settings.yaml"
        path.write_text(
            "holidays:\n"
            "  language: en\n"
            "output:\n"
            "  format: csv\n"
            "  directory: out\n"
            "  date_format: iso\n"
            "api:\n"
            "  port: 9000\n",
            encoding="utf-8",
        )

        cfg = ConfigManager(str(path)).load_config()

        assert cfg.holiday_language == "en"
        assert cfg.output_format == "csv"
        assert cfg.output_directory == "out"
        assert cfg.date_format == DateFormat.ISO
        assert cfg.api_port == 9000

    def test_env_overrides(self, tmp_path, monkeypatch):
        monkeypatch.setenv("ITALIAN_HOLIDAYS_LANGUAGE", "en")
        monkeypatch.setenv("ITALIAN_HOLIDAYS_API_PORT", "8123")
        monkeypatch.setenv("ITALIAN_HOLIDAYS_DATE_FORMAT", "italian_short")

        cfg = ConfigManager(str(tmp_path / "missing.yaml")).load_config()

        assert cfg.holiday_language == "en"
        assert cfg.api_port == 8123
        assert cfg.date_format == DateFormat.ITALIAN_SHORT

    def test_invalid_env_value_is_skipped(self, tmp_path, monkeypatch):
        monkeypatch.setenv("ITALIAN_HOLIDAYS_API_PORT", "not-a-port")

        cfg = ConfigManager(str(tmp_path / "missing.yaml")).load_config()

        assert cfg.api_port == 8000

    def test_invalid_value_raises(self, tmp_path):
        path = tmp_path / "settings.yaml"
        path.write_text("holidays:\n  language: fr\n", encoding="utf-8")

        with pytest.raises(ValueError, match="Invalid configuration"):
            ConfigManager(str(path)).load_config()

    def test_malformed_yaml_raises(self, tmp_path):
        path = tmp_path / "settings.yaml"
        path.write_text("holidays: [unclosed\n", encoding="utf-8")

        with pytest.raises(ValueError, match="Error parsing YAML"):
            ConfigManager(str(path)).load_config()

    def test_save_and_reload(self, tmp_path):
        path = tmp_path / "nested" / "settings.yaml"
        original = Config(holiday_language="en", date_format=DateFormat.ISO, api_port=9100)

        manager = ConfigManager(str(path))
        manager.save_config(original)

        assert manager.load_config() == original
