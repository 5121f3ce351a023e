"""
Tests for configuration loading.
"""

import pytest

from nth_workday.config.manager import ConfigManager
from nth_workday.data.schemas import DEFAULT_WORKING_WEEK, Config, Weekday


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Remove NTH_WORKDAY_* variables from the environment."""
    for var in (
        "NTH_WORKDAY_WORKING_WEEKDAYS",
        "NTH_WORKDAY_EXCLUDED_DAYS",
        "NTH_WORKDAY_OUTPUT_FORMAT",
        "NTH_WORKDAY_OUTPUT_DIRECTORY",
        "NTH_WORKDAY_API_HOST",
        "NTH_WORKDAY_API_PORT",
        "NTH_WORKDAY_LOG_LEVEL",
    ):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def config_file(tmp_path):
    """Write a settings file and return its path."""
    path = tmp_path / "settings.yaml"
    path.write_text(
        "calendar:\n"
        "  working_weekdays: [mon-thu]\n"
        "  excluded_days: [1, 25]\n"
        "output:\n"
        "  format: json\n"
        "  directory: out\n"
        "api:\n"
        "  port: 9000\n"
        "logging:\n"
        "  level: debug\n",
        encoding="utf-8",
    )
    return str(path)


class TestConfigManager:
    """Tests for ConfigManager."""

    def test_default_settings_file(self):
        config = ConfigManager().load_config()

        assert set(config.working_weekdays) == DEFAULT_WORKING_WEEK
        assert config.excluded_days is None
        assert config.output_format == "console"

    def test_missing_file_uses_defaults(self, tmp_path):
        config = ConfigManager(str(tmp_path / "missing.yaml")).load_config()

        assert config == Config()

    def test_load_yaml(self, config_file):
        config = ConfigManager(config_file).load_config()

        assert config.working_weekdays == [
            Weekday.MONDAY, Weekday.TUESDAY, Weekday.WEDNESDAY, Weekday.THURSDAY,
        ]
        assert config.excluded_days == [1, 25]
        assert config.output_format == "json"
        assert config.output_directory == "out"
        assert config.api_port == 9000
        assert config.log_level == "DEBUG"

    def test_env_overrides(self, config_file, monkeypatch):
        monkeypatch.setenv("NTH_WORKDAY_WORKING_WEEKDAYS", "sat,sun")
        monkeypatch.setenv("NTH_WORKDAY_EXCLUDED_DAYS", "6")
        monkeypatch.setenv("NTH_WORKDAY_API_PORT", "8123")

        config = ConfigManager(config_file).load_config()

        assert config.working_weekdays == [Weekday.SUNDAY, Weekday.SATURDAY]
        assert config.excluded_days == [6]
        assert config.api_port == 8123

    def test_invalid_env_port_is_ignored(self, config_file, monkeypatch):
        monkeypatch.setenv("NTH_WORKDAY_API_PORT", "not-a-port")

        config = ConfigManager(config_file).load_config()

        assert config.api_port == 9000

    def test_invalid_weekday(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("calendar:\n  working_weekdays: [funday]\n", encoding="utf-8")

        with pytest.raises(ValueError, match="Invalid configuration"):
            ConfigManager(str(path)).load_config()

    def test_invalid_output_format(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("output:\n  format: xml\n", encoding="utf-8")

        with pytest.raises(ValueError, match="Invalid configuration"):
            ConfigManager(str(path)).load_config()

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "broken.yaml"
        path.write_text("calendar: [unclosed\n", encoding="utf-8")

        with pytest.raises(ValueError, match="Error parsing YAML"):
            ConfigManager(str(path)).load_config()

    def test_save_and_reload(self, config_file, tmp_path):
        manager = ConfigManager(config_file)
        config = manager.load_config()

        saved_path = str(tmp_path / "saved" / "settings.yaml")
        manager.save_config(config, saved_path)

        assert ConfigManager(saved_path).load_config() == config


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
